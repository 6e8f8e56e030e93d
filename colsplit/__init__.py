"""
colsplit - Split one text column of a table into several columns.

Strings are cut either at fixed character positions or on a regular
expression. Pattern splits are reconciled to exactly len(into) pieces per
row; rows with too many or too few pieces are resolved by the `extra` and
`fill` policies and reported as SplitWarning.

Example usage:

    import pandas as pd
    from colsplit import separate

    df = pd.DataFrame({"x": ["x: 123", "y: error: 7"]})
    separate(df, "x", ["key", "value"], sep=": ", extra="merge")

Working on plain sequences without pandas plumbing:

    from colsplit import separate_column

    result = separate_column(["a", "a b", "a b c", None], ["a", "b"], emit=False)
    result.table      # 2-column DataFrame
    result.issues     # [SplitIssue(TOO_MANY, (3,)), SplitIssue(TOO_FEW, (1,))]
"""

__version__ = "0.1.0"

from colsplit.config import DEFAULT_SEPARATOR
from colsplit.diagnostics import SplitWarning, emit_issues, format_issue
from colsplit.errors import (
    ColumnNotFoundError,
    ConfigurationError,
    EmptyIntoError,
    InvalidIntoError,
    InvalidPatternError,
    InvalidPolicyError,
    InvalidSeparatorError,
    JobConfigError,
    PositionCountError,
    SeparateError,
    UnsupportedTableError,
)
from colsplit.models import (
    ExtraPolicy,
    FillPolicy,
    Pattern,
    Positions,
    RowOutcome,
    SplitIssue,
    SplitResult,
    resolve_separator,
)
from colsplit.splitting import separate_column, split_by_pattern, split_by_position
from colsplit.table import convert_column, resolve_column, separate

__all__ = [
    "DEFAULT_SEPARATOR",
    "ColumnNotFoundError",
    "ConfigurationError",
    "EmptyIntoError",
    "InvalidIntoError",
    "ExtraPolicy",
    "FillPolicy",
    "InvalidPatternError",
    "InvalidPolicyError",
    "InvalidSeparatorError",
    "JobConfigError",
    "Pattern",
    "PositionCountError",
    "Positions",
    "RowOutcome",
    "SeparateError",
    "SplitIssue",
    "SplitResult",
    "SplitWarning",
    "UnsupportedTableError",
    "convert_column",
    "emit_issues",
    "format_issue",
    "resolve_column",
    "resolve_separator",
    "separate",
    "separate_column",
    "split_by_pattern",
    "split_by_position",
]
