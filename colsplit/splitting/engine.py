"""Entry point that picks a splitter for the separator and reports diagnostics."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence

from colsplit.config import DEFAULT_SEPARATOR
from colsplit.diagnostics import emit_issues
from colsplit.logging_config import logger
from colsplit.models import (
    ExtraPolicy,
    FillPolicy,
    Positions,
    SplitResult,
    resolve_separator,
)
from colsplit.splitting.pattern import split_by_pattern
from colsplit.splitting.position import split_by_position
from colsplit.splitting.rows import column_names


def separate_column(
    rows: Iterable[object],
    into: Sequence[Hashable],
    sep: object = DEFAULT_SEPARATOR,
    extra: ExtraPolicy | str = ExtraPolicy.WARN,
    fill: FillPolicy | str = FillPolicy.WARN,
    emit: bool = True,
) -> SplitResult:
    """Split a column of strings into len(into) columns.

    A string or compiled regex `sep` splits on matches; an int or list of
    ints splits at those character positions. All arguments are validated
    before any row is processed.

    Args:
        rows: Values of the column to split
        into: Labels for the new columns
        sep: Separator pattern or positions
        extra: Policy for rows with too many pieces (pattern only)
        fill: Policy for rows with too few pieces (pattern only)
        emit: Emit `result.issues` as SplitWarning before returning

    Returns:
        SplitResult with the new columns and shape diagnostics

    Raises:
        ConfigurationError: If `into`, `sep`, `extra` or `fill` is invalid
    """
    names = column_names(into)
    separator = resolve_separator(sep)
    extra = ExtraPolicy.parse(extra)
    fill = FillPolicy.parse(fill)

    if isinstance(separator, Positions):
        logger.debug(f"Separating into {names} by position")
        result = SplitResult(table=split_by_position(rows, separator, names))
    else:
        logger.debug(f"Separating into {names} by pattern")
        result = split_by_pattern(rows, separator, names, extra=extra, fill=fill)

    if emit:
        emit_issues(result.issues, stacklevel=3)
    return result
