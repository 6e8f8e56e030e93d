"""Table layer: separate a column of a DataFrame (or mapping of columns)."""

from __future__ import annotations

import re
from collections.abc import Hashable, Mapping, Sequence
from functools import singledispatch

import pandas as pd

from colsplit.config import DEFAULT_SEPARATOR, FALSE_STRINGS, NA_STRINGS, TRUE_STRINGS
from colsplit.errors import ColumnNotFoundError, UnsupportedTableError
from colsplit.logging_config import logger
from colsplit.models import ExtraPolicy, FillPolicy
from colsplit.splitting.engine import separate_column
from colsplit.splitting.rows import is_missing

INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def resolve_column(data: pd.DataFrame, col: Hashable) -> tuple[Hashable, int]:
    """Find the column to separate.

    Labels take precedence; an int that isn't a label is a 0-based
    position, negative values counting from the right.

    Returns:
        (label, position) of the column

    Raises:
        ColumnNotFoundError: If there is no such label or position
    """
    labels = list(data.columns)
    if col in labels:
        return col, labels.index(col)
    if isinstance(col, int) and not isinstance(col, bool):
        if -len(labels) <= col < len(labels):
            position = col % len(labels)
            return labels[position], position
    raise ColumnNotFoundError(col, labels)


def convert_column(values: pd.Series) -> pd.Series:
    """Guess a better dtype for a column of strings.

    NA strings become missing. A column made only of logical tokens
    becomes bool, only integers int64, only numbers float64. Integers
    outside the int64 range are read as float64. Blank strings count as
    missing while guessing. Anything else stays text. Nullable dtypes are
    used when missing values are present.
    """
    cells = [None if is_missing(v) or v in NA_STRINGS else v for v in values]
    cleaned = pd.Series(cells, index=values.index, dtype=object, name=values.name)
    present = [v for v in cells if not is_missing(v) and v != ""]
    has_missing = len(present) < len(cells)

    def build(data: list, dtype: str | type) -> pd.Series:
        return pd.Series(data, index=values.index, dtype=dtype, name=values.name)

    if not present:
        return build([pd.NA] * len(cells), "boolean")

    if all(isinstance(v, str) for v in present) and set(present) <= TRUE_STRINGS | FALSE_STRINGS:
        flags = [None if is_missing(v) or v == "" else v in TRUE_STRINGS for v in cells]
        return build(flags, "boolean" if has_missing else bool)

    if all(isinstance(v, str) and INTEGER_PATTERN.match(v) for v in present):
        numbers = [None if is_missing(v) or v == "" else int(v) for v in cells]
        if all(INT64_MIN <= n <= INT64_MAX for n in numbers if n is not None):
            return build(numbers, "Int64" if has_missing else "int64")
        return build([float("nan") if n is None else float(n) for n in numbers], "float64")

    blanks_missing = pd.Series(
        [None if v == "" else v for v in cells], index=values.index, dtype=object
    )
    try:
        numeric = pd.to_numeric(blanks_missing)
    except (ValueError, TypeError):
        return cleaned
    return numeric.astype("float64").rename(values.name)


@singledispatch
def separate(
    data: object,
    col: Hashable,
    into: Sequence[Hashable],
    sep: object = DEFAULT_SEPARATOR,
    remove: bool = True,
    convert: bool = False,
    extra: ExtraPolicy | str = ExtraPolicy.WARN,
    fill: FillPolicy | str = FillPolicy.WARN,
):
    """Separate one column of a table into several.

    The new columns are inserted right after the source column, which is
    dropped when `remove` is true.

    Args:
        data: A pandas DataFrame, or a mapping of column name to values
        col: Label or 0-based position of the column to separate
        into: Labels for the new columns
        sep: Regular expression, or integer positions to cut at
        remove: Drop the source column from the output
        convert: Run convert_column over the new columns
        extra: Policy for rows with too many pieces
        fill: Policy for rows with too few pieces

    Returns:
        A table of the same kind as `data`

    Raises:
        UnsupportedTableError: If `data` is not a supported table type
    """
    raise UnsupportedTableError(data)


@separate.register(pd.DataFrame)
def _separate_frame(
    data: pd.DataFrame,
    col: Hashable,
    into: Sequence[Hashable],
    sep: object = DEFAULT_SEPARATOR,
    remove: bool = True,
    convert: bool = False,
    extra: ExtraPolicy | str = ExtraPolicy.WARN,
    fill: FillPolicy | str = FillPolicy.WARN,
) -> pd.DataFrame:
    label, position = resolve_column(data, col)

    with logger.indent_block(f"Separating column {label!r} of {len(data)} rows"):
        result = separate_column(data.iloc[:, position], into, sep, extra=extra, fill=fill)
        new = result.table
        if convert:
            converted = [convert_column(new.iloc[:, j]) for j in range(new.shape[1])]
            new = pd.concat(converted, axis=1)
            new.columns = result.table.columns
            logger.debug(f"Converted dtypes: {[str(t) for t in new.dtypes]}")

    keep_until = position if remove else position + 1
    out = pd.concat([data.iloc[:, :keep_until], new, data.iloc[:, position + 1 :]], axis=1)
    if out.columns.duplicated().any():
        duplicates = sorted({str(c) for c in out.columns[out.columns.duplicated()]})
        logger.warning(f"Output has duplicate column labels: {', '.join(duplicates)}")
    return out


@separate.register(Mapping)
def _separate_mapping(
    data: Mapping,
    col: Hashable,
    into: Sequence[Hashable],
    sep: object = DEFAULT_SEPARATOR,
    remove: bool = True,
    convert: bool = False,
    extra: ExtraPolicy | str = ExtraPolicy.WARN,
    fill: FillPolicy | str = FillPolicy.WARN,
) -> dict[Hashable, list]:
    frame = pd.DataFrame(dict(data))
    out = _separate_frame(frame, col, into, sep, remove, convert, extra, fill)
    return {label: out.iloc[:, j].tolist() for j, label in enumerate(out.columns)}
