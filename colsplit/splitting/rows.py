"""Helpers shared by the splitters for reading rows and building tables."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence

import pandas as pd

from colsplit.errors import EmptyIntoError, InvalidIntoError

Row = list[str | None]


def is_missing(value: object) -> bool:
    """Check whether a cell holds a missing value (None, NaN, pd.NA, NaT)."""
    if value is None:
        return True
    if isinstance(value, str):
        return False
    return bool(pd.api.types.is_scalar(value) and pd.isna(value))


def normalize_rows(values: Iterable[object]) -> tuple[list[str | None], pd.Index | None]:
    """Read input rows as optional strings.

    Non-string values are converted with str(); missing values become None.
    When `values` is a Series its index is returned so the output can keep it.
    """
    index = values.index if isinstance(values, pd.Series) else None
    texts = [None if is_missing(v) else v if isinstance(v, str) else str(v) for v in values]
    return texts, index


def column_names(into: int | Sequence[Hashable]) -> list[Hashable]:
    """Resolve target column labels; a bare count gives labels 0..n-1.

    Raises:
        InvalidIntoError: If `into` is a bare string
        EmptyIntoError: If no columns are requested
    """
    if isinstance(into, str):
        raise InvalidIntoError(into)
    if isinstance(into, int) and not isinstance(into, bool):
        names: list[Hashable] = list(range(into))
    else:
        names = list(into)
    if not names:
        raise EmptyIntoError()
    return names


def build_table(
    rows: Sequence[Row],
    names: Sequence[Hashable],
    index: pd.Index | None = None,
) -> pd.DataFrame:
    """Assemble per-row pieces into a DataFrame with one column per name.

    Every row must already hold exactly len(names) values.
    """
    n = len(names)
    columns = {j: [row[j] for row in rows] for j in range(n)}
    table = pd.DataFrame(columns, index=index, dtype=object)
    # Assigned afterwards so duplicate labels survive
    table.columns = list(names)
    return table
