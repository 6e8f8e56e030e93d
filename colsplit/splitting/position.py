"""Split strings at fixed character positions."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence

import pandas as pd

from colsplit.errors import PositionCountError
from colsplit.logging_config import logger
from colsplit.models import Positions
from colsplit.splitting.rows import Row, build_table, column_names, normalize_rows


def boundaries_for(positions: Sequence[int]) -> list[int]:
    """Wrap positions with the start (0) and end (-1) of the string."""
    return [0, *positions, -1]


def resolve_boundary(boundary: int, length: int) -> int:
    """Turn a boundary into an absolute offset for a string of `length`.

    Negative boundaries count from the end: -1 is one past the last
    character. Results below zero are clamped to the start.
    """
    if boundary >= 0:
        return boundary
    return max(length + boundary + 1, 0)


def split_position_row(text: str | None, boundaries: Sequence[int]) -> Row:
    """Cut one string between consecutive boundaries.

    Piece i runs from boundary i (exclusive) to boundary i + 1 (inclusive).
    Out of range or inverted boundaries give "", a missing row gives all None.
    """
    n = len(boundaries) - 1
    if text is None:
        return [None] * n
    offsets = [resolve_boundary(b, len(text)) for b in boundaries]
    return [text[offsets[i] : offsets[i + 1]] for i in range(n)]


def split_by_position(
    values: Iterable[object],
    positions: Positions | Sequence[int],
    into: int | Sequence[Hashable] | None = None,
) -> pd.DataFrame:
    """Split every value at the same character positions.

    Args:
        values: Input strings; None/NaN rows stay missing
        positions: Cut points, 1 fewer than the number of columns
        into: Column labels (or their count); defaults to 0..len(positions)

    Returns:
        DataFrame with len(positions) + 1 columns

    Raises:
        PositionCountError: If `into` doesn't have len(positions) + 1 entries
    """
    cuts = positions.values if isinstance(positions, Positions) else tuple(positions)
    n = len(cuts) + 1
    names = column_names(n if into is None else into)
    if len(names) != n:
        raise PositionCountError(len(cuts), len(names))

    texts, index = normalize_rows(values)
    boundaries = boundaries_for(cuts)
    logger.debug(f"Splitting {len(texts)} rows at positions {list(cuts)}")
    rows = [split_position_row(text, boundaries) for text in texts]
    return build_table(rows, names, index)
