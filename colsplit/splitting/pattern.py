"""Split strings on a regular expression and reconcile rows to a fixed width."""

from __future__ import annotations

import re
from collections.abc import Hashable, Iterable, Sequence

from colsplit.errors import InvalidPatternError, InvalidSeparatorError
from colsplit.logging_config import logger
from colsplit.models import (
    ExtraPolicy,
    FillPolicy,
    Pattern,
    RowOutcome,
    SplitIssue,
    SplitResult,
    resolve_separator,
)
from colsplit.splitting.rows import Row, build_table, column_names, normalize_rows


def split_pieces(
    regex: re.Pattern[str],
    text: str,
    max_pieces: int | None = None,
) -> list[str]:
    """Split text on every match of regex.

    Unlike re.split, capturing groups never add pieces. With `max_pieces`
    the text is split at most max_pieces - 1 times and the last piece
    keeps any later matches.
    """
    pieces: list[str] = []
    start = 0
    for match in regex.finditer(text):
        if max_pieces is not None and len(pieces) >= max_pieces - 1:
            break
        pieces.append(text[start : match.start()])
        start = match.end()
    pieces.append(text[start:])
    return pieces


def reconcile(pieces: Sequence[str], n: int, fill: FillPolicy) -> tuple[Row, RowOutcome]:
    """Force a row's pieces to exactly n values.

    Extra pieces are dropped from the end. Missing pieces are padded with
    None on the right, or on the left when `fill` is LEFT.

    Returns:
        The reconciled row and how its piece count compared to n
    """
    outcome = RowOutcome.classify(len(pieces), n)
    if outcome is RowOutcome.TOO_MANY:
        return list(pieces[:n]), outcome
    if outcome is RowOutcome.TOO_FEW:
        padding: Row = [None] * (n - len(pieces))
        if fill.pads_left:
            return padding + list(pieces), outcome
        return list(pieces) + padding, outcome
    return list(pieces), outcome


def split_by_pattern(
    values: Iterable[object],
    pattern: Pattern | str | re.Pattern[str],
    into: int | Sequence[Hashable],
    extra: ExtraPolicy | str = ExtraPolicy.WARN,
    fill: FillPolicy | str = FillPolicy.WARN,
) -> SplitResult:
    """Split every value on a pattern into exactly len(into) columns.

    Policies are validated before any row is read. Rows with a different
    number of pieces are always reconciled and recorded in
    `too_many`/`too_few`; they only become `issues` when the matching
    policy is WARN. Nothing is emitted here.

    Args:
        values: Input strings; None/NaN rows stay missing and are never counted
        pattern: Regular expression to split on
        into: Column labels, or the number of columns
        extra: Policy for rows with too many pieces
        fill: Policy for rows with too few pieces

    Returns:
        SplitResult holding the table and the shape diagnostics
    """
    extra = ExtraPolicy.parse(extra)
    fill = FillPolicy.parse(fill)
    names = column_names(into)
    n = len(names)
    pattern = resolve_separator(pattern)
    if not isinstance(pattern, Pattern):
        raise InvalidSeparatorError(pattern)
    try:
        regex = pattern.compile()
    except re.error as e:
        raise InvalidPatternError(pattern.regex, str(e)) from e
    max_pieces = n if extra is ExtraPolicy.MERGE else None

    texts, index = normalize_rows(values)
    rows: list[Row] = []
    too_many: list[int] = []
    too_few: list[int] = []

    with logger.indent_block(
        f"Splitting {len(texts)} rows on /{pattern.regex}/ into {n} columns "
        f"(extra={extra.value}, fill={fill.value})"
    ):
        for i, text in enumerate(texts, start=1):
            if text is None:
                rows.append([None] * n)
                continue
            row, outcome = reconcile(split_pieces(regex, text, max_pieces), n, fill)
            rows.append(row)
            if outcome is RowOutcome.TOO_MANY:
                too_many.append(i)
            elif outcome is RowOutcome.TOO_FEW:
                too_few.append(i)
        logger.debug(f"{len(too_many)} rows with too many pieces, {len(too_few)} with too few")

    issues: list[SplitIssue] = []
    if extra is ExtraPolicy.WARN and too_many:
        issues.append(SplitIssue(RowOutcome.TOO_MANY, tuple(too_many)))
    if fill is FillPolicy.WARN and too_few:
        issues.append(SplitIssue(RowOutcome.TOO_FEW, tuple(too_few)))

    return SplitResult(
        table=build_table(rows, names, index),
        too_many=too_many,
        too_few=too_few,
        issues=issues,
    )
