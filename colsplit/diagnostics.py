"""Formatting and emission of row shape warnings."""

from __future__ import annotations

import warnings
from collections.abc import Iterable, Sequence

from colsplit.config import MAX_REPORTED_INDICES
from colsplit.models import RowOutcome, SplitIssue


class SplitWarning(UserWarning):
    """Warning category for rows that didn't split into the expected shape."""


_LABELS = {
    RowOutcome.TOO_MANY: "Too many values",
    RowOutcome.TOO_FEW: "Too few values",
}


def list_indices(rows: Sequence[int], limit: int = MAX_REPORTED_INDICES) -> str:
    """Render row indices as a comma separated list.

    Lists longer than `limit` are cut off with a count of the rest,
    e.g. "1, 2, 3, ..., and 7 more".
    """
    shown = ", ".join(str(r) for r in rows[:limit])
    hidden = len(rows) - limit
    if hidden > 0:
        return f"{shown}, ..., and {hidden} more"
    return shown


def format_issue(issue: SplitIssue, limit: int = MAX_REPORTED_INDICES) -> str:
    """Build the warning message for a single issue.

    Example: "Too few values at 2 locations: 1, 4"
    """
    label = _LABELS[issue.outcome]
    return f"{label} at {issue.count} locations: {list_indices(issue.rows, limit)}"


def emit_issues(issues: Iterable[SplitIssue], stacklevel: int = 3) -> list[str]:
    """Emit one SplitWarning per issue.

    Args:
        issues: Issues to report; empty ones are skipped
        stacklevel: Passed to warnings.warn so the warning points at the caller

    Returns:
        The emitted messages, in order
    """
    messages: list[str] = []
    for issue in issues:
        if not issue.rows:
            continue
        message = format_issue(issue)
        warnings.warn(message, SplitWarning, stacklevel=stacklevel)
        messages.append(message)
    return messages
