"""Splitters that turn one column of strings into a fixed number of columns.

Two strategies share one output shape: split_by_position cuts every string
at the same character offsets, split_by_pattern splits on a regular
expression and reconciles each row to the requested width.
"""

from colsplit.splitting.engine import separate_column
from colsplit.splitting.pattern import reconcile, split_by_pattern, split_pieces
from colsplit.splitting.position import split_by_position, split_position_row

__all__ = [
    "separate_column",
    "split_by_pattern",
    "split_by_position",
    "split_pieces",
    "split_position_row",
    "reconcile",
]
