"""Tests for the pattern splitter and row reconciliation."""

import re

import pandas as pd
import pytest

from colsplit.config import DEFAULT_SEPARATOR
from colsplit.errors import (
    EmptyIntoError,
    InvalidPatternError,
    InvalidPolicyError,
    InvalidSeparatorError,
)
from colsplit.models import FillPolicy, RowOutcome, SplitIssue
from colsplit.splitting import reconcile, split_by_pattern, split_pieces


def rows_of(table: pd.DataFrame) -> list[list]:
    return table.astype(object).where(table.notna(), None).values.tolist()


def never_read():
    """Rows that fail the test if anything iterates them."""
    raise AssertionError("rows were read before validation finished")
    yield  # pragma: no cover


class TestSplitPieces:
    """Tests for split_pieces."""

    def test_unbounded(self) -> None:
        assert split_pieces(re.compile(","), "a,b,c") == ["a", "b", "c"]

    def test_no_match(self) -> None:
        assert split_pieces(re.compile(","), "abc") == ["abc"]

    def test_empty_string_is_one_piece(self) -> None:
        assert split_pieces(re.compile(","), "") == [""]

    def test_max_pieces_keeps_rest_intact(self) -> None:
        assert split_pieces(re.compile(": "), "y: error: 7", max_pieces=2) == ["y", "error: 7"]

    def test_max_one_piece_never_splits(self) -> None:
        assert split_pieces(re.compile(","), "a,b,c", max_pieces=1) == ["a,b,c"]

    def test_capturing_groups_add_no_pieces(self) -> None:
        assert split_pieces(re.compile("(,)"), "a,b") == ["a", "b"]

    def test_leading_and_trailing_separators(self) -> None:
        assert split_pieces(re.compile(","), ",a,") == ["", "a", ""]

    def test_default_separator_is_non_alphanumeric_runs(self) -> None:
        regex = re.compile(DEFAULT_SEPARATOR)

        assert split_pieces(regex, "a.b__c - d") == ["a", "b", "c", "d"]
        assert split_pieces(regex, "é1ü") == ["é1ü"]


class TestReconcile:
    """Tests for reconcile."""

    def test_exact(self) -> None:
        assert reconcile(["a", "b"], 2, FillPolicy.WARN) == (["a", "b"], RowOutcome.EXACT)

    def test_too_many_keeps_first_n(self) -> None:
        assert reconcile(["a", "b", "c"], 2, FillPolicy.WARN) == (["a", "b"], RowOutcome.TOO_MANY)

    def test_too_few_pads_right(self) -> None:
        row, outcome = reconcile(["a"], 3, FillPolicy.RIGHT)

        assert row == ["a", None, None]
        assert outcome is RowOutcome.TOO_FEW

    def test_warn_pads_right(self) -> None:
        row, _ = reconcile(["a", "b"], 3, FillPolicy.WARN)

        assert row == ["a", "b", None]

    def test_too_few_pads_left(self) -> None:
        row, outcome = reconcile(["a", "b"], 4, FillPolicy.LEFT)

        assert row == [None, None, "a", "b"]
        assert outcome is RowOutcome.TOO_FEW


class TestSplitByPattern:
    """Tests for split_by_pattern."""

    def test_uneven_rows_with_defaults(self, uneven_rows: list) -> None:
        result = split_by_pattern(uneven_rows, DEFAULT_SEPARATOR, ["a", "b"])

        assert rows_of(result.table) == [["a", None], ["a", "b"], ["a", "b"], [None, None]]
        assert result.too_many == [3]
        assert result.too_few == [1]
        assert result.issues == [
            SplitIssue(RowOutcome.TOO_MANY, (3,)),
            SplitIssue(RowOutcome.TOO_FEW, (1,)),
        ]

    def test_merge_leaves_separator_in_last_piece(self) -> None:
        result = split_by_pattern(
            ["x: 123", "y: error: 7"], ": ", ["key", "value"], extra="merge"
        )

        assert rows_of(result.table) == [["x", "123"], ["y", "error: 7"]]
        assert result.too_many == []
        assert result.issues == []

    def test_merge_still_fills(self, uneven_rows: list) -> None:
        result = split_by_pattern(uneven_rows, " ", ["a", "b"], extra="merge", fill="left")

        assert rows_of(result.table) == [[None, "a"], ["a", "b"], ["a", "b c"], [None, None]]
        assert result.too_few == [1]
        assert result.issues == []

    def test_drop_records_but_does_not_report(self, uneven_rows: list) -> None:
        result = split_by_pattern(uneven_rows, " ", ["a", "b"], extra="drop", fill="right")

        assert rows_of(result.table)[2] == ["a", "b"]
        assert result.too_many == [3]
        assert result.too_few == [1]
        assert result.issues == []

    def test_only_warn_policies_report(self, uneven_rows: list) -> None:
        result = split_by_pattern(uneven_rows, " ", ["a", "b"], extra="drop", fill="warn")

        assert result.issues == [SplitIssue(RowOutcome.TOO_FEW, (1,))]

    def test_fill_left_puts_pieces_last(self) -> None:
        result = split_by_pattern(["a-b"], "-", ["x", "y", "z", "w"], fill="left")

        assert rows_of(result.table) == [[None, None, "a", "b"]]

    def test_missing_rows_never_counted(self) -> None:
        result = split_by_pattern([None, float("nan"), pd.NA], ",", ["a", "b"])

        assert rows_of(result.table) == [[None, None]] * 3
        assert result.too_many == []
        assert result.too_few == []

    def test_every_row_has_n_values(self) -> None:
        values = ["", "a", "a,b", "a,b,c", "a,b,c,d", None]

        result = split_by_pattern(values, ",", 3, extra="drop", fill="right")

        assert result.table.shape == (6, 3)
        assert result.too_many == [5]
        assert result.too_few == [1, 2, 3]

    def test_indices_are_one_based_in_input_order(self) -> None:
        values = ["a b c", "a b", "a b c d", "a b c"]

        result = split_by_pattern(values, " ", ["x", "y"], fill="right")

        assert result.too_many == [1, 3, 4]

    def test_keeps_series_index(self) -> None:
        values = pd.Series(["a b", "c d"], index=["r1", "r2"])

        result = split_by_pattern(values, " ", ["x", "y"])

        assert list(result.table.index) == ["r1", "r2"]

    def test_deprecated_error_token(self, uneven_rows: list) -> None:
        with pytest.warns(FutureWarning):
            result = split_by_pattern(uneven_rows, " ", ["a", "b"], extra="error")

        assert SplitIssue(RowOutcome.TOO_MANY, (3,)) in result.issues

    def test_invalid_extra_fails_before_reading_rows(self) -> None:
        with pytest.raises(InvalidPolicyError, match="extra"):
            split_by_pattern(never_read(), " ", ["a", "b"], extra="keep")

    def test_invalid_fill_fails_before_reading_rows(self) -> None:
        with pytest.raises(InvalidPolicyError, match="fill"):
            split_by_pattern(never_read(), " ", ["a", "b"], fill="center")

    def test_invalid_regex(self) -> None:
        with pytest.raises(InvalidPatternError, match="Invalid separator pattern"):
            split_by_pattern(["a"], "(", ["a", "b"])

    def test_positions_are_not_a_pattern(self) -> None:
        with pytest.raises(InvalidSeparatorError):
            split_by_pattern(["a"], [1], ["a", "b"])

    def test_empty_into(self) -> None:
        with pytest.raises(EmptyIntoError):
            split_by_pattern(["a"], " ", [])
