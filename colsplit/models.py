"""Data models for column separation."""

from __future__ import annotations

import numbers
import re
import warnings
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Union

from colsplit.config import DEPRECATED_EXTRA_ERROR
from colsplit.errors import InvalidPolicyError, InvalidSeparatorError
from colsplit.logging_config import logger

if TYPE_CHECKING:
    import pandas as pd


class ExtraPolicy(str, Enum):
    """What to do with rows that split into too many pieces."""

    WARN = "warn"
    DROP = "drop"
    MERGE = "merge"

    @classmethod
    def parse(cls, value: str | ExtraPolicy) -> ExtraPolicy:
        """Validate an `extra` token.

        The legacy "error" token is accepted and mapped to WARN with a
        FutureWarning.

        Raises:
            InvalidPolicyError: If the token is unknown
        """
        if isinstance(value, cls):
            return value
        if value == DEPRECATED_EXTRA_ERROR:
            warnings.warn(
                '`extra = "error"` is deprecated. Please use `extra = "warn"` instead',
                FutureWarning,
                stacklevel=3,
            )
            logger.debug('Mapped deprecated extra="error" to "warn"')
            return cls.WARN
        try:
            return cls(value)
        except ValueError:
            raise InvalidPolicyError("extra", value, [m.value for m in cls]) from None


class FillPolicy(str, Enum):
    """What to do with rows that split into too few pieces."""

    WARN = "warn"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, value: str | FillPolicy) -> FillPolicy:
        """Validate a `fill` token.

        Raises:
            InvalidPolicyError: If the token is unknown
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidPolicyError("fill", value, [m.value for m in cls]) from None

    @property
    def pads_left(self) -> bool:
        """Whether missing values go before the pieces."""
        return self is FillPolicy.LEFT


class RowOutcome(str, Enum):
    """Shape of a split row relative to the number of target columns."""

    EXACT = "exact"
    TOO_MANY = "too_many"
    TOO_FEW = "too_few"

    @classmethod
    def classify(cls, n_pieces: int, n: int) -> RowOutcome:
        if n_pieces > n:
            return cls.TOO_MANY
        if n_pieces < n:
            return cls.TOO_FEW
        return cls.EXACT


@dataclass(frozen=True)
class Positions:
    """Split at fixed character positions.

    Positive values count from the start of the string, negative values
    from the end (-1 is the last character).
    """

    values: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class Pattern:
    """Split on every match of a regular expression."""

    regex: str
    flags: int = 0

    def compile(self) -> re.Pattern[str]:
        return re.compile(self.regex, self.flags)


Separator = Union[Positions, Pattern]


def resolve_separator(sep: object) -> Separator:
    """Turn a raw `sep` argument into a Positions or Pattern.

    Strings and compiled patterns become a Pattern. An integer or a
    sequence of integers becomes Positions.

    Args:
        sep: Separator as passed by the caller

    Returns:
        The resolved separator

    Raises:
        InvalidSeparatorError: If `sep` has any other type
    """
    if isinstance(sep, (Positions, Pattern)):
        return sep
    if isinstance(sep, str):
        return Pattern(sep)
    if isinstance(sep, re.Pattern):
        if not isinstance(sep.pattern, str):
            raise InvalidSeparatorError(sep)
        return Pattern(sep.pattern, sep.flags)
    if _is_integer(sep):
        return Positions((int(sep),))
    if isinstance(sep, Sequence) and not isinstance(sep, (bytes, bytearray)):
        if all(_is_integer(v) for v in sep):
            return Positions(tuple(int(v) for v in sep))
    raise InvalidSeparatorError(sep)


def _is_integer(value: object) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


@dataclass(frozen=True)
class SplitIssue:
    """Rows whose piece count didn't match the number of target columns."""

    outcome: RowOutcome
    rows: tuple[int, ...]
    """1-based indices of the affected rows, in input order."""

    @property
    def count(self) -> int:
        return len(self.rows)


@dataclass
class SplitResult:
    """Output of a split: the new columns plus shape diagnostics."""

    table: pd.DataFrame
    too_many: list[int] = field(default_factory=list)
    """1-based indices of every row that produced too many pieces."""

    too_few: list[int] = field(default_factory=list)
    """1-based indices of every row that produced too few pieces."""

    issues: list[SplitIssue] = field(default_factory=list)
    """Mismatches the extra/fill policies ask to report."""

    @property
    def n_columns(self) -> int:
        return self.table.shape[1]
