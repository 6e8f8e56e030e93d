"""Exceptions raised by colsplit."""

from __future__ import annotations

from collections.abc import Sequence


class SeparateError(ValueError):
    """Base class for all colsplit errors."""


class ConfigurationError(SeparateError):
    """Raised before any row is processed when the call is misconfigured."""


class InvalidSeparatorError(ConfigurationError, TypeError):
    """Raised when `sep` is neither a pattern nor a list of positions."""

    def __init__(self, sep: object) -> None:
        """Initialize the error.

        Args:
            sep: The rejected separator value
        """
        self.sep = sep
        super().__init__(
            f"`sep` must be either a pattern string or integer positions, "
            f"got {type(sep).__name__}"
        )


class InvalidPatternError(ConfigurationError):
    """Raised when the separator pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        super().__init__(f"Invalid separator pattern {pattern!r}: {reason}")


class InvalidPolicyError(ConfigurationError):
    """Raised for an unknown `extra` or `fill` token."""

    def __init__(self, argument: str, value: object, choices: Sequence[str]) -> None:
        """Initialize the error.

        Args:
            argument: Name of the argument ("extra" or "fill")
            value: The rejected token
            choices: Valid tokens for the argument
        """
        self.argument = argument
        self.value = value
        self.choices = tuple(choices)
        options = ", ".join(f'"{c}"' for c in self.choices)
        super().__init__(f"`{argument}` must be one of {options}, not {value!r}")


class PositionCountError(ConfigurationError):
    """Raised when the number of positions doesn't match `into`."""

    def __init__(self, n_positions: int, n_into: int) -> None:
        self.n_positions = n_positions
        self.n_into = n_into
        super().__init__(
            f"Expected {n_into - 1} positions to split into {n_into} columns, "
            f"got {n_positions}"
        )


class EmptyIntoError(ConfigurationError):
    """Raised when no target columns are given."""

    def __init__(self) -> None:
        super().__init__("`into` must name at least one column")


class InvalidIntoError(ConfigurationError):
    """Raised when `into` is a single string instead of a list of labels."""

    def __init__(self, into: str) -> None:
        self.into = into
        super().__init__(
            f"`into` must be a list of column names or a count, not the string {into!r}"
        )


class JobConfigError(ConfigurationError):
    """Raised when a job file can't be read or fails schema validation."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid job file {source}: {reason}")


class ColumnNotFoundError(SeparateError, KeyError):
    """Raised when the column to separate doesn't exist in the table."""

    def __init__(self, column: object, available: Sequence[object]) -> None:
        """Initialize the error.

        Args:
            column: The requested column label or position
            available: Labels present in the table
        """
        self.column = column
        self.available = list(available)
        super().__init__(
            f"Column {column!r} not found. Available columns: "
            f"{', '.join(str(c) for c in self.available)}"
        )

    def __str__(self) -> str:
        return str(self.args[0])


class UnsupportedTableError(SeparateError, TypeError):
    """Raised when no table implementation exists for the data type."""

    def __init__(self, data: object) -> None:
        self.data_type = type(data)
        super().__init__(
            f"Can't separate columns of {type(data).__name__}; "
            f"expected a pandas DataFrame or a mapping of columns"
        )
