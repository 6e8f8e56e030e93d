"""
Logging configuration for colsplit

Includes IndentLogger for nested, tree-style trace output.
"""

import logging
import sys
from contextlib import contextmanager


class IndentState:
    """Shared indentation depth for all IndentLogger instances"""

    _level = 0

    @classmethod
    def increase(cls) -> None:
        cls._level += 1

    @classmethod
    def decrease(cls) -> None:
        if cls._level > 0:
            cls._level -= 1

    @classmethod
    def reset(cls) -> None:
        """Reset indentation state (useful for tests)"""
        cls._level = 0

    @classmethod
    def get_indent(cls) -> str:
        """Get current indentation string with tree characters"""
        if cls._level == 0:
            return ""
        return "│   " * (cls._level - 1) + "├── "


class IndentLogger:
    """Logger wrapper that prefixes messages with the current indentation"""

    def __init__(self, base_logger: logging.Logger) -> None:
        self._logger = base_logger

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(f"{self.indent}{msg}", *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._logger.info(f"{self.indent}{msg}", *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(f"{self.indent}{msg}", *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._logger.error(f"{self.indent}{msg}", *args, **kwargs)

    @property
    def indent(self) -> str:
        return IndentState.get_indent()

    @property
    def base(self) -> logging.Logger:
        """The wrapped standard library logger"""
        return self._logger

    @contextmanager
    def indent_block(self, initial_message: str | None = None):
        """
        Context manager for an indented block of log messages

        Args:
            initial_message: Optional message to log at block start
        """
        if initial_message:
            self.debug(initial_message)
        IndentState.increase()
        try:
            yield
        finally:
            IndentState.decrease()


def setup_logging(level=logging.INFO):
    """
    Configure logging for colsplit

    Args:
        level: Logging level (default: INFO)

    Returns:
        IndentLogger: Configured logger with indentation support
    """
    base_logger = logging.getLogger("colsplit")
    base_logger.setLevel(level)
    base_logger.handlers = []

    # stderr keeps trace output out of CSV written to stdout
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)8s %(message)s"))
    base_logger.addHandler(handler)

    return IndentLogger(base_logger)


logger = IndentLogger(logging.getLogger("colsplit"))
