"""Tests for the indenting logger."""

import logging
import sys

from colsplit.logging_config import IndentState, logger, setup_logging


class TestIndentLogger:
    """Tests for IndentLogger."""

    def test_no_indent_at_top_level(self) -> None:
        assert logger.indent == ""

    def test_indent_block_nests(self) -> None:
        with logger.indent_block("outer"):
            assert logger.indent == "├── "
            with logger.indent_block():
                assert logger.indent == "│   ├── "
        assert logger.indent == ""

    def test_indent_restored_after_error(self) -> None:
        try:
            with logger.indent_block():
                raise RuntimeError("boom")
        except RuntimeError:
            pass

        assert IndentState.get_indent() == ""

    def test_messages_carry_indent(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="colsplit"):
            with logger.indent_block("start"):
                logger.debug("inside")

        assert [r.getMessage() for r in caplog.records] == ["start", "├── inside"]


def test_setup_logging_replaces_handlers() -> None:
    base = logging.getLogger("colsplit")
    try:
        setup_logging(logging.DEBUG)
        configured = setup_logging(logging.DEBUG)

        assert configured.base is base
        assert base.level == logging.DEBUG
        assert len(base.handlers) == 1
    finally:
        base.handlers = []
        base.setLevel(logging.NOTSET)


def test_setup_logging_writes_to_stderr() -> None:
    base = logging.getLogger("colsplit")
    try:
        setup_logging(logging.INFO)

        (handler,) = base.handlers
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr
    finally:
        base.handlers = []
        base.setLevel(logging.NOTSET)
