"""Shared test fixtures for colsplit tests."""

import pandas as pd
import pytest

from colsplit.logging_config import IndentState


@pytest.fixture(autouse=True)
def reset_indent():
    """Start every test at indentation level 0."""
    IndentState.reset()
    yield
    IndentState.reset()


@pytest.fixture
def uneven_rows() -> list:
    """Rows with one, two and three words plus a missing value."""
    return ["a", "a b", "a b c", None]


@pytest.fixture
def people_frame() -> pd.DataFrame:
    """Small frame whose middle column holds "first last" names."""
    return pd.DataFrame(
        {
            "id": [1, 2, 3],
            "name": ["Ada Lovelace", "Alan Turing", None],
            "year": [1815, 1912, 1906],
        }
    )
