"""Pytest configuration and shared fixtures.

This module provides common fixtures used across the unit tests, including
mocked Neo4j sessions and pre-built where statements.
"""

from collections.abc import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest

from neoquery.config import get_settings
from neoquery.runner import QueryRunner
from neoquery.utils import ParamStyle
from neoquery.where import Where

# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate tests from NEOQUERY_* environment variables and the settings cache."""
    for name in (
        "NEOQUERY_PARAM_STYLE",
        "NEOQUERY_LOG_STATEMENTS",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ---------------------------------------------------------------------------
# Session mocks
# ---------------------------------------------------------------------------


@pytest.fixture
def query_result() -> MagicMock:
    """An opaque result object returned by the mocked session."""
    return MagicMock(name="QueryResult")


@pytest.fixture
def mock_neo4j_session(query_result: MagicMock) -> AsyncMock:
    """Create a mock Neo4j async session."""
    session = AsyncMock()
    session.run = AsyncMock(return_value=query_result)
    session.close = AsyncMock()
    return session


# ---------------------------------------------------------------------------
# Runner fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def statement_logger() -> MagicMock:
    """A logger callback recording every (statement, parameters) pair."""
    return MagicMock(name="statement_logger")


@pytest.fixture
def runner(statement_logger: MagicMock) -> QueryRunner:
    """A QueryRunner using bracket-style placeholders and a recording logger."""
    return QueryRunner(logger=statement_logger, param_style=ParamStyle.BRACES)


@pytest.fixture
def endpoints_where() -> Where:
    """A where statement matching endpoints `a` and `b` by id."""
    return Where({"a": {"id": 1}, "b": {"id": 2}}, param_style=ParamStyle.BRACES)
