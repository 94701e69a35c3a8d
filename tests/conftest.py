"""Shared pytest fixtures for chainQL tests."""
from __future__ import annotations

import pytest

from chainql import StatementBuilder, table
from chainql.compile.compiler import StatementCompiler


@pytest.fixture
def users() -> StatementBuilder:
    """A fresh builder targeting the ``users`` table."""
    return table("users")


@pytest.fixture(scope="session")
def compiler() -> StatementCompiler:
    return StatementCompiler()
