"""Unit tests for literal classification and rendering."""
from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from chainql.schema.literals import (
    LITERAL_ADAPTER,
    BooleanLiteral,
    NumberLiteral,
    TextLiteral,
    UnsupportedLiteral,
    render_literal,
    to_literal,
)


@pytest.mark.parametrize(
    ("value", "literal_type", "sql"),
    [
        ("a@b.com", TextLiteral, "'a@b.com'"),
        ("", TextLiteral, "''"),
        (True, BooleanLiteral, "1"),
        (False, BooleanLiteral, "0"),
        (42, NumberLiteral, "42"),
        (-7, NumberLiteral, "-7"),
        (0, NumberLiteral, "0"),
        (9.5, NumberLiteral, "9.5"),
        (2.0, NumberLiteral, "2"),
        (Decimal("19.90"), NumberLiteral, "19.90"),
    ],
)
def test_supported_values(value, literal_type, sql):
    literal = to_literal(value)
    assert isinstance(literal, literal_type)
    assert literal.to_sql() == sql
    assert render_literal(value) == sql


def test_bool_is_not_treated_as_number():
    literal = to_literal(True)
    assert literal.kind == "boolean"
    assert literal.value is True


def test_strings_are_not_escaped():
    # Inlined verbatim; callers must not pass untrusted input.
    assert render_literal("O'Brien") == "'O'Brien'"


@pytest.mark.parametrize("value", [None, [1, 2], {"a": 1}, object()])
def test_unsupported_values_render_empty(value):
    literal = to_literal(value)
    assert isinstance(literal, UnsupportedLiteral)
    assert literal.type_name == type(value).__name__
    assert literal.to_sql() == ""


def test_unsupported_value_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="chainql.schema.literals"):
        to_literal(None)
    assert "NoneType" in caplog.text


def test_supported_value_does_not_log(caplog):
    with caplog.at_level(logging.WARNING, logger="chainql.schema.literals"):
        to_literal("fine")
    assert caplog.records == []


def test_adapter_parses_tagged_dicts():
    assert isinstance(LITERAL_ADAPTER.validate_python({"kind": "text", "value": "x"}), TextLiteral)
    assert isinstance(
        LITERAL_ADAPTER.validate_python({"kind": "boolean", "value": False}), BooleanLiteral
    )
    parsed = LITERAL_ADAPTER.validate_python({"kind": "unsupported", "type_name": "set"})
    assert parsed.to_sql() == ""
