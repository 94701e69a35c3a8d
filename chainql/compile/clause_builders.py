"""Clause-level SQL builders.

Each class handles exactly one SQL clause and returns its fragment without
surrounding whitespace.  Joining fragments and terminating the statement is
the job of :class:`~chainql.compile.compiler.StatementCompiler`.

Classes
-------
SelectClauseBuilder      : ``SELECT * | SELECT (<cols>)``
WhereClauseBuilder       : ``WHERE <pred> AND <pred> …``
OrderByClauseBuilder     : ``ORDER BY <field> <dir>, …``
PaginationClauseBuilder  : ``LIMIT <n>`` / ``OFFSET <n>``
InsertClauseBuilder      : ``INSERT INTO <table> (<cols>) VALUES (<lits>)``
"""
from __future__ import annotations

from chainql.errors import CompilationError
from chainql.schema.literals import (
    BooleanLiteral,
    NumberLiteral,
    SQLLiteral,
    TextLiteral,
    UnsupportedLiteral,
)
from chainql.schema.statement import (
    FilterPredicate,
    InsertPayload,
    OrderingTerm,
    Pagination,
)

_LITERAL_TYPES = (TextLiteral, NumberLiteral, BooleanLiteral, UnsupportedLiteral)


def _join_list(items: list[str]) -> str:
    return ", ".join(items)


class SelectClauseBuilder:
    """Builds the ``SELECT …`` projection.

    Explicit columns are parenthesised: ``SELECT (email, password)``.
    """

    def build(self, columns: list[str]) -> str:
        if not columns:
            return "SELECT *"
        return f"SELECT ({_join_list(columns)})"


class WhereClauseBuilder:
    """Builds ``WHERE p0 AND p1 …`` from predicates in insertion order."""

    def build(self, filters: list[FilterPredicate]) -> str:
        preds = [self._build_predicate(p) for p in filters]
        return f"WHERE {' AND '.join(preds)}"

    @staticmethod
    def _build_predicate(pred: FilterPredicate) -> str:
        return f"{pred.field} {pred.operator.value} {pred.value}"


class OrderByClauseBuilder:
    """Builds a single ``ORDER BY`` clause with comma-joined terms."""

    def build(self, orderings: list[OrderingTerm]) -> str:
        terms = [f"{o.field} {o.direction.value}" for o in orderings]
        return f"ORDER BY {_join_list(terms)}"


class PaginationClauseBuilder:
    """Builds the ``LIMIT`` and ``OFFSET`` fragments that apply.

    A limit of ``0`` is stored by the builder but never rendered.
    """

    def build(self, pagination: Pagination) -> list[str]:
        parts: list[str] = []
        if pagination.renders_limit:
            parts.append(f"LIMIT {pagination.limit}")
        if pagination.renders_offset:
            parts.append(f"OFFSET {pagination.offset}")
        return parts


class InsertClauseBuilder:
    """Builds the ``INSERT INTO … VALUES …`` body."""

    def build(self, table: str, payload: InsertPayload) -> str:
        columns = _join_list(payload.columns)
        values = _join_list([self._build_literal(v) for v in payload.values.values()])
        return f"INSERT INTO {table} ({columns}) VALUES ({values})"

    @staticmethod
    def _build_literal(literal: SQLLiteral) -> str:
        if not isinstance(literal, _LITERAL_TYPES):
            raise CompilationError(
                f"Unknown literal type: {type(literal).__name__}", clause="VALUES"
            )
        return literal.to_sql()
