"""Core Statement → SQL compilation logic.

``StatementCompiler`` is the top-level orchestrator.  It wires together the
clause-level sub-builders and decides which of the two statement forms to
emit:

* **insert form** whenever the statement carries an insert payload; every
  select-oriented clause is then ignored.
* **select form** otherwise.

Clause order in the select form is fixed (projection, FROM, WHERE,
ORDER BY, LIMIT, OFFSET) no matter in which order the builder methods were
called.  Compilation only reads the statement, so compiling the same
statement twice yields the same text.
"""

from __future__ import annotations

import logging

from chainql.compile.base import CompiledStatement
from chainql.compile.clause_builders import (
    InsertClauseBuilder,
    OrderByClauseBuilder,
    PaginationClauseBuilder,
    SelectClauseBuilder,
    WhereClauseBuilder,
)
from chainql.schema.statement import Statement

logger = logging.getLogger(__name__)

#: Appended to every statement, with no space before it.
STATEMENT_TERMINATOR = ";"


class StatementCompiler:
    """Compiles a :class:`~chainql.schema.statement.Statement` to SQL text."""

    def __init__(self) -> None:
        self._select = SelectClauseBuilder()
        self._where = WhereClauseBuilder()
        self._order_by = OrderByClauseBuilder()
        self._pagination = PaginationClauseBuilder()
        self._insert = InsertClauseBuilder()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compile(self, statement: Statement) -> CompiledStatement:
        """Compile ``statement`` to SQL.

        Args:
            statement: The accumulated statement state.

        Returns:
            :class:`~chainql.compile.base.CompiledStatement` with the ``sql``
            text and the statement ``kind``.

        Raises:
            CompilationError: If the statement holds a node no clause
                builder can render.
        """
        if statement.insert is not None:
            body = self._insert.build(statement.table, statement.insert)
        else:
            body = self._build_select(statement)
        sql = body + STATEMENT_TERMINATOR
        logger.debug("Compiled %s statement: %s", statement.kind, sql)
        return CompiledStatement(sql=sql, kind=statement.kind)

    # ------------------------------------------------------------------
    # Statement forms
    # ------------------------------------------------------------------

    def _build_select(self, statement: Statement) -> str:
        parts: list[str] = []

        parts.append(self._select.build(statement.columns))
        parts.append(f"FROM {statement.table}")

        if statement.filters:
            parts.append(self._where.build(statement.filters))

        if statement.orderings:
            parts.append(self._order_by.build(statement.orderings))

        parts.extend(self._pagination.build(statement.pagination))

        return " ".join(parts)
