"""Fluent builder for a single SQL statement.

Each method records one piece of clause state and returns the builder, so
calls chain freely and in any order::

    from chainql import table

    sql = (
        table("users")
        .select_columns("email", "name")
        .filter_with("age", ">=", 18)
        .filter_equals("active", True)
        .order_by("created_at", "DESC")
        .set_limit(10)
        .render()
    )
    # SELECT (email, name) FROM users WHERE age >= 18 AND active = 1
    #   ORDER BY created_at DESC LIMIT 10;

    sql = table("users").insert({"email": "a@b.com", "password": "12345"}).render()
    # INSERT INTO users (email, password) VALUES ('a@b.com', '12345');

Only an invalid filter operator or sort direction raises.  A negative
limit, a non-positive offset and values of unsupported types are ignored
or normalised without an error.

One builder instance corresponds to one statement.  Rendering reads the
accumulated state and never clears it.  Builders are not thread-safe.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from chainql.compile.base import CompiledStatement
from chainql.compile.compiler import StatementCompiler
from chainql.errors import InvalidDirectionError, InvalidOperatorError
from chainql.schema.expressions import (
    DEFAULT_DIRECTION,
    DEFAULT_OPERATOR,
    ComparisonOp,
    SortDirection,
    comparison_op,
    direction_tokens,
    operator_tokens,
    sort_direction,
)
from chainql.schema.literals import Scalar
from chainql.schema.statement import (
    FilterPredicate,
    InsertPayload,
    OrderingTerm,
    Pagination,
    Statement,
)

logger = logging.getLogger(__name__)


class StatementBuilder:
    """Accumulates clause state for one statement against ``table``.

    Args:
        table: Target table name.  Stored verbatim; it is neither quoted
            nor checked.
    """

    def __init__(self, table: str) -> None:
        self._table = table
        self._columns: list[str] = []
        self._filters: list[FilterPredicate] = []
        self._orderings: list[OrderingTerm] = []
        self._limit: int | None = None
        self._offset: int | None = None
        self._insert: InsertPayload | None = None
        self._compiler = StatementCompiler()

    @property
    def table(self) -> str:
        return self._table

    # ------------------------------------------------------------------
    # WHERE
    # ------------------------------------------------------------------

    def filter_equals(self, field: str, value: Scalar) -> "StatementBuilder":
        """Add a ``field = value`` predicate."""
        return self.filter_with(field, DEFAULT_OPERATOR, value)

    def filter_with(
        self,
        field: str,
        operator: str | ComparisonOp,
        value: Scalar,
    ) -> "StatementBuilder":
        """Add a ``field operator value`` predicate.

        Predicates are ANDed together in the order they are added.  The
        value is converted to its SQL literal text immediately.

        Args:
            field: Column name.
            operator: One of ``=``, ``!=``, ``>``, ``<``, ``>=``, ``<=``.
            value: A ``str``, number or ``bool``.  Other types render as
                empty text.

        Raises:
            InvalidOperatorError: If ``operator`` is not allowed.  No
                predicate is added in that case.
        """
        op = comparison_op(operator)
        if op is None:
            raise InvalidOperatorError(operator, operator_tokens())
        predicate = FilterPredicate.create(field, op, value)
        self._filters.append(predicate)
        logger.debug("Added filter on %s: %s %s", self._table, field, op.value)
        return self

    # ------------------------------------------------------------------
    # SELECT
    # ------------------------------------------------------------------

    def select_columns(self, *fields: str | Sequence[str]) -> "StatementBuilder":
        """Add columns to the projection.

        Each argument is a column name or a sequence of column names.  Names
        already selected are skipped; first-appearance order is kept.
        """
        for item in fields:
            names = [item] if isinstance(item, str) else list(item)
            for name in names:
                if name not in self._columns:
                    self._columns.append(name)
        return self

    # ------------------------------------------------------------------
    # ORDER BY
    # ------------------------------------------------------------------

    def order_by(
        self,
        field: str,
        direction: str | SortDirection = DEFAULT_DIRECTION,
    ) -> "StatementBuilder":
        """Append an ORDER BY term.

        Terms render in the order they are added; repeated fields are kept.

        Raises:
            InvalidDirectionError: If ``direction`` is not ASC or DESC
                (case-insensitive).
        """
        resolved = sort_direction(direction)
        if resolved is None:
            raise InvalidDirectionError(direction, direction_tokens())
        self._orderings.append(OrderingTerm(field=field, direction=resolved))
        logger.debug("Added ordering on %s: %s %s", self._table, field, resolved.value)
        return self

    # ------------------------------------------------------------------
    # LIMIT / OFFSET
    # ------------------------------------------------------------------

    def set_limit(self, limit: int) -> "StatementBuilder":
        """Set the maximum number of rows.  Negative values are ignored.

        Args:
            limit: Maximum number of records; the last accepted call wins.
        """
        if limit >= 0:
            self._limit = limit
        else:
            logger.debug("Ignoring negative limit %d for %s", limit, self._table)
        return self

    def set_offset(self, offset: int) -> "StatementBuilder":
        """Set the number of rows to skip.  Values ``<= 0`` are ignored.

        Args:
            offset: Number of records to skip; the last accepted call wins.
        """
        if offset > 0:
            self._offset = offset
        else:
            logger.debug("Ignoring non-positive offset %d for %s", offset, self._table)
        return self

    def first(self) -> "StatementBuilder":
        """Fetch a single record; shortcut for ``set_limit(1)``."""
        return self.set_limit(1)

    # ------------------------------------------------------------------
    # INSERT
    # ------------------------------------------------------------------

    def insert(self, payload: Mapping[str, Any]) -> "StatementBuilder":
        """Store a column → value payload and switch to the INSERT form.

        Columns render in the mapping's iteration order and values follow
        the same literal rules as filters.  Any select-oriented state is
        ignored once a payload is present.  A later call replaces the
        earlier payload.
        """
        self._insert = InsertPayload.from_mapping(dict(payload))
        logger.debug("Stored insert payload for %s: %s", self._table, self._insert.columns)
        return self

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def build(self) -> Statement:
        """Return a snapshot of the accumulated state.

        The snapshot is independent of the builder: later builder calls do
        not change it.
        """
        statement = Statement(
            table=self._table,
            columns=self._columns,
            filters=self._filters,
            orderings=self._orderings,
            pagination=Pagination(limit=self._limit, offset=self._offset),
            insert=self._insert,
        )
        return statement.model_copy(deep=True)

    def compile(self) -> CompiledStatement:
        """Compile the accumulated state; see :meth:`render`."""
        return self._compiler.compile(self.build())

    def render(self) -> str:
        """Return the SQL text for the accumulated state.

        Always terminated by ``;``.  Calling it repeatedly returns the same
        text as long as no further builder methods are called.
        """
        return self.compile().sql

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"StatementBuilder(table={self._table!r})"
