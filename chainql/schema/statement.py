"""Pydantic models for the state of a single statement.

A :class:`Statement` is a snapshot of everything a
:class:`~chainql.builder.StatementBuilder` has accumulated: the target
table, the projection, filter predicates, ordering terms, pagination and an
optional insert payload.  The compiler renders a ``Statement``; the builder
produces one on every :meth:`~chainql.builder.StatementBuilder.build` call.

Filter values are classified and rendered when the predicate is created, so
a stored predicate carries its SQL literal text rather than the raw value.
"""
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from chainql.schema.expressions import DEFAULT_DIRECTION, ComparisonOp, SortDirection
from chainql.schema.literals import SQLLiteral, to_literal

StatementKind = Literal["select", "insert"]


class FilterPredicate(BaseModel):
    """A single ``field operator literal`` comparison in the WHERE clause.

    Attributes:
        field: Column name, used verbatim.
        operator: Validated comparison operator.
        literal: The tagged literal the value was classified into.
        value: SQL text of ``literal``, fixed at creation time.
    """

    model_config = ConfigDict(extra="forbid")

    field: str
    operator: ComparisonOp
    literal: SQLLiteral
    value: str

    @classmethod
    def create(cls, field: str, operator: ComparisonOp, value: Any) -> FilterPredicate:
        """Classify ``value`` and build a predicate holding its rendered text."""
        literal = to_literal(value)
        return cls(field=field, operator=operator, literal=literal, value=literal.to_sql())


class OrderingTerm(BaseModel):
    """A single ORDER BY term.

    Attributes:
        field: Column name to order by.
        direction: Sort direction.
    """

    model_config = ConfigDict(extra="forbid")

    field: str
    direction: SortDirection = DEFAULT_DIRECTION


class Pagination(BaseModel):
    """LIMIT / OFFSET values.

    ``None`` means the clause is unset.  The builder never stores a negative
    limit or a non-positive offset; a stored limit of ``0`` is kept but not
    rendered.

    Attributes:
        limit: Maximum number of rows.
        offset: Number of rows to skip.
    """

    model_config = ConfigDict(extra="forbid")

    limit: int | None = None
    offset: int | None = None

    @property
    def renders_limit(self) -> bool:
        """True when a ``LIMIT`` fragment should be emitted."""
        return self.limit is not None and self.limit > 0

    @property
    def renders_offset(self) -> bool:
        """True when an ``OFFSET`` fragment should be emitted."""
        return self.offset is not None and self.offset > 0


class InsertPayload(BaseModel):
    """Column → literal mapping for the INSERT form.

    Column order is the iteration order of the mapping passed to
    ``insert``.  Column names are not checked against any schema.

    Attributes:
        values: Classified literal per column.
    """

    model_config = ConfigDict(extra="forbid")

    values: dict[str, SQLLiteral] = Field(default_factory=dict)

    @classmethod
    def from_mapping(cls, payload: dict[str, Any]) -> InsertPayload:
        return cls(values={column: to_literal(v) for column, v in payload.items()})

    @property
    def columns(self) -> list[str]:
        return list(self.values)


class Statement(BaseModel):
    """Everything needed to render one SQL statement.

    Attributes:
        table: Target table name, stored verbatim.
        columns: Projected columns in first-appearance order (empty = ``*``).
        filters: WHERE predicates in insertion order, joined with AND.
        orderings: ORDER BY terms in insertion order.
        pagination: LIMIT / OFFSET values.
        insert: Insert payload; when present the statement renders as INSERT
            and every select-oriented clause is ignored.
    """

    model_config = ConfigDict(extra="forbid")

    table: str
    columns: list[str] = Field(default_factory=list)
    filters: list[FilterPredicate] = Field(default_factory=list)
    orderings: list[OrderingTerm] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)
    insert: InsertPayload | None = None

    @classmethod
    def builder(cls, table: str) -> "StatementBuilder":  # noqa: F821
        """Return a fresh :class:`~chainql.builder.StatementBuilder` for ``table``.

        Example::

            sql = (
                Statement.builder("users")
                .filter_equals("email", "a@b.com")
                .first()
                .render()
            )
        """
        from chainql.builder import StatementBuilder  # avoid circular import

        return StatementBuilder(table)

    @property
    def kind(self) -> StatementKind:
        """``'insert'`` when an insert payload is present, else ``'select'``."""
        return "insert" if self.insert is not None else "select"
