"""chainQL – fluent construction of SQL statement strings.

Chain clause calls on a builder, then render::

    import chainql

    chainql.table("users").filter_equals("email", "a@b.com").first().render()
    # "SELECT * FROM users WHERE email = 'a@b.com' LIMIT 1;"

Public API
----------
``table``
    Start a :class:`StatementBuilder` for a table.

``StatementBuilder``
    The chainable builder: ``filter_equals``, ``filter_with``,
    ``select_columns``, ``order_by``, ``set_limit``, ``set_offset``,
    ``first``, ``insert``, ``build``, ``compile``, ``render``.

Re-exported types
-----------------
``Statement`` and its clause models, ``StatementCompiler``,
``CompiledStatement``, the operator and direction enums, and all error
classes.

Limitations
-----------
Values are inlined as SQL literals.  Strings are quoted but **not escaped**,
so never pass untrusted input.  Only single-table SELECT and INSERT are
supported; chainQL does not execute anything.
"""

from __future__ import annotations

from chainql.builder import StatementBuilder
from chainql.compile.base import CompiledStatement
from chainql.compile.compiler import StatementCompiler
from chainql.errors import (
    ChainQLError,
    CompilationError,
    InvalidDirectionError,
    InvalidOperatorError,
    ValidationError,
)
from chainql.schema.expressions import (
    VALID_DIRECTIONS,
    VALID_OPERATORS,
    ComparisonOp,
    SortDirection,
)
from chainql.schema.statement import (
    FilterPredicate,
    InsertPayload,
    OrderingTerm,
    Pagination,
    Statement,
)

__all__ = [
    # Entry point
    "table",
    "StatementBuilder",
    # State models
    "Statement",
    "FilterPredicate",
    "OrderingTerm",
    "Pagination",
    "InsertPayload",
    # Vocabulary
    "ComparisonOp",
    "SortDirection",
    "VALID_OPERATORS",
    "VALID_DIRECTIONS",
    # Compilation
    "CompiledStatement",
    "StatementCompiler",
    # Errors
    "ChainQLError",
    "ValidationError",
    "InvalidOperatorError",
    "InvalidDirectionError",
    "CompilationError",
]


def table(name: str) -> StatementBuilder:
    """Return a fresh :class:`StatementBuilder` targeting ``name``.

    Args:
        name: Table name, used verbatim in the rendered SQL.

    Returns:
        A new builder with no clauses.
    """
    return StatementBuilder(name)
