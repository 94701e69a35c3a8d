"""chainQL schema models: statement state, literals and operator vocabulary."""
from chainql.schema.expressions import ComparisonOp, SortDirection
from chainql.schema.literals import (
    BooleanLiteral,
    NumberLiteral,
    SQLLiteral,
    TextLiteral,
    UnsupportedLiteral,
    to_literal,
)
from chainql.schema.statement import (
    FilterPredicate,
    InsertPayload,
    OrderingTerm,
    Pagination,
    Statement,
)

__all__ = [
    "ComparisonOp",
    "SortDirection",
    "BooleanLiteral",
    "NumberLiteral",
    "SQLLiteral",
    "TextLiteral",
    "UnsupportedLiteral",
    "to_literal",
    "FilterPredicate",
    "InsertPayload",
    "OrderingTerm",
    "Pagination",
    "Statement",
]
