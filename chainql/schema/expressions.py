"""Constants and helpers for filter operators and sort directions.

Both sets are closed: the builder validates against them before mutating any
state, and the compiler renders the enum values verbatim.
"""

from __future__ import annotations

from enum import Enum

# ---------------------------------------------------------------------------
# Comparison operators
# ---------------------------------------------------------------------------


class ComparisonOp(str, Enum):
    """Binary comparison operators, valued by their SQL token."""

    EQ = "="
    NE = "!="
    GT = ">"
    LT = "<"
    GTE = ">="
    LTE = "<="


# ---------------------------------------------------------------------------
# Sort directions
# ---------------------------------------------------------------------------


class SortDirection(str, Enum):
    """ORDER BY directions."""

    ASC = "ASC"
    DESC = "DESC"


# ---------------------------------------------------------------------------
# Allowlists and defaults
# ---------------------------------------------------------------------------

#: Complete set of SQL tokens accepted as filter operators.
VALID_OPERATORS: frozenset[str] = frozenset(op.value for op in ComparisonOp)

#: Complete set of accepted ORDER BY directions.
VALID_DIRECTIONS: frozenset[str] = frozenset(d.value for d in SortDirection)

#: Operator implied by the two-argument filter shorthand.
DEFAULT_OPERATOR: ComparisonOp = ComparisonOp.EQ

#: Direction used when ``order_by`` is called without one.
DEFAULT_DIRECTION: SortDirection = SortDirection.ASC

# Token order used in error messages: the order the enum declares them.
_OPERATOR_TOKENS: list[str] = [op.value for op in ComparisonOp]
_DIRECTION_TOKENS: list[str] = [d.value for d in SortDirection]

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def comparison_op(token: object) -> ComparisonOp | None:
    """Returns the :class:`ComparisonOp` for ``token`` or ``None``.

    Args:
        token: A SQL operator token (``'='``, ``'>='`` ...) or an existing
            ``ComparisonOp`` member.

    Returns:
        The matching enum member, or ``None`` if ``token`` is not allowed.
    """
    if isinstance(token, ComparisonOp):
        return token
    if isinstance(token, str) and token in VALID_OPERATORS:
        return ComparisonOp(token)
    return None


def sort_direction(token: object) -> SortDirection | None:
    """Returns the :class:`SortDirection` for ``token`` or ``None``.

    Matching is case-insensitive, so ``'desc'`` resolves to ``DESC``.
    """
    if isinstance(token, SortDirection):
        return token
    if isinstance(token, str) and token.upper() in VALID_DIRECTIONS:
        return SortDirection(token.upper())
    return None


def operator_tokens() -> list[str]:
    """Return the allowed operator tokens in declaration order."""
    return list(_OPERATOR_TOKENS)


def direction_tokens() -> list[str]:
    """Return the allowed direction tokens in declaration order."""
    return list(_DIRECTION_TOKENS)
