"""Typed literal values and their SQL text.

Filter values and insert values arrive as plain Python objects.  They are
classified once, into a closed set of tagged variants, and each variant owns
its SQL rendering::

    from chainql.schema.literals import to_literal

    to_literal("a@b.com").to_sql()   # "'a@b.com'"
    to_literal(True).to_sql()        # "1"
    to_literal(2.0).to_sql()         # "2"

Strings are wrapped in single quotes and are **not** escaped.  chainQL
interpolates literals into the statement text; it does not bind parameters.

Values of any other type become :class:`UnsupportedLiteral`, which renders
as empty text and is logged at WARNING level.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

logger = logging.getLogger(__name__)

_FORBID = ConfigDict(extra="forbid")

# ---------------------------------------------------------------------------
# Concrete literal types
# ---------------------------------------------------------------------------


class TextLiteral(BaseModel):
    """A string value, rendered inside single quotes."""

    model_config = _FORBID

    kind: Literal["text"] = "text"
    value: str

    def to_sql(self) -> str:
        return f"'{self.value}'"


class NumberLiteral(BaseModel):
    """An ``int``, ``float`` or ``Decimal`` value, rendered as decimal text.

    Integral floats drop their fractional part (``2.0`` renders as ``2``),
    matching how the number would be written by hand in a query.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=True)

    kind: Literal["number"] = "number"
    value: int | float | Decimal

    def to_sql(self) -> str:
        value = self.value
        if isinstance(value, float):
            if value.is_integer():
                return str(int(value))
            return repr(value)
        return str(value)


class BooleanLiteral(BaseModel):
    """A boolean value, rendered as ``1`` or ``0``."""

    model_config = _FORBID

    kind: Literal["boolean"] = "boolean"
    value: bool

    def to_sql(self) -> str:
        return "1" if self.value else "0"


class UnsupportedLiteral(BaseModel):
    """A value of a type chainQL cannot render.

    Only the type name is kept.  The rendered text is empty.
    """

    model_config = _FORBID

    kind: Literal["unsupported"] = "unsupported"
    type_name: str

    def to_sql(self) -> str:
        return ""


# ---------------------------------------------------------------------------
# Discriminated union
# ---------------------------------------------------------------------------

SQLLiteral = Annotated[
    Union[TextLiteral, NumberLiteral, BooleanLiteral, UnsupportedLiteral],
    Field(discriminator="kind"),
]

#: Parse a serialised ``{"kind": ..., ...}`` dict back into a typed literal.
LITERAL_ADAPTER: TypeAdapter[SQLLiteral] = TypeAdapter(SQLLiteral)

#: Python values that map onto a supported literal variant.
Scalar = Union[str, int, float, Decimal, bool]


def to_literal(value: Any) -> SQLLiteral:
    """Classify a Python value into its literal variant.

    ``bool`` is checked before the numeric types because it is a subclass
    of ``int``.

    Args:
        value: The raw value passed to ``filter_with`` or ``insert``.

    Returns:
        A typed literal.  Unknown types yield :class:`UnsupportedLiteral`.
    """
    if isinstance(value, bool):
        return BooleanLiteral(value=value)
    if isinstance(value, (int, float, Decimal)):
        return NumberLiteral(value=value)
    if isinstance(value, str):
        return TextLiteral(value=value)
    type_name = type(value).__name__
    logger.warning(
        "Value of type %s has no SQL literal form; rendering it as empty text.",
        type_name,
    )
    return UnsupportedLiteral(type_name=type_name)


def render_literal(value: Any) -> str:
    """Shortcut for ``to_literal(value).to_sql()``."""
    return to_literal(value).to_sql()
