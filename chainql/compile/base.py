"""Compilation output: CompiledStatement."""
from __future__ import annotations

from dataclasses import dataclass

from chainql.schema.statement import StatementKind


@dataclass(frozen=True)
class CompiledStatement:
    """The output of a successful compilation.

    Attributes:
        sql: The complete SQL text, terminated by ``;``.  Literal values are
            inlined; there are no placeholders and no escaping.
        kind: ``'select'`` or ``'insert'``.
    """

    sql: str
    kind: StatementKind

    def __str__(self) -> str:
        return self.sql
