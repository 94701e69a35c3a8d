"""chainQL compilation layer: Statement → SQL text."""
from chainql.compile.base import CompiledStatement
from chainql.compile.compiler import STATEMENT_TERMINATOR, StatementCompiler

__all__ = [
    "CompiledStatement",
    "STATEMENT_TERMINATOR",
    "StatementCompiler",
]
