"""Custom exception hierarchy for chainQL.

All public errors inherit from ChainQLError so callers can catch the base
class for any chainQL-specific failure.

Only a handful of inputs are rejected outright.  Out-of-range pagination
values and unsupported literal types are normalised silently by the builder
instead of raising.
"""
from __future__ import annotations

from typing import Any


class ChainQLError(Exception):
    """Base exception for all chainQL errors."""


class ValidationError(ChainQLError):
    """Raised when a builder call is rejected before any state is changed.

    Args:
        message: Human-readable description.
        code: Machine-readable error code (e.g. INVALID_OPERATOR).
        details: Extra context about the rejected input.
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details: dict[str, Any] = details or {}

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response suitable for API payloads."""
        return {
            "error": self.code,
            "message": str(self),
            "details": self.details,
        }


class InvalidOperatorError(ValidationError):
    """Raised when a filter uses an operator outside the comparison allowlist."""

    def __init__(self, operator: Any, allowed_operators: list[str]) -> None:
        super().__init__(
            f"Invalid operation! '{operator}' is not one of {allowed_operators}.",
            code="INVALID_OPERATOR",
            details={
                "operator": operator,
                "allowed_operators": allowed_operators,
            },
        )


class InvalidDirectionError(ValidationError):
    """Raised when an ORDER BY term uses a direction other than ASC / DESC."""

    def __init__(self, direction: Any, allowed_directions: list[str]) -> None:
        super().__init__(
            f"Invalid sort direction '{direction}'. Expected one of {allowed_directions}.",
            code="INVALID_DIRECTION",
            details={
                "direction": direction,
                "allowed_directions": allowed_directions,
            },
        )


class CompilationError(ChainQLError):
    """Raised when SQL rendering fails for an unexpected reason.

    Args:
        message: Human-readable description.
        clause: The clause being rendered when the error occurred.
    """

    def __init__(self, message: str, clause: str | None = None) -> None:
        super().__init__(message)
        self.clause = clause
