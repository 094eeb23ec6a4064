"""Exception classes raised by the loan solver.

All errors derive from ``LoanSolverError`` so callers can catch the whole
family at once. The command-line interface maps them to exit codes.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class LoanSolverError(Exception):
    """Base exception for all loan solver errors.

    Attributes
    ----------
    message: str
        Human-readable error description.
    context: dict
        Extra information about the inputs that triggered the error.
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class UsageError(LoanSolverError):
    """Raised when the principal/payment pair is missing or over-specified.

    ``conflict`` is True when both amounts were supplied, False when neither
    was.
    """

    def __init__(
        self, message: str, conflict: bool = False, context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message, context)
        self.conflict = conflict


class DegenerateInputError(LoanSolverError):
    """Raised when a zero rate or zero term reaches the amortization formulas."""
