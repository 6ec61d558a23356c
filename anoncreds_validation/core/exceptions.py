"""
Exception hierarchy for anoncreds-validation.
All package-specific exceptions inherit from AnonCredsError.
"""
from typing import Optional


class AnonCredsError(Exception):
    """Base exception for all anoncreds-validation operations."""


class ValidationError(AnonCredsError):
    """
    A loaded object failed its structural validation.

    The message is optional: ``None`` means no detail is available,
    which is not the same as an empty detail.
    """

    def __init__(self, message: Optional[str] = None):
        super().__init__(*(() if message is None else (message,)))
        self.message = message

    def __str__(self) -> str:
        return self.message or ""

    def __repr__(self) -> str:
        return f"ValidationError({self.message!r})"

    def __eq__(self, other):
        if not isinstance(other, ValidationError):
            return NotImplemented
        return self.message == other.message

    def __hash__(self):
        return hash((ValidationError, self.message))


class AnonCredsCliError(AnonCredsError):
    """CLI operation or user input handling failed."""
