"""
Vouch error taxonomy.

Two categories are kept apart so callers can tell "your input is invalid"
from "you used this library incorrectly":

    ValidationError: a checked value failed a rule (a ValueError)
        UncheckedValidationError: raised by optimistic validators (Hope)
        CheckedValidationError: raised by pessimistic validators (Doubt)
    ConfigurationError: the API itself was misused (a TypeError)
"""


# Classes --------------------------------------------------------------------------------------------------------------


class _MessageMixin:
    """Shared (message, cause) constructor contract."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message


class ValidationError(_MessageMixin, ValueError):
    """Base class for failed checks."""


class UncheckedValidationError(ValidationError):
    """
    Optimistic failure.

    Raised by validators whose callers are not expected to handle it locally.
    """


class CheckedValidationError(ValidationError):
    """
    Pessimistic failure.

    Raised by validators whose callers are expected to catch it explicitly.
    """


class ConfigurationError(_MessageMixin, TypeError):
    """Raised when the validator API is misused, never for invalid input."""
