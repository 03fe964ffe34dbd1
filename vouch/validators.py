"""
Vouch Fluent Validators

This module contains the Validator, a chainable value holder for precondition
checks at the top of constructors, setters and public functions, plus the two
preset factories that bind it to an error kind:

    Hope.that(x)  - optimistic, raises UncheckedValidationError
    Doubt.that(x) - pessimistic, raises CheckedValidationError

Every check returns the validator so checks can be chained. The first failing
check raises immediately and the rest of the chain is abandoned.

Example:
    >>> Hope.that(8080).named("port").is_not_null().is_true(lambda p: 0 < p < 65536).value()
    8080
    >>> Hope.that(" ").named("user").is_not_null_or_empty().matches(r"\\w+").value()
    Traceback (most recent call last):
        ...
    vouch.errors.UncheckedValidationError: user must match at least one of the following regular expressions: "\\w+"

A validator instance belongs to the call stack that created it. Sharing one
instance across threads is not supported.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import re
from typing import Any, Callable, Generic, TypeVar

# Local ----------------------------------------------------------------------------------------------------------------
from .emptiness import is_empty
from .errors import CheckedValidationError, ConfigurationError, UncheckedValidationError

__all__ = ["DEFAULT_NAME", "Doubt", "Hope", "Validator"]

logger = logging.getLogger(__name__)

# Constants ------------------------------------------------------------------------------------------------------------

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_NAME = "value"

DEFAULT_TRUE_MESSAGE = "custom validation logic must evaluate to true"
DEFAULT_FALSE_MESSAGE = "custom validation logic must evaluate to false"


# Classes --------------------------------------------------------------------------------------------------------------


class Validator(Generic[T]):
    """
    A validator that is flexible in the type of errors it raises.

    A new Validator should be created for each value being validated, by
    supplying the value and a factory that turns a message into an exception.
    Hope and Doubt provide presets for the two standard error kinds.

    Args:
        value: The value to validate.
        error_factory: Called with the final message; its return value is raised.

    Examples:
        >>> Validator("abc", ValueError).is_not_null_or_empty().value()
        'abc'
        >>> Validator(None, ValueError).named("x").is_not_null()
        Traceback (most recent call last):
            ...
        ValueError: x must not be null
    """

    def __init__(self, value: T, error_factory: Callable[[str], Exception]) -> None:
        self._value = value
        self._error_factory = error_factory
        self._name = DEFAULT_NAME

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, value={self._value!r})"

    # Naming & Access ----------------------------------------------

    @property
    def name(self) -> str:
        """Name of the value, used only in error messages."""
        return self._name

    def named(self, name: str) -> "Validator[T]":
        """
        Name the value being validated.

        Useful when validating several parameters so that errors refer to
        each one by name. Returns this same validator.
        """
        self._name = name
        return self

    def value(self) -> T:
        """Return the value being validated."""
        return self._value

    # Null Checks --------------------------------------------------

    def is_not_null(self) -> "Validator[T]":
        if self._value is None:
            self._invalid(f"{self._name} must not be null")
        return self

    def is_null(self) -> "Validator[T]":
        """Validate that the value is None. Included for symmetry."""
        if self._value is not None:
            self._invalid(f"{self._name} must be null")
        return self

    # Presence Checks ----------------------------------------------

    def is_present(self) -> "Validator[T]":
        """Validate that the value is a Maybe-like container holding a value."""
        if not self._present():
            self._invalid(f"{self._name} must be present")
        return self

    def is_not_present(self) -> "Validator[T]":
        """Validate that the value is a Maybe-like container holding nothing."""
        if self._present():
            self._invalid(f"{self._name} must not be present")
        return self

    def _present(self) -> bool:
        self.is_not_null()
        query = getattr(self._value, "is_present", None)
        if not callable(query):
            self._invalid(f"{self._name} is not an Optional; check for is_present() is not valid.")
        return bool(query())

    # Emptiness ----------------------------------------------------

    def is_not_null_or_empty(self) -> "Validator[T]":
        """
        Validate that the value is neither None nor empty.

        Emptiness is decided by vouch.emptiness.is_empty(), which probes the
        value's shape: sequences, is_empty(), is_present(), size, len() and
        length(). Only the first capability found is consulted.

        Raises:
            ConfigurationError: If the value's type offers no way to probe emptiness.
        """
        self.is_not_null()
        if is_empty(self._value):
            self._invalid(f"{self._name} must not be empty")
        return self

    # Equality -----------------------------------------------------

    def is_equal_to(self, other: T) -> "Validator[T]":
        if not self._equals(other):
            self._invalid(f"{self._name} must be equal to '{other}'")
        return self

    def is_not_equal_to(self, other: T) -> "Validator[T]":
        if self._equals(other):
            self._invalid(f"{self._name} must not be equal to '{other}'")
        return self

    def _equals(self, other: Any) -> bool:
        if self._value is None or other is None:
            return self._value is other
        return bool(self._value == other)

    # Custom Predicates --------------------------------------------

    def is_true(self, test: Callable[[T], Any], message: str | None = None, *args: Any) -> "Validator[T]":
        """
        Validate that test(value) is truthy.

        Args:
            test: Predicate applied to the current value.
            message: Error message. Positional "{}" placeholders are filled
                from args when any are given, otherwise the text is used as is.
            *args: Message arguments.
        """
        if not test(self._value):
            self._invalid(_format(DEFAULT_TRUE_MESSAGE if message is None else message, args))
        return self

    def is_false(self, test: Callable[[T], Any], message: str | None = None, *args: Any) -> "Validator[T]":
        """Validate that test(value) is falsy. See is_true() for message handling."""
        if test(self._value):
            self._invalid(_format(DEFAULT_FALSE_MESSAGE if message is None else message, args))
        return self

    # Patterns -----------------------------------------------------

    def matches(self, regex: str | re.Pattern) -> "Validator[T]":
        """Validate that str(value) fully matches the regex."""
        return self.matches_any(regex)

    def matches_any(self, *regexes: str | re.Pattern) -> "Validator[T]":
        """
        Validate that str(value) fully matches at least one of the regexes.

        Raises:
            ConfigurationError: If no regexes are supplied.
        """
        if not regexes:
            logger.debug("matches_any() called without patterns for %s", self._name)
            raise ConfigurationError("no patterns supplied")
        self.is_not_null()

        text = str(self._value)
        if any(re.fullmatch(regex, text) for regex in regexes):
            return self

        patterns = ", ".join(f'"{_pattern_text(r)}"' for r in regexes)
        self._invalid(f"{self._name} must match at least one of the following regular expressions: {patterns}")
        return self

    # Transforms ---------------------------------------------------

    def or_else(self, default: T) -> "Validator[T]":
        """Replace a None value with default. Never fails."""
        if self._value is None:
            self._value = default
        return self

    def map(self, mapper: Callable[[T], U]) -> "Validator[U]":
        """
        Transform the value into a new validator.

        The new validator keeps this one's name and error kind. Errors raised
        by mapper propagate unchanged.

        Examples:
            >>> Hope.that("12").named("port").map(int).value()
            12
        """
        return Validator(mapper(self._value), self._error_factory).named(self._name)

    # Failure ------------------------------------------------------

    def _invalid(self, message: str) -> None:
        """Build the error for message and raise it."""
        logger.debug("validation of %s failed: %s", self._name, message)
        raise self._error_factory(message)


class Hope(Validator[T]):
    """
    Optimistic validator, raises UncheckedValidationError on failure.

    Examples:
        >>> Hope.that("x").is_not_null_or_empty().value()
        'x'
    """

    def __init__(self, value: T) -> None:
        super().__init__(value, UncheckedValidationError)

    @classmethod
    def that(cls, value: T) -> "Hope[T]":
        return cls(value)


class Doubt(Validator[T]):
    """
    Pessimistic validator, raises CheckedValidationError on failure.

    Callers are expected to catch CheckedValidationError explicitly.

    Examples:
        >>> try:
        ...     Doubt.that("").named("title").is_not_null_or_empty()
        ... except CheckedValidationError as e:
        ...     print(e)
        title must not be empty
    """

    def __init__(self, value: T) -> None:
        super().__init__(value, CheckedValidationError)

    @classmethod
    def that(cls, value: T) -> "Doubt[T]":
        return cls(value)


# Private Methods ------------------------------------------------------------------------------------------------------


def _format(message: str, args: tuple) -> str:
    return message.format(*args) if args else message


def _pattern_text(regex: str | re.Pattern) -> str:
    return regex.pattern if isinstance(regex, re.Pattern) else regex
