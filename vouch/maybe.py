"""
Maybe: a container holding zero or one value.

Python has no built-in optional container, and None cannot tell "absent" from
"present but empty". Maybe fills that gap for the presence checks in the
validators module, and for any object exposing an `is_present()` query.

Example:
    >>> Maybe.of("x").is_present()
    True
    >>> Maybe.empty() is Maybe.of_nullable(None)
    True
    >>> Maybe.empty().or_else("fallback")
    'fallback'
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any, Generic, TypeVar

__all__ = ["Maybe"]

T = TypeVar("T")

_ABSENT = object()


# Classes --------------------------------------------------------------------------------------------------------------


class Maybe(Generic[T]):
    """
    Immutable holder of zero or one value.

    Use the factories rather than the constructor. The empty Maybe is a
    singleton, so identity checks against Maybe.empty() are safe.
    """

    __slots__ = ("_value",)

    _empty: "Maybe | None" = None

    def __init__(self, value: Any = _ABSENT) -> None:
        object.__setattr__(self, "_value", value)

    # Factories ----------------------------------------------------

    @classmethod
    def of(cls, value: T) -> "Maybe[T]":
        """Wrap a value that must not be None."""
        if value is None:
            raise ValueError("Maybe.of() requires a value, use Maybe.of_nullable() for None")
        return cls(value)

    @classmethod
    def of_nullable(cls, value: T | None) -> "Maybe[T]":
        """Wrap a value, returning the empty Maybe for None."""
        return cls.empty() if value is None else cls(value)

    @classmethod
    def empty(cls) -> "Maybe[Any]":
        """Return the shared empty Maybe."""
        if Maybe._empty is None:
            Maybe._empty = Maybe()
        return Maybe._empty

    # Queries ------------------------------------------------------

    def is_present(self) -> bool:
        return self._value is not _ABSENT

    def is_empty(self) -> bool:
        return self._value is _ABSENT

    def get(self) -> T:
        """Return the held value, raise LookupError if absent."""
        if self._value is _ABSENT:
            raise LookupError("no value present")
        return self._value

    def or_else(self, default: T) -> T:
        return default if self._value is _ABSENT else self._value

    # Dunders ------------------------------------------------------

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self._value is other._value or self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value) if self.is_present() else 0

    def __bool__(self) -> bool:
        return self.is_present()

    def __repr__(self) -> str:
        if self._value is _ABSENT:
            return "Maybe.empty()"
        return f"Maybe({self._value!r})"

    def __reduce__(self) -> tuple:
        """Unpickle the empty Maybe back to the singleton."""
        if self._value is _ABSENT:
            return (Maybe.empty, ())
        return (Maybe, (self._value,))
