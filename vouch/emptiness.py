"""
Emptiness inspection for arbitrary values.

Decides whether a value counts as "empty" without requiring it to implement
any declared interface. A fixed, ordered table of probes is consulted; each
probe recognises one capability shape and either returns a verdict or reports
that it does not apply. The first applicable probe is authoritative and the
remaining ones are never called, so two capabilities that disagree can never
both be consulted.

Probe order:
    1. Array-like sequences (list, tuple, str, bytes, array.array, memoryview, ...)
    2. bool is_empty() method, bool empty attribute (pandas style)
    3. bool is_present() method (Maybe style, absent means empty)
    4. int size() method, int size attribute (NumPy style)
    5. int __len__() (sized containers), int length() method
"""

# Standard library -----------------------------------------------------------------------------------------------------
import array
import collections.abc as abc
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import ConfigurationError
from .utils import class_name

__all__ = ["EMPTINESS_PROBES", "EmptinessProbe", "is_empty"]

logger = logging.getLogger(__name__)

_ARRAY_TYPES = (abc.Sequence, array.array, memoryview, bytes, bytearray, str)


# Classes --------------------------------------------------------------------------------------------------------------


@dataclass(frozen=True)
class EmptinessProbe:
    """
    One capability shape the inspector knows how to query.

    Attributes:
        signature: Human-readable signature listed in error messages, e.g. "int size()".
        probe: Returns True/False for empty/non-empty, or None if the shape does not apply.
    """

    signature: str
    probe: Callable[[Any], bool | None]

    def __str__(self) -> str:
        return self.signature


# Private Methods ------------------------------------------------------------------------------------------------------


def _query(value: Any, attr: str, returns: type) -> Any:
    """Call a zero-argument method if present and its result has the expected type, else None."""
    method = getattr(type(value), attr, None)
    if method is None or not callable(method):
        return None
    bound = getattr(value, attr)
    if not _takes_no_args(bound, returns):
        return None
    result = bound()
    return result if _is_type(result, returns) else None


def _takes_no_args(method: Callable, returns: type) -> bool:
    """False if the method needs arguments or is annotated to return another type."""
    try:
        sig = inspect.signature(method)
    except (TypeError, ValueError):
        # builtins without introspectable signatures
        return True
    try:
        sig.bind()
    except TypeError:
        return False
    annotation = sig.return_annotation
    if isinstance(annotation, type) and annotation is not inspect.Signature.empty:
        if returns is int:
            return issubclass(annotation, int) and not issubclass(annotation, bool)
        return issubclass(annotation, returns)
    return True


def _field(value: Any, attr: str, returns: type) -> Any:
    """Read a plain (non-callable) attribute if it has the expected type, else None."""
    try:
        result = getattr(value, attr)
    except AttributeError:
        return None
    if callable(result):
        return None
    return result if _is_type(result, returns) else None


def _is_type(result: Any, returns: type) -> bool:
    # bool is an int subclass, never accept it as a count
    if returns is int:
        return isinstance(result, int) and not isinstance(result, bool)
    return isinstance(result, returns)


def _equals(result: Any, indicator: Any) -> bool | None:
    return None if result is None else result == indicator


def _array_like(value: Any) -> bool | None:
    if isinstance(value, _ARRAY_TYPES):
        return len(value) == 0
    return None


def _sized(value: Any) -> bool | None:
    if not isinstance(value, abc.Sized):
        return None
    return _equals(_query(value, "__len__", int), 0)


EMPTINESS_PROBES: tuple[EmptinessProbe, ...] = (
    EmptinessProbe("array-like sequence", _array_like),
    EmptinessProbe("bool is_empty()", lambda v: _equals(_query(v, "is_empty", bool), True)),
    EmptinessProbe("bool empty", lambda v: _equals(_field(v, "empty", bool), True)),
    EmptinessProbe("bool is_present()", lambda v: _equals(_query(v, "is_present", bool), False)),
    EmptinessProbe("int size()", lambda v: _equals(_query(v, "size", int), 0)),
    EmptinessProbe("int size", lambda v: _equals(_field(v, "size", int), 0)),
    EmptinessProbe("int __len__()", _sized),
    EmptinessProbe("int length()", lambda v: _equals(_query(v, "length", int), 0)),
)


# Methods --------------------------------------------------------------------------------------------------------------


def is_empty(value: Any) -> bool:
    """
    Decide whether a non-None value is empty.

    Args:
        value: Any object except None.

    Returns:
        True if the first applicable probe reports the value as empty.

    Raises:
        ConfigurationError: If no probe applies to the value's type.

    Examples:
        >>> is_empty([])
        True
        >>> is_empty({"a": 1})
        False
        >>> is_empty(object())
        Traceback (most recent call last):
            ...
        vouch.errors.ConfigurationError: class object does not provide any emptiness checkers ...
    """
    for probe in EMPTINESS_PROBES:
        verdict = probe.probe(value)
        if verdict is not None:
            return verdict

    message = "class %s does not provide any emptiness checkers matching any of: %s" % (
        class_name(value, fully_qualified=True),
        ", ".join(str(p) for p in EMPTINESS_PROBES),
    )
    logger.debug(message)
    raise ConfigurationError(message)
