"""
Vouch utilities shared across the package.

Contains helpers used by multiple modules to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------


def class_name(obj: Any, fully_qualified: bool = False) -> str:
    """
    Get the class name of an object or a class.

    Builtins are never module-qualified, so both `class_name(10)` and
    `class_name(10, fully_qualified=True)` return 'int'.

    Parameters:
        obj (Any): An object or a class.
        fully_qualified (bool): If true, prefix user classes with their module name.

    Returns:
        str: The class name.

    Examples:
        >>> class_name(10)
        'int'
        >>> class_name(int, fully_qualified=True)
        'int'
        >>> class Probe: ...
        >>> class_name(Probe(), fully_qualified=True)
        'vouch.utils.Probe'
    """
    cls = obj if isinstance(obj, type) else type(obj)
    module = getattr(cls, "__module__", None)

    if not fully_qualified or not module or module == "builtins":
        return cls.__name__
    return f"{module}.{cls.__name__}"
