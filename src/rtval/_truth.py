"""Truthiness of runtime values and the helpers built on it.

A value is true when it is not the zero value of its kind. This never
fails: every value is either true or false.
"""

__all__ = ["is_true", "is_empty", "yes_no", "coalesce", "is_default"]

from ._resolve import resolve
from ._value import Variant


def is_true(value):
    """Report whether the value holds something meaningful.

    False, zero numbers, empty strings, empty sequences and maps, absent
    references and the invalid handle are false. Everything else,
    including functions, channels and objects, is true. References are
    followed first, so a reference to a zero value is false.

    Args:
        value: (Value | object) Handle or host data
    Returns:
        (bool) Truth of the value
    """
    concrete, absent = resolve(value)
    if absent:
        return False
    match concrete.variant:
        case Variant.BOOL:
            return concrete.data
        case Variant.INT | Variant.UINT | Variant.FLOAT | Variant.COMPLEX:
            return bool(concrete.data)
        case Variant.STRING | Variant.SEQUENCE | Variant.MAP:
            return len(concrete.data) > 0
        case Variant.INVALID:
            return False
    return True


def is_empty(value):
    """Report whether the value holds nothing meaningful, opposite of is_true."""
    return not is_true(value)


def yes_no(condition, when_true, when_false):
    """Return when_true if the condition is true, otherwise when_false."""
    if is_true(condition):
        return when_true
    return when_false


def coalesce(*values):
    """Return the first true value, or None if there is none."""
    for value in values:
        if is_true(value):
            return value
    return None


def is_default(default, value):
    """Return the default when value is empty, otherwise the value."""
    if is_empty(value):
        return default
    return value
