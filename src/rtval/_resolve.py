"""Follow reference layers down to a concrete value."""

__all__ = ["resolve", "resolve_addressable"]

import logging

from ._value import Variant, as_value

logger = logging.getLogger(__name__)


def resolve(value):
    """Unwrap references until a concrete value or absence is found.

    Args:
        value: (Value | object) Handle or host data
    Returns:
        (Value | None, bool) The concrete value and False, or None and
        True when a reference to nothing was reached
    """
    concrete, _holder, absent = resolve_addressable(value)
    return concrete, absent


def resolve_addressable(value):
    """Unwrap references, also reporting the innermost reference.

    The innermost reference is the layer the concrete value was reached
    through. Its capability applies to the concrete value when the value
    itself has none.

    Args:
        value: (Value | object) Handle or host data
    Returns:
        (Value | None, Value | None, bool) Concrete value, innermost
        reference (None if the value was not behind one), absent flag
    """
    value = as_value(value)
    holder = None
    seen = set()
    while value.variant is Variant.REFERENCE:
        if value.data is None:
            return None, holder, True
        if id(value) in seen:
            logger.debug("Reference cycle treated as absent: %r", holder)
            return None, holder, True
        seen.add(id(value))
        holder = value
        value = value.data
    return value, holder, False
