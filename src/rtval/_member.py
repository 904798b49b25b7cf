"""Membership tests of values within strings, sequences and maps."""

__all__ = ["has", "has_any"]

import logging

from ._equal import compare_pair
from ._kind import CollectionShape, collection_shape
from ._printable import render_text
from ._resolve import resolve
from ._value import Variant, as_value

logger = logging.getLogger(__name__)


def has(collection, *values):
    """Check whether all the values exist in the collection.

    The collection must be a string, sequence or map. Anything else never
    contains a value.

    Args:
        collection: (Value | object) Collection to search
        *values: Values that must all be present
    Returns:
        (bool) True if every value is a member
    """
    collection = as_value(collection)
    return all(_contains(collection, value) for value in values)


def has_any(collection, *values):
    """Check whether one of the values exists in the collection."""
    collection = as_value(collection)
    return any(_contains(collection, value) for value in values)


def _contains(collection, value):
    """Test a single value for membership.

    Strings are searched for the text of the value. Sequences and maps
    compare each element (map values, not keys) with the value; a failed
    comparison only means that element is not a match.
    """
    coll, absent = resolve(collection)
    if absent:
        return False

    target, target_absent = resolve(value)
    match collection_shape(coll):
        case CollectionShape.STRING:
            if target_absent or target.variant is Variant.INVALID:
                return False
            return render_text(target) in coll.data
        case CollectionShape.SEQUENCE:
            elements = coll.data
        case CollectionShape.MAP:
            elements = coll.data.values()
        case _:
            return False

    target_invalid = target is not None and target.variant is Variant.INVALID
    for element in elements:
        item, item_absent = resolve(element)
        if target_absent and item_absent:
            return True
        if target_invalid and item is not None and item.variant is Variant.INVALID:
            return True
        truth, failure = compare_pair(target, item)
        if failure is not None:
            logger.debug("Skipping element %r: %s", element, failure)
            continue
        if truth:
            return True
    return False
