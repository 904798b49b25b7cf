"""Classify concrete values for comparison and membership."""

__all__ = ["Kind", "CollectionShape", "classify", "collection_shape"]

import enum

from ._value import Variant


class Kind(enum.Enum):
    """Closed set of kinds that scalar equality understands."""
    INVALID = "invalid"
    BOOL = "bool"
    INT = "int"
    UINT = "uint"
    FLOAT = "float"
    COMPLEX = "complex"
    STRING = "string"


class CollectionShape(enum.Enum):
    """How a value is searched by membership tests."""
    STRING = "string"
    SEQUENCE = "sequence"
    MAP = "map"
    OTHER = "other"


_kinds = {
    Variant.INVALID: Kind.INVALID,
    Variant.BOOL: Kind.BOOL,
    Variant.INT: Kind.INT,
    Variant.UINT: Kind.UINT,
    Variant.FLOAT: Kind.FLOAT,
    Variant.COMPLEX: Kind.COMPLEX,
    Variant.STRING: Kind.STRING,
}

_shapes = {
    Variant.STRING: CollectionShape.STRING,
    Variant.SEQUENCE: CollectionShape.SEQUENCE,
    Variant.MAP: CollectionShape.MAP,
}


def classify(concrete):
    """Map a resolved value to its comparison kind.

    Collections, functions, channels and objects are never comparable as
    scalars, they return None. Collections are only searched through
    membership.

    Args:
        concrete: (Value | None) Resolved value, None for absence
    Returns:
        (Kind | None) Comparison kind, or None when unsupported
    """
    if concrete is None:
        return Kind.INVALID
    return _kinds.get(concrete.variant)


def collection_shape(concrete):
    """(CollectionShape) Membership shape of a resolved value."""
    if concrete is None:
        return CollectionShape.OTHER
    return _shapes.get(concrete.variant, CollectionShape.OTHER)
