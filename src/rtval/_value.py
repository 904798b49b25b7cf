"""Runtime value handles passed in from the expression evaluator."""

__all__ = ["Value", "Variant", "Unsigned", "as_value"]

import asyncio
import decimal
import enum
import fractions
import functools
import inspect
import queue

from ._capability import capability_for


class Variant(enum.Enum):
    """Tagged union variants a Value can hold."""
    BOOL = "bool"
    INT = "int"
    UINT = "uint"
    FLOAT = "float"
    COMPLEX = "complex"
    STRING = "string"
    SEQUENCE = "sequence"
    MAP = "map"
    REFERENCE = "reference"
    FUNC = "func"
    CHAN = "chan"
    OBJECT = "object"
    INVALID = "invalid"


class Unsigned(int):
    """Integer marked as unsigned.

    Python has a single integer type, so unsigned values coming from a
    host are tagged with this subclass before conversion.

    Raises:
        ValueError: If the number is negative
    """
    __slots__ = ()

    def __new__(cls, value=0):
        number = super().__new__(cls, value)
        if number < 0:
            raise ValueError(f"Unsigned value cannot be negative: {int(number)}")
        return number

    def __repr__(self):
        return f"{int(self)}u"

    def __str__(self):
        return int.__repr__(self)


_channel_types = (queue.Queue, queue.SimpleQueue, asyncio.Queue)
_float_types = (float, decimal.Decimal, fractions.Fraction)
_sequence_types = (list, tuple, set, frozenset)


class Value:
    """Runtime value of unknown static shape.

    A Value is built once at the evaluator boundary from host data and
    is read-only afterwards. Python data is converted by the constructor,
    the special variants without a Python equivalent have classmethod
    constructors (`reference`, `nil`, `invalid`, `channel`).

    Conversions:
        - bool: BOOL
        - Unsigned: UINT
        - int: INT
        - float, Decimal, Fraction: FLOAT
        - complex: COMPLEX
        - str: STRING
        - list, tuple, set, frozenset: SEQUENCE of Values
        - dict: MAP of original keys to Values
        - None: absent REFERENCE
        - functions, methods, partials: FUNC
        - queue.Queue, asyncio.Queue: CHAN
        - anything else: OBJECT

    Args:
        data: The host data to convert
        capability: Optional TextRenderable or ErrorLike. Objects get one
            assigned automatically when they have a text form.
    Attributes:
        variant: (Variant) Which kind of data is held
        data: The underlying data
        capability: (TextRenderable | ErrorLike | None) Text capability
    """
    __slots__ = ("variant", "data", "capability")

    def __init__(self, data, capability=None):
        if isinstance(data, Value):
            # Handles are shared, never wrapped. Use `as_value` for data
            # that may already be converted.
            raise TypeError(f"Value init called with existing Value {data!r}")

        variant, data = _convert(data)
        if capability is None and variant is Variant.OBJECT:
            capability = capability_for(data)
        self.variant = variant
        self.data = data
        self.capability = capability

    @classmethod
    def _make(cls, variant, data, capability=None):
        value = cls.__new__(cls)
        value.variant = variant
        value.data = data
        value.capability = capability
        return value

    @classmethod
    def reference(cls, inner=None, capability=None):
        """Create a reference to another value.

        Args:
            inner: (Value | object | None) Target, None for an absent reference
            capability: Optional capability of the reference itself
        Returns:
            (Value) Reference handle
        """
        if inner is not None:
            inner = as_value(inner)
        return cls._make(Variant.REFERENCE, inner, capability)

    @classmethod
    def nil(cls):
        """(Value) Reference to nothing."""
        return cls._make(Variant.REFERENCE, None)

    @classmethod
    def invalid(cls):
        """(Value) The zero handle, holding no value at all."""
        return cls._make(Variant.INVALID, None)

    @classmethod
    def channel(cls, handle):
        """(Value) Channel-like communication handle."""
        return cls._make(Variant.CHAN, handle)

    @property
    def is_reference(self) -> bool:
        return self.variant is Variant.REFERENCE

    @property
    def is_nil(self) -> bool:
        """(bool) True for a reference to nothing."""
        return self.variant is Variant.REFERENCE and self.data is None

    def to_python(self):
        """Convert this value back to a Python equivalent.

        References convert to their target, absent references and the
        invalid handle convert to None.

        Returns:
            (object) Converted python value
        """
        match self.variant:
            case Variant.SEQUENCE:
                return [item.to_python() for item in self.data]
            case Variant.MAP:
                return {key: item.to_python() for key, item in self.data.items()}
            case Variant.REFERENCE:
                if self.data is None:
                    return None
                return self.data.to_python()
            case Variant.INVALID:
                return None
        return self.data

    def __repr__(self):
        match self.variant:
            case Variant.REFERENCE:
                if self.data is None:
                    return "Value(&nil)"
                return f"Value(&{self.data!r})"
            case Variant.INVALID:
                return "Value(<invalid>)"
            case Variant.FUNC | Variant.CHAN:
                return f"Value(<{self.variant.value}>)"
        return f"Value({self.data!r})"

    def __eq__(self, other):
        if not isinstance(other, Value):
            return False
        return self.variant is other.variant and self.data == other.data

    def __hash__(self):
        if self.variant is Variant.MAP:
            # Dicts aren't hashable and keys may not sort
            return hash((self.variant, len(self.data)))
        return hash((self.variant, self.data))


def as_value(data):
    """Convert host data to a Value, passing existing Values through.

    Args:
        data: (Value | object) Host data or an existing handle
    Returns:
        (Value) Handle for the data
    """
    if isinstance(data, Value):
        return data
    return Value(data)


def _convert(data):
    """Pick the variant for host data and convert its contents.

    Args:
        data: Host data, never a Value
    Returns:
        (Variant, object) The variant and the stored data
    """
    if data is None:
        return Variant.REFERENCE, None
    # bool is an int subclass, check it first
    if isinstance(data, bool):
        return Variant.BOOL, data
    if isinstance(data, Unsigned):
        return Variant.UINT, data
    if isinstance(data, int):
        return Variant.INT, data
    if isinstance(data, _float_types):
        return Variant.FLOAT, data
    if isinstance(data, complex):
        return Variant.COMPLEX, data
    if isinstance(data, str):
        return Variant.STRING, data
    if isinstance(data, _sequence_types):
        return Variant.SEQUENCE, tuple(as_value(item) for item in data)
    if isinstance(data, dict):
        return Variant.MAP, {key: as_value(item) for key, item in data.items()}
    if inspect.isroutine(data) or isinstance(data, functools.partial):
        return Variant.FUNC, data
    if isinstance(data, _channel_types):
        return Variant.CHAN, data
    return Variant.OBJECT, data
