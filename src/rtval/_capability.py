"""Capability markers for values that describe themselves as text.

Host objects are wrapped in these adapters when they are converted into
a `Value` at the evaluator boundary. The rest of the package only checks
for the markers, it never inspects host objects for methods.
"""

__all__ = ["TextRenderable", "ErrorLike", "TextAdapter", "ErrorAdapter", "capability_for"]

from abc import ABC, abstractmethod


class TextRenderable(ABC):
    """Marker for values that render themselves as text."""

    @abstractmethod
    def render_text(self) -> str:
        """Return the text representation of the value."""


class ErrorLike(ABC):
    """Marker for values that describe an error."""

    @abstractmethod
    def error_text(self) -> str:
        """Return the error message."""


class TextAdapter(TextRenderable):
    """Render a host object with its own `__str__`."""

    __slots__ = ("obj",)

    def __init__(self, obj):
        self.obj = obj

    def render_text(self) -> str:
        return str(self.obj)

    def __repr__(self):
        return f"TextAdapter({self.obj!r})"


class ErrorAdapter(ErrorLike):
    """Describe a Python exception by its message."""

    __slots__ = ("exc",)

    def __init__(self, exc: BaseException):
        self.exc = exc

    def error_text(self) -> str:
        return str(self.exc)

    def __repr__(self):
        return f"ErrorAdapter({self.exc!r})"


def capability_for(obj):
    """Pick the capability adapter for a host object.

    Args:
        obj: (object) Host object being converted into a Value
    Returns:
        (TextRenderable | ErrorLike | None) Capability, or None when the
        object has no text form of its own
    """
    if isinstance(obj, (TextRenderable, ErrorLike)):
        return obj
    if isinstance(obj, BaseException):
        return ErrorAdapter(obj)
    if type(obj).__str__ is not object.__str__:
        return TextAdapter(obj)
    return None
