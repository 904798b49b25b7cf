"""Pick the best textual representation of runtime values.

Public API
----------
printable_value(v)      → host value best suited for formatting
render_text(v)          → str rendering used by formatting helpers
repeat(n, v)            → str of v rendered n times
join(sep, *values)      → str of values joined, collections flattened
make_map(*pairs)        → dict built from key/value pairs
"""

__all__ = ["printable_value", "render_text", "repeat", "join", "make_map", "NO_VALUE"]

from ._capability import ErrorLike, TextRenderable
from ._resolve import resolve, resolve_addressable
from ._value import Variant, as_value

NO_VALUE = "<no value>"


def printable_value(value):
    """Return the value inside `value` that is best for formatted output.

    Absent and invalid values render as an empty string. A value that
    describes itself as text (or was reached through a reference that
    does) uses that text. Functions and channels have no printable form
    and give None.

    Args:
        value: (Value | object) Handle or host data
    Returns:
        (object | None) Text, host value, or None for no value
    """
    concrete, holder, absent = resolve_addressable(value)
    if absent or concrete.variant is Variant.INVALID:
        return ""

    text = _capability_text(concrete.capability)
    if text is None and holder is not None:
        text = _capability_text(holder.capability)
    if text is not None:
        return text

    if concrete.variant in (Variant.FUNC, Variant.CHAN):
        return None
    return concrete.to_python()


def render_text(value):
    """Render a value as text.

    Args:
        value: (Value | object) Handle or host data
    Returns:
        (str) Text form of the printable value
    """
    value = as_value(value)
    concrete, absent = resolve(value)
    printable = printable_value(value)
    if isinstance(printable, str):
        return printable
    if not absent and concrete.variant in (Variant.SEQUENCE, Variant.MAP):
        return _format_collection(concrete)
    return _format(printable)


def repeat(n, value):
    """Repeat the text of value n times."""
    if n <= 0:
        return ""
    return render_text(value) * n


def join(sep, *values):
    """Join the text of values together.

    Strings are joined whole. Sequences and maps are flattened one level,
    maps contribute their values. If any value is absent the result is
    an empty string.

    Args:
        sep: (str) Separator
        *values: Handles or host data
    Returns:
        (str) Joined text
    """
    parts = []
    for value in values:
        concrete, absent = resolve(value)
        if absent:
            return ""
        match concrete.variant:
            case Variant.STRING:
                parts.append(concrete.data)
            case Variant.SEQUENCE:
                parts.extend(render_text(item) for item in concrete.data)
            case Variant.MAP:
                parts.extend(render_text(item) for item in concrete.data.values())
            case _:
                parts.append(render_text(concrete))
    return sep.join(parts)


def make_map(*pairs):
    """Build a dict from alternating keys and values.

    Keys are rendered as text. A trailing key without a value maps to an
    empty string.

    Returns:
        (dict) Mapping of str keys to the given values
    """
    result = {}
    for i in range(0, len(pairs), 2):
        key = render_text(pairs[i])
        if i + 1 >= len(pairs):
            result[key] = ""
            continue
        result[key] = pairs[i + 1]
    return result


def _capability_text(capability):
    if isinstance(capability, ErrorLike):
        return capability.error_text()
    if isinstance(capability, TextRenderable):
        return capability.render_text()
    return None


def _format(printable):
    if printable is None:
        return NO_VALUE
    if isinstance(printable, bool):
        return "true" if printable else "false"
    return str(printable)


def _format_collection(concrete):
    if concrete.variant is Variant.SEQUENCE:
        return "[" + " ".join(render_text(item) for item in concrete.data) + "]"
    fields = (f"{render_text(key)}={render_text(item)}" for key, item in concrete.data.items())
    return "{" + " ".join(fields) + "}"
