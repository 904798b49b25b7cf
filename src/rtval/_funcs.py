"""Named function table handed to a template engine."""

__all__ = ["default_funcs", "combined", "add_funcs"]

import unicodedata

from ._equal import deep_equal, equal_any, equals
from ._member import has, has_any
from ._printable import join, make_map, repeat
from ._truth import coalesce, is_default, is_empty, is_true, yes_no


def eq(value, *candidates):
    """Template equality, raising the comparison failure if there is one.

    The evaluator stops on a failed comparison, where `rtval.equals`
    leaves that decision to its caller.
    """
    matched, failure = equals(value, candidates)
    if failure is not None:
        raise failure
    return matched


def default_funcs():
    """Create the default function table.

    Returns:
        (dict) New mapping of function name to callable
    """
    return {
        "is_true": is_true,
        "is_empty": is_empty,
        "is_default": is_default,
        "yesno": yes_no,
        "ternary": yes_no,
        "coalesce": coalesce,
        "has": has,
        "has_any": has_any,
        "eq": eq,
        "eq_any": equal_any,
        "deep_eq": deep_equal,
        "repeat": repeat,
        "join2": join,
        "map": make_map,
    }


def combined(*tables):
    """Merge function tables, later tables override earlier names."""
    result = {}
    for table in tables:
        result.update(table)
    return result


def add_funcs(out, funcs):
    """Add the functions in funcs to the out table.

    Args:
        out: (dict) Table to update
        funcs: (dict) Mapping of name to callable
    Raises:
        ValueError: If a name is not a valid identifier
        TypeError: If a function is not callable
    """
    for name, func in funcs.items():
        if not _good_name(name):
            raise ValueError(f"{name!r} is not a good name")
        if not callable(func):
            raise TypeError(f"{func!r} is not a good func")
        out[name] = func


def _good_name(name):
    """Names are letters, digits and underscores, not starting with a digit."""
    if not isinstance(name, str) or not name:
        return False
    for i, char in enumerate(name):
        if char == "_" or char.isalpha():
            continue
        if i == 0 or unicodedata.category(char) != "Nd":
            return False
    return True
