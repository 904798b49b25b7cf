"""Read runtime values from a compact literal notation.

This is a boundary adapter for building Value handles from text, used by
the command line and tests. It is not an expression language, literals
are data only.

    true false nil invalid <func> <chan>
    -3 5u 1.5 2e3 2j (1+2j) "text"
    [1, 2] {"key": 1, name: 2} &value
"""

__all__ = ["parse_value"]

import ast
import queue
import threading

import lark

from ._error import ParseError
from ._value import Unsigned, Value

# Shared parser, built on first use
_parser: lark.Lark | None = None
_parser_lock = threading.Lock()


def parse_value(text):
    """Parse a value literal.

    Args:
        text: (str) Literal source
    Returns:
        (Value) The value described by the literal
    Raises:
        rtval.ParseError: If the text contains invalid syntax
    """
    try:
        tree = _lark_parser().parse(text)
        return _ValueBuilder().transform(tree)
    except lark.exceptions.UnexpectedInput as e:
        raise ParseError(str(e), getattr(e, "pos_in_stream", None)) from e
    except lark.exceptions.VisitError as e:
        # Errors from converting a token, like a bad string escape
        if isinstance(e.orig_exc, ParseError):
            raise e.orig_exc from e
        raise ParseError(str(e.orig_exc)) from e
    except lark.exceptions.LarkError as e:
        raise ParseError(str(e)) from e


def _lark_parser():
    """Get the globally shared lark parser.

    Returns:
        (lark.Lark) Parser instance
    """
    global _parser
    with _parser_lock:
        if _parser is None:
            _parser = lark.Lark.open("lark/value.lark", rel_to=__file__, parser="lalr")
    return _parser


def _func_literal(*args, **kwargs):
    """Stand-in function handle for the <func> literal."""
    return None


@lark.v_args(inline=True)
class _ValueBuilder(lark.Transformer):
    """Convert the lark tree into Values, children first."""

    def start(self, value):
        return value

    def true(self):
        return Value(True)

    def false(self):
        return Value(False)

    def nil(self):
        return Value.nil()

    def invalid(self):
        return Value.invalid()

    def func(self):
        return Value(_func_literal)

    def chan(self):
        return Value.channel(queue.SimpleQueue())

    def unsigned(self, token):
        return Value(Unsigned(int(token[:-1])))

    def integer(self, token):
        return Value(int(token))

    def floating(self, token):
        return Value(float(token))

    def imaginary(self, token):
        return Value(complex(token))

    def complex_number(self, real, imag):
        if imag[0] not in "+-":
            imag = "+" + imag
        return Value(complex(f"{real}{imag}"))

    def string(self, token):
        return Value(_unquote(token))

    def sequence(self, *items):
        return Value(list(items))

    def mapping(self, *pairs):
        return Value(dict(pairs))

    def pair(self, key, value):
        match key.type:
            case "STRING":
                key = _unquote(key)
            case "INT":
                key = int(key)
            case _:
                key = str(key)
        return key, value

    def reference(self, value):
        return Value.reference(value)


def _unquote(token):
    try:
        return ast.literal_eval(str(token))
    except (SyntaxError, ValueError) as e:
        raise ParseError(f"Invalid string literal {token}: {e}", token.start_pos) from e
