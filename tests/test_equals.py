"""Test kind aware equality"""

import math
from decimal import Decimal
from fractions import Fraction

import valtest
from valtest import lit

import rtval
from rtval import Unsigned, Value


@valtest.params(
    "left right expected",
    bool_same=(True, True, True),
    bool_diff=(True, False, False),
    int_same=(5, 5, True),
    int_diff=(5, -5, False),
    uint_same=(Unsigned(5), Unsigned(5), True),
    float_same=(1.5, 1.5, True),
    float_diff=(1.5, 2.5, False),
    complex_same=(1 + 2j, 1 + 2j, True),
    complex_diff=(1 + 2j, 1 - 2j, False),
    string_same=("cat", "cat", True),
    string_case=("cat", "Cat", False),
    absent=(None, None, True),
)
def test_same_kind(key, left, right, expected):
    assert rtval.equals(left, [right]) == (expected, None)


def test_nan_never_equal():
    assert rtval.equals(math.nan, [math.nan]) == (False, None)
    assert rtval.equals(Decimal("NaN"), [Decimal("NaN")]) == (False, None)


@valtest.params(
    "left right expected",
    decimal_same=(Decimal("1.5"), Decimal("1.50"), True),
    decimal_float=(Decimal("1.5"), 1.5, True),
    decimal_diff=(Decimal("1.5"), Decimal("2.5"), False),
    fraction_float=(Fraction(1, 2), 0.5, True),
    fraction_decimal=(Fraction(1, 2), Decimal("0.5"), True),
    fraction_diff=(Fraction(1, 3), 0.3, False),
    float_decimal_nan=(1.5, Decimal("NaN"), False),
)
def test_decimal_fraction(key, left, right, expected):
    assert rtval.equals(left, [right]) == (expected, None)


def test_signaling_nan():
    assert rtval.equals(Decimal("sNaN"), [Decimal("1")]) == (False, None)
    assert rtval.equals(Decimal("sNaN"), [Decimal("sNaN")]) == (False, None)
    assert rtval.equals(1.5, [Decimal("sNaN"), 1.5]) == (True, None)
    assert not rtval.deep_equal([Decimal("sNaN")], [Decimal("sNaN")])


@valtest.params(
    "left right expected",
    int_uint=(5, Unsigned(5), True),
    uint_int=(Unsigned(5), 5, True),
    int_uint_diff=(5, Unsigned(6), False),
    negative=(-1, Unsigned(1), False),
    negative_rev=(Unsigned(1), -1, False),
    zero=(0, Unsigned(0), True),
)
def test_signed_unsigned(key, left, right, expected):
    """Integers compare across sign, negatives never equal unsigned."""
    assert rtval.equals(left, [right]) == (expected, None)


@valtest.params(
    "left right",
    int_float=(1, 1.0),
    int_string=(1, "1"),
    bool_int=(True, 1),
    string_bool=("true", True),
    float_complex=(1.0, 1 + 0j),
    absent_int=(None, 0),
    int_absent=(0, None),
    invalid_string=(Value.invalid(), ""),
)
def test_incompatible(key, left, right):
    failure = valtest.assert_fails(rtval.equals(left, [right]), rtval.IncompatibleKinds)
    assert failure.left is not None
    assert failure.right is not None


@valtest.params(
    "left right",
    list_left=([1], 1),
    list_right=(1, [1]),
    map_right=("a", {"a": 1}),
    func_left=(print, 1),
    object_right=(1, object()),
    chan_right=(1, Value.channel(object())),
    absent_list=(None, [1]),
)
def test_unsupported(key, left, right):
    valtest.assert_fails(rtval.equals(left, [right]), rtval.UnsupportedKind)


def test_missing_operand():
    valtest.assert_fails(rtval.equals(1, []), rtval.MissingComparisonOperand, match="missing")


def test_invalid_equals_invalid():
    assert rtval.equals(Value.invalid(), [Value.invalid()]) == (True, None)
    assert rtval.equals(Value.invalid(), [None]) == (True, None)


def test_references_resolved():
    left = Value.reference(Value.reference(3))
    assert rtval.equals(left, [Value.reference(Unsigned(3))]) == (True, None)
    assert rtval.equals(Value.reference(Value.nil()), [None]) == (True, None)


def test_first_match_wins():
    """A match stops evaluation before a later incompatible candidate."""
    assert rtval.equals(2, [1, 2, "x"]) == (True, None)


def test_no_match():
    assert rtval.equals(4, [1, 2, 3]) == (False, None)


def test_first_failure_aborts():
    """A failure hides candidates that would have matched after it."""
    result = rtval.equals(1, ["x", 1])
    failure = valtest.assert_fails(result, rtval.IncompatibleKinds)
    assert failure.left_kind is rtval.Kind.INT
    assert failure.right_kind is rtval.Kind.STRING
    assert failure.right == Value("x")


def test_failure_never_raised():
    matched, failure = rtval.equals([1], [[1]])
    assert matched is False
    assert isinstance(failure, Exception)


def test_literals():
    assert rtval.equals(lit("5"), [lit("5u")]) == (True, None)
    assert rtval.equals(lit("-1"), [lit("1u")]) == (False, None)
    assert rtval.equals(lit('&"a"'), [lit('"b"'), lit('"a"')]) == (True, None)


@valtest.params(
    "value values expected",
    found=(2, (1, 2, 3), True),
    missing=("a", ("b", "c"), False),
    empty=(1, (), False),
    mixed_sign=(3, (Unsigned(3),), True),
    stops_on_failure=(1, ("x", 1), False),
)
def test_equal_any(key, value, values, expected):
    assert rtval.equal_any(value, *values) is expected


@valtest.params(
    "left right expected",
    same=(5, 5, True),
    signed_unsigned=(5, Unsigned(5), False),
    nested=([1, {"a": "x"}], [1, {"a": "x"}], True),
    nested_diff=([1, {"a": "x"}], [1, {"a": "y"}], False),
    kinds=(1, "1", False),
    reference=(Value.reference(1), 1, False),
)
def test_deep_equal(key, left, right, expected):
    assert rtval.deep_equal(left, right) is expected
