"""Kind aware equality between runtime values.

Failures are returned, never raised. A candidate list is evaluated in
order and stops at the first match or the first failure, so a failure
hides any later candidate that would have matched.
"""

__all__ = ["equals", "equal_any", "compare_pair", "deep_equal"]

import decimal
import logging

from ._error import IncompatibleKinds, MissingComparisonOperand, UnsupportedKind
from ._kind import Kind, classify
from ._resolve import resolve
from ._value import as_value

logger = logging.getLogger(__name__)


def equals(value, candidates):
    """Evaluate the comparison value == a || value == b || ...

    Args:
        value: (Value | object) Left side
        candidates: (Sequence) Values to compare against, in order
    Returns:
        (bool, CompareError | None) Whether a candidate matched, and the
        failure that stopped evaluation if any
    """
    value = as_value(value)
    if not candidates:
        return False, MissingComparisonOperand(value)

    left, _ = resolve(value)
    lkind = classify(left)
    if lkind is None:
        failure = UnsupportedKind(left, value)
        logger.debug("Comparison failed: %s", failure)
        return False, failure

    for candidate in candidates:
        candidate = as_value(candidate)
        right, _ = resolve(candidate)
        truth, failure = _compare(left, lkind, right, classify(right))
        if failure is not None:
            failure.left = value
            failure.right = candidate
            logger.debug("Comparison failed: %s", failure)
            return False, failure
        if truth:
            return True, None
    return False, None


def equal_any(value, *values):
    """Report whether value equals one of the values.

    Evaluation stops at the first failure like `equals`, which counts as
    no match.

    Returns:
        (bool) True if a value matched before any failure
    """
    matched, _failure = equals(value, values)
    return matched


def deep_equal(left, right):
    """Compare two values structurally, without resolving references.

    Kinds must match exactly, so a signed and unsigned integer differ, and
    sequences and maps compare element by element.

    Returns:
        (bool) True if both values have the same variant and data
    """
    with decimal.localcontext() as context:
        context.traps[decimal.InvalidOperation] = False
        return as_value(left) == as_value(right)


def compare_pair(left, right):
    """Compare two resolved values.

    Args:
        left: (Value | None) Resolved left value, None for absence
        right: (Value | None) Resolved right value, None for absence
    Returns:
        (bool, CompareError | None) Equality and failure
    """
    lkind = classify(left)
    if lkind is None:
        return False, UnsupportedKind(left)
    return _compare(left, lkind, right, classify(right))


def _compare(left, lkind, right, rkind):
    if rkind is None:
        return False, UnsupportedKind(right)

    if lkind is not rkind:
        # Integers compare regardless of sign, negatives never match
        if lkind is Kind.INT and rkind is Kind.UINT:
            return left.data >= 0 and left.data == right.data, None
        if lkind is Kind.UINT and rkind is Kind.INT:
            return right.data >= 0 and left.data == right.data, None
        return False, IncompatibleKinds(lkind, rkind)

    if lkind is Kind.INVALID:
        # Absence and the invalid handle only equal each other
        return True, None
    if lkind is Kind.FLOAT:
        return _float_equal(left.data, right.data), None
    return left.data == right.data, None


def _float_equal(left, right):
    # Signaling NaN Decimals compare unequal instead of trapping
    with decimal.localcontext() as context:
        context.traps[decimal.InvalidOperation] = False
        return left == right
