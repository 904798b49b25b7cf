"""Error classes and helpers"""

__all__ = [
    "CompareError",
    "MissingComparisonOperand",
    "UnsupportedKind",
    "IncompatibleKinds",
    "EvalError",
    "ParseError",
]


class EvalError(Exception):
    """Error in internal processing of runtime values."""


class CompareError(Exception):
    """Failure reported by an equality comparison.

    These are returned as values from `rtval.equals` rather than raised.
    The caller decides whether a failure aborts evaluation.

    Args:
        message: (str) Error description
        left: (Value | None) Left side of the failed comparison
        right: (Value | None) Right side of the failed comparison

    Attributes:
        message: (str) Error description
        left: (Value | None) Left side of the failed comparison
        right: (Value | None) Right side of the failed comparison
    """

    def __init__(self, message, left=None, right=None):
        self.message = message
        self.left = left
        self.right = right
        super().__init__(message)


class MissingComparisonOperand(CompareError):
    """No candidates were given to compare against."""

    def __init__(self, left=None):
        super().__init__("missing argument for comparison", left)


class UnsupportedKind(CompareError):
    """Value is outside the closed set of comparable kinds.

    Attributes:
        value: (Value) The value that could not be compared
    """

    def __init__(self, value, left=None, right=None):
        self.value = value
        super().__init__(
            f"invalid type for comparison: {value.variant.name.lower()}", left, right)


class IncompatibleKinds(CompareError):
    """Two comparable kinds that cannot be compared with each other.

    Attributes:
        left_kind: (Kind) Kind of the left value
        right_kind: (Kind) Kind of the right value
    """

    def __init__(self, left_kind, right_kind, left=None, right=None):
        self.left_kind = left_kind
        self.right_kind = right_kind
        super().__init__(
            f"incompatible types for comparison: "
            f"{left_kind.name.lower()} and {right_kind.name.lower()}",
            left, right)


class ParseError(Exception):
    """Exception raised for value literal syntax errors.

    Args:
        message: (str) Error description
        position: (int | None) Optional character position where error occurred

    Attributes:
        message: (str) Error description
        position: (int | None) Character position where error occurred
    """

    def __init__(self, message, position=None):
        self.message = message
        self.position = position
        super().__init__(message)
