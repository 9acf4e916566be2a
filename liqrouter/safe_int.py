"""Checked integer wrapper for fixed-point pool math.

SafeInt keeps pricing arithmetic honest about width:
- Division by zero raises DivisionByZero
- Subtraction underflow raises Underflow
- check_width() and to_u64() raise WidthOverflow when a value leaves
  the unsigned range of the requested width

Usage pattern:
    from liqrouter.safe_int import S

    def quote(amount: int, reserve: int) -> int:
        product = (S(amount) * S(reserve)).check_width(128)
        return (product // S(10_000)).to_u64()

Python integers never wrap, so every bound is enforced explicitly at the
points where the on-chain programs would use u64 or u128 registers.
"""

from __future__ import annotations

from liqrouter.constants import U64_MAX


class SafeIntError(ArithmeticError):
    """Base class for SafeInt arithmetic errors."""

    pass


class DivisionByZero(SafeIntError):
    """Division by zero."""

    pass


class Underflow(SafeIntError):
    """Subtraction would produce a negative result."""

    pass


class WidthOverflow(SafeIntError):
    """Value does not fit the requested unsigned width."""

    pass


class SafeInt:
    """Integer with checked arithmetic.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic ---

    def __add__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value + _extract_value(other))

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _extract_value(other))

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer division, truncating toward zero for non-negative operands.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _extract_value(other)

    # --- Conversion ---

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    # --- Named operations ---

    def saturating_sub(self, other: SafeInt | int) -> SafeInt:
        """Subtract, clamping the result at zero instead of raising."""
        return SafeInt(max(0, self._value - _extract_value(other)))

    def min(self, other: SafeInt | int) -> SafeInt:
        """Return minimum of self and other."""
        return SafeInt(min(self._value, _extract_value(other)))

    def check_width(self, bits: int) -> SafeInt:
        """Return self if it fits an unsigned integer of the given width.

        Raises:
            WidthOverflow: If value is negative or exceeds 2**bits - 1
        """
        if self._value < 0:
            raise WidthOverflow(f"Negative value cannot be u{bits}: {self._value}")
        if self._value > (1 << bits) - 1:
            raise WidthOverflow(f"Value exceeds u{bits} max: {self._value}")
        return self

    def to_u64(self) -> int:
        """Narrow to a u64 integer.

        Raises:
            WidthOverflow: If value is negative or exceeds 2^64-1
        """
        return self.check_width(64)._value

    def is_u64(self) -> bool:
        """Check if value fits in u64 without raising."""
        return 0 <= self._value <= U64_MAX


def _extract_value(x: SafeInt | int) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience alias for concise code
S = SafeInt
