"""
Exact rational numbers for Gaussian elimination without round-off.

A BigFraction is a pair of Python ints (which have arbitrary precision) kept in
canonical form: the denominator is positive and numerator and denominator are
coprime. Every arithmetic operation returns a new, reduced instance, so two
BigFractions are equal exactly when their numerators and denominators are.
"""

from fractions import Fraction
from typing import Union

from ..errors import ZeroDenominator, DivisionByZero


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor by the Euclidean algorithm.

    The result is never negative. gcd(0, 0) returns 0; BigFraction never
    reduces by it because a denominator of 0 is rejected first.
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


class BigFraction:
    """
    Immutable rational number in canonical reduced form.

    Arithmetic is done by cross multiplication (a/b op c/d) followed by
    reduction. Operands are never modified.
    """

    def __init__(self, numerator: Union[int, 'BigFraction', Fraction], denominator: int = 1):
        """
        Args:
            numerator: An integer numerator, or a BigFraction/Fraction to copy
            denominator: Integer denominator (default 1), must not be 0

        Raises:
            ZeroDenominator: If the denominator is 0
        """
        if isinstance(numerator, (BigFraction, Fraction)):
            if denominator != 1:
                raise TypeError("denominator must be omitted when copying a fraction")
            numerator, denominator = numerator.numerator, numerator.denominator
        if isinstance(numerator, bool) or not isinstance(numerator, int):
            raise TypeError(f"numerator must be an integer, got {type(numerator).__name__}")
        if isinstance(denominator, bool) or not isinstance(denominator, int):
            raise TypeError(f"denominator must be an integer, got {type(denominator).__name__}")
        if denominator == 0:
            raise ZeroDenominator(f"Zero denominator in {numerator}/0")
        g = gcd(numerator, denominator)
        numerator //= g
        denominator //= g
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        self._numerator = numerator
        self._denominator = denominator

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    # Arithmetic

    def add(self, other: 'BigFraction') -> 'BigFraction':
        """Add two BigFractions"""
        other = BigFraction.value_of(other)
        return BigFraction(self._numerator * other._denominator + other._numerator * self._denominator,
                           self._denominator * other._denominator)

    def sub(self, other: 'BigFraction') -> 'BigFraction':
        """Subtract two BigFractions"""
        other = BigFraction.value_of(other)
        return BigFraction(self._numerator * other._denominator - other._numerator * self._denominator,
                           self._denominator * other._denominator)

    def mul(self, other: 'BigFraction') -> 'BigFraction':
        """Multiply two BigFractions"""
        other = BigFraction.value_of(other)
        return BigFraction(self._numerator * other._numerator, self._denominator * other._denominator)

    def div(self, other: 'BigFraction') -> 'BigFraction':
        """
        Divide by another BigFraction.

        Raises:
            DivisionByZero: If other is zero
        """
        other = BigFraction.value_of(other)
        if other._numerator == 0:
            raise DivisionByZero(f"Division of {self} by zero")
        return BigFraction(self._numerator * other._denominator, self._denominator * other._numerator)

    def negate(self) -> 'BigFraction':
        return BigFraction(-self._numerator, self._denominator)

    def abs(self) -> 'BigFraction':
        return BigFraction(abs(self._numerator), self._denominator)

    # Predicates and conversion

    def signum(self) -> int:
        """Return sign: -1, 0, or 1"""
        return (self._numerator > 0) - (self._numerator < 0)

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_one(self) -> bool:
        return self._numerator == 1 and self._denominator == 1

    def is_integer(self) -> bool:
        return self._denominator == 1

    def to_integer(self) -> int:
        """Integer part of the fraction, truncated toward zero"""
        quotient = abs(self._numerator) // self._denominator
        return -quotient if self._numerator < 0 else quotient

    def to_fraction(self) -> Fraction:
        return Fraction(self._numerator, self._denominator)

    def __float__(self) -> float:
        return self._numerator / self._denominator

    def __int__(self) -> int:
        return self.to_integer()

    # Comparison

    def compare_to(self, other: 'BigFraction') -> int:
        """Compare to another BigFraction: -1 if less, 0 if equal, 1 if greater"""
        return self.sub(other).signum()

    def __eq__(self, other) -> bool:
        if isinstance(other, int) and not isinstance(other, bool):
            other = BigFraction(other)
        if isinstance(other, BigFraction):
            return self._numerator == other._numerator and self._denominator == other._denominator
        return NotImplemented

    def __lt__(self, other) -> bool:
        if isinstance(other, (BigFraction, int)):
            return self.compare_to(other) < 0
        return NotImplemented

    def __le__(self, other) -> bool:
        if isinstance(other, (BigFraction, int)):
            return self.compare_to(other) <= 0
        return NotImplemented

    def __gt__(self, other) -> bool:
        if isinstance(other, (BigFraction, int)):
            return self.compare_to(other) > 0
        return NotImplemented

    def __ge__(self, other) -> bool:
        if isinstance(other, (BigFraction, int)):
            return self.compare_to(other) >= 0
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._numerator, self._denominator))

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"BigFraction({self._numerator}, {self._denominator})"

    # Python operator overloading for convenience
    def __add__(self, other):
        return self.add(other)

    def __radd__(self, other):
        return BigFraction.value_of(other).add(self)

    def __sub__(self, other):
        return self.sub(other)

    def __rsub__(self, other):
        return BigFraction.value_of(other).sub(self)

    def __mul__(self, other):
        return self.mul(other)

    def __rmul__(self, other):
        return BigFraction.value_of(other).mul(self)

    def __truediv__(self, other):
        return self.div(other)

    def __rtruediv__(self, other):
        return BigFraction.value_of(other).div(self)

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return self.abs()

    @staticmethod
    def value_of(value: Union[int, str, Fraction, 'BigFraction']) -> 'BigFraction':
        """
        Factory method to create a BigFraction from an int, a Fraction or a
        string of the form "num/den" or "num".
        """
        if isinstance(value, BigFraction):
            return value
        if isinstance(value, str):
            if '/' in value:
                parts = value.split('/')
                if len(parts) != 2:
                    raise ValueError(f"Invalid fraction format: {value}")
                return BigFraction(int(parts[0]), int(parts[1]))
            return BigFraction(int(value))
        return BigFraction(value)


def make(numerator: int, denominator: int = 1) -> BigFraction:
    """Create the canonical BigFraction numerator/denominator"""
    return BigFraction(numerator, denominator)


BigFraction.ZERO = BigFraction(0)
BigFraction.ONE = BigFraction(1)
