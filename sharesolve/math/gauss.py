"""
Gauss operations for solving the interpolation system A . coeff = b.

Two variants share one interface:

- RationalGauss eliminates over BigFraction entries. Results are exact, so the
  reconstructed secret is guaranteed to be the true integer.
- DoubleGauss eliminates over float64 entries with partial pivoting. It is
  faster on large thresholds but subject to round-off.

Both work on a private copy of the system and never modify their arguments.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, NamedTuple, Sequence, Tuple

import numpy as np
from numpy.polynomial import polynomial as P

from ..errors import SingularMatrix
from ..names import EXACT, APPROX, DEFAULT_TOLERANCE
from .big_fraction import BigFraction
from .vandermonde import build_system

LOG = logging.getLogger(__name__)


class ConsistencyReport(NamedTuple):
    """Outcome of checking a recovered polynomial against unused sample points

    mismatches holds one (x, expected y, evaluated y) triple per point that does
    not lie on the polynomial.
    """
    consistent: bool
    mismatches: List[Tuple[int, object, object]]


class Gauss(ABC):
    """
    Gaussian elimination solver for square interpolation systems.

    Use Gauss.get_rational_instance() for exact and Gauss.get_double_instance()
    for floating point solving.
    """

    domain = None

    # Singleton instances
    _rational_instance = None
    _double_instance = None

    @classmethod
    def get_rational_instance(cls) -> 'RationalGauss':
        """Get singleton instance for exact rational operations"""
        if Gauss._rational_instance is None:
            Gauss._rational_instance = RationalGauss()
        return Gauss._rational_instance

    @classmethod
    def get_double_instance(cls) -> 'DoubleGauss':
        """Get singleton instance for floating point operations"""
        if Gauss._double_instance is None:
            Gauss._double_instance = DoubleGauss()
        return Gauss._double_instance

    @classmethod
    def get_instance(cls, solver: str) -> 'Gauss':
        """Get the solver for the name 'exact' or 'approx'"""
        if solver == EXACT:
            return cls.get_rational_instance()
        if solver == APPROX:
            return cls.get_double_instance()
        raise ValueError(f"Unknown solver '{solver}'. Use '{EXACT}' or '{APPROX}'.")

    def build_system(self, points: Sequence[Tuple[int, int]], degree: int):
        """Build the interpolation system in this solver's arithmetic domain"""
        return build_system(points, degree, self.domain)

    @abstractmethod
    def solve(self, matrix, vector):
        """
        Solve matrix . coeff = vector.

        Args:
            matrix: Square coefficient matrix
            vector: Right-hand side with one entry per matrix row

        Returns:
            The coefficient vector; entry 0 is the constant term

        Raises:
            ValueError: If the matrix is not square or the vector length does not match
            SingularMatrix: If elimination finds no usable pivot
        """

    @abstractmethod
    def evaluate(self, coefficients, x: int):
        """Evaluate the polynomial with the given coefficients at x"""

    @abstractmethod
    def _matches(self, expected: int, actual, tolerance: float) -> bool:
        pass

    def secret(self, coefficients):
        """The constant term of the polynomial, i.e. its value at x = 0"""
        return coefficients[0]

    def check_consistency(self, coefficients, points: Sequence[Tuple[int, int]],
                          tolerance: float = DEFAULT_TOLERANCE) -> ConsistencyReport:
        """
        Check that points not used to build the system lie on the recovered polynomial.

        Mismatches are collected, never raised, and do not alter the coefficients.
        """
        mismatches = []
        for x, y in points:
            actual = self.evaluate(coefficients, x)
            if not self._matches(y, actual, tolerance):
                LOG.debug(f"Point at x = {x} deviates from the polynomial")
                mismatches.append((x, y, actual))
        return ConsistencyReport(not mismatches, mismatches)

    @staticmethod
    def _check_shape(rows: int, cols: int, length: int):
        if rows != cols:
            raise ValueError(f"Matrix must be square: {rows}x{cols}")
        if length != rows:
            raise ValueError(f"Vector length {length} does not match matrix size {rows}")


class RationalGauss(Gauss):
    """
    Gaussian elimination over exact BigFraction arithmetic.

    The pivot of each column is the first row with a non-zero entry.
    """

    domain = EXACT

    def solve(self, matrix: Sequence[Sequence[BigFraction]], vector: Sequence[BigFraction]) -> List[BigFraction]:
        n = len(matrix)
        self._check_shape(n, n, len(vector))
        for row in matrix:
            self._check_shape(n, len(row), n)
        # private copy, entries may also be given as ints
        m = [[BigFraction.value_of(v) for v in row] for row in matrix]
        b = [BigFraction.value_of(v) for v in vector]

        for col in range(n):
            pivot_row = self._find_pivot_row(m, col)
            if pivot_row == -1:
                raise SingularMatrix(f"Matrix is singular (no non-zero pivot in column {col})")
            if pivot_row != col:
                LOG.debug(f"Swapping rows {col} and {pivot_row}")
                m[col], m[pivot_row] = m[pivot_row], m[col]
                b[col], b[pivot_row] = b[pivot_row], b[col]
            self._eliminate_below(m, b, col)

        return self._back_substitute(m, b)

    def evaluate(self, coefficients: Sequence[BigFraction], x: int) -> BigFraction:
        result = BigFraction.ZERO
        for c in reversed(coefficients):
            result = result * x + c
        return result

    def _matches(self, expected: int, actual: BigFraction, tolerance: float) -> bool:
        return actual == BigFraction.value_of(expected)

    @staticmethod
    def _find_pivot_row(m: List[List[BigFraction]], col: int) -> int:
        """First row at or below col with a non-zero entry in col, or -1"""
        for row in range(col, len(m)):
            if not m[row][col].is_zero():
                return row
        return -1

    @staticmethod
    def _eliminate_below(m: List[List[BigFraction]], b: List[BigFraction], col: int):
        n = len(m)
        pivot = m[col][col]
        for row in range(col + 1, n):
            if m[row][col].is_zero():
                continue
            factor = m[row][col].div(pivot)
            for c in range(col, n):
                m[row][c] = m[row][c].sub(factor.mul(m[col][c]))
            b[row] = b[row].sub(factor.mul(b[col]))

    @staticmethod
    def _back_substitute(m: List[List[BigFraction]], b: List[BigFraction]) -> List[BigFraction]:
        n = len(m)
        x = [BigFraction.ZERO] * n
        for i in range(n - 1, -1, -1):
            total = BigFraction.ZERO
            for j in range(i + 1, n):
                total = total.add(m[i][j].mul(x[j]))
            x[i] = b[i].sub(total).div(m[i][i])
        return x


class DoubleGauss(Gauss):
    """
    Gaussian elimination with partial pivoting over float64.

    In every column the row with the largest absolute entry becomes the pivot,
    which limits the growth of round-off errors. Results are returned as they
    are; no snapping to integers takes place.
    """

    domain = APPROX

    def solve(self, matrix, vector) -> np.ndarray:
        m = np.array(matrix, dtype=np.float64, copy=True)
        y = np.array(vector, dtype=np.float64, copy=True)
        if m.ndim != 2:
            raise ValueError(f"Matrix must be two-dimensional, got {m.ndim} dimension(s)")
        n = m.shape[0]
        self._check_shape(n, m.shape[1], y.shape[0] if y.ndim == 1 else -1)

        for col in range(n):
            pivot_row = col + int(np.argmax(np.abs(m[col:, col])))
            if abs(m[pivot_row, col]) == 0.0:
                raise SingularMatrix(f"Singular matrix encountered in column {col}")
            if pivot_row != col:
                LOG.debug(f"Swapping rows {col} and {pivot_row}")
                m[[col, pivot_row]] = m[[pivot_row, col]]
                y[[col, pivot_row]] = y[[pivot_row, col]]
            for row in range(col + 1, n):
                factor = m[row, col] / m[col, col]
                m[row, col:] -= factor * m[col, col:]
                y[row] -= factor * y[col]

        x = np.zeros(n, dtype=np.float64)
        for i in range(n - 1, -1, -1):
            x[i] = (y[i] - m[i, i + 1:] @ x[i + 1:]) / m[i, i]
        return x

    def evaluate(self, coefficients, x: int) -> float:
        return float(P.polyval(float(x), np.asarray(coefficients, dtype=np.float64)))

    def _matches(self, expected: int, actual: float, tolerance: float) -> bool:
        try:
            expected = float(expected)
        except OverflowError:
            return False
        # NaN never matches
        return abs(actual - expected) <= tolerance


def solve_exact(matrix, vector) -> List[BigFraction]:
    """Solve the system exactly over BigFraction entries"""
    return Gauss.get_rational_instance().solve(matrix, vector)


def solve_approx(matrix, vector) -> np.ndarray:
    """Solve the system in floating point with partial pivoting"""
    return Gauss.get_double_instance().solve(matrix, vector)


def check_consistency(coefficients, points: Sequence[Tuple[int, int]],
                      tolerance: float = DEFAULT_TOLERANCE) -> ConsistencyReport:
    """
    Check unused sample points against recovered coefficients.

    Exact coefficients (BigFraction) are compared exactly, floating point
    coefficients within the absolute tolerance.
    """
    if len(coefficients) and isinstance(coefficients[0], BigFraction):
        gauss = Gauss.get_rational_instance()
    else:
        gauss = Gauss.get_double_instance()
    return gauss.check_consistency(coefficients, points, tolerance)
