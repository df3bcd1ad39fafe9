"""
Construction of the Vandermonde system A . coeff = b for polynomial interpolation.

Row i of A holds the powers [1, x_i, x_i**2, ..., x_i**(k-1)] of the i-th
sample point and b[i] its y value, so column 0 of A and entry 0 of the
solution belong to the constant term of the polynomial.
"""

from typing import List, Sequence, Tuple

import numpy as np

from ..errors import InsufficientPoints
from ..names import EXACT, APPROX
from .big_fraction import BigFraction


def vandermonde_row(x: int, size: int) -> List[int]:
    """Powers x**0 .. x**(size-1) as exact ints"""
    row = []
    power = 1
    for _ in range(size):
        row.append(power)
        power *= x
    return row


def build_system(points: Sequence[Tuple[int, int]], degree: int, domain: str = EXACT):
    """Build the interpolation system for a polynomial of the given degree

    The first degree + 1 points are used, in the order given. Row order fixes the
    equation order for elimination.

    Example:
        matrix, vector = build_system([(1, 1), (2, 7), (3, 12)], 2)

    Args:
        points (list of (int, int)):
            Sample points (x, y) with integer x and exact integer y.

        degree (int):
            Degree of the interpolating polynomial (threshold k minus one).

        domain (optional (str)):
            'exact' for lists of BigFraction entries or 'approx' for numpy float64 arrays.

    Returns:
        (tuple):
            The k x k coefficient matrix and the right-hand side of length k.
    """
    if degree < 0:
        raise ValueError(f"Polynomial degree must not be negative, got {degree}")
    size = degree + 1
    if len(points) < size:
        raise InsufficientPoints(f"Not enough points provided ({len(points)}) for required k = {size}")
    points = points[:size]
    rows = [vandermonde_row(x, size) for x, _ in points]
    if domain == EXACT:
        matrix = [[BigFraction(v) for v in row] for row in rows]
        vector = [BigFraction(y) for _, y in points]
    elif domain == APPROX:
        matrix = np.array([[float(v) for v in row] for row in rows], dtype=np.float64).reshape(size, size)
        vector = np.array([float(y) for _, y in points], dtype=np.float64)
    else:
        raise ValueError(f"Unknown arithmetic domain '{domain}'. Use '{EXACT}' or '{APPROX}'.")
    return matrix, vector
