"""
Mathematical infrastructure for secret reconstruction

This module provides the numeric core:
- Decoding of digit strings in bases 2 to 36
- Exact rational arithmetic with BigFraction
- Vandermonde system construction
- Gaussian elimination, exact (RationalGauss) and floating point (DoubleGauss)
"""

from .base_decoder import decode, parse_base, check_base, DIGITS
from .big_fraction import BigFraction, gcd, make
from .vandermonde import build_system, vandermonde_row
from .gauss import Gauss, RationalGauss, DoubleGauss, ConsistencyReport, solve_exact, solve_approx, \
                   check_consistency

__all__ = [
    'decode',
    'parse_base',
    'check_base',
    'DIGITS',
    'BigFraction',
    'gcd',
    'make',
    'build_system',
    'vandermonde_row',
    'Gauss',
    'RationalGauss',
    'DoubleGauss',
    'ConsistencyReport',
    'solve_exact',
    'solve_approx',
    'check_consistency',
]
