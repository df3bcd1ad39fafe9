import json

import pytest
from sharesolve.names import *
from sharesolve.math import DIGITS


def encode(value, base):
    """Write a non-negative int as a digit string in the given base"""
    if value == 0:
        return "0"
    digits = []
    while value:
        value, digit = divmod(value, base)
        digits.append(DIGITS[digit])
    return "".join(reversed(digits))


def poly_value(coeffs, x):
    return sum(c * x**j for j, c in enumerate(coeffs))


@pytest.fixture(params=[EXACT, APPROX], scope="session")
def curr_solver(request: pytest.FixtureRequest) -> str:
    """Provide session-level fixture for parametrized solver names."""
    return request.param


@pytest.fixture
def sample_document():
    """Four shares of a quadratic, the share at x = 6 does not lie on it."""
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "1"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "10", "value": "12"},
        "6": {"base": "4", "value": "213"},
    }


@pytest.fixture
def sample_file(tmp_path, sample_document):
    path = tmp_path / "input.json"
    path.write_text(json.dumps(sample_document))
    return path


@pytest.fixture
def share_document():
    """Factory for share documents of a polynomial with the given coefficients.

    Share i (i = 1..n) holds P(i) written in bases[(i - 1) % len(bases)].
    """

    def make(coeffs, n, k=None, bases=(10,)):
        doc = {"keys": {"n": n, "k": k if k is not None else len(coeffs)}}
        for i in range(1, n + 1):
            base = bases[(i - 1) % len(bases)]
            doc[str(i)] = {"base": str(base), "value": encode(poly_value(coeffs, i), base)}
        return doc

    return make
