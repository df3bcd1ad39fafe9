"""Test exact and floating point Gaussian elimination."""
import copy
import random
from fractions import Fraction
import numpy as np
import pytest
import sympy
from sharesolve import Gauss, RationalGauss, DoubleGauss, build_system, solve_exact, solve_approx, \
                       check_consistency, make, SingularMatrix, EXACT, APPROX


def sympy_solve(rows, rhs):
    """Reference solution with sympy's exact LU solver."""
    solution = sympy.Matrix(rows).LUsolve(sympy.Matrix(rhs))
    return [Fraction(int(v.p), int(v.q)) for v in solution]


def test_instances():
    assert isinstance(Gauss.get_rational_instance(), RationalGauss)
    assert isinstance(Gauss.get_double_instance(), DoubleGauss)
    assert Gauss.get_rational_instance() is Gauss.get_rational_instance()
    assert Gauss.get_instance(EXACT) is Gauss.get_rational_instance()
    assert Gauss.get_instance(APPROX) is Gauss.get_double_instance()
    with pytest.raises(ValueError):
        Gauss.get_instance("symbolic")


def test_exact_quadratic():
    """Interpolate (1, 1), (2, 7), (3, 12): P(x) = -6 + 15/2 x - 1/2 x^2."""
    matrix, vector = build_system([(1, 1), (2, 7), (3, 12)], 2)
    coeffs = solve_exact(matrix, vector)
    assert coeffs == [make(-6), make(15, 2), make(-1, 2)]
    assert coeffs[0].denominator == 1


def test_exact_matches_sympy():
    rows = [[2, -1, 0, 3], [1, 5, -2, 0], [0, 3, 7, -1], [4, 0, 1, 1]]
    rhs = [1, -2, 3, 10**25]
    coeffs = solve_exact([[make(v) for v in row] for row in rows], [make(v) for v in rhs])
    assert [c.to_fraction() for c in coeffs] == sympy_solve(rows, rhs)


def test_exact_accepts_int_entries():
    assert solve_exact([[2, 0], [0, 4]], [1, 2]) == [make(1, 2), make(1, 2)]


def test_exact_zero_pivot_swaps_rows():
    """A zero in the pivot position is resolved with the first non-zero row below."""
    coeffs = solve_exact([[0, 1], [1, 1]], [2, 3])
    assert coeffs == [make(1), make(2)]


def test_exact_deterministic():
    matrix, vector = build_system([(1, 5), (4, 3), (9, 8), (11, 2)], 3)
    first = solve_exact(matrix, vector)
    second = solve_exact(matrix, vector)
    assert [(c.numerator, c.denominator) for c in first] == [(c.numerator, c.denominator) for c in second]


def test_inputs_not_modified(curr_solver):
    gauss = Gauss.get_instance(curr_solver)
    matrix, vector = gauss.build_system([(3, 4), (1, 2), (2, 9)], 2)
    matrix_before, vector_before = copy.deepcopy(matrix), copy.deepcopy(vector)
    gauss.solve(matrix, vector)
    if curr_solver == EXACT:
        assert matrix == matrix_before
        assert vector == vector_before
    else:
        np.testing.assert_array_equal(matrix, matrix_before)
        np.testing.assert_array_equal(vector, vector_before)


def test_singular_identical_rows(curr_solver):
    """Two identical rows make both solvers fail instead of returning a spurious result."""
    gauss = Gauss.get_instance(curr_solver)
    matrix, vector = gauss.build_system([(2, 5), (2, 5), (3, 7)], 2)
    with pytest.raises(SingularMatrix):
        gauss.solve(matrix, vector)


def test_singular_zero_column(curr_solver):
    gauss = Gauss.get_instance(curr_solver)
    with pytest.raises(SingularMatrix):
        gauss.solve([[0, 1], [0, 2]], [1, 2])
    with pytest.raises(ArithmeticError):
        gauss.solve([[1, 2], [2, 4]], [1, 2])


def test_malformed_systems(curr_solver):
    gauss = Gauss.get_instance(curr_solver)
    with pytest.raises(ValueError):
        gauss.solve([[1, 2], [3, 4]], [1, 2, 3])
    with pytest.raises(ValueError):
        gauss.solve([[1, 2, 3], [4, 5, 6]], [1, 2])


def test_approx_partial_pivoting():
    """A tiny leading entry does not destroy the solution."""
    x = solve_approx([[1e-20, 1.0], [1.0, 1.0]], [1.0, 2.0])
    assert x == pytest.approx([1.0, 1.0], abs=1e-12)


def test_approx_returns_raw_floats():
    matrix, vector = build_system([(1, 1), (2, 7), (3, 12)], 2, APPROX)
    coeffs = solve_approx(matrix, vector)
    assert isinstance(coeffs, np.ndarray)
    assert coeffs.dtype == np.float64
    assert coeffs == pytest.approx([-6.0, 7.5, -0.5], abs=1e-9)


def test_approx_matches_exact():
    """On a well-conditioned system the approximate solution agrees with the exact one."""
    coeffs = [12345, -3, 2, 5, 1]
    points = [(x, sum(c * x**j for j, c in enumerate(coeffs))) for x in range(1, 6)]
    exact = solve_exact(*build_system(points, 4, EXACT))
    approx = solve_approx(*build_system(points, 4, APPROX))
    assert list(approx) == pytest.approx([float(c) for c in exact], rel=1e-6)


def test_approx_accepts_exact_system():
    matrix, vector = build_system([(1, 1), (2, 7), (3, 12)], 2, EXACT)
    assert solve_approx(matrix, vector)[0] == pytest.approx(-6.0)


@pytest.mark.parametrize("seed", range(5))
def test_round_trip(seed):
    """The constant term of a random integer polynomial is recovered exactly."""
    rng = random.Random(seed)
    k = rng.randint(1, 8)
    coeffs = [rng.randint(0, 10**30) for _ in range(k)]
    points = [(i, sum(c * i**j for j, c in enumerate(coeffs))) for i in range(1, k + 1)]
    solution = solve_exact(*build_system(points, k - 1))
    assert solution[0].is_integer()
    assert solution[0].numerator == coeffs[0]
    assert solution == [make(c) for c in coeffs]


def test_consistency_exact():
    coeffs = solve_exact(*build_system([(1, 1), (2, 7), (3, 12)], 2))
    report = check_consistency(coeffs, [(4, 16), (6, 39)])
    assert not report.consistent
    assert report.mismatches == [(6, 39, make(21))]
    assert check_consistency(coeffs, [(4, 16), (5, 19)]).consistent
    assert check_consistency(coeffs, []).consistent


def test_consistency_approx():
    coeffs = solve_approx(*build_system([(1, 1), (2, 7), (3, 12)], 2, APPROX))
    report = check_consistency(coeffs, [(4, 16), (6, 39)])
    assert not report.consistent
    assert [m[0] for m in report.mismatches] == [6]
    assert report.mismatches[0][2] == pytest.approx(21.0)
    assert check_consistency(coeffs, [(4, 16)]).consistent
    assert not check_consistency(coeffs, [(4, 17)], tolerance=0.5).consistent
    assert check_consistency(coeffs, [(4, 16.4)], tolerance=0.5).consistent


def test_consistency_does_not_alter_coefficients():
    coeffs = solve_approx(*build_system([(1, 1), (2, 7)], 1, APPROX))
    before = coeffs.copy()
    check_consistency(coeffs, [(3, 100)])
    np.testing.assert_array_equal(coeffs, before)


def test_secret():
    coeffs = [make(-6), make(15, 2), make(-1, 2)]
    assert Gauss.get_rational_instance().secret(coeffs) == -6
    assert Gauss.get_rational_instance().evaluate(coeffs, 0) == -6
    assert Gauss.get_double_instance().evaluate([1.0, 2.0, 3.0], 2) == 17.0


def test_consistency_approx_beyond_float_range():
    coeffs = solve_approx(*build_system([(1, 5)], 0, APPROX))
    report = check_consistency(coeffs, [(2, 36**300 - 1), (3, 5)])
    assert not report.consistent
    assert [m[0] for m in report.mismatches] == [2]
