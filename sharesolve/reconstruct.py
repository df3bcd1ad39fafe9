#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Function: reconstructing a threshold-shared secret (reconstruct_secret)"""

import json
import logging
from os import PathLike
from typing import List, NamedTuple, Union

from sharesolve.names import *
from sharesolve.errors import ConfigurationError, NonIntegralSecret
from sharesolve.math import BigFraction, Gauss, ConsistencyReport
from sharesolve.shares import Point, ShareSet, parse_shares, load_shares, select_points

__all__ = ['Reconstruction', 'reconstruct_secret']


class Reconstruction(NamedTuple):
    """Result of a secret reconstruction

    secret is an int for the exact solver and a float for the approximate one.
    coefficients holds the polynomial coefficients, constant term first.
    """
    secret: Union[int, float]
    coefficients: list
    solver: str
    points: List[Point]
    consistency: ConsistencyReport


def _integral_secret(constant: BigFraction, strict: bool) -> int:
    if constant.is_integer():
        return constant.numerator
    msg = "Reconstructed constant term is not an integer"
    if strict:
        raise NonIntegralSecret(msg)
    logging.warning(msg + ". Truncating toward zero.")
    return constant.to_integer()


def reconstruct_secret(shares, **kwargs) -> Reconstruction:
    """Reconstructs the secret from k shares of a threshold secret sharing scheme

    The secret is the constant term of the polynomial of degree k-1 through k of the
    shares. The shares are interpolated by solving the Vandermonde system with
    Gaussian elimination, either exactly in rational arithmetic or approximately in
    floating point arithmetic. Shares beyond the first k are used to check that the
    share set is consistent. Inconsistencies are logged and reported but do not
    change the result.

    Example:
        result = reconstruct_secret('input.json', solver='exact')
        print(result.secret)

    Args:
        shares (ShareSet, dict or str):
            Decoded shares, a parsed share document or the path to a JSON share file.

        solver (optional (str)): (Default: 'exact')
            'exact' for rational Gaussian elimination (the secret is an int) or 'approx'
            for floating point Gaussian elimination with partial pivoting (the secret is
            a float and may carry round-off).

        tolerance (optional (float)): (Default: 1e-6)
            Absolute tolerance for the consistency check of the approximate solver.

        strict (optional (bool)): (Default: False)
            If True, raise NonIntegralSecret when the exact constant term is not an
            integer. Otherwise a warning is logged and the value is truncated.

        setup (optional (dict or str)):
            A dictionary, or the path of a JSON file, holding the options above.
            Explicitly passed options take precedence.

    Returns:
        (Reconstruction):
            The secret, all coefficients, the solver used, the interpolated points
            and the consistency report.
    """
    allowed_keys = {SOLVER, TOLERANCE, STRICT}
    logging.info('Preparing secret reconstruction.')
    options = {}
    if SETUP in kwargs:
        setup = kwargs.pop(SETUP)
        if isinstance(setup, (str, PathLike)):
            with open(setup, 'r', encoding='utf-8') as fs:
                setup = json.load(fs)
        options.update(setup)
    options.update(kwargs)

    # check all keys passed in kwargs
    for key in options:
        if key not in allowed_keys:
            raise ConfigurationError("Key " + str(key) + " is not supported.")

    solver = options.get(SOLVER, EXACT)
    if solver not in (EXACT, APPROX):
        raise ConfigurationError(f"Unknown solver '{solver}'. Use '{EXACT}' or '{APPROX}'.")
    tolerance = float(options.get(TOLERANCE, DEFAULT_TOLERANCE))
    if not tolerance >= 0:
        raise ConfigurationError(f"Tolerance must not be negative, got {tolerance}")
    strict = options.get(STRICT, False)
    if not isinstance(strict, bool):
        raise ConfigurationError(f"Option {STRICT} must be true or false, got {strict!r}")

    if isinstance(shares, (str, PathLike)):
        shares = load_shares(shares)
    elif not isinstance(shares, ShareSet):
        shares = parse_shares(shares)

    used, extra = select_points(shares.points, shares.k, solver)
    logging.info(f'  Using {solver} solver with {len(used)} of {len(shares.points)} shares.')
    gauss = Gauss.get_instance(solver)
    matrix, vector = gauss.build_system(used, shares.k - 1)
    coefficients = gauss.solve(matrix, vector)

    consistency = gauss.check_consistency(coefficients, extra, tolerance)
    if extra and consistency.consistent:
        logging.info(f'  All {len(extra)} remaining shares lie on the polynomial.')
    elif not consistency.consistent:
        logging.warning(f"{len(consistency.mismatches)} of {len(extra)} remaining shares do not lie on the "
                        "reconstructed polynomial (x = " + ", ".join(str(m[0]) for m in consistency.mismatches) + ").")

    constant = gauss.secret(coefficients)
    if solver == EXACT:
        secret = _integral_secret(constant, strict)
    else:
        secret = float(constant)
    logging.info('Finished reconstruction.')
    return Reconstruction(secret, list(coefficients), solver, used, consistency)
