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
"""Command line interface: print the secret reconstructed from a JSON share file"""

import argparse
import json
import logging
import sys
from contextlib import nullcontext

from sharesolve import DisableLogger
from sharesolve.names import *
from sharesolve.errors import ShareSolveError
from sharesolve.reconstruct import reconstruct_secret


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="sharesolve",
                                     description="Reconstruct a threshold-shared secret from a JSON share file")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT, help=f"Share file (default: {DEFAULT_INPUT})")
    parser.add_argument("-s", "--solver", choices=[EXACT, APPROX], default=EXACT,
                        help="Exact rational or approximate floating point elimination (default: exact)")
    parser.add_argument("-t", "--tolerance", type=float, default=DEFAULT_TOLERANCE,
                        help=f"Tolerance for the consistency check of surplus shares (default: {DEFAULT_TOLERANCE})")
    parser.add_argument("--strict", action="store_true", help="Fail if the exact constant term is not an integer")
    parser.add_argument("-c", "--coefficients", action="store_true",
                        help="Also print all coefficients and the consistency result to stderr")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Disable all logging")
    args = parser.parse_args(argv)

    # secrets may have arbitrarily many digits
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)

    if args.tolerance < 0:
        parser.error("Tolerance must not be negative.")

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING, format="%(levelname)s: %(message)s")

    try:
        with DisableLogger() if args.quiet else nullcontext():
            result = reconstruct_secret(args.input, solver=args.solver, tolerance=args.tolerance, strict=args.strict)
    except (ShareSolveError, OSError, OverflowError, UnicodeDecodeError, json.JSONDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(result.secret)
    if args.coefficients:
        print("coeffs (c0..cm): " + ", ".join(str(c) for c in result.coefficients), file=sys.stderr)
        print(f"consistent with all points: {str(result.consistency.consistent).lower()}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
