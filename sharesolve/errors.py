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
"""Exceptions raised while decoding shares and reconstructing secrets

All errors abort the current reconstruction. Each class also derives from the
built-in exception that best describes it, so callers may catch either.
"""

__all__ = [
    'ShareSolveError', 'InvalidDigit', 'UnsupportedBase', 'ZeroDenominator', 'DivisionByZero', 'SingularMatrix',
    'InsufficientPoints', 'ConfigurationError', 'InvalidShare', 'NonIntegralSecret'
]


class ShareSolveError(Exception):
    """Base class of all sharesolve errors"""


class InvalidDigit(ShareSolveError, ValueError):
    """A character is not a valid digit in the stated base"""


class UnsupportedBase(ShareSolveError, ValueError):
    """A base is not an integer between 2 and 36"""


class ZeroDenominator(ShareSolveError, ArithmeticError):
    """A rational number was constructed with denominator 0"""


class DivisionByZero(ShareSolveError, ZeroDivisionError):
    """A rational number was divided by zero"""


class SingularMatrix(ShareSolveError, ArithmeticError):
    """Gaussian elimination found no usable pivot"""


class InsufficientPoints(ShareSolveError, ValueError):
    """Fewer points than the threshold k requires"""


class ConfigurationError(ShareSolveError, ValueError):
    """The share document or the reconstruction options are malformed"""


class InvalidShare(ShareSolveError, ValueError):
    """A share entry lacks its base or value"""


class NonIntegralSecret(ShareSolveError, ArithmeticError):
    """The exactly reconstructed constant term is not an integer"""
