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
"""Functions for reading share documents and selecting interpolation points"""

import json
import logging
from typing import Dict, List, NamedTuple, Tuple

from sharesolve.names import *
from sharesolve.errors import ShareSolveError, ConfigurationError, InvalidShare, InsufficientPoints
from sharesolve.math import decode, parse_base

__all__ = ['Point', 'ShareSet', 'parse_shares', 'load_shares', 'select_points']


class Point(NamedTuple):
    """A sample point: share index x and decoded share value y"""
    x: int
    y: int


class ShareSet(NamedTuple):
    """Total share count n, threshold k and the decoded points in document order"""
    n: int
    k: int
    points: List[Point]


def _read_count(keys: Dict, name: str) -> int:
    value = keys.get(name)
    if value is None:
        raise ConfigurationError(f"JSON must contain {KEYS}.{TOTAL_SHARES} and {KEYS}.{THRESHOLD}")
    if isinstance(value, str) and value.strip().isascii() and value.strip().isdecimal():
        value = int(value.strip())
    elif isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{KEYS}.{name} must be an integer, got {value!r}")
    if value < 1:
        raise ConfigurationError(f"{KEYS}.{name} must be at least 1, got {value}")
    return value


def _decode_share(key: str, entry) -> Point:
    if not isinstance(entry, dict) or entry.get(BASE) is None or entry.get(VALUE) is None:
        raise InvalidShare(f"Invalid entry for key {key}")
    value = entry[VALUE]
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    try:
        y = decode(value, parse_base(entry[BASE]))
    except ShareSolveError as e:
        raise type(e)(f"{e} (key {key})") from e
    return Point(int(key), y)


def parse_shares(document: Dict) -> ShareSet:
    """Decode a share document

    The document holds the share counts under 'keys' and one entry per share, keyed
    by the share index written in decimal. Other top-level keys are ignored.

    Example:
        shares = parse_shares({'keys': {'n': 2, 'k': 2},
                               '1': {'base': '10', 'value': '4'},
                               '2': {'base': '2', 'value': '111'}})

    Args:
        document (dict):
            A parsed JSON share document.

    Returns:
        (ShareSet):
            n, k and the decoded points in document order.

    Raises:
        ConfigurationError: If keys.n or keys.k is missing or invalid
        InvalidShare: If a share lacks its base or value, or an index occurs twice
        UnsupportedBase, InvalidDigit: If a share value cannot be decoded
        InsufficientPoints: If the document holds fewer than k shares
    """
    if not isinstance(document, dict):
        raise ConfigurationError(f"Share document must be a JSON object, got {type(document).__name__}")
    keys = document.get(KEYS)
    if not isinstance(keys, dict):
        raise ConfigurationError(f"JSON must contain {KEYS}.{TOTAL_SHARES} and {KEYS}.{THRESHOLD}")
    n = _read_count(keys, TOTAL_SHARES)
    k = _read_count(keys, THRESHOLD)
    if k > n:
        logging.warning(f"Threshold k = {k} exceeds the total number of shares n = {n}.")

    points = []
    seen = set()
    for key, entry in document.items():
        key = str(key)
        if key == KEYS:
            continue
        if not (key.isascii() and key.isdecimal()):
            logging.debug(f"Ignoring non-share key '{key}'.")
            continue
        point = _decode_share(key, entry)
        if point.x in seen:
            raise InvalidShare(f"Duplicate share index {point.x} (key {key})")
        seen.add(point.x)
        points.append(point)

    if len(points) < k:
        raise InsufficientPoints(f"Not enough points provided ({len(points)}) for required k = {k}")
    if len(points) > n:
        logging.warning(f"Found {len(points)} shares, more than the declared total n = {n}.")
    return ShareSet(n, k, points)


def load_shares(path) -> ShareSet:
    """Read and decode a JSON share document from a file"""
    with open(path, 'r', encoding='utf-8') as fs:
        document = json.load(fs)
    return parse_shares(document)


def select_points(points: List[Point], k: int, solver: str = EXACT) -> Tuple[List[Point], List[Point]]:
    """Split the points into the k used for interpolation and the remaining ones

    The exact solver interpolates the shares with index 1 to k, falling back to the
    first k shares in document order when one of these indices is missing. The
    approximate solver sorts the points by x and takes the k smallest.

    Returns:
        (tuple):
            The points that build the system and the extra points left for the
            consistency check.
    """
    if len(points) < k:
        raise InsufficientPoints(f"Not enough points provided ({len(points)}) for required k = {k}")
    if solver == APPROX:
        ordered = sorted(points, key=lambda p: p.x)
    elif solver == EXACT:
        by_index = {p.x: p for p in points}
        if all(x in by_index for x in range(1, k + 1)):
            used = [by_index[x] for x in range(1, k + 1)]
            return used, [p for p in points if p.x > k or p.x < 1]
        logging.info(f"  Shares 1..{k} are not all present, using the first {k} shares in document order.")
        ordered = list(points)
    else:
        raise ConfigurationError(f"Unknown solver '{solver}'. Use '{EXACT}' or '{APPROX}'.")
    return ordered[:k], ordered[k:]
