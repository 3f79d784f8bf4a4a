# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Edit distance algorithms

Distances are computed over Unicode code points, i.e. the items of a Python
``str``. No normalization is applied to either input.
"""
from __future__ import annotations

from ._typing import assert_never
from .errors import UnknownAlgorithm
from enum import Enum


class Algorithm(Enum):
    """Supported distance metrics"""

    levenshtein = "levenshtein"

    @classmethod
    def from_name(cls, name: str) -> Algorithm:
        try:
            return cls(name.strip().lower())
        except ValueError as ex:
            raise UnknownAlgorithm(name) from ex

    @classmethod
    def names(cls) -> list[str]:
        return [member.value for member in cls]


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum number of single character insertions, deletions and substitutions turning `a` into `b`"""
    if a == b:
        return 0
    if len(a) < len(b):
        # keep the row as short as the shorter string
        a, b = b, a
    if not b:
        return len(a)

    previous_row = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current_row = [i]
        for j, char_b in enumerate(b, start=1):
            insertion = previous_row[j] + 1
            deletion = current_row[j - 1] + 1
            substitution = previous_row[j - 1] + (char_a != char_b)
            current_row.append(min(insertion, deletion, substitution))
        previous_row = current_row

    return previous_row[-1]


def levenshtein_similarity(a: str, b: str) -> float:
    """Similarity in range [0, 1] derived from the Levenshtein distance; 1.0 means equal strings"""
    longest = max(len(a), len(b))
    if not longest:
        return 1.0
    return 1.0 - levenshtein_distance(a, b) / longest


def distance(algorithm: Algorithm, a: str, b: str) -> int:
    """Raw edit cost between `a` and `b` using the selected algorithm"""
    if not isinstance(algorithm, Algorithm):
        raise UnknownAlgorithm(algorithm)

    if algorithm is Algorithm.levenshtein:
        return levenshtein_distance(a, b)
    else:
        assert_never(algorithm)
