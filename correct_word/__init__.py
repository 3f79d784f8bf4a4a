# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .algorithm import Algorithm, distance, levenshtein_distance, levenshtein_similarity
from .engine import confidence, correct_word, rank, Suggestion
from .errors import CorrectWordError, EmptyDictionary, InvalidLimit, UnknownAlgorithm
from .speller import suggest

try:
    from .version import __version__
except ImportError:
    __version__ = "UNKNOWN"

__all__ = [
    "Algorithm",
    "confidence",
    "correct_word",
    "CorrectWordError",
    "distance",
    "EmptyDictionary",
    "InvalidLimit",
    "levenshtein_distance",
    "levenshtein_similarity",
    "rank",
    "suggest",
    "Suggestion",
    "UnknownAlgorithm",
]
