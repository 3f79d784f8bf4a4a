# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from ._typing import Dictionary
from .algorithm import Algorithm, distance

DEFAULT_MAX_DISTANCE = 2


def suggest(
    word_to_check: str,
    known_words: Dictionary,
    max_distance: int = DEFAULT_MAX_DISTANCE,
    algorithm: Algorithm = Algorithm.levenshtein,
) -> str | None:
    """Closest known word, or None when even the closest one is more than `max_distance` edits away

    Of equally close words the first one wins.
    """
    if max_distance < 0:
        raise ValueError(f"max_distance must not be negative, got {max_distance!r}")

    best: str | None = None
    best_distance = 0
    for candidate in known_words:
        cost = distance(algorithm, word_to_check, candidate)
        if best is None or cost < best_distance:
            best, best_distance = candidate, cost

    if best is None or best_distance > max_distance:
        return None
    return best
