# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Suggestion selection

Every candidate gets a confidence score::

    confidence = 1 - distance / max(len(word), len(candidate))

clamped to [0, 1], and 1.0 when both strings are empty. The same formula is
used for every algorithm so scores stay comparable between calls.
"""
from __future__ import annotations

from ._typing import Dictionary, Distance
from .algorithm import Algorithm, distance
from .errors import EmptyDictionary, InvalidLimit
from typing import NamedTuple, overload, Sequence

import logging

log = logging.getLogger(__name__)


class Suggestion(NamedTuple):
    word: str
    confidence: float


def confidence(raw_distance: Distance, word: str, candidate: str) -> float:
    longest = max(len(word), len(candidate))
    if not longest:
        return 1.0
    return min(1.0, max(0.0, 1.0 - raw_distance / longest))


def _check_limit(limit: int | None) -> None:
    # bool is an int subclass but never a meaningful count
    if limit is None:
        return
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InvalidLimit(limit)


def rank(algorithm: Algorithm, word: str, dictionary: Dictionary) -> list[Suggestion]:
    """Score every candidate and order them best first.

    Candidates with equal confidence keep their dictionary order: the original
    index is part of the sort key.
    """
    candidates: Sequence[str] = dictionary if isinstance(dictionary, Sequence) else list(dictionary)
    if not candidates:
        raise EmptyDictionary()

    scored = []
    for index, candidate in enumerate(candidates):
        cost = distance(algorithm, word, candidate)
        scored.append((confidence(cost, word, candidate), index, candidate))

    scored.sort(key=lambda item: (-item[0], item[1]))
    log.debug("Ranked %d candidates for %r, best match %r", len(scored), word, scored[0][2])
    return [Suggestion(word=candidate, confidence=score) for score, _, candidate in scored]


@overload
def correct_word(algorithm: Algorithm, word: str, dictionary: Dictionary, limit: None = None) -> Suggestion:
    ...


@overload
def correct_word(algorithm: Algorithm, word: str, dictionary: Dictionary, limit: int) -> list[Suggestion]:
    ...


def correct_word(
    algorithm: Algorithm,
    word: str,
    dictionary: Dictionary,
    limit: int | None = None,
) -> Suggestion | list[Suggestion]:
    """Pick the dictionary entry most likely meant by `word`.

    :param Algorithm algorithm: distance metric used to compare words
    :param str word: word to correct, may be empty
    :param dictionary: candidate words, duplicates are treated as separate candidates
    :param int limit: return up to this many suggestions as a list instead of the single best one
    :raises InvalidLimit: limit is given but is not a positive integer
    :raises EmptyDictionary: there are no candidates to choose from
    """
    _check_limit(limit)
    ranked = rank(algorithm, word, dictionary)
    if limit is None:
        return ranked[0]
    return ranked[:limit]
