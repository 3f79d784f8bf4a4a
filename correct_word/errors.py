# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations


class CorrectWordError(Exception):
    """Base class for errors raised by the correction library"""


class EmptyDictionary(CorrectWordError):
    def __init__(self) -> None:
        super().__init__("dictionary has no candidate words")


class InvalidLimit(CorrectWordError, ValueError):
    def __init__(self, limit: object) -> None:
        super().__init__(f"limit must be a positive integer, got {limit!r}")
        self.limit = limit


class UnknownAlgorithm(CorrectWordError, ValueError):
    def __init__(self, algorithm: object) -> None:
        super().__init__(f"unsupported algorithm {algorithm!r}")
        self.algorithm = algorithm
