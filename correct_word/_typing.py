# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from typing import Iterable, NoReturn, Union

# Anything the engine accepts as a candidate pool; materialized once per call.
Dictionary = Iterable[str]
Distance = Union[int, float]


def assert_never(arg: NoReturn, /) -> NoReturn:
    """
    Backport of standard library typing.assert_never.

    Used to make the algorithm dispatch exhaustive.
    """
    raise AssertionError(f"Expected code to be unreachable, got {arg!r}")
