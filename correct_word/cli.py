# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from . import argx, envdefault
from .algorithm import Algorithm, distance
from .cliarg import arg
from .engine import correct_word
from .speller import suggest
from argparse import ArgumentParser
from typing import Any, Callable

SUGGESTION_COLUMNS = ["rank", "word", "confidence"]


class CorrectWordCLI(argx.CommandLineTool):
    algorithm: Algorithm

    def __init__(self) -> None:
        argx.CommandLineTool.__init__(self, "correct-word")

    def add_args(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "--algorithm",
            help="Distance algorithm to use [CORRECT_WORD_ALGORITHM], one of: {}".format(", ".join(Algorithm.names())),
            default=envdefault.CORRECT_WORD_ALGORITHM,
        )

    def pre_run(self, func: Callable[[], int | None]) -> None:
        self.algorithm = Algorithm.from_name(self.get_algorithm_name())

    def get_algorithm_name(self) -> str:
        """Algorithm from command line or environment, then config file, then the default"""
        if self.args.algorithm is not None:
            return self.args.algorithm
        name = self.config.get("algorithm")
        if name is None:
            return Algorithm.levenshtein.value
        if not isinstance(name, str):
            raise argx.UserError("Invalid 'algorithm' in configuration file: {!r}".format(name))
        return name

    def get_limit(self) -> int | None:
        if self.args.limit is not None:
            return self.args.limit
        limit = self.config.get("limit")
        if limit is None:
            return None
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise argx.UserError("Invalid 'limit' in configuration file: {!r}".format(limit))
        return limit

    @arg.word
    @arg.candidates()
    @arg.limit
    @arg.json
    def correct(self) -> None:
        """Suggest the closest candidate words"""
        limit = self.get_limit()
        if limit is None:
            suggestions = [correct_word(self.algorithm, self.args.word, self.args.candidates)]
        else:
            suggestions = correct_word(self.algorithm, self.args.word, self.args.candidates, limit)

        result: list[dict[str, Any]] = [
            {"rank": rank, "word": suggestion.word, "confidence": suggestion.confidence}
            for rank, suggestion in enumerate(suggestions, start=1)
        ]
        self.print_response(result, json=self.args.json, table_layout=SUGGESTION_COLUMNS)

    @arg("a", help="First word")
    @arg("b", help="Second word")
    def distance(self) -> None:
        """Show the edit distance between two words"""
        print(distance(self.algorithm, self.args.a, self.args.b))

    @arg.word
    @arg.candidates()
    @arg.max_distance
    def suggest(self) -> int | None:
        """Show the closest candidate within a maximum number of edits"""
        suggestion = suggest(self.args.word, self.args.candidates, self.args.max_distance, self.algorithm)
        if suggestion is None:
            self.log.warning("No suggestion within %d edits of %r", self.args.max_distance, self.args.word)
            return 1
        print(suggestion)
        return None

    @arg()
    def algorithm_list(self) -> None:
        """List supported distance algorithms"""
        for name in Algorithm.names():
            print(name)
