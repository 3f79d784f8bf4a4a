# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.

from .argx import arg, UserError
from functools import wraps

import sys


def read_word_list(path):
    """One word per line; blank lines are skipped, "-" reads stdin"""
    try:
        if path == "-":
            lines = sys.stdin.read().splitlines()
        else:
            with open(path, "r", encoding="utf-8") as word_file:
                lines = word_file.read().splitlines()
    except OSError as ex:
        raise UserError("Failed to read word list {!r}: {}".format(path, ex)) from ex
    except UnicodeDecodeError as ex:
        raise UserError("Word list {!r} is not valid UTF-8".format(path)) from ex

    return [line.strip() for line in lines if line.strip()]


def expand_candidates(values):
    candidates = []
    for value in values:
        if value.startswith("@@"):
            # escaped, a literal word starting with "@"
            candidates.append(value[1:])
        elif value.startswith("@"):
            candidates.extend(read_word_list(value[1:]))
        else:
            candidates.append(value)
    return candidates


def candidate_words(param_name="candidates"):
    """Candidate words given inline or as '@'-prefixed word list files"""

    def wrapper(fun):
        arg(
            param_name,
            nargs="*",
            metavar="CANDIDATE",
            help=(
                "Candidate word, or path (preceded by '@') to a file with one word per line, '@-' for stdin;"
                " use '@@word' for a word starting with '@'"
            ),
        )(fun)

        @wraps(fun)
        def wrapped(self):
            setattr(
                self.args,
                param_name,
                expand_candidates(getattr(self.args, param_name, None) or []),
            )
            return fun(self)

        return wrapped

    return wrapper


def positive_int(value):
    number = int(value)
    if number < 1:
        raise ValueError(value)
    return number


def non_negative_int(value):
    number = int(value)
    if number < 0:
        raise ValueError(value)
    return number


arg.candidates = candidate_words
arg.json = arg("--json", help="Raw json output", action="store_true", default=False)
arg.limit = arg(
    "-n",
    "--limit",
    type=positive_int,
    default=None,
    help="Number of ranked suggestions to show (default: best match only, or 'limit' from config file)",
)
arg.max_distance = arg(
    "--max-distance",
    type=non_negative_int,
    default=2,
    help="Maximum number of edits between the word and the suggestion",
)
arg.word = arg("word", help="Word to correct")
