# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .errors import CorrectWordError
from .pretty import TableLayout
from correct_word import envdefault, pretty
from argparse import Action, Namespace
from os import PathLike
from typing import Any, Callable, Collection, Mapping, NoReturn, Sequence, TextIO, TYPE_CHECKING, TypeVar

import argparse
import errno
import json as jsonlib
import logging
import sys

# Optional shell completions
try:
    import argcomplete  # type: ignore

    ARGCOMPLETE_INSTALLED = True
except ImportError:
    ARGCOMPLETE_INSTALLED = False

try:
    from .version import __version__
except ImportError:
    __version__ = "UNKNOWN"

ARG_LIST_PROP = "_arg_list"
LOG_FORMAT = "%(levelname)s\t%(message)s"


class CustomFormatter(argparse.RawDescriptionHelpFormatter):
    """Help formatter to display the default value only for integers and non-empty strings"""

    def _get_help_string(self, action: Action) -> str:
        help_text = action.help or ""
        if "%(default)" in help_text or action.default is argparse.SUPPRESS or not action.option_strings:
            return help_text
        default = action.default
        if (isinstance(default, int) and not isinstance(default, bool)) or (isinstance(default, str) and default):
            help_text += " (default: %(default)s)"
        return help_text


class UserError(Exception):
    """User error"""


F = TypeVar("F", bound=Callable)


class Arg:
    """Declares an argument of an CLI command.

    Accepts the same arguments as `argparse.ArgumentParser.add_argument`.
    Methods carrying this decorator become commands; parsed values are in
    `self.args`::

        class CLI(CommandLineTool):

            @arg("word")
            def command(self):
                print(self.args.word)
    """

    def __call__(self, *args: Any, **kwargs: Any) -> Callable[[F], F]:
        def wrap(func: F) -> F:
            arg_list = getattr(func, ARG_LIST_PROP, None)
            if arg_list is None:
                arg_list = []
                setattr(func, ARG_LIST_PROP, arg_list)

            if args or kwargs:
                # decorators apply bottom-up, keep the arguments in source order
                arg_list.insert(0, (args, kwargs))

            return func

        return wrap

    if TYPE_CHECKING:

        def __getattr__(self, name: str) -> Callable:
            ...

        def __setattr__(self, name: str, value: Callable) -> None:
            ...


arg = Arg()


def name_to_cmd_parts(name: str) -> list[str]:
    """`algorithm_list` is the command `algorithm list`, `correct` has no category"""
    return [part.replace("_", "-") for part in name.split("_", 1)]


class Config(dict):
    """Settings loaded from a JSON file; a missing file means no settings"""

    def __init__(self, file_path: PathLike | str):
        dict.__init__(self)
        self.file_path = file_path
        self.load()

    def load(self) -> None:
        self.clear()
        try:
            with open(self.file_path, encoding="utf-8") as fp:
                loaded = jsonlib.load(fp)
        except OSError as ex:
            if ex.errno == errno.ENOENT:
                return

            raise UserError(
                "Failed to load configuration file {!r}: {}: {}".format(self.file_path, ex.__class__.__name__, ex)
            ) from ex
        except ValueError as ex:
            raise UserError("Invalid JSON in configuration file {!r}".format(self.file_path)) from ex

        if not isinstance(loaded, dict):
            raise UserError("Configuration file {!r} must contain a JSON object".format(self.file_path))
        self.update(loaded)


class CommandLineTool:
    config: Config

    def __init__(self, name: str):
        self.log = logging.getLogger(name)
        self._categories: dict[str, argparse._SubParsersAction] = {}
        self.parser = argparse.ArgumentParser(prog=name, formatter_class=CustomFormatter)
        self.parser.add_argument(
            "--config",
            help="config file location %(default)r",
            default=envdefault.CORRECT_WORD_CONFIG,
        )
        self.parser.add_argument("--version", action="version", version="correct-word {}".format(__version__))
        self.subparsers = self.parser.add_subparsers(title="commands", dest="command", help="", metavar="")
        self.args: Namespace = Namespace()

    def add_cmd(self, func: Callable) -> None:
        """Add a parser for a single command method call"""
        assert func.__doc__, f"Missing docstring for {func.__qualname__}"

        *category, cmd = name_to_cmd_parts(func.__name__)
        subparsers = self.subparsers
        if category:
            cat = category[0]
            if cat not in self._categories:
                cat_parser = subparsers.add_parser(cat, help=cat.title() + " commands", formatter_class=CustomFormatter)
                self._categories[cat] = cat_parser.add_subparsers()
            subparsers = self._categories[cat]

        parser = subparsers.add_parser(cmd, help=func.__doc__, description=func.__doc__, formatter_class=CustomFormatter)
        parser.set_defaults(func=func)
        for arg_args, arg_kwargs in getattr(func, ARG_LIST_PROP, []):
            parser.add_argument(*arg_args, **arg_kwargs)

        # keep the command listing in --help alphabetical
        self.subparsers._choices_actions.sort(key=lambda item: item.dest)

    def add_args(self, parser: argparse.ArgumentParser) -> None:
        pass  # override in sub-class

    def commands(self) -> list[Callable]:
        """Every method tagged with @arg, bound to this tool"""
        # looked up on the class so properties are never evaluated
        return [
            getattr(self, name)
            for name in dir(type(self))
            if callable(getattr(type(self), name)) and hasattr(getattr(type(self), name), ARG_LIST_PROP)
        ]

    def parse_args(self, args: Sequence[str] | None = None) -> None:
        self.add_args(self.parser)
        for func in self.commands():
            self.add_cmd(func)

        if ARGCOMPLETE_INSTALLED:
            argcomplete.autocomplete(self.parser)

        self.args = self.parser.parse_args(args=args)

    def pre_run(self, func: Callable) -> None:
        """Override in sub-class"""

    def print_response(
        self,
        result: Collection[Mapping[str, Any]],
        json: bool = True,
        table_layout: TableLayout | None = None,
        file: TextIO | None = None,
    ) -> None:
        """print command result as JSON or as a table"""
        if json:
            print(jsonlib.dumps(result, indent=4, sort_keys=True, ensure_ascii=False), file=file or sys.stdout)
        else:
            pretty.print_table(result, table_layout=table_layout, file=file)

    def run(self, args: Sequence[str] | None = None) -> int | None:
        args = args or sys.argv[1:]
        if not args:
            args = ["--help"]

        self.parse_args(args=args)
        try:
            self.config = Config(self.args.config)
            return self.run_actual(args)
        except (UserError, CorrectWordError) as ex:
            # nicer output on "expected" errors
            self.log.error("command failed: %s: %s", ex.__class__.__name__, ex)
            return 1
        except OSError as ex:
            if ex.errno != errno.EPIPE:
                raise
            self.log.error("*** output truncated ***")
            return 13  # SIGPIPE value in case anyone cares
        except KeyboardInterrupt:
            self.log.error("*** terminated by keyboard ***")
            return 2  # SIGINT

    def run_actual(self, args_for_help: Sequence[str]) -> int | None:
        func = getattr(self.args, "func", None)
        if not func:
            self.parser.parse_args(list(args_for_help) + ["--help"])
            return 1

        self.pre_run(func)
        return func()

    def main(self, args: Sequence[str] | None = None) -> NoReturn:
        level = logging.getLevelName(envdefault.CORRECT_WORD_LOG_LEVEL.strip().upper())
        logging.basicConfig(level=level if isinstance(level, int) else logging.INFO, format=LOG_FORMAT)
        sys.exit(self.run(args))
