# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Pretty-print suggestion rows as tables"""
from __future__ import annotations

from typing import Any, Collection, Iterator, Mapping, Sequence, TextIO

import json
import sys

ResultType = Collection[Mapping[str, Any]]
TableLayout = Sequence[str]

FLOAT_PRECISION = 3


def format_item(value: Any) -> str:
    if isinstance(value, bool) or value is None:
        return json.dumps(value)
    if isinstance(value, float):
        return "{:.{}f}".format(value, FLOAT_PRECISION)
    if isinstance(value, str):
        # json encode strings, but if the input string is exactly the same
        # as the output without quotes we'll go with the original
        json_v = json.dumps(value, ensure_ascii=False)
        if value and json_v == '"{}"'.format(value):
            return value
        return json_v
    return "{}".format(value)


def yield_table(result: ResultType, table_layout: TableLayout | None = None) -> Iterator[str]:
    """
    format a list of flat dicts as a table yielding string rows

    :param list result: List of dicts to be printed.
    :param list table_layout: Columns to print in order, e.g. ["rank", "word", "confidence"].
        Defaults to every field, sorted by name.
    """
    if table_layout is None:
        table_layout = sorted({key for item in result for key in item})

    rows = [{field: format_item(item[field]) for field in table_layout if field in item} for item in result]
    widths = {field: max([len(field)] + [len(row.get(field, "")) for row in rows]) for field in table_layout}

    yield "  ".join(field.upper().ljust(widths[field]) for field in table_layout)
    yield "  ".join("=" * widths[field] for field in table_layout)
    for row in rows:
        yield "  ".join(row.get(field, "").ljust(widths[field]) for field in table_layout).strip()


def print_table(result: ResultType, table_layout: TableLayout | None = None, file: TextIO | None = None) -> None:
    """print a list of dicts in a nicer table format"""
    if not result:
        return
    for row in yield_table(result, table_layout=table_layout):
        print(row, file=file or sys.stdout)
