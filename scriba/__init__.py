"""A package for streaming reads and writes of CSV and CSV-like delimited text."""
from __future__ import annotations

import io
import re
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any, Iterable, Iterator

from .arrow import read_table, to_table
from .csv import (
    ConfigurationError,
    Dialect,
    MalformedCSVError,
    Options,
    ScribaError,
    Stream,
)
from .csv.stream import generate_buffer
from .log import CONSOLE, LOG
from .row import Row
from .types import (
    Converter,
    FieldInfo,
    Function,
    HeaderRegistry,
    InfoConverter,
    InfoFunction,
    Registry,
)

RE_INPUT_OPTION = re.compile(r"^in(?:put)?_(.+)$")
RE_OUTPUT_OPTION = re.compile(r"^out(?:put)?_(.+)$")


def parse(text: str | IO, **options: Any) -> list:
    """All records in text."""
    with Stream(text, **options) as csv:
        return csv.read()


def parse_line(line: str, **options: Any) -> Any:
    """The first record in line."""
    return Stream(line, **options).shift()


@contextmanager
def generate(text: str = "", **options: Any) -> Iterator[Stream]:
    """A stream appending records to (a copy of) text. Find the result in ``.string``.

    Example::

        with scriba.generate() as csv:
            csv.append(["a", "b"])

        csv.string  # "a,b\\n"
    """
    yield Stream(generate_buffer(text), **options)


def generate_line(fields: Iterable[Any], **options: Any) -> str:
    """A single record rendered as text, including the row separator."""
    with generate(**options) as csv:
        csv.append(fields)

    return csv.string


def open(path: str | Path, mode: str = "r", **options: Any) -> Stream:  # noqa: A001
    """A stream over a file. Use as a context manager to make sure the file gets closed."""
    if "b" in mode:
        fp = io.open(path, mode)  # noqa: SIM115
    else:
        fp = io.open(path, mode, encoding="utf-8", errors="replace", newline="")  # noqa: SIM115

    return Stream(fp, **options)


def foreach(path: str | Path, **options: Any) -> Iterator:
    """Iterate over the records of a file."""
    with open(path, **options) as csv:
        yield from csv


def read(path: str | Path, **options: Any) -> list:
    """All records of a file."""
    with open(path, **options) as csv:
        return csv.read()


readlines = read


def split_options(options: dict[str, Any]) -> tuple[dict, dict]:
    """Options prefixed with "in_"/"input_" or "out_"/"output_" apply to one side only."""
    inputs, outputs = {}, {}

    for key, value in options.items():
        if match := RE_INPUT_OPTION.match(key):
            inputs[match.group(1)] = value
        elif match := RE_OUTPUT_OPTION.match(key):
            outputs[match.group(1)] = value
        else:
            inputs[key] = value
            outputs[key] = value

    return inputs, outputs


def filter(  # noqa: A001
    input: str | IO | None = None,
    output: IO | None = None,
    **options: Any,
) -> Iterator:
    """Pipe the records of input to output, passing each through the caller first.

    Every record is yielded before it is written, so in-place modifications of
    the record show up in the output::

        for row in scriba.filter(src, dst, in_col_sep=";"):
            row.append("new column")
    """
    in_options, out_options = split_options(options)

    reader = Stream(sys.stdin if input is None else input, **in_options)
    writer = Stream(sys.stdout if output is None else output, **out_options)

    for row in reader:
        yield row
        writer.append(row)


__all__ = [
    "CONSOLE",
    "ConfigurationError",
    "Converter",
    "Dialect",
    "FieldInfo",
    "Function",
    "HeaderRegistry",
    "InfoConverter",
    "InfoFunction",
    "LOG",
    "MalformedCSVError",
    "Options",
    "Registry",
    "Row",
    "ScribaError",
    "Stream",
    "filter",
    "foreach",
    "generate",
    "generate_line",
    "open",
    "parse",
    "parse_line",
    "read",
    "read_table",
    "readlines",
    "to_table",
]

__version__ = "0.1.0"
