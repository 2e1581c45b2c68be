"""Materialization of parsed records as Arrow tables."""
from __future__ import annotations

import io
from importlib.util import find_spec
from pathlib import Path
from typing import Any, Iterable, Sequence

import pyarrow as pa
from pyarrow import Array

from .csv import Stream
from .csv.abc import FileLike
from .log import LOG
from .row import Row
from .utils import clean_column_names

PANDAS_INSTALLED = find_spec("pandas") is not None


def column_array(values: list, name: str) -> Array:
    """Let Arrow infer the column type, falling back to strings for mixed values."""
    try:
        return pa.array(values)
    except (pa.ArrowInvalid, pa.ArrowTypeError, OverflowError):
        LOG.warning(f"Column '{name}' has values of mixed types. Will keep them as strings.")
        return pa.array([None if v is None else str(v) for v in values], type=pa.string())


def to_table(rows: Iterable[Row | Sequence[Any]], headers: Sequence[Any] | None = None) -> pa.Table:
    """Make an Arrow table from records or Rows, padding short records with nulls.

    Column names are taken from ``headers`` if given, or else from the Rows themselves.
    Header rows are skipped.
    """
    records = []
    for row in rows:
        if isinstance(row, Row):
            if row.header_row():
                continue

            if headers is None or len(row.headers()) > len(headers):
                headers = row.headers()

            records.append(row.fields())
        else:
            records.append(list(row))

    headers = list(headers or [])
    width = max([len(headers)] + [len(rec) for rec in records])
    names = clean_column_names(headers + [None] * (width - len(headers)))

    columns = [
        column_array([rec[i] if i < len(rec) else None for rec in records], name)
        for i, name in enumerate(names)
    ]

    return pa.Table.from_arrays(columns, names=names)


def read_table(fp: FileLike, to_pandas: bool = False, log: bool = False, **options):
    """Read all records of a file or buffer into an Arrow table (or pandas DataFrame).

    Headers are read from the first row unless configured otherwise.
    """
    options.setdefault("headers", True)

    if isinstance(fp, (str, Path)):
        fp = io.open(fp, encoding="utf-8", errors="replace", newline="")  # noqa: SIM115

    with Stream(fp, log=log, **options) as csv:
        rows = csv.read()
        tbl = to_table(rows, headers=csv.headers)

    if to_pandas:
        if not PANDAS_INSTALLED:
            raise ImportError("It seems pandas isn't installed in this environment!")

        return tbl.to_pandas()

    return tbl
