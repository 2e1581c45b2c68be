"""Command-line interface."""
import codecs
from pathlib import Path
from typing import List, Optional

import typer

from . import filter as filter_rows
from .arrow import read_table
from .log import LOG, pformat, schema_view, table_view
from .utils import Timer

CLI = typer.Typer()


def unescape(sep: str) -> str:
    """Allow separators like "\\t" to be passed from the shell."""
    return codecs.decode(sep, "unicode_escape")


@CLI.command()
def show(
    fp: Path = typer.Argument(..., exists=True, file_okay=True, dir_okay=False, resolve_path=True),
    col_sep: str = typer.Option(","),
    row_sep: str = typer.Option("auto"),
    headers: bool = typer.Option(True),
    converters: Optional[List[str]] = typer.Option(None),
    skip_blanks: bool = typer.Option(False),
    log: bool = typer.Option(False),
):
    """Read a delimited text file and print it as a table."""
    with Timer() as t:
        tbl = read_table(
            fp,
            log=log,
            col_sep=unescape(col_sep),
            row_sep=unescape(row_sep),
            headers=headers,
            converters=converters or None,
            skip_blanks=skip_blanks,
        )

    LOG.info(pformat(table_view(tbl, title=fp.name)))
    LOG.info(pformat(schema_view(tbl.schema, title="Schema")))
    LOG.info(f"Reading took {t.elapsed:.2f} seconds.")


@CLI.command()
def convert(
    input: Path = typer.Argument(..., exists=True, file_okay=True, dir_okay=False),
    output: Path = typer.Argument(..., dir_okay=False),
    in_col_sep: str = typer.Option(","),
    in_row_sep: str = typer.Option("auto"),
    out_col_sep: str = typer.Option(","),
    out_row_sep: str = typer.Option("\\n"),
):
    """Rewrite a delimited text file using different separators."""
    n_rows = 0

    src = input.open(encoding="utf-8", errors="replace", newline="")
    dst = output.open("w", encoding="utf-8", newline="")

    with src, dst:
        rows = filter_rows(
            src,
            dst,
            in_col_sep=unescape(in_col_sep),
            in_row_sep=unescape(in_row_sep),
            out_col_sep=unescape(out_col_sep),
            out_row_sep=unescape(out_row_sep),
        )
        for _ in rows:
            n_rows += 1

    LOG.info(f"Wrote {n_rows:,} records to {output}.")
