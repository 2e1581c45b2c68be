"""Package logger and rich views of dialects, records and Arrow tables."""
from __future__ import annotations

import logging
import sys
from typing import Any, Sequence

import pyarrow.types as pat
from pyarrow import DataType, Schema
from pyarrow import Table as PaTable
from rich import box, get_console
from rich.padding import Padding
from rich.panel import Panel
from rich.pretty import Pretty
from rich.table import Table
from rich.text import Text

CONSOLE = get_console()

BOX = box.HORIZONTALS

LOG_FORMAT = "{asctime} {levelname} | {name} | {module}.{funcName}:{lineno}\n{message}"

DATE_FORMAT = "%H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """Colors the first (header) line of each log record according to its level."""

    RESET = "\x1b[0m"

    GREY = "\x1b[38;20m"

    COLORS = {
        logging.WARNING: "\x1b[33;1m",  # bold yellow
        logging.ERROR: "\x1b[31;1m",  # bold red
        logging.CRITICAL: "\x1b[31;1m",
    }

    def __init__(self, datefmt: str | None = DATE_FORMAT) -> None:
        super().__init__(LOG_FORMAT, style="{", datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:
        head, _, body = super().format(record).partition("\n")
        col = self.COLORS.get(record.levelno, self.GREY)
        return f"{col}{head}{self.RESET}\n{body}"


def setup_logging(
    name: str = "scriba",
    level: int = logging.INFO,
    color: bool = True,
) -> logging.Logger:
    """Configure the package logger. The stdout handler is only added once."""
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        if color:
            fmt = ColoredFormatter()
        else:
            fmt = logging.Formatter(LOG_FORMAT, style="{", datefmt=DATE_FORMAT)

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(fmt)
        logger.addHandler(handler)

    return logger


LOG = setup_logging()


def pformat(obj: Any, console=None, strip: bool = False) -> str:
    """Render anything rich knows how to print as a (log-friendly) string."""
    console = console or CONSOLE

    with console.capture() as capture:
        console.print(obj, end="")

    text = capture.get()
    return text.strip() if strip else text


def dict_view(d: dict, title: str = "", padding: int = 1) -> Padding:
    panel = Panel(Pretty(d), expand=False, title=title, box=BOX)
    return Padding(panel, padding)


def type_view(type: DataType) -> str:
    """Compact names for nested arrow types."""
    if pat.is_list(type):
        return f"list<{type.value_type}>"
    if pat.is_dictionary(type):
        return f"dict<{type.value_type}>"
    return str(type)


def schema_view(schema: Schema, title: str | None = "Schema", padding: int = 1) -> Padding:
    rt = Table(title=title, title_justify="left", box=BOX)
    rt.add_column("Column", justify="left", style="indian_red1", no_wrap=True)
    rt.add_column("Type", style="yellow3")

    for field in schema:
        rt.add_row(field.name, type_view(field.type))

    return Padding(rt, padding)


def records_view(
    records: Sequence[Sequence[Any]],
    names: Sequence[Any],
    types: Sequence[str] | None = None,
    title: str | None = None,
    n_rows: int | None = None,
    n_columns_max: int = 6,
    max_column_width: int = 20,
    padding: int = 1,
) -> Padding:
    """Rich table showing records (or a sample of them) below their column names.

    ``n_rows`` is the total number of records if only a sample is passed in. If ``types``
    are given, they're shown in an extra row at the bottom. Short records are padded.
    """
    n_rows = len(records) if n_rows is None else n_rows
    width = min(len(names), n_columns_max)
    clipped = len(names) > n_columns_max

    style = "bold indian_red1"
    caption = Text.from_markup(
        f"[{style}]{n_rows:,}[/] rows ✕ [{style}]{len(names)}[/] columns"
    )

    table = Table(
        title=title,
        caption=caption,
        title_justify="left",
        caption_justify="left",
        box=BOX,
    )

    for name in names[:width]:
        table.add_column(str(name), max_width=max_column_width, overflow="crop", no_wrap=True)
    if clipped:
        table.add_column("...")

    def cell(value):
        if value is None:
            return None
        return Pretty(value, max_length=max_column_width, max_string=max_column_width)

    lines = []
    for rec in records:
        cells = [cell(value) for value in list(rec)[:width]]
        cells += [None] * (width - len(cells))
        lines.append(cells + ["..."] if clipped else cells)

    if len(records) < n_rows:
        lines.append(["..."] * (width + clipped))

    for i, line in enumerate(lines):
        table.add_row(*line, end_section=i == len(lines) - 1)

    if types is not None:
        typ = [Text.from_markup(f"[italic yellow3]{t}[/]") for t in types[:width]]
        table.add_row(*typ, *([""] if clipped else []))

    return Padding(table, padding)


def table_view(
    tbl: PaTable,
    title: str | None = None,
    n_rows_max: int = 10,
    n_columns_max: int = 6,
    max_column_width: int = 20,
    padding: int = 1,
) -> Padding:
    """Arrow table as a rich table, with the column types in the last row."""
    sample = tbl.slice(0, n_rows_max)
    # Rows as tuples rather than dicts, since column names may repeat
    records = list(zip(*(column.to_pylist() for column in sample.columns)))

    return records_view(
        records,
        tbl.column_names,
        types=[type_view(column.type) for column in tbl.columns],
        title=title,
        n_rows=tbl.num_rows,
        n_columns_max=n_columns_max,
        max_column_width=max_column_width,
        padding=padding,
    )
