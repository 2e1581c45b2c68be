"""Test logging setup and rich views."""
import logging

import pyarrow as pa

from scriba.csv import Dialect
from scriba.log import ColoredFormatter, pformat, records_view, setup_logging, table_view


def test_setup_logging_once():
    logger = setup_logging("scriba.test_once")
    setup_logging("scriba.test_once")
    assert len(logger.handlers) == 1


def test_colored_formatter():
    record = logging.LogRecord("scriba", logging.WARNING, __file__, 1, "careful", None, None)
    text = ColoredFormatter().format(record)
    head, body = text.split("\n")
    assert head.startswith(ColoredFormatter.COLORS[logging.WARNING])
    assert head.endswith(ColoredFormatter.RESET)
    assert body == "careful"


def test_dialect_view():
    text = pformat(Dialect(col_sep=";", row_sep="\r\n"))
    assert "CSV Dialect" in text
    assert "';'" in text


def test_records_view_clips_columns():
    names = [f"col{i}" for i in range(8)]
    view = records_view([list(range(8)), [1]], names, n_rows=5, n_columns_max=3)
    text = pformat(view)
    assert "col2" in text
    assert "col3" not in text
    assert "5 rows" in text
    assert "8 columns" in text


def test_table_view():
    tbl = pa.table({"a": [1, 2], "b": ["x", None]})
    text = pformat(table_view(tbl, title="test"))
    assert "int64" in text
    assert "string" in text
    assert "2 rows" in text
