"""Record-at-a-time reading and writing of delimited text.

Separators are resolved once, when the stream is created. Each call to ``shift()`` then reads
exactly one logical record, runs it through the configured converters and, if headers are
active, wraps it in a :class:`~scriba.row.Row`.
"""
from __future__ import annotations

import io
from typing import IO, Any, Iterable, Iterator

from ..log import LOG, pformat
from ..row import Row
from ..types import HeaderRegistry, Pipeline, Registry, ensure_converters
from .abc import Options, Source, ensure_text
from .dialects import LineEndings, resolve
from .tokenizer import Record, Tokenizer
from .writer import Writer

FIRST_ROW = "first_row"


class Stream:
    """Reads records from, and appends records to, a text stream.

    ``data`` may be a string of delimited text, or a readable (and/or writable) text or binary
    stream. See :class:`~scriba.csv.abc.Options` for the accepted keyword options. Unknown
    options raise a ConfigurationError.
    """

    def __init__(self, data: str | IO, log: bool = False, **options: Any) -> None:
        self.options = Options.create(**options)
        self.log = log

        self.io = ensure_text(data)
        self.source = Source(self.io)
        self.dialect = resolve(
            self.source,
            col_sep=self.options.col_sep,
            row_sep=self.options.row_sep,
            detector=LineEndings(log=log),
        )

        self.tokenizer = Tokenizer(self.dialect.col_sep, self.dialect.row_sep)
        self.writer = Writer(self.dialect.col_sep, self.dialect.row_sep)

        self.converters = Pipeline(ensure_converters(self.options.converters, Registry))
        self.header_converters = Pipeline(
            ensure_converters(self.options.header_converters, HeaderRegistry)
        )

        self.init_headers()

        if self.log:
            LOG.info(pformat(self.dialect))

    def init_headers(self) -> None:
        """Reset header and line state to that of a freshly opened stream."""
        self.line_no = 0
        self._headers = None
        self._emit_headers = False

        headers = self.options.headers
        if headers is False or headers is True or headers == FIRST_ROW:
            return

        if isinstance(headers, str):
            headers = Tokenizer(self.dialect.col_sep, self.dialect.row_sep).read(
                Source(ensure_text(headers))
            )

        self._headers = self.header_converters.convert(list(headers or []), 0)
        self._emit_headers = self.options.return_headers

    @property
    def headers(self) -> list | None:
        """Header names, or None if they haven't been read from the first row yet."""
        return self._headers

    def shift(self) -> Record | Row | None:
        """Read the next record. Returns None when the stream is exhausted."""
        if self._emit_headers:
            self._emit_headers = False
            return Row(self._headers, list(self._headers), header_row=True)

        while True:
            fields = self.tokenizer.read(self.source, self.line_no + 1)
            if fields is None:
                return None

            self.line_no += 1

            if self.options.skip_blanks and not fields:
                continue

            if not self.options.use_headers:
                return self.converters.convert(fields, self.line_no)

            if self._headers is None:
                self._headers = self.header_converters.convert(fields, self.line_no)

                if self.log:
                    LOG.info(f"Using headers from line {self.line_no}: {self._headers}")

                if self.options.return_headers:
                    return Row(self._headers, list(self._headers), header_row=True)

                continue

            return Row(self._headers, self.converters.convert(fields, self.line_no))

    def __iter__(self) -> Iterator[Record | Row]:
        return self

    def __next__(self) -> Record | Row:
        row = self.shift()
        if row is None:
            raise StopIteration

        return row

    def read(self) -> list[Record | Row]:
        """All remaining records."""
        return list(self)

    readlines = read

    def append(self, row: Iterable[Any] | Row) -> Stream:
        """Write a single record, returning the stream itself to allow chaining."""
        fields = row.fields() if isinstance(row, Row) else row
        self.io.write(self.writer.render(fields))
        return self

    def writerows(self, rows: Iterable[Iterable[Any] | Row]) -> None:
        for row in rows:
            self.append(row)

    @property
    def string(self) -> str:
        """Everything in the underlying in-memory buffer."""
        return self.io.getvalue()

    def rewind(self) -> None:
        """Back to the start of the stream, forgetting any headers read so far."""
        self.source.rewind()
        self.init_headers()

    def eof(self) -> bool:
        return self.source.eof()

    def close(self) -> None:
        self.io.close()

    @property
    def closed(self) -> bool:
        return self.io.closed

    def __enter__(self) -> Stream:
        return self

    def __exit__(self, type, value, traceback) -> None:
        self.close()


def generate_buffer(text: str = "") -> io.StringIO:
    """In-memory buffer positioned at the end of text, ready for appending."""
    buffer = io.StringIO(text, newline="")
    buffer.seek(0, io.SEEK_END)
    return buffer
