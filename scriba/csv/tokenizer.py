"""Assembly of logical records from one or more physical lines.

A record is ``field (col_sep field)*``. Fields are either quoted (starting with a double quote,
with embedded quotes escaped by doubling them) or unquoted (anything but the column separator or
a quote). Empty unquoted fields are returned as None, while an empty quoted field ``""`` is
returned as the empty string, so absent and empty values can be told apart.

Quoted fields may contain line breaks, in which case further physical lines are appended to the
buffer and the whole buffer is matched again. Errors that cannot be fixed by more data (stray
quotes, line breaks in unquoted fields) are raised as soon as they are seen, without reading
ahead.
"""
from __future__ import annotations

from .abc import LINE_BREAKS, MalformedCSVError, Source

QUOTE = '"'
ESCAPED_QUOTE = '""'

Record = list
"""Ordered fields of a single logical line. Values are strings or None until converted."""


class Incomplete(Exception):
    """The buffer ends inside a quoted field, so another physical line is needed."""


class Tokenizer:
    """Splits physical lines from a source into records of raw fields."""

    def __init__(self, col_sep: str = ",", row_sep: str = "\n") -> None:
        self.col_sep = col_sep
        self.row_sep = row_sep

    def strip(self, text: str) -> str:
        """Remove exactly one trailing row separator, if present."""
        if text.endswith(self.row_sep):
            return text[: -len(self.row_sep)]

        return text

    def quoted(self, text: str, pos: int, line: int) -> tuple[str, int]:
        """Match a quoted field starting at pos, returning its value and end position."""
        parts = []
        start = pos + 1

        while True:
            end = text.find(QUOTE, start)
            if end == -1:
                raise Incomplete

            parts.append(text[start:end])

            if text.startswith(ESCAPED_QUOTE, end):
                parts.append(QUOTE)
                start = end + 2
                continue

            after = end + 1
            if after == len(text) or text.startswith(self.col_sep, after):
                return "".join(parts), after

            raise MalformedCSVError("Illegal quoting: unescaped quote in quoted field.", line)

    def unquoted(self, text: str, pos: int, line: int) -> tuple[str | None, int]:
        """Match an unquoted field starting at pos, returning its value and end position."""
        end = text.find(self.col_sep, pos)
        if end == -1:
            end = len(text)

        value = text[pos:end]

        if QUOTE in value:
            raise MalformedCSVError("Illegal quoting: quote in unquoted field.", line)

        if any(brk in value for brk in LINE_BREAKS):
            raise MalformedCSVError(r"Unquoted fields do not allow \r or \n.", line)

        return value or None, end

    def split(self, text: str, line: int = 0) -> Record:
        """Split a row-separator-free buffer into fields.

        Raises Incomplete if the buffer ends inside a quoted field.
        """
        if not text:
            return []

        fields = []
        pos = 0
        sep_len = len(self.col_sep)

        while True:
            if text.startswith(QUOTE, pos):
                value, pos = self.quoted(text, pos, line)
            else:
                value, pos = self.unquoted(text, pos, line)

            fields.append(value)

            if pos == len(text):
                return fields

            pos += sep_len

    def read(self, source: Source, line: int = 0) -> Record | None:
        """Consume a single logical record from source.

        Returns None at the end of the source and an empty record for blank lines.
        ``line`` is the number of the record being read, used for error messages.
        """
        buffer = source.gets(self.row_sep)
        if buffer is None:
            return None

        while True:
            try:
                return self.split(self.strip(buffer), line)
            except Incomplete:
                more = source.gets(self.row_sep)
                if more is None:
                    raise MalformedCSVError("Unclosed quoted field.", line) from None

                buffer += more
