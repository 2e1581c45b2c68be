"""Errors, options and the character source all CSV streams read from."""
from __future__ import annotations

import io
from dataclasses import dataclass, fields
from pathlib import Path
from typing import IO, Any, Iterable, Union

FileLike = Union[str, Path, IO]

LINE_BREAKS = ("\r", "\n")

AUTO = "auto"
"""Sentinel requesting automatic discovery of the row separator."""


class ScribaError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(ScribaError, ValueError):
    """Raised when options or converter names cannot be resolved."""


class MalformedCSVError(ScribaError):
    """Raised when the input doesn't follow the delimited text grammar."""

    def __init__(self, reason: str, line: int | None = None) -> None:
        self.reason = reason
        self.line = line
        msg = reason if line is None else f"{reason} (line {line})"
        super().__init__(msg)


def ensure_text(data: Any) -> IO:
    """Make sure we have a text buffer, keeping line endings untranslated."""
    if isinstance(data, str):
        return io.StringIO(data, newline="")

    if isinstance(data, (io.BufferedIOBase, io.RawIOBase)):
        return io.TextIOWrapper(data, encoding="utf-8", errors="replace", newline="")

    return data


def overlap(text: str, sep: str) -> int:
    """Length of the longest proper prefix of ``sep`` that ``text`` ends with."""
    for size in range(min(len(sep) - 1, len(text)), 0, -1):
        if text.endswith(sep[:size]):
            return size

    return 0


class Source:
    """Character source reading no further than the next row separator.

    Python's text streams only split lines on (universal) newlines. Separators ending in a line
    break are read with ``readline()``, any other separator a few characters at a time, never
    requesting more than could possibly complete it. So a record arriving through a pipe or
    socket is returned as soon as its separator is in. Characters looked at during row
    separator detection are kept in ``pending`` and consumed first. Peeking never consumes data.
    """

    def __init__(self, stream: IO) -> None:
        self.stream = stream
        self.pending = ""

    def peek(self, size: int) -> str:
        """Return up to ``size`` upcoming characters without consuming them."""
        while len(self.pending) < size:
            chunk = self.stream.read(size - len(self.pending))
            if not chunk:
                break

            self.pending += chunk

        return self.pending[:size]

    def _read_towards(self, text: str, sep: str) -> str:
        if sep.endswith(LINE_BREAKS):
            return self.stream.readline()

        return self.stream.read(len(sep) - overlap(text, sep))

    def gets(self, sep: str) -> str | None:
        """Consume one physical line, including its separator if present.

        Returns None only if no data at all is left.
        """
        text, self.pending = self.pending, ""
        start = 0

        while (idx := text.find(sep, start)) == -1:
            # A multi-character separator may straddle two reads
            start = max(0, len(text) - len(sep) + 1)

            chunk = self._read_towards(text, sep)
            if not chunk:
                return text or None

            text += chunk

        end = idx + len(sep)
        self.pending = text[end:]
        return text[:end]

    def readable(self) -> bool:
        return self.stream.readable()

    def eof(self) -> bool:
        return not self.peek(1)

    def rewind(self) -> None:
        self.stream.seek(0)
        self.pending = ""


@dataclass
class Options:
    """All parameters accepted when constructing a stream, with their defaults.

    ``headers`` may be False (or None) for plain records, True or ``"first_row"`` to take the
    header names from the first record, a sequence of names, or a single delimited string of
    names. Note that the string ``"first_row"`` always means the former. To name a single
    column "first_row", pass the list ``["first_row"]``.
    """

    col_sep: str = ","
    row_sep: str = AUTO
    converters: Any = None
    headers: bool | str | Iterable[Any] = False
    return_headers: bool = False
    header_converters: Any = None
    skip_blanks: bool = False

    def __post_init__(self):
        if not isinstance(self.col_sep, str) or not self.col_sep:
            msg = f"Column separator must be a non-empty string: {self.col_sep!r}"
            raise ConfigurationError(msg)

        if not isinstance(self.row_sep, str) or not self.row_sep:
            msg = f"Row separator must be a non-empty string: {self.row_sep!r}"
            raise ConfigurationError(msg)

        if self.headers is None:
            self.headers = False

        if isinstance(self.headers, (bool, str)):
            return

        if not isinstance(self.headers, Iterable):
            raise ConfigurationError(f"Unsupported headers option: {self.headers!r}")

        self.headers = list(self.headers)

    @classmethod
    def names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def create(cls, **kwds) -> Options:
        """Fail on unknown keys before validating any values."""
        unknown = [key for key in kwds if key not in cls.names()]
        if unknown:
            raise ConfigurationError(f"Unknown options: {', '.join(unknown)}.")

        return cls(**kwds)

    @property
    def use_headers(self) -> bool:
        return self.headers is not False
