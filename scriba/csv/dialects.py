"""Resolution of column and row separators.

Column separators are always literal. Row separators may be requested as ``"auto"``, in which
case the first line ending found in the upcoming data is used. Detection does not parse, so a
line break embedded in a quoted field may be picked up as the separator. This assumes line
endings are used consistently throughout a file, which is almost always the case.

The detector only peeks at the data, so the read position is unchanged afterwards.
"""
from __future__ import annotations

import os
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from rich.padding import Padding

from ..log import LOG, dict_view
from .abc import AUTO, Source

CHUNK_SIZE: int = 1024
"""How many characters to peek at per attempt when detecting the row separator."""

RE_LINE_END = re.compile(r"\r\n?|\n")
"""At any position, prefer the two-character windows line ending over a lone CR."""


@dataclass(frozen=True)
class Dialect:
    """Resolved, literal separators of a stream."""

    col_sep: str = ","
    row_sep: str = os.linesep

    def __rich__(self) -> Padding:
        return dict_view(self.__dict__, title="CSV Dialect")


@dataclass
class RowSepDetector(ABC):
    """Base class for row separator detectors."""

    @abstractmethod
    def detect(self, source: Source) -> str:
        ...


@dataclass
class LineEndings(RowSepDetector):
    """Detect the earliest of ``\\r\\n``, ``\\n`` or ``\\r`` in the upcoming data."""

    chunk_size: int = CHUNK_SIZE
    default: str = os.linesep
    log: bool = False

    def detect(self, source: Source) -> str:
        start = 0

        while True:
            sample = source.peek(start + self.chunk_size)

            # Don't split a "\r\n" between two samples
            if sample.endswith("\r"):
                sample = source.peek(len(sample) + 1)

            if match := RE_LINE_END.search(sample, start):
                return match.group()

            if len(sample) <= start:
                break

            start = len(sample)

        if self.log:
            LOG.info(f"No line ending found. Falling back to default {self.default!r}.")

        return self.default


def resolve(
    source: Source,
    col_sep: str = ",",
    row_sep: str = AUTO,
    detector: RowSepDetector | None = None,
) -> Dialect:
    """Make a dialect with literal separators, detecting the row separator if requested.

    Write-only streams have nothing to detect, and get the platform default.
    """
    if row_sep == AUTO:
        detector = detector or LineEndings()
        row_sep = detector.detect(source) if source.readable() else os.linesep

    return Dialect(col_sep=col_sep, row_sep=row_sep)
