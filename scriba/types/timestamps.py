"""Converters parsing date and timestamp strings.

ISO 8601 is always tried first (via ``fromisoformat``), followed by the formats below in
order, the first one matching wins. Formats using ``%y`` come before their ``%Y`` counterparts,
since ``%y`` fails on four-digit years, while ``%Y`` would not fail on two-digit ones.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from .abc import Converter, Registry

TIMESTAMP_FORMATS: list[str] = [
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%dT%I:%M:%S %p",
    "%Y-%m-%dT%I:%M %p",
    "%Y-%m-%d %I:%M:%S %p",
    "%Y/%m/%d %H:%M:%S",
    "%d/%m/%Y %H:%M:%S",
    "%a %b %d %H:%M:%S %Y",
    "%a %b %d %I:%M:%S %p %Y",
    "%a %d %b %H:%M:%S %Y",
    "%a, %b %d %H:%M:%S %Y",
    "%a, %d %b %H:%M:%S %Y",
    "%a %d %b %Y %H:%M:%S",
    "%a, %d %b %Y %H:%M:%S",
    "%a, %d %b %Y %H:%M:%S %z",
    "%a %b %d %H:%M:%S %z %Y",
]

DATE_FORMATS: list[str] = [
    "%d-%m-%y",
    "%d/%m/%y",
    "%Y-%m-%d",
    "%d-%m-%Y",
    "%Y/%m/%d",
    "%d/%m/%Y",
    "%m/%d/%Y",
    "%d %b %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%a %d %b %Y",
    "%a, %d %b %Y",
]


def parse_datetime(text: str, formats: list[str]) -> datetime | None:
    """Try ISO 8601 followed by each format in order."""
    text = text.strip()

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass

    for fmt in formats:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:  # noqa: PERF203
            continue

    return None


@dataclass
@Registry.register
class DateTime(Converter):
    """Parses timestamps (or plain dates, at midnight) into datetimes."""

    formats: list[str] = field(default_factory=lambda: TIMESTAMP_FORMATS + DATE_FORMATS)

    def convert(self, field: Any) -> Any:
        if not isinstance(field, str):
            return field

        result = parse_datetime(field, self.formats)
        return field if result is None else result


@dataclass
@Registry.register
class Date(Converter):
    """Parses dates, or the date part of timestamps."""

    formats: list[str] = field(default_factory=lambda: DATE_FORMATS + TIMESTAMP_FORMATS)

    def convert(self, field: Any) -> Any:
        if not isinstance(field, str):
            return field

        text = field.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass

        result = parse_datetime(text, self.formats)
        return field if result is None else result.date()


Registry.add("all", ["date_time", "numeric"])
