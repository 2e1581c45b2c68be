"""Header-aware view of a single record.

A row is an ordered list of (header, field) pairs. Headers don't need to be unique, so fields
can be looked up by name starting from a minimum index, which allows walking through all
columns sharing the same name::

    row = Row(["A", "B", "A"], [1, 2, 3])
    row.field("A")     # 1
    row.field("A", 1)  # 3

If there are more fields than headers (or vice versa), the shorter side is padded with None.
"""
from __future__ import annotations

from itertools import zip_longest
from typing import Any, Iterator, Sequence

import rich.repr


@rich.repr.auto
class Row:
    def __init__(
        self,
        headers: Sequence[Any],
        fields: Sequence[Any],
        header_row: bool = False,
    ) -> None:
        self._row = list(zip_longest(headers, fields))
        self._header_row = header_row

    def __rich_repr__(self) -> rich.repr.Result:
        yield self._row
        yield "header_row", self._header_row, False

    def header_row(self) -> bool:
        """Whether this row holds the header names themselves."""
        return self._header_row

    def field_row(self) -> bool:
        """Whether this row holds data."""
        return not self._header_row

    def headers(self) -> list[Any]:
        return [header for header, _ in self._row]

    def field(self, header_or_index: Any, minimum_index: int = 0) -> Any:
        """Field by position, or by the first matching header at or after minimum_index.

        Returns None if there is no such field.
        """
        if isinstance(header_or_index, int):
            try:
                return self._row[header_or_index][1]
            except IndexError:
                return None

        for header, value in self._row[minimum_index:]:
            if header == header_or_index:
                return value

        return None

    def fields(self, *selectors: Any) -> list[Any]:
        """All fields, or those matching headers, indices or (header, minimum_index) pairs."""
        if not selectors:
            return [value for _, value in self._row]

        return [
            self.field(*sel) if isinstance(sel, (list, tuple)) else self.field(sel)
            for sel in selectors
        ]

    def index(self, header: Any, minimum_index: int = 0) -> int | None:
        """Position of the first matching header at or after minimum_index."""
        for i, (name, _) in enumerate(self._row[minimum_index:], start=minimum_index):
            if name == header:
                return i

        return None

    def has_header(self, name: Any) -> bool:
        return name in self.headers()

    def has_field(self, value: Any) -> bool:
        return value in self.fields()

    __contains__ = has_header

    def __getitem__(self, header_or_index: Any) -> Any:
        return self.field(header_or_index)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return iter(self._row)

    def __len__(self) -> int:
        return len(self._row)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Row):
            return self._row == other._row and self._header_row == other._header_row

        return NotImplemented

    def to_list(self) -> list[tuple[Any, Any]]:
        return list(self._row)

    def to_dict(self) -> dict[Any, Any]:
        """Map headers to fields. For repeated headers, the last pair wins."""
        return dict(self._row)
