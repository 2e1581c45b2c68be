"""Rendering of records as delimited text, the inverse of the tokenizer."""
from __future__ import annotations

from typing import Any, Iterable

from .abc import LINE_BREAKS
from .tokenizer import ESCAPED_QUOTE, QUOTE


class Writer:
    """Quotes fields only where the tokenizer would otherwise misread them."""

    def __init__(self, col_sep: str = ",", row_sep: str = "\n") -> None:
        self.col_sep = col_sep
        self.row_sep = row_sep

    def needs_quotes(self, text: str) -> bool:
        return (
            not text
            or self.col_sep in text
            or QUOTE in text
            or any(brk in text for brk in LINE_BREAKS)
        )

    def field(self, value: Any) -> str:
        if value is None:
            return ""

        text = str(value)
        if self.needs_quotes(text):
            return QUOTE + text.replace(QUOTE, ESCAPED_QUOTE) + QUOTE

        return text

    def render(self, fields: Iterable[Any]) -> str:
        """Render fields as a single line, including the row separator."""
        return self.col_sep.join(self.field(value) for value in fields) + self.row_sep
