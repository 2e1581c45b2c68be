"""Converters normalizing header names."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from .abc import Converter, HeaderRegistry
from .regex import RE_NON_WORD, RE_WHITESPACE


def symbolize(name: str) -> str:
    """Make an identifier-like name, e.g. "TWO Three" -> "two_three"."""
    name = re.sub(RE_WHITESPACE, "_", name.strip().lower())
    return re.sub(RE_NON_WORD, "", name)


@dataclass
@HeaderRegistry.register
class Downcase(Converter):
    def convert(self, field: Any) -> Any:
        return field.lower() if isinstance(field, str) else field


@dataclass
@HeaderRegistry.register
class Symbol(Converter):
    """Lower-cased, underscore-separated names without punctuation."""

    def convert(self, field: Any) -> Any:
        return symbolize(field) if isinstance(field, str) else field
