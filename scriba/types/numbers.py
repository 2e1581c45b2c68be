"""Converters parsing numeric strings.

Anything not looking like a number is returned unchanged.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any

from .abc import Converter, Registry
from .regex import RE_IS_FLOAT, RE_IS_INT

IS_INT = re.compile(RE_IS_INT)
IS_FLOAT = re.compile(RE_IS_FLOAT)


def maybe_parse_int(field: Any) -> Any:
    """Base-10 integers with optional sign, surrounding whitespace and digit underscores."""
    if not isinstance(field, str) or not IS_INT.match(field.strip()):
        return field

    try:
        return int(field)
    except ValueError:
        # Digit strings beyond the interpreter's int conversion limit
        return field


def maybe_parse_float(field: Any) -> Any:
    """Out of range values like "1e999" are kept as strings rather than becoming inf."""
    if not isinstance(field, str) or not IS_FLOAT.match(field.strip()):
        return field

    try:
        value = float(field)
    except ValueError:
        return field

    return value if math.isfinite(value) else field


@dataclass
@Registry.register
class Integer(Converter):
    """Parses strings like "42", "-7" or "1_000" into ints."""

    def convert(self, field: Any) -> Any:
        return maybe_parse_int(field)


@dataclass
@Registry.register
class Float(Converter):
    """Parses strings like "1.5", ".5", "-2." or "1e-3" into floats."""

    def convert(self, field: Any) -> Any:
        return maybe_parse_float(field)


Registry.add("numeric", ["integer", "float"])
