"""Subpackage for converting parsed fields into Python values.

Converters are looked up by name in two registries, one for data fields and one for header
fields. Both can be extended at runtime using ``register()`` or ``add()``.
"""
from .abc import (
    Converter,
    ConverterRegistry,
    FieldInfo,
    Function,
    HeaderRegistry,
    InfoConverter,
    InfoFunction,
    Registry,
)
from .cast import Pipeline, ensure_converters
from .numbers import Float, Integer
from .strings import Downcase, Symbol
from .timestamps import Date, DateTime

"""Note, we need to import the types here, otherwise they won't be registered."""

__all__ = [
    "Converter",
    "ConverterRegistry",
    "Date",
    "DateTime",
    "Downcase",
    "FieldInfo",
    "Float",
    "Function",
    "HeaderRegistry",
    "InfoConverter",
    "InfoFunction",
    "Integer",
    "Pipeline",
    "Registry",
    "Symbol",
    "ensure_converters",
]
