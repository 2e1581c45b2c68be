"""Subpackage for reading and writing delimited text.

Resolves separators, splits physical lines into records and renders records back to text.
"""
from .abc import ConfigurationError, MalformedCSVError, Options, ScribaError, Source
from .dialects import Dialect, LineEndings, RowSepDetector
from .stream import Stream
from .tokenizer import Tokenizer
from .writer import Writer

__all__ = [
    "ConfigurationError",
    "Dialect",
    "LineEndings",
    "MalformedCSVError",
    "Options",
    "RowSepDetector",
    "ScribaError",
    "Source",
    "Stream",
    "Tokenizer",
    "Writer",
]
