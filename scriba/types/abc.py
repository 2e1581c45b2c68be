from __future__ import annotations

from abc import ABC, abstractmethod
from collections import namedtuple
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Union

import rich.repr

from ..csv.abc import ConfigurationError
from ..utils import snake_case

FieldInfo = namedtuple("FieldInfo", "index,line")
"""Position of a field: zero-based index in its record, and 1-based logical line number."""


@dataclass
@rich.repr.auto
class Converter(ABC):
    """Base class for converters that only need the field's value.

    Converters should return the field unchanged if it cannot be converted.
    """

    @abstractmethod
    def convert(self, field: Any) -> Any:
        """To be implemented in subclasses."""


@dataclass
@rich.repr.auto
class InfoConverter(ABC):
    """Base class for converters that also need to know where the field is."""

    @abstractmethod
    def convert(self, field: Any, info: FieldInfo) -> Any:
        """To be implemented in subclasses."""


@dataclass
class Function(Converter):
    """Wraps a plain callable taking the field only."""

    func: Callable[[Any], Any]

    def convert(self, field: Any) -> Any:
        return self.func(field)


@dataclass
class InfoFunction(InfoConverter):
    """Wraps a plain callable taking the field and its FieldInfo."""

    func: Callable[[Any, FieldInfo], Any]

    def convert(self, field: Any, info: FieldInfo) -> Any:
        return self.func(field, info)


AnyConverter = Union[Converter, InfoConverter]

Entry = Union[type, Converter, InfoConverter, list]
"""A registry value: converter class, converter instance, or list of other names."""


def as_converter(obj: Any) -> AnyConverter:
    """Plain callables are taken to be single-argument converters."""
    if isinstance(obj, (Converter, InfoConverter)):
        return obj

    if isinstance(obj, type) and issubclass(obj, (Converter, InfoConverter)):
        return obj()

    if callable(obj):
        return Function(obj)

    raise ConfigurationError(f"Object cannot be made into a converter: {obj!r}")


@dataclass
class ConverterRegistry:
    """Registry to manage named converters and combinations of them."""

    convs: dict[str, Entry] = field(default_factory=dict)

    def register(self, registered: type) -> type:
        self.convs[snake_case(registered.__name__)] = registered
        return registered

    def add(self, name: str, value: Entry | Callable | Iterable[str]) -> None:
        """Bind a name to a converter, a callable, or an ordered list of other names."""
        if isinstance(value, (list, tuple)):
            self.convs[name.lower()] = list(value)
        elif isinstance(value, type):
            self.convs[name.lower()] = value
        else:
            self.convs[name.lower()] = as_converter(value)

    def __getitem__(self, item: str) -> Entry:
        try:
            return self.convs[item.lower()]
        except KeyError:
            raise ConfigurationError(f"Unknown converter: {item!r}") from None

    def __contains__(self, item: str) -> bool:
        return item.lower() in self.convs

    def resolve(self, name: str, _seen: tuple[str, ...] = ()) -> list[AnyConverter]:
        """Flatten a (possibly nested) name into converter instances, in order."""
        if name.lower() in _seen:
            chain = " -> ".join((*_seen, name.lower()))
            raise ConfigurationError(f"Cyclic converter combination: {chain}")

        entry = self[name]

        if isinstance(entry, list):
            seen = (*_seen, name.lower())
            return [conv for item in entry for conv in self.resolve(item, seen)]

        return [as_converter(entry)]


Registry = ConverterRegistry()
"""'Singleton' registry of converters for data fields."""

HeaderRegistry = ConverterRegistry()
"""'Singleton' registry of converters for header fields."""
