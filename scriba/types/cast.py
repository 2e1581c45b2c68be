"""Ordered pipelines of field converters."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Union

from .abc import AnyConverter, ConverterRegistry, FieldInfo, InfoConverter, Registry, as_converter

Converters = Union[str, AnyConverter, Callable, Iterable[Union[str, AnyConverter, Callable]], None]
"""Accepted argument type where converters are expected: names, converters or callables."""


def ensure_converters(
    converters: Converters = None,
    registry: ConverterRegistry = Registry,
) -> list[AnyConverter]:
    """Turn names, converter instances and callables (or lists of them) into converters."""
    if converters is None:
        return []

    if isinstance(converters, str) or not isinstance(converters, Iterable):
        converters = [converters]

    result = []
    for conv in converters:
        if isinstance(conv, str):
            result.extend(registry.resolve(conv))
        else:
            result.append(as_converter(conv))

    return result


@dataclass
class Pipeline:
    """Applies converters in registration order to every field of a record.

    Once a converter has turned a field into anything but a string, the remaining
    converters are skipped for that field.
    """

    converters: list[AnyConverter] = field(default_factory=list)

    def add(self, converter: Any, registry: ConverterRegistry = Registry) -> None:
        self.converters.extend(ensure_converters(converter, registry))

    def convert_field(self, value: Any, info: FieldInfo) -> Any:
        for conv in self.converters:
            if isinstance(conv, InfoConverter):
                value = conv.convert(value, info)
            else:
                value = conv.convert(value)

            if not isinstance(value, str):
                break

        return value

    def convert(self, fields: list, line: int) -> list:
        if not self.converters:
            return fields

        return [self.convert_field(value, FieldInfo(i, line)) for i, value in enumerate(fields)]

    def __len__(self) -> int:
        return len(self.converters)
