"""Common helpers."""
from __future__ import annotations

import re
from collections import Counter
from time import perf_counter
from typing import Any, Iterable

RE_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def snake_case(name: str) -> str:
    """Registry key for a class name, e.g. "DateTime" -> "date_time"."""
    return RE_CAMEL_BOUNDARY.sub("_", name).lower()


def uniquify(names: Iterable[str]) -> list[str]:
    """Append a counter to repeated names, e.g. ["a", "a"] -> ["a", "a_1"]."""
    names = list(names)
    counts = Counter(names)
    seen = Counter()
    taken = set(names)
    result = []

    for name in names:
        if counts[name] > 1 and seen[name] > 0:
            candidate = f"{name}_{seen[name]}"
            while candidate in taken:
                seen[name] += 1
                candidate = f"{name}_{seen[name]}"
            taken.add(candidate)
            result.append(candidate)
        else:
            result.append(name)

        seen[name] += 1

    return result


def clean_column_names(names: Iterable[Any]) -> list[str]:
    """Handle missing and duplicate column names."""
    names = ["" if name is None else str(name).strip() for name in names]
    unnamed = [i for i, x in enumerate(names) if not x]
    for i, col_idx in enumerate(unnamed):
        names[col_idx] = f"Unnamed_{i}"

    return uniquify(names)


class Timer:
    def __enter__(self):
        self.start = perf_counter()
        return self

    def __exit__(self, type, value, traceback):
        self.end = perf_counter()
        self.elapsed = self.end - self.start
