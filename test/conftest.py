"""Shared fixtures."""
from dataclasses import dataclass, field
from inspect import cleandoc

import pytest


@dataclass
class TestCase:
    name: str
    csv: str
    options: dict = field(default_factory=dict)


@pytest.fixture
def simple_csv() -> TestCase:
    return TestCase(
        name="simple",
        csv=cleandoc(
            """
            first,second,third
            A,B,C
            1,2,3
            """
        )
        + "\n",
    )


@pytest.fixture
def matching_csv() -> TestCase:
    """Headers and fields that look alike."""
    return TestCase(name="matching", csv="1,2,3\n1,2,3\n")


@pytest.fixture
def csv_file(tmp_path, simple_csv):
    fp = tmp_path / "simple.csv"
    fp.write_text(simple_csv.csv, encoding="utf-8", newline="")
    return fp


@pytest.fixture
def semicolon_csv() -> TestCase:
    """Windows line endings and a quoted field containing both separators."""
    return TestCase(
        name="semicolon",
        csv='id;note\r\n1;"a;b\r\nc"\r\n2;\r\n',
        options={"col_sep": ";", "headers": True},
    )
