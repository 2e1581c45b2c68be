"""Test splitting of delimited text into records."""
import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

import scriba
from scriba import ConfigurationError, MalformedCSVError, Stream
from scriba.csv import Source, Tokenizer
from scriba.csv.abc import overlap

from .utils import equal

TEST_CASES = [
    ('a,b', ["a", "b"]),
    ('a,"""b"""', ["a", '"b"']),
    ('a,"""b"', ["a", '"b']),
    ('a,"b"""', ["a", 'b"']),
    ('a,"\nb"""', ["a", '\nb"']),
    ('a,"""\nb"', ["a", '"\nb']),
    ('a,"""\nb\n"""', ["a", '"\nb\n"']),
    ('a,"""\nb\n""",\nc', ["a", '"\nb\n"', None]),
    ("a,,,", ["a", None, None, None]),
    (",", [None, None]),
    ('"",""', ["", ""]),
    ('""""', ['"']),
    ('"""",""', ['"', ""]),
    (',""', [None, ""]),
    (',"\r"', [None, "\r"]),
    ('"\r\n,"', ["\r\n,"]),
    ('"\r\n,",', ["\r\n,", None]),
]

BIG_DATA = "123456789\n" * 1024


@pytest.mark.parametrize("col_sep", [",", ";", "\t", "|"])
@pytest.mark.parametrize("text,expected", TEST_CASES)
def test_col_sep(col_sep, text, expected):
    text = text.replace(",", col_sep)
    expected = [None if f is None else f.replace(",", col_sep) for f in expected]
    assert equal(expected, scriba.parse_line(text, col_sep=col_sep), extra=text)


def test_other_col_sep_is_plain_text():
    assert scriba.parse_line(",,,;", col_sep=";") == [",,,", None]


def test_multi_character_col_sep():
    assert scriba.parse_line('a::"b::c"::::d', col_sep="::") == ["a", "b::c", None, "d"]


def test_row_sep():
    with pytest.raises(MalformedCSVError):
        scriba.parse_line("1,2,3\n,4,5\r\n", row_sep="\r\n")

    expected = ["1", "2", "3\n", "4", "5"]
    assert scriba.parse_line('1,2,"3\n",4,5\r\n', row_sep="\r\n") == expected


def test_multi_character_row_sep():
    assert scriba.parse("a,b<EOL>c,d<EOL>", row_sep="<EOL>") == [["a", "b"], ["c", "d"]]


def test_row_sep_straddling_reads():
    source = Source(io.StringIO("ab<EOL>cd<E"))
    assert source.gets("<EOL>") == "ab<EOL>"
    assert source.stream.tell() == 7
    assert source.gets("<EOL>") == "cd<E"
    assert source.gets("<EOL>") is None


@pytest.mark.parametrize(
    "text,sep,expected",
    [
        ("ab<E", "<EOL>", 2),
        ("ab<EO", "<EOL>", 3),
        ("ab<EOL", "<EOL>", 4),
        ("ab<EOL>", "<EOL>", 0),
        ("", "<EOL>", 0),
        ("a|", "|", 0),
    ],
)
def test_overlap(text, sep, expected):
    assert overlap(text, sep) == expected


@pytest.mark.parametrize("row_sep", ["\n", "\r\n", "\r", "|", "<EOL>"])
def test_reads_stop_at_row_sep(row_sep):
    """Nothing beyond the current record is taken from the underlying stream."""
    buffer = io.StringIO("a,b" + row_sep + "x" * 100_000 + row_sep, newline="")
    csv = Stream(buffer, row_sep=row_sep)
    assert csv.shift() == ["a", "b"]
    assert buffer.tell() == 3 + len(row_sep)
    assert csv.shift() == ["x" * 100_000]


def test_unknown_options():
    with pytest.raises(ConfigurationError, match="unknown"):
        Stream("", unknown="error")


def test_col_sep_needs_no_escaping():
    Stream("", col_sep="|")
    assert scriba.parse_line("a|b.c|*", col_sep="|") == ["a", "b.c", "*"]


@pytest.mark.parametrize("option", ["col_sep", "row_sep"])
def test_invalid_separators(option):
    with pytest.raises(ConfigurationError):
        Stream("", **{option: ""})


def test_empty_fields():
    assert scriba.parse_line(",,,") == [None, None, None, None]
    assert scriba.parse_line('"",""') == ["", ""]


def test_blank_lines():
    assert scriba.parse("a\n\nb\n") == [["a"], [], ["b"]]
    assert scriba.parse("a\n\nb\n\n", skip_blanks=True) == [["a"], ["b"]]


def test_empty_input():
    assert scriba.parse("") == []
    assert scriba.parse_line("") is None


def test_end_of_stream_is_idempotent():
    csv = Stream("a\n\n")
    assert csv.shift() == ["a"]
    assert csv.shift() == []
    assert csv.shift() is None
    assert csv.shift() is None


def test_quote_in_unquoted_field():
    with pytest.raises(MalformedCSVError, match="quote in unquoted field"):
        scriba.parse_line('a,b"c"')


def test_unquoted_line_breaks():
    with pytest.raises(MalformedCSVError, match="do not allow"):
        scriba.parse("a,b\nc\r", row_sep="\r")

    with pytest.raises(MalformedCSVError, match="do not allow"):
        scriba.parse("a\rb\n", row_sep="\n")


def test_unclosed_quote():
    with pytest.raises(MalformedCSVError, match="Unclosed quoted field") as exc:
        scriba.parse('a,b\nc,"d\ne\n')

    assert exc.value.line == 2


def test_error_line_numbers():
    with pytest.raises(MalformedCSVError) as exc:
        scriba.parse('a\n\nb\nc"\n')

    assert exc.value.line == 4
    assert "line 4" in str(exc.value)


@pytest.mark.parametrize(
    "head",
    ['valid,fields,bad start"', 'valid,fields,"bad start"unescaped'],
)
def test_fails_fast(head):
    """The error is raised without reading (much) beyond the offending line."""
    csv = Stream(head + BIG_DATA)

    with pytest.raises(MalformedCSVError):
        csv.shift()

    assert csv.line_no == 0
    assert not csv.eof()
    assert len(csv.source.pending) < len(BIG_DATA)


def test_tokenizer_split():
    tok = Tokenizer(col_sep=";", row_sep="\n")
    assert tok.split("") == []
    assert tok.split('a;"b;c";') == ["a", "b;c", None]
    assert tok.strip("a;b\n\n") == "a;b\n"
    assert tok.strip("a;b") == "a;b"


field_text = st.text()
records = st.lists(st.lists(field_text, max_size=5), max_size=10)


@given(records=records, col_sep=st.sampled_from([",", ";", "\t", "|"]))
@pytest.mark.parametrize("row_sep", ["\n", "\r\n", "\r"])
def test_record_count(records, col_sep, row_sep):
    options = {"col_sep": col_sep, "row_sep": row_sep}
    text = "".join(scriba.generate_line(rec, **options) for rec in records)

    csv = Stream(text, **options)
    for expected in records:
        assert equal(expected, csv.shift(), extra=text)

    assert csv.shift() is None
    assert csv.shift() is None
