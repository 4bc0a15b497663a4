import pytest

from kgnode.common.errors import MalformedEscapeError
from kgnode.common.escape import escape_iri, escape_string, unescape


def test_escape_iri_plain_is_unchanged():
    assert escape_iri("http://example.org/x") == "http://example.org/x"


def test_escape_iri_space():
    assert escape_iri("http://example.org/a b") == "http://example.org/a\\u0020b"


@pytest.mark.parametrize("ch,escaped", [
    ("<", "\\u003C"),
    (">", "\\u003E"),
    ('"', "\\u0022"),
    ("{", "\\u007B"),
    ("}", "\\u007D"),
    ("|", "\\u007C"),
    ("^", "\\u005E"),
    ("`", "\\u0060"),
    ("\t", "\\u0009"),
    ("\x00", "\\u0000"),
    ("\x7f", "\\u007F"),
])
def test_escape_iri_forbidden(ch, escaped):
    assert escape_iri(f"a{ch}b") == f"a{escaped}b"


def test_escape_iri_backslash_is_doubled():
    assert escape_iri("a\\b") == "a\\\\b"


def test_escape_iri_keeps_unicode_by_default():
    assert escape_iri("http://example.org/café") == "http://example.org/café"


def test_escape_iri_ascii_only():
    assert escape_iri("http://example.org/café", ascii_only=True) == "http://example.org/caf\\u00E9"
    assert escape_iri("x\U0001F600", ascii_only=True) == "x\\U0001F600"


def test_escape_string():
    assert escape_string('say "hi"\n') == 'say \\"hi\\"\\n'
    assert escape_string("tab\there\\") == "tab\\there\\\\"
    assert escape_string("bell\x07") == "bell\\u0007"


def test_unescape_uchar_and_echar():
    assert unescape("a\\u0020b") == "a b"
    assert unescape("\\U0001F600") == "\U0001F600"
    assert unescape("\\t\\b\\n\\r\\f\\\"\\'\\\\") == "\t\b\n\r\f\"'\\"
    assert unescape("caf\\u00e9") == "café"


def test_unescape_surrogate_pair():
    assert unescape("\\uD83D\\uDE00") == "\U0001F600"


def test_unescape_without_backslash_returns_input():
    value = "http://example.org/x"
    assert unescape(value) is value


@pytest.mark.parametrize("value", [
    "http://example.org/a b",
    "x<y>z",
    'quote" and {braces} | ^ `',
    "back\\slash",
    "tab\tnew\nline",
    "ünïcödé",
    "emoji \U0001F600",
])
def test_iri_escape_is_inverted(value):
    assert unescape(escape_iri(value)) == value
    assert unescape(escape_iri(value, ascii_only=True)) == value


@pytest.mark.parametrize("value", [
    'a "quoted" value',
    "multi\nline\r\n",
    "back\\slash\x01",
])
def test_string_escape_is_inverted(value):
    assert unescape(escape_string(value)) == value


@pytest.mark.parametrize("value,position", [
    ("abc\\", 3),
    ("a\\xb", 1),
    ("\\u12", 0),
    ("\\u12G4", 0),
    ("\\U0011000", 0),
    ("\\U00110000", 0),
    ("\\U0000D800", 0),
    ("\\uDC00", 0),
    ("\\uD83Dx", 0),
    ("\\uD83D\\u0041", 6),
])
def test_unescape_malformed(value, position):
    with pytest.raises(MalformedEscapeError) as exc_info:
        unescape(value)
    assert exc_info.value.position == position
    assert exc_info.value.value == value


def test_malformed_escape_is_value_error():
    with pytest.raises(ValueError):
        unescape("\\z")
