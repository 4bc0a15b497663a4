"""
Escaping and unescaping of N-Triples IRI and string content.

``escape_iri`` produces text that can be placed between ``<`` and ``>``,
``escape_string`` produces text that can be placed between double quotes,
and ``unescape`` undoes either of them.
"""

from __future__ import annotations

from kgnode.common.errors import MalformedEscapeError

# Characters that may not appear literally inside an IRIREF
IRI_FORBIDDEN = '<>"{}|^`'

ECHAR_ENCODE = {
    "\\": "\\\\",
    '"': '\\"',
    "\t": "\\t",
    "\b": "\\b",
    "\n": "\\n",
    "\r": "\\r",
    "\f": "\\f",
}

ECHAR_DECODE = {
    "t": "\t",
    "b": "\b",
    "n": "\n",
    "r": "\r",
    "f": "\f",
    '"': '"',
    "'": "'",
    "\\": "\\",
}

HEX_DIGITS = "0123456789abcdefABCDEF"


def _uchar(cp: int) -> str:
    if cp <= 0xFFFF:
        return f"\\u{cp:04X}"
    return f"\\U{cp:08X}"


def escape_iri(value: str, ascii_only: bool = False) -> str:
    """
    Escape a bare IRI for use inside an N-Triples ``<...>`` token.

    Forbidden characters, whitespace and control characters are written as
    ``\\uXXXX``; a backslash is doubled. With ``ascii_only`` every non-ASCII
    code point is escaped as well.
    """
    out: list[str] = []
    for ch in value:
        cp = ord(ch)
        if ch == "\\":
            out.append("\\\\")
        elif ch in IRI_FORBIDDEN or cp <= 0x20 or cp == 0x7F:
            out.append(_uchar(cp))
        elif ascii_only and cp > 0x7E:
            out.append(_uchar(cp))
        else:
            out.append(ch)
    return "".join(out)


def escape_string(value: str) -> str:
    """Escape the lexical form of a literal for use inside double quotes."""
    out: list[str] = []
    for ch in value:
        cp = ord(ch)
        if ch in ECHAR_ENCODE:
            out.append(ECHAR_ENCODE[ch])
        elif cp < 0x20 or cp == 0x7F:
            out.append(_uchar(cp))
        else:
            out.append(ch)
    return "".join(out)


def _read_hex(value: str, start: int, count: int) -> int:
    digits = value[start:start + count]
    if len(digits) != count or any(d not in HEX_DIGITS for d in digits):
        raise MalformedEscapeError(
            value, start - 2, f"expected {count} hex digits"
        )
    return int(digits, 16)


def unescape(value: str) -> str:
    """
    Decode ``\\uXXXX``, ``\\UXXXXXXXX`` and ECHAR escapes.

    A high surrogate written as ``\\uD8xx`` must be followed by a low
    surrogate escape; the pair is combined into one code point. Any
    malformed sequence raises :class:`MalformedEscapeError`.
    """
    if "\\" not in value:
        return value

    out: list[str] = []
    i = 0
    n = len(value)
    while i < n:
        ch = value[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue

        if i + 1 >= n:
            raise MalformedEscapeError(value, i, "dangling backslash")
        kind = value[i + 1]

        if kind == "u":
            cp = _read_hex(value, i + 2, 4)
            i += 6
            if 0xD800 <= cp <= 0xDBFF:
                if value[i:i + 2] != "\\u":
                    raise MalformedEscapeError(
                        value, i - 6, "high surrogate must be followed by low surrogate"
                    )
                low = _read_hex(value, i + 2, 4)
                if not 0xDC00 <= low <= 0xDFFF:
                    raise MalformedEscapeError(value, i, "invalid low surrogate in pair")
                cp = 0x10000 + ((cp - 0xD800) << 10) + (low - 0xDC00)
                i += 6
            elif 0xDC00 <= cp <= 0xDFFF:
                raise MalformedEscapeError(value, i - 6, "lone low surrogate")
            out.append(chr(cp))
        elif kind == "U":
            cp = _read_hex(value, i + 2, 8)
            if cp > 0x10FFFF:
                raise MalformedEscapeError(value, i, "code point out of range")
            if 0xD800 <= cp <= 0xDFFF:
                raise MalformedEscapeError(value, i, "surrogate code point")
            out.append(chr(cp))
            i += 10
        elif kind in ECHAR_DECODE:
            out.append(ECHAR_DECODE[kind])
            i += 2
        else:
            raise MalformedEscapeError(value, i, f"unknown escape '\\{kind}'")
    return "".join(out)
