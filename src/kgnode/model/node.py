"""
RDF term nodes kept in their canonical N-Triples form.

Every term kind stores exactly one string, ``data``, which is the token as
it appears in an N-Triples/N-Quads line (``<iri>``, ``_:b0``, ``"lex"@en``,
``?x``). Identity, hashing and ordering are all defined over that string,
so nodes of different kinds can share one set, dict or sorted list.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Optional, Union

from kgnode.common.diagnostics import DEFAULT_SINK, DiagnosticsSink
from kgnode.common.errors import NodeSyntaxError
from kgnode.common.escape import escape_iri, escape_string, unescape


@total_ordering
class _Term:
    """Routes the Python data model to the module-level node functions."""
    __slots__ = ()

    def __eq__(self, other) -> bool:
        return equals(self, other)

    def __hash__(self) -> int:
        return node_hash(self)

    def __lt__(self, other) -> bool:
        if not isinstance(other, _Term):
            return NotImplemented
        return compare(self, other) < 0

    def __str__(self) -> str:
        return self.data


@dataclass(frozen=True, eq=False)
class Iri(_Term):
    """An IRI in N-Triples syntax, including the ``<>`` brackets."""
    data: str

    @classmethod
    def from_iri(
        cls,
        raw: Optional[str],
        diagnostics: Optional[DiagnosticsSink] = None,
        repair_bracketed: bool = False,
        ascii_only: bool = False,
    ) -> Iri:
        """
        Build a node from a bare IRI. Assumes a valid IRI.

        Args:
            raw: The bare IRI, e.g. ``http://example.org/a b``.
            diagnostics: Sink for non-fatal notices; logs by default.
            repair_bracketed: If ``raw`` already starts with ``<``, treat the
                brackets as delimiters and escape only the part between them.
                By default the whole string is escaped without re-wrapping,
                so the result does not start with ``<``.
            ascii_only: Also escape every non-ASCII character.
        """
        sink = diagnostics or DEFAULT_SINK
        if not raw:
            sink.notice("Empty string not allowed, using <>")
            return cls("<>")
        if raw[0] != "<":
            return cls(f"<{escape_iri(raw, ascii_only)}>")

        sink.warning(
            f"Bare and valid IRI expected, was supplied something with brackets <>: {raw}"
        )
        if not repair_bracketed:
            return cls(escape_iri(raw, ascii_only))
        inner = raw[1:-1] if len(raw) > 1 and raw.endswith(">") else raw[1:]
        return cls(f"<{escape_iri(inner, ascii_only)}>")

    @classmethod
    def from_ntriples(cls, token: str) -> Iri:
        """Wrap an already escaped ``<...>`` token. No validation is done."""
        return cls(token)


@dataclass(frozen=True, eq=False)
class BNode(_Term):
    """A blank node, ``_:label``."""
    data: str

    @classmethod
    def from_label(cls, label: str) -> BNode:
        return cls(f"_:{label}")

    @classmethod
    def from_ntriples(cls, token: str) -> BNode:
        return cls(token)


@dataclass(frozen=True, eq=False)
class Literal(_Term):
    """A literal, optionally with a language tag or a datatype IRI."""
    data: str

    @classmethod
    def from_value(
        cls,
        lexical: str,
        lang: Optional[str] = None,
        datatype: Optional[str] = None,
    ) -> Literal:
        if lang and datatype:
            raise ValueError("A literal cannot have both a language tag and a datatype")
        base = f'"{escape_string(lexical)}"'
        if lang:
            return cls(f"{base}@{lang}")
        if datatype:
            return cls(f"{base}^^{Iri.from_iri(datatype).data}")
        return cls(base)

    @classmethod
    def from_ntriples(cls, token: str) -> Literal:
        return cls(token)

    def _split(self) -> tuple[str, str]:
        end = self.data.rfind('"')
        if end <= 0:
            return self.data[1:], ""
        return self.data[1:end], self.data[end + 1:]

    @property
    def lang(self) -> Optional[str]:
        suffix = self._split()[1]
        return suffix[1:] if suffix.startswith("@") else None

    @property
    def datatype(self) -> Optional[str]:
        suffix = self._split()[1]
        if not suffix.startswith("^^"):
            return None
        return label(Iri.from_ntriples(suffix[2:]))


@dataclass(frozen=True, eq=False)
class Variable(_Term):
    """A query variable, ``?name``."""
    data: str

    @classmethod
    def from_name(cls, name: str) -> Variable:
        return cls(f"?{name}")

    @classmethod
    def from_ntriples(cls, token: str) -> Variable:
        return cls(token)


Node = Union[Iri, BNode, Literal, Variable]


def text(node: Node) -> str:
    """The canonical N-Triples form of a node."""
    return node.data


def label(node: Node) -> str:
    """
    The bare value of a node: the unescaped IRI without brackets, the blank
    node id without ``_:``, the unescaped lexical form of a literal or the
    variable name.

    Raises:
        MalformedEscapeError: If the stored form holds a broken escape.
    """
    match node:
        case Iri(data=data):
            if data.lower() == "<>":
                return ""
            return unescape(data[1:-1])
        case BNode(data=data):
            return data[2:] if data.startswith("_:") else data
        case Literal():
            return unescape(node._split()[0])
        case Variable(data=data):
            return data[1:] if data[:1] in ("?", "$") else data
    raise TypeError(f"unsupported node type: {type(node)!r}")


def equals(a: Node, b: object) -> bool:
    if a is b:
        return True
    return type(a) is type(b) and a.data == b.data


def node_hash(node: Node) -> int:
    return hash(node.data)


def compare(a: Node, b: Node) -> int:
    """Code point order of the canonical forms: -1, 0 or 1."""
    ta, tb = text(a), text(b)
    return (ta > tb) - (ta < tb)


def sort_key(node: Node) -> str:
    return node.data


def parse_node(token: str) -> Node:
    """Build the matching node kind from a single N-Triples term token."""
    if token.startswith("<"):
        return Iri.from_ntriples(token)
    if token.startswith("_:"):
        return BNode.from_ntriples(token)
    if token.startswith('"'):
        if len(token) < 2 or token.rfind('"') == 0:
            raise NodeSyntaxError(token, "unterminated literal")
        return Literal.from_ntriples(token)
    if token[:1] in ("?", "$"):
        return Variable.from_ntriples(token)
    raise NodeSyntaxError(token, "not an N-Triples term")
