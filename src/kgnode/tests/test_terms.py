import pytest

from kgnode.common.errors import NodeSyntaxError
from kgnode.model.node import (
    BNode, Iri, Literal, Variable, compare, label, parse_node, sort_key, text,
)

XSD_INTEGER = "http://www.w3.org/2001/XMLSchema#integer"


def test_bnode():
    node = BNode.from_label("b0")
    assert text(node) == "_:b0"
    assert label(node) == "b0"
    assert BNode.from_ntriples("_:b0") == node


def test_variable():
    node = Variable.from_name("x")
    assert text(node) == "?x"
    assert label(node) == "x"
    assert label(Variable.from_ntriples("$y")) == "y"


def test_plain_literal():
    node = Literal.from_value("hello")
    assert text(node) == '"hello"'
    assert label(node) == "hello"
    assert node.lang is None
    assert node.datatype is None


def test_language_literal():
    node = Literal.from_value("hello", lang="en")
    assert text(node) == '"hello"@en'
    assert node.lang == "en"
    assert node.datatype is None


def test_typed_literal():
    node = Literal.from_value("1", datatype=XSD_INTEGER)
    assert text(node) == f'"1"^^<{XSD_INTEGER}>'
    assert node.datatype == XSD_INTEGER
    assert node.lang is None
    assert label(node) == "1"


def test_literal_escaping_round_trip():
    value = 'a "quoted" value\nwith \\ backslash'
    node = Literal.from_value(value, lang="en")
    assert "\n" not in text(node)
    assert label(node) == value
    assert node.lang == "en"


def test_literal_rejects_lang_and_datatype():
    with pytest.raises(ValueError):
        Literal.from_value("x", lang="en", datatype=XSD_INTEGER)


def test_kinds_with_same_text_are_not_equal():
    assert Iri.from_ntriples("_:x") != BNode.from_ntriples("_:x")


def test_mixed_kinds_sort_by_text():
    nodes = [
        BNode.from_label("b"),
        Variable.from_name("v"),
        Iri.from_iri("http://example.org/a"),
        Literal.from_value("lit"),
    ]
    ordered = sorted(nodes)
    assert [type(n) for n in ordered] == [Literal, Iri, Variable, BNode]
    assert ordered == sorted(nodes, key=sort_key)
    assert compare(nodes[0], nodes[2]) == 1
    assert compare(nodes[2], nodes[0]) == -1


@pytest.mark.parametrize("token,kind,expected_label", [
    ("<http://example.org/a\\u0020b>", Iri, "http://example.org/a b"),
    ("_:b1", BNode, "b1"),
    ('"x"@de', Literal, "x"),
    ('"1"^^<http://www.w3.org/2001/XMLSchema#integer>', Literal, "1"),
    ("?s", Variable, "s"),
])
def test_parse_node(token, kind, expected_label):
    node = parse_node(token)
    assert isinstance(node, kind)
    assert text(node) == token
    assert label(node) == expected_label


@pytest.mark.parametrize("token", ["", "http://example.org/x", '"', "42"])
def test_parse_node_rejects_unknown(token):
    with pytest.raises(NodeSyntaxError):
        parse_node(token)
