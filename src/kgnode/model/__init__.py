from .node import (
    Iri, BNode, Literal, Variable, Node,
    text, label, equals, node_hash, compare, sort_key, parse_node,
)

__all__ = [
    "Iri",
    "BNode",
    "Literal",
    "Variable",
    "Node",
    "text",
    "label",
    "equals",
    "node_hash",
    "compare",
    "sort_key",
    "parse_node",
]
