"""
kgnode - RDF term nodes in canonical N-Triples form.
"""

from kgnode.common.errors import MalformedEscapeError, NodeSyntaxError
from kgnode.common.escape import escape_iri, escape_string, unescape
from kgnode.model.node import (
    Iri, BNode, Literal, Variable, Node,
    text, label, equals, node_hash, compare, sort_key, parse_node,
)

__version__ = "0.1.0"

__all__ = [
    "Iri", "BNode", "Literal", "Variable", "Node",
    "text", "label", "equals", "node_hash", "compare", "sort_key", "parse_node",
    "escape_iri", "escape_string", "unescape",
    "MalformedEscapeError", "NodeSyntaxError",
]
