# kgnode/backend/rdf_rdflib.py
from __future__ import annotations

from rdflib import URIRef, BNode as RDFBNode, Literal as RDFLiteral
from rdflib.term import Identifier, Variable as RDFVariable

from kgnode.model.node import Iri, BNode, Literal, Variable, Node, label


def to_uriref(iri: Iri) -> URIRef:
    """The bare IRI of ``iri`` as an rdflib ``URIRef``."""
    return URIRef(label(iri))


def to_rdflib(node: Node) -> Identifier:
    match node:
        case Iri():
            return to_uriref(node)
        case BNode():
            return RDFBNode(label(node))
        case Literal():
            datatype = node.datatype
            return RDFLiteral(
                label(node),
                lang=node.lang,
                datatype=URIRef(datatype) if datatype else None,
            )
        case Variable():
            return RDFVariable(label(node))
    raise TypeError(f"unsupported node type: {type(node)!r}")


def from_rdflib(term: Identifier) -> Node:
    # Variable and BNode must be checked before the generic str-based types
    if isinstance(term, RDFVariable):
        return Variable.from_name(str(term))
    if isinstance(term, RDFBNode):
        return BNode.from_label(str(term))
    if isinstance(term, URIRef):
        return Iri.from_iri(str(term))
    if isinstance(term, RDFLiteral):
        datatype = None
        if term.datatype is not None and not term.language:
            datatype = str(term.datatype)
        return Literal.from_value(str(term), lang=term.language, datatype=datatype)
    raise TypeError(f"unsupported rdflib term: {type(term)!r}")
