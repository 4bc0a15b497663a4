from .memory import NodeSet
from .rdf_rdflib import to_rdflib, from_rdflib, to_uriref

__all__ = [
    "NodeSet",
    "to_rdflib",
    "from_rdflib",
    "to_uriref",
]
