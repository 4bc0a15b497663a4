# kgnode/backend/memory.py
from __future__ import annotations

import heapq
from typing import Dict, Iterable, Iterator, List, Set, Type

from kgnode.model.node import Node, sort_key


class NodeSet:
    """In-memory set of nodes that iterates in canonical order."""

    def __init__(self, nodes: Iterable[Node] = ()) -> None:
        self.nodes: Set[Node] = set(nodes)

    def add(self, node: Node) -> None:
        self.nodes.add(node)

    def discard(self, node: Node) -> None:
        self.nodes.discard(node)

    def __contains__(self, node: object) -> bool:
        return node in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(sorted(self.nodes, key=sort_key))

    def by_kind(self, kind: Type) -> List[Node]:
        return [n for n in self if isinstance(n, kind)]

    def counts(self) -> Dict[str, int]:
        out: Dict[str, int] = {}
        for n in self.nodes:
            out[type(n).__name__] = out.get(type(n).__name__, 0) + 1
        return out

    @staticmethod
    def merge(*streams: Iterable[Node]) -> Iterator[Node]:
        """Merge already sorted node streams, dropping duplicates."""
        last = None
        for node in heapq.merge(*streams, key=sort_key):
            if last is not None and node == last:
                continue
            last = node
            yield node
