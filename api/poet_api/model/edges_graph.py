from typing import Dict, List, Set

from .edge import Edge
from .graph import Graph


class EdgesGraph(Graph):
    """Graph stored as a set of vertex labels plus edges indexed by source then target."""

    def __init__(self, check_rep: bool = False):
        super().__init__(check_rep=check_rep)
        self._vertices: Set[str] = set()
        self._edges: Dict[str, Dict[str, Edge]] = {}
        self._check_rep()

    def add_vertex(self, label: str) -> bool:
        self._validate_label(label)
        if label in self._vertices:
            return False
        self._vertices.add(label)
        self._check_rep()
        return True

    def set_edge(self, source: str, target: str, weight: int) -> int:
        self._validate_label(source)
        self._validate_label(target)
        self._validate_weight(weight)

        outgoing = self._edges.get(source, {})
        existing = outgoing.get(target)
        previous = 0 if existing is None else existing.weight

        if weight == 0:
            if existing is not None:
                del outgoing[target]
                if not outgoing:
                    del self._edges[source]
        else:
            self._vertices.add(source)
            self._vertices.add(target)
            self._edges.setdefault(source, {})[target] = Edge(source, target, weight)

        self._check_rep()
        return previous

    def remove_vertex(self, label: str) -> bool:
        self._validate_label(label)
        if label not in self._vertices:
            return False
        self._vertices.remove(label)
        self._edges.pop(label, None)
        for source in list(self._edges):
            outgoing = self._edges[source]
            outgoing.pop(label, None)
            if not outgoing:
                del self._edges[source]
        self._check_rep()
        return True

    def vertices(self) -> Set[str]:
        return set(self._vertices)

    def sources(self, target: str) -> Dict[str, int]:
        result = {}
        for source, outgoing in self._edges.items():
            edge = outgoing.get(target)
            if edge is not None:
                result[source] = edge.weight
        return result

    def targets(self, source: str) -> Dict[str, int]:
        return {target: e.weight for target, e in self._edges.get(source, {}).items()}

    def weight(self, source: str, target: str) -> int:
        edge = self._edges.get(source, {}).get(target)
        return 0 if edge is None else edge.weight

    def edges(self) -> List[Edge]:
        return [edge for outgoing in self._edges.values() for edge in outgoing.values()]

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, label) -> bool:
        return label in self._vertices

    def __repr__(self) -> str:
        return f"EdgesGraph(vertices={sorted(self._vertices)}, edges={self.edges()})"
