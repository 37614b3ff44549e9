from typing import Dict, List, Set

from .edge import Edge
from .graph import Graph
from .vertex import Vertex


class VerticesGraph(Graph):
    """Graph stored as vertices keyed by label, each holding its outgoing edges."""

    def __init__(self, check_rep: bool = False):
        super().__init__(check_rep=check_rep)
        self._vertices: Dict[str, Vertex] = {}
        self._check_rep()

    def _find_or_create(self, label: str) -> Vertex:
        vertex = self._vertices.get(label)
        if vertex is None:
            vertex = Vertex(label)
            self._vertices[label] = vertex
        return vertex

    def add_vertex(self, label: str) -> bool:
        self._validate_label(label)
        if label in self._vertices:
            return False
        self._vertices[label] = Vertex(label)
        self._check_rep()
        return True

    def set_edge(self, source: str, target: str, weight: int) -> int:
        self._validate_label(source)
        self._validate_label(target)
        self._validate_weight(weight)

        if weight == 0:
            vertex = self._vertices.get(source)
            previous = 0 if vertex is None else vertex.set_edge(target, 0)
        else:
            source_vertex = self._find_or_create(source)
            self._find_or_create(target)
            previous = source_vertex.set_edge(target, weight)

        self._check_rep()
        return previous

    def remove_vertex(self, label: str) -> bool:
        self._validate_label(label)
        if self._vertices.pop(label, None) is None:
            return False
        for other in self._vertices.values():
            other.remove_edge(label)
        self._check_rep()
        return True

    def vertices(self) -> Set[str]:
        return set(self._vertices)

    def sources(self, target: str) -> Dict[str, int]:
        result = {}
        for vertex in self._vertices.values():
            weight = vertex.edge_weight(target)
            if weight is not None:
                result[vertex.label] = weight
        return result

    def targets(self, source: str) -> Dict[str, int]:
        vertex = self._vertices.get(source)
        if vertex is None:
            return {}
        return vertex.edges()

    def weight(self, source: str, target: str) -> int:
        vertex = self._vertices.get(source)
        if vertex is None:
            return 0
        return vertex.edge_weight(target) or 0

    def edges(self) -> List[Edge]:
        return [
            Edge(vertex.label, target, weight)
            for vertex in self._vertices.values()
            for target, weight in vertex.edges().items()
        ]

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, label) -> bool:
        return label in self._vertices

    def __repr__(self) -> str:
        return f"VerticesGraph(vertices={list(self._vertices.values())})"
