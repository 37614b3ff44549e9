"""
Abstract weighted directed graph over word labels.

Vertices are non-empty strings. Each ordered pair of vertices carries at most
one edge and every stored edge weight is a positive int; setting a weight of
zero removes the edge. Concrete subclasses choose the representation, this
base class owns argument validation, the optional representation checks and
the read helpers that can be expressed through the public operations.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Set

from ..errors import InvalidArgument, RepInvariantError
from .edge import Edge


class Graph(ABC):
    def __init__(self, check_rep: bool = False):
        self.directed = True
        self.check_rep_enabled = check_rep

    # -----------------
    # VERTEX OPERATIONS
    # -----------------

    @abstractmethod
    def add_vertex(self, label: str) -> bool:
        """Add ``label`` if absent. Return True when the vertex was inserted."""

    @abstractmethod
    def remove_vertex(self, label: str) -> bool:
        """Remove ``label`` and every edge touching it. Return True if it existed."""

    @abstractmethod
    def vertices(self) -> Set[str]:
        """Return a copy of the vertex labels."""

    # -----------------
    # EDGE OPERATIONS
    # -----------------

    @abstractmethod
    def set_edge(self, source: str, target: str, weight: int) -> int:
        """
        Set the weight of ``source -> target`` and return the previous weight.

        A positive weight adds missing endpoints as vertices. A zero weight
        removes the edge (if any) and never adds vertices. The return value
        is 0 when no edge existed before the call.
        """

    @abstractmethod
    def sources(self, target: str) -> Dict[str, int]:
        """Return ``{source: weight}`` for every edge ending at ``target``."""

    @abstractmethod
    def targets(self, source: str) -> Dict[str, int]:
        """Return ``{target: weight}`` for every edge starting at ``source``."""

    @abstractmethod
    def edges(self) -> List[Edge]:
        """Return a snapshot of all edges."""

    def weight(self, source: str, target: str) -> int:
        return self.targets(source).get(target, 0)

    # -----------------
    # VALIDATION
    # -----------------

    @staticmethod
    def _validate_label(label) -> None:
        if not isinstance(label, str) or not label:
            raise InvalidArgument(f"Vertex label must be a non-empty string, got {label!r}.")

    @staticmethod
    def _validate_weight(weight) -> None:
        # bool is an int subclass, but True is not a weight
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise InvalidArgument(f"Edge weight must be an int, got {weight!r}.")
        if weight < 0:
            raise InvalidArgument(f"Edge weight cannot be negative, got {weight}.")

    def _check_rep(self) -> None:
        if not self.check_rep_enabled:
            return

        vertices = self.vertices()
        for label in vertices:
            if not isinstance(label, str) or not label:
                raise RepInvariantError(f"Invalid vertex label {label!r}.")

        seen = set()
        for edge in self.edges():
            if edge.source not in vertices or edge.target not in vertices:
                raise RepInvariantError(f"{edge!r} references a missing vertex.")
            if isinstance(edge.weight, bool) or not isinstance(edge.weight, int) or edge.weight <= 0:
                raise RepInvariantError(f"{edge!r} has a non-positive weight.")
            if (edge.source, edge.target) in seen:
                raise RepInvariantError(f"Duplicate edge {edge.source} -> {edge.target}.")
            seen.add((edge.source, edge.target))

    # -----------------
    # READ HELPERS
    # -----------------

    def __len__(self) -> int:
        return len(self.vertices())

    def __contains__(self, label) -> bool:
        return label in self.vertices()

    def to_dict(self) -> dict:
        edges = sorted(self.edges(), key=lambda e: (e.source, e.target))
        return {
            "directed": self.directed,
            "vertices": sorted(self.vertices()),
            "edges": [edge.to_dict() for edge in edges],
        }
