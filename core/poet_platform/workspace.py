from typing import List, Optional
from api.poet_api.model import Edge, Graph


class Workspace:
    """
    Holds the word graph the poet currently works against.

    Responsibilities:
    - Manage current graph state
    - Provide read-only search over vertices and edges
    """

    def __init__(self):
        self._current_graph: Optional[Graph] = None

    # ==========================================================
    # GRAPH STATE MANAGEMENT
    # ==========================================================

    def set_graph(self, graph: Graph) -> None:
        self._current_graph = graph

    def get_graph(self) -> Optional[Graph]:
        return self._current_graph

    def has_graph(self) -> bool:
        return self._current_graph is not None

    def clear(self) -> None:
        self._current_graph = None

    # ==========================================================
    # VERTEX / EDGE QUERIES
    # ==========================================================

    def list_vertices(self) -> List[str]:
        if self._current_graph is None:
            return []
        return sorted(self._current_graph.vertices())

    def list_edges(self) -> List[Edge]:
        if self._current_graph is None:
            return []
        return self._current_graph.edges()

    def find_vertices_by_label(self, label_substr: str) -> List[str]:
        """Return vertex labels containing the given substring, case-insensitively."""
        needle = label_substr.lower()
        return [label for label in self.list_vertices() if needle in label.lower()]

    def find_edges_by_weight(self, min_weight: int = None, max_weight: int = None) -> List[Edge]:
        """Return edges whose weight is within the given range."""
        def predicate(e: Edge):
            if min_weight is not None and e.weight < min_weight:
                return False
            if max_weight is not None and e.weight > max_weight:
                return False
            return True
        return [edge for edge in self.list_edges() if predicate(edge)]
