from typing import Dict, Optional


class Vertex:
    """A labelled vertex that owns its outgoing edges as ``{target: weight}``."""

    def __init__(self, label: str):
        self.label = label
        self._edges: Dict[str, int] = {}

    def set_edge(self, target: str, weight: int) -> int:
        # Weight 0 drops the edge; the previous weight (or 0) is returned either way
        if weight == 0:
            return self._edges.pop(target, 0)
        previous = self._edges.get(target, 0)
        self._edges[target] = weight
        return previous

    def edge_weight(self, target: str) -> Optional[int]:
        return self._edges.get(target)

    def remove_edge(self, target: str) -> None:
        self._edges.pop(target, None)

    def edges(self) -> Dict[str, int]:
        return dict(self._edges)

    def __repr__(self) -> str:
        return f"Vertex({self.label}): {self._edges}"
