"""Corpus datasource plugin interface definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator

from ..model import Graph, WeightedDirectedGraph
from ..poet import CorpusGraphBuilder


class CorpusSourcePlugin(ABC):
    """Contract for plugins that read corpus tokens from external sources."""

    @property
    @abstractmethod
    def plugin_id(self) -> str:
        """Return a unique, stable plugin identifier."""

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Return a human-readable plugin name for UI and logs."""

    def parameters_schema(self) -> dict[str, Any] | None:
        """Return an optional parameter schema for UI/platform integration."""
        return None

    @abstractmethod
    def iter_tokens(self, source: Any, **options: Any) -> Iterator[str]:
        """Lazily yield raw whitespace-split tokens in document order."""

    def load_graph(
        self,
        source: Any,
        graph_factory: Callable[[], Graph] = WeightedDirectedGraph,
        **options: Any,
    ) -> Graph:
        # The token stream differs per plugin; folding it into a graph does not
        builder = CorpusGraphBuilder(graph_factory=graph_factory)
        return builder.build(self.iter_tokens(source, **options))

    @staticmethod
    def _resolve_path(source: Any, options: dict[str, Any]) -> str:
        if isinstance(source, str) and source.strip():
            return source
        fp = options.get("file_path")
        if isinstance(fp, str) and fp.strip():
            return fp
        raise ValueError("Missing file path. Provide it as 'source' or as option 'file_path'.")
