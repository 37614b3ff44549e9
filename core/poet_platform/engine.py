import logging
from typing import Optional

from .config import PoetConfig, get_config
from .registry import PluginRegistry
from .workspace import Workspace
from api.poet_api.model import Graph
from api.poet_api.poet import BridgeWordPoemGenerator
from api.poet_api.services import CorpusSourcePlugin, VisualizerPlugin

LOGGER = logging.getLogger(__name__)


class PoetEngine:
    """
    High-level orchestration layer.

    Responsibilities:
    - Plugin execution
    - Graph lifecycle management
    - Poem generation against the current graph
    """

    def __init__(self, config: Optional[PoetConfig] = None, registry: Optional[PluginRegistry] = None):
        self.config = config or get_config()
        self.registry = registry or PluginRegistry()
        self.workspace = Workspace()
        self.generator = BridgeWordPoemGenerator()

    # ==========================================================
    # MAIN ORCHESTRATION
    # ==========================================================

    def load_corpus(self, source: str, datasource_name: Optional[str] = None, **options) -> Graph:
        name = datasource_name or self.config.datasource
        datasource_cls = self.registry.get_datasource(name)
        if not datasource_cls:
            raise ValueError(f"Datasource '{name}' not found.")

        datasource: CorpusSourcePlugin = datasource_cls()
        options.setdefault("encoding", self.config.encoding)
        graph = datasource.load_graph(source, graph_factory=self.config.graph_factory(), **options)

        LOGGER.info("Loaded corpus %s with %s: %d words.", source, name, len(graph))
        self.workspace.set_graph(graph)
        return graph

    def write_poem(self, text: str) -> str:
        graph = self.workspace.get_graph()
        if graph is None:
            raise RuntimeError("No corpus loaded. Call load_corpus() first.")
        return self.generator.poem(text, graph)

    def render(self, visualizer_name: Optional[str] = None, **options) -> str:
        name = visualizer_name or self.config.visualizer
        visualizer_cls = self.registry.get_visualizer(name)
        if not visualizer_cls:
            raise ValueError(f"Visualizer '{name}' not found.")

        graph = self.workspace.get_graph()
        if graph is None:
            raise RuntimeError("No corpus loaded. Call load_corpus() first.")

        visualizer: VisualizerPlugin = visualizer_cls()
        return visualizer.render(graph, **options)

    # ==========================================================
    # WORKSPACE DELEGATION API
    # ==========================================================

    def get_current_graph(self) -> Optional[Graph]:
        return self.workspace.get_graph()

    def clear_workspace(self) -> None:
        self.workspace.clear()

    def search_vertices_by_label(self, label_substr: str):
        return self.workspace.find_vertices_by_label(label_substr)

    def search_edges_by_weight(self, min_weight: int = None, max_weight: int = None):
        return self.workspace.find_edges_by_weight(min_weight, max_weight)
