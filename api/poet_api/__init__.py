"""Public API exports for the word graph model, poet and plugin contracts."""

from .errors import InvalidArgument, RepInvariantError
from .model import Edge, Vertex, Graph, EdgesGraph, VerticesGraph, WeightedDirectedGraph
from .poet import BridgeWordPoemGenerator, CorpusGraphBuilder, join_poem, tokenize
from .services import CorpusSourcePlugin, VisualizerPlugin

__all__ = [
    "InvalidArgument",
    "RepInvariantError",
    "Edge",
    "Vertex",
    "Graph",
    "EdgesGraph",
    "VerticesGraph",
    "WeightedDirectedGraph",
    "BridgeWordPoemGenerator",
    "CorpusGraphBuilder",
    "join_poem",
    "tokenize",
    "CorpusSourcePlugin",
    "VisualizerPlugin",
]
