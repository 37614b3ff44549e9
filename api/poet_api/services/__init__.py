"""Service-level plugin contracts for poet_api."""

from .corpus_source_plugin import CorpusSourcePlugin
from .visualizer_plugin import VisualizerPlugin

__all__ = ["CorpusSourcePlugin", "VisualizerPlugin"]
