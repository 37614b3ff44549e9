"""Platform layer: configuration, plugin registry, workspace and engine."""

from .config import PoetConfig, get_config
from .engine import PoetEngine
from .registry import PluginRegistry
from .workspace import Workspace

__all__ = ["PoetConfig", "get_config", "PoetEngine", "PluginRegistry", "Workspace"]
