from importlib.metadata import entry_points
from api.poet_api.services import CorpusSourcePlugin
from api.poet_api.services import VisualizerPlugin
from typing import Dict, Type


class PluginRegistry:

    _instance = None
    _datasources: Dict[str, Type[CorpusSourcePlugin]]
    _visualizers: Dict[str, Type[VisualizerPlugin]]

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._datasources = {}
            cls._instance._visualizers = {}
            cls._instance._load_plugins()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None

    def _load_plugins(self):
        eps = entry_points()

        for ep in eps.select(group="poet_platform.datasource"):
            self._datasources[ep.name] = ep.load()

        for ep in eps.select(group="poet_platform.visualizer"):
            self._visualizers[ep.name] = ep.load()

    def register_datasource(self, name: str, plugin_cls: Type[CorpusSourcePlugin]) -> None:
        self._datasources[name] = plugin_cls

    def register_visualizer(self, name: str, plugin_cls: Type[VisualizerPlugin]) -> None:
        self._visualizers[name] = plugin_cls

    def get_datasource(self, name: str) -> Type[CorpusSourcePlugin] | None:
        return self._datasources.get(name)

    def get_visualizer(self, name: str) -> Type[VisualizerPlugin] | None:
        return self._visualizers.get(name)

    def list_datasources(self) -> list[str]:
        return list(self._datasources.keys())

    def list_visualizers(self) -> list[str]:
        return list(self._visualizers.keys())
