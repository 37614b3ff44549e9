"""
Platform configuration.

Single place for the knobs the engine and explorer read: which graph
representation to build, whether representation checks run after every
graph mutation, the corpus encoding and the default plugins.
"""

import os
from dataclasses import asdict, dataclass, replace
from typing import Any, Callable, Dict

from api.poet_api.model import EdgesGraph, Graph, VerticesGraph

REPRESENTATIONS: Dict[str, type] = {
    "edges": EdgesGraph,
    "vertices": VerticesGraph,
}

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class PoetConfig:
    """Settings for building graphs and writing poems"""

    # Run representation checks after every graph mutation
    check_rep: bool = False

    # Corpus file encoding
    encoding: str = "utf-8"

    # Graph representation: 'edges' or 'vertices'
    representation: str = "edges"

    # Default plugin names
    datasource: str = "text"
    visualizer: str = "simple"

    def graph_factory(self) -> Callable[[], Graph]:
        graph_cls = REPRESENTATIONS[self.representation]
        return lambda: graph_cls(check_rep=self.check_rep)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


def get_config(**overrides) -> PoetConfig:
    """
    Build a configuration from the environment with optional overrides.

    Args:
        **overrides: PoetConfig field values that take precedence over the environment

    Returns:
        PoetConfig instance
    """
    config = PoetConfig(check_rep=_env_flag("POET_CHECK_REP"))

    unknown = set(overrides) - set(config.to_dict())
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")

    config = replace(config, **overrides)
    if config.representation not in REPRESENTATIONS:
        raise ValueError(
            f"Unknown representation: {config.representation}. Available: {list(REPRESENTATIONS)}"
        )
    return config
