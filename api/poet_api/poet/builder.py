import logging
from typing import Callable, Iterable

from ..model import Graph, WeightedDirectedGraph

LOGGER = logging.getLogger(__name__)


class CorpusGraphBuilder:
    """
    Folds a corpus token stream into a word affinity graph.

    Every token is lower-cased into a vertex label, and each pair of adjacent
    labels adds 1 to the weight of the edge between them. Adjacency runs over
    the whole stream, so the last word of one line is joined to the first
    word of the next.
    """

    def __init__(self, graph_factory: Callable[[], Graph] = WeightedDirectedGraph):
        self.graph_factory = graph_factory

    def build(self, tokens: Iterable[str]) -> Graph:
        graph = self.graph_factory()
        previous = None
        count = 0

        for token in tokens:
            label = token.lower()
            if not label:
                continue
            graph.add_vertex(label)
            if previous is not None:
                graph.set_edge(previous, label, graph.weight(previous, label) + 1)
            previous = label
            count += 1

        if LOGGER.isEnabledFor(logging.DEBUG):
            LOGGER.debug(
                "Built word graph from %d tokens: %d vertices, %d edges.",
                count,
                len(graph),
                len(graph.edges()),
            )
        return graph
