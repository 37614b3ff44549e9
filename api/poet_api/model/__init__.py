"""
Word graph domain model (Edge, Vertex, Graph and its representations).
"""

from .edge import Edge
from .vertex import Vertex
from .graph import Graph
from .edges_graph import EdgesGraph
from .vertices_graph import VerticesGraph

WeightedDirectedGraph = EdgesGraph

__all__ = ["Edge", "Vertex", "Graph", "EdgesGraph", "VerticesGraph", "WeightedDirectedGraph"]
