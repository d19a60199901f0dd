"""
Graph ADT model (Vertex, Edge, Graph, UndirectedGraph).
"""

from .vertex import Vertex
from .edge import Edge
from .graph import Graph
from .undirected_graph import Traversal, UndirectedGraph

__all__ = ["Vertex", "Edge", "Graph", "UndirectedGraph", "Traversal"]
