"""Public API exports for the graph ADT."""

from .errors import GraphError, InvalidEdgeError, InvalidVertexError, NotIncidentError
from .model import Edge, Graph, Traversal, UndirectedGraph, Vertex

__all__ = [
    "Vertex",
    "Edge",
    "Graph",
    "UndirectedGraph",
    "Traversal",
    "GraphError",
    "NotIncidentError",
    "InvalidVertexError",
    "InvalidEdgeError",
]
