"""Graph interface shared by undirected (and, potentially, directed) graphs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple

from .edge import Edge
from .vertex import Vertex


class Graph(ABC):
    """Contract for incidence-list graphs storing elements on vertices and edges."""

    @abstractmethod
    def num_vertices(self) -> int:
        """Return the number of vertices of the graph."""

    @abstractmethod
    def vertices(self) -> List[Vertex]:
        """Return a snapshot of the vertices, in insertion order."""

    @abstractmethod
    def num_edges(self) -> int:
        """Return the number of edges of the graph."""

    @abstractmethod
    def edges(self) -> List[Edge]:
        """Return a snapshot of the edges. Callers must not rely on the order."""

    @abstractmethod
    def get_edge(self, origin: Vertex, destination: Vertex) -> Optional[Edge]:
        """
        Return the edge from origin to destination, or None if there is none.
        For an undirected graph get_edge(u, v) is the same as get_edge(v, u).
        """

    @abstractmethod
    def get_vertex(self, element: Any) -> Optional[Vertex]:
        """Return the first vertex storing an element equal to the given one, or None."""

    @abstractmethod
    def end_vertices(self, edge: Edge) -> Tuple[Vertex, ...]:
        """Return the endpoints of the edge in origin-destination order."""

    @abstractmethod
    def opposite(self, vertex: Vertex, edge: Edge) -> Vertex:
        """Return the endpoint of edge other than vertex. Raises NotIncidentError."""

    @abstractmethod
    def out_degree(self, vertex: Vertex) -> int:
        """Return the number of outgoing edges of the vertex."""

    @abstractmethod
    def in_degree(self, vertex: Vertex) -> int:
        """Return the number of incoming edges of the vertex."""

    @abstractmethod
    def outgoing_edges(self, vertex: Vertex) -> List[Edge]:
        """Return a snapshot of the outgoing edges of the vertex."""

    @abstractmethod
    def incoming_edges(self, vertex: Vertex) -> List[Edge]:
        """Return a snapshot of the incoming edges of the vertex."""

    @abstractmethod
    def insert_vertex(self, element: Any) -> Vertex:
        """Create and return a new vertex storing the element."""

    @abstractmethod
    def insert_edge(self, origin: Vertex, destination: Vertex, element: Any) -> Edge:
        """Create and return a new edge between origin and destination."""

    @abstractmethod
    def remove_vertex(self, vertex: Vertex) -> Optional[Vertex]:
        """Remove the vertex and all its edges. Returns None if it is not in the graph."""

    @abstractmethod
    def remove_edge(self, edge: Edge) -> Edge:
        """Remove and return the edge."""

    @abstractmethod
    def clear(self) -> None:
        """Remove all vertices and edges."""
