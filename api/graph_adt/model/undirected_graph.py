import logging
from typing import Any, Dict, List, NamedTuple, Optional, Set, Tuple

from ..errors import InvalidEdgeError, InvalidVertexError, NotIncidentError
from .edge import Edge
from .graph import Graph
from .vertex import Vertex

logger = logging.getLogger(__name__)


class Traversal(NamedTuple):
    """Result of a depth-first traversal."""

    visited: Set[Vertex]
    # Vertex -> edge through which it was discovered
    tree_edges: Dict[Vertex, Edge]
    # Vertex -> edges that led back to it after it was discovered
    back_edges: Dict[Vertex, List[Edge]]


class UndirectedGraph(Graph):
    """
    Undirected graph backed by per-vertex incidence sequences.

    Edges are not stored separately: each live edge appears once in the
    incidence sequence of both endpoints (twice in one sequence for a
    self-loop). Parallel edges and self-loops are allowed.

    Vertices and edges remember the graph they belong to. Once removed, or
    after clear(), they are detached and passing them back raises
    InvalidVertexError / InvalidEdgeError.
    """

    def __init__(self):
        self._vertices: List[Vertex] = []
        self._num_vertices = 0
        self._num_edges = 0

    # -----------------
    # QUERIES
    # -----------------

    def num_vertices(self) -> int:
        return self._num_vertices

    def vertices(self) -> List[Vertex]:
        return list(self._vertices)

    def num_edges(self) -> int:
        return self._num_edges

    def edges(self) -> List[Edge]:
        # Each edge is shared by two incidence sequences, keep the first sighting
        seen = dict.fromkeys(
            edge for vertex in self._vertices for edge in vertex._incident_edges
        )
        return list(seen)

    def get_edge(self, origin: Vertex, destination: Vertex) -> Optional[Edge]:
        self._check_vertex(origin)
        self._check_vertex(destination)

        # Scan the shorter incidence sequence
        if origin.degree < destination.degree:
            scanned, other = origin, destination
        else:
            scanned, other = destination, origin

        for edge in scanned._incident_edges:
            if self._other_endpoint(scanned, edge) is other:
                return edge
        return None

    def get_vertex(self, element: Any) -> Optional[Vertex]:
        for vertex in self._vertices:
            if vertex.element == element:
                return vertex
        return None

    def end_vertices(self, edge: Edge) -> Tuple[Vertex, ...]:
        self._check_edge(edge)
        return edge.endpoints()

    def opposite(self, vertex: Vertex, edge: Edge) -> Vertex:
        self._check_vertex(vertex)
        if not any(incident is edge for incident in vertex._incident_edges):
            raise NotIncidentError(vertex, edge)
        return self._other_endpoint(vertex, edge)

    def out_degree(self, vertex: Vertex) -> int:
        self._check_vertex(vertex)
        return vertex.degree

    def in_degree(self, vertex: Vertex) -> int:
        self._check_vertex(vertex)
        return vertex.degree

    def outgoing_edges(self, vertex: Vertex) -> List[Edge]:
        self._check_vertex(vertex)
        return vertex.incident_edges()

    def incoming_edges(self, vertex: Vertex) -> List[Edge]:
        self._check_vertex(vertex)
        return vertex.incident_edges()

    # -----------------
    # MUTATIONS
    # -----------------

    def insert_vertex(self, element: Any) -> Vertex:
        vertex = Vertex(element, self._num_vertices)
        vertex._graph = self
        self._vertices.append(vertex)
        self._num_vertices += 1
        logger.debug("Inserted %r at position %d", vertex, vertex.position)
        return vertex

    def insert_edge(self, origin: Vertex, destination: Vertex, element: Any) -> Edge:
        self._check_vertex(origin)
        self._check_vertex(destination)

        edge = Edge(element, origin, destination, origin.degree, destination.degree)
        edge._graph = self
        origin.add_edge(edge)
        destination.add_edge(edge)
        self._num_edges += 1
        logger.debug("Inserted %r", edge)
        return edge

    def remove_vertex(self, vertex: Vertex) -> Optional[Vertex]:
        if vertex._graph is not self:
            return None

        # A self-loop is listed twice, detach it once
        for edge in dict.fromkeys(vertex._incident_edges):
            self._detach_edge(edge)

        self._vertices.remove(vertex)
        self._num_vertices -= 1
        vertex._graph = None
        logger.debug("Removed %r", vertex)
        return vertex

    def remove_edge(self, edge: Edge) -> Edge:
        self._check_edge(edge)
        self._detach_edge(edge)
        logger.debug("Removed %r", edge)
        return edge

    def clear(self) -> None:
        for vertex in self._vertices:
            for edge in vertex._incident_edges:
                edge._graph = None
            vertex._graph = None
        self._num_vertices = 0
        self._num_edges = 0
        self._vertices.clear()

    # -----------------
    # TRAVERSAL
    # -----------------

    def depth_first_traversal(self, start: Vertex,
                              visited: Optional[Set[Vertex]] = None,
                              tree_edges: Optional[Dict[Vertex, Edge]] = None,
                              back_edges: Optional[Dict[Vertex, List[Edge]]] = None) -> Traversal:
        """
        Traverse the graph depth-first from start.

        Every vertex reached is added to visited. A vertex discovered for the
        first time is mapped in tree_edges to the edge it was discovered through.
        An edge leading to a vertex that is already visited is appended to
        back_edges under that vertex. Given collections are updated in place,
        so several calls can share them; all three are returned.

        The traversal uses an explicit stack but visits vertices and classifies
        edges exactly as the recursive formulation does.
        """
        self._check_vertex(start)
        visited = set() if visited is None else visited
        tree_edges = {} if tree_edges is None else tree_edges
        back_edges = {} if back_edges is None else back_edges

        visited.add(start)
        stack = [(start, iter(self.outgoing_edges(start)))]
        while stack:
            current, pending = stack[-1]
            for edge in pending:
                neighbor = self._other_endpoint(current, edge)
                if neighbor not in visited:
                    visited.add(neighbor)
                    tree_edges[neighbor] = edge
                    stack.append((neighbor, iter(self.outgoing_edges(neighbor))))
                    break
                back_edges.setdefault(neighbor, []).append(edge)
            else:
                stack.pop()

        return Traversal(visited, tree_edges, back_edges)

    # -----------------
    # HELPERS
    # -----------------

    def _check_vertex(self, vertex: Vertex) -> None:
        if vertex._graph is not self:
            raise InvalidVertexError(vertex)

    def _check_edge(self, edge: Edge) -> None:
        if edge._graph is not self:
            raise InvalidEdgeError(edge)

    @staticmethod
    def _other_endpoint(vertex: Vertex, edge: Edge) -> Vertex:
        origin, destination = edge.endpoints()
        return destination if origin is vertex else origin

    def _detach_edge(self, edge: Edge) -> None:
        origin, destination = edge.endpoints()
        origin.remove_edge(edge)
        destination.remove_edge(edge)
        edge._graph = None
        self._num_edges -= 1

    def __str__(self) -> str:
        return "\n".join(
            f"{vertex!r}: {vertex.incident_edges()!r}" for vertex in self._vertices
        )
