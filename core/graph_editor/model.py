import logging
import math
from typing import Dict, List, Optional, Tuple

from api.graph_adt import Edge, UndirectedGraph, Vertex

logger = logging.getLogger(__name__)

Coords = Tuple[float, float]
EdgeCoords = Tuple[float, float, float, float]

DEFAULT_EDGE_ELEMENT = "NONE"


def _point(coords) -> Coords:
    x, y = coords
    return float(x), float(y)


def _check_finite(coords: Coords) -> Coords:
    if not (math.isfinite(coords[0]) and math.isfinite(coords[1])):
        raise ValueError(f"Coordinates must be finite, got [{coords[0]}, {coords[1]}].")
    return coords


def _distance(p1: Coords, p2: Coords) -> float:
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1])


class GraphModel:
    """
    Editor state: an undirected graph whose vertices are placed on a plane.

    Vertices are addressed by their (x, y) coordinates, edges by the
    coordinates of both ends (x1, y1, x2, y2). Unlike the underlying graph,
    the editor never creates parallel edges or self-loops.
    """

    DEFAULT_GRID_SIZE = 100

    def __init__(self, grid_size: int = DEFAULT_GRID_SIZE):
        if isinstance(grid_size, bool) or not isinstance(grid_size, (int, float)) \
                or not 0 < grid_size < math.inf:
            raise ValueError(f"Grid size must be a positive number, got {grid_size!r}.")
        self.graph = UndirectedGraph()
        self.grid_size = grid_size
        self._vertex_coords: Dict[Coords, Vertex] = {}
        self._edge_coords: Dict[Edge, EdgeCoords] = {}
        # The two most recently added vertices, oldest first
        self._last_added: List[Vertex] = []

    # ==========================================================
    # LOOKUP
    # ==========================================================

    def vertex_coords(self) -> Dict[Coords, Vertex]:
        return dict(self._vertex_coords)

    def edge_coords(self) -> Dict[Edge, EdgeCoords]:
        return dict(self._edge_coords)

    def vertex_at(self, x: float, y: float) -> Optional[Vertex]:
        return self._vertex_coords.get(_point((x, y)))

    def coords_of(self, vertex: Vertex) -> Optional[Coords]:
        for coords, candidate in self._vertex_coords.items():
            if candidate is vertex:
                return coords
        return None

    def edge_between(self, origin_coords, dest_coords) -> Optional[Edge]:
        origin = self._vertex_coords.get(_point(origin_coords))
        destination = self._vertex_coords.get(_point(dest_coords))
        if origin is None or destination is None:
            return None
        return self.graph.get_edge(origin, destination)

    # ==========================================================
    # VERTEX OPERATIONS
    # ==========================================================

    def add_vertex(self, element: str, x: float, y: float) -> Vertex:
        coords = _check_finite(_point((x, y)))
        if coords in self._vertex_coords:
            raise ValueError(f"A vertex already exists at [{coords[0]}, {coords[1]}].")

        vertex = self.graph.insert_vertex(element)
        self._vertex_coords[coords] = vertex
        if len(self._last_added) == 2:
            self._last_added.pop(0)
        self._last_added.append(vertex)
        logger.debug("New vertex at [%s, %s]", coords[0], coords[1])
        return vertex

    def move_vertex(self, initial_x: float, initial_y: float, final_x: float, final_y: float) -> List[Edge]:
        """Move the vertex at the initial coordinates. Returns the edges incident on it."""
        initial = _point((initial_x, initial_y))
        final = _check_finite(_point((final_x, final_y)))
        vertex = self._vertex_coords.get(initial)
        if vertex is None:
            raise ValueError(f"No vertex at [{initial[0]}, {initial[1]}].")
        if final != initial and final in self._vertex_coords:
            raise ValueError(f"A vertex already exists at [{final[0]}, {final[1]}].")

        del self._vertex_coords[initial]
        edges = self.graph.incoming_edges(vertex)
        for edge in edges:
            x1, y1, x2, y2 = self._edge_coords[edge]
            if (x1, y1) == initial:
                self._edge_coords[edge] = (final[0], final[1], x2, y2)
            else:
                self._edge_coords[edge] = (x1, y1, final[0], final[1])
        self._vertex_coords[final] = vertex
        return edges

    def delete_vertex(self, x: float, y: float) -> Optional[Vertex]:
        vertex = self._vertex_coords.pop(_point((x, y)), None)
        if vertex is None:
            return None
        for edge in self.graph.incoming_edges(vertex):
            self._edge_coords.pop(edge, None)
        if vertex in self._last_added:
            self._last_added.remove(vertex)
        logger.debug("Deleted vertex at [%s, %s]", x, y)
        return self.graph.remove_vertex(vertex)

    def align_vertices_to_grid(self) -> None:
        """
        Move each vertex to the nearest corner of the grid cell containing it.
        Corners already holding another vertex are skipped; a vertex whose four
        corners are all taken stays where it is.
        """
        size = self.grid_size
        for coords in list(self._vertex_coords):
            x, y = coords
            lower_x, upper_x = math.floor(x / size) * size, math.ceil(x / size) * size
            lower_y, upper_y = math.floor(y / size) * size, math.ceil(y / size) * size
            corners = sorted(
                {(float(cx), float(cy)) for cx in (lower_x, upper_x) for cy in (lower_y, upper_y)},
                key=lambda corner: (_distance(coords, corner), corner),
            )
            for corner in corners:
                if corner == coords:
                    break
                if corner not in self._vertex_coords:
                    self.move_vertex(x, y, corner[0], corner[1])
                    break

    # ==========================================================
    # EDGE OPERATIONS
    # ==========================================================

    def add_edge(self, origin_coords, dest_coords, element: str = DEFAULT_EDGE_ELEMENT) -> Optional[Edge]:
        """
        Connect the vertices at the given coordinates. Returns None, without
        changing the graph, if a vertex is missing, both coordinates name the
        same vertex or the vertices are already connected.
        """
        if origin_coords is None or dest_coords is None:
            return None
        origin_coords, dest_coords = _point(origin_coords), _point(dest_coords)
        origin = self._vertex_coords.get(origin_coords)
        destination = self._vertex_coords.get(dest_coords)
        if origin is None or destination is None or origin is destination:
            return None
        if self.graph.get_edge(origin, destination) is not None:
            return None

        edge = self.graph.insert_edge(origin, destination, element)
        self._edge_coords[edge] = origin_coords + dest_coords
        logger.debug("New edge from %s to %s", origin_coords, dest_coords)
        return edge

    def delete_edge(self, coords) -> Optional[Edge]:
        """Delete the edge drawn between (x1, y1) and (x2, y2), in either direction."""
        x1, y1, x2, y2 = (float(c) for c in coords)
        for edge, edge_coords in self._edge_coords.items():
            if edge_coords in ((x1, y1, x2, y2), (x2, y2, x1, y1)):
                del self._edge_coords[edge]
                return self.graph.remove_edge(edge)
        return None

    def remove_all_edges(self) -> None:
        for edge in self._edge_coords:
            self.graph.remove_edge(edge)
        self._edge_coords.clear()

    def connect_last_added(self) -> Optional[Edge]:
        """Connect the most recently added vertex to the one added before it."""
        if len(self._last_added) != 2:
            return None
        previous, latest = self._last_added
        return self.add_edge(self.coords_of(latest), self.coords_of(previous))

    def last_added_coords(self) -> Optional[Coords]:
        if not self._last_added:
            return None
        return self.coords_of(self._last_added[-1])

    def clear_last_added(self) -> None:
        self._last_added.clear()

    def connect_all_vertices(self) -> None:
        """Connect every vertex to every other vertex, producing a complete graph."""
        for c1 in list(self._vertex_coords):
            for c2 in list(self._vertex_coords):
                if c1 != c2:
                    self.add_edge(c1, c2)

    def connect_vertex(self, coords) -> None:
        """Connect the vertex at the given coordinates to all other vertices."""
        coords = _point(coords)
        for other in list(self._vertex_coords):
            if other != coords:
                self.add_edge(coords, other)

    def connect_to_nearest(self, coords) -> Optional[Edge]:
        """Connect the vertex to the closest vertex it is not yet connected to."""
        coords = _point(coords)
        if coords not in self._vertex_coords:
            return None
        others = sorted(
            (c for c in self._vertex_coords if c != coords),
            key=lambda other: _distance(coords, other),
        )
        for other in others:
            if self.edge_between(coords, other) is None:
                return self.add_edge(coords, other)
        return None

    def disconnect_vertex(self, coords) -> None:
        """Remove all edges incident on the vertex at the given coordinates."""
        vertex = self._vertex_coords.get(_point(coords))
        if vertex is None:
            return
        for edge in self.graph.incoming_edges(vertex):
            self.graph.remove_edge(edge)
            self._edge_coords.pop(edge, None)

    def opposite_vertices(self, coords) -> List[Coords]:
        """Return the coordinates of every vertex adjacent to the one at coords."""
        vertex = self._vertex_coords.get(_point(coords))
        if vertex is None:
            return []
        opposite = [self.graph.opposite(vertex, edge) for edge in self.graph.incoming_edges(vertex)]
        return [c for c, v in self._vertex_coords.items() if any(v is o for o in opposite)]

    # ==========================================================
    # GRAPH PROPERTIES
    # ==========================================================

    def graph_is_connected(self) -> bool:
        """True if every pair of vertices is joined by a path. An empty graph is not connected."""
        vertices = self.graph.vertices()
        if not vertices:
            return False
        traversal = self.graph.depth_first_traversal(vertices[0])
        return len(traversal.tree_edges) == len(vertices) - 1

    def graph_is_complete(self) -> bool:
        """True if every pair of vertices is joined by an edge. An empty graph is not complete."""
        vertices = self.graph.vertices()
        if not vertices:
            return False
        for i, v1 in enumerate(vertices):
            for v2 in vertices[i + 1:]:
                if self.graph.get_edge(v1, v2) is None:
                    return False
        return True

    def clear_graph(self) -> None:
        self.graph.clear()
        self._vertex_coords.clear()
        self._edge_coords.clear()
        self._last_added.clear()

    # ==========================================================
    # COPY / EXPORT
    # ==========================================================

    def copy(self) -> "GraphModel":
        """Return an independent model with the same vertices, coordinates and edges."""
        duplicate = GraphModel(grid_size=self.grid_size)
        coords_by_vertex = {vertex: coords for coords, vertex in self._vertex_coords.items()}
        for vertex in self.graph.vertices():
            x, y = coords_by_vertex[vertex]
            duplicate.add_vertex(vertex.element, x, y)
        for edge, (x1, y1, x2, y2) in self._edge_coords.items():
            duplicate.add_edge((x1, y1), (x2, y2), edge.element)
        duplicate._last_added = [
            duplicate._vertex_coords[coords_by_vertex[v]] for v in self._last_added
        ]
        return duplicate

    def to_dict(self) -> dict:
        coords_by_vertex = {vertex: coords for coords, vertex in self._vertex_coords.items()}
        vertices = self.graph.vertices()
        index = {vertex: i for i, vertex in enumerate(vertices)}
        return {
            "vertices": [
                {
                    "index": index[vertex],
                    "element": vertex.element,
                    "x": coords_by_vertex[vertex][0],
                    "y": coords_by_vertex[vertex][1],
                    "degree": vertex.degree,
                }
                for vertex in vertices
            ],
            "edges": [
                {
                    "element": edge.element,
                    "origin": index[edge.endpoints()[0]],
                    "destination": index[edge.endpoints()[1]],
                    "coords": list(self._edge_coords[edge]),
                }
                for edge in self.graph.edges()
            ],
        }
