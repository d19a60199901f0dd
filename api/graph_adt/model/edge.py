from typing import Any, List, Tuple

from .vertex import Vertex


class Edge:
    """
    Edge of a graph, storing an element and its two end vertices.

    The first endpoint is the origin and the second the destination. The
    positions record where the edge was appended in each endpoint's incidence
    sequence when it was created; they are not updated afterwards.
    """

    def __init__(self, element: Any,
                 origin: Vertex, destination: Vertex,
                 origin_position: int, destination_position: int):
        self._element = element
        self._endpoints: List[Vertex] = [origin, destination]
        self._positions = (origin_position, destination_position)
        # Owning graph, cleared when the edge is removed
        self._graph = None

    @property
    def element(self) -> Any:
        return self._element

    def endpoints(self) -> Tuple[Vertex, ...]:
        return tuple(self._endpoints)

    def incident_positions(self) -> Tuple[int, int]:
        return self._positions

    def remove_endpoint(self, vertex: Vertex) -> bool:
        """Remove the given end vertex. Returns True if it was an endpoint."""
        for index, endpoint in enumerate(self._endpoints):
            if endpoint is vertex:
                del self._endpoints[index]
                return True
        return False

    def to_dict(self) -> dict:
        return {
            "element": self._element,
            "endpoints": [v.element for v in self._endpoints],
            "positions": list(self._positions),
        }

    def __repr__(self) -> str:
        ends = ", ".join(repr(v) for v in self._endpoints)
        return f"Edge[{self._element}, {ends}]"
