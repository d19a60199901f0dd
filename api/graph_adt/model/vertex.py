from typing import Any, List


class Vertex:
    """
    Vertex of a graph, storing an element and the sequence of incident edges.

    Vertices are created by a graph (``insert_vertex``) and mutated only by it.
    Two vertices are never equal unless they are the same object, so the stored
    element does not need to be unique.
    """

    def __init__(self, element: Any, position: int):
        self._element = element
        # Position in the vertex sequence of the owning graph at insertion time
        self._position = position
        self._incident_edges: List["Edge"] = []
        # Owning graph, cleared when the vertex is removed
        self._graph = None

    @property
    def element(self) -> Any:
        return self._element

    @property
    def position(self) -> int:
        return self._position

    @property
    def degree(self) -> int:
        return len(self._incident_edges)

    def incident_edges(self) -> List["Edge"]:
        """Return a copy of the incidence sequence, in insertion order."""
        return list(self._incident_edges)

    def add_edge(self, edge: "Edge") -> None:
        self._incident_edges.append(edge)

    def remove_edge(self, edge: "Edge") -> bool:
        """Remove the first occurrence of the given edge. Returns True if it was present."""
        for index, incident in enumerate(self._incident_edges):
            if incident is edge:
                del self._incident_edges[index]
                return True
        return False

    def to_dict(self) -> dict:
        return {
            "element": self._element,
            "position": self._position,
            "degree": self.degree,
        }

    def __repr__(self) -> str:
        return f"Vertex[{self._element}]"
