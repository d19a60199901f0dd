"""Exceptions raised by the graph ADT."""


class GraphError(Exception):
    """Base class for structural errors reported by a graph."""


class NotIncidentError(GraphError, LookupError):
    """The vertex is not an endpoint of the edge."""

    def __init__(self, vertex, edge):
        super().__init__(f"{vertex!r} is not incident to {edge!r}.")
        self.vertex = vertex
        self.edge = edge


class InvalidVertexError(GraphError, ValueError):
    """The vertex does not belong to this graph (never inserted, or removed)."""

    def __init__(self, vertex):
        super().__init__(f"{vertex!r} is not a vertex of this graph.")
        self.vertex = vertex


class InvalidEdgeError(GraphError, ValueError):
    """The edge does not belong to this graph (never inserted, or removed)."""

    def __init__(self, edge):
        super().__init__(f"{edge!r} is not an edge of this graph.")
        self.edge = edge
