from typing import Callable, List, Optional

from api.graph_adt import Edge, Vertex
from .model import GraphModel


class Workspace:
    """
    Central application state container.

    Responsibilities:
    - Manage current graph model
    - Maintain history (undo support)
    - Provide backend search/filter capabilities
    """

    def __init__(self):
        self._current_graph: Optional[GraphModel] = None
        self._history: List[GraphModel] = []

    # ==========================================================
    # GRAPH STATE MANAGEMENT
    # ==========================================================

    def set_graph(self, model: GraphModel) -> None:
        if self._current_graph is not None:
            self._history.append(self._current_graph)
        self._current_graph = model

    def get_graph(self) -> Optional[GraphModel]:
        return self._current_graph

    def has_graph(self) -> bool:
        return self._current_graph is not None

    def checkpoint(self) -> GraphModel:
        """
        Push a copy of the current model to the history and return the current
        model, ready to be edited in place.
        """
        if self._current_graph is None:
            raise ValueError("Workspace has no graph.")
        self._history.append(self._current_graph.copy())
        return self._current_graph

    def clear(self) -> None:
        self._current_graph = None
        self._history.clear()

    def undo(self) -> Optional[GraphModel]:
        if not self._history:
            return None
        self._current_graph = self._history.pop()
        return self._current_graph

    def history_size(self) -> int:
        return len(self._history)

    # ==========================================================
    # VERTEX OPERATIONS
    # ==========================================================

    def list_vertices(self) -> List[Vertex]:
        if not self._current_graph:
            return []
        return self._current_graph.graph.vertices()

    def find_vertex_by_element(self, element: str) -> Optional[Vertex]:
        if not self._current_graph:
            return None
        return self._current_graph.graph.get_vertex(element)

    def filter_vertices(self, predicate: Callable[[Vertex], bool]) -> List[Vertex]:
        return [vertex for vertex in self.list_vertices() if predicate(vertex)]

    def find_vertices_by_label(self, label_substr: str) -> List[Vertex]:
        """Return vertices whose element contains the given substring."""
        return self.filter_vertices(lambda v: label_substr.lower() in str(v.element).lower())

    # ==========================================================
    # EDGE OPERATIONS
    # ==========================================================

    def list_edges(self) -> List[Edge]:
        if not self._current_graph:
            return []
        return self._current_graph.graph.edges()

    def filter_edges(self, predicate: Callable[[Edge], bool]) -> List[Edge]:
        return [edge for edge in self.list_edges() if predicate(edge)]
