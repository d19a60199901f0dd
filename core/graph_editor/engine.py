import logging

from .registry import PluginRegistry
from .workspace import Workspace
from .services import DataSourcePlugin, VisualizerPlugin

logger = logging.getLogger(__name__)


class GraphEngine:
    """
    High-level orchestration layer.

    Responsibilities:
    - Plugin execution
    - Graph lifecycle management
    - Delegation to Workspace
    """

    def __init__(self):
        self.registry = PluginRegistry()
        self.workspace = Workspace()

    # ==========================================================
    # MAIN ORCHESTRATION
    # ==========================================================

    def load(self, datasource_name: str, source, **options):
        datasource = self._datasource(datasource_name)
        model = datasource.load_graph(source, **options)
        self.workspace.set_graph(model)
        logger.info(
            "Loaded graph with %d vertices and %d edges using '%s'",
            model.graph.num_vertices(), model.graph.num_edges(), datasource_name,
        )
        return model

    def process(
        self,
        datasource_name: str,
        visualizer_name: str,
        source,
        **options,
    ) -> str:
        visualizer = self._visualizer(visualizer_name)
        model = self.load(datasource_name, source, **options)
        return visualizer.render(model, **options)

    def render(self, visualizer_name: str, **options) -> str:
        model = self._current()
        return self._visualizer(visualizer_name).render(model, **options)

    def save(self, datasource_name: str, target, **options) -> None:
        model = self._current()
        self._datasource(datasource_name).save_graph(model, target, **options)
        logger.info("Saved graph using '%s'", datasource_name)

    # ==========================================================
    # WORKSPACE DELEGATION API
    # ==========================================================

    def get_current_graph(self):
        return self.workspace.get_graph()

    def clear_workspace(self):
        self.workspace.clear()

    def undo(self):
        return self.workspace.undo()

    def list_vertices(self):
        return self.workspace.list_vertices()

    def find_vertex(self, element: str):
        return self.workspace.find_vertex_by_element(element)

    def search_vertices_by_label(self, label_substr: str):
        return self.workspace.find_vertices_by_label(label_substr)

    def list_edges(self):
        return self.workspace.list_edges()

    def is_connected(self) -> bool:
        return self._current().graph_is_connected()

    def is_complete(self) -> bool:
        return self._current().graph_is_complete()

    # ==========================================================
    # HELPERS
    # ==========================================================

    def _current(self):
        model = self.workspace.get_graph()
        if model is None:
            raise ValueError("No graph loaded.")
        return model

    def _datasource(self, name: str) -> DataSourcePlugin:
        datasource_cls = self.registry.get_datasource(name)
        if not datasource_cls:
            raise ValueError(f"Datasource '{name}' not found.")
        return datasource_cls()

    def _visualizer(self, name: str) -> VisualizerPlugin:
        visualizer_cls = self.registry.get_visualizer(name)
        if not visualizer_cls:
            raise ValueError(f"Visualizer '{name}' not found.")
        return visualizer_cls()
