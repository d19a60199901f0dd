# base.py
from __future__ import annotations

from abc import abstractmethod
from typing import Any

from core.graph_editor.model import GraphModel
from core.graph_editor.services.datasource_plugin import DataSourcePlugin


class BaseDatasourcePlugin(DataSourcePlugin):
    # Base class for defining the flow of creating a GraphModel object
    # The flow is always to first parse the source (this is different based on plugin)
    # Secondly, we build the vertices and the edges (which is the same for all)

    def load_graph(self, source: Any, **options: Any) -> GraphModel:
        raw_data = self._parse_source(source, **options)

        model = GraphModel(grid_size=options.get("grid_size", GraphModel.DEFAULT_GRID_SIZE))
        coords = self._build_vertices(raw_data, model)
        self._build_edges(raw_data, model, coords)
        return model

    @staticmethod
    def _resolve_path(source: Any, options: dict[str, Any]) -> str:
        if isinstance(source, str) and source.strip():
            return source
        fp = options.get("file_path")
        if isinstance(fp, str) and fp.strip():
            return fp
        raise ValueError("Missing file path. Provide it as 'source' or as option 'file_path'.")

    @abstractmethod
    def _parse_source(self, source: Any, **options: Any) -> Any:
        # Must return a dict with 'vertices' [(element, x, y)] and 'edges' [(element, origin, destination)]
        pass

    def _build_vertices(self, raw_data: Any, model: GraphModel) -> list[tuple[float, float]]:
        # Vertices are added in file order, edges refer to them by that index
        coords = []
        for element, x, y in (raw_data or {}).get("vertices", []) or []:
            model.add_vertex(element, x, y)
            coords.append((float(x), float(y)))
        return coords

    def _build_edges(self, raw_data: Any, model: GraphModel, coords: list[tuple[float, float]]) -> None:
        for element, origin, destination in (raw_data or {}).get("edges", []) or []:
            # Parallel edges and self-loops are silently skipped by the editor
            model.add_edge(coords[origin], coords[destination], element)
