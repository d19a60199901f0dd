import io
import logging
import os.path
from typing import Any

from core.graph_editor.datasource_common.base import BaseDatasourcePlugin
from core.graph_editor.model import GraphModel
from .text_format import GraphFormatError, dumps, parse_lines

logger = logging.getLogger(__name__)


class TextDatasourcePlugin(BaseDatasourcePlugin):
    # Adapter for the editor's plain text files
    # Vertices come first with their coordinates, then a blank line, then edges by vertex index

    @property
    def plugin_id(self) -> str:
        return "text"

    @property
    def display_name(self) -> str:
        return "Graph text file"

    def parameters_schema(self) -> dict:
        return {
            "file_path": {
                "type": "str",
                "label": "Path to graph text file",
                "required": True
            },
            "grid_size": {
                "type": "int",
                "label": "Grid size used when aligning vertices",
                "required": False,
                "default": GraphModel.DEFAULT_GRID_SIZE
            }
        }

    def _parse_source(self, source, **kwargs) -> dict:
        path = self._resolve_path(source, kwargs)
        if not os.path.exists(path):
            raise FileNotFoundError(f"Graph file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                return parse_lines(f, name=os.path.basename(path))
        except UnicodeDecodeError as exc:
            raise GraphFormatError(f"Error reading file {os.path.basename(path)}: {exc}") from exc

    def load_graph(self, source: Any, **options: Any) -> GraphModel:
        model = super().load_graph(source, **options)
        logger.info(
            "Loaded %s: %d vertices, %d edges",
            source or options.get("file_path"), model.graph.num_vertices(), model.graph.num_edges(),
        )
        return model

    def loads(self, text: str, **options: Any) -> GraphModel:
        # Same flow as load_graph, for content that is already in memory
        raw_data = parse_lines(io.StringIO(text))
        model = GraphModel(grid_size=options.get("grid_size", GraphModel.DEFAULT_GRID_SIZE))
        coords = self._build_vertices(raw_data, model)
        self._build_edges(raw_data, model, coords)
        return model

    def save_graph(self, model: GraphModel, target: Any, **options: Any) -> None:
        path = self._resolve_path(target, options)
        # Serialize before opening the target
        content = dumps(model)
        with open(path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(content)
        logger.info("Saved %d vertices, %d edges to %s",
                    model.graph.num_vertices(), model.graph.num_edges(), path)
