"""Service-level plugin contracts for graph_editor."""

from .datasource_plugin import DataSourcePlugin
from .visualizer_plugin import VisualizerPlugin

__all__ = ["DataSourcePlugin", "VisualizerPlugin"]
