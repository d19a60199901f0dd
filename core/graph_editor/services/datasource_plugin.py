"""Datasource plugin interface definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from core.graph_editor.model import GraphModel


class DataSourcePlugin(ABC):
    """Contract for plugins that load (and optionally save) editor graphs."""

    @property
    @abstractmethod
    def plugin_id(self) -> str:
        """Return a unique, stable plugin identifier."""

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Return a human-readable plugin name for UI and logs."""

    def parameters_schema(self) -> dict[str, Any] | None:
        """Return an optional parameter schema for UI/platform integration."""
        return None

    @abstractmethod
    def load_graph(self, source: Any, **options: Any) -> GraphModel:
        """Load and return a graph model from the provided source."""

    def save_graph(self, model: GraphModel, target: Any, **options: Any) -> None:
        """Write the graph model to the provided target."""
        raise NotImplementedError(f"Datasource '{self.plugin_id}' cannot save graphs.")
