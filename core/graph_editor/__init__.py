"""Editor layer built on the graph ADT: model, workspace, plugins and orchestration."""

from .model import GraphModel
from .workspace import Workspace
from .registry import PluginRegistry
from .engine import GraphEngine

__all__ = ["GraphModel", "Workspace", "PluginRegistry", "GraphEngine"]
