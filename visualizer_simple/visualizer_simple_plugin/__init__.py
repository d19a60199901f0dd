from .plugin import SimpleVisualizer

__all__ = ["SimpleVisualizer"]
