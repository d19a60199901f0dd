from .base import BaseDatasourcePlugin

__all__ = ["BaseDatasourcePlugin"]
