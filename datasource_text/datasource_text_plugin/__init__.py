from .plugin import TextDatasourcePlugin
from .text_format import GraphFormatError, dumps, parse_lines

__all__ = ["TextDatasourcePlugin", "GraphFormatError", "dumps", "parse_lines"]
