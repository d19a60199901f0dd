# Line-oriented graph format shared with saved editor files:
#
#   <element> <x> <y>                  one line per vertex, in insertion order
#                                      a single blank line
#   <element> <origin> <destination>   one line per edge, 0-based vertex indices

import io
import math
from typing import Iterable, TextIO

from core.graph_editor.model import GraphModel


class GraphFormatError(ValueError):
    """Raised when graph text cannot be read or a graph cannot be written."""


def parse_lines(lines: Iterable[str], name: str = "<string>") -> dict:
    # Returns {'vertices': [(element, x, y)], 'edges': [(element, origin, destination)]}
    vertices = []
    edges = []
    seen_coords = set()
    stage = 0

    for lineno, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line.strip():
            stage += 1
            continue

        components = line.split()
        if len(components) != 3:
            raise GraphFormatError(f"Error reading {name}: line {lineno} must have three fields.")
        element = components[0]

        try:
            first, second = float(components[1]), float(components[2])
        except ValueError:
            raise GraphFormatError(f"Error reading {name}: line {lineno} has a non-numeric field.") from None
        if not (math.isfinite(first) and math.isfinite(second)):
            raise GraphFormatError(f"Error reading {name}: line {lineno} has a non-finite number.")

        if stage == 0:
            if (first, second) in seen_coords:
                raise GraphFormatError(f"Error reading {name}: line {lineno} repeats vertex coordinates.")
            seen_coords.add((first, second))
            vertices.append((element, first, second))
            continue

        origin, destination = int(first), int(second)
        if origin != first or destination != second:
            raise GraphFormatError(f"Error reading {name}: line {lineno} has a non-integer vertex index.")
        if not (0 <= origin < len(vertices) and 0 <= destination < len(vertices)):
            raise GraphFormatError(f"Error reading {name}: line {lineno} refers to a missing vertex.")
        edges.append((element, origin, destination))

    return {"vertices": vertices, "edges": edges}


def _check_element(element) -> str:
    text = str(element)
    if not text or any(ch.isspace() for ch in text):
        raise GraphFormatError(f"Element {text!r} cannot be saved: it must be non-empty without whitespace.")
    return text


def write(model: GraphModel, stream: TextIO) -> None:
    coords_by_vertex = {vertex: coords for coords, vertex in model.vertex_coords().items()}
    vertices = model.graph.vertices()
    index = {vertex: i for i, vertex in enumerate(vertices)}

    for vertex in vertices:
        x, y = coords_by_vertex[vertex]
        stream.write(f"{_check_element(vertex.element)} {float(x)} {float(y)}\n")
    stream.write("\n")
    for edge in model.graph.edges():
        origin, destination = edge.endpoints()
        stream.write(f"{_check_element(edge.element)} {index[origin]} {index[destination]}\n")


def dumps(model: GraphModel) -> str:
    buffer = io.StringIO()
    write(model, buffer)
    return buffer.getvalue()
