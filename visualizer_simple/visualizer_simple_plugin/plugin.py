import os
from jinja2 import Environment, FileSystemLoader
from core.graph_editor.services.visualizer_plugin import VisualizerPlugin
from core.graph_editor.model import GraphModel

# Width and height of the drawing area
WIDTH = 800
HEIGHT = 600
# Space kept around the outermost vertices
PADDING = 40
RADIUS = 18


def get_view_box(model: GraphModel, padding: float = PADDING):
    """
    Returns (min_x, min_y, width, height) of the box enclosing every vertex,
    padded on all sides.
    """
    coords = list(model.vertex_coords())
    min_x = min(x for x, _ in coords) - padding
    min_y = min(y for _, y in coords) - padding
    max_x = max(x for x, _ in coords) + padding
    max_y = max(y for _, y in coords) + padding
    return min_x, min_y, max_x - min_x, max_y - min_y


def get_tree_edges(model: GraphModel, root_element):
    """
    Runs a depth-first traversal from the first vertex storing root_element.
    Returns the set of discovery edges, empty if no vertex stores it.
    """
    root = model.graph.get_vertex(root_element)
    if root is None:
        return set()
    return set(model.graph.depth_first_traversal(root).tree_edges.values())


class SimpleVisualizer(VisualizerPlugin):
    @property
    def plugin_id(self) -> str:
        return "simple-visualizer"

    @property
    def display_name(self) -> str:
        return "Simple SVG View"

    def render_options_schema(self) -> dict:
        return {
            "width": {"type": "int", "label": "Width in pixels", "required": False, "default": WIDTH},
            "height": {"type": "int", "label": "Height in pixels", "required": False, "default": HEIGHT},
            "show_edge_labels": {"type": "bool", "label": "Show edge elements", "required": False, "default": False},
            "traversal_root": {"type": "str", "label": "Highlight DFS tree from vertex", "required": False},
        }

    def render(self, model: GraphModel, **options) -> str:
        if model.graph.num_vertices() == 0:
            return "<html><body>Empty Graph</body></html>"

        # --- Vertex and edge geometry ---
        vertices = [
            {"element": vertex.element, "x": x, "y": y, "degree": vertex.degree}
            for (x, y), vertex in model.vertex_coords().items()
        ]

        tree_edges = set()
        if options.get("traversal_root") is not None:
            tree_edges = get_tree_edges(model, options["traversal_root"])

        edges = [
            {
                "element": edge.element,
                "x1": x1, "y1": y1, "x2": x2, "y2": y2,
                "tree": edge in tree_edges,
            }
            for edge, (x1, y1, x2, y2) in model.edge_coords().items()
        ]

        # --- Template Rendering ---
        template_path = os.path.join(os.path.dirname(__file__), 'templates')
        env = Environment(loader=FileSystemLoader(template_path), autoescape=True)
        template = env.get_template('simple.html')

        return template.render(
            vertices=vertices,
            edges=edges,
            view_box=get_view_box(model),
            width=options.get("width", WIDTH),
            height=options.get("height", HEIGHT),
            radius=RADIUS,
            show_edge_labels=bool(options.get("show_edge_labels", False)),
            connected=model.graph_is_connected(),
        )
