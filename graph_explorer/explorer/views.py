import os
import json
import logging
import math
from pathlib import Path
from tempfile import NamedTemporaryFile
from uuid import uuid4
from html import escape as escape_html

from django.core.files.uploadedfile import UploadedFile
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from api.graph_adt import GraphError
from core.graph_editor.model import GraphModel
from core.graph_editor.workspace import Workspace
from datasource_text.datasource_text_plugin.plugin import TextDatasourcePlugin
from datasource_text.datasource_text_plugin.text_format import GraphFormatError, dumps
from visualizer_simple.visualizer_simple_plugin.plugin import SimpleVisualizer

WORKSPACES: dict[str, Workspace] = {}
ALLOWED_EXTENSIONS = {".txt", ".graph"}
LOGGER = logging.getLogger(__name__)


def json_error(
    status_code: int,
    error: str,
    message: str,
    expected: dict[str, object] | None = None,
    details: object | None = None,
) -> JsonResponse:
    payload: dict[str, object] = {
        "ok": False,
        "status": status_code,
        "error": error,
        "message": message,
    }
    if expected is not None:
        payload["expected"] = expected
    if details is not None:
        payload["details"] = details
    return JsonResponse(payload, status=status_code)


def _parse_json_body(request: HttpRequest) -> tuple[object | None, JsonResponse | None]:
    if not request.body:
        return None, json_error(400, "BadRequest", "Invalid JSON body.")

    try:
        body = request.body.decode("utf-8")
        parsed = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None, json_error(400, "BadRequest", "Invalid JSON body.")

    if not isinstance(parsed, dict):
        return None, json_error(400, "BadRequest", "JSON body must be an object.")
    return parsed, None


def _graph_summary(graph_id: str, model: GraphModel) -> dict[str, object]:
    last_added = model.last_added_coords()
    return {
        "ok": True,
        "graph_id": graph_id,
        "meta": {
            "vertex_count": model.graph.num_vertices(),
            "edge_count": model.graph.num_edges(),
            "connected": model.graph_is_connected(),
            "complete": model.graph_is_complete(),
        },
        "last_added": list(last_added) if last_added is not None else None,
        "graph": model.to_dict(),
    }


def _workspace_for(graph_id: str | None) -> tuple[Workspace | None, JsonResponse | None]:
    if not graph_id or not isinstance(graph_id, str):
        return None, json_error(400, "BadRequest", "graph_id is required and must be a string.")
    workspace = WORKSPACES.get(graph_id)
    if workspace is None or not workspace.has_graph():
        return None, json_error(404, "NotFound", f"Graph '{graph_id}' was not found.")
    return workspace, None


def _load_graph_from_upload(uploaded_file: UploadedFile, suffix: str) -> GraphModel:
    temp_path: str | None = None
    try:
        with NamedTemporaryFile(delete=False, suffix=suffix) as temp_file:
            temp_path = temp_file.name
            for chunk in uploaded_file.chunks():
                temp_file.write(chunk)

        return TextDatasourcePlugin().load_graph(temp_path)
    finally:
        if temp_path and os.path.exists(temp_path):
            try:
                os.remove(temp_path)
            except OSError:
                LOGGER.warning("Unable to remove temporary upload %s.", temp_path)


@csrf_exempt
@require_POST
def load_graph_api(request: HttpRequest) -> JsonResponse:
    uploaded_file = request.FILES.get("file")
    if uploaded_file is None:
        return json_error(400, "BadRequest", "missing file")

    filename = str(uploaded_file.name or "uploaded-file")
    extension = Path(filename).suffix.lower()
    if extension not in ALLOWED_EXTENSIONS:
        return json_error(
            400,
            "BadRequest",
            "Unsupported file extension.",
            details={"allowed_extensions": sorted(ALLOWED_EXTENSIONS)},
        )

    try:
        model = _load_graph_from_upload(uploaded_file=uploaded_file, suffix=extension)
    except GraphFormatError as exc:
        return json_error(400, "BadRequest", f"Failed to parse '{filename}': {exc}")
    except Exception as exc:
        LOGGER.exception("Unexpected graph load failure.")
        return json_error(500, "InternalError", f"Unexpected graph load failure: {exc}")

    graph_id = str(uuid4())
    workspace = Workspace()
    workspace.set_graph(model)
    WORKSPACES[graph_id] = workspace
    LOGGER.info("Loaded '%s' as graph %s", filename, graph_id)

    return JsonResponse(_graph_summary(graph_id, model), status=200)


@csrf_exempt
@require_POST
def new_graph_api(request: HttpRequest) -> JsonResponse:
    graph_id = str(uuid4())
    workspace = Workspace()
    workspace.set_graph(GraphModel())
    WORKSPACES[graph_id] = workspace
    return JsonResponse(_graph_summary(graph_id, workspace.get_graph()), status=201)


def _point(body: dict, key: str) -> tuple[float, float]:
    value = body.get(key)
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"'{key}' must be a list [x, y].")
    try:
        x, y = float(value[0]), float(value[1])
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"'{key}' must hold two numbers.") from None
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ValueError(f"'{key}' must hold two finite numbers.")
    return x, y


def _apply_command(model: GraphModel, command: str, body: dict) -> object:
    if command == "add_vertex":
        element = body.get("element")
        if not element:
            raise ValueError("'element' is required.")
        x, y = _point(body, "at")
        return model.add_vertex(str(element), x, y).to_dict()
    if command == "move_vertex":
        (x0, y0), (x1, y1) = _point(body, "from"), _point(body, "to")
        return len(model.move_vertex(x0, y0, x1, y1))
    if command == "delete_vertex":
        x, y = _point(body, "at")
        return model.delete_vertex(x, y) is not None
    if command == "add_edge":
        element = str(body.get("element") or "NONE")
        edge = model.add_edge(_point(body, "origin"), _point(body, "destination"), element)
        return edge.to_dict() if edge is not None else None
    if command == "delete_edge":
        return model.delete_edge(_point(body, "origin") + _point(body, "destination")) is not None
    if command == "connect_all":
        model.connect_all_vertices()
        return None
    if command == "connect_vertex":
        model.connect_vertex(_point(body, "at"))
        return None
    if command == "connect_to_nearest":
        edge = model.connect_to_nearest(_point(body, "at"))
        return edge.to_dict() if edge is not None else None
    if command == "disconnect_vertex":
        model.disconnect_vertex(_point(body, "at"))
        return None
    if command == "remove_all_edges":
        model.remove_all_edges()
        return None
    if command == "align_to_grid":
        model.align_vertices_to_grid()
        return None
    if command == "clear":
        model.clear_graph()
        return None
    if command == "connect_last_added":
        edge = model.connect_last_added()
        return edge.to_dict() if edge is not None else None
    if command == "clear_last_added":
        model.clear_last_added()
        return None
    if command == "opposite_vertices":
        return [list(coords) for coords in model.opposite_vertices(_point(body, "at"))]
    raise KeyError(command)


COMMANDS = [
    "add_vertex", "move_vertex", "delete_vertex", "add_edge", "delete_edge",
    "connect_all", "connect_vertex", "connect_to_nearest", "disconnect_vertex",
    "remove_all_edges", "align_to_grid", "clear", "connect_last_added",
    "clear_last_added", "opposite_vertices", "undo",
]
# Commands that only read the graph and leave the history alone
QUERIES = {"opposite_vertices"}


@csrf_exempt
@require_POST
def edit_graph_api(request: HttpRequest) -> JsonResponse:
    body, error_response = _parse_json_body(request)
    if error_response:
        return error_response

    workspace, error_response = _workspace_for(body.get("graph_id"))
    if error_response:
        return error_response

    command = body.get("command")
    if command not in COMMANDS:
        return json_error(
            400,
            "BadRequest",
            f"Unknown command '{command}'.",
            expected={"graph_id": "string", "command": "|".join(COMMANDS)},
        )

    if command == "undo":
        if workspace.undo() is None:
            return json_error(409, "Conflict", "Nothing to undo.")
        result = None
    elif command in QUERIES:
        try:
            result = _apply_command(workspace.get_graph(), command, body)
        except (ValueError, GraphError) as exc:
            return json_error(400, "BadRequest", str(exc))
    else:
        model = workspace.checkpoint()
        try:
            result = _apply_command(model, command, body)
        except (ValueError, GraphError) as exc:
            # Restore the state saved by checkpoint()
            workspace.undo()
            return json_error(400, "BadRequest", str(exc))
        except Exception as exc:
            workspace.undo()
            LOGGER.exception("Unexpected failure applying '%s'.", command)
            return json_error(500, "InternalError", f"Unexpected edit failure: {exc}")
        LOGGER.debug("Applied '%s' to graph %s", command, body["graph_id"])

    payload = _graph_summary(body["graph_id"], workspace.get_graph())
    payload["result"] = result
    return JsonResponse(payload)


@require_GET
def graph_status_api(request: HttpRequest) -> JsonResponse:
    workspace, error_response = _workspace_for(request.GET.get("graph_id", "").strip())
    if error_response:
        return error_response
    summary = _graph_summary(request.GET["graph_id"].strip(), workspace.get_graph())
    summary["history_size"] = workspace.history_size()
    return JsonResponse(summary)


@require_GET
def save_graph_api(request: HttpRequest) -> HttpResponse:
    graph_id = request.GET.get("graph_id", "").strip()
    workspace, error_response = _workspace_for(graph_id)
    if error_response:
        return error_response

    try:
        content = dumps(workspace.get_graph())
    except GraphFormatError as exc:
        return json_error(400, "BadRequest", str(exc))

    response = HttpResponse(content, content_type="text/plain; charset=utf-8")
    response["Content-Disposition"] = f'attachment; filename="{graph_id}.txt"'
    return response


def _html_response(title: str, message: str, status: int = 200) -> HttpResponse:
    page = [
        "<!doctype html>",
        "<html lang=\"en\">",
        "<head><meta charset=\"utf-8\"><title>{}</title></head>".format(escape_html(title)),
        "<body>",
        "<h1 style=\"font-family:sans-serif;font-size:1.1rem;\">{}</h1>".format(escape_html(title)),
        "<p style=\"font-family:sans-serif;\">{}</p>".format(escape_html(message)),
        "</body>",
        "</html>",
    ]
    return HttpResponse("\n".join(page), status=status, content_type="text/html; charset=utf-8")


@require_GET
def render_visualizer_api(request: HttpRequest) -> HttpResponse:
    graph_id = request.GET.get("graph_id", "").strip()
    if not graph_id:
        return _html_response(
            "Missing graph_id",
            "Query parameter 'graph_id' is required.",
            status=400,
        )

    workspace = WORKSPACES.get(graph_id)
    if workspace is None or not workspace.has_graph():
        return _html_response(
            "Graph Not Found",
            f"Graph '{graph_id}' was not found in the active graph store.",
            status=404,
        )

    options = {"show_edge_labels": request.GET.get("labels", "").strip().lower() in {"1", "true", "yes", "on"}}
    root = request.GET.get("root")
    if root:
        options["traversal_root"] = root

    try:
        html = SimpleVisualizer().render(workspace.get_graph(), **options)
    except Exception as exc:
        LOGGER.exception("Visualizer render failure.")
        return _html_response(
            "Visualizer Render Error",
            f"Failed to render graph '{graph_id}': {exc}",
            status=500,
        )

    return HttpResponse(str(html), content_type="text/html; charset=utf-8")
