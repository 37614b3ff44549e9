import os
import json
import logging
import threading
from tempfile import NamedTemporaryFile
from uuid import uuid4
from html import escape as escape_html

from django.core.files.uploadedfile import UploadedFile
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from api.poet_api.model import Graph
from core.poet_platform.config import get_config
from core.poet_platform.engine import PoetEngine
from core.poet_platform.registry import PluginRegistry
from datasource_text.datasource_text_plugin.plugin import TextCorpusPlugin
from visualizer_simple.visualizer_simple_plugin.plugin import SimpleVisualizer

ENGINES: dict[str, PoetEngine] = {}
ENGINES_LOCK = threading.Lock()
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


def _parse_json_body(request: HttpRequest) -> tuple[dict | None, JsonResponse | None]:
    if not request.body:
        return None, json_error(400, "BadRequest", "Invalid JSON body.")

    try:
        body = json.loads(request.body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None, json_error(400, "BadRequest", "Invalid JSON body.")

    if not isinstance(body, dict):
        return None, json_error(400, "BadRequest", "JSON body must be an object.")
    return body, None


def _require_post_json(request: HttpRequest) -> JsonResponse | None:
    if request.method != "POST":
        return json_error(
            405,
            "MethodNotAllowed",
            "Only POST is allowed.",
            details={"allowed_methods": ["POST"]},
        )
    return None


def _new_engine() -> PoetEngine:
    registry = PluginRegistry()
    registry.register_datasource("text", TextCorpusPlugin)
    registry.register_visualizer("simple", SimpleVisualizer)
    return PoetEngine(config=get_config(), registry=registry)


def _get_engine(graph_id: str) -> PoetEngine | None:
    with ENGINES_LOCK:
        return ENGINES.get(graph_id)


def _load_corpus_from_upload(engine: PoetEngine, uploaded_file: UploadedFile) -> Graph:
    temp_path: str | None = None
    try:
        with NamedTemporaryFile(delete=False, suffix=".txt") as temp_file:
            temp_path = temp_file.name
            for chunk in uploaded_file.chunks():
                temp_file.write(chunk)

        return engine.load_corpus(temp_path)
    finally:
        if temp_path and os.path.exists(temp_path):
            os.remove(temp_path)


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


@csrf_exempt
@require_POST
def load_corpus_api(request: HttpRequest) -> JsonResponse:
    uploaded_file = request.FILES.get("file")
    if uploaded_file is None:
        return json_error(400, "BadRequest", "Missing corpus file.", expected={"file": "text/plain upload"})

    filename = str(uploaded_file.name or "corpus.txt")
    engine = _new_engine()
    try:
        graph = _load_corpus_from_upload(engine, uploaded_file)
    except UnicodeDecodeError as exc:
        return json_error(400, "BadRequest", f"Failed to decode '{filename}': {exc}")

    graph_id = str(uuid4())
    with ENGINES_LOCK:
        ENGINES[graph_id] = engine

    LOGGER.info("Loaded corpus '%s' as graph %s.", filename, graph_id)
    return JsonResponse(
        {
            "ok": True,
            "graph_id": graph_id,
            "meta": {
                "filename": filename,
                "vertex_count": len(graph),
                "edge_count": len(graph.edges()),
            },
        },
        status=200,
    )


@csrf_exempt
def poem_api(request: HttpRequest) -> JsonResponse:
    method_error = _require_post_json(request)
    if method_error:
        return method_error

    body, error_response = _parse_json_body(request)
    if error_response:
        return error_response

    graph_id = body.get("graph_id")
    text = body.get("text")
    if not isinstance(graph_id, str) or not graph_id or not isinstance(text, str):
        return json_error(
            400,
            "BadRequest",
            "graph_id and text are required.",
            expected={"graph_id": "string", "text": "string"},
        )

    engine = _get_engine(graph_id)
    if engine is None:
        return json_error(404, "NotFound", f"Graph '{graph_id}' was not found.")

    return JsonResponse({"ok": True, "poem": engine.write_poem(text)})


@require_GET
def graph_detail_api(request: HttpRequest, graph_id: str) -> JsonResponse:
    engine = _get_engine(graph_id)
    if engine is None:
        return json_error(404, "NotFound", f"Graph '{graph_id}' was not found.")

    return JsonResponse({"ok": True, "graph": engine.get_current_graph().to_dict()})


@csrf_exempt
def workspace_reset_api(request: HttpRequest) -> JsonResponse:
    method_error = _require_post_json(request)
    if method_error:
        return method_error

    body, error_response = _parse_json_body(request)
    if error_response:
        return error_response

    graph_id = body.get("graph_id")
    if not isinstance(graph_id, str) or not graph_id:
        return json_error(400, "BadRequest", "graph_id is required.", expected={"graph_id": "string"})

    with ENGINES_LOCK:
        engine = ENGINES.pop(graph_id, None)
    if engine is None:
        return json_error(404, "NotFound", f"Graph '{graph_id}' was not found.")

    engine.clear_workspace()
    return JsonResponse({"ok": True, "graph_id": graph_id})


@require_GET
def render_visualizer_api(request: HttpRequest) -> HttpResponse:
    graph_id = request.GET.get("graph_id", "").strip()
    if not graph_id:
        return _html_response(
            "Missing graph_id",
            "Query parameter 'graph_id' is required.",
            status=400,
        )

    engine = _get_engine(graph_id)
    if engine is None:
        return _html_response(
            "Graph Not Found",
            f"Graph '{graph_id}' was not found in the active graph store.",
            status=404,
        )

    text = request.GET.get("text", "")
    poem = engine.write_poem(text) if text.strip() else None
    html = engine.render(poem=poem)
    return HttpResponse(html, content_type="text/html; charset=utf-8")
