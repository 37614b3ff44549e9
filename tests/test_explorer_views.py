import json

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import RequestFactory

from graph_explorer.explorer import views

MUGAR = b"This is a test of the Mugar Omni Theater\nsound system.\n"


@pytest.fixture
def rf():
    return RequestFactory()


@pytest.fixture(autouse=True)
def empty_engines():
    views.ENGINES.clear()
    yield
    views.ENGINES.clear()


def post_json(rf, path, payload):
    return rf.post(path, data=json.dumps(payload), content_type="application/json")


def load(rf, content=MUGAR):
    upload = SimpleUploadedFile("corpus.txt", content, content_type="text/plain")
    response = views.load_corpus_api(rf.post("/api/corpus/load/", {"file": upload}))
    return response, json.loads(response.content)


def test_load_corpus(rf):
    response, payload = load(rf)
    assert response.status_code == 200
    assert payload["ok"] is True
    assert payload["meta"] == {"filename": "corpus.txt", "vertex_count": 11, "edge_count": 10}
    assert payload["graph_id"] in views.ENGINES


def test_load_corpus_requires_file(rf):
    response = views.load_corpus_api(rf.post("/api/corpus/load/", {}))
    assert response.status_code == 400
    assert json.loads(response.content)["error"] == "BadRequest"


def test_load_corpus_rejects_get(rf):
    response = views.load_corpus_api(rf.get("/api/corpus/load/"))
    assert response.status_code == 405


def test_load_corpus_rejects_undecodable(rf):
    response, payload = load(rf, content=b"\xff\xfe\xfa")
    assert response.status_code == 400
    assert views.ENGINES == {}


def test_poem(rf):
    _, loaded = load(rf)
    response = views.poem_api(post_json(rf, "/api/poem/", {"graph_id": loaded["graph_id"], "text": "Test the system."}))
    assert response.status_code == 200
    assert json.loads(response.content) == {"ok": True, "poem": "Test of the system."}


def test_poem_unknown_graph(rf):
    response = views.poem_api(post_json(rf, "/api/poem/", {"graph_id": "nope", "text": "a b"}))
    assert response.status_code == 404


def test_poem_validation(rf):
    assert views.poem_api(post_json(rf, "/api/poem/", {"graph_id": "x"})).status_code == 400
    assert views.poem_api(post_json(rf, "/api/poem/", ["not", "an", "object"])).status_code == 400
    bad = rf.post("/api/poem/", data="{oops", content_type="application/json")
    assert views.poem_api(bad).status_code == 400
    assert views.poem_api(rf.get("/api/poem/")).status_code == 405


def test_graph_detail(rf):
    _, loaded = load(rf, content=b"Hello, HELLO, hello, goodbye!")
    response = views.graph_detail_api(rf.get("/api/graph/"), graph_id=loaded["graph_id"])
    graph = json.loads(response.content)["graph"]
    assert graph["vertices"] == ["goodbye!", "hello,"]
    assert graph["edges"] == [
        {"source": "hello,", "target": "goodbye!", "weight": 1},
        {"source": "hello,", "target": "hello,", "weight": 2},
    ]


def test_graph_detail_unknown(rf):
    assert views.graph_detail_api(rf.get("/api/graph/"), graph_id="nope").status_code == 404


def test_workspace_reset(rf):
    _, loaded = load(rf)
    graph_id = loaded["graph_id"]
    response = views.workspace_reset_api(post_json(rf, "/api/workspace/reset/", {"graph_id": graph_id}))
    assert response.status_code == 200
    assert graph_id not in views.ENGINES
    again = views.workspace_reset_api(post_json(rf, "/api/workspace/reset/", {"graph_id": graph_id}))
    assert again.status_code == 404


def test_workspace_reset_requires_graph_id(rf):
    response = views.workspace_reset_api(post_json(rf, "/api/workspace/reset/", {}))
    assert response.status_code == 400


def test_render(rf):
    _, loaded = load(rf)
    request = rf.get("/api/render/", {"graph_id": loaded["graph_id"], "text": "Test the system."})
    response = views.render_visualizer_api(request)
    assert response.status_code == 200
    html = response.content.decode("utf-8")
    assert "Test of the system." in html
    assert "theater" in html


def test_render_errors(rf):
    assert views.render_visualizer_api(rf.get("/api/render/")).status_code == 400
    assert views.render_visualizer_api(rf.get("/api/render/", {"graph_id": "nope"})).status_code == 404


@pytest.mark.parametrize(
    "path, view",
    [
        ("/api/corpus/load/", views.load_corpus_api),
        ("/api/poem/", views.poem_api),
        ("/api/graph/abc-123/", views.graph_detail_api),
        ("/api/workspace/reset/", views.workspace_reset_api),
        ("/api/render/", views.render_visualizer_api),
    ],
)
def test_urls_resolve(path, view):
    from django.urls import resolve

    assert resolve(path).func is view


@pytest.mark.parametrize("graph_id", [["x"], {"id": "x"}, 7])
def test_poem_rejects_non_string_graph_id(rf, graph_id):
    response = views.poem_api(post_json(rf, "/api/poem/", {"graph_id": graph_id, "text": "a b"}))
    assert response.status_code == 400
    assert json.loads(response.content)["error"] == "BadRequest"


@pytest.mark.parametrize("graph_id", [["x"], {"id": "x"}])
def test_workspace_reset_rejects_non_string_graph_id(rf, graph_id):
    response = views.workspace_reset_api(post_json(rf, "/api/workspace/reset/", {"graph_id": graph_id}))
    assert response.status_code == 400
