import os

import django
import pytest
from django.conf import settings

from api.poet_api.model import EdgesGraph, VerticesGraph
from core.poet_platform.registry import PluginRegistry

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")

if not settings.configured:
    settings.configure(
        DEBUG=True,
        SECRET_KEY="tests",
        ALLOWED_HOSTS=["testserver"],
        ROOT_URLCONF="graph_explorer.explorer.urls",
        INSTALLED_APPS=[],
        USE_TZ=True,
    )
    django.setup()


@pytest.fixture(params=[EdgesGraph, VerticesGraph], ids=["edges", "vertices"])
def graph_cls(request):
    return request.param


@pytest.fixture
def graph(graph_cls):
    return graph_cls(check_rep=True)


@pytest.fixture
def sample_corpus():
    return os.path.join(DATA_DIR, "sample.txt")


@pytest.fixture
def multiline_corpus():
    return os.path.join(DATA_DIR, "multiline.txt")


@pytest.fixture(autouse=True)
def fresh_registry():
    PluginRegistry.reset()
    yield
    PluginRegistry.reset()
