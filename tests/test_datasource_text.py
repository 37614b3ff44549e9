import pytest

from api.poet_api.model import VerticesGraph
from datasource_text.datasource_text_plugin.plugin import TextCorpusPlugin


def test_plugin_identity():
    plugin = TextCorpusPlugin()
    assert plugin.plugin_id == "text"
    assert plugin.display_name == "Text Corpus"
    assert plugin.parameters_schema()["file_path"]["required"] is True


def test_iter_tokens_reads_file(multiline_corpus):
    tokens = list(TextCorpusPlugin().iter_tokens(multiline_corpus))
    assert tokens == ["Hello,", "HELLO,", "hello,", "goodbye!"]


def test_load_graph_across_lines(multiline_corpus):
    graph = TextCorpusPlugin().load_graph(multiline_corpus)
    assert graph.vertices() == {"hello,", "goodbye!"}
    assert graph.targets("hello,") == {"hello,": 2, "goodbye!": 1}


def test_load_graph_with_file_path_option(sample_corpus):
    graph = TextCorpusPlugin().load_graph(None, file_path=sample_corpus)
    assert graph.targets("test") == {"of": 1}


def test_load_graph_with_factory(sample_corpus):
    graph = TextCorpusPlugin().load_graph(sample_corpus, graph_factory=VerticesGraph)
    assert isinstance(graph, VerticesGraph)
    assert graph.targets("of") == {"the": 1}


def test_missing_file_raises(tmp_path):
    plugin = TextCorpusPlugin()
    with pytest.raises(FileNotFoundError):
        plugin.load_graph(str(tmp_path / "missing.txt"))


def test_missing_path_raises():
    with pytest.raises(ValueError):
        list(TextCorpusPlugin().iter_tokens(""))


def test_encoding_option(tmp_path):
    corpus = tmp_path / "latin.txt"
    corpus.write_bytes("café crème".encode("latin-1"))
    graph = TextCorpusPlugin().load_graph(str(corpus), encoding="latin-1")
    assert graph.targets("café") == {"crème": 1}


def test_decode_error_propagates(tmp_path):
    corpus = tmp_path / "bad.txt"
    corpus.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(UnicodeDecodeError):
        TextCorpusPlugin().load_graph(str(corpus))
