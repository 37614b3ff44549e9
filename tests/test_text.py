from api.poet_api.poet import iter_tokens, join_poem, tokenize


def test_tokenize_splits_on_whitespace_runs():
    assert tokenize("  Hello,\tworld!\n\nagain ") == ["Hello,", "world!", "again"]


def test_tokenize_empty():
    assert tokenize("") == []
    assert tokenize(" \n\t") == []


def test_iter_tokens_is_lazy_over_lines():
    lines = iter(["one two\n", "\n", "three\n"])
    tokens = iter_tokens(lines)
    assert next(tokens) == "one"
    assert list(tokens) == ["two", "three"]


def test_join_poem():
    assert join_poem(["Test", "of", "the"]) == "Test of the"
    assert join_poem([]) == ""
