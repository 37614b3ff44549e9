"""Corpus-to-graph building and bridge word poem generation."""

from .builder import CorpusGraphBuilder
from .generator import BridgeWordPoemGenerator
from .text import iter_tokens, join_poem, tokenize

__all__ = ["CorpusGraphBuilder", "BridgeWordPoemGenerator", "iter_tokens", "join_poem", "tokenize"]
