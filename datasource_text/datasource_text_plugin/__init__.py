from .plugin import TextCorpusPlugin

__all__ = ["TextCorpusPlugin"]
