import logging
import os.path
from typing import Any, Iterator

from api.poet_api.poet import iter_tokens
from api.poet_api.services.corpus_source_plugin import CorpusSourcePlugin

LOGGER = logging.getLogger(__name__)


class TextCorpusPlugin(CorpusSourcePlugin):
    # Adapter to read a plain text corpus and stream its words
    # Lines are read one at a time, so the file is never held in memory

    @property
    def plugin_id(self) -> str:
        return "text"

    @property
    def display_name(self) -> str:
        return "Text Corpus"

    def parameters_schema(self) -> dict:
        return {
            "file_path": {
                "type": "str",
                "label": "Path to corpus text file",
                "required": True
            },
            "encoding": {
                "type": "str",
                "label": "File encoding",
                "required": False,
                "default": "utf-8"
            }
        }

    def iter_tokens(self, source: Any, **options: Any) -> Iterator[str]:
        path = self._resolve_path(source, options)
        encoding = options.get("encoding") or "utf-8"

        if not os.path.exists(path):
            raise FileNotFoundError(f"Corpus file not found: {path}")

        LOGGER.debug("Reading corpus %s (%s).", path, encoding)
        with open(path, "r", encoding=encoding) as f:
            yield from iter_tokens(f)
