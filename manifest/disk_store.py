from __future__ import annotations

from pathlib import Path
from typing import Any

from json_store import read_json_document, write_json

from .interfaces import DocumentStore


class DiskJsonDocumentStore(DocumentStore):
    """
    Stores a single JSON document on disk at a fixed path.

    - load() raises DocumentReadError / DocumentParseError instead of returning {}.
    - save() rewrites the file in place with 2-space indentation and original key order.
    """

    def __init__(self, path: Path, *, indent: int = 2):
        self._path = Path(path)
        self._indent = indent

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        return read_json_document(self._path)

    def save(self, doc: dict[str, Any]) -> None:
        write_json(self._path, doc, indent=self._indent)
