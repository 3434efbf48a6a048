from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict

from settings import DEFAULT_PACKAGE_NAME

from .disk_store import DiskJsonDocumentStore
from .interfaces import DocumentStore

logger = logging.getLogger(__name__)


class FieldPatch(BaseModel):
    """
    One top-level (key, value) assignment.

    The value is written unconditionally: whatever was at the key before
    (any type, or nothing) is replaced.
    """

    model_config = ConfigDict(frozen=True)

    key: str = "name"
    value: Any


class DocumentFieldPatcher:
    """
    Read-modify-write of a single top-level field in a JSON document.

    Existing keys keep their position; a missing key is appended.
    Applying the same patch twice gives the same document.
    """

    def __init__(self, patch: FieldPatch):
        self._patch = patch

    @property
    def field_patch(self) -> FieldPatch:
        return self._patch

    def apply(self, doc: dict[str, Any]) -> dict[str, Any]:
        previous = doc.get(self._patch.key)
        doc[self._patch.key] = self._patch.value
        logger.debug("MANIFEST PATCH: %s %r -> %r", self._patch.key, previous, self._patch.value)
        return doc

    def patch_store(self, store: DocumentStore) -> None:
        doc = store.load()
        store.save(self.apply(doc))
        logger.info("MANIFEST PATCH: set %s=%r in %s", self._patch.key, self._patch.value, store.path)

    def patch(self, path: Path) -> None:
        self.patch_store(DiskJsonDocumentStore(Path(path)))


def patch_manifest(path: Path, name: str = DEFAULT_PACKAGE_NAME) -> None:
    """Set the "name" field of the package manifest at path."""
    DocumentFieldPatcher(FieldPatch(key="name", value=name)).patch(path)
