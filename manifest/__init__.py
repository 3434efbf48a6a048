from __future__ import annotations

from .disk_store import DiskJsonDocumentStore
from .interfaces import DocumentStore
from .patcher import DocumentFieldPatcher, FieldPatch, patch_manifest

__all__ = [
    "DocumentStore",
    "DiskJsonDocumentStore",
    "DocumentFieldPatcher",
    "FieldPatch",
    "patch_manifest",
]
