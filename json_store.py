from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


class DocumentError(Exception):
    """Base error for reading or writing a JSON document on disk."""

    def __init__(self, path: Path, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path


class DocumentReadError(DocumentError):
    pass


class DocumentParseError(DocumentError):
    pass


class DocumentWriteError(DocumentError):
    pass


def read_json_document(path: Path) -> dict[str, Any]:
    """
    Read a JSON object from disk.

    Raises DocumentReadError if the file can't be read and DocumentParseError
    if it isn't valid JSON or the top level isn't an object.
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(path, f"cannot read file ({e})") from e

    logger.debug("MANIFEST READ: %s (%d chars)", path, len(raw))

    try:
        doc = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        raise DocumentParseError(path, f"invalid JSON ({e})") from e

    if not isinstance(doc, dict):
        raise DocumentParseError(path, f"expected a JSON object, got {type(doc).__name__}")
    return doc


def write_json(path: Path, payload: Any, *, indent: int = 2, sort_keys: bool = False) -> None:
    """
    Overwrite path with payload serialized as JSON.

    Truncates in place; no temp file and no trailing newline.
    """
    try:
        text = json.dumps(payload, indent=indent, sort_keys=sort_keys, ensure_ascii=False, allow_nan=False)
    except ValueError as e:
        raise DocumentWriteError(path, f"cannot serialize document ({e})") from e

    try:
        with path.open("w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise DocumentWriteError(path, f"cannot write file ({e})") from e

    logger.debug("MANIFEST WRITE: %s (%d chars)", path, len(text))
