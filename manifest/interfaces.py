from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol


class DocumentStore(Protocol):
    """
    A single JSON object persisted at one location.
    """

    @property
    def path(self) -> Path:
        ...

    def load(self) -> dict[str, Any]:
        """Load and return the full document."""
        ...

    def save(self, doc: dict[str, Any]) -> None:
        """Overwrite the stored document."""
        ...
