from __future__ import annotations

import json
from pathlib import Path
import sys
from typing import Any, Callable


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[Any], Path]:
    """
    Write a package.json under tmp_path/pkg and return its path.

    Strings are written verbatim so tests can feed malformed JSON.
    """

    def _write(content: Any) -> Path:
        path = tmp_path / "pkg" / "package.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        text = content if isinstance(content, str) else json.dumps(content, indent=2)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("MANIFEST_PATH", "PACKAGE_NAME", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
