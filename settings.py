from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_MANIFEST_PATH = "./pkg/package.json"
DEFAULT_PACKAGE_NAME = "@suilang/rrule-rust"


@dataclass(frozen=True)
class Settings:
    # Manifest
    manifest_path: Path
    package_name: str

    # Logging
    log_level: str


def get_settings() -> Settings:
    manifest_path = Path(os.getenv("MANIFEST_PATH") or DEFAULT_MANIFEST_PATH)
    package_name = os.getenv("PACKAGE_NAME") or DEFAULT_PACKAGE_NAME
    log_level = (os.getenv("LOG_LEVEL", "INFO")).strip().upper()
    # getLevelName returns an int only for registered level names
    if not isinstance(logging.getLevelName(log_level), int):
        log_level = "INFO"

    return Settings(
        manifest_path=manifest_path,
        package_name=package_name,
        log_level=log_level,
    )
