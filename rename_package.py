#!/usr/bin/env python
"""Rename the generated npm package by rewriting the "name" field of its package.json."""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from json_store import DocumentError
from manifest import patch_manifest
from settings import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    load_dotenv("local.env")
    settings = get_settings()

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        patch_manifest(settings.manifest_path, settings.package_name)
    except DocumentError as e:
        logger.error("RENAME PACKAGE: %s", e)
        return

    print(f"Renamed package in {settings.manifest_path} to {settings.package_name}")


if __name__ == "__main__":
    main()
