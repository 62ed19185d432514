"""Catalog listing: load catalog descriptors and group them for the index."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from pydantic import ValidationError

from gvcart.core.exceptions import CatalogException
from gvcart.domain.catalog import Catalog
from gvcart.logging_config import logger


def parse_catalogs(data: Any, source: str = "<memory>") -> list[Catalog]:
    """Validate raw descriptors, skipping invalid entries."""
    if not isinstance(data, list):
        raise CatalogException(source, "expected a JSON array")

    catalogs: list[Catalog] = []
    for idx, raw in enumerate(data):
        try:
            catalogs.append(Catalog.model_validate(raw))
        except ValidationError as exc:
            logger.warning("Skipping invalid catalog #%s in %s: %s", idx, source, exc)
    return catalogs


def load_catalogs(path: str | Path) -> list[Catalog]:
    """Read the catalog descriptor JSON file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogException(str(path), exc) from exc
    return parse_catalogs(data, str(path))


def group_catalogs(catalogs: Iterable[Catalog]) -> dict[str, list[Catalog]]:
    """Visible catalogs grouped by category, categories sorted alphabetically."""
    grouped: dict[str, list[Catalog]] = {}
    for catalog in catalogs:
        if not catalog.visible:
            continue
        grouped.setdefault(catalog.category_label, []).append(catalog)
    return {category: grouped[category] for category in sorted(grouped)}


class CatalogService:
    """Catalog source bound to a descriptor file.

    The file is re-read on every call so edits show up without a restart.
    """

    def __init__(self, path: str | Path, base_url: str = "") -> None:
        self.path = Path(path)
        self.base_url = base_url

    def grouped(self) -> dict[str, list[Catalog]]:
        return group_catalogs(load_catalogs(self.path))
