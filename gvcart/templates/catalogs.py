"""Text templates for the catalog index."""
from __future__ import annotations

from typing import Mapping, Sequence

from gvcart.domain.catalog import Catalog
from gvcart.templates.cart import esc
from gvcart.texts import get_text


def render_catalog_index(groups: Mapping[str, Sequence[Catalog]]) -> str:
    if not groups:
        return get_text("catalogs_empty")

    lines = [get_text("catalogs_title")]
    for category, catalogs in groups.items():
        lines.append("")
        lines.append(f"<b>{esc(category)}</b>")
        for catalog in catalogs:
            lines.append(f"   • {esc(catalog.title)}")
    lines.append("")
    lines.append(get_text("catalogs_hint"))
    return "\n".join(lines)


def render_catalog_error() -> str:
    return get_text("catalogs_error")
