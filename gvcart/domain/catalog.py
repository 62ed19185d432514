"""Catalog descriptor entity model."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from gvcart.core.constants import UNCATEGORIZED


class Catalog(BaseModel):
    """One browsable catalog listed on the index page."""

    title: str = Field(..., min_length=1, description="Catalog display name")
    path: str = Field(..., min_length=1, description="Relative or absolute catalog page link")
    image: Optional[str] = Field(None, description="Cover image URL")
    category: Optional[str] = Field(None, description="Grouping category")
    visible: bool = Field(True, description="Hidden catalogs are not listed")

    @field_validator("title", "path")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @property
    def category_label(self) -> str:
        """Category name used for grouping."""
        if self.category and self.category.strip():
            return self.category.strip()
        return UNCATEGORIZED

    def url(self, base_url: str = "") -> str:
        """Absolute link to the catalog page."""
        if self.path.startswith(("http://", "https://")) or not base_url:
            return self.path
        return f"{base_url.rstrip('/')}/{self.path.lstrip('/')}"
