"""Category model for organizing blog content."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from blog_organizer.utils.text_utils import display_name_from_slug


class Category(BaseModel):
    """Represents a category folder on disk."""

    name: str = Field(..., description="Category slug (e.g., llm-reasoning)")
    display_name: str | None = Field(
        default=None, description="Human-friendly category name"
    )
    description: str = Field(default="", description="Optional category description")
    post_count: int = Field(default=0, description="Number of posts in this category")
    directory: Path | None = Field(default=None, description="Category folder")

    @model_validator(mode="after")
    def _default_display_name(self) -> "Category":
        if not self.display_name:
            self.display_name = display_name_from_slug(self.name)
        return self
