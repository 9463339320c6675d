"""Post model built from a categorized content file."""

from datetime import date, datetime, time, timezone
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def coerce_post_date(value: Any) -> datetime:
    """
    Normalize a front matter date to an aware UTC datetime.

    YAML hands back ``date`` or ``datetime`` objects for unquoted values and
    plain strings for quoted ones. Missing values map to the epoch so undated
    posts sort after dated ones.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return EPOCH
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime.combine(value, time.min)
    elif isinstance(value, str):
        dt = datetime.fromisoformat(value.strip())
    else:
        raise ValueError(f"unsupported date value: {value!r}")

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


class Post(BaseModel):
    """A categorized post as listed on the index pages."""

    title: str = Field(default="", description="Post title")
    date: datetime = Field(default=EPOCH, description="Publication date (epoch if unknown)")
    description: str = Field(default="", description="Short summary shown on cards")
    image: str | None = Field(default=None, description="Featured image URL or path")
    icon: str | None = Field(default=None, description="Card icon override")
    category: str = Field(default="", description="Raw category from front matter")
    category_slug: str = Field(..., description="Category folder the post lives in")
    source_path: Path = Field(..., description="Content file on disk")
    url: str = Field(..., description="Site-relative URL without leading slash")

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value: Any) -> datetime:
        return coerce_post_date(value)

    @field_validator("title", "description", "category", mode="before")
    @classmethod
    def _text_or_empty(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, (list, dict)):
            raise ValueError(f"expected a single value, got {value!r}")
        return str(value).strip()

    @field_validator("image", "icon", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> str | None:
        if value is None:
            return None
        if isinstance(value, (list, dict)):
            raise ValueError(f"expected a single value, got {value!r}")
        text = str(value).strip()
        return text or None
