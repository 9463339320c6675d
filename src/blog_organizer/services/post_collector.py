"""Collects categorized posts from disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from blog_organizer.config import Settings
from blog_organizer.errors import InvalidMetadataError
from blog_organizer.models.post import Post
from blog_organizer.services.front_matter import read_metadata

logger = logging.getLogger(__name__)


def sort_posts(posts: list[Post]) -> list[Post]:
    """Order posts newest first; equal dates keep their input order."""
    return sorted(posts, key=lambda post: post.date, reverse=True)


class PostCollector:
    """Builds the ordered post list from every category folder."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def build_post(self, path: Path, category_slug: str, metadata: dict[str, Any] | None = None) -> Post:
        """Build a post for a file filed under ``category_slug``.

        Pass ``metadata`` to validate a file that has not been moved there yet.
        """
        if metadata is None:
            metadata = read_metadata(path)
        url = f"{self.settings.category_base}/{category_slug}/{path.stem}"
        try:
            return Post(
                title=metadata.get("title"),
                date=metadata.get("date"),
                description=metadata.get("description"),
                image=metadata.get("image"),
                icon=metadata.get("icon"),
                category=metadata.get("category"),
                category_slug=category_slug,
                source_path=path,
                url=url,
            )
        except ValidationError as exc:
            error = exc.errors()[0]
            field = str(error["loc"][0]) if error.get("loc") else "unknown"
            raise InvalidMetadataError(path, field, metadata.get(field)) from exc

    def collect(self) -> list[Post]:
        base = self.settings.category_base_path
        if not base.is_dir():
            logger.info("No category directory at %s", base)
            return []

        posts: list[Post] = []
        for category_dir in sorted(p for p in base.iterdir() if p.is_dir()):
            for path in sorted(category_dir.iterdir()):
                if self.settings.is_content_file(path):
                    posts.append(self.build_post(path, category_dir.name))

        logger.debug("Collected %d posts from %s", len(posts), base)
        return sort_posts(posts)
