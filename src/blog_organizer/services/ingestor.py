"""Moves staged posts into their category folders."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from blog_organizer.config import Settings
from blog_organizer.core.category_manager import CategoryManager, CategoryResolver
from blog_organizer.errors import (
    DestinationConflictError,
    InvalidMetadataError,
    MissingMetadataError,
)
from blog_organizer.models.results import IngestedFile
from blog_organizer.services.front_matter import read_metadata
from blog_organizer.services.post_collector import PostCollector

logger = logging.getLogger(__name__)


class PlannedMove(BaseModel):
    """A staged file together with where it is going."""

    source: Path
    destination: Path
    category_slug: str
    category: str | None = None
    title: str = ""


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class Ingestor:
    """Classifies staged posts and relocates them.

    Every staged file is validated and given a destination before the first
    move, so metadata or conflict errors leave the staging area untouched.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        resolver: CategoryResolver | None = None,
        category_manager: CategoryManager | None = None,
        collector: PostCollector | None = None,
    ):
        self.settings = settings
        self.resolver = resolver or CategoryResolver.from_settings(settings)
        self.category_manager = category_manager or CategoryManager(settings)
        self.collector = collector or PostCollector(settings)

    def staged_files(self) -> list[Path]:
        staging = self.settings.staging_path
        if not staging.is_dir():
            logger.info("No staging directory at %s", staging)
            return []
        return sorted(p for p in staging.iterdir() if self.settings.is_content_file(p))

    def plan(self) -> list[PlannedMove]:
        """Work out a destination for every staged file without touching disk."""
        planned: list[PlannedMove] = []

        for source in self.staged_files():
            metadata = read_metadata(source)
            for field in self.settings.required_fields:
                if _is_blank(metadata.get(field)):
                    raise MissingMetadataError(source, field)

            raw_category = metadata.get("category")
            if isinstance(raw_category, (list, dict)):
                raise InvalidMetadataError(source, "category", raw_category)
            category = None if _is_blank(raw_category) else str(raw_category).strip()
            slug = self.resolver.resolve(category, source=source)
            destination = self.category_manager.category_dir(slug) / source.name

            # Dates and the other card fields must survive collection after the move.
            self.collector.build_post(source, slug, metadata)

            if destination.exists():
                raise DestinationConflictError(source, destination)

            title = metadata.get("title")
            planned.append(
                PlannedMove(
                    source=source,
                    destination=destination,
                    category_slug=slug,
                    category=category,
                    title="" if title is None else str(title),
                )
            )

        return planned

    def move(self, planned: PlannedMove) -> IngestedFile:
        """Relocate one staged file, creating its category on first use."""
        self.category_manager.ensure_category(
            planned.category_slug, display_name=planned.category
        )
        if planned.destination.exists():
            raise DestinationConflictError(planned.source, planned.destination)

        shutil.move(str(planned.source), str(planned.destination))
        logger.debug("Moved %s -> %s", planned.source, planned.destination)

        return IngestedFile(
            source=planned.source,
            destination=planned.destination,
            category_slug=planned.category_slug,
            title=planned.title,
        )

    def run(self) -> list[IngestedFile]:
        planned = self.plan()
        if not planned:
            logger.info("No staged posts to ingest")
            return []
        return [self.move(item) for item in planned]
