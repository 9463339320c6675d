"""Category resolution and category folder management."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from blog_organizer.config import Settings
from blog_organizer.errors import MissingIndexDocumentError, UnknownCategoryError
from blog_organizer.models.category import Category
from blog_organizer.services.front_matter import read_metadata, render_document
from blog_organizer.utils.text_utils import UNCATEGORIZED, slugify_category

logger = logging.getLogger(__name__)


class CategoryResolver:
    """Maps raw front matter categories to folder slugs.

    The override table wins; anything else is slugified. With ``restrict``
    set, only categories present in the table are accepted.
    """

    def __init__(self, overrides: Mapping[str, str] | None = None, *, restrict: bool = False):
        self.overrides = dict(overrides or {})
        for name, slug in self.overrides.items():
            if slugify_category(slug) != slug:
                raise ValueError(f"category override {name!r} maps to {slug!r}, which is not a folder slug")
        self.restrict = restrict
        self._folded = {key.strip().casefold(): slug for key, slug in self.overrides.items()}

    def resolve(self, category: str | None, *, source: Path | str = "<unknown>") -> str:
        raw = "" if category is None else str(category)

        if raw in self.overrides:
            return self.overrides[raw]
        folded = raw.strip().casefold()
        if folded in self._folded:
            return self._folded[folded]

        if self.restrict:
            if not raw.strip() and UNCATEGORIZED in self.overrides.values():
                return UNCATEGORIZED
            raise UnknownCategoryError(Path(source), category)

        return slugify_category(category)

    @classmethod
    def from_settings(cls, settings: Settings) -> "CategoryResolver":
        return cls(settings.category_overrides, restrict=settings.restrict_categories)


class CategoryManager:
    """Manages category folders and their index documents."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.base_dir = settings.category_base_path

    def category_dir(self, slug: str) -> Path:
        return self.base_dir / slug

    def index_path(self, slug: str) -> Path:
        return self.category_dir(slug) / self.settings.index_filename

    def category_exists(self, slug: str) -> bool:
        return self.category_dir(slug).is_dir()

    def category_slugs(self) -> list[str]:
        """List category folder names in traversal order."""
        if not self.base_dir.is_dir():
            return []
        return sorted(p.name for p in self.base_dir.iterdir() if p.is_dir())

    def ensure_category(self, slug: str, *, display_name: str | None = None) -> Category:
        """Create the category folder and seed its index document if missing."""
        directory = self.category_dir(slug)
        if not directory.is_dir():
            directory.mkdir(parents=True, exist_ok=True)
            logger.info("Created category folder %s", directory)
        self.ensure_index(slug, display_name=display_name)
        return self.get_category(slug)

    def ensure_index(self, slug: str, *, display_name: str | None = None) -> Path:
        """Seed the category index document if it does not exist yet."""
        index_path = self.index_path(slug)
        if index_path.exists():
            return index_path

        category = Category(name=slug, display_name=display_name or None)
        try:
            index_path.write_text(self._seed_index(category), encoding="utf-8")
        except OSError as exc:
            raise MissingIndexDocumentError(index_path, str(exc)) from exc
        logger.info("Seeded category index %s", index_path)
        return index_path

    def _seed_index(self, category: Category) -> str:
        metadata = {
            "title": category.display_name,
            "description": category.description or f"All articles in {category.display_name}",
        }
        heading = self.settings.category_region_heading
        if heading:
            region = f"{heading.strip()}\n"
        else:
            region = f"{self.settings.articles_start}\n{self.settings.articles_end}\n"
        body = f"# {category.display_name}\n\n{region}"
        return render_document(metadata, body)

    def get_category(self, slug: str) -> Category:
        directory = self.category_dir(slug)
        if not directory.is_dir():
            raise ValueError(f"Category '{slug}' not found")

        display_name = None
        description = ""
        index_path = self.index_path(slug)
        if index_path.exists():
            metadata = read_metadata(index_path)
            display_name = str(metadata["title"]) if metadata.get("title") else None
            description = str(metadata.get("description") or "")

        post_count = sum(1 for p in directory.iterdir() if self.settings.is_content_file(p))
        return Category(
            name=slug,
            display_name=display_name,
            description=description,
            post_count=post_count,
            directory=directory,
        )

    def list_categories(self) -> list[Category]:
        return [self.get_category(slug) for slug in self.category_slugs()]
