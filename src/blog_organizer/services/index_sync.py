"""Rewrites the card regions of the root and category index documents."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from blog_organizer.config import Settings
from blog_organizer.core.category_manager import CategoryManager
from blog_organizer.core.regions import HeadingRegion, MarkerRegion, Region, replace_region
from blog_organizer.errors import MissingIndexDocumentError
from blog_organizer.models.post import Post
from blog_organizer.models.results import IndexUpdate
from blog_organizer.output.cards import CardRenderer
from blog_organizer.services.front_matter import read_text

logger = logging.getLogger(__name__)


class IndexSynchronizer:
    """Regenerates featured, latest and per-category listings."""

    def __init__(
        self,
        settings: Settings,
        *,
        renderer: CardRenderer | None = None,
        category_manager: CategoryManager | None = None,
    ):
        self.settings = settings
        self.renderer = renderer or CardRenderer(settings)
        self.category_manager = category_manager or CategoryManager(settings)

    @property
    def featured_region(self) -> MarkerRegion:
        return MarkerRegion(start=self.settings.featured_start, end=self.settings.featured_end)

    @property
    def latest_region(self) -> MarkerRegion:
        return MarkerRegion(start=self.settings.latest_start, end=self.settings.latest_end)

    @property
    def articles_region(self) -> Region:
        if self.settings.category_region_heading:
            return HeadingRegion(heading=self.settings.category_region_heading)
        return MarkerRegion(start=self.settings.articles_start, end=self.settings.articles_end)

    def _render(self, path: Path, replacements: list[tuple[Region, str]]) -> tuple[str, str]:
        """Apply region replacements to a document in memory."""
        if not path.is_file():
            raise MissingIndexDocumentError(path)

        original = read_text(path)
        text = original
        for region, content in replacements:
            text = replace_region(text, region, content, document=path)
        return original, text

    def _write(self, path: Path, original: str, text: str) -> IndexUpdate:
        changed = text != original
        if changed:
            path.write_text(text, encoding="utf-8")
            logger.info("Updated %s", path)
        else:
            logger.debug("Unchanged %s", path)
        return IndexUpdate(path=path, changed=changed)

    def _rewrite(self, path: Path, replacements: list[tuple[Region, str]]) -> IndexUpdate:
        return self._write(path, *self._render(path, replacements))

    def check_root(self) -> None:
        """Fail early if the root index or either of its regions is missing."""
        path = self.settings.root_index_path
        if not path.is_file():
            raise MissingIndexDocumentError(path)
        text = read_text(path)
        for region in (self.featured_region, self.latest_region):
            region.split(text, path)

    def check_categories(self, slugs: Iterable[str]) -> None:
        """Fail early if an existing category index lacks its articles region.

        Categories without an index are skipped; they get a seeded one later.
        """
        for slug in sorted(set(slugs)):
            path = self.category_manager.index_path(slug)
            if path.is_file():
                self.articles_region.split(read_text(path), path)

    def _root_replacements(self, posts: list[Post]) -> list[tuple[Region, str]]:
        featured, rest = posts[0], posts[1:]
        latest = rest[: self.settings.latest_count]
        return [
            (self.featured_region, self.renderer.featured(featured)),
            (self.latest_region, self.renderer.latest(latest)),
        ]

    def _category_replacements(self, slug: str, posts: list[Post]) -> list[tuple[Region, str]]:
        category_posts = [post for post in posts if post.category_slug == slug]
        return [(self.articles_region, self.renderer.category(category_posts))]

    def sync_root(self, posts: list[Post]) -> IndexUpdate | None:
        """Feature the newest post and list the ones after it."""
        if not posts:
            logger.info("No posts yet; leaving %s as is", self.settings.root_index_path)
            return None
        return self._rewrite(self.settings.root_index_path, self._root_replacements(posts))

    def sync(self, posts: list[Post]) -> list[IndexUpdate]:
        """Rewrite the root and every category index.

        Every document is rendered before the first write, so a missing region
        anywhere leaves the existing index text untouched.
        """
        rendered: list[tuple[Path, str, str]] = []
        if posts:
            path = self.settings.root_index_path
            rendered.append((path, *self._render(path, self._root_replacements(posts))))
        else:
            logger.info("No posts yet; leaving %s as is", self.settings.root_index_path)

        for slug in self.category_manager.category_slugs():
            path = self.category_manager.ensure_index(slug)
            rendered.append((path, *self._render(path, self._category_replacements(slug, posts))))

        return [self._write(path, original, text) for path, original, text in rendered]
