"""Run orchestration: ingest staged posts, then rebuild the indexes."""

import logging

from blog_organizer.config import Settings
from blog_organizer.core.category_manager import CategoryManager, CategoryResolver
from blog_organizer.models.results import RunReport
from blog_organizer.output.cards import CardRenderer
from blog_organizer.services.index_sync import IndexSynchronizer
from blog_organizer.services.ingestor import Ingestor
from blog_organizer.services.post_collector import PostCollector

logger = logging.getLogger(__name__)


class SiteOrganizer:
    """Wires the ingestor, collector and synchronizer for one site."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.category_manager = CategoryManager(settings)
        self.collector = PostCollector(settings)
        self.ingestor = Ingestor(
            settings,
            resolver=CategoryResolver.from_settings(settings),
            category_manager=self.category_manager,
            collector=self.collector,
        )
        self.synchronizer = IndexSynchronizer(
            settings,
            renderer=CardRenderer(settings),
            category_manager=self.category_manager,
        )

    def run(self) -> RunReport:
        """
        Run one pass:
        1. Move every staged post into its category folder
        2. Collect all categorized posts, newest first
        3. Rewrite the root and category index regions

        Staged posts are validated and every index region they will touch is
        checked before anything moves. Indexes are only written after every
        move has succeeded.
        """
        logger.debug("Organizing site at %s", self.settings.root_dir)

        self.synchronizer.check_root()
        planned = self.ingestor.plan()
        self.synchronizer.check_categories(
            [*self.category_manager.category_slugs(), *(item.category_slug for item in planned)]
        )
        ingested = [self.ingestor.move(item) for item in planned]
        posts = self.collector.collect()
        updates = self.synchronizer.sync(posts)

        return RunReport(ingested=ingested, post_count=len(posts), index_updates=updates)


def create_organizer(settings: Settings) -> SiteOrganizer:
    """Factory function to create a site organizer."""
    return SiteOrganizer(settings)
