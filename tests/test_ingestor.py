"""Tests for moving staged posts into category folders."""

import pytest

from blog_organizer.config import Settings
from blog_organizer.errors import (
    DestinationConflictError,
    InvalidMetadataError,
    MissingMetadataError,
    UnknownCategoryError,
)
from blog_organizer.services.ingestor import Ingestor

from conftest import write_post


class TestIngestor:
    def test_moves_post_to_category(self, site, settings):
        staged = write_post(
            site / "blog", "agents.mdx", title="Agents", description="Why", category='"LLM Reasoning"'
        )

        ingested = Ingestor(settings).run()

        destination = site / "categories" / "llm-reasoning" / "agents.mdx"
        assert not staged.exists()
        assert destination.exists()
        assert (site / "categories" / "llm-reasoning" / "index.mdx").exists()
        assert len(ingested) == 1
        assert ingested[0].destination == destination
        assert ingested[0].category_slug == "llm-reasoning"
        assert ingested[0].title == "Agents"

    def test_missing_category_goes_to_uncategorized(self, site, settings):
        write_post(site / "blog", "loose.md", title="Loose", description="No home")

        Ingestor(settings).run()

        assert (site / "categories" / "uncategorized" / "loose.md").exists()

    def test_ignores_other_files(self, site, settings):
        (site / "blog" / "notes.txt").write_text("scratch", encoding="utf-8")
        (site / "blog" / "drafts").mkdir()

        assert Ingestor(settings).run() == []
        assert (site / "blog" / "notes.txt").exists()

    def test_missing_staging_directory(self, tmp_path):
        settings = Settings(_env_file=None, root_dir=tmp_path)
        assert Ingestor(settings).run() == []

    def test_second_run_is_noop(self, site, settings):
        write_post(site / "blog", "a.mdx", title="A", description="D", category="Architecture")
        Ingestor(settings).run()

        assert Ingestor(settings).run() == []
        assert (site / "categories" / "architecture" / "a.mdx").exists()

    def test_missing_required_field(self, site, settings):
        staged = write_post(site / "blog", "bad.mdx", title="No description", category="Architecture")

        with pytest.raises(MissingMetadataError) as info:
            Ingestor(settings).run()

        assert info.value.field == "description"
        assert info.value.path == staged
        assert staged.exists()

    def test_blank_required_field(self, site, settings):
        write_post(site / "blog", "blank.mdx", title='""', description="D")
        with pytest.raises(MissingMetadataError, match="'title'"):
            Ingestor(settings).run()

    def test_metadata_error_moves_nothing(self, site, settings):
        good = write_post(site / "blog", "a-good.mdx", title="Good", description="D", category="Architecture")
        write_post(site / "blog", "b-bad.mdx", title="Bad", category="Architecture")

        with pytest.raises(MissingMetadataError):
            Ingestor(settings).run()

        assert good.exists()
        assert not (site / "categories").exists()

    def test_invalid_date_moves_nothing(self, site, settings):
        staged = write_post(site / "blog", "a.mdx", title="A", description="D", category="Architecture", date="someday")

        with pytest.raises(InvalidMetadataError) as info:
            Ingestor(settings).run()

        assert info.value.field == "date"
        assert info.value.path == staged
        assert staged.exists()
        assert not (site / "categories").exists()

    def test_list_category_is_rejected(self, site, settings):
        staged = write_post(site / "blog", "a.mdx", title="A", description="D", category="[x, y]")

        with pytest.raises(InvalidMetadataError) as info:
            Ingestor(settings).run()

        assert info.value.field == "category"
        assert info.value.value == ["x", "y"]
        assert staged.exists()
        assert not (site / "categories").exists()

    def test_list_title_is_rejected(self, site, settings):
        write_post(site / "blog", "a.mdx", title="[one, two]", description="D", category="Architecture")

        with pytest.raises(InvalidMetadataError, match="'title'"):
            Ingestor(settings).run()

        assert not (site / "categories").exists()

    def test_destination_conflict(self, site, settings):
        staged = write_post(site / "blog", "dup.mdx", title="New", description="D", category="Architecture")
        existing = write_post(
            site / "categories" / "architecture", "dup.mdx", title="Old", description="D", category="Architecture"
        )
        before = existing.read_text(encoding="utf-8")

        with pytest.raises(DestinationConflictError) as info:
            Ingestor(settings).run()

        assert info.value.source == staged
        assert info.value.destination == existing
        assert staged.exists()
        assert existing.read_text(encoding="utf-8") == before

    def test_conflict_with_earlier_post(self, site):
        settings = Settings(
            _env_file=None,
            root_dir=site,
            category_overrides={"A": "same", "B": "same"},
        )
        ingestor = Ingestor(settings)
        write_post(site / "blog", "x.mdx", title="X", description="D", category="A")
        ingestor.run()
        staged = write_post(site / "blog", "x.mdx", title="X2", description="D", category="B")

        with pytest.raises(DestinationConflictError):
            ingestor.run()

        assert staged.exists()

    def test_restricted_categories(self, site):
        settings = Settings(
            _env_file=None,
            root_dir=site,
            category_overrides={"Architecture": "architecture"},
            restrict_categories=True,
        )
        write_post(site / "blog", "x.mdx", title="X", description="D", category="Gardening")

        with pytest.raises(UnknownCategoryError):
            Ingestor(settings).run()

    def test_index_file_in_staging_is_skipped(self, site):
        settings = Settings(_env_file=None, root_dir=site, staging_dir=".")
        write_post(site, "fresh.mdx", title="Fresh", description="D", category="Architecture")

        ingested = Ingestor(settings).run()

        assert [item.source.name for item in ingested] == ["fresh.mdx"]
        assert (site / "index.mdx").exists()
