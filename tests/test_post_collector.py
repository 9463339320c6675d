"""Tests for collecting posts from category folders."""

from datetime import datetime, timezone
from pathlib import Path

import pytest

from blog_organizer.errors import InvalidMetadataError
from blog_organizer.models.post import EPOCH, Post
from blog_organizer.services.post_collector import PostCollector, sort_posts

from conftest import write_post


def dated(name: str, day: str) -> Post:
    return Post(
        title=name,
        date=day,
        category_slug="c",
        source_path=Path(f"{name}.mdx"),
        url=f"categories/c/{name}",
    )


class TestSortPosts:
    def test_newest_first_and_stable(self):
        posts = [dated("old", "2024-01-01"), dated("first", "2024-03-01"), dated("second", "2024-03-01")]

        ordered = sort_posts(posts)

        assert [p.title for p in ordered] == ["first", "second", "old"]

    def test_undated_last(self):
        undated = dated("undated", "")
        ordered = sort_posts([undated, dated("dated", "1990-05-05")])
        assert [p.title for p in ordered] == ["dated", "undated"]
        assert ordered[-1].date == EPOCH


class TestPostCollector:
    def test_no_category_directory(self, settings):
        assert PostCollector(settings).collect() == []

    def test_collects_posts(self, site, settings):
        base = site / "categories"
        write_post(base / "architecture", "index.mdx", title="Architecture")
        write_post(
            base / "architecture",
            "layers.mdx",
            title="Layers",
            description="Stacked",
            date="2024-02-01",
            image="/img/layers.png",
            icon="layers",
            category="Architecture",
        )
        write_post(base / "llm-reasoning", "chains.md", title="Chains", date="2024-03-01")
        (base / "llm-reasoning" / "diagram.png").write_bytes(b"")
        (base / "stray.mdx").write_text("---\ntitle: Stray\n---\n", encoding="utf-8")

        posts = PostCollector(settings).collect()

        assert [p.title for p in posts] == ["Chains", "Layers"]
        layers = posts[1]
        assert layers.url == "categories/architecture/layers"
        assert layers.category_slug == "architecture"
        assert layers.category == "Architecture"
        assert layers.image == "/img/layers.png"
        assert layers.icon == "layers"
        assert layers.date == datetime(2024, 2, 1, tzinfo=timezone.utc)
        assert posts[0].url == "categories/llm-reasoning/chains"

    def test_traversal_order_breaks_ties(self, site, settings):
        base = site / "categories"
        write_post(base / "b-cat", "a.mdx", title="B-A", date="2024-03-01")
        write_post(base / "a-cat", "z.mdx", title="A-Z", date="2024-03-01")
        write_post(base / "a-cat", "b.mdx", title="A-B", date="2024-03-01")

        posts = PostCollector(settings).collect()

        assert [p.title for p in posts] == ["A-B", "A-Z", "B-A"]

    def test_invalid_date(self, site, settings):
        path = write_post(site / "categories" / "misc", "bad.mdx", title="Bad", date="someday")

        with pytest.raises(InvalidMetadataError) as info:
            PostCollector(settings).collect()

        assert info.value.path == path
        assert info.value.field == "date"
        assert info.value.value == "someday"
