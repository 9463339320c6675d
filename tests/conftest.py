"""Shared fixtures: a throwaway site on disk."""

from pathlib import Path

import pytest

from blog_organizer.config import Settings

ROOT_INDEX = """---
title: Home
---

# Debugging Journal

## Featured

<!-- FEATURED_START -->
<!-- FEATURED_END -->

## Latest

<!-- LATEST_START -->
<!-- LATEST_END -->

Thanks for reading.
"""


def write_post(directory: Path, name: str, **metadata) -> Path:
    """Write a content file with YAML front matter."""
    directory.mkdir(parents=True, exist_ok=True)
    lines = ["---"]
    for key, value in metadata.items():
        lines.append(f"{key}: {value}")
    lines.extend(["---", "", f"Body of {name}.", ""])
    path = directory / name
    path.write_text("\n".join(lines), encoding="utf-8")
    return path


@pytest.fixture
def site(tmp_path):
    """Site root with a root index and an empty staging folder."""
    (tmp_path / "index.mdx").write_text(ROOT_INDEX, encoding="utf-8")
    (tmp_path / "blog").mkdir()
    return tmp_path


@pytest.fixture
def settings(site):
    return Settings(_env_file=None, root_dir=site)
