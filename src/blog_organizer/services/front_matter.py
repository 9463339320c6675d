"""Front matter reading and writing via python-frontmatter."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import frontmatter
import yaml

from blog_organizer.errors import InvalidMetadataError


def read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidMetadataError(path, "encoding", exc.reason) from exc


def read_document(path: Path) -> tuple[dict[str, Any], str]:
    """Parse a content file into its metadata mapping and body text."""
    text = read_text(path)
    try:
        post = frontmatter.loads(text)
    except yaml.YAMLError as exc:
        problem = getattr(exc, "problem", None) or str(exc)
        raise InvalidMetadataError(path, "front matter", problem) from exc
    return dict(post.metadata), post.content


def read_metadata(path: Path) -> dict[str, Any]:
    metadata, _ = read_document(path)
    return metadata


def render_document(metadata: dict[str, Any], body: str) -> str:
    """Serialize metadata and body back into a front matter document."""
    post = frontmatter.Post(body, **metadata)
    return frontmatter.dumps(post, sort_keys=False).rstrip("\n") + "\n"
