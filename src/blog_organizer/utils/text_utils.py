"""Text utilities for category slugs and card markup."""

import html
import re

UNCATEGORIZED = "uncategorized"


def slugify_category(value: str | None) -> str:
    """
    Convert a human-readable category name to a folder slug.

    Args:
        value: Raw category from front matter (may be None)

    Returns:
        Lowercase, hyphenated slug; ``uncategorized`` when nothing is left
    """
    if value is None:
        return UNCATEGORIZED

    text = str(value).lower().strip()
    text = text.replace("&", " and ")

    # Replace whitespace runs with hyphens, then drop everything else
    text = re.sub(r"\s+", "-", text)
    text = re.sub(r"[^a-z0-9-]", "", text)
    text = re.sub(r"-+", "-", text)
    text = text.strip("-")

    return text or UNCATEGORIZED


def display_name_from_slug(slug: str) -> str:
    """Turn ``code-intelligence`` into ``Code Intelligence``."""
    normalized = slug.replace("_", "-").replace("-", " ").strip()
    return " ".join(w.capitalize() for w in normalized.split())


def escape_attribute(value: str | None) -> str:
    """Escape a value for use inside a double-quoted markup attribute."""
    return html.escape(value or "", quote=True)


def indent(text: str, prefix: str) -> str:
    """Indent every non-empty line of text."""
    return "\n".join(prefix + line if line.strip() else line for line in text.splitlines())
