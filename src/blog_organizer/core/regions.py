"""Replaceable regions inside index documents.

A region splits a document into ``prefix``, ``interior`` and ``suffix``.
Only the interior is ever rewritten; the prefix (which ends with the start
marker or heading line) and the suffix (which starts with the end marker or
the next heading) are kept verbatim.
"""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel

from blog_organizer.errors import MissingRegionMarkerError

HEADING_RE = re.compile(r"^(?P<hash>#{1,6})\s+\S")
FENCE_RE = re.compile(r"^\s*(```|~~~)")


class RegionSplit(BaseModel):
    """A document cut around one region."""

    prefix: str
    interior: str
    suffix: str

    def join(self, interior: str | None = None) -> str:
        return self.prefix + (self.interior if interior is None else interior) + self.suffix


class MarkerRegion(BaseModel):
    """Region bounded by a fixed start/end marker pair."""

    start: str
    end: str

    def split(self, text: str, document: Path | str = "<document>") -> RegionSplit:
        start_at = text.find(self.start)
        if start_at == -1:
            raise MissingRegionMarkerError(document, self.start)
        interior_at = start_at + len(self.start)
        end_at = text.find(self.end, interior_at)
        if end_at == -1:
            raise MissingRegionMarkerError(document, self.end)
        return RegionSplit(
            prefix=text[:interior_at],
            interior=text[interior_at:end_at],
            suffix=text[end_at:],
        )

    def format_interior(self, split: RegionSplit, content: str) -> str:
        content = content.strip("\n")
        if not content:
            return "\n"
        return f"\n{content}\n"


class HeadingRegion(BaseModel):
    """Region that runs from a heading line to the next heading of the same or higher level."""

    heading: str

    @property
    def level(self) -> int:
        match = HEADING_RE.match(self.heading.strip())
        if not match:
            raise ValueError(f"not a markdown heading: {self.heading!r}")
        return len(match.group("hash"))

    def split(self, text: str, document: Path | str = "<document>") -> RegionSplit:
        target = self.heading.strip()
        level = self.level
        lines = text.splitlines(keepends=True)

        heading_index: int | None = None
        end_index = len(lines)
        in_fence = False

        for i, line in enumerate(lines):
            if FENCE_RE.match(line):
                in_fence = not in_fence
                continue
            if in_fence:
                continue
            if heading_index is None:
                if line.strip() == target:
                    heading_index = i
                continue
            match = HEADING_RE.match(line)
            if match and len(match.group("hash")) <= level:
                end_index = i
                break

        if heading_index is None:
            raise MissingRegionMarkerError(document, target)

        return RegionSplit(
            prefix="".join(lines[: heading_index + 1]),
            interior="".join(lines[heading_index + 1 : end_index]),
            suffix="".join(lines[end_index:]),
        )

    def format_interior(self, split: RegionSplit, content: str) -> str:
        content = content.strip("\n")
        # Keep a blank line between the heading, the cards and whatever follows
        newline = "" if split.prefix.endswith("\n") else "\n"
        if not content:
            return newline + "\n" if split.suffix else newline
        tail = "\n\n" if split.suffix else "\n"
        return f"{newline}\n{content}{tail}"


Region = MarkerRegion | HeadingRegion


def replace_region(
    text: str,
    region: Region,
    content: str,
    document: Path | str = "<document>",
) -> str:
    """Replace the interior of ``region`` in ``text`` with ``content``."""
    split = region.split(text, document)
    return split.join(region.format_interior(split, content))
