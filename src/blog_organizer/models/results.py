"""Result records reported back to the CLI."""

from pathlib import Path

from pydantic import BaseModel, Field


class IngestedFile(BaseModel):
    """A staged post that was moved into its category folder."""

    source: Path
    destination: Path
    category_slug: str
    title: str = ""


class IndexUpdate(BaseModel):
    """An index document visited by the synchronizer."""

    path: Path
    changed: bool = Field(default=False, description="Whether the file content was rewritten")


class RunReport(BaseModel):
    """Summary of one organizer run."""

    ingested: list[IngestedFile] = Field(default_factory=list)
    post_count: int = 0
    index_updates: list[IndexUpdate] = Field(default_factory=list)

    @property
    def changed_indexes(self) -> list[Path]:
        return [update.path for update in self.index_updates if update.changed]
