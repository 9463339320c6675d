"""Configuration management using pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from blog_organizer.utils.text_utils import slugify_category


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BLOG_ORGANIZER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Site layout
    root_dir: Path = Field(default=Path("."), description="Site root directory")
    staging_dir: Path = Field(
        default=Path("blog"), description="Staging directory for new posts (relative to root)"
    )
    category_base: str = Field(
        default="categories", description="Directory holding one folder per category"
    )
    index_filename: str = Field(default="index.mdx", description="Index document file name")
    content_extensions: list[str] = Field(
        default_factory=lambda: [".mdx", ".md"],
        description="File extensions treated as content",
    )

    # Classification
    required_fields: list[str] = Field(
        default_factory=lambda: ["title", "description"],
        description="Front matter fields every staged post must carry",
    )
    category_overrides: dict[str, str] = Field(
        default_factory=dict, description="Raw category name -> slug overrides"
    )
    restrict_categories: bool = Field(
        default=False, description="Only accept categories listed in category_overrides"
    )

    # Index regions
    latest_count: int = Field(
        default=5, ge=0, description="Number of posts listed after the featured one"
    )
    featured_start: str = "<!-- FEATURED_START -->"
    featured_end: str = "<!-- FEATURED_END -->"
    latest_start: str = "<!-- LATEST_START -->"
    latest_end: str = "<!-- LATEST_END -->"
    articles_start: str = "<!-- ARTICLES_START -->"
    articles_end: str = "<!-- ARTICLES_END -->"
    category_region_heading: str | None = Field(
        default=None,
        description="Use a heading (e.g. '## All Articles') instead of markers on category indexes",
    )

    # Card rendering
    default_icon: str = Field(default="file-text", description="Category card icon fallback")
    featured_icon: str = "star"
    latest_icon: str = "newspaper"
    link_prefix: str = Field(default="/", description="Prefix prepended to post URLs in links")

    # Logging
    log_level: str = Field(default="INFO", description="Console log level")
    log_file: Path | None = Field(default=None, description="Optional DEBUG log file")

    @field_validator("category_overrides")
    @classmethod
    def _overrides_are_slugs(cls, value: dict[str, str]) -> dict[str, str]:
        for name, slug in value.items():
            if slugify_category(slug) != slug:
                raise ValueError(f"category override {name!r} maps to {slug!r}, which is not a folder slug")
        return value

    @property
    def staging_path(self) -> Path:
        """Path to the staging directory."""
        return self.root_dir / self.staging_dir

    @property
    def category_base_path(self) -> Path:
        """Path to the directory holding category folders."""
        return self.root_dir / self.category_base

    @property
    def root_index_path(self) -> Path:
        """Path to the site's root index document."""
        return self.root_dir / self.index_filename

    @property
    def index_stem(self) -> str:
        return Path(self.index_filename).stem

    def is_content_file(self, path: Path) -> bool:
        """Check if a path is a post (content extension, not an index document)."""
        return (
            path.is_file()
            and path.suffix.lower() in {ext.lower() for ext in self.content_extensions}
            and path.stem != self.index_stem
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
