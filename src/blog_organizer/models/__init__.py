"""Pydantic data models."""

from blog_organizer.models.category import Category
from blog_organizer.models.post import EPOCH, Post
from blog_organizer.models.results import IndexUpdate, IngestedFile, RunReport

__all__ = [
    "Category",
    "EPOCH",
    "Post",
    "IndexUpdate",
    "IngestedFile",
    "RunReport",
]
