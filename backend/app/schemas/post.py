"""Blog post schemas for API request/response validation."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class SourceType(str, Enum):
    """Where the video behind a post came from."""

    UPLOAD = "upload"
    LINK = "link"


class SourceDescriptor(BaseModel):
    """Input for one pipeline run."""

    type: SourceType
    file_name: str = Field(default="", max_length=255)
    url: str | None = Field(default=None, max_length=2048, description="Video link, for link sources")


class PostUpdate(BaseModel):
    """Partial edit of a post. Only title and content are editable."""

    title: str | None = Field(default=None, max_length=500)
    content: str | None = None


class Post(BaseModel):
    """A generated blog post."""

    id: str
    title: str
    content: str
    source_type: SourceType
    file_name: str
    url: str | None = None
    created_at: datetime
    updated_at: datetime


class ActionResult(BaseModel):
    """Envelope shared by every boundary operation."""

    success: bool
    error: str | None = None
    error_kind: str | None = Field(default=None, description="validation, not_found, generation or unknown")


class GenerateResult(ActionResult):
    """Result of a generation run."""

    post: Post | None = None


class PostResult(ActionResult):
    """Result of reading or editing a single post."""

    post: Post | None = None


class PostListResult(ActionResult):
    """Result of listing posts, newest first."""

    posts: list[Post] | None = None


class DeleteResult(ActionResult):
    """Result of deleting a post."""
