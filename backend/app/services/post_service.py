"""Post service - Boundary operations for generating and managing posts.

Every public method returns a result envelope. Failures are reported as
``success=False`` with a human-readable ``error``; no exception escapes.
"""

from collections.abc import AsyncGenerator
from urllib.parse import urlparse

from app.constants.pipeline_defaults import LINK_FILE_NAME
from app.core.exceptions import BlogPostError, UnknownError, ValidationError
from app.core.logging import get_logger
from app.db.memory import PostStore
from app.schemas.post import (
    DeleteResult,
    GenerateResult,
    PostListResult,
    PostResult,
    PostUpdate,
    SourceDescriptor,
    SourceType,
)
from app.services.pipeline import BlogPostPipeline
from app.services.progress import ProgressPresenter, ProgressUpdate

logger = get_logger(__name__)


def validate_descriptor(descriptor: SourceDescriptor) -> SourceDescriptor:
    """Check a descriptor before any stage runs and fill in the link file name."""
    file_name = descriptor.file_name.strip()

    if descriptor.type == SourceType.UPLOAD:
        if not file_name:
            raise ValidationError("Please select a video file")
        return descriptor.model_copy(update={"file_name": file_name, "url": None})

    url = (descriptor.url or "").strip()
    if not url:
        raise ValidationError("Please enter a video URL")
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValidationError("Please enter a valid video URL")

    return descriptor.model_copy(update={"file_name": file_name or LINK_FILE_NAME, "url": url})


def validate_update(changes: PostUpdate) -> PostUpdate:
    """Reject blank edits. Omitted fields are left alone."""
    if changes.title is not None and not changes.title.strip():
        raise ValidationError("Title cannot be empty")
    if changes.content is not None and not changes.content.strip():
        raise ValidationError("Content cannot be empty")
    return changes


class PostService:
    """Service exposing the post operations to the API layer."""

    def __init__(
        self,
        store: PostStore,
        pipeline: BlogPostPipeline,
        presenter: ProgressPresenter | None = None,
    ) -> None:
        self.store = store
        self.pipeline = pipeline
        self.presenter = presenter or ProgressPresenter()

    async def generate(self, descriptor: SourceDescriptor) -> GenerateResult:
        """Run the pipeline for one video source."""
        try:
            descriptor = validate_descriptor(descriptor)
            result = await self.pipeline.run(descriptor)
        except BlogPostError as e:
            return GenerateResult(success=False, error=e.message, error_kind=e.kind)
        except Exception as e:
            logger.exception("Error in generate: %s", e)
            error = UnknownError()
            return GenerateResult(success=False, error=error.message, error_kind=error.kind)

        if result.success:
            return GenerateResult(success=True, post=result.post)
        return GenerateResult(success=False, error=result.error, error_kind=result.error_kind)

    async def generate_with_progress(
        self, descriptor: SourceDescriptor
    ) -> AsyncGenerator[ProgressUpdate, None]:
        """Run ``generate`` while yielding cosmetic progress updates.

        The last update has ``done=True`` and carries the ``GenerateResult``.
        """
        async for update in self.presenter.track(self.generate(descriptor)):
            yield update

    def list_posts(self) -> PostListResult:
        """Retrieve all posts, newest first."""
        try:
            return PostListResult(success=True, posts=self.store.list())
        except Exception as e:
            logger.exception("Error listing posts: %s", e)
            return PostListResult(success=False, error="Failed to retrieve blog posts", error_kind="unknown")

    def get_post(self, post_id: str) -> PostResult:
        """Retrieve a single post."""
        try:
            return PostResult(success=True, post=self.store.get(post_id))
        except BlogPostError as e:
            return PostResult(success=False, error=e.message, error_kind=e.kind)
        except Exception as e:
            logger.exception("Error reading post %s: %s", post_id, e)
            return PostResult(success=False, error="Failed to retrieve blog post", error_kind="unknown")

    def update_post(self, post_id: str, changes: PostUpdate) -> PostResult:
        """Edit the title and/or content of a post."""
        try:
            post = self.store.update(post_id, validate_update(changes))
            return PostResult(success=True, post=post)
        except BlogPostError as e:
            return PostResult(success=False, error=e.message, error_kind=e.kind)
        except Exception as e:
            logger.exception("Error updating post %s: %s", post_id, e)
            return PostResult(success=False, error="Failed to update blog post", error_kind="unknown")

    def delete_post(self, post_id: str) -> DeleteResult:
        """Delete a post."""
        try:
            self.store.delete(post_id)
            return DeleteResult(success=True)
        except BlogPostError as e:
            return DeleteResult(success=False, error=e.message, error_kind=e.kind)
        except Exception as e:
            logger.exception("Error deleting post %s: %s", post_id, e)
            return DeleteResult(success=False, error="Failed to delete blog post", error_kind="unknown")
