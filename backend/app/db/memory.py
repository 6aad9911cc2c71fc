"""In-memory blog post storage.

Posts live only as long as the process. There is no locking: a single writer
is assumed, and concurrent edits of the same post may race.
"""

from collections import OrderedDict
from datetime import UTC, datetime, timedelta

from app.core.exceptions import NotFoundError
from app.core.logging import get_logger
from app.schemas.post import Post, PostUpdate

logger = get_logger(__name__)


class PostStore:
    """Ordered repository of posts, most recent first."""

    def __init__(self) -> None:
        self._posts: OrderedDict[str, Post] = OrderedDict()

    def __len__(self) -> int:
        return len(self._posts)

    def __contains__(self, post_id: object) -> bool:
        return post_id in self._posts

    def list(self) -> list[Post]:
        """Return copies of all posts, newest first."""
        return [post.model_copy(deep=True) for post in self._posts.values()]

    def get(self, post_id: str) -> Post:
        """Return a copy of one post."""
        post = self._posts.get(post_id)
        if post is None:
            raise NotFoundError()
        return post.model_copy(deep=True)

    def insert(self, post: Post) -> Post:
        """Add a post in front of the existing ones.

        Ids are generated by the pipeline, so a duplicate is a bug in the
        caller and raises ``ValueError`` instead of a boundary error.
        """
        if post.id in self._posts:
            raise ValueError(f"Post {post.id} already exists")

        self._posts[post.id] = post.model_copy(deep=True)
        self._posts.move_to_end(post.id, last=False)
        logger.info("Stored post %s (%d total)", post.id, len(self._posts))
        return post.model_copy(deep=True)

    def update(self, post_id: str, changes: PostUpdate) -> Post:
        """Replace the supplied fields and bump ``updated_at``."""
        post = self._posts.get(post_id)
        if post is None:
            raise NotFoundError()

        fields = changes.model_dump(exclude_none=True)
        # Coarse clocks can repeat a reading; updated_at must still move forward
        fields["updated_at"] = max(datetime.now(UTC), post.updated_at + timedelta(microseconds=1))
        updated = post.model_copy(update=fields, deep=True)
        self._posts[post_id] = updated
        logger.info("Updated post %s (%s)", post_id, ", ".join(sorted(fields)))
        return updated.model_copy(deep=True)

    def delete(self, post_id: str) -> None:
        """Remove a post. Deleting an unknown id raises ``NotFoundError``."""
        if post_id not in self._posts:
            raise NotFoundError()
        del self._posts[post_id]
        logger.info("Deleted post %s (%d left)", post_id, len(self._posts))
