"""Storage package."""

from app.db.memory import PostStore

__all__ = ["PostStore"]
