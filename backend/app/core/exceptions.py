"""Error kinds raised inside the blog-post core.

They are converted to ``{"success": false, "error": ...}`` envelopes by
``PostService`` and never reach an HTTP client as exceptions.
"""


class BlogPostError(Exception):
    """Base class for expected failures."""

    kind = "unknown"
    default_message = "Unknown error occurred"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(BlogPostError):
    """The request is missing a file, a URL or an edit value."""

    kind = "validation"
    default_message = "Invalid request"


class NotFoundError(BlogPostError):
    """No post has the requested id."""

    kind = "not_found"
    default_message = "Blog post not found"


class GenerationError(BlogPostError):
    """The text-generation provider failed or returned nothing usable."""

    kind = "generation"
    default_message = "Failed to generate blog post with AI"


class UnknownError(BlogPostError):
    """Anything else, caught at the outermost boundary."""

    kind = "unknown"
