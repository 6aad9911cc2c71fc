"""Blog post API endpoints."""

import json
from collections.abc import AsyncGenerator
from typing import Any

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import StreamingResponse

from app.schemas.post import (
    ActionResult,
    DeleteResult,
    GenerateResult,
    PostListResult,
    PostResult,
    PostUpdate,
    SourceDescriptor,
)
from app.services.post_service import PostService

router = APIRouter()

# HTTP status for each failure kind; the body is always the result envelope
ERROR_STATUS: dict[str, int] = {
    "validation": 422,
    "not_found": 404,
    "generation": 502,
    "unknown": 500,
}


def get_post_service(request: Request) -> PostService:
    """Dependency returning the service built for this application."""
    service: PostService = request.app.state.post_service
    return service


def _set_status(response: Response, result: ActionResult, ok_status: int = status.HTTP_200_OK) -> None:
    if result.success:
        response.status_code = ok_status
    else:
        response.status_code = ERROR_STATUS.get(result.error_kind or "unknown", status.HTTP_500_INTERNAL_SERVER_ERROR)


def _event(type: str, data: Any) -> str:
    """Format as SSE event."""
    return f"data: {json.dumps({'type': type, 'data': data})}\n\n"


@router.post("/generate", response_model=GenerateResult, status_code=status.HTTP_201_CREATED)
async def generate_post(
    descriptor: SourceDescriptor,
    response: Response,
    service: PostService = Depends(get_post_service),
) -> GenerateResult:
    """
    Generate a blog post from an uploaded video file or a video link.

    Runs extraction, transcription and AI writing, then stores the post.
    """
    result = await service.generate(descriptor)
    _set_status(response, result, ok_status=status.HTTP_201_CREATED)
    return result


@router.post("/generate/stream")
async def generate_post_stream(
    descriptor: SourceDescriptor,
    service: PostService = Depends(get_post_service),
) -> StreamingResponse:
    """
    Generate a blog post while streaming progress.
    Returns Server-Sent Events (SSE).

    Progress events are cosmetic and do not follow the real stages. The
    final ``result`` event carries the same envelope as ``/generate``.
    """

    async def event_generator() -> AsyncGenerator[str, None]:
        async for update in service.generate_with_progress(descriptor):
            if not update.done:
                yield _event("progress", {"step": update.step, "progress": update.progress})
                continue

            result: GenerateResult = update.result
            step = "Blog post generated successfully!" if result.success else "Blog post generation failed"
            yield _event("progress", {"step": step, "progress": update.progress})
            yield _event("result", result.model_dump(mode="json"))

    return StreamingResponse(event_generator(), media_type="text/event-stream")


@router.get("", response_model=PostListResult)
async def list_posts(
    response: Response,
    service: PostService = Depends(get_post_service),
) -> PostListResult:
    """List all blog posts, newest first."""
    result = service.list_posts()
    _set_status(response, result)
    return result


@router.get("/{post_id}", response_model=PostResult)
async def get_post(
    post_id: str,
    response: Response,
    service: PostService = Depends(get_post_service),
) -> PostResult:
    """Get a specific blog post by ID."""
    result = service.get_post(post_id)
    _set_status(response, result)
    return result


@router.patch("/{post_id}", response_model=PostResult)
async def update_post(
    post_id: str,
    changes: PostUpdate,
    response: Response,
    service: PostService = Depends(get_post_service),
) -> PostResult:
    """Edit the title and/or content of a blog post."""
    result = service.update_post(post_id, changes)
    _set_status(response, result)
    return result


@router.delete("/{post_id}", response_model=DeleteResult)
async def delete_post(
    post_id: str,
    response: Response,
    service: PostService = Depends(get_post_service),
) -> DeleteResult:
    """Delete a blog post."""
    result = service.delete_post(post_id)
    _set_status(response, result)
    return result
