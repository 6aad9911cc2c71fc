"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.agents.blog_writer import BlogWriterAgent
from app.agents.text_generation import TextGenerator, get_text_generator
from app.agents.transcriber import SimulatedTranscriber, Transcriber
from app.api.v1.router import api_router
from app.config import Settings, get_settings
from app.core.logging import get_logger, setup_logging
from app.db.memory import PostStore
from app.schemas.post import ActionResult
from app.services.pipeline import BlogPostPipeline
from app.services.post_service import PostService
from app.services.progress import ProgressPresenter

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown events."""
    settings: Settings = app.state.settings
    logger.info("Starting %s in %s mode (llm_provider=%s)", settings.app_name, settings.environment, settings.llm_provider)

    yield

    logger.info("Shutting down, %d posts discarded", len(app.state.post_store))


def build_post_service(
    settings: Settings,
    store: PostStore,
    text_generator: TextGenerator | None = None,
    transcriber: Transcriber | None = None,
) -> PostService:
    """Wire the pipeline stages around one store."""
    writer = BlogWriterAgent(
        text_generator or get_text_generator(settings),
        timeout_seconds=settings.generation_timeout_seconds,
    )
    pipeline = BlogPostPipeline(
        store=store,
        transcriber=transcriber or SimulatedTranscriber(settings),
        writer=writer,
    )
    presenter = ProgressPresenter(interval_seconds=settings.progress_interval_seconds)
    return PostService(store, pipeline, presenter)


def create_app(
    settings: Settings | None = None,
    *,
    text_generator: TextGenerator | None = None,
    transcriber: Transcriber | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Turn videos into blog posts with AI",
        version="0.1.0",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    # Each app owns its store; posts are lost on restart
    store = PostStore()
    app.state.settings = settings
    app.state.post_store = store
    app.state.post_service = build_post_service(settings, store, text_generator, transcriber)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Render malformed request bodies as a failed result envelope."""
        errors = exc.errors()
        if errors:
            first = errors[0]
            field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
            message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
        else:
            message = "Invalid request"
        body = ActionResult(success=False, error=message, error_kind="validation")
        return JSONResponse(status_code=422, content=body.model_dump(mode="json"))

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "app": settings.app_name}

    return app


app = create_app()
