"""Generation pipeline - extract, transcribe, write, store."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from uuid import uuid4

from app.agents.blog_writer import BlogWriterAgent
from app.agents.transcriber import Transcriber
from app.core.exceptions import BlogPostError, UnknownError
from app.core.logging import get_logger
from app.db.memory import PostStore
from app.schemas.post import Post, SourceDescriptor, SourceType

logger = get_logger(__name__)


class PipelineStage(str, Enum):
    """Linear states of one pipeline run."""

    START = "start"
    EXTRACTING = "extracting"
    TRANSCRIBING = "transcribing"
    GENERATING = "generating"
    PERSISTING = "persisting"
    DONE = "done"
    FAILED = "failed"


@dataclass
class PipelineResult:
    """Outcome of a run: a post on success, an error message on failure."""

    stage: PipelineStage
    post: Post | None = None
    error: str | None = None
    error_kind: str | None = None
    failed_stage: PipelineStage | None = None

    @property
    def success(self) -> bool:
        return self.post is not None

    @classmethod
    def ok(cls, post: Post) -> "PipelineResult":
        return cls(stage=PipelineStage.DONE, post=post)

    @classmethod
    def failed(cls, error: BlogPostError, failed_stage: PipelineStage) -> "PipelineResult":
        return cls(
            stage=PipelineStage.FAILED,
            error=error.message,
            error_kind=error.kind,
            failed_stage=failed_stage,
        )


StageCallback = Callable[[PipelineStage], None]


class BlogPostPipeline:
    """
    Runs the four stages in order and stores the resulting post.

    Nothing is written before the persisting stage, so a failure in any
    earlier stage leaves the store untouched. There are no retries.
    """

    def __init__(
        self,
        store: PostStore,
        transcriber: Transcriber,
        writer: BlogWriterAgent,
        on_stage: StageCallback | None = None,
    ) -> None:
        self.store = store
        self.transcriber = transcriber
        self.writer = writer
        self.on_stage = on_stage

    def _enter(self, stage: PipelineStage, descriptor: SourceDescriptor) -> PipelineStage:
        logger.info("Pipeline %s: %s (%s)", stage.value, descriptor.file_name, descriptor.type.value)
        if self.on_stage:
            self.on_stage(stage)
        return stage

    async def run(self, descriptor: SourceDescriptor) -> PipelineResult:
        """Run every stage for one descriptor."""
        stage = self._enter(PipelineStage.START, descriptor)

        try:
            stage = self._enter(PipelineStage.EXTRACTING, descriptor)
            audio = await self.transcriber.extract_audio(descriptor)

            stage = self._enter(PipelineStage.TRANSCRIBING, descriptor)
            transcript = await self.transcriber.transcribe(audio)

            stage = self._enter(PipelineStage.GENERATING, descriptor)
            generated = await self.writer.write(transcript, descriptor)

            stage = self._enter(PipelineStage.PERSISTING, descriptor)
            now = datetime.now(UTC)
            post = Post(
                id=uuid4().hex,
                title=generated.title,
                content=generated.content,
                source_type=descriptor.type,
                file_name=descriptor.file_name,
                url=descriptor.url if descriptor.type == SourceType.LINK else None,
                created_at=now,
                updated_at=now,
            )
            stored = self.store.insert(post)
        except BlogPostError as e:
            logger.warning("Pipeline failed while %s: %s", stage.value, e.message)
            self._enter(PipelineStage.FAILED, descriptor)
            return PipelineResult.failed(e, stage)
        except Exception as e:
            logger.exception("Unexpected pipeline error while %s: %s", stage.value, e)
            self._enter(PipelineStage.FAILED, descriptor)
            return PipelineResult.failed(UnknownError(), stage)

        self._enter(PipelineStage.DONE, descriptor)
        return PipelineResult.ok(stored)
