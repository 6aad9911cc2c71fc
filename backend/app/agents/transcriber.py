"""Audio extraction and transcription stage.

Both steps are simulated: they wait for a configured delay and return a
fixed sample transcript that is not derived from the media. A real
implementation (ffmpeg + speech-to-text) only has to satisfy ``Transcriber``.
"""

import asyncio
from typing import Protocol

from app.config import Settings, get_settings
from app.constants.pipeline_defaults import SAMPLE_TRANSCRIPT
from app.core.logging import get_logger
from app.schemas.post import SourceDescriptor, SourceType

logger = get_logger(__name__)


class Transcriber(Protocol):
    """Turns a source descriptor into transcript text."""

    async def extract_audio(self, descriptor: SourceDescriptor) -> str: ...

    async def transcribe(self, audio: str) -> str: ...

    async def extract_and_transcribe(self, descriptor: SourceDescriptor) -> str: ...


class SimulatedTranscriber:
    """Stand-in transcriber with artificial latency."""

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        self.extraction_delay = settings.extraction_delay_seconds
        self.transcription_delay = settings.transcription_delay_seconds

    async def extract_audio(self, descriptor: SourceDescriptor) -> str:
        """Pretend to pull the audio track out of the video."""
        await asyncio.sleep(self.extraction_delay)

        if descriptor.type == SourceType.LINK:
            return f"Simulated audio extraction from video link: {descriptor.url}"
        return f"Simulated audio extraction from uploaded file: {descriptor.file_name}"

    async def transcribe(self, audio: str) -> str:
        """Pretend to run speech-to-text on the extracted audio."""
        logger.debug("Transcribing: %s", audio)
        await asyncio.sleep(self.transcription_delay)
        return SAMPLE_TRANSCRIPT

    async def extract_and_transcribe(self, descriptor: SourceDescriptor) -> str:
        audio = await self.extract_audio(descriptor)
        return await self.transcribe(audio)
