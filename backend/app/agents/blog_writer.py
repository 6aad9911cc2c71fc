"""Blog Writer Agent - Turns a video transcript into a titled blog post."""

import asyncio
import re
from dataclasses import dataclass

from app.agents.text_generation import TextGenerator
from app.constants.pipeline_defaults import UNTITLED_POST_TITLE
from app.core.exceptions import GenerationError
from app.core.logging import get_logger
from app.schemas.post import SourceDescriptor, SourceType

logger = get_logger(__name__)

_TITLE_RE = re.compile(r"TITLE:\s*(.+?)(?:\n|$)", re.IGNORECASE)
_CONTENT_RE = re.compile(r"CONTENT:\s*([\s\S]*)", re.IGNORECASE)


@dataclass
class GeneratedPost:
    """Title and body parsed out of a model reply."""

    title: str
    content: str


def parse_generated_post(raw: str) -> GeneratedPost:
    """
    Split a free-text model reply into title and content.

    The text after ``TITLE:`` up to the end of that line is the title; the
    text after ``CONTENT:`` up to the end of the reply is the content. Markers
    are matched case-insensitively. A missing title becomes
    ``"Untitled Blog Post"``, a missing content section means the whole reply
    is the content, unchanged. The two fallbacks apply independently. An empty
    ``CONTENT:`` section leaves the reply minus its markers and title line.
    """
    title = UNTITLED_POST_TITLE
    content = raw

    title_match = _TITLE_RE.search(raw)
    if title_match and title_match.group(1).strip():
        title = title_match.group(1).strip()

    content_match = _CONTENT_RE.search(raw)
    if content_match:
        content = content_match.group(1).strip()
        if not content:
            content = _CONTENT_RE.sub("", _TITLE_RE.sub("", raw, count=1), count=1).strip()

    return GeneratedPost(title=title, content=content)


class BlogWriterAgent:
    """
    Agent that writes a blog post from a transcript.

    Sends a fixed writing brief plus the transcript to the configured text
    generator once, then parses the reply. Every provider failure is reported
    as the same ``GenerationError``.
    """

    SYSTEM_PROMPT = """You are an expert content writer who specializes in transforming video transcriptions into engaging, well-structured blog posts.

Your task is to:
1. Create an engaging title that captures the main theme
2. Transform the transcription into a coherent, well-formatted blog post
3. Add proper structure with headings, paragraphs, and flow
4. Enhance readability while maintaining the original message
5. Add a compelling introduction and conclusion
6. Use markdown formatting for better presentation

The blog post should be informative, engaging, and easy to read. Maintain the speaker's key points but improve the structure and flow for written content."""

    USER_PROMPT = """Please transform this video transcription into an engaging blog post:

Source: {source_kind} - {file_name}{url_line}

Transcription:
{transcript}

Please provide the response in the following format:
TITLE: [Your engaging title here]

CONTENT: [Your blog post content here with proper formatting]"""

    def __init__(self, generator: TextGenerator, timeout_seconds: float | None = None) -> None:
        self.generator = generator
        self.timeout_seconds = timeout_seconds

    def build_prompt(self, transcript: str, descriptor: SourceDescriptor) -> str:
        """Embed the transcript and source metadata in the user prompt."""
        if descriptor.type == SourceType.LINK:
            source_kind = "Video link"
            url_line = f"\nURL: {descriptor.url}" if descriptor.url else ""
        else:
            source_kind = "Uploaded video file"
            url_line = ""

        return self.USER_PROMPT.format(
            source_kind=source_kind,
            file_name=descriptor.file_name,
            url_line=url_line,
            transcript=transcript,
        )

    async def write(self, transcript: str, descriptor: SourceDescriptor) -> GeneratedPost:
        """Generate and parse a blog post for one transcript."""
        prompt = self.build_prompt(transcript, descriptor)

        try:
            raw = await asyncio.wait_for(
                self.generator.generate_text(self.SYSTEM_PROMPT, prompt),
                timeout=self.timeout_seconds,
            )
            if not raw or not raw.strip():
                raise ValueError("Empty response from text generator")
        except Exception as e:
            logger.exception("Error generating blog post: %s", e)
            raise GenerationError() from e

        post = parse_generated_post(raw)
        if not post.content.strip():
            logger.error("Generated reply has no usable content: %r", raw[:200])
            raise GenerationError()
        return post
