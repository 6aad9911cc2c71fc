"""Agents package - transcription and AI writing stages."""

from app.agents.blog_writer import BlogWriterAgent, GeneratedPost, parse_generated_post
from app.agents.text_generation import (
    AnthropicTextGenerator,
    GeminiTextGenerator,
    MockTextGenerator,
    TextGenerator,
    get_text_generator,
)
from app.agents.transcriber import SimulatedTranscriber, Transcriber

__all__ = [
    # Blog writer
    "BlogWriterAgent",
    "GeneratedPost",
    "parse_generated_post",
    # Text generation providers
    "TextGenerator",
    "GeminiTextGenerator",
    "AnthropicTextGenerator",
    "MockTextGenerator",
    "get_text_generator",
    # Transcription
    "Transcriber",
    "SimulatedTranscriber",
]
