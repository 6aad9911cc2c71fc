"""Tests for provider selection and the offline provider."""

import asyncio
from types import SimpleNamespace
from typing import Any

import pytest

from app.agents.blog_writer import parse_generated_post
from app.agents.text_generation import (
    AnthropicTextGenerator,
    GeminiTextGenerator,
    MockTextGenerator,
    get_text_generator,
)
from app.config import Settings


class TestGetTextGenerator:
    """Factory selection by ``llm_provider``."""

    def test_mock(self, settings: Settings) -> None:
        assert isinstance(get_text_generator(settings), MockTextGenerator)

    def test_gemini(self) -> None:
        generator = get_text_generator(Settings(_env_file=None, llm_provider="gemini", gemini_model="gemini-x"))

        assert isinstance(generator, GeminiTextGenerator)
        assert generator.model == "gemini-x"

    def test_anthropic(self) -> None:
        generator = get_text_generator(Settings(_env_file=None, llm_provider="anthropic", anthropic_api_key="k"))

        assert isinstance(generator, AnthropicTextGenerator)


class TestMockTextGenerator:
    """Offline replies follow the TITLE/CONTENT format."""

    def test_reply_parses(self) -> None:
        reply = asyncio.run(
            MockTextGenerator().generate_text("system", "Source: Uploaded video file - demo.mov\n\nTranscription:\n...")
        )

        post = parse_generated_post(reply)
        assert post.title == "Key Takeaways from demo.mov"
        assert post.content.startswith("## Introduction")


class FakeGeminiModels:
    """Stands in for ``client.aio.models``."""

    def __init__(self, text: str | None) -> None:
        self.text = text
        self.calls: list[dict[str, Any]] = []

    async def generate_content(self, **kwargs: Any) -> SimpleNamespace:
        self.calls.append(kwargs)
        return SimpleNamespace(text=self.text)


class FakeAnthropicMessages:
    """Stands in for ``client.messages``."""

    def __init__(self, blocks: list[SimpleNamespace]) -> None:
        self.blocks = blocks
        self.calls: list[dict[str, Any]] = []

    async def create(self, **kwargs: Any) -> SimpleNamespace:
        self.calls.append(kwargs)
        return SimpleNamespace(content=self.blocks)


def provider_settings(**overrides: Any) -> Settings:
    return Settings(
        _env_file=None,
        gemini_model="gemini-test",
        anthropic_model="claude-test",
        generation_temperature=0.3,
        generation_max_tokens=1234,
        **overrides,
    )


class TestGeminiTextGenerator:
    """Request shape and reply handling for Gemini."""

    def test_sends_prompts_and_settings(self) -> None:
        models = FakeGeminiModels("TITLE: Hi")
        generator = GeminiTextGenerator(provider_settings())
        generator._client = SimpleNamespace(aio=SimpleNamespace(models=models))

        text = asyncio.run(generator.generate_text("be concise", "the transcript"))

        assert text == "TITLE: Hi"
        call = models.calls[0]
        assert call["model"] == "gemini-test"
        assert call["contents"] == "the transcript"
        assert call["config"].system_instruction == "be concise"
        assert call["config"].temperature == 0.3
        assert call["config"].max_output_tokens == 1234

    @pytest.mark.parametrize("reply", [None, ""])
    def test_missing_text_becomes_empty_string(self, reply: str | None) -> None:
        generator = GeminiTextGenerator(provider_settings())
        generator._client = SimpleNamespace(aio=SimpleNamespace(models=FakeGeminiModels(reply)))

        assert asyncio.run(generator.generate_text("s", "u")) == ""

    def test_client_is_created_lazily(self) -> None:
        generator = GeminiTextGenerator(provider_settings(gemini_api_key=""))

        assert generator._client is None


class TestAnthropicTextGenerator:
    """Request shape and reply handling for Claude."""

    def test_sends_prompts_and_settings(self) -> None:
        messages = FakeAnthropicMessages([SimpleNamespace(type="text", text="TITLE: Hi")])
        generator = AnthropicTextGenerator(provider_settings())
        generator._client = SimpleNamespace(messages=messages)

        text = asyncio.run(generator.generate_text("be concise", "the transcript"))

        assert text == "TITLE: Hi"
        assert messages.calls[0] == {
            "model": "claude-test",
            "max_tokens": 1234,
            "temperature": 0.3,
            "system": "be concise",
            "messages": [{"role": "user", "content": "the transcript"}],
        }

    def test_joins_only_text_blocks(self) -> None:
        blocks = [
            SimpleNamespace(type="text", text="TITLE: Hi\n"),
            SimpleNamespace(type="tool_use", id="tool_1", name="lookup", input={}),
            SimpleNamespace(type="text", text="CONTENT: Body"),
        ]
        generator = AnthropicTextGenerator(provider_settings())
        generator._client = SimpleNamespace(messages=FakeAnthropicMessages(blocks))

        assert asyncio.run(generator.generate_text("s", "u")) == "TITLE: Hi\nCONTENT: Body"

    def test_no_text_blocks_gives_empty_reply(self) -> None:
        generator = AnthropicTextGenerator(provider_settings())
        generator._client = SimpleNamespace(messages=FakeAnthropicMessages([]))

        assert asyncio.run(generator.generate_text("s", "u")) == ""
