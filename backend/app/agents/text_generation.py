"""Text-generation providers.

Each provider exposes one capability: given a system prompt and a user prompt,
return the generated text. Provider errors propagate unchanged; callers decide
how to report them.
"""

import re
from typing import Protocol

import anthropic
from google import genai
from google.genai import types

from app.config import Settings, get_settings


class TextGenerator(Protocol):
    """Opaque ``(system_prompt, user_prompt) -> text`` capability."""

    async def generate_text(self, system_prompt: str, user_prompt: str) -> str: ...


class GeminiTextGenerator:
    """Generates text with Google's Gemini models."""

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        self.api_key = settings.gemini_api_key
        self._client: genai.Client | None = None
        self.model = settings.gemini_model
        self.temperature = settings.generation_temperature
        self.max_tokens = settings.generation_max_tokens

    @property
    def client(self) -> genai.Client:
        # Created on first use so a missing key fails the call, not startup
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate_text(self, system_prompt: str, user_prompt: str) -> str:
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=user_prompt,
            config=types.GenerateContentConfig(
                system_instruction=system_prompt,
                temperature=self.temperature,
                max_output_tokens=self.max_tokens,
            ),
        )
        return response.text or ""


class AnthropicTextGenerator:
    """Generates text with Claude through the Anthropic API."""

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        self.api_key = settings.anthropic_api_key
        self._client: anthropic.AsyncAnthropic | None = None
        self.model = settings.anthropic_model
        self.temperature = settings.generation_temperature
        self.max_tokens = settings.generation_max_tokens

    @property
    def client(self) -> anthropic.AsyncAnthropic:
        if self._client is None:
            self._client = anthropic.AsyncAnthropic(api_key=self.api_key)
        return self._client

    async def generate_text(self, system_prompt: str, user_prompt: str) -> str:
        message = await self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            system=system_prompt,
            messages=[{"role": "user", "content": user_prompt}],
        )
        return "".join(block.text for block in message.content if block.type == "text")


class MockTextGenerator:
    """Offline provider for local runs and automated tests.

    Replies in the ``TITLE:`` / ``CONTENT:`` format the blog writer asks for,
    naming the source file found in the prompt.
    """

    async def generate_text(self, system_prompt: str, user_prompt: str) -> str:
        title = "Sustainable Technology"
        match = re.search(r"^Source:.*? - (.+)$", user_prompt, re.MULTILINE)
        if match:
            title = f"Key Takeaways from {match.group(1).strip()[:80]}"

        return (
            f"TITLE: {title}\n\n"
            "CONTENT: ## Introduction\n\n"
            "This is mock generated content for local development and automated tests.\n\n"
            "## Key Points\n\n"
            "1. Renewable energy is now cost-competitive.\n"
            "2. AI helps balance supply and demand.\n"
            "3. Education drives adoption.\n\n"
            "## Conclusion\n\n"
            "Sustainable technology is shaping our future."
        )


def get_text_generator(settings: Settings | None = None) -> TextGenerator:
    """Get text generator based on configured LLM provider."""
    settings = settings or get_settings()

    if settings.llm_provider == "mock":
        return MockTextGenerator()
    if settings.llm_provider == "anthropic":
        return AnthropicTextGenerator(settings)
    return GeminiTextGenerator(settings)
