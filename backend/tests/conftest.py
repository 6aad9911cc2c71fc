"""Shared fixtures for the Vid2Blog backend tests."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app


class ScriptedTextGenerator:
    """Text generator that returns a canned reply or raises a canned error."""

    def __init__(self, reply: str = "TITLE: Foo\n\nCONTENT: Bar baz", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def generate_text(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        if self.error:
            raise self.error
        return self.reply


@pytest.fixture
def settings() -> Settings:
    """Settings with no artificial delays and the offline provider."""
    return Settings(
        _env_file=None,
        llm_provider="mock",
        extraction_delay_seconds=0,
        transcription_delay_seconds=0,
        progress_interval_seconds=0.01,
        generation_timeout_seconds=5,
    )


@pytest.fixture
def scripted_generator() -> type[ScriptedTextGenerator]:
    """The scripted generator class, for tests that need custom replies."""
    return ScriptedTextGenerator


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    """Test client for an app using the mock provider."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client
