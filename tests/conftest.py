"""Shared pytest fixtures for SeerAI tests."""

from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from seerai.core.config import Settings
from seerai.core.errors import GatewayError
from seerai.main import create_app


class FakeGateway:
    """Stands in for LLMGateway: returns canned text or raises, and records prompts."""

    def __init__(self, text: Optional[str] = None, error: Optional[Exception] = None):
        self.model = "fake-model"
        self.text = text
        self.error = error
        self.calls: List[tuple] = []

    async def generate(self, prompt: str, system_instruction: str) -> str:
        self.calls.append((prompt, system_instruction))
        if self.error is not None:
            raise self.error
        if not self.text:
            raise GatewayError("No response content received from the language model")
        return self.text


@pytest.fixture
def test_settings() -> Settings:
    """Settings with dummy credentials and no .env lookup."""
    return Settings(
        _env_file=None,
        GEMINI_API_KEY="test-key",
        GOOGLE_PROJECT_ID="test-project",
        RATE_LIMIT="1000/minute",
    )


@pytest.fixture
def sample_cards() -> List[dict]:
    return [
        {
            "id": 1,
            "name": "The Fool",
            "suit": "Major Arcana",
            "arcana": "major",
            "description": "New beginnings, innocence, spontaneity, free spirit",
        },
        {
            "id": 2,
            "name": "Ace of Cups",
            "suit": "Cups",
            "arcana": "minor",
            "description": "Love, new relationships, compassion, creativity",
        },
        {
            "id": 3,
            "name": "The World",
            "arcana": "major",
            "description": "Completion, fulfillment, wholeness, integration, accomplishment",
        },
    ]


@pytest.fixture
def reading_payload(sample_cards) -> dict:
    return {"question": "Will I find love?", "selectedCards": sample_cards}


@pytest.fixture
def model_reading() -> dict:
    """A well-formed reading as the model is asked to return it."""
    return {
        "reading": "A journey from innocence toward fulfillment.",
        "interpretation": "The Fool opens a path that the Ace of Cups fills with feeling.",
        "advice": "Stay open to new connections.",
        "cards": [
            {"name": "The Fool", "position": "past", "meaning": "You began without fear."},
            {"name": "Ace of Cups", "position": "present", "meaning": "Love is arriving."},
            {"name": "The World", "position": "future", "meaning": "A sense of completion."},
        ],
    }


@pytest.fixture
def fake_gateway() -> FakeGateway:
    return FakeGateway(text="A reading.")


@pytest.fixture
def make_client(test_settings):
    """Build a TestClient around an app wired to the given fake gateway."""

    def _make(gateway: FakeGateway, settings: Optional[Settings] = None) -> TestClient:
        app = create_app(settings or test_settings, gateway=gateway)
        return TestClient(app)

    return _make


@pytest.fixture
def test_client(make_client, fake_gateway) -> TestClient:
    return make_client(fake_gateway)
