"""
Tests for pitch content generation.

The pydantic-ai agent is replaced with a mock; no provider is called.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from protolab.core import ai_generators
from protolab.core.ai_generators import (
    DECK_STRUCTURE,
    build_pitch_prompt,
    fallback_pitch_content,
    generate_pitch_deck_content,
)
from protolab.core.exceptions import ContentGenerationError
from protolab.schemas.generation import GeneratePitchRequest


@pytest.fixture
def mock_agent(monkeypatch):
    agent = MagicMock()
    agent.run = AsyncMock()
    monkeypatch.setattr(ai_generators, "deck_content_agent", agent)
    return agent


class TestBuildPitchPrompt:
    """Prompt assembly."""

    def test_includes_business_context(self, pitch_request):
        prompt = build_pitch_prompt(pitch_request)

        assert "agritech startup" in prompt
        assert "Agriculture" in prompt
        assert "Kenya" in prompt
        assert "Solar cold storage for smallholder farmers" in prompt

    def test_includes_focus_and_theme(self, pitch_request):
        prompt = build_pitch_prompt(pitch_request)

        assert f"TEMPLATE FOCUS: {ai_generators.TEMPLATE_FOCUS['agritech']}" in prompt
        assert f"CULTURAL THEME: {ai_generators.THEME_GUIDANCE['savanna-green']}" in prompt

    def test_unknown_keys_ignored(self):
        request = GeneratePitchRequest(
            industry="Retail", country="Ghana", business_type="shop", template="unknown", theme="neon",
        )
        prompt = build_pitch_prompt(request)

        assert "TEMPLATE FOCUS" not in prompt
        assert "CULTURAL THEME" not in prompt

    def test_lists_deck_structure(self, pitch_request):
        prompt = build_pitch_prompt(pitch_request)

        for number, title in enumerate(DECK_STRUCTURE, start=1):
            assert f"{number}. {title}" in prompt


class TestFallbackContent:
    """Canned deck content."""

    def test_ten_dense_slides(self, pitch_request):
        content = fallback_pitch_content(pitch_request)

        assert [s.slide_number for s in content.slides] == list(range(1, 11))
        assert [s.title for s in content.slides] == list(DECK_STRUCTURE)

    def test_title_and_insights(self, pitch_request):
        content = fallback_pitch_content(pitch_request)

        assert content.title == "Agritech startup Pitch Deck"
        assert content.insights is not None
        assert "Kenya" in content.insights.market_size

    def test_every_slide_has_content(self, pitch_request):
        content = fallback_pitch_content(pitch_request)

        assert all(slide.content and slide.key_points for slide in content.slides)


class TestGeneratePitchDeckContent:
    """Provider call, fallback and failure."""

    async def test_success(self, pitch_request, sample_deck, mock_agent):
        mock_agent.run.return_value = SimpleNamespace(output=sample_deck)

        result = await generate_pitch_deck_content(pitch_request)

        assert result.source == "ai"
        assert result.provider == "OpenAI"
        assert result.content == sample_deck
        _args, kwargs = mock_agent.run.call_args
        assert kwargs["model"] == "openai:gpt-4o"

    async def test_failure_serves_fallback(self, pitch_request, mock_agent):
        mock_agent.run.side_effect = RuntimeError("quota exceeded")

        result = await generate_pitch_deck_content(pitch_request)

        assert result.source == "fallback"
        assert len(result.content.slides) == 10

    async def test_failure_without_fallback(self, pitch_request, mock_agent, monkeypatch):
        mock_agent.run.side_effect = RuntimeError("quota exceeded")
        monkeypatch.setattr(ai_generators.settings, "CONTENT_FALLBACK_ENABLED", False)

        with pytest.raises(ContentGenerationError) as exc_info:
            await generate_pitch_deck_content(pitch_request)

        assert isinstance(exc_info.value.__cause__, RuntimeError)
