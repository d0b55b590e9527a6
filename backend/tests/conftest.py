"""
Pytest fixtures for the ProtoLab backend.

Settings are read from the environment when ``protolab.core.config`` is first
imported, so the test environment is pinned here before any app import.
"""

import os
from collections.abc import AsyncGenerator

os.environ["MODE"] = "testing"
os.environ["AI_PROVIDER"] = "openai"
os.environ["OPENAI_API_KEY"] = ""
os.environ["DEEPSEEK_API_KEY"] = ""
os.environ["LOG_LEVEL"] = "INFO"
os.environ["CONTENT_FALLBACK_ENABLED"] = "true"

import pytest
from httpx import ASGITransport, AsyncClient

from protolab.main import app
from protolab.schemas.deck_content import PitchDeckContent, PitchInsights, PitchSlide
from protolab.schemas.generation import GeneratePitchRequest
from protolab.schemas.template import DocumentSection, TemplateDocumentData


class FixedWidthFont:
    """Every character is half the font size wide."""

    def width(self, text: str, size: float) -> float:
        return len(text) * size * 0.5


@pytest.fixture
def fixed_font() -> FixedWidthFont:
    return FixedWidthFont()


# =============================================================================
# Domain Fixtures
# =============================================================================

@pytest.fixture
def sample_deck() -> PitchDeckContent:
    """Three-slide AgriTech deck with insights."""
    return PitchDeckContent(
        title="AgriTech Kenya",
        slides=[
            PitchSlide(
                slide_number=1,
                title="Problem",
                content=[
                    "Smallholder farmers lose up to 40% of harvests after picking",
                    "Buyers cannot find reliable supply",
                ],
                key_points=["Post-harvest loss is the core pain"],
            ),
            PitchSlide(
                slide_number=2,
                title="Solution",
                content=[
                    "Solar cold storage hubs near farming clusters",
                    "Mobile marketplace that connects hubs with buyers",
                ],
                key_points=["Pay-as-you-store pricing"],
            ),
            PitchSlide(
                slide_number=3,
                title="Market",
                content=[
                    "Kenya horticulture exports exceed $1B a year",
                    "Mobile money adoption above 80%",
                ],
                key_points=["Large and digitally ready market"],
            ),
        ],
        insights=PitchInsights(
            market_size="Kenya agritech market valued at $2.5B",
            revenue_projection="$500K revenue by Year 3",
            competitive_advantage="Hub network and buyer relationships",
            market_strategy="Cooperative partnerships in the Rift Valley",
        ),
    )


@pytest.fixture
def sample_deck_payload() -> dict:
    """The same shape the frontend posts, in camelCase."""
    return {
        "title": "AgriTech Kenya",
        "slides": [
            {
                "slideNumber": 1,
                "title": "Problem",
                "content": ["Farmers lose harvests", "Buyers lack supply"],
                "keyPoints": ["Post-harvest loss"],
            },
            {
                "slideNumber": 2,
                "title": "Solution",
                "content": ["Solar cold storage", "Mobile marketplace"],
                "keyPoints": ["Pay-as-you-store"],
            },
        ],
        "insights": {
            "marketSize": "$2.5B",
            "revenueProjection": "$500K by Year 3",
            "competitiveAdvantage": "Hub network",
            "marketStrategy": "Cooperative partnerships",
        },
    }


@pytest.fixture
def pitch_request() -> GeneratePitchRequest:
    return GeneratePitchRequest(
        industry="Agriculture",
        country="Kenya",
        business_type="agritech startup",
        description="Solar cold storage for smallholder farmers",
        template="agritech",
        theme="savanna-green",
    )


@pytest.fixture
def resume_data() -> TemplateDocumentData:
    return TemplateDocumentData(
        name="Amina Otieno",
        headline="Product Engineer",
        email="amina@example.com",
        phone="+254 700 000 000",
        location="Nairobi",
        summary="Engineer building logistics software for East African agriculture.",
        skills=["Python", "FastAPI", "PostgreSQL", "Data pipelines"],
        sections=[
            DocumentSection(
                heading="Experience",
                items=[
                    "Lead engineer at a cold-chain startup serving 3,000 farmers",
                    "Built the buyer marketplace used across four counties",
                ],
            ),
            DocumentSection(heading="Education", items=["BSc Computer Science, University of Nairobi"]),
        ],
    )


# =============================================================================
# FastAPI Test Client
# =============================================================================

@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
