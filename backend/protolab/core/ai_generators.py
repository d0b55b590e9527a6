"""
AI content generation for ProtoLab pitch decks.

Agents
------
- **deck_content_agent** – Structured ``PitchDeckContent`` for a 10-slide deck

The agent carries no model of its own; each run uses the model named by the
configured provider (OpenAI or DeepSeek). When the provider call fails and
``CONTENT_FALLBACK_ENABLED`` is set, canned content is returned instead and
labelled ``source="fallback"``.
"""

import logging

from pydantic_ai import Agent

from protolab.core.config import settings
from protolab.core.exceptions import ContentGenerationError
from protolab.schemas.deck_content import PitchDeckContent, PitchInsights, PitchSlide
from protolab.schemas.generation import GeneratedPitchDeck, GeneratePitchRequest

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# 1.  Deck content agent  (structured JSON for pitch deck slides)
# ---------------------------------------------------------------------------

_DECK_CONTENT_SYSTEM_PROMPT = """\
You are a professional business consultant and pitch deck expert specializing \
in African markets.  Create comprehensive, data-driven pitch decks with \
specific market insights.

## Output rules

- Return exactly 10 slides, numbered 1 to 10 in order.
- Each slide has a compelling title, 3-5 content points and 1-3 key points.
- Use concrete numbers relevant to the target country wherever possible.
- Fill every insights field: market size, 3-year revenue projection, \
  competitive advantage, go-to-market strategy.
- Plain text only; no markdown inside strings.
"""

deck_content_agent = Agent(
    output_type=PitchDeckContent,
    system_prompt=_DECK_CONTENT_SYSTEM_PROMPT,
    retries=3,
)


# ---------------------------------------------------------------------------
# 2.  Prompt building
# ---------------------------------------------------------------------------

TEMPLATE_FOCUS = {
    "modern-business": "Focus on clean metrics, KPIs, and corporate governance. Emphasize scalability and operational efficiency.",
    "agritech": "Highlight sustainability metrics, farm-to-market solutions, climate resilience, and agricultural innovation.",
    "tech-startup": "Emphasize technology stack, user acquisition, digital transformation, and scalability metrics.",
    "healthcare": "Focus on patient outcomes, regulatory pathways, healthcare accessibility, and clinical validation.",
    "fintech": "Highlight financial inclusion, mobile payments, regulatory compliance, and transaction volumes.",
    "social-impact": "Emphasize social metrics, community impact, SDG alignment, and measurable social outcomes.",
    "creative": "Focus on brand storytelling, cultural resonance, creative differentiation, and audience engagement.",
    "education": "Highlight learning outcomes, educational technology adoption, and skill development metrics.",
}

THEME_GUIDANCE = {
    "ubuntu-spirit": 'Incorporate Ubuntu philosophy: "I am because we are" - emphasize community collaboration, shared success, and collective growth.',
    "sahara-gold": "Reflect desert resilience, ancient trade routes, and golden opportunities - emphasize endurance, value creation, and strategic positioning.",
    "savanna-green": "Channel natural growth patterns, ecosystem thinking, and environmental harmony - focus on organic expansion and sustainable practices.",
    "ocean-blue": "Emphasize vast possibilities, coastal trade networks, and maritime connections - highlight global reach and fluid adaptation.",
    "sunset-orange": "Capture warmth, energy, and new beginnings - focus on optimism, transformation, and emerging opportunities.",
    "earth-brown": "Ground in traditional values, stability, and organic growth - emphasize heritage, reliability, and authentic development.",
}

DECK_STRUCTURE = (
    "Problem Statement",
    "Solution Overview",
    "Market Opportunity & Size",
    "Business Model",
    "Financial Projections (3-year)",
    "Competition Analysis",
    "Go-to-Market Strategy",
    "Team & Expertise",
    "Funding Requirements",
    "Next Steps & Milestones",
)


def build_pitch_prompt(request: GeneratePitchRequest) -> str:
    """Assemble the user prompt for *request*.

    Unknown template or theme keys are ignored rather than rejected.
    """
    lines = [
        f"Generate a professional 10-slide pitch deck for a {request.business_type} business "
        f"in the {request.industry} sector operating in {request.country}."
    ]
    if request.description:
        lines.append(f"Business description: {request.description}")

    focus = TEMPLATE_FOCUS.get(request.template or "")
    if focus:
        lines.append(f"TEMPLATE FOCUS: {focus}")
    theme = THEME_GUIDANCE.get(request.theme or "")
    if theme:
        lines.append(f"CULTURAL THEME: {theme}")

    lines.append("")
    lines.append("Create a pitch deck with this structure:")
    lines.extend(f"{i}. {title}" for i, title in enumerate(DECK_STRUCTURE, start=1))
    lines.append("")
    lines.append(f"Include specific data points relevant to the {request.country} market.")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# 3.  Fallback content
# ---------------------------------------------------------------------------

def fallback_pitch_content(request: GeneratePitchRequest) -> PitchDeckContent:
    """Canned 10-slide deck used when the provider is unavailable."""
    industry, country = request.industry, request.country
    business = request.business_type

    bodies = (
        ([f"{industry} sector faces significant challenges in {country}",
          "Market inefficiencies create opportunities for innovation",
          "Traditional solutions are inadequate for modern needs"],
         ["Market gap", "Customer pain points", "Opportunity size"]),
        ([request.description or f"Innovative {industry} solution tailored for {country}",
          "Technology-driven approach to market problems",
          "Scalable and sustainable business model"],
         ["Product overview", "Key features", "Unique value proposition"]),
        ([f"{country} {industry} market showing strong growth",
          "Expanding digital adoption across Africa",
          "Government support for innovation initiatives"],
         ["Total addressable market", "Growth rate"]),
        ([f"Subscription and transaction revenue from {business} customers",
          "Tiered pricing for individuals and enterprises",
          "Partnership revenue from distribution channels"],
         ["Recurring revenue", "Multiple revenue streams"]),
        (["Year 1: pilot customers and product-market fit",
          "Year 2: regional expansion and positive unit economics",
          "Year 3: break-even and multi-country presence"],
         ["Path to profitability"]),
        ([f"Incumbent {industry} providers focus on urban, high-income segments",
          "Informal alternatives lack reliability and scale",
          "Local market expertise is hard to replicate"],
         ["Defensible positioning"]),
        (["Digital-first acquisition through mobile channels",
          "Community ambassadors in priority regions",
          "Strategic partnerships with established distributors"],
         ["Low customer acquisition cost"]),
        ([f"Founders with operating experience in {country}",
          f"Advisors from the {industry} industry",
          "Engineering team with mobile and data expertise"],
         ["Execution capability"]),
        (["Seed round to fund product and first market launch",
          "Use of funds: product, growth, operations",
          "18-month runway to key milestones"],
         ["Clear capital plan"]),
        (["Complete pilot and publish impact metrics",
          "Launch in two additional markets",
          "Close strategic partnerships"],
         ["Milestones for the next 12 months"]),
    )

    slides = [
        PitchSlide(slide_number=i, title=title, content=content, key_points=key_points)
        for i, (title, (content, key_points)) in enumerate(zip(DECK_STRUCTURE, bodies), start=1)
    ]

    return PitchDeckContent(
        title=f"{business[:1].upper()}{business[1:]} Pitch Deck",
        slides=slides,
        insights=PitchInsights(
            market_size=f"{country} {industry} market valued at $2.5B+",
            revenue_projection="$500K projected revenue by Year 3",
            competitive_advantage="Local market expertise and innovative technology stack",
            market_strategy="Digital-first approach with community-driven growth",
        ),
    )


# ===================================================================
# Orchestration
# ===================================================================

async def generate_pitch_deck_content(request: GeneratePitchRequest) -> GeneratedPitchDeck:
    """Ask the configured provider for pitch-deck content.

    Falls back to ``fallback_pitch_content`` when the call fails and
    fallback is enabled; otherwise raises ``ContentGenerationError``.
    """
    provider = settings.ai_provider_name
    logger.info("Generating pitch deck with %s (%s)", provider, settings.ai_model_name)

    try:
        result = await deck_content_agent.run(build_pitch_prompt(request), model=settings.ai_model_name)
        return GeneratedPitchDeck(content=result.output, source="ai", provider=provider)
    except Exception as exc:
        if not settings.CONTENT_FALLBACK_ENABLED:
            raise ContentGenerationError(f"{provider} content generation failed: {exc}") from exc
        logger.warning("%s content generation failed, serving fallback content", provider, exc_info=True)

    return GeneratedPitchDeck(content=fallback_pitch_content(request), source="fallback", provider=provider)
