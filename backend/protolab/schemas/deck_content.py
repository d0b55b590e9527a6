"""
Pydantic models for structured pitch deck content.

The AI deck-content agent outputs a ``PitchDeckContent`` instance, which is
then rendered into a PDF by ``protolab.core.pdf_renderer`` or into HTML by
``protolab.core.deck_template``.

Field names are snake_case; the provider's camelCase JSON keys
(``slideNumber``, ``keyPoints``, ...) are accepted as aliases.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class _ContentModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class PitchSlide(_ContentModel):
    slide_number: int = Field(ge=1)
    title: str
    content: list[str]
    key_points: list[str] = []
    image_prompt: str | None = None


class PitchInsights(_ContentModel):
    market_size: str
    revenue_projection: str
    competitive_advantage: str
    market_strategy: str


INSIGHT_HEADINGS = ("Market Size", "Revenue Projection", "Competitive Advantage", "Go-to-Market Strategy")


class PitchDeckContent(_ContentModel):
    title: str
    slides: list[PitchSlide]
    insights: PitchInsights | None = None
    executive_summary: str | None = None

    @model_validator(mode="after")
    def check_slide_numbers(self) -> PitchDeckContent:
        for position, slide in enumerate(self.slides, start=1):
            if slide.slide_number != position:
                raise ValueError(
                    f"slide numbers must run 1..{len(self.slides)} in order; "
                    f"got {slide.slide_number} at position {position}"
                )
        return self


def insight_sections(insights: PitchInsights | None) -> list[tuple[str, str]]:
    """The four insight sections as (heading, body), always in the same order.

    Missing insights give empty bodies.
    """
    if insights is None:
        return [(heading, "") for heading in INSIGHT_HEADINGS]
    bodies = (
        insights.market_size,
        insights.revenue_projection,
        insights.competitive_advantage,
        insights.market_strategy,
    )
    return list(zip(INSIGHT_HEADINGS, bodies))
