import logging

from fastapi import HTTPException
from starlette.concurrency import run_in_threadpool

from protolab.core.ai_generators import generate_pitch_deck_content
from protolab.core.deck_template import render_pitch_deck_html
from protolab.core.exceptions import ContentGenerationError, DocumentGenerationError, TemplateNotFoundError
from protolab.core.pdf_renderer import DEFAULT_STYLE, generate_pitch_deck_pdf, template_deck_style
from protolab.schemas.deck_content import PitchDeckContent
from protolab.schemas.generation import GeneratedPitchDeck, GeneratePitchRequest, RenderPitchRequest

logger = logging.getLogger(__name__)

GENERATION_FAILED = "Failed to generate the document."


async def generate_pitch(request: GeneratePitchRequest) -> GeneratedPitchDeck:
    """Produce structured pitch-deck content from the AI provider."""
    try:
        return await generate_pitch_deck_content(request)
    except ContentGenerationError as e:
        logger.error("Pitch content generation failed: %s", e)
        raise HTTPException(status_code=502, detail="Failed to generate pitch deck content.")


async def render_pitch_pdf(payload: RenderPitchRequest) -> bytes:
    """Render pitch-deck content to PDF, optionally styled by a template."""
    style = DEFAULT_STYLE
    if payload.template_id:
        try:
            style = template_deck_style(payload.template_id, payload.include_premium)
        except TemplateNotFoundError:
            raise HTTPException(status_code=404, detail="Template not found")

    try:
        return await run_in_threadpool(generate_pitch_deck_pdf, payload.content, payload.watermark, style)
    except DocumentGenerationError as e:
        logger.exception("Pitch deck PDF generation failed at %s stage", e.stage)
        raise HTTPException(status_code=500, detail=GENERATION_FAILED)


def render_pitch_html(content: PitchDeckContent) -> str:
    return render_pitch_deck_html(content)
