from fastapi import APIRouter
from fastapi.responses import HTMLResponse, Response

from protolab.controllers import generation_controller
from protolab.schemas.deck_content import PitchDeckContent
from protolab.schemas.generation import GeneratedPitchDeck, GeneratePitchRequest, RenderPitchRequest

router = APIRouter(prefix="/pitch", tags=["pitch"])


@router.post("/generate", response_model=GeneratedPitchDeck)
async def generate_pitch(payload: GeneratePitchRequest):
    """Generate structured pitch-deck content with the configured AI provider."""
    return await generation_controller.generate_pitch(payload)


@router.post("/pdf", response_class=Response)
async def render_pitch_pdf(payload: RenderPitchRequest):
    """Render pitch-deck content to a PDF download."""
    pdf = await generation_controller.render_pitch_pdf(payload)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="pitch-deck.pdf"'},
    )


@router.post("/html", response_class=HTMLResponse)
async def render_pitch_html(payload: PitchDeckContent):
    """Render pitch-deck content as a self-contained HTML presentation."""
    return HTMLResponse(content=generation_controller.render_pitch_html(payload))
