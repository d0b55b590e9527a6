from fastapi import APIRouter, Query
from fastapi.responses import Response

from protolab.controllers import template_controller
from protolab.schemas.generation import ApplyTemplateRequest
from protolab.schemas.template import Template, TemplateCategory, TemplateDetail, TemplateTier

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=list[Template])
async def list_templates(
    tier: TemplateTier = Query(TemplateTier.free, description="Access tier of the caller"),
    category: TemplateCategory | None = Query(None, description="Filter by document category"),
):
    """List the templates available to the given tier."""
    return template_controller.list_templates(tier, category)


@router.get("/{template_id}", response_model=TemplateDetail)
async def get_template(
    template_id: str,
    include_premium: bool = Query(False),
):
    """Get a template with its resolved palette and layout variant."""
    return template_controller.get_template(template_id, include_premium)


@router.post("/{template_id}/apply", response_class=Response)
async def apply_template(template_id: str, payload: ApplyTemplateRequest):
    """Render document data with a template into a PDF download."""
    pdf = await template_controller.apply_template(template_id, payload)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{template_id}.pdf"'},
    )
