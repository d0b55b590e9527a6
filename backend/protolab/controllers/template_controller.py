import logging

from fastapi import HTTPException
from starlette.concurrency import run_in_threadpool

from protolab.controllers.generation_controller import GENERATION_FAILED
from protolab.core import templates
from protolab.core.exceptions import DocumentGenerationError, TemplateNotFoundError
from protolab.schemas.generation import ApplyTemplateRequest
from protolab.schemas.template import Template, TemplateCategory, TemplateDetail, TemplateTier

logger = logging.getLogger(__name__)


def list_templates(tier: TemplateTier, category: TemplateCategory | None = None) -> list[Template]:
    result = templates.get_templates_by_tier(tier)
    if category is not None:
        result = [t for t in result if t.category == category]
    return result


def get_template(template_id: str, include_premium: bool) -> TemplateDetail:
    try:
        template = templates.get_template_by_id(template_id, include_premium)
        palette, layout = templates.select_layout(template_id, include_premium)
    except TemplateNotFoundError:
        raise HTTPException(status_code=404, detail="Template not found")

    return TemplateDetail(
        template=template,
        palette={
            "primary": palette.primary.as_tuple(),
            "secondary": palette.secondary.as_tuple(),
            "accent": palette.accent.as_tuple(),
        },
        layout=layout.value,
    )


async def apply_template(template_id: str, payload: ApplyTemplateRequest) -> bytes:
    """Render the payload's document data with *template_id* into a PDF."""
    try:
        return await run_in_threadpool(
            templates.apply_template, template_id, payload.data, payload.include_premium
        )
    except TemplateNotFoundError:
        raise HTTPException(status_code=404, detail="Template not found")
    except DocumentGenerationError as e:
        logger.exception("Template %s failed at %s stage", template_id, e.stage)
        raise HTTPException(status_code=500, detail=GENERATION_FAILED)
