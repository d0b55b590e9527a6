from typing import Literal

import pydantic
from pydantic.alias_generators import to_camel

from protolab.schemas.deck_content import PitchDeckContent
from protolab.schemas.template import TemplateDocumentData


class _CamelModel(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GeneratePitchRequest(_CamelModel):
    industry: str = pydantic.Field(min_length=1)
    country: str = pydantic.Field(min_length=1)
    business_type: str = pydantic.Field(min_length=1)
    description: str | None = None
    # Content focus ("agritech", "fintech", ...) and cultural theme ("ubuntu-spirit", ...)
    template: str | None = None
    theme: str | None = None


class GeneratedPitchDeck(_CamelModel):
    content: PitchDeckContent
    source: Literal["ai", "fallback"]
    provider: str


class RenderPitchRequest(_CamelModel):
    content: PitchDeckContent
    watermark: bool = False
    # Optional template whose palette, layout and branding style the deck
    template_id: str | None = None
    include_premium: bool = False


class ApplyTemplateRequest(_CamelModel):
    data: TemplateDocumentData
    include_premium: bool = False
