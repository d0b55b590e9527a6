from enum import Enum

from pydantic import BaseModel, ConfigDict


class TemplateCategory(str, Enum):
    resume = "resume"
    business_plan = "business_plan"
    pitch_deck = "pitch_deck"


class TemplateTier(str, Enum):
    free = "free"
    premium = "premium"


class TemplateColors(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary: str
    secondary: str
    accent: str


class Template(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    category: TemplateCategory
    tier: TemplateTier
    preview: str
    colors: TemplateColors
    layout: str


class DocumentSection(BaseModel):
    heading: str
    items: list[str] = []


class TemplateDocumentData(BaseModel):
    """Document data a template is applied to (resume or business plan)."""

    name: str
    headline: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    summary: str | None = None
    skills: list[str] = []
    sections: list[DocumentSection] = []

    @property
    def contact_line(self) -> str:
        return " | ".join(part for part in (self.email, self.phone, self.location) if part)


class TemplateDetail(BaseModel):
    template: Template
    # [0, 1] RGB triples keyed by role: primary, secondary, accent
    palette: dict[str, tuple[float, float, float]]
    layout: str
