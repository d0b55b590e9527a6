"""
Static document templates and the layouts that draw them.

A template pairs a colour palette with a layout identifier. ``select_layout``
resolves both for a template id; ``apply_template`` renders
``TemplateDocumentData`` with them into a one-page A4 PDF.

Cosmetic defects never block rendering: malformed hex colours become black
and unknown layout identifiers fall back to the single-column layout.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from protolab.core.document import (
    BLACK,
    RGB,
    WHITE,
    Page,
    RenderedDocument,
    serialize_document,
)
from protolab.core.exceptions import DocumentGenerationError, TemplateNotFoundError
from protolab.core.text_layout import (
    HELVETICA,
    HELVETICA_BOLD,
    StandardFont,
    sanitize_text,
    wrap_text,
)
from protolab.schemas.template import (
    Template,
    TemplateCategory,
    TemplateColors,
    TemplateDocumentData,
    TemplateTier,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Template catalogue
# ---------------------------------------------------------------------------

FREE_TEMPLATES: tuple[Template, ...] = (
    Template(
        id="modern_minimal",
        name="Modern Minimal",
        category=TemplateCategory.resume,
        tier=TemplateTier.free,
        preview="/templates/modern-minimal.jpg",
        colors=TemplateColors(primary="#2563eb", secondary="#64748b", accent="#0f172a"),
        layout="single_column",
    ),
    Template(
        id="tech_startup",
        name="Tech Startup",
        category=TemplateCategory.resume,
        tier=TemplateTier.free,
        preview="/templates/tech-startup.jpg",
        colors=TemplateColors(primary="#7c3aed", secondary="#6b7280", accent="#111827"),
        layout="two_column",
    ),
    Template(
        id="creative_pro",
        name="Creative Professional",
        category=TemplateCategory.resume,
        tier=TemplateTier.free,
        preview="/templates/creative-pro.jpg",
        colors=TemplateColors(primary="#059669", secondary="#6b7280", accent="#1f2937"),
        layout="modern_grid",
    ),
    Template(
        id="executive_classic",
        name="Executive Classic",
        category=TemplateCategory.resume,
        tier=TemplateTier.free,
        preview="/templates/executive-classic.jpg",
        colors=TemplateColors(primary="#dc2626", secondary="#6b7280", accent="#374151"),
        layout="traditional",
    ),
    Template(
        id="african_heritage",
        name="African Heritage",
        category=TemplateCategory.resume,
        tier=TemplateTier.free,
        preview="/templates/african-heritage.jpg",
        colors=TemplateColors(primary="#f59e0b", secondary="#8b5cf6", accent="#065f46"),
        layout="cultural_modern",
    ),
    # Pitch deck styles
    Template(
        id="african_enterprise",
        name="African Enterprise",
        category=TemplateCategory.pitch_deck,
        tier=TemplateTier.free,
        preview="/templates/african-enterprise.jpg",
        colors=TemplateColors(primary="#b45309", secondary="#065f46", accent="#f59e0b"),
        layout="cultural_modern",
    ),
    Template(
        id="agritech_green",
        name="AgriTech Green",
        category=TemplateCategory.pitch_deck,
        tier=TemplateTier.free,
        preview="/templates/agritech-green.jpg",
        colors=TemplateColors(primary="#15803d", secondary="#65a30d", accent="#4d7c0f"),
        layout="two_column",
    ),
    Template(
        id="fintech_blue",
        name="FinTech Professional",
        category=TemplateCategory.pitch_deck,
        tier=TemplateTier.free,
        preview="/templates/fintech-blue.jpg",
        colors=TemplateColors(primary="#1d4ed8", secondary="#0f172a", accent="#0ea5e9"),
        layout="modern_grid",
    ),
)

PREMIUM_TEMPLATES: tuple[Template, ...] = (
    Template(
        id="silicon_valley",
        name="Silicon Valley Pro",
        category=TemplateCategory.resume,
        tier=TemplateTier.premium,
        preview="/templates/silicon-valley.jpg",
        colors=TemplateColors(primary="#3b82f6", secondary="#8b5cf6", accent="#1e293b"),
        layout="tech_modern",
    ),
    Template(
        id="investment_banker",
        name="Investment Banking",
        category=TemplateCategory.resume,
        tier=TemplateTier.premium,
        preview="/templates/investment-banker.jpg",
        colors=TemplateColors(primary="#1f2937", secondary="#6b7280", accent="#gold"),
        layout="finance_executive",
    ),
    Template(
        id="venture_capital",
        name="Venture Capital",
        category=TemplateCategory.business_plan,
        tier=TemplateTier.premium,
        preview="/templates/vc-ready.jpg",
        colors=TemplateColors(primary="#1e40af", secondary="#3730a3", accent="#0ea5e9"),
        layout="investor_focused",
    ),
    Template(
        id="african_unicorn",
        name="African Unicorn",
        category=TemplateCategory.business_plan,
        tier=TemplateTier.premium,
        preview="/templates/african-unicorn.jpg",
        colors=TemplateColors(primary="#16a34a", secondary="#ca8a04", accent="#dc2626"),
        layout="startup_showcase",
    ),
    Template(
        id="fintech_disruptor",
        name="FinTech Disruptor",
        category=TemplateCategory.business_plan,
        tier=TemplateTier.premium,
        preview="/templates/fintech-disruptor.jpg",
        colors=TemplateColors(primary="#7c2d12", secondary="#059669", accent="#0369a1"),
        layout="tech_financial",
    ),
)


def get_all_templates() -> list[Template]:
    return [*FREE_TEMPLATES, *PREMIUM_TEMPLATES]


def get_templates_by_tier(tier: TemplateTier) -> list[Template]:
    """Free users see the free set; premium users see everything."""
    if tier == TemplateTier.free:
        return list(FREE_TEMPLATES)
    return get_all_templates()


def get_template_by_id(template_id: str, include_premium: bool = False) -> Template:
    candidates = get_all_templates() if include_premium else FREE_TEMPLATES
    for template in candidates:
        if template.id == template_id:
            return template
    raise TemplateNotFoundError(template_id)


# ---------------------------------------------------------------------------
# Colours
# ---------------------------------------------------------------------------

_HEX_COLOR = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


@dataclass(frozen=True)
class ParsedColor:
    color: RGB
    defaulted: bool = False


def parse_hex_color(value: str) -> ParsedColor:
    """Parse ``#rrggbb`` (the ``#`` is optional) into [0, 1] RGB.

    Anything else yields black with ``defaulted=True``.
    """
    match = _HEX_COLOR.fullmatch(value)
    if not match:
        logger.debug("Malformed hex colour %r, using black", value)
        return ParsedColor(BLACK, defaulted=True)
    r, g, b = (int(channel, 16) / 255 for channel in match.groups())
    return ParsedColor(RGB(r, g, b))


@dataclass(frozen=True)
class Palette:
    primary: RGB
    secondary: RGB
    accent: RGB

    @classmethod
    def from_colors(cls, colors: TemplateColors) -> Palette:
        return cls(
            primary=parse_hex_color(colors.primary).color,
            secondary=parse_hex_color(colors.secondary).color,
            accent=parse_hex_color(colors.accent).color,
        )


# ---------------------------------------------------------------------------
# Layouts
# ---------------------------------------------------------------------------

class LayoutKind(str, Enum):
    single_column = "single_column"
    two_column = "two_column"
    modern_grid = "modern_grid"
    cultural_modern = "cultural_modern"

    @classmethod
    def resolve(cls, identifier: str) -> LayoutKind:
        """Map a template's layout string to a variant, defaulting to single column."""
        try:
            return cls(identifier)
        except ValueError:
            return cls.single_column


TEXT_COLOR = RGB(0.15, 0.15, 0.15)
MUTED_WHITE = RGB(0.9, 0.9, 0.9)

_regular = StandardFont(HELVETICA)


def _draw_paragraph(page: Page, text: str, x: float, y: float, width: float, size: float, color: RGB) -> float:
    leading = size + 4
    for line in wrap_text(sanitize_text(text), width, _regular, size):
        page.draw_text(line, x, y, size=size, font=HELVETICA, color=color)
        y -= leading
    return y


def _draw_sections(
    page: Page,
    data: TemplateDocumentData,
    x: float,
    y: float,
    width: float,
    heading_color: RGB,
) -> float:
    if data.summary:
        page.draw_text("PROFILE", x, y, size=13, font=HELVETICA_BOLD, color=heading_color)
        y = _draw_paragraph(page, data.summary, x, y - 20, width, 11, TEXT_COLOR) - 12

    for section in data.sections:
        page.draw_text(sanitize_text(section.heading).upper(), x, y, size=13, font=HELVETICA_BOLD, color=heading_color)
        y -= 20
        for item in section.items:
            lines = wrap_text(sanitize_text(item), width - 12, _regular, 11)
            for index, line in enumerate(lines):
                prefix = "• " if index == 0 else "  "
                page.draw_text(f"{prefix}{line}", x, y, size=11, font=HELVETICA, color=TEXT_COLOR)
                y -= 15
        y -= 12
    return y


def _single_column_layout(page: Page, data: TemplateDocumentData, palette: Palette) -> None:
    top = page.height
    page.draw_text(sanitize_text(data.name), 50, top - 70, size=26, font=HELVETICA_BOLD, color=palette.primary)
    if data.headline:
        page.draw_text(sanitize_text(data.headline), 50, top - 92, size=14, font=HELVETICA, color=palette.secondary)
    if data.contact_line:
        page.draw_text(sanitize_text(data.contact_line), 50, top - 110, size=10, font=HELVETICA, color=TEXT_COLOR)
    page.draw_rectangle(50, top - 122, page.width - 100, 2, palette.accent)

    y = top - 150
    if data.skills:
        page.draw_text("SKILLS", 50, y, size=13, font=HELVETICA_BOLD, color=palette.primary)
        y = _draw_paragraph(page, ", ".join(data.skills), 50, y - 20, page.width - 100, 11, TEXT_COLOR) - 12
    _draw_sections(page, data, 50, y, page.width - 100, palette.primary)


def _two_column_layout(page: Page, data: TemplateDocumentData, palette: Palette) -> None:
    sidebar_width = 190
    top = page.height
    page.draw_rectangle(0, 0, sidebar_width, page.height, palette.primary)

    y = _draw_paragraph(page, data.name, 20, top - 60, sidebar_width - 40, 18, WHITE)
    if data.headline:
        y = _draw_paragraph(page, data.headline, 20, y - 4, sidebar_width - 40, 11, MUTED_WHITE)

    y -= 20
    page.draw_text("CONTACT", 20, y, size=12, font=HELVETICA_BOLD, color=WHITE)
    y -= 18
    for part in (data.email, data.phone, data.location):
        if part:
            y = _draw_paragraph(page, part, 20, y, sidebar_width - 40, 9, MUTED_WHITE)

    if data.skills:
        y -= 20
        page.draw_text("SKILLS", 20, y, size=12, font=HELVETICA_BOLD, color=WHITE)
        y -= 18
        for skill in data.skills:
            y = _draw_paragraph(page, f"- {skill}", 20, y, sidebar_width - 40, 10, MUTED_WHITE)

    _draw_sections(page, data, sidebar_width + 25, top - 60, page.width - sidebar_width - 50, palette.primary)


def _modern_grid_layout(page: Page, data: TemplateDocumentData, palette: Palette) -> None:
    top = page.height
    page.draw_rectangle(0, top - 120, page.width, 120, palette.primary)
    page.draw_text(sanitize_text(data.name), 30, top - 60, size=28, font=HELVETICA_BOLD, color=WHITE)
    if data.contact_line:
        page.draw_text(sanitize_text(data.contact_line), 30, top - 90, size=12, font=HELVETICA, color=MUTED_WHITE)

    y = top - 160
    if data.skills:
        page.draw_text("CORE COMPETENCIES", 30, y, size=14, font=HELVETICA_BOLD, color=palette.primary)
        y -= 30
        skills = data.skills[:8]
        for i in range(0, len(skills), 2):
            page.draw_text(f"• {sanitize_text(skills[i])}", 30, y, size=11, font=HELVETICA, color=BLACK)
            if i + 1 < len(skills):
                page.draw_text(f"• {sanitize_text(skills[i + 1])}", 300, y, size=11, font=HELVETICA, color=BLACK)
            y -= 20
        y -= 15

    _draw_sections(page, data, 30, y, page.width - 60, palette.primary)


def _cultural_modern_layout(page: Page, data: TemplateDocumentData, palette: Palette) -> None:
    top = page.height
    stripe = 12
    page.draw_rectangle(0, 0, stripe, page.height, palette.accent)
    page.draw_rectangle(stripe, top - 110, page.width - stripe, 110, palette.primary)
    page.draw_rectangle(stripe, top - 116, page.width - stripe, 6, palette.secondary)

    page.draw_text(sanitize_text(data.name), 40, top - 55, size=26, font=HELVETICA_BOLD, color=WHITE)
    if data.headline:
        page.draw_text(sanitize_text(data.headline), 40, top - 78, size=13, font=HELVETICA, color=WHITE)
    if data.contact_line:
        page.draw_text(sanitize_text(data.contact_line), 40, top - 98, size=10, font=HELVETICA, color=MUTED_WHITE)

    y = top - 150
    if data.skills:
        page.draw_text("STRENGTHS", 40, y, size=13, font=HELVETICA_BOLD, color=palette.accent)
        y = _draw_paragraph(page, " / ".join(data.skills), 40, y - 20, page.width - 80, 11, TEXT_COLOR) - 12
    _draw_sections(page, data, 40, y, page.width - 80, palette.accent)


LayoutRenderer = Callable[[Page, TemplateDocumentData, Palette], None]

LAYOUT_RENDERERS: dict[LayoutKind, LayoutRenderer] = {
    LayoutKind.single_column: _single_column_layout,
    LayoutKind.two_column: _two_column_layout,
    LayoutKind.modern_grid: _modern_grid_layout,
    LayoutKind.cultural_modern: _cultural_modern_layout,
}


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def select_layout(template_id: str, include_premium: bool = False) -> tuple[Palette, LayoutKind]:
    """Resolve the palette and layout variant for *template_id*.

    Raises ``TemplateNotFoundError`` when the id is not in the free set (or
    in the premium set, when *include_premium* is true).
    """
    template = get_template_by_id(template_id, include_premium)
    return Palette.from_colors(template.colors), LayoutKind.resolve(template.layout)


def render_template_document(
    template_id: str,
    data: TemplateDocumentData,
    include_premium: bool = False,
) -> RenderedDocument:
    palette, layout = select_layout(template_id, include_premium)

    try:
        document = RenderedDocument(title=sanitize_text(data.name))
        LAYOUT_RENDERERS[layout](document.add_page(), data, palette)
    except Exception as exc:
        raise DocumentGenerationError("render", str(exc)) from exc

    return document


def apply_template(
    template_id: str,
    data: TemplateDocumentData,
    include_premium: bool = False,
) -> bytes:
    """Render *data* with the template's palette and layout into PDF bytes."""
    document = render_template_document(template_id, data, include_premium)

    try:
        return serialize_document(document)
    except Exception as exc:
        raise DocumentGenerationError("serialize", str(exc)) from exc
