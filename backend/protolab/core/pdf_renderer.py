"""
Deterministic PDF renderer for pitch deck content.

Takes a ``PitchDeckContent`` instance and produces an A4 document with:
- a title page with a coloured banner
- one page per slide (header band, wrapped bullets, key insights)
- a closing market-insights page
- an optional diagonal watermark on every content page

A ``DeckStyle`` carries the palette and layout variant of a template. Each
layout variant has a decoration drawn underneath the content of every slide
and insights page; the default style draws none.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from protolab.core.document import (
    RGB,
    WHITE,
    Page,
    RenderedDocument,
    serialize_document,
)
from protolab.core.exceptions import DocumentGenerationError
from protolab.core.templates import LayoutKind, Palette, get_template_by_id, select_layout
from protolab.core.text_layout import (
    HELVETICA,
    HELVETICA_BOLD,
    StandardFont,
    sanitize_text,
    wrap_text,
)
from protolab.schemas.deck_content import PitchDeckContent, PitchInsights, PitchSlide, insight_sections

PRIMARY_COLOR = RGB(0.149, 0.388, 0.922)  # #2563EB
TEXT_COLOR = RGB(0.2, 0.2, 0.2)
LIGHT_GRAY = RGB(0.95, 0.95, 0.95)
WATERMARK_COLOR = RGB(0.9, 0.9, 0.9)
FOOTER_COLOR = RGB(0.7, 0.7, 0.7)

WATERMARK_TEXT = "UPGRADE TO REMOVE WATERMARK"
BULLET = "•"

CONTENT_WIDTH = 500
LEFT_MARGIN = 50
KEY_POINT_INDENT = 70

_regular = StandardFont(HELVETICA)


@dataclass(frozen=True)
class DeckStyle:
    palette: Palette
    layout: LayoutKind = LayoutKind.single_column
    # Branding line at the foot of every content page
    footer: str | None = None


DEFAULT_STYLE = DeckStyle(Palette(PRIMARY_COLOR, TEXT_COLOR, PRIMARY_COLOR))


def template_deck_style(template_id: str, include_premium: bool = False) -> DeckStyle:
    """Style a deck with a template's palette, layout and branding footer.

    Raises ``TemplateNotFoundError`` like ``select_layout``.
    """
    template = get_template_by_id(template_id, include_premium)
    palette, layout = select_layout(template_id, include_premium)
    return DeckStyle(palette, layout, footer=f"{template.name} | ProtoLab Generated")


def _tint(color: RGB, amount: float) -> RGB:
    """Mix *color* towards white; ``amount=1`` is white."""
    return RGB(*(c + (1 - c) * amount for c in color.as_tuple()))


# ---------------------------------------------------------------------------
# Layout decorations
# ---------------------------------------------------------------------------

def _plain_decoration(page: Page, palette: Palette) -> None:
    pass


def _side_strip_decoration(page: Page, palette: Palette) -> None:
    page.draw_rectangle(page.width - 100, 0, 100, page.height, _tint(palette.accent, 0.85))
    page.draw_rectangle(page.width - 104, 0, 4, page.height, palette.secondary)


def _grid_decoration(page: Page, palette: Palette) -> None:
    line_color = _tint(palette.accent, 0.6)
    for i in range(5):
        page.draw_rectangle(0, page.height - i * page.height / 5, page.width, 0.5, line_color)
    page.draw_rectangle(0, page.height - 83, page.width, 3, palette.secondary)


def _banded_decoration(page: Page, palette: Palette) -> None:
    page.draw_rectangle(0, 0, page.width, 20, palette.accent)
    page.draw_rectangle(0, page.height - 86, page.width, 6, palette.secondary)


DeckDecoration = Callable[[Page, Palette], None]

DECK_DECORATIONS: dict[LayoutKind, DeckDecoration] = {
    LayoutKind.single_column: _plain_decoration,
    LayoutKind.two_column: _side_strip_decoration,
    LayoutKind.modern_grid: _grid_decoration,
    LayoutKind.cultural_modern: _banded_decoration,
}


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------

def _draw_header(page: Page, title: str, primary: RGB) -> None:
    page.draw_rectangle(0, page.height - 80, page.width, 80, LIGHT_GRAY)
    page.draw_text(
        sanitize_text(title), LEFT_MARGIN, page.height - 50,
        size=24, font=HELVETICA_BOLD, color=primary,
    )


def _draw_footer(page: Page, footer: str) -> None:
    page.draw_text(sanitize_text(footer), LEFT_MARGIN, 28, size=8, font=HELVETICA, color=FOOTER_COLOR)


def _draw_watermark(page: Page) -> None:
    page.draw_text(
        WATERMARK_TEXT, page.width / 2, page.height / 2,
        size=20, font=HELVETICA_BOLD, color=WATERMARK_COLOR,
        opacity=0.3, rotation=-45, anchor="centre",
    )


def _render_title_page(document: RenderedDocument, title: str, primary: RGB) -> None:
    page = document.add_page()
    page.draw_rectangle(0, page.height - 200, page.width, 200, primary)
    page.draw_text(sanitize_text(title), LEFT_MARGIN, page.height - 100, size=32, font=HELVETICA_BOLD, color=WHITE)
    page.draw_text("AI-Generated Pitch Deck", LEFT_MARGIN, page.height - 140, size=16, font=HELVETICA, color=WHITE)
    page.draw_text("Powered by ProtoLab", LEFT_MARGIN, page.height - 170, size=12, font=HELVETICA, color=WHITE)


def _render_slide(page: Page, slide: PitchSlide, total: int, primary: RGB) -> None:
    _draw_header(page, slide.title, primary)
    page.draw_text(
        f"{slide.slide_number}/{total}", page.width - 80, page.height - 30,
        size=12, font=HELVETICA, color=TEXT_COLOR,
    )

    # Content past the bottom margin is not carried onto a new page
    y = page.height - 120
    for item in slide.content:
        for line in wrap_text(sanitize_text(item), CONTENT_WIDTH, _regular, 14):
            page.draw_text(f"{BULLET} {line}", LEFT_MARGIN, y, size=14, font=HELVETICA, color=TEXT_COLOR)
            y -= 20
        y -= 10

    if slide.key_points:
        y -= 20
        page.draw_text("Key Insights:", LEFT_MARGIN, y, size=16, font=HELVETICA_BOLD, color=primary)
        y -= 30
        for point in slide.key_points:
            for line in wrap_text(sanitize_text(point), CONTENT_WIDTH, _regular, 12):
                page.draw_text(f"{BULLET} {line}", KEY_POINT_INDENT, y, size=12, font=HELVETICA, color=TEXT_COLOR)
                y -= 18


def _render_insights(page: Page, insights: PitchInsights | None, primary: RGB) -> None:
    _draw_header(page, "Market Insights & Analysis", primary)

    y = page.height - 120
    for heading, body in insight_sections(insights):
        page.draw_text(heading, LEFT_MARGIN, y, size=16, font=HELVETICA_BOLD, color=primary)
        y -= 25
        for line in wrap_text(sanitize_text(body), CONTENT_WIDTH, _regular, 12):
            page.draw_text(line, LEFT_MARGIN, y, size=12, font=HELVETICA, color=TEXT_COLOR)
            y -= 18
        y -= 20


def _content_page(document: RenderedDocument, style: DeckStyle) -> Page:
    page = document.add_page()
    DECK_DECORATIONS[style.layout](page, style.palette)
    return page


def _finish_content_page(page: Page, style: DeckStyle, watermark: bool) -> None:
    if style.footer:
        _draw_footer(page, style.footer)
    if watermark:
        _draw_watermark(page)


def render_pitch_deck(
    content: PitchDeckContent,
    watermark: bool = False,
    style: DeckStyle = DEFAULT_STYLE,
) -> RenderedDocument:
    """Lay out *content* as title page + one page per slide + insights page."""
    primary = style.palette.primary
    document = RenderedDocument(title=sanitize_text(content.title))
    _render_title_page(document, content.title, primary)

    total = len(content.slides)
    for slide in content.slides:
        page = _content_page(document, style)
        _render_slide(page, slide, total, primary)
        _finish_content_page(page, style, watermark)

    page = _content_page(document, style)
    _render_insights(page, content.insights, primary)
    _finish_content_page(page, style, watermark)

    return document


def generate_pitch_deck_pdf(
    content: PitchDeckContent,
    watermark: bool = False,
    style: DeckStyle = DEFAULT_STYLE,
) -> bytes:
    """Render *content* to PDF bytes.

    Raises ``DocumentGenerationError`` with ``stage`` set to ``"render"`` or
    ``"serialize"``; the underlying exception is chained.
    """
    try:
        document = render_pitch_deck(content, watermark, style)
    except Exception as exc:
        raise DocumentGenerationError("render", str(exc)) from exc

    try:
        return serialize_document(document)
    except Exception as exc:
        raise DocumentGenerationError("serialize", str(exc)) from exc
