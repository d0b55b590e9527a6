"""
In-memory page model and its PDF serializer.

Renderers never talk to ReportLab directly: they append positioned draw
operations to ``Page`` objects and hand the finished ``RenderedDocument`` to
``serialize_document``. Keeping the operations around makes the output
inspectable (page count, text runs, watermark placement) without parsing
PDF bytes.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Literal, Union

from reportlab.pdfgen import canvas

A4_WIDTH = 595
A4_HEIGHT = 842


@dataclass(frozen=True)
class RGB:
    """Colour with channels in [0, 1]."""

    r: float
    g: float
    b: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)


BLACK = RGB(0, 0, 0)
WHITE = RGB(1, 1, 1)


@dataclass(frozen=True)
class DrawRect:
    x: float
    y: float
    width: float
    height: float
    color: RGB


@dataclass(frozen=True)
class DrawText:
    text: str
    x: float
    y: float
    size: float
    font: str
    color: RGB
    opacity: float = 1.0
    rotation: float = 0.0
    anchor: Literal["left", "centre"] = "left"


DrawOperation = Union[DrawRect, DrawText]


@dataclass
class Page:
    width: float = A4_WIDTH
    height: float = A4_HEIGHT
    operations: list[DrawOperation] = field(default_factory=list)

    def draw_rectangle(self, x: float, y: float, width: float, height: float, color: RGB) -> None:
        self.operations.append(DrawRect(x, y, width, height, color))

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        *,
        size: float,
        font: str,
        color: RGB,
        opacity: float = 1.0,
        rotation: float = 0.0,
        anchor: Literal["left", "centre"] = "left",
    ) -> None:
        self.operations.append(DrawText(text, x, y, size, font, color, opacity, rotation, anchor))

    @property
    def text_runs(self) -> list[DrawText]:
        return [op for op in self.operations if isinstance(op, DrawText)]

    @property
    def texts(self) -> list[str]:
        return [op.text for op in self.text_runs]


@dataclass
class RenderedDocument:
    title: str | None = None
    pages: list[Page] = field(default_factory=list)

    def add_page(self, width: float = A4_WIDTH, height: float = A4_HEIGHT) -> Page:
        page = Page(width=width, height=height)
        self.pages.append(page)
        return page


def _draw(pdf: canvas.Canvas, op: DrawOperation) -> None:
    if isinstance(op, DrawRect):
        pdf.setFillColorRGB(*op.color.as_tuple())
        pdf.rect(op.x, op.y, op.width, op.height, stroke=0, fill=1)
        return

    pdf.saveState()
    pdf.setFillColorRGB(*op.color.as_tuple())
    if op.opacity < 1.0:
        pdf.setFillAlpha(op.opacity)
    pdf.setFont(op.font, op.size)
    pdf.translate(op.x, op.y)
    if op.rotation:
        pdf.rotate(op.rotation)
    if op.anchor == "centre":
        pdf.drawCentredString(0, 0, op.text)
    else:
        pdf.drawString(0, 0, op.text)
    pdf.restoreState()


def serialize_document(document: RenderedDocument) -> bytes:
    """Write every page of *document* into a PDF and return the bytes."""
    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=(A4_WIDTH, A4_HEIGHT))
    pdf.setCreator("ProtoLab")
    if document.title:
        pdf.setTitle(document.title)

    for page in document.pages:
        pdf.setPageSize((page.width, page.height))
        for op in page.operations:
            _draw(pdf, op)
        pdf.showPage()

    pdf.save()
    return buffer.getvalue()
