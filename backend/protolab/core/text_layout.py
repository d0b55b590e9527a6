"""Text sanitization and greedy word wrapping for PDF text runs."""

from __future__ import annotations

import re
from typing import Protocol

from reportlab.pdfbase import pdfmetrics

HELVETICA = "Helvetica"
HELVETICA_BOLD = "Helvetica-Bold"

# Standard Type 1 fonts only cover a Latin-1-ish encoding
_REPLACEMENTS = (
    ("→", "->"),  # right arrow
    ("•", "*"),   # bullet
    ("–", "-"),   # en dash
    ("—", "--"),  # em dash
    ("“", '"'),
    ("”", '"'),
    ("‘", "'"),
    ("’", "'"),
)
_NON_ASCII = re.compile(r"[^\x00-\x7F]")


class FontMetrics(Protocol):
    def width(self, text: str, size: float) -> float: ...


class StandardFont:
    """One of the PDF standard fonts, measured with ReportLab's AFM metrics."""

    def __init__(self, name: str):
        self.name = name

    def width(self, text: str, size: float) -> float:
        return pdfmetrics.stringWidth(text, self.name, size)

    def __repr__(self) -> str:
        return f"StandardFont({self.name!r})"


def sanitize_text(text: str) -> str:
    """Map typographic punctuation to ASCII and drop any other non-ASCII char."""
    for source, target in _REPLACEMENTS:
        text = text.replace(source, target)
    return _NON_ASCII.sub("", text)


def wrap_text(text: str, max_width: float, font: FontMetrics, font_size: float) -> list[str]:
    """Greedily pack whitespace-separated words into lines no wider than *max_width*.

    A word that is wider than *max_width* on its own gets a line to itself;
    words are never split.
    """
    lines: list[str] = []
    current = ""

    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if font.width(candidate, font_size) <= max_width:
            current = candidate
        elif current:
            lines.append(current)
            current = word
        else:
            lines.append(word)

    if current:
        lines.append(current)

    return lines
