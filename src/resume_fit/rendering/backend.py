"""Drawing and measuring primitives backed by fpdf2.

The renderer only depends on the :class:`TextBackend` protocol; the fpdf2
implementation draws with the standard PDF core fonts, which cover the
latin-1 repertoire.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Protocol

from fpdf import FPDF

from resume_fit.constants import layout_constants as lc

__all__ = ["FONT_FAMILY", "FpdfBackend", "TextBackend", "sanitize_text"]

FONT_FAMILY = "Helvetica"

# Fixed so identical inputs serialize to identical bytes.
_CREATION_DATE = datetime(2024, 1, 1, tzinfo=UTC)

_REPLACEMENTS = {
    "‘": "'",
    "’": "'",
    "“": '"',
    "”": '"',
    "–": "-",
    "—": "-",
    "•": "\xb7",
    "▪": "\xb7",
    "‣": ">",
    "◦": "o",
    "…": "...",
    " ": " ",
}


def sanitize_text(text: str) -> str:
    """Coerce *text* into the latin-1 repertoire of the core fonts."""
    for char, replacement in _REPLACEMENTS.items():
        text = text.replace(char, replacement)
    return text.encode("latin-1", errors="replace").decode("latin-1")


class TextBackend(Protocol):
    """Primitives the paginating renderer draws with.

    Coordinates are points from the top-left corner; ``text`` positions the
    baseline at ``y``.
    """

    page_width: float
    page_height: float

    @property
    def page_count(self) -> int: ...

    def add_page(self) -> None: ...

    def set_font(self, style: str, size: float) -> None: ...

    def set_color(self, rgb: tuple[int, int, int]) -> None: ...

    def string_width(self, text: str, tracking: float = 0.0) -> float: ...

    def text(self, x: float, y: float, text: str, tracking: float = 0.0) -> None: ...

    def line(self, x1: float, y1: float, x2: float, y2: float, width: float) -> None: ...

    def rect(self, x: float, y: float, w: float, h: float, *, fill: bool) -> None: ...

    def output(self) -> bytes: ...


class FpdfBackend:
    """:class:`TextBackend` drawing onto an in-memory ``fpdf.FPDF`` document."""

    def __init__(self, title: str = "") -> None:
        self.page_width = lc.PAGE_WIDTH
        self.page_height = lc.PAGE_HEIGHT
        self._pages = 0

        self._pdf = FPDF(orientation="P", unit="pt", format="letter")
        self._pdf.set_auto_page_break(auto=False)
        self._pdf.set_margins(0, 0, 0)
        self._pdf.set_creation_date(_CREATION_DATE)
        self._pdf.set_creator("resume_fit")
        if title:
            self._pdf.set_title(sanitize_text(title))
        self._pdf.set_font(FONT_FAMILY, size=lc.BASE_BODY_FONT_SIZE)

    @property
    def page_count(self) -> int:
        return self._pages

    def add_page(self) -> None:
        self._pdf.add_page()
        self._pages += 1

    def set_font(self, style: str, size: float) -> None:
        self._pdf.set_font(FONT_FAMILY, style=style, size=size)

    def set_color(self, rgb: tuple[int, int, int]) -> None:
        self._pdf.set_draw_color(*rgb)
        self._pdf.set_fill_color(*rgb)

    def string_width(self, text: str, tracking: float = 0.0) -> float:
        text = sanitize_text(text)
        width = self._pdf.get_string_width(text)
        if tracking and text:
            width += tracking * (len(text) - 1)
        return width

    def text(self, x: float, y: float, text: str, tracking: float = 0.0) -> None:
        if tracking:
            self._pdf.set_char_spacing(tracking)
        self._pdf.text(x, y, sanitize_text(text))
        if tracking:
            self._pdf.set_char_spacing(0)

    def line(self, x1: float, y1: float, x2: float, y2: float, width: float) -> None:
        self._pdf.set_line_width(width)
        self._pdf.line(x1, y1, x2, y2)

    def rect(self, x: float, y: float, w: float, h: float, *, fill: bool) -> None:
        self._pdf.rect(x, y, w, h, style="F" if fill else "D")

    def output(self) -> bytes:
        return bytes(self._pdf.output())
