"""Typographic configuration used by estimation and rendering."""

from __future__ import annotations

from dataclasses import dataclass

from resume_fit.constants import layout_constants as lc
from resume_fit.templates.base import NameEmphasis, TemplateStyle

__all__ = ["LayoutConfig", "baseline_config"]


@dataclass(frozen=True)
class LayoutConfig:
    """Numeric layout bundle for one render attempt.

    Font sizes and distances are in points; ``line_height`` and
    ``bullet_line_height`` are multipliers of the body font size.
    ``shrink_step`` records which shrink-ladder step produced the config
    (0 for the template baseline).
    """

    margin: float
    header_font_size: float
    section_font_size: float
    body_font_size: float
    line_height: float
    section_gap: float
    bullet_line_height: float
    shrink_step: int = 0

    @property
    def body_line(self) -> float:
        return self.body_font_size * self.line_height

    @property
    def bullet_line(self) -> float:
        return self.body_font_size * self.bullet_line_height

    @property
    def header_line(self) -> float:
        return self.header_font_size * self.line_height

    @property
    def section_header_line(self) -> float:
        return self.section_font_size * self.line_height

    def printable_height(self, page_height: float = lc.PAGE_HEIGHT) -> float:
        """Vertical space between the top and bottom margins of one page."""
        return page_height - 2 * self.margin


def baseline_config(style: TemplateStyle) -> LayoutConfig:
    """Return the unshrunk configuration for *style*.

    Name emphasis enlarges the header font; spacing density scales the
    section gap and shifts both line-height multipliers.
    """
    header = lc.BASE_HEADER_FONT_SIZE
    if style.name_emphasis == NameEmphasis.LARGE_TRACKED:
        header += lc.LARGE_TRACKED_HEADER_BONUS
    elif style.name_emphasis == NameEmphasis.UPPERCASE:
        header += lc.UPPERCASE_HEADER_BONUS

    gap_factor, line_delta = lc.DENSITY_ADJUSTMENTS[str(style.density)]

    return LayoutConfig(
        margin=lc.BASE_MARGIN,
        header_font_size=header,
        section_font_size=lc.BASE_SECTION_FONT_SIZE,
        body_font_size=lc.BASE_BODY_FONT_SIZE,
        line_height=round(lc.BASE_LINE_HEIGHT + line_delta, 2),
        section_gap=round(lc.BASE_SECTION_GAP * gap_factor, 2),
        bullet_line_height=round(lc.BASE_BULLET_LINE_HEIGHT + line_delta, 2),
    )
