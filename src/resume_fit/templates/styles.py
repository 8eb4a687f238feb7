"""Built-in template style records.

All templates are single-column and use the standard PDF core fonts so the
output stays ATS-friendly.
"""

from __future__ import annotations

from resume_fit.templates.base import (
    Alignment,
    ContactLayout,
    NameEmphasis,
    SectionHeaderStyle,
    SpacingDensity,
    TemplateStyle,
)

__all__ = ["BUILTIN_STYLES"]

CLASSIC = TemplateStyle(
    identifier="classic",
    display_name="Classic",
    description="Traditional single-column layout with clean sections",
    header_alignment=Alignment.LEFT,
    section_header=SectionHeaderStyle.UNDERLINE,
    name_emphasis=NameEmphasis.BOLD,
    bullet_glyph="•",
    contact_layout=ContactLayout.INLINE,
    density=SpacingDensity.NORMAL,
)

MODERN = TemplateStyle(
    identifier="modern",
    display_name="Modern",
    description="Clean design with accent color and subtle borders",
    header_alignment=Alignment.CENTER,
    section_header=SectionHeaderStyle.BOXED,
    name_emphasis=NameEmphasis.BOLD,
    bullet_glyph="»",
    contact_layout=ContactLayout.CENTERED,
    density=SpacingDensity.COMPACT,
    top_accent_bar=True,
    accent_color=(37, 99, 235),
)

MINIMAL = TemplateStyle(
    identifier="minimal",
    display_name="Minimal",
    description="Ultra-clean with maximum white space",
    header_alignment=Alignment.CENTER,
    section_header=SectionHeaderStyle.UPPERCASE,
    name_emphasis=NameEmphasis.UPPERCASE,
    bullet_glyph="-",
    contact_layout=ContactLayout.STACKED,
    density=SpacingDensity.SPACIOUS,
    section_divider=True,
    accent_color=(120, 120, 120),
)

PROFESSIONAL = TemplateStyle(
    identifier="professional",
    display_name="Professional",
    description="Bold headers with structured sections for senior roles",
    header_alignment=Alignment.LEFT,
    section_header=SectionHeaderStyle.BOLD_BACKGROUND,
    name_emphasis=NameEmphasis.BOLD,
    bullet_glyph="▪",
    contact_layout=ContactLayout.RIGHT_ALIGNED,
    density=SpacingDensity.NORMAL,
    header_divider=True,
    accent_color=(226, 232, 240),
)

EXECUTIVE = TemplateStyle(
    identifier="executive",
    display_name="Executive",
    description="Premium look with strategic use of emphasis",
    header_alignment=Alignment.CENTER,
    section_header=SectionHeaderStyle.LINE_LEFT_ACCENT,
    name_emphasis=NameEmphasis.LARGE_TRACKED,
    bullet_glyph="•",
    contact_layout=ContactLayout.TWO_COLUMN,
    density=SpacingDensity.NORMAL,
    top_accent_bar=True,
    header_divider=True,
    accent_color=(30, 41, 59),
)

BUILTIN_STYLES: tuple[TemplateStyle, ...] = (
    CLASSIC,
    MODERN,
    MINIMAL,
    PROFESSIONAL,
    EXECUTIVE,
)
