"""Presentation records shared by every resume template.

A template is pure data: the renderer reads a :class:`TemplateStyle` and
branches on its enumerated fields, so adding a template never touches the
rendering code.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

__all__ = [
    "Alignment",
    "ContactLayout",
    "NameEmphasis",
    "SectionHeaderStyle",
    "SpacingDensity",
    "TemplateStyle",
    "strip_protocol",
]

_PROTOCOL = re.compile(r"^https?://", re.IGNORECASE)


class Alignment(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class SectionHeaderStyle(StrEnum):
    """Decoration drawn around each section title."""

    UNDERLINE = "underline"
    BOLD_BACKGROUND = "bold-background"
    BOXED = "boxed"
    SIMPLE = "simple"
    LINE_LEFT_ACCENT = "line-left-accent"
    UPPERCASE = "uppercase"


class NameEmphasis(StrEnum):
    BOLD = "bold"
    UPPERCASE = "uppercase"
    LARGE_TRACKED = "large-tracked"


class ContactLayout(StrEnum):
    INLINE = "inline"
    STACKED = "stacked"
    CENTERED = "centered"
    TWO_COLUMN = "two-column"
    RIGHT_ALIGNED = "right-aligned"


class SpacingDensity(StrEnum):
    COMPACT = "compact"
    NORMAL = "normal"
    SPACIOUS = "spacious"


@dataclass(frozen=True)
class TemplateStyle:
    """Static bundle of presentation rules for one template.

    Attributes:
        identifier: Registry key (``"classic"``, ``"modern"``, ...).
        display_name: Human-readable name shown in the UI.
        description: One-line summary of the look.
        header_alignment: Alignment of the name/title block.
        section_header: Decoration applied to section titles.
        name_emphasis: How the candidate name is emphasised.
        bullet_glyph: Glyph drawn before each experience bullet.
        contact_layout: Arrangement of the contact lines.
        density: Spacing density; adjusts baseline gaps and line heights.
        top_accent_bar: Draw a filled band along the top edge of page one.
        header_divider: Draw a rule below the header block.
        section_divider: Draw a rule between consecutive sections.
        accent_color: RGB colour for bars, bands and accent marks.
    """

    identifier: str
    display_name: str
    description: str
    header_alignment: Alignment
    section_header: SectionHeaderStyle
    name_emphasis: NameEmphasis
    bullet_glyph: str
    contact_layout: ContactLayout
    density: SpacingDensity
    top_accent_bar: bool = False
    header_divider: bool = False
    section_divider: bool = False
    accent_color: tuple[int, int, int] = (0, 0, 0)


def strip_protocol(url: str) -> str:
    """Return *url* without a leading ``http://`` or ``https://``."""
    return _PROTOCOL.sub("", url.strip())
