"""Single-pass, page-aware resume renderer.

Sections are visited in a fixed order. Before every drawn element the
renderer asks :func:`page_break_decision` whether the element fits; a new
page is started while the page budget allows it, and once the last allowed
page is full the remaining content is omitted rather than overflowing the
budget.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from resume_fit.constants import layout_constants as lc
from resume_fit.layout.compressor import (
    CompressionLimits,
    compress_bullets,
    compress_summary,
    shorten_bullet,
)
from resume_fit.layout.config import LayoutConfig
from resume_fit.layout.cursor import (
    BreakDecision,
    RenderCursor,
    advance,
    next_page,
    page_break_decision,
    start_cursor,
)
from resume_fit.models.content import (
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeContent,
)
from resume_fit.rendering.backend import TextBackend
from resume_fit.rendering.wrap import wrap_text
from resume_fit.templates.base import (
    Alignment,
    ContactLayout,
    NameEmphasis,
    SectionHeaderStyle,
    TemplateStyle,
    strip_protocol,
)

logger = logging.getLogger(__name__)

__all__ = ["PaginatingRenderer", "RenderState", "RenderSummary"]

_BLACK = (0, 0, 0)


class RenderState(StrEnum):
    POSITIONING_HEADER = "positioning-header"
    RENDERING_SUMMARY = "rendering-summary"
    RENDERING_EXPERIENCE = "rendering-experience"
    RENDERING_SKILLS = "rendering-skills"
    RENDERING_PROJECTS = "rendering-projects"
    RENDERING_EDUCATION = "rendering-education"
    DONE = "done"


@dataclass(frozen=True)
class RenderSummary:
    """Outcome of a render pass.

    Attributes:
        page_count: Pages the backend holds after the pass.
        drawn_extent: Total vertical extent drawn across pages, in points.
        final_state: ``DONE`` when all content was drawn, otherwise the
            state in which the page budget ran out.
    """

    page_count: int
    drawn_extent: float
    final_state: RenderState = RenderState.DONE

    @property
    def halted(self) -> bool:
        return self.final_state != RenderState.DONE


class _PageBudgetExhausted(Exception):
    """Raised internally when the last allowed page has no room left."""

    def __init__(self, cursor: RenderCursor) -> None:
        super().__init__("page budget exhausted")
        self.cursor = cursor


class PaginatingRenderer:
    """Draw :class:`ResumeContent` onto a backend within a page budget.

    Args:
        backend: Drawing and measuring primitives.
        style: Template presentation rules.
        config: Resolved typographic configuration.
        limits: Compression limits for the resolved tier.
        page_limit: Maximum number of pages to use.
    """

    def __init__(
        self,
        backend: TextBackend,
        style: TemplateStyle,
        config: LayoutConfig,
        limits: CompressionLimits,
        page_limit: int,
    ) -> None:
        self.backend = backend
        self.style = style
        self.config = config
        self.limits = limits
        self.page_limit = page_limit

        self.left = config.margin
        self.right = backend.page_width - config.margin
        self.width = self.right - self.left
        self._sections_drawn = 0

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------

    def render(self, content: ResumeContent) -> RenderSummary:
        """Draw *content* in one pass and report what was used."""
        self._sections_drawn = 0
        self.backend.add_page()
        cursor = start_cursor(self.config.margin, self.backend.page_height, self.page_limit)

        steps: list[tuple[RenderState, bool, Callable[[RenderCursor, ResumeContent], RenderCursor]]] = [
            (RenderState.POSITIONING_HEADER, True, self._render_header),
            (RenderState.RENDERING_SUMMARY, bool(content.summary), self._render_summary),
            (RenderState.RENDERING_EXPERIENCE, bool(content.experience), self._render_experience),
            (RenderState.RENDERING_SKILLS, bool(content.skills), self._render_skills),
            (RenderState.RENDERING_PROJECTS, bool(content.projects), self._render_projects),
            (RenderState.RENDERING_EDUCATION, bool(content.education), self._render_education),
        ]

        for state, present, render_step in steps:
            if not present:
                continue
            try:
                cursor = render_step(cursor, content)
            except _PageBudgetExhausted as exc:
                logger.info(
                    "Page budget of %d exhausted during %s; omitting remaining content",
                    self.page_limit,
                    state,
                )
                return RenderSummary(
                    page_count=self.backend.page_count,
                    drawn_extent=exc.cursor.extent,
                    final_state=state,
                )

        return RenderSummary(page_count=self.backend.page_count, drawn_extent=cursor.extent)

    # ------------------------------------------------------------------
    # pagination
    # ------------------------------------------------------------------

    def _ensure_room(self, cursor: RenderCursor, height: float) -> RenderCursor:
        decision = page_break_decision(cursor, height)
        if decision == BreakDecision.HALT:
            raise _PageBudgetExhausted(cursor)
        if decision == BreakDecision.NEW_PAGE:
            self.backend.add_page()
            return next_page(cursor)
        return cursor

    # ------------------------------------------------------------------
    # drawing helpers
    # ------------------------------------------------------------------

    def _aligned_x(self, text: str, alignment: Alignment, tracking: float = 0.0) -> float:
        if alignment == Alignment.LEFT:
            return self.left
        text_width = self.backend.string_width(text, tracking)
        if alignment == Alignment.CENTER:
            return self.left + (self.width - text_width) / 2
        return self.right - text_width

    def _draw_line(
        self,
        cursor: RenderCursor,
        text: str,
        *,
        size: float,
        line_height: float,
        font_style: str = "",
        alignment: Alignment = Alignment.LEFT,
        tracking: float = 0.0,
    ) -> RenderCursor:
        cursor = self._ensure_room(cursor, line_height)
        self.backend.set_font(font_style, size)
        x = self._aligned_x(text, alignment, tracking)
        self.backend.text(x, cursor.offset + size, text, tracking)
        return advance(cursor, line_height)

    def _draw_paragraph(
        self,
        cursor: RenderCursor,
        text: str,
        *,
        size: float,
        line_height: float,
        font_style: str = "",
        alignment: Alignment = Alignment.LEFT,
    ) -> RenderCursor:
        self.backend.set_font(font_style, size)
        for line in wrap_text(self.backend, text, self.width):
            cursor = self._draw_line(
                cursor,
                line,
                size=size,
                line_height=line_height,
                font_style=font_style,
                alignment=alignment,
            )
        return cursor

    def _draw_rule(self, y: float) -> None:
        self.backend.set_color(self.style.accent_color)
        self.backend.line(self.left, y, self.right, y, lc.RULE_WIDTH)
        self.backend.set_color(_BLACK)

    # ------------------------------------------------------------------
    # header
    # ------------------------------------------------------------------

    def _render_header(self, cursor: RenderCursor, content: ResumeContent) -> RenderCursor:
        cfg = self.config
        style = self.style

        if style.top_accent_bar:
            self.backend.set_color(style.accent_color)
            self.backend.rect(0, 0, self.backend.page_width, lc.ACCENT_BAR_HEIGHT, fill=True)
            self.backend.set_color(_BLACK)

        name = content.header.name
        tracking = 0.0
        if style.name_emphasis in (NameEmphasis.UPPERCASE, NameEmphasis.LARGE_TRACKED):
            name = name.upper()
        if style.name_emphasis == NameEmphasis.LARGE_TRACKED:
            tracking = lc.NAME_TRACKING

        if name:
            cursor = self._draw_line(
                cursor,
                name,
                size=cfg.header_font_size,
                line_height=cfg.header_line,
                font_style="B",
                alignment=style.header_alignment,
                tracking=tracking,
            )

        if content.header.title:
            cursor = self._draw_line(
                cursor,
                content.header.title,
                size=cfg.body_font_size + 1,
                line_height=cfg.body_line,
                alignment=style.header_alignment,
            )

        if content.contacts:
            cursor = self._render_contacts(cursor, content.contacts)

        if style.header_divider:
            cursor = self._ensure_room(cursor, lc.HEADER_BLOCK_GAP)
            self._draw_rule(cursor.offset + lc.HEADER_BLOCK_GAP / 2)

        return advance(cursor, lc.HEADER_BLOCK_GAP)

    def _render_contacts(self, cursor: RenderCursor, contacts: tuple[str, ...]) -> RenderCursor:
        size = max(lc.MIN_FONT_SIZE, self.config.body_font_size - 1)
        line_height = size * self.config.line_height
        layout = self.style.contact_layout
        alignment = self.style.header_alignment

        if layout in (ContactLayout.INLINE, ContactLayout.CENTERED):
            if layout == ContactLayout.CENTERED:
                alignment = Alignment.CENTER
            return self._draw_paragraph(
                cursor,
                lc.CONTACT_SEPARATOR.join(contacts),
                size=size,
                line_height=line_height,
                alignment=alignment,
            )

        if layout == ContactLayout.TWO_COLUMN:
            for i in range(0, len(contacts), 2):
                pair = contacts[i : i + 2]
                self.backend.set_font("", size)
                widths = [self.backend.string_width(contact) for contact in pair]
                # Pairs that would collide are stacked instead.
                if sum(widths) + lc.CONTACT_COLUMN_GAP * (len(pair) - 1) > self.width:
                    for contact in pair:
                        cursor = self._draw_paragraph(
                            cursor, contact, size=size, line_height=line_height
                        )
                    continue
                cursor = self._ensure_room(cursor, line_height)
                self.backend.set_font("", size)
                baseline = cursor.offset + size
                self.backend.text(self.left, baseline, pair[0])
                if len(pair) == 2:
                    self.backend.text(self.right - widths[1], baseline, pair[1])
                cursor = advance(cursor, line_height)
            return cursor

        if layout == ContactLayout.RIGHT_ALIGNED:
            alignment = Alignment.RIGHT
        for contact in contacts:
            cursor = self._draw_paragraph(
                cursor,
                contact,
                size=size,
                line_height=line_height,
                alignment=alignment,
            )
        return cursor

    # ------------------------------------------------------------------
    # section headers
    # ------------------------------------------------------------------

    def _render_section_header(self, cursor: RenderCursor, title: str) -> RenderCursor:
        cfg = self.config
        style = self.style
        size = cfg.section_font_size
        line_height = cfg.section_header_line

        # Keep the title together with the first line of its section.
        cursor = self._ensure_room(cursor, cfg.section_gap + line_height + cfg.body_line)
        if not cursor.at_page_top:
            if style.section_divider and self._sections_drawn:
                self._draw_rule(cursor.offset + cfg.section_gap / 2)
            cursor = advance(cursor, cfg.section_gap)
        self._sections_drawn += 1

        x = self.left
        tracking = 0.0
        decoration = style.section_header
        if decoration == SectionHeaderStyle.UPPERCASE:
            title = title.upper()
            tracking = lc.SECTION_TRACKING
        elif decoration == SectionHeaderStyle.BOLD_BACKGROUND:
            self.backend.set_color(style.accent_color)
            self.backend.rect(self.left, cursor.offset, self.width, line_height, fill=True)
            x += lc.SECTION_BAND_PADDING
        elif decoration == SectionHeaderStyle.BOXED:
            self.backend.set_color(style.accent_color)
            self.backend.rect(self.left, cursor.offset, self.width, line_height, fill=False)
            x += lc.SECTION_BAND_PADDING
        elif decoration == SectionHeaderStyle.LINE_LEFT_ACCENT:
            self.backend.set_color(style.accent_color)
            self.backend.rect(self.left, cursor.offset + 1, lc.LEFT_ACCENT_WIDTH, size, fill=True)
            x += lc.LEFT_ACCENT_PADDING
        self.backend.set_color(_BLACK)

        self.backend.set_font("B", size)
        self.backend.text(x, cursor.offset + size, title, tracking)

        if decoration == SectionHeaderStyle.UNDERLINE:
            self._draw_rule(cursor.offset + size + lc.UNDERLINE_OFFSET)

        return advance(cursor, line_height)

    # ------------------------------------------------------------------
    # sections
    # ------------------------------------------------------------------

    def _render_summary(self, cursor: RenderCursor, content: ResumeContent) -> RenderCursor:
        cursor = self._render_section_header(cursor, "Summary")
        summary = compress_summary(content.summary, self.limits.summary_max_chars)
        return self._draw_paragraph(
            cursor,
            summary,
            size=self.config.body_font_size,
            line_height=self.config.body_line,
        )

    def _render_experience(self, cursor: RenderCursor, content: ResumeContent) -> RenderCursor:
        cursor = self._render_section_header(cursor, "Experience")
        for index, entry in enumerate(content.experience):
            if index:
                cursor = advance(cursor, lc.ENTRY_GAP)
            cursor = self._render_experience_entry(cursor, entry)
        return cursor

    def _render_experience_entry(self, cursor: RenderCursor, entry: ExperienceEntry) -> RenderCursor:
        cfg = self.config
        size = cfg.body_font_size
        heading_lines = 2 if entry.period else 1
        cursor = self._ensure_room(cursor, heading_lines * cfg.body_line)

        cursor = self._render_role_heading(cursor, entry)

        if entry.period:
            cursor = self._draw_line(
                cursor,
                entry.period,
                size=size,
                line_height=cfg.body_line,
                font_style="I",
            )

        for bullet in compress_bullets(entry.description, self.limits):
            cursor = self._render_bullet(cursor, bullet)
        return cursor

    def _render_role_heading(self, cursor: RenderCursor, entry: ExperienceEntry) -> RenderCursor:
        """Draw ``role | organization`` on one line, or wrapped over several."""
        cfg = self.config
        size = cfg.body_font_size + 1
        role = entry.role or entry.organization
        organization = f" | {entry.organization}" if entry.role and entry.organization else ""

        self.backend.set_font("B", size)
        role_width = self.backend.string_width(role)
        self.backend.set_font("", size)
        if role_width + self.backend.string_width(organization) > self.width:
            cursor = self._draw_paragraph(
                cursor, role, size=size, line_height=cfg.body_line, font_style="B"
            )
            if organization:
                cursor = self._draw_paragraph(
                    cursor, entry.organization, size=size, line_height=cfg.body_line
                )
            return cursor

        cursor = self._ensure_room(cursor, cfg.body_line)
        baseline = cursor.offset + size
        self.backend.set_font("B", size)
        self.backend.text(self.left, baseline, role)
        if organization:
            self.backend.set_font("", size)
            self.backend.text(self.left + role_width, baseline, organization)
        return advance(cursor, cfg.body_line)

    def _render_bullet(self, cursor: RenderCursor, text: str) -> RenderCursor:
        cfg = self.config
        size = cfg.body_font_size
        self.backend.set_font("", size)
        lines = wrap_text(self.backend, text, self.width - lc.BULLET_INDENT)
        for index, line in enumerate(lines):
            cursor = self._ensure_room(cursor, cfg.bullet_line)
            self.backend.set_font("", size)
            baseline = cursor.offset + size
            if index == 0:
                self.backend.text(self.left, baseline, self.style.bullet_glyph)
            self.backend.text(self.left + lc.BULLET_INDENT, baseline, line)
            cursor = advance(cursor, cfg.bullet_line)
        return cursor

    def _render_skills(self, cursor: RenderCursor, content: ResumeContent) -> RenderCursor:
        cursor = self._render_section_header(cursor, "Skills")
        return self._draw_paragraph(
            cursor,
            ", ".join(content.skills),
            size=self.config.body_font_size,
            line_height=self.config.body_line,
        )

    def _render_projects(self, cursor: RenderCursor, content: ResumeContent) -> RenderCursor:
        cursor = self._render_section_header(cursor, "Projects")
        projects = content.projects
        if self.limits.max_projects is not None:
            projects = projects[: self.limits.max_projects]
        for index, project in enumerate(projects):
            if index:
                cursor = advance(cursor, lc.ENTRY_GAP)
            cursor = self._render_project(cursor, project)
        return cursor

    def _render_project(self, cursor: RenderCursor, project: ProjectEntry) -> RenderCursor:
        cfg = self.config
        size = cfg.body_font_size
        detail_size = max(lc.MIN_FONT_SIZE, size - 1)
        detail_line = detail_size * cfg.line_height

        cursor = self._ensure_room(cursor, 2 * cfg.body_line)
        cursor = self._draw_line(
            cursor,
            project.title,
            size=size + 1,
            line_height=cfg.body_line,
            font_style="B",
        )
        if project.description:
            description = shorten_bullet(
                project.description,
                self.limits.project_description_max_chars,
            )
            cursor = self._draw_paragraph(cursor, description, size=size, line_height=cfg.body_line)
        if project.technologies:
            cursor = self._draw_paragraph(
                cursor,
                f"Technologies: {', '.join(project.technologies)}",
                size=detail_size,
                line_height=detail_line,
                font_style="I",
            )
        if project.link:
            cursor = self._draw_paragraph(
                cursor,
                strip_protocol(project.link),
                size=detail_size,
                line_height=detail_line,
                font_style="I",
            )
        return cursor

    def _render_education(self, cursor: RenderCursor, content: ResumeContent) -> RenderCursor:
        cursor = self._render_section_header(cursor, "Education")
        for entry in content.education:
            cursor = self._render_education_entry(cursor, entry)
        return cursor

    def _render_education_entry(self, cursor: RenderCursor, entry: EducationEntry) -> RenderCursor:
        cfg = self.config
        size = cfg.body_font_size
        cursor = self._ensure_room(cursor, 2 * cfg.body_line)
        if entry.degree:
            cursor = self._draw_line(
                cursor,
                entry.degree,
                size=size + 1,
                line_height=cfg.body_line,
                font_style="B",
            )
        details = entry.institution
        if entry.year:
            details = f"{details} | {entry.year}" if details else entry.year
        if details:
            cursor = self._draw_line(cursor, details, size=size, line_height=cfg.body_line)
        return advance(cursor, cfg.body_line * 0.5)
