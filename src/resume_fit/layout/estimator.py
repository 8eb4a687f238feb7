"""Pre-render height estimation.

The estimate never touches a drawing backend, so the resolver can call it
once per shrink-ladder step at negligible cost. It deliberately ignores page
boundaries and returns a single continuous height in points.
"""

from __future__ import annotations

import math

from resume_fit.constants import layout_constants as lc
from resume_fit.layout.bullets import split_bullets
from resume_fit.layout.config import LayoutConfig
from resume_fit.models.content import ResumeContent

__all__ = ["estimate_height"]


def _header_height(content: ResumeContent, config: LayoutConfig) -> float:
    height = config.header_line
    if content.header.title:
        height += config.body_line
    return height


def _section_overhead(config: LayoutConfig) -> float:
    return config.section_header_line + config.section_gap


def _summary_height(summary: str, config: LayoutConfig) -> float:
    lines = math.ceil(len(summary) / lc.CHARS_PER_LINE)
    return lines * config.body_line


def _experience_height(content: ResumeContent, config: LayoutConfig) -> float:
    height = 0.0
    for entry in content.experience:
        height += lc.EXPERIENCE_HEADER_LINES * config.body_line
        bullets = split_bullets(entry.description)
        height += len(bullets) * lc.BULLET_WRAP_FACTOR * config.bullet_line
    return height


def estimate_height(content: ResumeContent, config: LayoutConfig) -> float:
    """Predict the rendered height of *content* under *config*.

    Args:
        content: Resume content to measure.
        config: Typographic configuration to measure with.

    Returns:
        Estimated height in points, summed over all non-empty sections.
    """
    height = _header_height(content, config)

    if content.summary:
        height += _section_overhead(config) + _summary_height(content.summary, config)

    if content.experience:
        height += _section_overhead(config) + _experience_height(content, config)

    if content.skills:
        height += _section_overhead(config) + lc.SKILLS_LINES * config.body_line

    if content.projects:
        height += _section_overhead(config)
        height += len(content.projects) * lc.PROJECT_LINES * config.body_line

    if content.education:
        height += _section_overhead(config)
        height += len(content.education) * lc.EDUCATION_LINES * config.body_line

    return height
