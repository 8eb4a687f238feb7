"""Choose a layout configuration that fits the page budget.

One-page resumes favour density: when the baseline does not fit, a fixed
three-step shrink ladder tightens spacing, then fonts and margins. Two-page
resumes keep the baseline and rely on pagination instead.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from resume_fit.constants import layout_constants as lc
from resume_fit.layout.config import LayoutConfig, baseline_config
from resume_fit.layout.estimator import estimate_height
from resume_fit.models.content import ResumeContent
from resume_fit.templates.base import TemplateStyle

logger = logging.getLogger(__name__)

__all__ = [
    "SHRINK_LADDER",
    "available_height",
    "resolve_layout",
    "validate_page_limit",
]


def validate_page_limit(page_limit: int) -> int:
    """Return *page_limit* unchanged, or raise if it is unsupported.

    Raises:
        ValueError: If *page_limit* is not 1 or 2.
    """
    if page_limit not in lc.SUPPORTED_PAGE_LIMITS:
        supported = ", ".join(str(n) for n in lc.SUPPORTED_PAGE_LIMITS)
        msg = f"Unsupported page limit {page_limit!r}. Supported: {supported}"
        raise ValueError(msg)
    return page_limit


def available_height(config: LayoutConfig, page_limit: int) -> float:
    """Printable height across *page_limit* pages under *config*."""
    return config.printable_height(lc.PAGE_HEIGHT) * page_limit


def _line_height(value: float, delta: float) -> float:
    return max(lc.MIN_LINE_HEIGHT, round(value + delta, 2))


def _font(value: float, delta: float) -> float:
    return max(lc.MIN_FONT_SIZE, value + delta)


def _tighten_spacing(config: LayoutConfig) -> LayoutConfig:
    return replace(
        config,
        section_gap=round(config.section_gap * lc.STEP1_GAP_FACTOR, 2),
        line_height=_line_height(config.line_height, lc.STEP1_LINE_HEIGHT_DELTA),
        bullet_line_height=_line_height(config.bullet_line_height, lc.STEP1_LINE_HEIGHT_DELTA),
        shrink_step=1,
    )


def _shrink_fonts(config: LayoutConfig) -> LayoutConfig:
    return replace(
        config,
        header_font_size=_font(config.header_font_size, lc.STEP2_HEADER_DELTA),
        section_font_size=_font(config.section_font_size, lc.STEP2_SECTION_DELTA),
        body_font_size=_font(config.body_font_size, lc.STEP2_BODY_DELTA),
        margin=min(config.margin, lc.STEP2_MARGIN),
        shrink_step=2,
    )


def _compress_further(config: LayoutConfig) -> LayoutConfig:
    return replace(
        config,
        section_gap=round(config.section_gap * lc.STEP3_GAP_FACTOR, 2),
        body_font_size=_font(config.body_font_size, lc.STEP3_BODY_DELTA),
        shrink_step=3,
    )


# Each step is applied to the result of the previous one.
SHRINK_LADDER: tuple[Callable[[LayoutConfig], LayoutConfig], ...] = (
    _tighten_spacing,
    _shrink_fonts,
    _compress_further,
)


def resolve_layout(
    content: ResumeContent,
    style: TemplateStyle,
    page_limit: int,
) -> LayoutConfig:
    """Return the configuration *content* should be rendered with.

    Args:
        content: Resume content to fit.
        style: Resolved template style; determines the baseline.
        page_limit: Page budget, 1 or 2.

    Returns:
        The baseline config when it fits (or when ``page_limit == 2``),
        otherwise the first shrink-ladder step that fits, or the last step
        if none does.

    Raises:
        ValueError: If *page_limit* is unsupported.
    """
    validate_page_limit(page_limit)
    config = baseline_config(style)
    if page_limit != 1:
        return config

    estimate = estimate_height(content, config)
    available = available_height(config, page_limit)
    logger.debug(
        "Layout step %d for %s: estimated %.1fpt of %.1fpt",
        config.shrink_step,
        style.identifier,
        estimate,
        available,
    )

    for step in SHRINK_LADDER:
        if estimate <= available:
            break
        config = step(config)
        estimate = estimate_height(content, config)
        available = available_height(config, page_limit)
        logger.debug(
            "Layout step %d for %s: estimated %.1fpt of %.1fpt",
            config.shrink_step,
            style.identifier,
            estimate,
            available,
        )

    return config
