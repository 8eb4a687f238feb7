"""Content compression for dense resumes.

A compression tier is derived once per render from the content density
(estimated height over available height). Each tier maps to text limits that
the renderer applies while drawing; the limits tighten strictly from
``none`` to ``high``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import StrEnum

from resume_fit.constants import layout_constants as lc
from resume_fit.layout.bullets import split_bullets
from resume_fit.layout.config import LayoutConfig
from resume_fit.layout.estimator import estimate_height
from resume_fit.layout.resolver import available_height
from resume_fit.models.content import ResumeContent

logger = logging.getLogger(__name__)

__all__ = [
    "CompressionLimits",
    "CompressionTier",
    "classify",
    "compress_bullets",
    "compress_summary",
    "content_density",
    "limits",
    "select_tier",
    "shorten_bullet",
]

_SENTENCE_END = re.compile(r"(?<=[.!?])\s+")


class CompressionTier(StrEnum):
    NONE = "none"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class CompressionLimits:
    """Text limits for one compression tier.

    ``max_projects`` is ``None`` when every project is rendered.
    """

    summary_max_chars: int
    max_bullets_per_role: int
    bullet_max_chars: int
    max_projects: int | None
    project_description_max_chars: int


def content_density(content: ResumeContent, config: LayoutConfig, page_limit: int) -> float:
    """Ratio of estimated content height to available height."""
    return estimate_height(content, config) / available_height(config, page_limit)


def classify(
    content: ResumeContent,
    config: LayoutConfig,
    page_limit: int = 1,
) -> CompressionTier:
    """Return the compression tier for *content* under *config*."""
    density = content_density(content, config, page_limit)
    if density <= lc.MEDIUM_TIER_RATIO:
        tier = CompressionTier.NONE
    elif density <= lc.HIGH_TIER_RATIO:
        tier = CompressionTier.MEDIUM
    else:
        tier = CompressionTier.HIGH
    logger.debug("Content density %.2f -> %s compression", density, tier)
    return tier


def select_tier(
    content: ResumeContent,
    resolved: LayoutConfig,
    baseline: LayoutConfig,
    page_limit: int = 1,
) -> CompressionTier:
    """Return the tier to render *content* with.

    Content that fits under the *resolved* config is never compressed.
    Otherwise the tier follows the density at the *baseline* config.
    """
    if content_density(content, resolved, page_limit) <= lc.MEDIUM_TIER_RATIO:
        logger.debug("Content fits at shrink step %d; no compression", resolved.shrink_step)
        return CompressionTier.NONE
    return classify(content, baseline, page_limit)


def limits(tier: CompressionTier) -> CompressionLimits:
    """Return the text limits associated with *tier*."""
    summary, bullets, bullet_chars, projects, project_chars = lc.TIER_LIMITS[str(tier)]
    return CompressionLimits(
        summary_max_chars=summary,
        max_bullets_per_role=bullets,
        bullet_max_chars=bullet_chars,
        max_projects=projects,
        project_description_max_chars=project_chars,
    )


def compress_summary(text: str, max_chars: int) -> str:
    """Shorten *text* to at most *max_chars* characters.

    Whole sentences are kept while they fit. When even the first sentence is
    too long the text is hard-cut and suffixed with an ellipsis.
    """
    text = text.strip()
    if len(text) <= max_chars:
        return text

    kept = ""
    for sentence in _SENTENCE_END.split(text):
        candidate = f"{kept} {sentence}" if kept else sentence
        if len(candidate) > max_chars:
            break
        kept = candidate

    if kept:
        return kept
    return text[: max_chars - len(lc.ELLIPSIS)].rstrip() + lc.ELLIPSIS


def shorten_bullet(text: str, max_chars: int) -> str:
    """Shorten one bullet to at most *max_chars* characters.

    The cut falls on the last whitespace when that keeps at least 70% of the
    limit; otherwise the text is cut mid-word.
    """
    text = text.strip()
    if len(text) <= max_chars:
        return text

    head = text[: max_chars - len(lc.ELLIPSIS)]
    space = head.rfind(" ")
    if space > max_chars * lc.WORD_BREAK_MIN_RATIO:
        head = head[:space]
    return head.rstrip() + lc.ELLIPSIS


def compress_bullets(description: str, tier_limits: CompressionLimits) -> list[str]:
    """Return the bullets of *description* that survive *tier_limits*."""
    bullets = split_bullets(description)[: tier_limits.max_bullets_per_role]
    return [shorten_bullet(b, tier_limits.bullet_max_chars) for b in bullets]
