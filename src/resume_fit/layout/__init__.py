"""Height estimation, layout resolution and content compression."""

from resume_fit.layout.bullets import split_bullets
from resume_fit.layout.compressor import (
    CompressionLimits,
    CompressionTier,
    classify,
    compress_bullets,
    compress_summary,
    limits,
    select_tier,
    shorten_bullet,
)
from resume_fit.layout.config import LayoutConfig, baseline_config
from resume_fit.layout.cursor import BreakDecision, RenderCursor, page_break_decision
from resume_fit.layout.estimator import estimate_height
from resume_fit.layout.resolver import available_height, resolve_layout

__all__ = [
    "BreakDecision",
    "CompressionLimits",
    "CompressionTier",
    "LayoutConfig",
    "RenderCursor",
    "available_height",
    "baseline_config",
    "classify",
    "compress_bullets",
    "compress_summary",
    "estimate_height",
    "limits",
    "page_break_decision",
    "resolve_layout",
    "select_tier",
    "shorten_bullet",
    "split_bullets",
]
