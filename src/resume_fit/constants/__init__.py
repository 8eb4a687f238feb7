from __future__ import annotations

from resume_fit.constants.layout_constants import (
    PAGE_HEIGHT,
    PAGE_WIDTH,
    SUPPORTED_PAGE_LIMITS,
)

__all__ = [
    "PAGE_HEIGHT",
    "PAGE_WIDTH",
    "SUPPORTED_PAGE_LIMITS",
]
