"""
Tunable constants for resume layout, height estimation and compression.

All measurements are PDF points (1/72 inch). The estimation constants are
empirical: they approximate how resume text wraps at typical body sizes and
should be re-validated against real content when they change.
"""

from __future__ import annotations

# Page geometry (US Letter, portrait)
PAGE_WIDTH = 612.0
PAGE_HEIGHT = 792.0

SUPPORTED_PAGE_LIMITS = (1, 2)

# Baseline typography before template adjustments
BASE_MARGIN = 50.0
BASE_HEADER_FONT_SIZE = 18.0
BASE_SECTION_FONT_SIZE = 12.0
BASE_BODY_FONT_SIZE = 10.0
BASE_LINE_HEIGHT = 1.4
BASE_SECTION_GAP = 10.0
BASE_BULLET_LINE_HEIGHT = 1.4

# Name emphasis adjustments (added to the header font size)
LARGE_TRACKED_HEADER_BONUS = 4.0
UPPERCASE_HEADER_BONUS = 1.0
NAME_TRACKING = 1.5  # extra points between letters for tracked names
SECTION_TRACKING = 0.8

# Density adjustments: (gap factor, line-height delta)
DENSITY_ADJUSTMENTS = {
    "compact": (0.75, -0.1),
    "normal": (1.0, 0.0),
    "spacious": (1.3, 0.1),
}

# Shrink ladder (cumulative, one-page mode only)
STEP1_GAP_FACTOR = 0.7
STEP1_LINE_HEIGHT_DELTA = -0.15
STEP2_HEADER_DELTA = -2.0
STEP2_SECTION_DELTA = -1.0
STEP2_BODY_DELTA = -0.5
STEP2_MARGIN = 36.0
STEP3_GAP_FACTOR = 0.6
STEP3_BODY_DELTA = -0.5

MIN_LINE_HEIGHT = 1.0
MIN_FONT_SIZE = 7.0

# Height estimation
CHARS_PER_LINE = 80
EXPERIENCE_HEADER_LINES = 2.0
BULLET_WRAP_FACTOR = 1.5
SKILLS_LINES = 2.0
PROJECT_LINES = 4.0
EDUCATION_LINES = 2.5

# Compression tier thresholds (estimated / available)
MEDIUM_TIER_RATIO = 1.0
HIGH_TIER_RATIO = 1.5

# Tier -> (summary chars, bullets per role, bullet chars, projects, project desc chars)
TIER_LIMITS = {
    "none": (500, 6, 200, None, 300),
    "medium": (350, 4, 140, 3, 200),
    "high": (200, 3, 100, 2, 120),
}

ELLIPSIS = "..."
WORD_BREAK_MIN_RATIO = 0.7

# Renderer spacing
HEADER_BLOCK_GAP = 6.0
ENTRY_GAP = 6.0
BULLET_INDENT = 10.0
RULE_WIDTH = 0.5
UNDERLINE_OFFSET = 4.0
ACCENT_BAR_HEIGHT = 6.0
LEFT_ACCENT_WIDTH = 3.0
LEFT_ACCENT_PADDING = 8.0
SECTION_BAND_PADDING = 3.0
CONTACT_SEPARATOR = " | "
CONTACT_COLUMN_GAP = 12.0
