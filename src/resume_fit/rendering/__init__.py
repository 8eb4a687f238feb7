"""Page-aware rendering onto a PDF backend."""

from resume_fit.rendering.backend import FpdfBackend, TextBackend, sanitize_text
from resume_fit.rendering.renderer import PaginatingRenderer, RenderState, RenderSummary
from resume_fit.rendering.wrap import wrap_text

__all__ = [
    "FpdfBackend",
    "PaginatingRenderer",
    "RenderState",
    "RenderSummary",
    "TextBackend",
    "sanitize_text",
    "wrap_text",
]
