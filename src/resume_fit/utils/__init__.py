"""Utility functions and helpers"""

from resume_fit.utils.export import (
    default_output_path,
    is_portfolio_payload,
    load_resume_content,
)

__all__ = [
    "default_output_path",
    "is_portfolio_payload",
    "load_resume_content",
]
