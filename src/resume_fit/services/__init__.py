"""Services"""

from resume_fit.services.resume_content import content_from_portfolio
from resume_fit.services.resume_pdf import (
    generate_resume_pdf,
    render_portfolio,
    render_resume,
)

__all__ = [
    "content_from_portfolio",
    "generate_resume_pdf",
    "render_portfolio",
    "render_resume",
]
