from resume_fit.models import RenderedDocument, ResumeContent
from resume_fit.services import render_portfolio, render_resume

__all__ = [
    "RenderedDocument",
    "ResumeContent",
    "main",
    "render_portfolio",
    "render_resume",
]


def main() -> int:
    """Entry point for the application.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    from resume_fit.cli import main as cli_main

    return cli_main()
