"""Resume PDF generation service.

Runs the full fitting pipeline for one document: resolve the layout against
the page budget, classify the content density, then render once with the
matching compression limits.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from resume_fit.layout.compressor import limits, select_tier
from resume_fit.layout.config import baseline_config
from resume_fit.layout.resolver import resolve_layout, validate_page_limit
from resume_fit.models.document import RenderedDocument
from resume_fit.rendering.backend import FpdfBackend
from resume_fit.rendering.renderer import PaginatingRenderer
from resume_fit.services.resume_content import content_from_portfolio
from resume_fit.templates import DEFAULT_TEMPLATE, TemplateStyle, get_template

if TYPE_CHECKING:
    from resume_fit.models.content import ResumeContent
    from resume_fit.schemas.portfolio import PortfolioPayload

logger = logging.getLogger(__name__)

__all__ = [
    "generate_resume_pdf",
    "render_portfolio",
    "render_resume",
]


def _resolve_style(template: str | TemplateStyle) -> TemplateStyle:
    if isinstance(template, TemplateStyle):
        return template
    return get_template(template)


def render_resume(
    content: ResumeContent,
    template: str | TemplateStyle = DEFAULT_TEMPLATE,
    page_limit: int = 1,
) -> RenderedDocument:
    """Render *content* into a PDF that uses at most *page_limit* pages.

    Args:
        content: Resume content snapshot.
        template: Registered template identifier or a resolved style.
        page_limit: Page budget, 1 or 2.

    Returns:
        The finished :class:`RenderedDocument`.

    Raises:
        ValueError: If the template is unknown or the page limit unsupported.
    """
    style = _resolve_style(template)
    validate_page_limit(page_limit)

    config = resolve_layout(content, style, page_limit)
    tier = select_tier(content, config, baseline_config(style), page_limit)

    backend = FpdfBackend(title=content.header.name)
    renderer = PaginatingRenderer(backend, style, config, limits(tier), page_limit)
    summary = renderer.render(content)

    logger.debug(
        "Rendered %s resume: %d page(s), shrink step %d, %s compression",
        style.identifier,
        summary.page_count,
        config.shrink_step,
        tier,
    )
    return RenderedDocument(
        page_count=summary.page_count,
        drawn_extent=summary.drawn_extent,
        compression=tier,
        layout=config,
        template=style.identifier,
        pdf=backend.output(),
    )


def render_portfolio(
    portfolio: PortfolioPayload | Mapping[str, Any],
    template: str | TemplateStyle = DEFAULT_TEMPLATE,
    page_limit: int = 1,
) -> RenderedDocument:
    """Render a stored portfolio record; see :func:`render_resume`."""
    return render_resume(content_from_portfolio(portfolio), template, page_limit)


def generate_resume_pdf(
    content: ResumeContent,
    output_path: Path,
    template: str | TemplateStyle = DEFAULT_TEMPLATE,
    page_limit: int = 1,
) -> Path:
    """Render *content* and write the PDF to *output_path*.

    Returns:
        The ``Path`` of the written file.
    """
    try:
        document = render_resume(content, template, page_limit)
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        return document.save(output_path)
    except Exception:
        logger.exception("Failed to generate resume PDF at %s", output_path)
        raise
