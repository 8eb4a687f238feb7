"""Map stored portfolio records onto :class:`ResumeContent`.

Portfolio records come from the hosting application's data store; this
module is the only place that knows their shape.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from resume_fit.models.content import (
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeContent,
    ResumeHeader,
)
from resume_fit.schemas.portfolio import PortfolioLinks, PortfolioPayload
from resume_fit.templates.base import strip_protocol

__all__ = ["content_from_portfolio"]

_HTML_TAG = re.compile(r"<[^>]*>")
_TITLE_SEPARATOR = " - "
_DEFAULT_NAME = "Name"


# -----------------------------------------------------------------------
# Internal builders


def _build_header(portfolio: PortfolioPayload) -> ResumeHeader:
    """Read ``"Name - Title"``; later ``" - "`` parts are ignored.

    The subtitle stands in when the hero title carries no title part.
    """
    parts = (portfolio.hero_title or "").strip().split(_TITLE_SEPARATOR)
    name = parts[0].strip() or _DEFAULT_NAME
    title = parts[1].strip() if len(parts) > 1 else ""
    title = title or (portfolio.hero_subtitle or "").strip()
    return ResumeHeader(name=name, title=title)


def _build_summary(about_text: str | None) -> str:
    if not about_text:
        return ""
    return _HTML_TAG.sub("", about_text).strip()


def _build_contacts(links: PortfolioLinks) -> tuple[str, ...]:
    """Return contact strings in display order; URLs lose their scheme."""
    contacts: list[str] = []
    if links.email:
        contacts.append(links.email.strip())
    if links.phone:
        contacts.append(links.phone.strip())
    for url in (links.linkedin, links.github, links.website):
        if url:
            contacts.append(strip_protocol(url))
    return tuple(c for c in contacts if c)


def _build_experience(portfolio: PortfolioPayload) -> tuple[ExperienceEntry, ...]:
    return tuple(
        ExperienceEntry(
            role=exp.role.strip(),
            organization=exp.company.strip(),
            period=exp.period.strip(),
            description=exp.description.strip(),
        )
        for exp in portfolio.experience
    )


def _build_projects(portfolio: PortfolioPayload) -> tuple[ProjectEntry, ...]:
    return tuple(
        ProjectEntry(
            title=project.title.strip(),
            description=project.description.strip(),
            technologies=tuple(t.strip() for t in project.technologies if t.strip()),
            link=(project.link or "").strip(),
        )
        for project in portfolio.projects
    )


def _build_education(portfolio: PortfolioPayload) -> tuple[EducationEntry, ...]:
    return tuple(
        EducationEntry(
            institution=edu.institution.strip(),
            degree=edu.degree.strip(),
            year=edu.year.strip(),
        )
        for edu in portfolio.education
    )


# -----------------------------------------------------------------------
# Public API


def content_from_portfolio(portfolio: PortfolioPayload | Mapping[str, Any]) -> ResumeContent:
    """Build resume content from a portfolio record.

    Args:
        portfolio: A validated :class:`PortfolioPayload` or a raw mapping
            in the same shape.

    Returns:
        The corresponding :class:`ResumeContent`.

    Raises:
        pydantic.ValidationError: If a raw mapping does not match the
            portfolio shape.
    """
    if not isinstance(portfolio, PortfolioPayload):
        portfolio = PortfolioPayload.model_validate(portfolio)

    return ResumeContent(
        header=_build_header(portfolio),
        summary=_build_summary(portfolio.about_text),
        contacts=_build_contacts(portfolio.links),
        experience=_build_experience(portfolio),
        skills=tuple(s.strip() for s in portfolio.skills if s.strip()),
        projects=_build_projects(portfolio),
        education=_build_education(portfolio),
    )
