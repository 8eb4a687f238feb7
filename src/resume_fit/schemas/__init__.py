"""Input schemas"""

from resume_fit.schemas.portfolio import (
    PortfolioEducation,
    PortfolioExperience,
    PortfolioLinks,
    PortfolioPayload,
    PortfolioProject,
)

__all__ = [
    "PortfolioEducation",
    "PortfolioExperience",
    "PortfolioLinks",
    "PortfolioPayload",
    "PortfolioProject",
]
