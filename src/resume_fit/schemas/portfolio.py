"""Pydantic schemas for portfolio payloads handed to the resume renderer.

Stored records may carry explicit ``null`` for any optional field; those are
read the same as missing keys.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class _PortfolioRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        """Let field defaults apply to keys whose value is ``None``."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class PortfolioLinks(_PortfolioRecord):
    """Contact links stored on a portfolio."""

    email: str | None = None
    phone: str | None = None
    linkedin: str | None = None
    github: str | None = None
    website: str | None = None


class PortfolioExperience(_PortfolioRecord):
    company: str = ""
    role: str = ""
    period: str = ""
    description: str = ""


class PortfolioProject(_PortfolioRecord):
    title: str = ""
    description: str = ""
    technologies: list[str] = Field(default_factory=list)
    link: str | None = None

    @field_validator("technologies", mode="before")
    @classmethod
    def _skip_null_technologies(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [item for item in value if item is not None]
        return value


class PortfolioEducation(_PortfolioRecord):
    institution: str = ""
    degree: str = ""
    year: str = ""


class PortfolioPayload(_PortfolioRecord):
    """Portfolio record as stored by the hosting application.

    ``hero_title`` conventionally holds ``"Name - Title"``.
    """

    hero_title: str | None = Field(None, description="Name, optionally followed by ' - Title'")
    hero_subtitle: str | None = Field(None, description="Fallback professional title")
    about_text: str | None = Field(None, description="About text; may contain HTML")
    skills: list[str] = Field(default_factory=list)
    projects: list[PortfolioProject] = Field(default_factory=list)
    experience: list[PortfolioExperience] = Field(default_factory=list)
    education: list[PortfolioEducation] = Field(default_factory=list)
    links: PortfolioLinks = Field(default_factory=PortfolioLinks)

    @field_validator("skills", "projects", "experience", "education", mode="before")
    @classmethod
    def _skip_null_items(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [item for item in value if item is not None]
        return value
