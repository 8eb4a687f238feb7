"""Immutable resume content consumed by the layout engine.

The hosting application owns the data; a render only reads one snapshot.
Optional fields default to empty values so partially filled records render
without special-casing.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "EducationEntry",
    "ExperienceEntry",
    "ProjectEntry",
    "ResumeContent",
    "ResumeHeader",
]


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _texts(values: Iterable[Any] | None) -> tuple[str, ...]:
    if not values:
        return ()
    if isinstance(values, str):
        values = [values]
    return tuple(t for t in (_text(v) for v in values) if t)


def _records(values: Iterable[Any] | None) -> list[Mapping[str, Any]]:
    return [v for v in values or () if isinstance(v, Mapping)]


@dataclass(frozen=True, slots=True)
class ResumeHeader:
    """Name and professional title shown at the top of the document."""

    name: str = ""
    title: str = ""


@dataclass(frozen=True, slots=True)
class ExperienceEntry:
    """A single role.

    Attributes:
        role: Job title.
        organization: Company or organization name.
        period: Free-form date range such as ``"2021 - Present"``.
        description: Bullet text, one bullet per line or separated by
            bullet glyphs / standalone dashes.
    """

    role: str = ""
    organization: str = ""
    period: str = ""
    description: str = ""


@dataclass(frozen=True, slots=True)
class ProjectEntry:
    """A single project record."""

    title: str = ""
    description: str = ""
    technologies: tuple[str, ...] = ()
    link: str = ""


@dataclass(frozen=True, slots=True)
class EducationEntry:
    """A single education record."""

    institution: str = ""
    degree: str = ""
    year: str = ""


@dataclass(frozen=True, slots=True)
class ResumeContent:
    """Top-level bundle passed to the layout engine."""

    header: ResumeHeader = field(default_factory=ResumeHeader)
    summary: str = ""
    contacts: tuple[str, ...] = ()
    experience: tuple[ExperienceEntry, ...] = ()
    skills: tuple[str, ...] = ()
    projects: tuple[ProjectEntry, ...] = ()
    education: tuple[EducationEntry, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ResumeContent:
        """Build content from a plain mapping using this class's field names.

        ``None`` values and missing keys become empty values; unknown keys and
        list items that are not mappings are ignored.
        """
        header = data.get("header") or {}
        if isinstance(header, str):
            header = {"name": header}

        return cls(
            header=ResumeHeader(
                name=_text(header.get("name")),
                title=_text(header.get("title")),
            ),
            summary=_text(data.get("summary")),
            contacts=_texts(data.get("contacts")),
            experience=tuple(
                ExperienceEntry(
                    role=_text(e.get("role")),
                    organization=_text(e.get("organization")),
                    period=_text(e.get("period")),
                    description=_text(e.get("description")),
                )
                for e in _records(data.get("experience"))
            ),
            skills=_texts(data.get("skills")),
            projects=tuple(
                ProjectEntry(
                    title=_text(p.get("title")),
                    description=_text(p.get("description")),
                    technologies=_texts(p.get("technologies")),
                    link=_text(p.get("link")),
                )
                for p in _records(data.get("projects"))
            ),
            education=tuple(
                EducationEntry(
                    institution=_text(e.get("institution")),
                    degree=_text(e.get("degree")),
                    year=_text(e.get("year")),
                )
                for e in _records(data.get("education"))
            ),
        )
