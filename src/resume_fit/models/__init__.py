"""Data models and type definitions"""

from resume_fit.models.content import (
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeContent,
    ResumeHeader,
)
from resume_fit.models.document import RenderedDocument

__all__ = [
    "EducationEntry",
    "ExperienceEntry",
    "ProjectEntry",
    "RenderedDocument",
    "ResumeContent",
    "ResumeHeader",
]
