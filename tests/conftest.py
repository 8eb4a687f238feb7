from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from resume_fit.constants import layout_constants as lc
from resume_fit.models.content import (
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeContent,
    ResumeHeader,
)

# Width of one character relative to the font size in the fake backend.
CHAR_WIDTH_RATIO = 0.5


@dataclass
class DrawnText:
    x: float
    y: float
    text: str
    style: str
    size: float
    page: int


@dataclass
class RecordingBackend:
    """In-memory stand-in for the fpdf2 backend that records every call."""

    page_width: float = lc.PAGE_WIDTH
    page_height: float = lc.PAGE_HEIGHT
    texts: list[DrawnText] = field(default_factory=list)
    lines: list[tuple[float, float, float, float]] = field(default_factory=list)
    rects: list[tuple[float, float, float, float, bool]] = field(default_factory=list)
    pages: int = 0
    style: str = ""
    size: float = lc.BASE_BODY_FONT_SIZE

    @property
    def page_count(self) -> int:
        return self.pages

    def add_page(self) -> None:
        self.pages += 1

    def set_font(self, style: str, size: float) -> None:
        self.style = style
        self.size = size

    def set_color(self, rgb: tuple[int, int, int]) -> None:
        pass

    def string_width(self, text: str, tracking: float = 0.0) -> float:
        width = len(text) * self.size * CHAR_WIDTH_RATIO
        if tracking and text:
            width += tracking * (len(text) - 1)
        return width

    def text(self, x: float, y: float, text: str, tracking: float = 0.0) -> None:
        self.texts.append(DrawnText(x, y, text, self.style, self.size, self.pages))

    def line(self, x1: float, y1: float, x2: float, y2: float, width: float) -> None:
        self.lines.append((x1, y1, x2, y2))

    def rect(self, x: float, y: float, w: float, h: float, *, fill: bool) -> None:
        self.rects.append((x, y, w, h, fill))

    def output(self) -> bytes:
        return b"%PDF-fake"

    def drawn(self) -> list[str]:
        return [t.text for t in self.texts]


def long_bullet(index: int, length: int = 150) -> str:
    base = f"Delivered scalable service improvements for platform area {index} "
    return (base * (length // len(base) + 1))[:length].strip()


def make_experience(entries: int, bullets: int, bullet_length: int = 150) -> tuple[ExperienceEntry, ...]:
    return tuple(
        ExperienceEntry(
            role=f"Engineer {i}",
            organization=f"Company {i}",
            period="2019 - 2023",
            description="\n".join(long_bullet(b, bullet_length) for b in range(bullets)),
        )
        for i in range(entries)
    )


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def full_content() -> ResumeContent:
    return ResumeContent(
        header=ResumeHeader(name="Jane Doe", title="Software Engineer"),
        summary="Engineer with eight years of experience. Focused on reliable systems.",
        contacts=("jane@example.com", "555-0100", "linkedin.com/in/jane", "github.com/jane"),
        experience=(
            ExperienceEntry(
                role="Senior Engineer",
                organization="Acme",
                period="2020 - Present",
                description="- Led the payments team\n- Cut CI time in half",
            ),
        ),
        skills=("Python", "Go", "PostgreSQL"),
        projects=(
            ProjectEntry(
                title="Resume Fit",
                description="Fits resumes onto one page.",
                technologies=("Python", "fpdf2"),
                link="https://github.com/jane/resume-fit",
            ),
        ),
        education=(EducationEntry(institution="MIT", degree="B.S. Computer Science", year="2015"),),
    )


@pytest.fixture
def overflowing_content() -> ResumeContent:
    return ResumeContent(
        header=ResumeHeader(name="Jane Doe", title="Software Engineer"),
        summary="Experienced engineer. " * 40,
        experience=make_experience(60, 8),
        skills=tuple(f"Skill {i}" for i in range(40)),
        projects=tuple(ProjectEntry(title=f"Project {i}", description="A project.") for i in range(10)),
        education=(EducationEntry(institution="MIT", degree="B.S.", year="2015"),),
    )
