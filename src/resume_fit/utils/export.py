"""Export utilities for reading resume input files and naming PDF output."""

from __future__ import annotations

import json
import re
from datetime import datetime
from pathlib import Path
from typing import Any

from resume_fit.models.content import ResumeContent
from resume_fit.services.resume_content import content_from_portfolio

_PORTFOLIO_KEYS = frozenset({"hero_title", "hero_subtitle", "about_text", "links"})


def _sanitize_filename(name: str) -> str:
    """Remove or replace characters that are invalid in filenames."""
    # Replace invalid characters and whitespace with underscores
    sanitized = re.sub(r'[<>:"/\\|?*\s]', "_", name)
    # Remove leading/trailing underscores and dots
    sanitized = sanitized.strip("._")
    return sanitized or "resume"


def _generate_filename(person_name: str | None, extension: str = "pdf") -> str:
    """Generate a filename with timestamp.

    Args:
        person_name: Name shown on the resume (optional)
        extension: File extension

    Returns:
        Filename string like ``Jane_Doe_resume_2024-01-31_120000.pdf``
    """
    timestamp = datetime.now().strftime("%Y-%m-%d_%H%M%S")
    base_name = _sanitize_filename(person_name or "resume")
    return f"{base_name}_resume_{timestamp}.{extension}"


def is_portfolio_payload(data: dict[str, Any]) -> bool:
    """Return True if *data* looks like a stored portfolio record."""
    return bool(_PORTFOLIO_KEYS.intersection(data))


def load_resume_content(input_path: Path) -> ResumeContent:
    """Read a JSON file holding either a portfolio record or resume content.

    Args:
        input_path: Path to the JSON file

    Returns:
        Parsed :class:`ResumeContent`

    Raises:
        json.JSONDecodeError: If the file is not valid JSON.
        pydantic.ValidationError: If a portfolio record has the wrong shape.
        ValueError: If the top-level JSON value is not an object.
    """
    data = json.loads(Path(input_path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        msg = f"Expected a JSON object in {input_path}, got {type(data).__name__}"
        raise ValueError(msg)

    if is_portfolio_payload(data):
        return content_from_portfolio(data)
    return ResumeContent.from_dict(data)


def default_output_path(content: ResumeContent, directory: Path | None = None) -> Path:
    """Return a timestamped PDF path for *content* inside *directory*."""
    filename = _generate_filename(content.header.name)
    return (directory or Path.cwd()) / filename
