"""Template registry for resume rendering."""

from __future__ import annotations

from resume_fit.templates.base import (
    Alignment,
    ContactLayout,
    NameEmphasis,
    SectionHeaderStyle,
    SpacingDensity,
    TemplateStyle,
)
from resume_fit.templates.styles import BUILTIN_STYLES

__all__ = [
    "Alignment",
    "ContactLayout",
    "DEFAULT_TEMPLATE",
    "NameEmphasis",
    "SectionHeaderStyle",
    "SpacingDensity",
    "TemplateStyle",
    "get_template",
    "list_templates",
]

DEFAULT_TEMPLATE = "classic"

_REGISTRY: dict[str, TemplateStyle] = {style.identifier: style for style in BUILTIN_STYLES}


def get_template(name: str) -> TemplateStyle:
    """Return the template style registered under *name*.

    Raises:
        ValueError: If no template with that name exists.
    """
    try:
        return _REGISTRY[name]
    except KeyError:
        available = ", ".join(sorted(_REGISTRY))
        msg = f"Unknown template {name!r}. Available: {available}"
        raise ValueError(msg) from None


def list_templates() -> list[str]:
    """Return sorted names of all registered templates."""
    return sorted(_REGISTRY)
