"""Greedy line wrapping against a measuring backend."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from resume_fit.rendering.backend import TextBackend

__all__ = ["wrap_text"]


def _break_word(backend: TextBackend, word: str, width: float, tracking: float) -> list[str]:
    """Split a single word that is wider than *width* into fitting chunks."""
    chunks: list[str] = []
    current = ""
    for char in word:
        candidate = current + char
        if current and backend.string_width(candidate, tracking) > width:
            chunks.append(current)
            current = char
        else:
            current = candidate
    if current:
        chunks.append(current)
    return chunks


def wrap_text(
    backend: TextBackend,
    text: str,
    width: float,
    tracking: float = 0.0,
) -> list[str]:
    """Wrap *text* into lines no wider than *width* in the current font.

    Whitespace runs collapse to single spaces. Words wider than a full line
    are broken between characters.
    """
    lines: list[str] = []
    current = ""
    for word in text.split():
        if backend.string_width(word, tracking) > width:
            if current:
                lines.append(current)
                current = ""
            *full, current = _break_word(backend, word, width, tracking)
            lines.extend(full)
            continue

        candidate = f"{current} {word}" if current else word
        if backend.string_width(candidate, tracking) <= width:
            current = candidate
        else:
            lines.append(current)
            current = word

    if current:
        lines.append(current)
    return lines
