"""Render cursor and the page-break decision.

The cursor is an immutable value threaded through a single render pass.
Every helper returns a new cursor, so the break decision is a pure function
of the cursor and the next element's height.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum

__all__ = [
    "BreakDecision",
    "RenderCursor",
    "advance",
    "next_page",
    "page_break_decision",
    "start_cursor",
]


class BreakDecision(StrEnum):
    FITS = "fits"
    NEW_PAGE = "new_page"
    HALT = "halt"


@dataclass(frozen=True, slots=True)
class RenderCursor:
    """Position of the next element.

    Attributes:
        offset: Vertical offset from the top edge of the current page.
        page_index: 1-based index of the current page.
        page_limit: Maximum number of pages the document may use.
        top: Offset where content starts on every page.
        bottom: Offset content may not cross.
        drawn: Total extent consumed on previous pages.
    """

    offset: float
    page_index: int
    page_limit: int
    top: float
    bottom: float
    drawn: float = 0.0

    @property
    def at_page_top(self) -> bool:
        return self.offset <= self.top

    @property
    def extent(self) -> float:
        """Total vertical extent drawn so far, across all pages."""
        return self.drawn + (self.offset - self.top)


def start_cursor(margin: float, page_height: float, page_limit: int) -> RenderCursor:
    """Return a cursor at the top margin of page one."""
    return RenderCursor(
        offset=margin,
        page_index=1,
        page_limit=page_limit,
        top=margin,
        bottom=page_height - margin,
    )


def advance(cursor: RenderCursor, dy: float) -> RenderCursor:
    """Move *cursor* down by *dy* points."""
    return replace(cursor, offset=cursor.offset + max(dy, 0.0))


def next_page(cursor: RenderCursor) -> RenderCursor:
    """Return a cursor at the top of the following page."""
    return replace(
        cursor,
        offset=cursor.top,
        page_index=cursor.page_index + 1,
        drawn=cursor.extent,
    )


def page_break_decision(cursor: RenderCursor, height: float) -> BreakDecision:
    """Decide whether an element of *height* can be drawn at *cursor*.

    A fresh page always accepts its first element, so an oversized element
    cannot trigger an endless run of empty pages.
    """
    if cursor.offset + height <= cursor.bottom or cursor.at_page_top:
        return BreakDecision.FITS
    if cursor.page_index >= cursor.page_limit:
        return BreakDecision.HALT
    return BreakDecision.NEW_PAGE
