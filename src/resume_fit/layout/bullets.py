"""Bullet extraction from free-form role descriptions."""

from __future__ import annotations

import re

__all__ = ["split_bullets"]

# Newlines and bullet glyphs always delimit. A dash only delimits when it
# opens a line or stands alone between spaces, so "end-to-end" stays whole.
_BULLET_DELIMITER = re.compile(r"\n|[•▪‣◦·]|(?:^|(?<=\s))[-–—*](?=\s)")


def split_bullets(description: str) -> list[str]:
    """Split *description* into candidate bullets.

    Examples:
        >>> split_bullets("- Led a team\\n- Shipped v2")
        ['Led a team', 'Shipped v2']
        >>> split_bullets("Built end-to-end tests • Cut CI time")
        ['Built end-to-end tests', 'Cut CI time']
    """
    if not description:
        return []
    parts = _BULLET_DELIMITER.split(description)
    return [part.strip() for part in parts if part.strip()]
