"""Finished document returned by the resume rendering pipeline."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from resume_fit.layout.compressor import CompressionTier
    from resume_fit.layout.config import LayoutConfig

__all__ = ["PDF_MIME_TYPE", "RenderedDocument"]

PDF_MIME_TYPE = "application/pdf"


@dataclass(frozen=True)
class RenderedDocument:
    """A paginated PDF produced by a single render call.

    Attributes:
        page_count: Pages actually used; never exceeds the requested limit.
        drawn_extent: Total vertical extent drawn across all pages, in points.
        compression: Compression tier applied to the content.
        layout: Typographic configuration the document was rendered with.
        template: Identifier of the template style used.
    """

    page_count: int
    drawn_extent: float
    compression: CompressionTier
    layout: LayoutConfig
    template: str
    pdf: bytes = field(repr=False)

    def to_bytes(self) -> bytes:
        """Return the serialized PDF."""
        return self.pdf

    def to_data_uri(self) -> str:
        """Return the PDF as a ``data:`` URI suitable for inline previews."""
        encoded = base64.b64encode(self.pdf).decode("ascii")
        return f"data:{PDF_MIME_TYPE};base64,{encoded}"

    def save(self, path: Path | str) -> Path:
        """Write the PDF to *path* and return it as a ``Path``."""
        output_path = Path(path)
        output_path.write_bytes(self.pdf)
        return output_path
