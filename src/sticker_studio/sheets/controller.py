"""
Module: sheets.controller

Purpose:
    Orchestrate the sticker sheet pipeline.
    Resolve size → Compute geometry → Paginate → Render

Key Functions:
    - build_sheet(): Main entry point for building a print-ready sheet

Key Classes:
    - SheetResult: Complete build result

Dependencies:
    - sheets.sizes: Size resolution
    - sheets.layout: Geometry and pagination
    - sheets.images: Image decoding
    - sheets.output: PDF rendering

Used By:
    - orders.mailer: Print-ready attachment
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional, Sequence

from .images import BufferImageProvider
from .layout import LayoutConfig, SheetLayout, compute_geometry, paginate
from .output import print_ready_filename, render_to_pdf
from .sizes import SheetSize, resolve_size

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SheetResult:
    """
    Complete build result (immutable).

    Attributes:
        pdf_bytes: Finished multi-page PDF document
        filename: Suggested attachment filename
        size: Sticker size actually used (after fallback)
        layout: Page layout that was rendered

    Example:
        >>> result = build_sheet([png], "Large (10×10cm)", [0, 0, 0, 0, 0])
        >>> result.page_count, result.filename
        (2, 'print-ready-5x-Large1010cm.pdf')
    """
    pdf_bytes: bytes
    filename: str
    size: SheetSize
    layout: SheetLayout

    @property
    def page_count(self) -> int:
        """Number of pages in the document."""
        return self.layout.page_count

    @property
    def slot_count(self) -> int:
        """Number of stickers on the sheet."""
        return self.layout.slot_count


def build_sheet(
    images: Sequence[bytes],
    size_key: Optional[str],
    slots: Sequence[int],
    *,
    config: Optional[LayoutConfig] = None,
) -> SheetResult:
    """
    Build a print-ready sticker sheet from start to finish.

    Pipeline:
    1. Resolve the size key (unknown keys use the default size)
    2. Compute grid geometry
    3. Validate slots and paginate
    4. Render every page to PDF

    Args:
        images: Encoded unique images (PNG/JPEG/WebP bytes)
        size_key: Customer-facing size label
        slots: Index into images for every physical sticker, in order
        config: Layout configuration (A4 defaults when omitted)

    Returns:
        SheetResult with PDF bytes and layout

    Raises:
        InvalidSlotReferenceError: If a slot has no matching image
        DegenerateGeometryError: If no sticker fits on the page
        DrawFailureError: If an image cannot be decoded or drawn

    Example:
        >>> result = build_sheet([a, b, c], "Medium (7×7cm)", [0, 1, 2] * 7)
        >>> result.page_count
        3
    """
    config = config or LayoutConfig()
    start_time = time.perf_counter()

    size = resolve_size(size_key)
    logger.info(
        f"Building sheet: {len(slots)} stickers from {len(images)} designs "
        f"at {size.label}"
    )

    geometry = compute_geometry(size.side_cm, config)
    layout = paginate(slots, geometry, image_count=len(images))

    with BufferImageProvider(images) as provider:
        pdf_bytes = render_to_pdf(
            layout,
            provider,
            config,
            title=f"Print-ready sheet: {len(slots)} x {size.label}",
        )

    elapsed = time.perf_counter() - start_time
    logger.info(f"Sheet built in {elapsed:.2f}s: {layout.page_count} pages")

    return SheetResult(
        pdf_bytes=pdf_bytes,
        filename=print_ready_filename(len(slots), size_key),
        size=size,
        layout=layout,
    )
