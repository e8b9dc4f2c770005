"""
Module: sheets.output.renderer

Purpose:
    Render a SheetLayout to PDF bytes using ReportLab.
    Each PagePlan becomes one PDF page; every filled cell gets a dashed
    cut guide and its sticker image fitted inside.

Key Functions:
    - render_to_pdf(): Main rendering function

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling
    - sheets.layout.models: SheetLayout, PagePlan, CellPlacement
    - sheets.images: ImageProvider, fit_inside

Used By:
    - sheets.controller: Build pipeline
"""

from __future__ import annotations

import io
import logging
from typing import Dict, Optional

from PIL import Image
from reportlab.lib.colors import HexColor
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from sticker_studio.sheets.errors import DrawFailureError
from sticker_studio.sheets.images import ImageProvider, fit_inside
from sticker_studio.sheets.layout.config import LayoutConfig
from sticker_studio.sheets.layout.models import CellPlacement, PagePlan, SheetLayout

logger = logging.getLogger(__name__)

PDF_CREATOR = "Sticker Studio"


def render_to_pdf(
    layout: SheetLayout,
    provider: ImageProvider,
    config: LayoutConfig,
    *,
    title: Optional[str] = None,
) -> bytes:
    """
    Render layout result to an in-memory PDF.

    Args:
        layout: Layout result from paginator
        provider: Unique images referenced by the layout
        config: Layout configuration (page size, inset, cut-guide style)
        title: Optional PDF document title

    Returns:
        Complete PDF document as bytes

    Raises:
        DrawFailureError: If any sticker cannot be decoded or drawn

    Example:
        >>> pdf_bytes = render_to_pdf(layout, provider, LayoutConfig())
        >>> pdf_bytes[:5]
        b'%PDF-'
    """
    if layout.page_count == 0:
        logger.warning("Empty layout, creating empty PDF")

    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=(config.page_width, config.page_height))
    c.setCreator(PDF_CREATOR)
    if title:
        c.setTitle(title)

    # One reader per unique image; ReportLab embeds each only once
    readers: Dict[int, ImageReader] = {}

    for page in layout.pages:
        _render_page(c, page, provider, readers, config)
        c.showPage()

    c.save()

    pdf_bytes = buffer.getvalue()
    logger.info(f"Rendered {layout.page_count} pages ({len(pdf_bytes)} bytes)")
    return pdf_bytes


def _render_page(
    c: canvas.Canvas,
    page: PagePlan,
    provider: ImageProvider,
    readers: Dict[int, ImageReader],
    config: LayoutConfig,
) -> None:
    """
    Render a single page to the canvas.

    Args:
        c: ReportLab canvas
        page: Page plan with placements
        provider: Unique image source
        readers: Per-document ImageReader cache
        config: Layout configuration
    """
    for placement in page.placements:
        _draw_cut_guide(c, placement, config)
        _draw_sticker(c, placement, provider, readers, config)

    logger.debug(f"Page {page.index}: drew {page.placement_count} stickers")


def _draw_cut_guide(
    c: canvas.Canvas,
    placement: CellPlacement,
    config: LayoutConfig,
) -> None:
    """
    Draw the light dashed square around a sticker position.

    Args:
        c: ReportLab canvas
        placement: Cell to outline
        config: Layout configuration (colour and dash pattern)
    """
    y_pt = _transform_y(config.page_height, placement.y, placement.size)

    c.saveState()
    c.setDash(list(config.border_dash), 0)
    c.setStrokeColor(HexColor(config.border_color))
    c.rect(placement.x, y_pt, placement.size, placement.size, stroke=1, fill=0)
    c.restoreState()


def _draw_sticker(
    c: canvas.Canvas,
    placement: CellPlacement,
    provider: ImageProvider,
    readers: Dict[int, ImageReader],
    config: LayoutConfig,
) -> None:
    """
    Draw a slot's image fitted and centred inside its inset box.

    Args:
        c: ReportLab canvas
        placement: Cell to fill
        provider: Unique image source
        readers: Per-document ImageReader cache
        config: Layout configuration (inset)

    Raises:
        DrawFailureError: If the image cannot be decoded or drawn
    """
    index = placement.image_index
    img = provider.get_image(index)

    try:
        reader = readers.get(index)
        if reader is None:
            reader = readers[index] = _pil_to_reader(img)

        x_pt, y_top, width_pt, height_pt = fit_inside(
            img.size,
            placement.image_box(config.image_inset),
        )
        y_pt = _transform_y(config.page_height, y_top, height_pt)

        c.drawImage(
            reader,
            x_pt,
            y_pt,
            width=width_pt,
            height=height_pt,
            mask="auto",
        )
    except Exception as e:
        raise DrawFailureError(
            f"Failed to draw image {index} in slot {placement.slot}: {e}",
            image_index=index,
        ) from e


def _pil_to_reader(img: Image.Image) -> ImageReader:
    """
    Convert PIL image to ReportLab ImageReader.

    Args:
        img: PIL Image object

    Returns:
        ImageReader for use with ReportLab
    """
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return ImageReader(buf)


def _transform_y(page_height_pt: float, y_top: float, height: float) -> float:
    """
    Convert a top-down Y coordinate to bottom-up PDF Y.

    Args:
        page_height_pt: Page height in points
        y_top: Top edge measured from the top of the page
        height: Height of the element

    Returns:
        Bottom edge measured from the bottom of the page
    """
    return page_height_pt - y_top - height
