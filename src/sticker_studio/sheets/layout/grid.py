"""
Module: sheets.layout.grid

Purpose:
    Compute grid geometry for a sticker size on a fixed page.
    Geometry is a pure function of the sticker size and LayoutConfig.

Key Functions:
    - compute_geometry(): Main geometry function

Algorithm:
    1. Convert sticker side from cm to points
    2. Count how many (size + gap) cells fit the printable width/height,
       adding one gap back because the last cell has no trailing gap
    3. Centre the resulting grid on the page

Dependencies:
    - sheets.layout.config: LayoutConfig
    - sheets.layout.models: GridGeometry

Used By:
    - sheets.controller: Build pipeline
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace

from sticker_studio.sheets.errors import DegenerateGeometryError

from .config import LayoutConfig
from .models import GridGeometry

logger = logging.getLogger(__name__)


def compute_geometry(size_cm: float, config: LayoutConfig) -> GridGeometry:
    """
    Compute the sticker grid for one document.

    Args:
        size_cm: Sticker side length in centimetres
        config: Layout configuration

    Returns:
        GridGeometry identical for every page of the document

    Raises:
        ValueError: If size_cm is not positive
        DegenerateGeometryError: If not a single sticker fits on the page

    Example:
        >>> g = compute_geometry(7, LayoutConfig())
        >>> (g.cols, g.rows, round(g.offset_x, 3))
        (2, 4, 96.355)
    """
    if size_cm <= 0:
        raise ValueError(f"size_cm must be positive: {size_cm}")

    size_pt = size_cm * config.cm_to_pt
    margin = config.margin_pt
    gap = config.gap_pt

    cols = math.floor((config.page_width - 2 * margin + gap) / (size_pt + gap))
    rows = math.floor((config.page_height - 2 * margin + gap) / (size_pt + gap))

    if cols <= 0 or rows <= 0:
        raise DegenerateGeometryError(
            f"A {size_cm}cm sticker ({size_pt:.2f}pt) does not fit on a "
            f"{config.page_width}x{config.page_height}pt page "
            f"({cols} columns x {rows} rows)"
        )

    unplaced = GridGeometry(
        page_width=config.page_width,
        page_height=config.page_height,
        size_pt=size_pt,
        margin=margin,
        gap=gap,
        cols=cols,
        rows=rows,
        offset_x=0.0,
        offset_y=0.0,
    )
    # Centre using the model's own footprint
    geometry = replace(
        unplaced,
        offset_x=(config.page_width - unplaced.grid_width) / 2,
        offset_y=(config.page_height - unplaced.grid_height) / 2,
    )

    logger.debug(
        f"Grid for {size_cm}cm: {cols}x{rows} ({geometry.per_page}/page), "
        f"offset ({geometry.offset_x:.2f}, {geometry.offset_y:.2f})"
    )
    return geometry
