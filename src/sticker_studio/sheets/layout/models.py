"""
Module: sheets.layout.models

Purpose:
    Data models for sticker sheet layout.
    Immutable dataclasses describing grid geometry, cell placements and pages.

Key Classes:
    - GridGeometry: Derived grid dimensions shared by every page
    - CellPlacement: One slot positioned on a page
    - PagePlan: Complete page layout
    - SheetLayout: Final layout output

Dependencies:
    - dataclasses (std)

Used By:
    - sheets.layout.grid: Creates GridGeometry
    - sheets.layout.paginator: Creates PagePlans
    - sheets.output.renderer: Draws SheetLayout

Coordinates are top-down (origin at the page's top-left corner), in points.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class GridGeometry:
    """
    Grid geometry for one document (immutable).

    Attributes:
        page_width: Page width in points
        page_height: Page height in points
        size_pt: Sticker side length in points
        margin: Page margin in points
        gap: Inter-sticker gap in points
        cols: Columns per page
        rows: Rows per page
        offset_x: Left edge of the centred grid
        offset_y: Top edge of the centred grid

    Example:
        >>> geometry.cols, geometry.rows
        (2, 4)
        >>> geometry.per_page
        8
    """

    page_width: float
    page_height: float
    size_pt: float
    margin: float
    gap: float
    cols: int
    rows: int
    offset_x: float
    offset_y: float

    @property
    def per_page(self) -> int:
        """Number of sticker cells on one page."""
        return self.cols * self.rows

    @property
    def pitch(self) -> float:
        """Distance between the top-left corners of neighbouring cells."""
        return self.size_pt + self.gap

    @property
    def grid_width(self) -> float:
        """Horizontal footprint of a full row of cells."""
        return self.cols * self.size_pt + (self.cols - 1) * self.gap

    @property
    def grid_height(self) -> float:
        """Vertical footprint of a full column of cells."""
        return self.rows * self.size_pt + (self.rows - 1) * self.gap

    def page_count(self, slot_count: int) -> int:
        """Pages needed for slot_count stickers (0 for no stickers)."""
        if slot_count <= 0:
            return 0
        return math.ceil(slot_count / self.per_page)

    def cell_origin(self, row: int, col: int) -> Tuple[float, float]:
        """Top-left corner (x, y) of the cell at row, col."""
        return (
            self.offset_x + col * self.pitch,
            self.offset_y + row * self.pitch,
        )


@dataclass(frozen=True)
class CellPlacement:
    """
    A slot positioned on a page.

    Attributes:
        slot: Position in the slot list (0-indexed, document wide)
        image_index: Unique image drawn in this cell
        row: Grid row on the page
        col: Grid column on the page
        x: Left edge in points
        y: Top edge in points (top-down)
        size: Side length in points
    """

    slot: int
    image_index: int
    row: int
    col: int
    x: float
    y: float
    size: float

    def image_box(self, inset: float) -> Tuple[float, float, float, float]:
        """
        Box available to the image, inset from the cut guide on all sides.

        Returns:
            Tuple of (x, y, width, height), top-down
        """
        return (
            self.x + inset,
            self.y + inset,
            self.size - 2 * inset,
            self.size - 2 * inset,
        )


@dataclass(frozen=True)
class PagePlan:
    """
    Complete layout plan for a single page.

    Attributes:
        index: Page number (0-indexed)
        placements: Filled cells in row-major order

    Example:
        >>> page = PagePlan(index=2, placements=(p1, p2, p3, p4))
        >>> page.placement_count
        4
    """

    index: int
    placements: tuple[CellPlacement, ...]

    @property
    def placement_count(self) -> int:
        """Number of filled cells on this page."""
        return len(self.placements)

    @property
    def is_empty(self) -> bool:
        """Check if page has no placements."""
        return len(self.placements) == 0


@dataclass(frozen=True)
class SheetLayout:
    """
    Final layout output.

    Attributes:
        geometry: Grid geometry shared by all pages
        pages: Tuple of PagePlans
        slot_count: Number of slots laid out

    Example:
        >>> layout.page_count
        3
        >>> layout.total_placements
        20
    """

    geometry: GridGeometry
    pages: tuple[PagePlan, ...]
    slot_count: int

    @property
    def page_count(self) -> int:
        """Number of pages in layout."""
        return len(self.pages)

    @property
    def total_placements(self) -> int:
        """Total number of filled cells across all pages."""
        return sum(p.placement_count for p in self.pages)
