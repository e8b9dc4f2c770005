"""
Module: sheets.layout.paginator

Purpose:
    Arrange slots onto pages of a fixed sticker grid.
    Slots are consumed strictly in order, row-major within each page.

Key Functions:
    - paginate(): Main pagination function
    - validate_slots(): Check every slot resolves to a unique image

Algorithm:
    1. Validate every slot before laying anything out
    2. For each page, walk rows then columns
    3. Stop the moment every slot is placed; remaining cells stay blank

Dependencies:
    - sheets.layout.models: GridGeometry, CellPlacement, PagePlan, SheetLayout

Used By:
    - sheets.controller: Build pipeline
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from sticker_studio.sheets.errors import InvalidSlotReferenceError

from .models import CellPlacement, GridGeometry, PagePlan, SheetLayout

logger = logging.getLogger(__name__)


def validate_slots(slots: Sequence[int], image_count: int) -> None:
    """
    Check that every slot references one of image_count unique images.

    Args:
        slots: Slot list (indices into the unique images)
        image_count: Number of unique images supplied

    Raises:
        InvalidSlotReferenceError: On the first slot that does not resolve
    """
    for slot, image_index in enumerate(slots):
        # bool is an int subclass but never a valid reference
        if isinstance(image_index, bool) or not isinstance(image_index, int):
            raise InvalidSlotReferenceError(slot, image_index, image_count)
        if not 0 <= image_index < image_count:
            raise InvalidSlotReferenceError(slot, image_index, image_count)


def paginate(
    slots: Sequence[int],
    geometry: GridGeometry,
    image_count: int,
) -> SheetLayout:
    """
    Lay slots out onto pages.

    Rules:
    1. Pages are filled row by row, left to right.
    2. A slot's cell is the next free cell; slots never skip cells.
    3. The last page may be partially filled. Cells beyond the last slot
       get no placement at all.

    Args:
        slots: Slot list (indices into the unique images)
        geometry: Grid geometry for the document
        image_count: Number of unique images supplied

    Returns:
        SheetLayout with one PagePlan per page

    Raises:
        InvalidSlotReferenceError: If any slot does not resolve

    Example:
        >>> layout = paginate([0, 1, 2] * 7, geometry, image_count=3)
        >>> [p.placement_count for p in layout.pages]
        [8, 8, 5]
    """
    validate_slots(slots, image_count)

    quantity = len(slots)
    total_pages = geometry.page_count(quantity)
    pages: List[PagePlan] = []
    placed = 0

    for page_index in range(total_pages):
        placements: List[CellPlacement] = []
        for row in range(geometry.rows):
            if placed >= quantity:
                break
            for col in range(geometry.cols):
                if placed >= quantity:
                    break
                x, y = geometry.cell_origin(row, col)
                placements.append(CellPlacement(
                    slot=placed,
                    image_index=slots[placed],
                    row=row,
                    col=col,
                    x=x,
                    y=y,
                    size=geometry.size_pt,
                ))
                placed += 1

        pages.append(PagePlan(index=page_index, placements=tuple(placements)))

    logger.info(f"Paginated {quantity} stickers onto {len(pages)} pages")

    return SheetLayout(
        geometry=geometry,
        pages=tuple(pages),
        slot_count=quantity,
    )
