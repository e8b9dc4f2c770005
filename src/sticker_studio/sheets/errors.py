"""
Module: sheets.errors

Purpose:
    Exceptions raised by the sheet layout engine. Every failure aborts the
    whole build; no partial document is ever returned.

Key Classes:
    - SheetError: Base class
    - InvalidSlotReferenceError: Slot index has no unique image
    - DegenerateGeometryError: Sticker too large for the page
    - DrawFailureError: Image could not be decoded or drawn

Used By:
    - sheets.layout.paginator
    - sheets.layout.grid
    - sheets.output.renderer
    - orders.mailer: Catches SheetError to send without the PDF
"""

from __future__ import annotations


class SheetError(Exception):
    """Error while building a sticker sheet."""
    pass


class InvalidSlotReferenceError(SheetError):
    """
    A slot references an image that does not exist.

    Attributes:
        slot: Position in the slot list
        image_index: Offending value
        image_count: Number of unique images supplied
    """

    def __init__(self, slot: int, image_index: object, image_count: int) -> None:
        super().__init__(
            f"Slot {slot} references image {image_index!r}, "
            f"but only {image_count} unique image(s) were supplied"
        )
        self.slot = slot
        self.image_index = image_index
        self.image_count = image_count


class DegenerateGeometryError(SheetError):
    """No sticker cell fits on the page at the requested size."""
    pass


class DrawFailureError(SheetError):
    """
    A sticker image could not be decoded or placed.

    Attributes:
        image_index: Unique image that failed
    """

    def __init__(self, message: str, image_index: int) -> None:
        super().__init__(message)
        self.image_index = image_index
