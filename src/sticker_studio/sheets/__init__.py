"""
Module: sheets

Purpose:
    Print-ready sticker sheet engine. Tiles sticker images onto A4 pages
    in a centred grid with dashed cut guides and returns the PDF as bytes.

Key Functions:
    - build_sheet(): Main entry point for sheet generation
    - resolve_size(): Map a size key to a sticker size

Key Classes:
    - LayoutConfig: Page and spacing configuration
    - SheetResult: Build output
    - SheetSize: Named sticker sizes
    - SheetError: Base class for all build failures

Dependencies:
    - reportlab: PDF generation
    - PIL: Image decoding

Used By:
    - orders.mailer: Print-ready attachment for order emails
"""

from .errors import (
    SheetError,
    InvalidSlotReferenceError,
    DegenerateGeometryError,
    DrawFailureError,
)
from .sizes import SheetSize, DEFAULT_SIZE, resolve_size
from .layout import LayoutConfig
from .controller import build_sheet, SheetResult

__all__ = [
    # Config
    "LayoutConfig",
    "SheetSize",
    "DEFAULT_SIZE",
    "resolve_size",
    # Controller
    "build_sheet",
    "SheetResult",
    # Errors
    "SheetError",
    "InvalidSlotReferenceError",
    "DegenerateGeometryError",
    "DrawFailureError",
]
