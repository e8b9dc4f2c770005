"""
Module: sheets.layout

Purpose:
    Grid geometry and pagination for sticker sheets.
    Converts a slot list into positioned page layouts.

Key Functions:
    - compute_geometry(): Grid dimensions for a sticker size
    - paginate(): Arrange slots onto pages

Key Classes:
    - LayoutConfig: Configuration for page layout
    - GridGeometry: Derived grid dimensions
    - CellPlacement: Slot positioned on a page
    - PagePlan: Single page layout plan
    - SheetLayout: Complete document layout

Used By:
    - sheets.controller: Main build controller
"""

from .config import LayoutConfig
from .models import GridGeometry, CellPlacement, PagePlan, SheetLayout
from .grid import compute_geometry
from .paginator import paginate, validate_slots

__all__ = [
    # Config
    "LayoutConfig",
    # Models
    "GridGeometry",
    "CellPlacement",
    "PagePlan",
    "SheetLayout",
    # Functions
    "compute_geometry",
    "paginate",
    "validate_slots",
]
