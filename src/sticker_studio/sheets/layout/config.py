"""
Module: sheets.layout.config

Purpose:
    Configuration for the sticker sheet layout engine.
    Defines page dimensions, unit conversion, spacing and cut-guide styling.

Key Classes:
    - LayoutConfig: Immutable layout configuration

Dependencies:
    - dataclasses (std)

Used By:
    - sheets.layout.grid: Geometry computation
    - sheets.output.renderer: Cut-guide and image drawing
"""

from __future__ import annotations

from dataclasses import dataclass


# ISO A4 portrait in PDF points
A4_WIDTH_PT = 595.28
A4_HEIGHT_PT = 841.89
CM_TO_PT = 28.35


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for sticker sheet layout (immutable).

    All lengths are in PDF points except margin_cm and gap_cm, which are
    converted with cm_to_pt.

    Attributes:
        page_width: Page width in points
        page_height: Page height in points
        cm_to_pt: Points per centimetre
        margin_cm: Minimum page margin around the grid
        gap_cm: Gap between neighbouring stickers
        image_inset: Distance between the cut guide and the image box
        border_color: Cut-guide stroke colour (hex)
        border_dash: Cut-guide dash pattern (on, off)

    Example:
        >>> config = LayoutConfig()
        >>> round(config.margin_pt, 3)
        8.505
    """

    # Page dimensions
    page_width: float = A4_WIDTH_PT
    page_height: float = A4_HEIGHT_PT
    cm_to_pt: float = CM_TO_PT

    # Spacing
    margin_cm: float = 0.3
    gap_cm: float = 0.2
    image_inset: float = 2.0

    # Cut guides
    border_color: str = "#cccccc"
    border_dash: tuple[float, float] = (3, 3)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        if self.cm_to_pt <= 0:
            raise ValueError(f"cm_to_pt must be positive: {self.cm_to_pt}")
        if self.margin_cm < 0:
            raise ValueError(f"margin_cm must be non-negative: {self.margin_cm}")
        if self.gap_cm < 0:
            raise ValueError(f"gap_cm must be non-negative: {self.gap_cm}")
        if self.image_inset < 0:
            raise ValueError(f"image_inset must be non-negative: {self.image_inset}")
        if self.printable_width <= 0:
            raise ValueError("Margins exceed page width")
        if self.printable_height <= 0:
            raise ValueError("Margins exceed page height")

    @property
    def margin_pt(self) -> float:
        """Page margin in points."""
        return self.margin_cm * self.cm_to_pt

    @property
    def gap_pt(self) -> float:
        """Inter-sticker gap in points."""
        return self.gap_cm * self.cm_to_pt

    @property
    def printable_width(self) -> float:
        """Width available for stickers (excluding margins)."""
        return self.page_width - 2 * self.margin_pt

    @property
    def printable_height(self) -> float:
        """Height available for stickers (excluding margins)."""
        return self.page_height - 2 * self.margin_pt
