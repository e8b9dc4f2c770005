"""
Module: sheets.sizes

Purpose:
    Named sticker sizes offered to customers and their physical side length.
    Unknown size keys resolve to the default (Medium) instead of failing.

Key Classes:
    - SheetSize: Named square sticker size

Key Functions:
    - resolve_size(): Map a size key to a SheetSize

Used By:
    - sheets.controller: Geometry input
    - orders.mailer: Subject and attachment naming
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class SheetSize(Enum):
    """
    Square sticker sizes, keyed by the label shown to customers.

    Example:
        >>> SheetSize("Large (10×10cm)").side_cm
        10
    """

    MEDIUM = "Medium (7×7cm)"
    LARGE = "Large (10×10cm)"

    @property
    def label(self) -> str:
        """Customer-facing size key."""
        return self.value

    @property
    def side_cm(self) -> int:
        """Sticker side length in centimetres."""
        return _SIDE_CM[self]


_SIDE_CM = {
    SheetSize.MEDIUM: 7,
    SheetSize.LARGE: 10,
}

DEFAULT_SIZE = SheetSize.MEDIUM


def resolve_size(size_key: Optional[str]) -> SheetSize:
    """
    Resolve a size key to a SheetSize.

    Unrecognised, empty or missing keys fall back to DEFAULT_SIZE.

    Args:
        size_key: Size label as submitted with the order

    Returns:
        Matching SheetSize, or DEFAULT_SIZE

    Example:
        >>> resolve_size("Gigantic")
        <SheetSize.MEDIUM: 'Medium (7×7cm)'>
    """
    try:
        return SheetSize(size_key)
    except ValueError:
        logger.debug(f"Unknown size key {size_key!r}, using {DEFAULT_SIZE.label}")
        return DEFAULT_SIZE
