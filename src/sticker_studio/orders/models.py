"""
Module: orders.models

Purpose:
    Immutable data models for submitted sticker orders.

Key Classes:
    - DataUrlImage: Image decoded from a data URL
    - OrderKind: Sheet vs legacy single-design order
    - Order: Normalised order ready for the sheet engine

Used By:
    - orders.intake: Creates Orders from request payloads
    - orders.mailer: Builds order emails
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


@dataclass(frozen=True)
class DataUrlImage:
    """
    Image carried in a ``data:image/<ext>;base64,...`` URL.

    Attributes:
        ext: File extension ("png", "jpg", "webp", ...)
        base64_data: Base64 payload as received
        buffer: Decoded image bytes
    """
    ext: str
    base64_data: str
    buffer: bytes = field(repr=False)


class OrderKind(Enum):
    """Order payload format."""

    SHEET = "sheet"    # several designs, explicit slot list
    LEGACY = "legacy"  # one design repeated quantity times


@dataclass(frozen=True)
class Order:
    """
    Normalised order (immutable).

    Both payload formats end up here: legacy orders are expressed as a
    single image with ``quantity`` slots all pointing at it.

    Attributes:
        kind: Payload format the order arrived in
        customer_email: Customer contact address
        size: Size key as submitted (may be unknown to the engine)
        total: Price shown to the customer
        images: Unique designs
        slots: Image index for every physical sticker
        descriptions: Human-readable design descriptions
        quantity: Sticker count as stated by the client
        prompt: Original prompt (legacy orders only)
        style: Original style id (legacy orders only)

    Example:
        >>> order.is_sheet, order.slot_count
        (True, 20)
    """
    kind: OrderKind
    customer_email: str
    size: str
    total: Union[int, float, str, None]
    images: tuple[DataUrlImage, ...]
    slots: tuple[int, ...]
    descriptions: tuple[str, ...] = ()
    quantity: int = 0
    prompt: Optional[str] = None
    style: Optional[str] = None

    @property
    def is_sheet(self) -> bool:
        """Whether the order used the multi-design sheet format."""
        return self.kind is OrderKind.SHEET

    @property
    def slot_count(self) -> int:
        """Number of physical stickers to print."""
        return len(self.slots)

    @property
    def image_buffers(self) -> list[bytes]:
        """Decoded bytes of each unique design, in order."""
        return [img.buffer for img in self.images]
