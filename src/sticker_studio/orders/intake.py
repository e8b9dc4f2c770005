"""
Order Intake

Validates order submission payloads and normalises them into Order objects.

Two payload formats are accepted:

1. **Sheet** (``type == "sheet"``): ``images`` holds each unique design as a
   data URL and ``slots`` holds, for every physical sticker, the index of
   its design.
2. **Legacy** (anything else): a single ``image`` repeated ``quantity``
   times, with the ``prompt`` and ``style`` that produced it.

Validation fails fast: the payload is checked against
``schemas/order.schema.json`` and every image data URL must decode.
Slot indices are not range-checked here; the sheet engine owns that rule.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import jsonschema

from .data_urls import parse_data_url
from .models import DataUrlImage, Order, OrderKind

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTION = "Custom upload"

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / "schemas" / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class OrderValidationError(Exception):
    """Raised when an order payload is malformed."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_order(payload: Any) -> None:
    """
    Validate an order payload against the order schema.

    Args:
        payload: Decoded JSON request body

    Raises:
        OrderValidationError: If payload does not match the schema
    """
    schema = _load_schema("order")
    validator = jsonschema.Draft7Validator(schema)
    errors = sorted(
        validator.iter_errors(payload),
        key=lambda e: [str(p) for p in e.absolute_path],
    )
    if errors:
        first = errors[0]
        raise OrderValidationError(
            f"Order validation failed: {first.message}",
            path=".".join(str(p) for p in first.absolute_path),
            errors=[e.message for e in errors],
        )


def parse_order(payload: dict[str, Any]) -> Order:
    """
    Validate and normalise an order payload.

    Args:
        payload: Decoded JSON request body

    Returns:
        Order ready for the sheet engine and mailer

    Raises:
        OrderValidationError: If the payload is malformed or an image data
            URL cannot be decoded

    Example:
        >>> order = parse_order({
        ...     "type": "sheet",
        ...     "customerEmail": "ana@example.com",
        ...     "size": "Medium (7×7cm)",
        ...     "total": 9500,
        ...     "images": [fox_url, cat_url],
        ...     "slots": [0, 1, 0, 1],
        ... })
        >>> order.slot_count
        4
    """
    validate_order(payload)

    if payload.get("type") == OrderKind.SHEET.value:
        order = _parse_sheet(payload)
    else:
        order = _parse_legacy(payload)

    logger.info(
        f"New order received: type={order.kind.value}, designs={len(order.images)}, "
        f"slots={order.slot_count}, size={order.size!r}, total={order.total!r}, "
        f"customer={order.customer_email}"
    )
    return order


def _parse_sheet(payload: dict[str, Any]) -> Order:
    """Normalise a multi-design sheet order."""
    images = tuple(
        _decode_image(url, f"images.{i}") for i, url in enumerate(payload["images"])
    )
    # Draft-07 "integer" admits whole floats such as 2.0
    slots = tuple(int(s) for s in payload["slots"])

    return Order(
        kind=OrderKind.SHEET,
        customer_email=payload["customerEmail"],
        size=payload["size"],
        total=payload.get("total"),
        images=images,
        slots=slots,
        descriptions=tuple(payload.get("descriptions") or ()),
        quantity=int(payload.get("totalSlots") or len(slots)),
    )


def _parse_legacy(payload: dict[str, Any]) -> Order:
    """Normalise a single-design order into one image and repeated slots."""
    image_url = payload.get("image")
    images = (_decode_image(image_url, "image"),) if image_url else ()
    quantity = int(payload.get("quantity") or 1)
    prompt = payload.get("prompt")

    return Order(
        kind=OrderKind.LEGACY,
        customer_email=payload["customerEmail"],
        size=payload["size"],
        total=payload.get("total"),
        images=images,
        slots=(0,) * quantity,
        descriptions=(prompt or DEFAULT_DESCRIPTION,),
        quantity=quantity,
        prompt=prompt,
        style=payload.get("style"),
    )


def _decode_image(data_url: str, path: str) -> DataUrlImage:
    """Decode one data URL or reject the order."""
    image = parse_data_url(data_url)
    if image is None:
        raise OrderValidationError(
            "Image is not a base64 image data URL",
            path=path,
        )
    return image
