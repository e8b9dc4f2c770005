"""
Module: sheets.images.fit

Purpose:
    Fit an image inside a box without cropping, preserving aspect ratio,
    and centre it in the leftover space.

Key Functions:
    - fit_inside(): Compute the drawn rectangle

Used By:
    - sheets.output.renderer: Image placement inside a cell
"""

from __future__ import annotations

from typing import Tuple


def fit_inside(
    image_size: Tuple[int, int],
    box: Tuple[float, float, float, float],
) -> Tuple[float, float, float, float]:
    """
    Scale an image to fit a box and centre it.

    The image is scaled uniformly so that it touches the box on at least
    one axis and never exceeds it on either.

    Args:
        image_size: (width, height) of the source image in pixels
        box: (x, y, width, height) of the target box, top-down

    Returns:
        (x, y, width, height) of the drawn image, top-down

    Raises:
        ValueError: If the image or box has no area

    Example:
        >>> fit_inside((200, 100), (0, 0, 50, 50))
        (0.0, 12.5, 50.0, 25.0)
    """
    img_w, img_h = image_size
    box_x, box_y, box_w, box_h = box

    if img_w <= 0 or img_h <= 0:
        raise ValueError(f"Image has no area: {img_w}x{img_h}")
    if box_w <= 0 or box_h <= 0:
        raise ValueError(f"Box has no area: {box_w}x{box_h}")

    scale = min(box_w / img_w, box_h / img_h)
    width = img_w * scale
    height = img_h * scale

    return (
        box_x + (box_w - width) / 2,
        box_y + (box_h - height) / 2,
        width,
        height,
    )
