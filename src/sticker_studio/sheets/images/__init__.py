"""
Module: sheets.images

Purpose:
    Image access and placement helpers for sticker sheets.

Key Classes:
    - ImageProvider: Abstract interface for image access
    - BufferImageProvider: Lazy decoder over raw buffers

Key Functions:
    - fit_inside(): Aspect-preserving fit of an image in a box

Dependencies:
    - PIL: Image decoding

Used By:
    - sheets.output.renderer: PDF drawing
    - sheets.controller: Build pipeline
"""

from .provider import ImageProvider, BufferImageProvider, ImageDecodeError
from .fit import fit_inside

__all__ = [
    "ImageProvider",
    "BufferImageProvider",
    "ImageDecodeError",
    "fit_inside",
]
