"""
Module: sheets.images.provider

Purpose:
    Access to the unique sticker images of one order.
    Images are decoded lazily from raw buffers and cached per index,
    so a design repeated across many slots is decoded only once.

Key Classes:
    - ImageProvider: Abstract base class for image access
    - BufferImageProvider: Decodes PNG/JPEG/WebP byte buffers
    - ImageDecodeError: Exception for undecodable buffers

Dependencies:
    - PIL: Image decoding

Used By:
    - sheets.output.renderer: Image drawing
    - sheets.controller: Build pipeline
"""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from typing import Dict, Sequence

from PIL import Image, UnidentifiedImageError

from sticker_studio.sheets.errors import DrawFailureError

# Modes ReportLab and PNG both handle without conversion
_DRAWABLE_MODES = ("RGB", "RGBA", "L", "LA")


class ImageDecodeError(DrawFailureError):
    """Image buffer could not be decoded."""
    pass


class ImageProvider(ABC):
    """
    Abstract interface for accessing unique sticker images by index.
    """

    @abstractmethod
    def get_image(self, index: int) -> Image.Image:
        """
        Get the decoded image at index.

        Args:
            index: Position in the unique image sequence

        Returns:
            PIL Image in a drawable mode

        Raises:
            ImageDecodeError: If the image cannot be decoded
        """

    @property
    @abstractmethod
    def image_count(self) -> int:
        """Number of unique images available."""


class BufferImageProvider(ImageProvider):
    """
    Provider over raw image buffers supplied with an order.

    The provider only reads the caller's buffers; it never mutates them.

    Example:
        >>> with BufferImageProvider([png_bytes, jpeg_bytes]) as provider:
        ...     provider.get_image(1).size
        (1024, 1024)
    """

    def __init__(self, buffers: Sequence[bytes]) -> None:
        """
        Initialize provider.

        Args:
            buffers: Encoded image bytes, one per unique image
        """
        self._buffers = list(buffers)
        self._decoded: Dict[int, Image.Image] = {}

    @property
    def image_count(self) -> int:
        """Number of unique images supplied."""
        return len(self._buffers)

    def get_image(self, index: int) -> Image.Image:
        """Get decoded image, decoding on first access."""
        if index not in self._decoded:
            self._decoded[index] = self._decode(index)
        return self._decoded[index]

    def _decode(self, index: int) -> Image.Image:
        """Decode and normalise one buffer."""
        try:
            buffer = self._buffers[index]
        except IndexError:
            raise ImageDecodeError(
                f"No image at index {index} ({self.image_count} supplied)",
                image_index=index,
            ) from None

        try:
            img = Image.open(io.BytesIO(buffer))
            img.load()
        except (UnidentifiedImageError, OSError, ValueError) as e:
            raise ImageDecodeError(
                f"Image {index} could not be decoded: {e}",
                image_index=index,
            ) from e

        if img.width <= 0 or img.height <= 0:
            raise ImageDecodeError(
                f"Image {index} has no pixels ({img.width}x{img.height})",
                image_index=index,
            )

        if img.mode not in _DRAWABLE_MODES:
            img = img.convert("RGBA")
        return img

    def close(self) -> None:
        """Close decoded images and free resources."""
        for img in self._decoded.values():
            img.close()
        self._decoded.clear()

    def __enter__(self) -> "BufferImageProvider":
        """Context manager entry."""
        return self

    def __exit__(self, *args) -> None:
        """Context manager exit - close resources."""
        self.close()
