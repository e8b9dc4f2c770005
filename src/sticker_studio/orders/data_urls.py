"""Parsing of base64 image data URLs sent by the frontend."""

from __future__ import annotations

import base64
import binascii
import re
from typing import Optional

from .models import DataUrlImage

_DATA_URL_RE = re.compile(r"^data:image/(\w+);base64,(.+)$", re.DOTALL)


def parse_data_url(data_url: str) -> Optional[DataUrlImage]:
    """Parse a ``data:image/<ext>;base64,<payload>`` URL.

    ``jpeg`` is reported as ``jpg`` so it can be used as a file extension.

    Returns:
        DataUrlImage, or None if the text is not an image data URL or the
        payload is not valid base64.

    Examples:
        >>> parse_data_url("data:image/jpeg;base64,/9j/4AAQ").ext
        'jpg'
        >>> parse_data_url("https://example.com/cat.png") is None
        True
    """
    if not isinstance(data_url, str):
        return None

    match = _DATA_URL_RE.match(data_url)
    if not match:
        return None

    ext, payload = match.group(1), match.group(2)
    try:
        buffer = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        return None

    return DataUrlImage(
        ext="jpg" if ext == "jpeg" else ext,
        base64_data=payload,
        buffer=buffer,
    )
