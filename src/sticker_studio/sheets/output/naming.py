"""Filenames for print-ready sheet attachments."""

from __future__ import annotations

import re
from typing import Optional


def print_ready_filename(slot_count: int, size_key: Optional[str]) -> str:
    """Build the attachment name for a print-ready PDF.

    Non-alphanumeric characters are stripped from the raw size key, so the
    name reflects what the customer picked even when the key was unknown.

    Examples:
        >>> print_ready_filename(20, "Medium (7×7cm)")
        'print-ready-20x-Medium77cm.pdf'
        >>> print_ready_filename(1, None)
        'print-ready-1x-.pdf'
    """
    size_slug = re.sub(r"[^A-Za-z0-9]", "", size_key or "")
    return f"print-ready-{slot_count}x-{size_slug}.pdf"
