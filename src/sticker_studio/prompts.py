"""
Module: prompts

Purpose:
    Sticker prompt composition for the generation and edit endpoints.
    Each request is wrapped in fixed sticker boilerplate (white background,
    die-cut look, family-friendly) and, for new designs, a style directive.
    Calling the image API itself happens elsewhere.

Key Functions:
    - build_generation_prompt(): Prompt for a new design
    - build_edit_prompt(): Prompt for editing an existing design
    - detect_mime_type(): Mime type of an image data URL

Example:
    >>> text = build_generation_prompt("a sleepy fox", "kawaii")
    >>> detect_mime_type("data:image/webp;base64,UklGRg==")
    'image/webp'
"""

from __future__ import annotations

from typing import Optional

# Style presets, keyed by the style id sent by the frontend
STYLE_PRESETS: dict[str, str] = {
    "realistic": "photorealistic, highly detailed, professional photography, 8k uhd, sharp focus",
    "cartoon": "cartoon style, colorful, fun, animated, disney pixar style, vibrant",
    "kawaii": (
        "kawaii style, cute, chibi, adorable, pastel colors, japanese cute aesthetic, "
        "rounded shapes"
    ),
    "watercolor": (
        "watercolor painting, soft colors, artistic, delicate brushstrokes, fine art, painterly"
    ),
    "3d": "3d render, clay render, blender style, cute 3d character, smooth, rounded, soft lighting",
    "minimalist": "minimalist design, simple shapes, clean lines, flat design, vector style, geometric",
    "vintage": (
        "vintage style, retro, nostalgic, old fashioned, classic illustration, muted colors"
    ),
    "neon": (
        "neon lights, glowing, cyberpunk, vibrant neon colors, dark background with bright glow, "
        "synthwave"
    ),
}

DEFAULT_STYLE = "realistic"

SAFETY_DIRECTIVE = (
    "Must be family-friendly and safe for all ages. "
    "No violence, nudity, weapons, or offensive content."
)

GENERATION_DIRECTIVE = (
    "Important: White background, die-cut sticker style, centered composition, "
    "high quality, vibrant colors, clean edges suitable for printing as a physical sticker."
)

EDIT_DIRECTIVE = (
    "Keep it as a sticker design with white background, die-cut style, centered "
    "composition, high quality, vibrant colors, clean edges suitable for printing."
)

_MIME_PREFIXES = (
    ("data:image/jpeg", "image/jpeg"),
    ("data:image/webp", "image/webp"),
)
DEFAULT_MIME_TYPE = "image/png"


def style_directive(style: Optional[str]) -> str:
    """Return the preset text for style, falling back to DEFAULT_STYLE."""
    return STYLE_PRESETS.get(style or "", STYLE_PRESETS[DEFAULT_STYLE])


def build_generation_prompt(prompt: str, style: Optional[str] = None) -> str:
    """Compose the full prompt for a new sticker design.

    Args:
        prompt: The customer's description.
        style: Style preset id; unknown ids use the realistic preset.

    Returns:
        Prompt text ready to send to the image model.

    Raises:
        ValueError: If the prompt is blank.
    """
    if not prompt or not prompt.strip():
        raise ValueError("Prompt is required")

    return (
        f"Generate an image of a sticker design: {prompt.strip()}.\n"
        f"Style: {style_directive(style)}.\n"
        f"{GENERATION_DIRECTIVE} {SAFETY_DIRECTIVE}"
    )


def build_edit_prompt(instructions: str) -> str:
    """Compose the full prompt for editing an existing sticker.

    Raises:
        ValueError: If the instructions are blank.
    """
    if not instructions or not instructions.strip():
        raise ValueError("Edit instructions are required")

    return (
        f"Edit this sticker image: {instructions.strip()}.\n"
        f"{EDIT_DIRECTIVE} {SAFETY_DIRECTIVE}"
    )


def detect_mime_type(data_url: str) -> str:
    """Guess the mime type of an image data URL (PNG unless JPEG or WebP)."""
    for prefix, mime_type in _MIME_PREFIXES:
        if data_url.startswith(prefix):
            return mime_type
    return DEFAULT_MIME_TYPE
