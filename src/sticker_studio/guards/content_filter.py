"""
Module: guards.content_filter

Purpose:
    Keyword blocklist for generation and edit prompts.
    A prompt is rejected when any blocked fragment appears anywhere in it,
    case-insensitively. Fragments such as "explos" deliberately match
    word stems.

Key Classes:
    - KeywordContentFilter: Substring blocklist
    - UnsafePromptError: Raised by ensure_safe()

Used By:
    - Request handlers, skipped for admin clients (see guards.quota)
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

BLOCKED_WORDS: tuple[str, ...] = (
    "nude", "naked", "nsfw", "porn", "sex", "sexual", "erotic", "hentai",
    "gore", "blood", "murder", "kill", "torture", "mutilat", "dismember",
    "gun", "rifle", "pistol", "weapon", "bomb", "explos", "terrorist",
    "drug", "cocaine", "heroin", "meth",
    "racist", "slur", "hate", "nazi", "swastika",
    "suicide", "self-harm", "cutting",
)

REJECTION_MESSAGE = (
    "Your prompt contains content that is not allowed. "
    "Please keep it family-friendly!"
)


class UnsafePromptError(Exception):
    """
    Prompt matched the blocklist.

    Attributes:
        match: Blocked fragment that was found
    """

    def __init__(self, match: str) -> None:
        super().__init__(REJECTION_MESSAGE)
        self.match = match


class KeywordContentFilter:
    """
    Case-insensitive substring blocklist.

    Example:
        >>> f = KeywordContentFilter()
        >>> f.is_safe("a happy cactus")
        True
        >>> f.first_match("Explosive fireworks")
        'explos'
    """

    def __init__(self, blocked_words: Iterable[str] = BLOCKED_WORDS) -> None:
        self.blocked_words = tuple(w.lower() for w in blocked_words if w)

    def first_match(self, prompt: str) -> Optional[str]:
        """Return the first blocked fragment found in prompt, or None."""
        lower = prompt.lower()
        for word in self.blocked_words:
            if word in lower:
                return word
        return None

    def is_safe(self, prompt: str) -> bool:
        """Whether prompt contains no blocked fragment."""
        return self.first_match(prompt) is None

    def ensure_safe(self, prompt: str) -> None:
        """
        Reject an unsafe prompt.

        Raises:
            UnsafePromptError: If prompt contains a blocked fragment
        """
        match = self.first_match(prompt)
        if match is not None:
            logger.info(f"Rejected prompt containing {match!r}")
            raise UnsafePromptError(match)
