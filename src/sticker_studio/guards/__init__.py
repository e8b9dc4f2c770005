"""
Module: guards

Purpose:
    Request guards placed in front of the image API: a per-client usage
    quota and a keyword content filter. Both are plain services meant to be
    constructed once and injected into request handlers.

Key Classes:
    - UsageQuota: Per-client fixed-window counter
    - KeywordContentFilter: Prompt blocklist
"""

from .quota import UsageQuota, QuotaStatus, QuotaExceededError, ADMIN_REMAINING
from .content_filter import (
    KeywordContentFilter,
    UnsafePromptError,
    BLOCKED_WORDS,
)

__all__ = [
    # Quota
    "UsageQuota",
    "QuotaStatus",
    "QuotaExceededError",
    "ADMIN_REMAINING",
    # Content filter
    "KeywordContentFilter",
    "UnsafePromptError",
    "BLOCKED_WORDS",
]
