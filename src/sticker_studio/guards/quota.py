"""
Module: guards.quota

Purpose:
    Per-client usage quota for image generation and editing.
    Each client gets a fixed number of uses per window; the window resets
    lazily the first time the client is seen after it expires.

Key Classes:
    - UsageQuota: In-memory quota service keyed by client identity
    - QuotaStatus: Snapshot returned by check() and consume()
    - QuotaExceededError: Raised when a client has no uses left

Dependencies:
    - threading (std): Counter updates from concurrent requests

Used By:
    - Request handlers: check() before calling the image API,
      record() after a successful generation, or consume() to count up
      front in one locked step

Counters live in process memory and are lost on restart.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Iterable

from sticker_studio.settings import StudioSettings

logger = logging.getLogger(__name__)

DAY_SECONDS = 24 * 60 * 60

# Remaining count reported to admins, who are never counted
ADMIN_REMAINING = 999


class QuotaExceededError(Exception):
    """
    Client has used up its quota for the current window.

    Attributes:
        client_id: Client that was refused
        limit: Uses allowed per window
        hours_left: Whole hours (rounded up) until the window resets
    """

    def __init__(self, client_id: str, limit: int, hours_left: int) -> None:
        plural = "" if hours_left == 1 else "s"
        super().__init__(
            f"Daily limit reached ({limit} per day). "
            f"Try again in ~{hours_left} hour{plural}."
        )
        self.client_id = client_id
        self.limit = limit
        self.hours_left = hours_left


@dataclass(frozen=True)
class QuotaStatus:
    """
    Usage snapshot for one client.

    Attributes:
        client_id: Client identity (usually the request IP)
        used: Uses counted in the current window
        remaining: Uses left in the current window
        reset_at: Epoch seconds when the window resets
        is_admin: Whether the client is exempt
    """
    client_id: str
    used: int
    remaining: int
    reset_at: float
    is_admin: bool = False


@dataclass
class _Window:
    """Mutable per-client counter (guarded by UsageQuota._lock)."""
    used: int
    reset_at: float


class UsageQuota:
    """
    Fixed-window usage counter keyed by client identity.

    Example:
        >>> quota = UsageQuota(limit=2)
        >>> quota.check("203.0.113.9").remaining
        2
        >>> quota.record("203.0.113.9")
        1
    """

    def __init__(
        self,
        limit: int,
        *,
        window_seconds: float = DAY_SECONDS,
        admin_ids: Iterable[str] = (),
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Initialize quota service.

        Args:
            limit: Uses allowed per client per window
            window_seconds: Window length
            admin_ids: Client ids that are never counted or refused
            clock: Returns current time in epoch seconds
        """
        if limit < 1:
            raise ValueError(f"limit must be positive: {limit}")
        if window_seconds <= 0:
            raise ValueError(f"window_seconds must be positive: {window_seconds}")

        self.limit = limit
        self.window_seconds = window_seconds
        self.admin_ids = frozenset(admin_ids)
        self._clock = clock
        self._windows: Dict[str, _Window] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_settings(
        cls,
        settings: StudioSettings,
        *,
        clock: Callable[[], float] = time.time,
    ) -> "UsageQuota":
        """Create a quota service from environment-backed settings."""
        return cls(
            settings.daily_limit,
            window_seconds=settings.quota_window_seconds,
            admin_ids=settings.admin_ip_set,
            clock=clock,
        )

    def is_admin(self, client_id: str) -> bool:
        """Whether client_id is exempt from quota and content checks."""
        return client_id in self.admin_ids

    def check(self, client_id: str) -> QuotaStatus:
        """
        Check that client_id may make another request.

        Does not count a use; call record() once the request succeeds.

        Returns:
            QuotaStatus for the client

        Raises:
            QuotaExceededError: If no uses remain in the current window
        """
        if self.is_admin(client_id):
            return self._admin_status(client_id)

        with self._lock:
            window = self._current_window(client_id)
            status = self._status(client_id, window)

        if status.remaining <= 0:
            raise self._exceeded(status)

        return status

    def consume(self, client_id: str) -> QuotaStatus:
        """
        Check and count one use in a single step.

        Concurrent callers cannot both take the last use, unlike a separate
        check() followed by record().

        Returns:
            QuotaStatus after this use is counted

        Raises:
            QuotaExceededError: If no uses remain; nothing is counted
        """
        if self.is_admin(client_id):
            return self._admin_status(client_id)

        with self._lock:
            window = self._current_window(client_id)
            status = self._status(client_id, window)
            if status.remaining > 0:
                window.used += 1
                status = self._status(client_id, window)
                exhausted = False
            else:
                exhausted = True

        if exhausted:
            raise self._exceeded(status)

        logger.debug(f"Consumed use for {client_id}: {status.remaining} remaining")
        return status

    def record(self, client_id: str) -> int:
        """
        Count one use for client_id.

        Returns:
            Uses remaining after this one (ADMIN_REMAINING for admins)
        """
        if self.is_admin(client_id):
            return ADMIN_REMAINING

        with self._lock:
            window = self._current_window(client_id)
            window.used += 1
            remaining = max(0, self.limit - window.used)

        logger.debug(f"Recorded use for {client_id}: {remaining} remaining")
        return remaining

    def remaining(self, client_id: str) -> int:
        """Uses left for client_id in the current window."""
        if self.is_admin(client_id):
            return ADMIN_REMAINING
        with self._lock:
            return self._status(client_id, self._current_window(client_id)).remaining

    def _current_window(self, client_id: str) -> _Window:
        """Get or reset the client's window. Caller holds the lock."""
        now = self._clock()
        window = self._windows.get(client_id)
        if window is None:
            window = self._windows[client_id] = _Window(
                used=0, reset_at=now + self.window_seconds
            )
        elif now > window.reset_at:
            window.used = 0
            window.reset_at = now + self.window_seconds
        return window

    def _status(self, client_id: str, window: _Window) -> QuotaStatus:
        """Build a snapshot from a window."""
        return QuotaStatus(
            client_id=client_id,
            used=window.used,
            remaining=max(0, self.limit - window.used),
            reset_at=window.reset_at,
        )

    def _exceeded(self, status: QuotaStatus) -> QuotaExceededError:
        """Build the refusal for an exhausted window."""
        hours_left = math.ceil((status.reset_at - self._clock()) / 3600)
        logger.info(f"Quota exhausted for {status.client_id}, resets in ~{hours_left}h")
        return QuotaExceededError(status.client_id, self.limit, hours_left)

    def _admin_status(self, client_id: str) -> QuotaStatus:
        """Snapshot reported for exempt clients."""
        return QuotaStatus(
            client_id=client_id,
            used=0,
            remaining=ADMIN_REMAINING,
            reset_at=self._clock() + self.window_seconds,
            is_admin=True,
        )
