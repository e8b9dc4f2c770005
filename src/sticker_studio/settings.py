"""
Module: settings

Purpose:
    Service settings for the order and quota glue, loaded from environment
    variables (or a .env file) with Pydantic Settings. The sheet engine does
    not read these; it is configured through LayoutConfig.

Environment variables:
    DAILY_LIMIT         Generations per client per window (default 5)
    QUOTA_WINDOW_HOURS  Length of the quota window (default 24)
    ADMIN_IPS           Comma-separated client ids exempt from quota/filter
    BUSINESS_EMAIL      Order email recipient; email is disabled when unset
    EMAIL_FROM          Order email sender

Key Classes:
    - StudioSettings: Environment-backed settings

Dependencies:
    - pydantic, pydantic-settings

Used By:
    - guards.quota: UsageQuota.from_settings()
    - orders.mailer: OrderMailer
"""

from __future__ import annotations

from typing import FrozenSet, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_EMAIL_FROM = "Sticker Studio <onboarding@resend.dev>"


class StudioSettings(BaseSettings):
    """
    Settings for quota enforcement and order email.

    No global instance is created; construct one at startup and pass it to
    the services that need it.

    Example:
        >>> settings = StudioSettings(daily_limit=3, admin_ips="10.0.0.1, 10.0.0.2")
        >>> sorted(settings.admin_ip_set)
        ['10.0.0.1', '10.0.0.2']
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    daily_limit: int = Field(
        default=5,
        ge=1,
        description="Generations allowed per client per quota window",
    )
    quota_window_hours: float = Field(
        default=24.0,
        gt=0,
        description="Hours before a client's usage count resets",
    )
    admin_ips: str = Field(
        default="",
        description="Comma-separated client ids exempt from quota and content filter",
    )
    business_email: Optional[str] = Field(
        default=None,
        description="Recipient of order emails; order email is skipped when unset",
    )
    email_from: str = Field(
        default=DEFAULT_EMAIL_FROM,
        description="Sender shown on order emails",
    )

    @property
    def admin_ip_set(self) -> FrozenSet[str]:
        """Admin client ids with whitespace and empty entries removed."""
        return frozenset(ip.strip() for ip in self.admin_ips.split(",") if ip.strip())

    @property
    def quota_window_seconds(self) -> float:
        """Quota window length in seconds."""
        return self.quota_window_hours * 60 * 60

    @property
    def email_enabled(self) -> bool:
        """Whether order emails have somewhere to go."""
        return bool(self.business_email)
