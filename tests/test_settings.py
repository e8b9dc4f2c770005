"""
Tests for environment-backed settings.
"""

import pytest
from pydantic import ValidationError

from sticker_studio.settings import DEFAULT_EMAIL_FROM, StudioSettings

ENV_VARS = ("DAILY_LIMIT", "QUOTA_WINDOW_HOURS", "ADMIN_IPS", "BUSINESS_EMAIL", "EMAIL_FROM")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_when_env_empty():
    settings = StudioSettings(_env_file=None)

    assert settings.daily_limit == 5
    assert settings.quota_window_seconds == 24 * 3600
    assert settings.admin_ip_set == frozenset()
    assert settings.business_email is None
    assert not settings.email_enabled
    assert settings.email_from == DEFAULT_EMAIL_FROM


def test_values_when_env_set_then_loaded(monkeypatch):
    monkeypatch.setenv("DAILY_LIMIT", "10")
    monkeypatch.setenv("ADMIN_IPS", " 10.0.0.1 ,, 10.0.0.2 ")
    monkeypatch.setenv("BUSINESS_EMAIL", "orders@example.com")

    settings = StudioSettings(_env_file=None)

    assert settings.daily_limit == 10
    assert settings.admin_ip_set == frozenset({"10.0.0.1", "10.0.0.2"})
    assert settings.email_enabled


def test_env_file_when_present_then_read(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("QUOTA_WINDOW_HOURS=2\nUNRELATED_KEY=ignored\n", encoding="utf-8")

    settings = StudioSettings(_env_file=env_file)

    assert settings.quota_window_seconds == 7200


@pytest.mark.parametrize("value", ["0", "-3", "many"])
def test_invalid_daily_limit_then_rejected(monkeypatch, value):
    monkeypatch.setenv("DAILY_LIMIT", value)

    with pytest.raises(ValidationError):
        StudioSettings(_env_file=None)


def test_admin_ip_set_when_keyword_args_then_split_and_sorted():
    settings = StudioSettings(_env_file=None, daily_limit=3, admin_ips="10.0.0.1, 10.0.0.2")

    assert sorted(settings.admin_ip_set) == ["10.0.0.1", "10.0.0.2"]
