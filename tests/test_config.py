"""
Tests for default settings and the shared HTTP client builder.
"""
from __future__ import annotations

import httpx
import pytest

from adapters.http_client import build_async_client
from adapters.record_sources import DatuarSource
from core.config import BROWSER_USER_AGENT, AppSettings


@pytest.fixture
def clean_env(monkeypatch):
    for key in ("OSINT_DNI_HTTP_TIMEOUT_SECONDS", "OSINT_DNI_USER_AGENT"):
        monkeypatch.delenv(key, raising=False)


def test_default_source_deadline_is_eight_seconds(clean_env):
    settings = AppSettings()

    assert settings.http_timeout_seconds == 8.0
    assert settings.user_agent == BROWSER_USER_AGENT


def test_timeout_is_read_from_environment(monkeypatch):
    monkeypatch.setenv("OSINT_DNI_HTTP_TIMEOUT_SECONDS", "3.5")

    assert AppSettings().http_timeout_seconds == 3.5


@pytest.mark.asyncio
async def test_client_uses_eight_second_timeout(clean_env):
    async with build_async_client(AppSettings()) as client:
        assert client.timeout == httpx.Timeout(8.0)
        assert client.headers["User-Agent"] == BROWSER_USER_AGENT
        assert client.follow_redirects is True


@pytest.mark.asyncio
async def test_client_merges_extra_headers(settings):
    async with build_async_client(settings, extra_headers={"Referer": "https://datuar.com/"}) as client:
        assert client.headers["Referer"] == "https://datuar.com/"
        assert client.timeout == httpx.Timeout(0.5)


def test_sources_default_to_app_settings(clean_env, noise_filter):
    source = DatuarSource(noise_filter=noise_filter)

    assert source._settings.http_timeout_seconds == 8.0
