import logging

import httpx
import pytest

from nextmove.domain.branding_defaults import DEFAULT_BRANDING
from nextmove.services.branding.head_document import HeadDocument
from nextmove.services.branding.provider import BrandingProvider
from nextmove.services.branding.service import BrandingService

from tests.conftest import manifest_handler


class FlakyService:
    """Fails ``failures`` times before returning the defaults."""

    def __init__(self, failures: int):
        self.failures = failures
        self.calls = 0

    async def get_settings(self):
        self.calls += 1
        if self.calls <= self.failures:
            raise RuntimeError("network down")
        return dict(DEFAULT_BRANDING)


def _provider(delays):
    async def fake_sleep(seconds):
        delays.append(seconds)

    head = HeadDocument.initial(transport=httpx.MockTransport(manifest_handler))
    return BrandingProvider(head, max_attempts=3, base_delay=1.0, sleep=fake_sleep)


@pytest.mark.asyncio
async def test_refresh_applies_loaded_settings(store):
    delays = []
    provider = _provider(delays)
    store.rows["branding"] = {"platform_name": "Acme", "primary_color": "#123456"}
    assert provider.loading is True

    current = await provider.refresh(BrandingService(store, use_cache=False))

    assert provider.loading is False
    assert provider.current is current
    assert current["platform_name"] == "Acme"
    assert provider.head.title == "Acme"
    assert provider.head.style["--color-primary"] == "#123456"
    assert delays == []
    await provider.aclose()


@pytest.mark.asyncio
async def test_refresh_retries_with_exponential_backoff():
    delays = []
    provider = _provider(delays)
    service = FlakyService(failures=2)

    current = await provider.refresh(service)

    assert service.calls == 3
    assert delays == [1.0, 2.0]
    assert current == DEFAULT_BRANDING
    await provider.aclose()


@pytest.mark.asyncio
async def test_refresh_falls_back_after_last_attempt(caplog):
    delays = []
    provider = _provider(delays)
    service = FlakyService(failures=10)

    with caplog.at_level(logging.WARNING, logger="nextmove.services.branding.provider"):
        current = await provider.refresh(service)

    assert service.calls == 3
    assert delays == [1.0, 2.0]
    assert current["primary_color"] == "#dc2626"
    assert provider.head.style["--color-primary"] == "#dc2626"
    assert provider.head.query_meta("theme-color").content == "#dc2626"
    assert provider.loading is False
    assert "using the default theme" in caplog.text
    await provider.aclose()
