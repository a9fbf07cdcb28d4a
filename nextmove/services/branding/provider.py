# nextmove/services/branding/provider.py
"""
Process-wide holder of the active branding and its applied head document.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Optional

from nextmove.core.config import settings
from nextmove.domain.branding_defaults import fallback_branding
from nextmove.services.branding.head_document import HeadDocument
from nextmove.services.branding.projector import apply_branding
from nextmove.services.branding.service import BrandingService

log = logging.getLogger(__name__)


class BrandingProvider:
    def __init__(
        self,
        head: HeadDocument,
        max_attempts: int | None = None,
        base_delay: float | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self.head = head
        self.max_attempts = max(1, max_attempts or settings.BRANDING_MAX_ATTEMPTS)
        self.base_delay = settings.BRANDING_RETRY_BASE_DELAY if base_delay is None else base_delay
        self._sleep = sleep
        self.current: Optional[Dict[str, Any]] = None
        self.loading = True

    async def refresh(self, service: BrandingService) -> Dict[str, Any]:
        """
        Load settings and apply them to the head, retrying with exponential
        backoff. After the last failed attempt the fallback theme is applied.
        """
        for attempt in range(self.max_attempts):
            try:
                data = await service.get_settings()
                await apply_branding(data, self.head)
            except Exception as e:
                log.error(
                    "[Branding] Branding load failed (attempt %d/%d): %s",
                    attempt + 1, self.max_attempts, e,
                )
                if attempt < self.max_attempts - 1:
                    await self._sleep(self.base_delay * 2 ** attempt)
                continue
            self.current = data
            self.loading = False
            return data

        data = fallback_branding()
        await apply_branding(data, self.head)
        self.current = data
        self.loading = False
        log.warning("[Branding] Branding unavailable, using the default theme")
        return data

    async def aclose(self) -> None:
        await self.head.aclose()


_provider: Optional[BrandingProvider] = None


def get_branding_provider() -> BrandingProvider:
    """Get singleton branding provider."""
    global _provider
    if _provider is None:
        _provider = BrandingProvider(HeadDocument.initial())
    return _provider


async def close_branding_provider() -> None:
    global _provider
    if _provider is not None:
        await _provider.aclose()
        _provider = None
