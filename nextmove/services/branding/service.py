# nextmove/services/branding/service.py
"""
Branding settings service: read with defaults, partial update, reset.

Reads never fail: a missing row or a store error both yield the default
template. Writes propagate store errors to the caller.

Concurrent writers are not coordinated. Each update reads the current
document, merges the patch and writes the whole document back, so the last
successful write wins and silently discards the other writer's changes.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Tuple

from nextmove.core.config import settings
from nextmove.core.redis_client import cache_delete, cache_get, cache_set
from nextmove.core.telemetry import traced
from nextmove.domain.branding_defaults import default_branding
from nextmove.domain.interfaces import ISettingsStore, SettingNotFound
from nextmove.services.branding.merge import merge_branding
from nextmove.services.branding.paths import set_path

log = logging.getLogger(__name__)

CACHE_KEY = "nextmove:branding:settings"


class BrandingService:
    def __init__(self, store: ISettingsStore, key: str | None = None, use_cache: bool = True):
        self.store = store
        self.key = key or settings.BRANDING_SETTINGS_KEY
        self.use_cache = use_cache

    # ---------- READ ----------
    def _read_persisted(self) -> Tuple[Any, bool]:
        """Persisted document and whether the store answered."""
        try:
            return self.store.get_value(self.key), True
        except SettingNotFound:
            return {}, True
        except Exception as e:
            log.error("[Branding] Error fetching branding: %s", e)
            return {}, False

    @traced("branding.read")
    async def get_settings(self) -> Dict[str, Any]:
        if self.use_cache:
            cached = await cache_get(CACHE_KEY)
            if cached:
                try:
                    return json.loads(cached)
                except ValueError:
                    log.warning("[Branding] Discarding unreadable cache entry")

        persisted, ok = self._read_persisted()
        merged = merge_branding(persisted)

        # defaults served after a store error must not outlive this request
        if self.use_cache and ok:
            await cache_set(CACHE_KEY, json.dumps(merged), settings.BRANDING_CACHE_TTL)
        return merged

    # ---------- WRITE ----------
    async def _persist(self, document: Dict[str, Any]) -> Dict[str, Any]:
        self.store.upsert(self.key, document)
        if self.use_cache:
            await cache_delete(CACHE_KEY)
        log.info("[Branding] Settings saved (%d top-level keys)", len(document))
        return document

    @traced("branding.update")
    async def update_branding(self, patch: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Shallow-merge ``patch`` over the current settings and persist the result.

        Nested sections in ``patch`` replace the current section wholesale;
        use ``update_fields`` to change individual nested values.
        """
        current = await self.get_settings()
        return await self._persist({**current, **patch})

    @traced("branding.update_fields")
    async def update_fields(self, changes: Mapping[str, Any]) -> Dict[str, Any]:
        """Apply dot-path edits (``{"pages.about.title": "..."}``) and persist."""
        updated = await self.get_settings()
        for path, value in changes.items():
            updated = set_path(updated, path, value)
        return await self._persist(updated)

    @traced("branding.reset")
    async def reset_to_defaults(self) -> Dict[str, Any]:
        self.store.delete(self.key)
        if self.use_cache:
            await cache_delete(CACHE_KEY)
        log.info("[Branding] Settings reset to defaults")
        return default_branding()
