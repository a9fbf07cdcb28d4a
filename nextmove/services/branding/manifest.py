# nextmove/services/branding/manifest.py
"""
PWA manifest helpers: the static base manifest and the branded override.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

log = logging.getLogger(__name__)

MANIFEST_CONTENT_TYPE = "application/json"
BASE_MANIFEST_ROUTE = "/manifest.json"

BASE_MANIFEST: Dict[str, Any] = {
    "name": "NextMove Cargo",
    "short_name": "NextMove",
    "description": "Votre partenaire logistique de confiance",
    "theme_color": "#ffffff",
    "background_color": "#ffffff",
    "display": "standalone",
    "scope": "/",
    "start_url": "/",
    "orientation": "portrait",
    "icons": [
        {"src": "/pwa-192x192.png", "sizes": "192x192", "type": "image/png"},
        {"src": "/pwa-512x512.png", "sizes": "512x512", "type": "image/png"},
    ],
}

_MISSING = object()


def load_base_manifest(path: Optional[str] = None) -> Dict[str, Any]:
    """Base manifest from ``path`` when given and readable, else the built-in one."""
    if path:
        try:
            return json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            log.warning("[Branding] Could not read base manifest %s: %s", path, e)
    return copy.deepcopy(BASE_MANIFEST)


def build_manifest(base: Any, settings: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Override name, short_name, theme_color and background_color of ``base``.

    All other manifest members pass through untouched. A field with no value
    in the settings is dropped from the result rather than kept from the base.
    """
    manifest = dict(base) if isinstance(base, Mapping) else {}
    pwa = settings.get("pwa") or {}
    platform_name = settings.get("platform_name", _MISSING)

    overrides = {
        "name": pwa.get("name") or platform_name,
        "short_name": pwa.get("short_name") or platform_name,
        "theme_color": pwa.get("theme_color", _MISSING),
        "background_color": pwa.get("background_color", _MISSING),
    }
    for field, value in overrides.items():
        if value is _MISSING:
            manifest.pop(field, None)
        else:
            manifest[field] = value
    return manifest


def serialize_manifest(manifest: Mapping[str, Any]) -> bytes:
    return json.dumps(manifest, ensure_ascii=False).encode("utf-8")
