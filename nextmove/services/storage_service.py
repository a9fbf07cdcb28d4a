# nextmove/services/storage_service.py
"""
Local storage for uploaded branding assets (logos, banners, icons).

Files land in ``<BRANDING_UPLOAD_DIR>/<type>/<type>_<epoch ms>.<ext>`` and
are served under ``/assets/branding``.
"""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path

from nextmove.core.config import settings
from nextmove.domain.enums import BrandingAssetType

log = logging.getLogger(__name__)

ASSETS_ROUTE = "/assets/branding"


def ensure_upload_dir() -> Path:
    path = Path(settings.BRANDING_UPLOAD_DIR)
    path.mkdir(parents=True, exist_ok=True)
    return path


def asset_type_for_key(key: str) -> BrandingAssetType:
    """Asset bucket for the settings field an upload is destined for."""
    if "favicon" in key:
        return BrandingAssetType.icon
    if "background" in key:
        return BrandingAssetType.banner
    return BrandingAssetType.logo


def save_branding_asset(asset_type: BrandingAssetType, filename: str, content: bytes) -> tuple[str, str]:
    """Write ``content`` and return ``(relative path, public url)``."""
    ext = os.path.splitext(filename or "")[1].lower()
    fname = f"{asset_type.value}_{int(time.time() * 1000)}{ext}"
    rel_path = f"{asset_type.value}/{fname}"

    target = ensure_upload_dir() / asset_type.value
    target.mkdir(parents=True, exist_ok=True)
    (target / fname).write_bytes(content)

    url = f"{settings.PUBLIC_BASE_URL.rstrip('/')}{ASSETS_ROUTE}/{rel_path}"
    log.info("[Storage] Saved branding asset %s (%d bytes)", rel_path, len(content))
    return rel_path, url
