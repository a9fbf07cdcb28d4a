# nextmove/services/branding/projector.py
"""
Projection of branding settings onto a host document.

``apply_branding`` is idempotent on the visible head state: applying the
same settings twice leaves style properties, title, favicon and theme-color
unchanged. Only the manifest blob URL changes, and the previous one is
revoked before the new one is assigned so a single manifest blob stays live.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from nextmove.core.telemetry import traced
from nextmove.domain.interfaces import IHostDocument, LinkElement
from nextmove.services.branding.manifest import (
    MANIFEST_CONTENT_TYPE,
    build_manifest,
    serialize_manifest,
)

log = logging.getLogger(__name__)

BLOB_SCHEME = "blob:"

CSS_VARIABLES = (
    ("--color-primary", "primary_color"),
    ("--color-secondary", "secondary_color"),
    ("--color-accent", "accent_color"),
)


def theme_css(settings: Mapping[str, Any]) -> str:
    lines = [f"  {var}: {settings.get(key) or ''};" for var, key in CSS_VARIABLES]
    return ":root {\n" + "\n".join(lines) + "\n}\n"


@traced("branding.apply")
async def apply_branding(settings: Mapping[str, Any], host: IHostDocument) -> None:
    for var, key in CSS_VARIABLES:
        host.set_style_property(var, settings.get(key))

    favicon = host.query_link("icon", contains=True)
    if favicon and settings.get("favicon_url"):
        favicon.href = settings["favicon_url"]

    if settings.get("platform_name"):
        host.title = settings["platform_name"]

    pwa = settings.get("pwa")
    theme_meta = host.query_meta("theme-color")
    if theme_meta and pwa and pwa.get("theme_color"):
        theme_meta.content = pwa["theme_color"]

    if pwa:
        manifest_link = host.query_link("manifest")
        if manifest_link:
            await rewrite_manifest(settings, host, manifest_link)


async def rewrite_manifest(settings: Mapping[str, Any], host: IHostDocument, link: LinkElement) -> str:
    """Point ``link`` at a fresh blob holding the branded manifest."""
    try:
        base = await host.fetch_json(link.href)
    except Exception as e:
        log.warning("[Branding] Failed to fetch manifest %s, using empty base: %s", link.href, e)
        base = {}

    manifest = build_manifest(base, settings)
    manifest_url = host.create_object_url(serialize_manifest(manifest), MANIFEST_CONTENT_TYPE)

    if link.href.startswith(BLOB_SCHEME):
        host.revoke_object_url(link.href)

    link.href = manifest_url
    return manifest_url
