# nextmove/services/branding/seo.py
"""
SEO meta values for a page, derived from the ``seo`` branding section.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

DEFAULT_SITE_NAME = "NextMove Cargo"
DEFAULT_TITLE_TEMPLATE = "%s | NextMove Cargo"


def page_title(settings: Mapping[str, Any], title: Optional[str] = None) -> str:
    seo = settings.get("seo") or {}
    if title:
        template = seo.get("meta_title_template") or DEFAULT_TITLE_TEMPLATE
        return template.replace("%s", title, 1)
    return seo.get("default_title") or DEFAULT_SITE_NAME


def build_meta(
    settings: Mapping[str, Any],
    url: str,
    title: Optional[str] = None,
    description: Optional[str] = None,
    keywords: Optional[str] = None,
    image: Optional[str] = None,
) -> Dict[str, Any]:
    seo = settings.get("seo") or {}
    pwa = settings.get("pwa") or {}

    site_name = seo.get("default_title") or DEFAULT_SITE_NAME
    meta_title = page_title(settings, title)
    meta_desc = description or seo.get("default_description") or DEFAULT_SITE_NAME
    meta_keywords = keywords or seo.get("default_keywords") or ""
    meta_image = image or seo.get("og_image") or settings.get("logo_url") or ""

    tags: List[Dict[str, str]] = [
        {"name": "description", "content": meta_desc},
        {"name": "keywords", "content": meta_keywords},
        {"itemprop": "name", "content": meta_title},
        {"itemprop": "description", "content": meta_desc},
        {"itemprop": "image", "content": meta_image},
        {"property": "og:url", "content": url},
        {"property": "og:type", "content": "website"},
        {"property": "og:title", "content": meta_title},
        {"property": "og:description", "content": meta_desc},
        {"property": "og:image", "content": meta_image},
        {"property": "og:site_name", "content": site_name},
        {"name": "twitter:card", "content": "summary_large_image"},
        {"name": "twitter:title", "content": meta_title},
        {"name": "twitter:description", "content": meta_desc},
        {"name": "twitter:image", "content": meta_image},
    ]

    return {
        "title": meta_title,
        "description": meta_desc,
        "keywords": meta_keywords,
        "image": meta_image,
        "url": url,
        "site_name": site_name,
        "icon_url": pwa.get("icon_url") or None,
        "tags": tags,
    }
