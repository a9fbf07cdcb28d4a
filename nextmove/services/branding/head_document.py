# nextmove/services/branding/head_document.py
"""
Server-side model of the application page head.

``HeadDocument`` is the concrete host the projector writes to. Object URLs
are backed by an in-process ``BlobStore`` and served by the ``/blob/{id}``
route. This service's own ``/manifest.json`` is loaded directly and any
other URL is fetched over HTTP with httpx.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Tuple
from uuid import uuid4

import httpx

from nextmove.core.config import settings
from nextmove.domain.interfaces import IHostDocument, LinkElement, MetaElement
from nextmove.services.branding.manifest import BASE_MANIFEST_ROUTE, load_base_manifest

log = logging.getLogger(__name__)


class BlobStore:
    """Registry of live object URLs, ``blob:<base>/blob/<id>``."""

    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")
        self._blobs: Dict[str, Tuple[bytes, str]] = {}

    def __len__(self) -> int:
        return len(self._blobs)

    def _blob_id(self, url: str) -> Optional[str]:
        prefix = f"blob:{self.base_url}/blob/"
        if url.startswith(prefix):
            return url[len(prefix):]
        return None

    def create(self, data: bytes, content_type: str) -> str:
        blob_id = uuid4().hex
        self._blobs[blob_id] = (data, content_type)
        return f"blob:{self.base_url}/blob/{blob_id}"

    def revoke(self, url: str) -> None:
        blob_id = self._blob_id(url)
        if blob_id:
            self._blobs.pop(blob_id, None)

    def get(self, blob_id: str) -> Optional[Tuple[bytes, str]]:
        return self._blobs.get(blob_id)

    def resolve(self, url: str) -> Optional[Tuple[bytes, str]]:
        blob_id = self._blob_id(url)
        return self._blobs.get(blob_id) if blob_id else None


class ManifestFetcher:
    """JSON fetcher for manifest URLs; relative URLs resolve against the public base URL."""

    def __init__(self, base_url: str, timeout: float, transport: httpx.AsyncBaseTransport | None = None):
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def fetch_json(self, url: str) -> Any:
        resp = await self._client.get(url)
        resp.raise_for_status()
        return resp.json()

    async def aclose(self) -> None:
        await self._client.aclose()


class HeadDocument(IHostDocument):
    def __init__(
        self,
        title: str,
        links: List[LinkElement],
        metas: List[MetaElement],
        blobs: BlobStore,
        fetcher: ManifestFetcher,
    ):
        self.title = title
        self.style: Dict[str, str] = {}
        self.links = links
        self.metas = metas
        self.blobs = blobs
        self.fetcher = fetcher

    @classmethod
    def initial(cls, transport: httpx.AsyncBaseTransport | None = None) -> "HeadDocument":
        """Head as shipped in index.html, before any branding is applied."""
        return cls(
            title="NextMove Cargo",
            links=[
                LinkElement(rel="icon", href="/favicon.ico"),
                LinkElement(rel="manifest", href=settings.BASE_MANIFEST_URL),
            ],
            metas=[MetaElement(name="theme-color", content="#ffffff")],
            blobs=BlobStore(settings.PUBLIC_BASE_URL),
            fetcher=ManifestFetcher(settings.PUBLIC_BASE_URL, settings.MANIFEST_FETCH_TIMEOUT, transport),
        )

    # ---------- IHostDocument ----------
    def set_style_property(self, name: str, value: Any) -> None:
        self.style[name] = "" if value is None else str(value)

    def query_link(self, rel: str, contains: bool = False) -> Optional[LinkElement]:
        for link in self.links:
            if (rel in link.rel) if contains else (link.rel == rel):
                return link
        return None

    def query_meta(self, name: str) -> Optional[MetaElement]:
        return next((m for m in self.metas if m.name == name), None)

    async def fetch_json(self, url: str) -> Any:
        if url.startswith("blob:"):
            blob = self.blobs.resolve(url)
            if blob is None:
                raise LookupError(f"revoked or unknown object URL: {url}")
            return json.loads(blob[0])
        if self._is_own_base_manifest(url):
            # served by this process; no socket is open during startup
            return load_base_manifest(settings.BASE_MANIFEST_PATH)
        return await self.fetcher.fetch_json(url)

    def create_object_url(self, data: bytes, content_type: str) -> str:
        return self.blobs.create(data, content_type)

    def revoke_object_url(self, url: str) -> None:
        self.blobs.revoke(url)

    # ---------- helpers ----------
    def _is_own_base_manifest(self, url: str) -> bool:
        return url in (BASE_MANIFEST_ROUTE, f"{self.blobs.base_url}{BASE_MANIFEST_ROUTE}")

    @property
    def manifest_url(self) -> Optional[str]:
        link = self.query_link("manifest")
        return link.href if link else None

    def snapshot(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "style": dict(self.style),
            "links": [{"rel": link.rel, "href": link.href} for link in self.links],
            "metas": [{"name": m.name, "content": m.content} for m in self.metas],
            "manifest_url": self.manifest_url,
        }

    async def aclose(self) -> None:
        await self.fetcher.aclose()
