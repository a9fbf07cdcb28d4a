# nextmove/domain/interfaces/host_document_interface.py
"""
Interface for the document branding is projected onto.

It models the few parts of an HTML page head the projector touches:
style custom properties on the root element, the title, ``<link>`` and
``<meta>`` elements, object URLs and JSON fetches.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class LinkElement:
    rel: str
    href: str


@dataclass
class MetaElement:
    name: str
    content: str


class IHostDocument(ABC):
    """
    Implementations:
    - nextmove.services.branding.head_document.HeadDocument
    """

    title: str

    @abstractmethod
    def set_style_property(self, name: str, value: Any) -> None:
        """Set a CSS custom property on the root element."""
        pass

    @abstractmethod
    def query_link(self, rel: str, contains: bool = False) -> Optional[LinkElement]:
        """
        First ``<link>`` whose rel equals ``rel`` (or contains it when
        ``contains`` is true), mirroring ``link[rel="x"]`` / ``link[rel*="x"]``.
        """
        pass

    @abstractmethod
    def query_meta(self, name: str) -> Optional[MetaElement]:
        pass

    @abstractmethod
    async def fetch_json(self, url: str) -> Any:
        """Fetch ``url`` and decode it as JSON. May raise on any failure."""
        pass

    @abstractmethod
    def create_object_url(self, data: bytes, content_type: str) -> str:
        """Register ``data`` and return a ``blob:`` URL that serves it."""
        pass

    @abstractmethod
    def revoke_object_url(self, url: str) -> None:
        pass
