# nextmove/domain/interfaces/__init__.py
"""
Domain interfaces used for dependency inversion.

The branding service depends on these contracts rather than on SQLAlchemy
or on a concrete page head, so both can be swapped for fakes in tests.

Usage:
    from nextmove.domain.interfaces import ISettingsStore, IHostDocument

    class MyService:
        def __init__(self, store: ISettingsStore):
            self.store = store
"""

from .settings_store_interface import ISettingsStore, SettingNotFound
from .host_document_interface import IHostDocument, LinkElement, MetaElement

__all__ = [
    "ISettingsStore",
    "SettingNotFound",
    "IHostDocument",
    "LinkElement",
    "MetaElement",
]
