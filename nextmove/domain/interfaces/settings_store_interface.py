# nextmove/domain/interfaces/settings_store_interface.py
"""
Interface for the key/value settings store.
"""

from abc import ABC, abstractmethod
from typing import Any


class SettingNotFound(LookupError):
    """No row exists for the requested key."""

    def __init__(self, key: str):
        super().__init__(f"setting not found: {key}")
        self.key = key


class ISettingsStore(ABC):
    """
    Single-table store of opaque JSON values keyed by name.

    Implementations:
    - nextmove.repositories.settings_repo.SettingsRepo
    """

    @abstractmethod
    def get_value(self, key: str) -> Any:
        """
        Return the JSON value stored under ``key``.

        Raises:
            SettingNotFound: if there is no row for ``key``
        """
        pass

    @abstractmethod
    def upsert(self, key: str, value: Any) -> None:
        """Insert or replace the row for ``key``, stamping ``updated_at``."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Delete the row for ``key``. Deleting a missing row is not an error."""
        pass
