# nextmove/repositories/settings_repo.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from nextmove.domain.interfaces import ISettingsStore, SettingNotFound
from nextmove.domain.models import SystemSetting


class SettingsRepo(ISettingsStore):
    def __init__(self, db: Session):
        self.db = db

    # ---------- GET ----------
    def get(self, key: str) -> SystemSetting | None:
        return self.db.get(SystemSetting, key)

    def get_value(self, key: str) -> Any:
        row = self.get(key)
        if row is None:
            raise SettingNotFound(key)
        return row.value

    # ---------- UPSERT / DELETE ----------
    def upsert(self, key: str, value: Any) -> None:
        try:
            row = self.get(key)
            if not row:
                row = SystemSetting(key=key)
                self.db.add(row)
            row.value = value
            row.updated_at = datetime.now(timezone.utc).replace(tzinfo=None)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def delete(self, key: str) -> None:
        try:
            row = self.get(key)
            if row:
                self.db.delete(row)
                self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
