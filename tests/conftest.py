import os
import tempfile

os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ["SQL_URL"] = "sqlite://"
os.environ.pop("REDIS_URL", None)
os.environ["BRANDING_RETRY_BASE_DELAY"] = "0"
os.environ["BRANDING_UPLOAD_DIR"] = tempfile.mkdtemp(prefix="nextmove-uploads-")

from typing import Any, Dict, List

import httpx
import pytest
from sqlalchemy.exc import OperationalError

from nextmove.core.security import create_access_token
from nextmove.db.base import Base
from nextmove.db.session import SessionLocal, engine
from nextmove.domain import models  # noqa: F401
from nextmove.domain.interfaces import ISettingsStore, SettingNotFound
from nextmove.services.branding import provider as provider_module
from nextmove.services.branding.head_document import HeadDocument
from nextmove.services.branding.manifest import BASE_MANIFEST


class FakeStore(ISettingsStore):
    """In-memory settings store that can be told to fail."""

    def __init__(self, rows: Dict[str, Any] | None = None):
        self.rows: Dict[str, Any] = dict(rows or {})
        self.writes: List[tuple] = []
        self.fail_reads = False
        self.fail_writes = False

    def get_value(self, key):
        if self.fail_reads:
            raise OperationalError("SELECT value FROM system_settings", {}, Exception("connection lost"))
        if key not in self.rows:
            raise SettingNotFound(key)
        return self.rows[key]

    def upsert(self, key, value):
        if self.fail_writes:
            raise OperationalError("INSERT INTO system_settings", {}, Exception("read-only"))
        self.writes.append(("upsert", key, value))
        self.rows[key] = value

    def delete(self, key):
        if self.fail_writes:
            raise OperationalError("DELETE FROM system_settings", {}, Exception("read-only"))
        self.writes.append(("delete", key))
        self.rows.pop(key, None)


def manifest_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/manifest.json":
        return httpx.Response(200, json=BASE_MANIFEST)
    return httpx.Response(404)


def failing_handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(500, text="boom")


@pytest.fixture()
def store():
    return FakeStore()


@pytest.fixture()
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def admin_headers():
    return {"Authorization": f"Bearer {create_access_token('admin-1', 'admin')}"}


@pytest.fixture()
def viewer_headers():
    return {"Authorization": f"Bearer {create_access_token('viewer-1', 'viewer')}"}


@pytest.fixture()
def client(db, monkeypatch):
    from fastapi.testclient import TestClient

    from nextmove.main import app

    monkeypatch.setattr(
        provider_module,
        "_provider",
        provider_module.BrandingProvider(
            HeadDocument.initial(transport=httpx.MockTransport(manifest_handler)),
            base_delay=0,
        ),
    )
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
