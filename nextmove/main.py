from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from nextmove.core.config import settings
from nextmove.core.redis_client import close_redis
from nextmove.core.telemetry import init_telemetry, instrument_fastapi
from nextmove.db.base import Base
from nextmove.db.session import SessionLocal, engine
from nextmove.domain import models  # noqa: F401  (register tables on Base.metadata)
from nextmove.repositories.settings_repo import SettingsRepo
from nextmove.routers import config as cfg, health, manifest
from nextmove.services.branding.provider import close_branding_provider, get_branding_provider
from nextmove.services.branding.service import BrandingService
from nextmove.services.storage_service import ASSETS_ROUTE

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # idempotent; production schemas are managed by alembic
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        await get_branding_provider().refresh(BrandingService(SettingsRepo(db)))
    finally:
        db.close()
    log.info("[Branding] Initial branding applied")

    yield

    await close_branding_provider()
    await close_redis()


app = FastAPI(title="NextMove Cargo Branding", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(cfg.router)
app.include_router(manifest.router)
app.include_router(health.router)

app.mount(ASSETS_ROUTE, StaticFiles(directory=settings.BRANDING_UPLOAD_DIR, check_dir=False), name="branding-assets")

init_telemetry()
instrument_fastapi(app)


@app.get("/")
def root():
    return {"ok": True, "service": "NextMove Cargo Branding"}
