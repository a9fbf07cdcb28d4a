# nextmove/routers/config.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, File, HTTPException, Query, UploadFile
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from nextmove.core.config import settings
from nextmove.core.deps import get_branding_service, get_provider, role_required
from nextmove.domain.branding_defaults import DEFAULT_BRANDING
from nextmove.domain.schemas import AssetOut, BrandingFieldsUpdate, HeadOut, SeoMetaOut
from nextmove.services.branding import get_path, theme_css
from nextmove.services.branding.seo import build_meta
from nextmove.services.storage_service import asset_type_for_key, save_branding_asset

router = APIRouter(prefix="/config/branding", tags=["Branding"])
log = logging.getLogger(__name__)

_MISSING = object()


def _write_failed(e: Exception) -> HTTPException:
    log.error("[Branding] Error saving branding: %s", e)
    return HTTPException(status_code=503, detail="Could not save branding settings")


@router.get("")
async def get_branding(service=Depends(get_branding_service)):
    return await service.get_settings()


@router.put("")
async def update_branding(
    patch: Dict[str, Any] = Body(...),
    service=Depends(get_branding_service),
    provider=Depends(get_provider),
    user=Depends(role_required("admin")),
):
    try:
        updated = await service.update_branding(patch)
    except SQLAlchemyError as e:
        raise _write_failed(e)
    await provider.refresh(service)
    return updated


@router.patch("")
async def update_branding_fields(
    payload: BrandingFieldsUpdate,
    service=Depends(get_branding_service),
    provider=Depends(get_provider),
    user=Depends(role_required("admin")),
):
    try:
        updated = await service.update_fields(payload.changes)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except SQLAlchemyError as e:
        raise _write_failed(e)
    await provider.refresh(service)
    return updated


@router.delete("")
async def reset_branding(
    service=Depends(get_branding_service),
    provider=Depends(get_provider),
    user=Depends(role_required("admin")),
):
    try:
        defaults = await service.reset_to_defaults()
    except SQLAlchemyError as e:
        raise _write_failed(e)
    await provider.refresh(service)
    return defaults


@router.get("/head", response_model=HeadOut)
async def get_head(service=Depends(get_branding_service), provider=Depends(get_provider)):
    if provider.loading:
        await provider.refresh(service)
    return {**provider.head.snapshot(), "loading": provider.loading}


@router.get("/theme.css", response_class=PlainTextResponse)
async def get_theme_css(service=Depends(get_branding_service)):
    data = await service.get_settings()
    return PlainTextResponse(theme_css(data), media_type="text/css")


@router.get("/seo", response_model=SeoMetaOut)
async def get_seo_meta(
    title: Optional[str] = None,
    description: Optional[str] = None,
    keywords: Optional[str] = None,
    image: Optional[str] = None,
    url: Optional[str] = None,
    service=Depends(get_branding_service),
):
    data = await service.get_settings()
    return build_meta(
        data,
        url=url or settings.PUBLIC_BASE_URL,
        title=title,
        description=description,
        keywords=keywords,
        image=image,
    )


@router.post("/assets", response_model=AssetOut)
async def upload_branding_asset(
    key: str = Query(..., description="Settings field the asset is for, e.g. logo_url or images.login_background"),
    f: UploadFile = File(...),
    user=Depends(role_required("admin")),
):
    try:
        known = get_path(DEFAULT_BRANDING, key, _MISSING) is not _MISSING
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if not known:
        raise HTTPException(status_code=422, detail=f"Unknown branding field: {key}")

    asset_type = asset_type_for_key(key)
    path, url = save_branding_asset(asset_type, f.filename, await f.read())
    return {"key": key, "type": asset_type, "path": path, "url": url}
