# nextmove/routers/manifest.py
from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.responses import JSONResponse

from nextmove.core.config import settings
from nextmove.core.deps import get_provider
from nextmove.services.branding.manifest import BASE_MANIFEST_ROUTE, load_base_manifest

router = APIRouter(tags=["Manifest"])


@router.get(BASE_MANIFEST_ROUTE)
def base_manifest():
    return JSONResponse(load_base_manifest(settings.BASE_MANIFEST_PATH), media_type="application/manifest+json")


@router.get("/blob/{blob_id}")
def get_blob(blob_id: str, provider=Depends(get_provider)):
    blob = provider.head.blobs.get(blob_id)
    if blob is None:
        raise HTTPException(status_code=404, detail="Object URL revoked or unknown")
    data, content_type = blob
    return Response(content=data, media_type=content_type)
