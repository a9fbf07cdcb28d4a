from __future__ import annotations

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from nextmove.domain.enums import BrandingAssetType

# ---------------------------
# BRANDING
# ---------------------------
class BrandingFieldsUpdate(BaseModel):
    """Dot-path edits, e.g. {"pages.about.title": "Qui sommes-nous"}."""
    changes: Dict[str, Any] = Field(..., min_length=1)

class LinkOut(BaseModel):
    rel: str
    href: str

class MetaOut(BaseModel):
    name: str
    content: str

class HeadOut(BaseModel):
    title: str
    style: Dict[str, str]
    links: List[LinkOut]
    metas: List[MetaOut]
    manifest_url: Optional[str] = None
    loading: bool = False

class SeoMetaOut(BaseModel):
    title: str
    description: str
    keywords: str
    image: str
    url: str
    site_name: str
    icon_url: Optional[str] = None
    tags: List[Dict[str, str]]

class AssetOut(BaseModel):
    key: str
    type: BrandingAssetType
    path: str
    url: str
