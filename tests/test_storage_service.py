import pytest

from nextmove.core.config import settings
from nextmove.domain.enums import BrandingAssetType
from nextmove.services.storage_service import asset_type_for_key, save_branding_asset


@pytest.mark.parametrize("key,expected", [
    ("favicon_url", BrandingAssetType.icon),
    ("images.login_background", BrandingAssetType.banner),
    ("logo_url", BrandingAssetType.logo),
    ("documents.invoice_logo", BrandingAssetType.logo),
])
def test_asset_type_for_key(key, expected):
    assert asset_type_for_key(key) == expected


def test_save_branding_asset_writes_file(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "BRANDING_UPLOAD_DIR", str(tmp_path))
    monkeypatch.setattr(settings, "PUBLIC_BASE_URL", "https://cdn.nextmove.example/")

    path, url = save_branding_asset(BrandingAssetType.icon, "Favicon.PNG", b"\x89PNG")

    assert path.startswith("icon/icon_") and path.endswith(".png")
    assert (tmp_path / path).read_bytes() == b"\x89PNG"
    assert url == f"https://cdn.nextmove.example/assets/branding/{path}"
