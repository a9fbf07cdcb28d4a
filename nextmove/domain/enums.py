from enum import Enum

class BrandingAssetType(str, Enum):
    logo = "logo"
    banner = "banner"
    icon = "icon"
