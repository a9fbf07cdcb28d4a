# nextmove/services/branding/__init__.py
"""
Branding configuration: defaults merge, updates and head projection.
"""

from .merge import merge_branding
from .paths import get_path, set_path
from .projector import apply_branding, theme_css
from .service import BrandingService
from .provider import BrandingProvider, get_branding_provider

__all__ = [
    "merge_branding",
    "get_path",
    "set_path",
    "apply_branding",
    "theme_css",
    "BrandingService",
    "BrandingProvider",
    "get_branding_provider",
]
