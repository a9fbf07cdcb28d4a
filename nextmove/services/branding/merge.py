# nextmove/services/branding/merge.py
"""
Merge of a persisted branding document over the default template.

The merge is shallow within each section: a persisted section overrides the
defaults key by key, and an explicit ``None`` or ``""`` wins over the default.
Only the sections listed in ``MERGED_SECTIONS`` (plus ``pages.about``,
``pages.contact`` and ``pages.privacy``) get this treatment; any other
nested object in the persisted document replaces its default wholesale.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from nextmove.domain.branding_defaults import (
    MERGED_SECTIONS,
    PAGE_SECTIONS,
    default_branding,
)

log = logging.getLogger(__name__)


def _section(value: Any) -> Mapping[str, Any]:
    # missing, null or non-object sections override nothing
    if isinstance(value, Mapping):
        return value
    return {}


def merge_branding(persisted: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    if persisted is None:
        persisted = {}
    elif not isinstance(persisted, Mapping):
        log.warning("[Branding] Ignoring non-object settings value of type %s", type(persisted).__name__)
        persisted = {}

    defaults = default_branding()
    merged: Dict[str, Any] = {**defaults, **persisted}

    for name in MERGED_SECTIONS:
        merged[name] = {**defaults[name], **_section(persisted.get(name))}

    persisted_pages = _section(persisted.get("pages"))
    pages = {**defaults["pages"], **persisted_pages}
    for name in PAGE_SECTIONS:
        pages[name] = {**defaults["pages"][name], **_section(persisted_pages.get(name))}
    merged["pages"] = pages

    return merged
