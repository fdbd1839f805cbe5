"""Asset reference normalization.

References are passed through to the renderer untouched apart from stripping
the leading slash from static paths; the core never opens them.
"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict

_URL_RE = re.compile(r"^https?://", re.IGNORECASE)


class AssetRefKind(str, Enum):
    URL = "url"
    STATIC = "static"


class AssetRef(BaseModel):
    """A classified asset reference."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: AssetRefKind
    path: str


def normalize_asset_ref(ref: str | None) -> AssetRef | None:
    """Classify a reference as an absolute URL or a static path.

    Example:
        >>> normalize_asset_ref("/demo/shot-1.jpg").path
        'demo/shot-1.jpg'
        >>> normalize_asset_ref("HTTPS://cdn.example.com/a.png").kind
        <AssetRefKind.URL: 'url'>
    """
    if not ref:
        return None
    if _URL_RE.match(ref):
        return AssetRef(kind=AssetRefKind.URL, path=ref)
    return AssetRef(kind=AssetRefKind.STATIC, path=ref.removeprefix("/"))
