"""Asset catalog, references, and weighted selection."""

from adreel.core.assets.loader import load_default_library, load_library
from adreel.core.assets.models import (
    AssetCategory,
    AssetItem,
    AssetLibrary,
    AspectRatio,
    Tone,
    TransitionItem,
)
from adreel.core.assets.refs import AssetRef, AssetRefKind, normalize_asset_ref
from adreel.core.assets.selector import AssetSelector, matches

__all__ = [
    "AssetCategory",
    "AssetItem",
    "AssetLibrary",
    "AssetRef",
    "AssetRefKind",
    "AssetSelector",
    "AspectRatio",
    "Tone",
    "TransitionItem",
    "load_default_library",
    "load_library",
    "matches",
    "normalize_asset_ref",
]
