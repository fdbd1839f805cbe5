"""Asset library loading.

Libraries are loaded explicitly and handed to whoever needs them; there is no
process-wide catalog.
"""

from __future__ import annotations

import logging
from pathlib import Path

from adreel.core.assets.models import AssetLibrary
from adreel.core.utils.io import load_document

logger = logging.getLogger(__name__)

DEFAULT_LIBRARY_PATH = Path(__file__).parent / "data" / "library.json"


def load_library(path: str | Path) -> AssetLibrary:
    """Load and validate an asset library from JSON or YAML.

    Raises:
        ConfigurationError: If the file cannot be read.
        ValidationError: If the document does not match the library schema.
    """
    library = AssetLibrary.model_validate(load_document(path))
    logger.debug(
        "Loaded asset library %s: %d icons, %d backgrounds, %d music, %d sfx",
        path,
        len(library.icons),
        len(library.backgrounds),
        len(library.music),
        len(library.sfx),
    )
    return library


def load_default_library() -> AssetLibrary:
    """Load the library bundled with the package."""
    return load_library(DEFAULT_LIBRARY_PATH)
