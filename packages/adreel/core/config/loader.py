"""Render configuration loading (JSON or YAML, chosen by extension)."""

from __future__ import annotations

import logging
from pathlib import Path

from adreel.core.config.models import RenderConfig
from adreel.core.utils.io import load_document

logger = logging.getLogger(__name__)


def load_render_config(path: str | Path | None = None) -> RenderConfig:
    """Load and validate a render configuration.

    Args:
        path: Config file path (.json, .yaml or .yml), or None for defaults.

    Returns:
        Validated RenderConfig; omitted blocks take their defaults.

    Raises:
        ConfigurationError: If the file cannot be read.
        ValidationError: If the contents are invalid.

    Example:
        >>> cfg = load_render_config("render.yaml")
        >>> cfg.fps
        30
    """
    if path is None:
        return RenderConfig()
    config = RenderConfig.model_validate(load_document(path))
    logger.debug("Render config %s: %dx%d @ %d fps", path, config.width, config.height, config.fps)
    return config
