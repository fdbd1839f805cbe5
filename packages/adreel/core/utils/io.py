"""JSON/YAML document reading shared by the config, asset and spec loaders."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from adreel.core.errors import ConfigurationError

logger = logging.getLogger(__name__)


def detect_format(file_path: Path | str) -> str:
    """Detect document format from extension.

    Raises:
        ConfigurationError: If the extension is not .json, .yaml or .yml.

    Example:
        >>> detect_format("render.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ConfigurationError(f"Unsupported document format: {suffix}")


def load_document(path: str | Path) -> dict[str, Any]:
    """Load a JSON or YAML document as a raw dictionary.

    Args:
        path: Path to a .json, .yaml or .yml file.

    Returns:
        Parsed top-level mapping (empty dict for an empty YAML file).

    Raises:
        ConfigurationError: If the file is missing, unparseable, or its top
            level is not a mapping.
    """
    path = Path(path)

    if not path.exists():
        raise ConfigurationError(f"File does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
        # safe_load returns None for empty files
        if data is None:
            data = {}

    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a mapping in {path}, got {type(data).__name__}")

    logger.debug("Loaded %s document from %s", fmt, path)
    return data
