from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Union

from event_browser.config.model import (
    DEFAULT_DATASET,
    DEFAULT_SUBTITLE,
    DEFAULT_TITLE,
    GlobalConfig,
)
from event_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

_URL_SCHEMES = ("http://", "https://", "ftp://", "file://")


def resolve_dataset_location(raw: str, root: Path) -> Union[Path, str]:
    """
    Resolve the configured dataset location.

    - URLs are returned untouched.
    - Absolute paths are used as-is.
    - Relative paths resolve against EVENT_BROWSER_DATA_ROOT when set,
      otherwise against the parent of the config directory.
    """
    if raw.lower().startswith(_URL_SCHEMES):
        return raw

    path = Path(raw)
    if path.is_absolute():
        return path

    data_root = os.environ.get("EVENT_BROWSER_DATA_ROOT")
    if data_root:
        root_path = Path(data_root)
        resolved = root_path / path

        # Fallback for redundant 'data/' prefix
        if not resolved.is_file() and path.parts and path.parts[0] == "data":
            alt_path = root_path / Path(*path.parts[1:])
            if alt_path.is_file():
                resolved = alt_path
        return resolved

    return (root.parent / path).resolve()


def load_global_config(root: Union[Path, str]) -> GlobalConfig:
    """
    Load configuration from a directory.

    Expected structure:

        root/
            global.json

    global.json keys (all optional):

    - ui_title: navbar title, defaults to 'Inclusive Events Browser'
    - subtitle: navbar subtitle
    - dataset: path or URL of the events CSV, defaults to 'data/events.csv'

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises ConfigError: if global.json is missing or not a JSON object.
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    if not global_path.is_file():
        raise ConfigError(f"File not found at {global_path}")

    try:
        with global_path.open() as f:
            raw_global = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw_global, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    dataset = resolve_dataset_location(str(raw_global.get("dataset", DEFAULT_DATASET)), root)

    return GlobalConfig(
        ui_title=raw_global.get("ui_title", DEFAULT_TITLE),
        subtitle=raw_global.get("subtitle", DEFAULT_SUBTITLE),
        dataset=dataset,
        source_path=global_path,
    )
