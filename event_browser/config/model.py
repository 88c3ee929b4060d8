from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

DEFAULT_TITLE = "Inclusive Events Browser"
DEFAULT_SUBTITLE = "Find community events that work for everyone"
DEFAULT_DATASET = "data/events.csv"


@dataclass
class GlobalConfig:
    """
    Parsed global.json.

    - ui_title / subtitle: navbar text
    - dataset: resolved local path, or the URL as written
    - source_path: the global.json this was read from (None for defaults)
    """
    ui_title: str = DEFAULT_TITLE
    subtitle: str = DEFAULT_SUBTITLE
    dataset: Union[Path, str] = DEFAULT_DATASET
    source_path: Optional[Path] = None
