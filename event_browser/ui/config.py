from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from event_browser.config.model import GlobalConfig
from event_browser.core.record import EventRecord
from event_browser.services.dataset_service import EventDatasetService


@dataclass
class AppConfig:
    """
    Shared state for the Dash app: config and the dataset service. Passed
    into layout + callback registration functions instead of using
    module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    dataset_service: Optional[EventDatasetService] = None
    _by_id: Dict[str, EventRecord] = field(default_factory=dict, repr=False)

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.dataset_service is None:
            raise RuntimeError("AppConfig.dataset_service must be initialized.")

    def record_by_id(self, event_id: str) -> Optional[EventRecord]:
        if not self._by_id:
            self._by_id = {r.event_id: r for r in self.dataset_service.records()}
        return self._by_id.get(event_id)
