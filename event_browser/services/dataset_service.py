from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple, Union

from event_browser.core.dataset_loader import load_events
from event_browser.core.exceptions import DatasetLoadError
from event_browser.core.record import EventRecord

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class LoadResult:
    status: LoadStatus
    records: Tuple[EventRecord, ...] = field(default_factory=tuple)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is LoadStatus.READY


class EventDatasetService:
    """
    Owns the one-time load of the events dataset.

    The first call to load() reads the resource; every later call returns
    the cached outcome, including a failure. A failed load never exposes a
    partial collection.
    """

    def __init__(self, source: Union[str, Path]):
        self._source = source
        self._result: Optional[LoadResult] = None
        self._lock = threading.Lock()

    @property
    def source(self) -> Union[str, Path]:
        return self._source

    @property
    def status(self) -> LoadStatus:
        if self._result is None:
            return LoadStatus.LOADING
        return self._result.status

    def load(self) -> LoadResult:
        # 1. Fast path: already attempted
        if self._result is not None:
            return self._result

        with self._lock:
            if self._result is not None:
                return self._result

            # 2. Load
            try:
                records = load_events(self._source)
            except DatasetLoadError as e:
                logger.error(
                    "Events dataset failed to load",
                    extra={"source": str(self._source), "error": str(e)},
                )
                self._result = LoadResult(status=LoadStatus.ERROR, error=str(e))
            else:
                self._result = LoadResult(status=LoadStatus.READY, records=records)

        return self._result

    def records(self) -> Tuple[EventRecord, ...]:
        """The base collection; empty when the load failed."""
        return self.load().records
