from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from event_browser.core.session import DashboardSession

if TYPE_CHECKING:
    from event_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def restore_session(ctx: AppConfig, data: Optional[Dict[str, Any]]) -> DashboardSession:
    """
    Rebuild the dashboard session from the browser store.

    A snapshot that no longer parses falls back to a fresh session.
    """
    records = ctx.dataset_service.records()
    try:
        return DashboardSession.restore(records, data)
    except (TypeError, ValueError, KeyError):
        logger.exception("Invalid session state: %r", data)
        return DashboardSession(records)
