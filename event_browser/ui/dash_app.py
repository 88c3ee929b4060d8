from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from event_browser.config.loader import load_global_config
from event_browser.services.dataset_service import EventDatasetService
from event_browser.ui.layout.build_layout import build_layout
from event_browser.ui.callbacks.callbacks_filters import register_filter_callbacks
from event_browser.ui.callbacks.callbacks_render import register_render_callbacks
from event_browser.ui.callbacks.callbacks_detail import register_detail_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(
    config_root: Path | str | None = None,
    dataset_service: Optional[EventDatasetService] = None,
) -> Dash:
    if config_root is None:
        config_root = os.getenv("EVENT_BROWSER_CONFIG_ROOT", "config")
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Dataset Service (one-time load; a failure is shown in the UI)
    if dataset_service is None:
        dataset_service = EventDatasetService(global_config.dataset)
    result = dataset_service.load()

    logger.info(
        "Dashboard dataset status",
        extra={
            "source": str(dataset_service.source),
            "status": dataset_service.status.value,
            "n_records": len(result.records),
        },
    )

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        dataset_service=dataset_service,
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )

    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_filter_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_detail_callbacks(app, ctx)

    return app
