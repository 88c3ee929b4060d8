import logging
import os
import socket

from event_browser.logging_config import configure_logging
from event_browser.ui.dash_app import create_dash_app

configure_logging()
logger = logging.getLogger(__name__)

app = create_dash_app()
server = app.server

PORT_SEARCH_SPAN = 100


def find_free_port(start_port: int, host: str = "localhost") -> int:
    """First port in [start_port, start_port + PORT_SEARCH_SPAN) nobody listens on."""
    for port in range(start_port, start_port + PORT_SEARCH_SPAN):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex((host, port)) != 0:
                return port
    return start_port


if __name__ == "__main__":
    preferred_port = int(os.getenv("PORT", "8050"))
    final_port = find_free_port(preferred_port)
    debug = os.getenv("DEBUG", "0") == "1"

    if final_port != preferred_port:
        logger.warning(
            "Preferred port taken, using next free port",
            extra={"preferred_port": preferred_port, "port": final_port},
        )

    logger.info("Starting event browser", extra={"port": final_port, "debug": debug})
    app.run(host="0.0.0.0", port=final_port, debug=debug)
