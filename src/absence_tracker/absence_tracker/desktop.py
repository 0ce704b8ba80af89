"""Desktop shell: serve the Flask app locally and show it in a native window.

Start:
    absence-tracker
"""

from __future__ import annotations

import logging
import socket
import sys
import threading
import time

import webview

from .container import Container, build_container
from .core.exceptions import LoadError
from .main import create_app, load_settings

logger = logging.getLogger(__name__)


class DesktopBridge:
    """JS API exposed to the page as ``window.pywebview.api``.

    Lets the page fetch the raw JSON documents through the host process
    instead of over HTTP.
    """

    def __init__(self, container: Container):
        self._container = container

    def read_employee_json(self) -> str:
        return self._container.persistence.raw_employees()

    def read_code_json(self) -> str:
        return self._container.persistence.raw_codes()


def _wait_for_server(host: str, port: int, *, timeout: float = 10.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            with socket.create_connection((host, port), timeout=0.5):
                return True
        except OSError:
            time.sleep(0.1)
    return False


def start_app() -> int:
    settings = load_settings()
    host = getattr(settings, "HOST", "127.0.0.1")
    port = int(getattr(settings, "PORT", 5173))

    container = build_container(data_config=settings.DATA_CONFIG)
    app = create_app(container=container)

    server = threading.Thread(
        target=app.run,
        kwargs={"host": host, "port": port, "debug": False, "use_reloader": False},
        daemon=True,
    )
    server.start()
    if not _wait_for_server(host, port):
        logger.error("Server did not start on %s:%d", host, port)
        return 1

    webview.create_window(
        title=getattr(settings, "WINDOW_TITLE", "Absence Tracker"),
        url=f"http://{host}:{port}/",
        width=int(getattr(settings, "WINDOW_WIDTH", 1200)),
        height=int(getattr(settings, "WINDOW_HEIGHT", 800)),
        resizable=True,
        js_api=DesktopBridge(container),
    )
    webview.start(debug=bool(getattr(settings, "DEBUG", False)))
    return 0


def main() -> int:
    try:
        return start_app()
    except LoadError as e:
        logger.error("Cannot start: %s", e)
        print(f"Cannot load data: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Exiting.")
        return 0


if __name__ == "__main__":
    sys.exit(main())
