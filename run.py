#!/usr/bin/env python3
"""EQAREA - equal-area polygon dragging on a world map.

Starts a Flask server and opens the browser to the map UI.
"""

import logging
import os
import threading
import webbrowser

from eqarea.server import app

PORT = int(os.environ.get("PORT", 5050))
HOST = os.environ.get("HOST", "127.0.0.1")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


def open_browser():
    webbrowser.open(f"http://127.0.0.1:{PORT}")


if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # Only open browser in local development mode
    if HOST == "127.0.0.1" and os.environ.get("FLASK_ENV") != "production":
        threading.Timer(1.0, open_browser).start()
    app.run(host=HOST, port=PORT, debug=False)
