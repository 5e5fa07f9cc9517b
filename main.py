import logging
import os
import sys
import customtkinter as ctk

# Ensure project root is on sys.path when run directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from client.api_client import ApiClient
from client.category_api import CategoryAPI
from ui.app_window import AppWindow
from utils.app_config import (
    get_api_base_url,
    get_appearance_mode,
    get_log_level,
    get_request_timeout,
)
from utils.cli import apply_args, parse_args
from utils.constants import LOG_FORMAT

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None):
    # ── Command line: may update the saved config ────────────────────────────
    apply_args(parse_args(argv))

    # ── Logging ──────────────────────────────────────────────────────────────
    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)

    # ── API ──────────────────────────────────────────────────────────────────
    api = ApiClient(base_url=get_api_base_url(), timeout=get_request_timeout())
    category_api = CategoryAPI(api)
    logger.info("Using category API at %s", api.base_url)

    # ── Appearance ───────────────────────────────────────────────────────────
    ctk.set_appearance_mode(get_appearance_mode())
    ctk.set_default_color_theme("blue")

    # ── Launch UI ────────────────────────────────────────────────────────────
    app = AppWindow(category_api=category_api)

    def on_close():
        api.close()
        app.destroy()

    app.protocol("WM_DELETE_WINDOW", on_close)
    app.mainloop()


if __name__ == "__main__":
    main()
