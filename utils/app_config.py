"""Client configuration. Zero imports from the rest of the app except constants.

Stores user preferences that must be known before the API client is built
(e.g. the backend base URL). Config lives in ~/.category_manager/config.json.
"""
import json
import os
from pathlib import Path

from utils.constants import DEFAULT_API_BASE_URL, DEFAULT_REQUEST_TIMEOUT

CONFIG_DIR = Path.home() / ".category_manager"
CONFIG_FILE = CONFIG_DIR / "config.json"


def load_config() -> dict:
    """Returns {} on missing or corrupt file; never raises."""
    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            config = json.load(f)
    except Exception:
        return {}
    return config if isinstance(config, dict) else {}


def save_config(config: dict) -> None:
    """Creates the config dir if needed; atomic write via .tmp + os.replace()."""
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    tmp = CONFIG_FILE.with_suffix(".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        os.replace(tmp, CONFIG_FILE)
    except Exception:
        try:
            tmp.unlink(missing_ok=True)
        except Exception:
            pass


def get_api_base_url() -> str:
    return load_config().get("api_base_url") or DEFAULT_API_BASE_URL


def set_api_base_url(url: str | None) -> None:
    config = load_config()
    if url is None:
        config.pop("api_base_url", None)
    else:
        config["api_base_url"] = url.rstrip("/")
    save_config(config)


def get_request_timeout() -> float | None:
    """Seconds; an explicit null in the config disables the timeout."""
    config = load_config()
    if "request_timeout" not in config:
        return DEFAULT_REQUEST_TIMEOUT
    value = config["request_timeout"]
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return DEFAULT_REQUEST_TIMEOUT


def get_appearance_mode() -> str:
    return load_config().get("appearance_mode", "system")


_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def get_log_level() -> str:
    level = str(load_config().get("log_level", "INFO")).upper()
    return level if level in _LOG_LEVELS else "INFO"
