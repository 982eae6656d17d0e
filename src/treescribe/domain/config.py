from __future__ import annotations

"""
Configuration Domain Management.

Persists application settings (appearance, locale, diagnostics, toast
timing) as JSON in the user data directory, merging stored values over
defaults so new keys appear automatically after upgrades.
"""

import json
import logging
import os
from typing import Any, Dict

from treescribe.domain.constants import CURRENT_CONFIG_VERSION
from treescribe.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")

SUPPORTED_LOCALES = ("en", "zh_TW")


def get_default_settings() -> Dict[str, Any]:
    """
    Generate the default application settings.

    Returns:
        Dict[str, Any]: Default setting values.
    """
    return {
        "appearance_mode": "System",
        "color_theme": "blue",
        "locale": "en",
        "log_level": "INFO",
        "toast_duration_ms": 1500,
        "window_geometry": "1000x700",
    }


def get_default_app_state() -> Dict[str, Any]:
    """
    Generate the complete default structure of config.json.

    Returns:
        Dict[str, Any]: Versioned state with the settings block.
    """
    return {
        "version": CURRENT_CONFIG_VERSION,
        "app_settings": get_default_settings(),
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state() -> Dict[str, Any]:
    """
    Load application state from disk.

    Unknown or corrupted files fall back to the defaults.

    Returns:
        Dict[str, Any]: The loaded state or a default structure on failure.
    """
    state = get_default_app_state()

    if not os.path.exists(CONFIG_FILE):
        logger.debug("Config file not found. Returning defaults.")
        return state

    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return state

    settings = data.get("app_settings")
    if isinstance(settings, dict):
        state["app_settings"].update(settings)

    if state["app_settings"].get("locale") not in SUPPORTED_LOCALES:
        state["app_settings"]["locale"] = get_default_settings()["locale"]

    state["version"] = CURRENT_CONFIG_VERSION
    return state


def save_app_state(state: Dict[str, Any]) -> None:
    """
    Persist application state to disk.

    Args:
        state: The state dictionary to save.
    """
    try:
        os.makedirs(os.path.dirname(CONFIG_FILE), exist_ok=True)
        state["version"] = CURRENT_CONFIG_VERSION
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {CONFIG_FILE}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def get_app_settings() -> Dict[str, Any]:
    """Retrieve the active settings block directly."""
    return load_app_state()["app_settings"]


def save_app_settings(settings: Dict[str, Any]) -> None:
    state = load_app_state()
    state["app_settings"].update(settings)
    save_app_state(state)
