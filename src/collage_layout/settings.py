from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Any, Dict

import yaml

from .models import LayoutType

logger = logging.getLogger(__name__)

SETTINGS_ENV = "COLLAGE_LAYOUT_SETTINGS"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "layout": LayoutType.DYNAMIC.value,
    "canvas_width": 1920,
    "canvas_height": 1080,
    "gap": 4,
    "default_aspect": 16 / 9,
}

_NUMERIC_KEYS = {
    "canvas_width": int,
    "canvas_height": int,
    "gap": int,
    "default_aspect": float,
}


def settings_path() -> str:
    env_path = os.getenv(SETTINGS_ENV)
    if env_path:
        return os.path.expanduser(env_path)
    return os.path.join(os.path.dirname(__file__), "settings.yaml")


def load_settings() -> Dict[str, Any]:
    """Settings for the file currently named by ``settings_path``."""
    return dict(read_settings(settings_path()))


@lru_cache(maxsize=None)
def read_settings(path: str) -> Dict[str, Any]:
    """Load defaults from a YAML file; bad or missing values keep the built-ins."""

    data: Dict[str, Any] = {}
    if os.path.exists(path):
        try:
            with open(path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
            if isinstance(loaded, dict):
                data = loaded
        except (OSError, yaml.YAMLError):
            logger.exception("Failed to read settings from %s", path)

    settings = DEFAULT_SETTINGS.copy()
    if "layout" in data:
        settings["layout"] = LayoutType.parse(str(data["layout"])).value
    for key, cast in _NUMERIC_KEYS.items():
        if key not in data:
            continue
        try:
            settings[key] = cast(data[key])
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid setting %s=%r", key, data[key])
    return settings
