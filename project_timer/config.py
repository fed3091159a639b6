"""
Settings persistence - sound, notifications and window appearance.
Projects themselves live only for the session.
"""

import json
import logging
from pathlib import Path

from .display import IDLE_BACKGROUND

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".projecttimer" / "timer_config.json"


def default_settings():
    return {
        "sound": "Chime",
        "custom_sound": None,
        "notifications": True,
        "idle_background": IDLE_BACKGROUND,
        "background_saturation": 0.7,
        "background_lightness": 0.8,
        "window_geometry": "560x560",
    }


class ConfigManager:
    """Loads and saves user settings as JSON"""
    def __init__(self, config_file=None):
        self.config_file = Path(config_file) if config_file else DEFAULT_CONFIG_PATH
        self.data = self.load()

    def load(self):
        """Reads settings from disk over the defaults"""
        data = default_settings()
        if not self.config_file.exists():
            return data

        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable config %s: %s", self.config_file, e)
            return data

        if isinstance(loaded, dict):
            data.update(loaded)
        else:
            logger.warning("Ignoring config %s: not a JSON object", self.config_file)
        return data

    def save(self):
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=2)
        except OSError as e:
            logger.error("Save config error: %s", e)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def set(self, key, value):
        self.data[key] = value
        self.save()
