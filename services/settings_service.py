# services/settings_service.py
# A simple service for persisting screen lifecycle settings.

import json
import logging
import os

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

DEFAULT_SETTINGS = {
    "log_level": "WARNING",
    "notify_property_changes": True,
    "default_display_name": None,
}


class SettingsService:
    """
    Manages loading and saving settings from a JSON file.
    Missing keys fall back to :data:`DEFAULT_SETTINGS`.
    """
    def __init__(self, file_name="screen_settings.json"):
        """
        Initializes the service and loads existing settings from the file.
        """
        self.file_path = file_name
        self.settings = self._load()

    def _load(self):
        """
        Loads the settings from the JSON file.
        Returns an empty dictionary if the file doesn't exist or is invalid.
        """
        try:
            if os.path.exists(self.file_path):
                with open(self.file_path, 'r') as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    return data
                logger.warning("Ignoring settings file %s: not a JSON object", self.file_path)
        except (IOError, json.JSONDecodeError) as e:
            logger.warning("Could not load settings: %s", e)
        return {}

    def save(self):
        """Saves the current settings dictionary to the JSON file."""
        try:
            with open(self.file_path, 'w') as f:
                json.dump(self.settings, f, indent=4)
        except IOError as e:
            logger.warning("Could not save settings: %s", e)

    def get_value(self, key, default=None):
        """
        Retrieves a value from the settings for a given key.

        Args:
            key (str): The key for the setting.
            default: The value to return if the key is not found. When None,
                the built-in default for ``key`` is used.

        Returns:
            The setting value or the default.
        """
        if default is None:
            default = DEFAULT_SETTINGS.get(key)
        return self.settings.get(key, default)

    def set_value(self, key, value):
        """
        Sets a value in the settings for a given key.
        """
        self.settings[key] = value
