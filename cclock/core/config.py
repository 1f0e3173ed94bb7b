import json
from cclock.common.logger import log
from cclock.common.setup import PATHS


#region === Helpers and Paths ===

SETTINGS_PATH = PATHS.data / "settings.json"

# Default values for every user preference. Clock state itself is never saved.
_SETTINGS_DEFAULTS = {
    "default_time": "5m",
    "show_controls": True,
    "start_fullscreen": False,
    "frame_interval_ms": 16,
    "theme": "Midnight",
    "font": "monospace",
}

# Helper to return a truly fresh, default settings dict.
def build_default_settings():
    return dict(_SETTINGS_DEFAULTS)

#endregion === Helpers and Paths ===

#region === Saving and Loading Settings ===

# Loads settings from SETTINGS_PATH, filling in anything missing or of the wrong type with its default.
def load_settings():
    try:
        # Write the defaults out on first run so there's a file to edit by hand.
        if not SETTINGS_PATH.exists():
            log.info(f"No settings file at '{SETTINGS_PATH}', writing defaults.")
            settings = build_default_settings()
            save_settings(settings)
            return settings

        with open(SETTINGS_PATH, "r", encoding="utf-8") as f:
            settings = json.load(f)
        if not isinstance(settings, dict):
            raise TypeError(f"Expected a JSON object in '{SETTINGS_PATH}', got {type(settings).__name__}")

        defaulted_values = set()
        for key, default in _SETTINGS_DEFAULTS.items():
            value = settings.get(key)
            # bool is an int subclass, so check it explicitly for the numeric keys
            wrong_type = (not isinstance(value, type(default))
                          or (isinstance(value, bool) and not isinstance(default, bool)))
            if key not in settings or wrong_type:
                defaulted_values.add(key)
                settings[key] = default
        if settings["frame_interval_ms"] <= 0:
            defaulted_values.add("frame_interval_ms")
            settings["frame_interval_ms"] = _SETTINGS_DEFAULTS["frame_interval_ms"]

        # Log results
        if defaulted_values:
            log.warning(f"Loaded settings from '{SETTINGS_PATH}', but with missing or invalid values that were defaulted: {', '.join(sorted(defaulted_values))}")
        else:
            log.info(f"Successfully loaded settings from '{SETTINGS_PATH}'.")
        return settings
    # Fall back to defaults in case of error, but warn in log
    except (json.JSONDecodeError, OSError, TypeError):
        log.warning("Ran into an error while trying to load settings.json, falling back to defaults.",exc_info=True)
        return build_default_settings()

# Write the given settings to disk under SETTINGS_PATH
def save_settings(settings):
    with open(SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
    log.info(f"Successfully saved settings to '{SETTINGS_PATH}'")

#endregion === Saving and Loading Settings ===
