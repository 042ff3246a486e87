"""
Viewer settings loaded from settings.json.

Only the interactive viewer is configurable. The frame pipeline's
viewport, iteration budget and palette are fixed constants.
"""

import json
import logging
import os

logger = logging.getLogger(__name__)

SETTINGS_PATH = os.path.join(os.path.dirname(__file__), 'settings.json')

DEFAULT_SETTINGS = {
    'window_width': 900,
    'window_height': 400,
    'initial_scale': 1.0,
    'zoom_in_factor': 1.25,
    'zoom_out_factor': 0.8,
    'render_delay_ms': 25,
}


def load_settings(path=None):
    """
    Load viewer settings, falling back to DEFAULT_SETTINGS.

    Missing or malformed files and unknown or missing keys never fail;
    they are logged and the defaults fill in.

    Args:
        path: JSON file to read (default: settings.json beside this module)

    Returns:
        dict with every key of DEFAULT_SETTINGS
    """
    settings = dict(DEFAULT_SETTINGS)
    path = path or SETTINGS_PATH
    try:
        with open(path, 'r') as f:
            loaded = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not load %s: %s", path, e)
        return settings

    if not isinstance(loaded, dict):
        logger.warning("Ignoring %s: expected a JSON object", path)
        return settings

    for key, value in loaded.items():
        if key not in DEFAULT_SETTINGS:
            logger.warning("Ignoring unknown setting %r", key)
            continue
        try:
            settings[key] = type(DEFAULT_SETTINGS[key])(value)
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid value %r for %r", value, key)

    return settings
