"""
Config file loading for progressors.

Reads ~/.config/progressors/config.toml and returns demo defaults.
Never raises — always returns a valid dict with sensible defaults.

    style = "smooth"          # ascii | smooth | climbing
    width = 60
    value_display = "value_and_max"
    delay = 0.01
"""

import logging
from pathlib import Path

from progressors.style import PRESET_NAMES, VALUE_DISPLAY_NAMES


logger = logging.getLogger(__name__)

_CONFIG_PATH = Path.home() / ".config" / "progressors" / "config.toml"

DEFAULTS: dict = {
    "style": "ascii",
    "width": 40,
    "value_display": "percentage",
    "delay": 0.025,
}


def load_config(path: Path | None = None) -> dict:
    """
    Load and return progressors config from TOML file.

    Returns {"style", "width", "value_display", "delay"} — always valid,
    never raises. Missing file or parse errors return the defaults;
    a single bad key falls back to its own default.
    """
    config_path = path or _CONFIG_PATH
    config = dict(DEFAULTS)

    if not config_path.is_file():
        return config

    try:
        raw = config_path.read_bytes()
    except OSError as exc:
        logger.debug("cannot read %s: %s", config_path, exc)
        return config

    try:
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[no-redef]

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        logger.debug("ignoring malformed config %s: %s", config_path, exc)
        return config

    style = data.get("style")
    if isinstance(style, str) and style in PRESET_NAMES:
        config["style"] = style
    elif style is not None:
        logger.debug("ignoring config style=%r", style)

    width = data.get("width")
    if isinstance(width, int) and not isinstance(width, bool) and width >= 0:
        config["width"] = width
    elif width is not None:
        logger.debug("ignoring config width=%r", width)

    value_display = data.get("value_display")
    if isinstance(value_display, str) and value_display in VALUE_DISPLAY_NAMES:
        config["value_display"] = value_display
    elif value_display is not None:
        logger.debug("ignoring config value_display=%r", value_display)

    delay = data.get("delay")
    if isinstance(delay, (int, float)) and not isinstance(delay, bool) and delay >= 0:
        config["delay"] = float(delay)
    elif delay is not None:
        logger.debug("ignoring config delay=%r", delay)

    return config
