"""
Progressors visual design system.

All preset colors and glyphs as named constants, plus the styling
transform that turns a glyph run and an optional rich Style into
terminal output. Import from here — never hardcode color names or
block characters in other modules.
"""

import os
from typing import Mapping, Optional

from rich.style import Style


# ── Color palette ─────────────────────────────────────────────────────────────
# Standard 16-color names so every preset renders on basic terminals.

COLOR_ASCII_DONE = "green"
COLOR_ASCII_FILL = "green"

COLOR_SMOOTH_DONE  = "yellow"
COLOR_SMOOTH_EMPTY = "blue"

COLOR_CLIMB_DONE  = "magenta"
COLOR_CLIMB_EMPTY = "bright_black"      # "dark grey" on most palettes


# ── Glyphs ────────────────────────────────────────────────────────────────────

GLYPH_RIGHT_EIGHTH       = "▕"     # right 1/8th block
GLYPH_LEFT_EIGHTH        = "▏"     # left 1/8th block
GLYPH_LEFT_THREE_EIGHTHS = "▍"
GLYPH_LEFT_FIVE_EIGHTHS  = "▋"
GLYPH_LEFT_SEVEN_EIGHTHS = "▉"
GLYPH_FULL_BLOCK         = "█"

GLYPH_QUADRANT_UPPER_LEFT = "▘"
GLYPH_QUADRANT_DIAGONAL   = "▚"    # upper left + lower right
GLYPH_QUADRANT_THREE      = "▙"    # all but upper right


# ── Styling transform ─────────────────────────────────────────────────────────

def paint(text: str, style: Optional[Style], color: bool = True) -> str:
    """
    Return text wrapped in the SGR sequences for style.

    Identity when style is None, when the style carries no attributes,
    or when color is disabled.
    """
    if style is None or not color or not text:
        return text
    return style.render(text)


def color_enabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Return False when the environment asks for plain output.

    Honors NO_COLOR (any non-empty value) and TERM=dumb, the same
    switches rich's Console respects.
    """
    env = os.environ if environ is None else environ
    if env.get("NO_COLOR", ""):
        return False
    if env.get("TERM", "") == "dumb":
        return False
    return True
