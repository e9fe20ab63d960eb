"""
Core data model for progress bar appearance.

ValueDisplay — which numeric readout follows the bar.
Symbol       — one glyph plus an optional rich Style.
Style        — every visual element of a bar, and the built-in presets.

Presets are factories: each call builds a brand-new Style, so callers
may tweak the result freely without affecting anyone else.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Optional

from rich.style import Style as RichStyle

from progressors.theme import (
    COLOR_ASCII_DONE,
    COLOR_ASCII_FILL,
    COLOR_CLIMB_DONE,
    COLOR_CLIMB_EMPTY,
    COLOR_SMOOTH_DONE,
    COLOR_SMOOTH_EMPTY,
    GLYPH_FULL_BLOCK,
    GLYPH_LEFT_EIGHTH,
    GLYPH_LEFT_FIVE_EIGHTHS,
    GLYPH_LEFT_SEVEN_EIGHTHS,
    GLYPH_LEFT_THREE_EIGHTHS,
    GLYPH_QUADRANT_DIAGONAL,
    GLYPH_QUADRANT_THREE,
    GLYPH_QUADRANT_UPPER_LEFT,
    GLYPH_RIGHT_EIGHTH,
)


# ── Value display ─────────────────────────────────────────────────────────────

class ValueDisplay(Enum):
    NONE = "none"
    CURRENT_VALUE_ONLY = "value"
    CURRENT_AND_MAX_VALUE = "value_and_max"
    PERCENTAGE = "percentage"


VALUE_DISPLAY_NAMES: tuple[str, ...] = tuple(v.value for v in ValueDisplay)


# ── Symbol ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Symbol:
    """
    A single display character and its optional styling.

    The builder methods never mutate — each returns a new Symbol with
    the extra attribute layered on top of any existing style:

        Symbol("=").with_fg("green").bold()
    """

    symbol: str
    style: Optional[RichStyle] = None

    def with_fg(self, color: str) -> "Symbol":
        return self._layer(RichStyle(color=color))

    def with_bg(self, color: str) -> "Symbol":
        return self._layer(RichStyle(bgcolor=color))

    def bold(self) -> "Symbol":
        return self._layer(RichStyle(bold=True))

    def dim(self) -> "Symbol":
        return self._layer(RichStyle(dim=True))

    def _layer(self, extra: RichStyle) -> "Symbol":
        base = self.style if self.style is not None else RichStyle()
        return replace(self, style=base + extra)


# ── Style ─────────────────────────────────────────────────────────────────────

@dataclass
class Style:
    """
    Full description of how a bar looks.

    fill_chars is ordered from least to most filled; the renderer picks
    an entry by position to draw the cell currently in transition.
    An empty list disables the partial cell entirely.

    value_suffix and value_divisor are reserved and not consulted when
    drawing.
    """

    left_cap: Symbol
    right_cap: Symbol
    empty_char: Symbol
    done_char: Symbol
    fill_chars: list[Symbol] = field(default_factory=list)

    value_display: ValueDisplay = ValueDisplay.NONE
    value_suffix: Optional[str] = None
    value_divisor: int = 1

    # ── Presets ───────────────────────────────────────────────────────────────

    @classmethod
    def default_ascii(cls) -> "Style":
        """Plain ASCII bar: dim brackets, bold green '=' and a 4-step palette."""
        return cls(
            left_cap=Symbol("[").dim(),
            right_cap=Symbol("]").dim(),
            empty_char=Symbol(" "),
            done_char=Symbol("=").with_fg(COLOR_ASCII_DONE).bold(),
            fill_chars=[
                Symbol(".").with_fg(COLOR_ASCII_FILL),
                Symbol(",").with_fg(COLOR_ASCII_FILL),
                Symbol("-").with_fg(COLOR_ASCII_FILL),
                Symbol("=").with_fg(COLOR_ASCII_FILL),
            ],
        )

    @classmethod
    def new_smooth_unicode(cls) -> "Style":
        """Yellow-on-blue bar that grows in 1/8th-block steps."""
        def partial(glyph: str) -> Symbol:
            return Symbol(glyph).with_fg(COLOR_SMOOTH_DONE).with_bg(COLOR_SMOOTH_EMPTY)

        return cls(
            left_cap=Symbol(GLYPH_RIGHT_EIGHTH),
            right_cap=Symbol(GLYPH_LEFT_EIGHTH),
            empty_char=Symbol(GLYPH_FULL_BLOCK).with_fg(COLOR_SMOOTH_EMPTY),
            done_char=Symbol(GLYPH_FULL_BLOCK).with_fg(COLOR_SMOOTH_DONE),
            fill_chars=[
                partial(GLYPH_LEFT_EIGHTH),
                partial(GLYPH_LEFT_THREE_EIGHTHS),
                partial(GLYPH_LEFT_FIVE_EIGHTHS),
                partial(GLYPH_LEFT_SEVEN_EIGHTHS),
            ],
        )

    @classmethod
    def new_climbing_blocks_unicode(cls) -> "Style":
        """Magenta-on-grey bar whose transition cell fills quadrant by quadrant."""
        def partial(glyph: str) -> Symbol:
            return Symbol(glyph).with_fg(COLOR_CLIMB_DONE).with_bg(COLOR_CLIMB_EMPTY)

        return cls(
            left_cap=Symbol(GLYPH_RIGHT_EIGHTH),
            right_cap=Symbol(GLYPH_LEFT_EIGHTH),
            empty_char=Symbol(GLYPH_FULL_BLOCK).with_fg(COLOR_CLIMB_EMPTY),
            done_char=Symbol(GLYPH_FULL_BLOCK).with_fg(COLOR_CLIMB_DONE),
            fill_chars=[
                partial(GLYPH_QUADRANT_UPPER_LEFT),
                partial(GLYPH_QUADRANT_DIAGONAL),
                partial(GLYPH_QUADRANT_THREE),
                partial(GLYPH_FULL_BLOCK),
            ],
        )


# ── Preset lookup ─────────────────────────────────────────────────────────────

_PRESETS: dict[str, Callable[[], Style]] = {
    "ascii": Style.default_ascii,
    "smooth": Style.new_smooth_unicode,
    "climbing": Style.new_climbing_blocks_unicode,
}

PRESET_NAMES: tuple[str, ...] = tuple(_PRESETS)


def preset(name: str) -> Style:
    """
    Return a fresh instance of the named preset.

    Raises KeyError for an unknown name.
    """
    try:
        factory = _PRESETS[name]
    except KeyError:
        raise KeyError(
            f"Unknown style preset {name!r} (expected one of: {', '.join(PRESET_NAMES)})"
        ) from None
    return factory()
