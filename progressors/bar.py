"""
Progress bar renderer.

compute_layout() is pure — takes (value, total, width, palette size),
returns how many cells of each kind to draw.
ProgressBar owns the mutable value/total/width state and writes the
composed line to any text sink on demand.

Output:  [====================-...................] 51 %
"""

import logging
import sys
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

from rich.style import Style as RichStyle
from rich.text import Text

from progressors.style import Style, ValueDisplay
from progressors.theme import color_enabled, paint


logger = logging.getLogger(__name__)

# Fractions at or below this count as "exactly on a cell boundary".
EPSILON = 1e-9

_ERASE = "\r"


# ── Layout ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Layout:
    proportion: float       # value / total, not clamped
    whole_cells: int        # done glyphs, at most the display width
    has_partial: bool       # draw one palette glyph after the done run
    partial_index: int      # which palette glyph; 0 when the palette is empty
    empty_cells: int        # empty glyphs, never negative


def compute_layout(value: int, total: int, width: int, palette_len: int) -> Layout:
    """
    Split a bar of `width` cells into done / partial / empty runs.

    A zero total draws as 0% progress. Values beyond the total saturate
    to a completely done bar with no partial cell.
    """
    if total == 0:
        logger.debug("total is 0; drawing an empty bar")
        return Layout(0.0, 0, False, 0, width)

    proportion = value / total

    # Integer divmod keeps exact boundaries exact: 5/10 of 40 cells is 20, not 19.999…
    whole, remainder = divmod(value * width, total)
    fraction = remainder / total

    if whole >= width:
        if whole > width:
            logger.debug("value %s exceeds total %s; saturating", value, total)
        return Layout(proportion, width, False, 0, 0)

    has_partial = palette_len > 0 and fraction > EPSILON
    if palette_len:
        partial_index = min(int(remainder * palette_len // total), palette_len - 1)
    else:
        partial_index = 0

    empty = max(0, width - whole - (1 if has_partial else 0))
    return Layout(proportion, int(whole), has_partial, partial_index, empty)


# ── Renderer ──────────────────────────────────────────────────────────────────

class ProgressBar:
    """
    Single-line progress bar bound to a Style.

    The caller owns all state changes: set the value, then erase/draw.
    Nothing is clamped on assignment — an over-full or zero-total bar
    is handled at draw time.

    Usage:
        bar = ProgressBar(Style.default_ascii())
        bar.set_total(400)
        for i in range(401):
            bar.erase()
            bar.set_value(i)
            bar.draw()
    """

    def __init__(
        self,
        style: Style,
        *,
        value: int = 0,
        total: int = 10,
        display_len: int = 40,
        color: Optional[bool] = None,
    ) -> None:
        self.style = style
        self._value = _count("value", value)
        self._total = _count("total", total)
        self._display_len = _count("display_len", display_len)
        self.color = color_enabled() if color is None else color

    # ── State ─────────────────────────────────────────────────────────────────

    def get_total(self) -> int:
        return self._total

    def set_total(self, total: int) -> None:
        self._total = _count("total", total)

    def get_value(self) -> int:
        return self._value

    def set_value(self, value: int) -> None:
        self._value = _count("value", value)

    def get_display_len(self) -> int:
        return self._display_len

    def set_display_len(self, display_len: int) -> None:
        self._display_len = _count("display_len", display_len)

    total = property(get_total, set_total)
    value = property(get_value, set_value)
    display_len = property(get_display_len, set_display_len)

    # ── Computation ───────────────────────────────────────────────────────────

    def percent_done(self) -> float:
        """Return progress as a percentage; 0.0 when the total is zero."""
        if self._total == 0:
            return 0.0
        return self._value / self._total * 100

    def layout(self) -> Layout:
        return compute_layout(
            self._value, self._total, self._display_len, len(self.style.fill_chars)
        )

    def value_text(self) -> str:
        """Return the trailing numeric readout, including its leading space."""
        mode = self.style.value_display
        if mode is ValueDisplay.PERCENTAGE:
            pct = self._value * 100 // self._total if self._total else 0
            return f" {pct} %"
        if mode is ValueDisplay.CURRENT_VALUE_ONLY:
            return f" {self._value}"
        if mode is ValueDisplay.CURRENT_AND_MAX_VALUE:
            return f" {self._value}/{self._total}"
        return ""

    def segments(self) -> Iterator[tuple[str, Optional[RichStyle]]]:
        """Yield (text, style) runs left to right; empty runs are skipped."""
        s = self.style
        lay = self.layout()

        yield s.left_cap.symbol, s.left_cap.style
        if lay.whole_cells:
            yield s.done_char.symbol * lay.whole_cells, s.done_char.style
        if lay.has_partial:
            glyph = s.fill_chars[lay.partial_index]
            yield glyph.symbol, glyph.style
        if lay.empty_cells:
            yield s.empty_char.symbol * lay.empty_cells, s.empty_char.style
        yield s.right_cap.symbol, s.right_cap.style

        annotation = self.value_text()
        if annotation:
            yield annotation, None

    # ── Output ────────────────────────────────────────────────────────────────

    def erase(self) -> None:
        self.erase_to(sys.stdout)

    def erase_to(self, sink: TextIO) -> None:
        """Return the cursor to the start of the line so the next draw overwrites it."""
        sink.write(_ERASE)

    def draw(self) -> None:
        self.draw_to(sys.stdout)

    def draw_to(self, sink: TextIO) -> None:
        """
        Write the full bar line to sink, then flush it once.

        Write and flush errors propagate to the caller.
        """
        for text, style in self.segments():
            sink.write(paint(text, style, self.color))
        sink.flush()

    def render(self) -> Text:
        """Return the bar as a rich Text, for Console.print() or Live."""
        t = Text(no_wrap=True)
        for text, style in self.segments():
            t.append(text, style=style)
        return t

    def __rich__(self) -> Text:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"ProgressBar(value={self._value}, total={self._total}, "
            f"display_len={self._display_len})"
        )


def _count(name: str, n: int) -> int:
    """Validate a cell or value count, which must be a non-negative integer."""
    if n < 0:
        raise ValueError(f"{name} must be non-negative, got {n}")
    return n
