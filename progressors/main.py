"""
Progressors — demo entry point.

Animates one or all of the built-in presets: erase, set value, draw,
sleep, repeat. CLI flags override ~/.config/progressors/config.toml.
"""

import logging
import time
from typing import Optional, TextIO

import click
from rich.console import Console
from rich.logging import RichHandler

from progressors import __version__
from progressors.bar import ProgressBar
from progressors.config import load_config
from progressors.style import PRESET_NAMES, VALUE_DISPLAY_NAMES, ValueDisplay, preset
from progressors.theme import color_enabled


logger = logging.getLogger(__name__)

# ── Console (diagnostics only; the bar itself goes to stdout) ────────────────

err_console = Console(stderr=True)


# ── CLI ───────────────────────────────────────────────────────────────────────

@click.command(name="progressors", context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="progressors")
@click.option(
    "--style",
    "style_name",
    type=click.Choice([*PRESET_NAMES, "all"], case_sensitive=False),
    default=None,
    help="Preset to animate, or 'all' to run every preset in turn.",
)
@click.option(
    "--total",
    type=click.IntRange(min=0),
    default=400,
    show_default=True,
    help="Maximum value; the loop counts from 0 up to and including it.",
)
@click.option("--width", type=click.IntRange(min=0), default=None, help="Bar width in cells.")
@click.option(
    "--value-display",
    type=click.Choice(VALUE_DISPLAY_NAMES, case_sensitive=False),
    default=None,
    help="Numeric readout after the bar.",
)
@click.option(
    "--delay",
    type=click.FloatRange(min=0),
    default=None,
    help="Seconds to sleep between frames.",
)
@click.option("--no-color", is_flag=True, default=False, help="Draw without ANSI styling.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug detail to stderr.")
def cli(
    style_name: Optional[str],
    total: int,
    width: Optional[int],
    value_display: Optional[str],
    delay: Optional[float],
    no_color: bool,
    verbose: bool,
) -> None:
    """Animate a single-line progress bar.

    \b
    Environment variables:
      NO_COLOR=1   Disable all colour output.
      TERM=dumb    Alternative way to suppress colour in some terminals.
    """
    _configure_logging(verbose)

    config = load_config()
    style_name = style_name or config["style"]
    width = config["width"] if width is None else width
    value_display = value_display or config["value_display"]
    delay = config["delay"] if delay is None else delay
    color = not no_color and color_enabled()

    names = PRESET_NAMES if style_name == "all" else (style_name,)
    logger.debug(
        "styles=%s total=%d width=%d display=%s delay=%.3fs color=%s",
        ",".join(names), total, width, value_display, delay, color,
    )

    for name in names:
        bar = build_bar(name, total=total, width=width, value_display=value_display, color=color)
        try:
            run_demo(bar, delay=delay)
        except KeyboardInterrupt:
            click.echo()
            err_console.print("[dim]Interrupted.[/dim]")
            return


# ── Demo loop ─────────────────────────────────────────────────────────────────

def build_bar(
    style_name: str,
    *,
    total: int,
    width: int,
    value_display: str,
    color: bool,
) -> ProgressBar:
    """Return a ProgressBar for the named preset with the given readout."""
    style = preset(style_name)
    style.value_display = ValueDisplay(value_display)
    bar = ProgressBar(style, color=color)
    bar.set_total(total)
    bar.set_display_len(width)
    return bar


def run_demo(bar: ProgressBar, delay: float, sink: Optional[TextIO] = None) -> None:
    """
    Count the bar from 0 to its total, redrawing in place each step.

    Writes to sink when given, otherwise to stdout. Ends the line after
    the final frame.
    """
    for i in range(bar.get_total() + 1):
        if sink is None:
            bar.erase()
            bar.set_value(i)
            bar.draw()
        else:
            bar.erase_to(sink)
            bar.set_value(i)
            bar.draw_to(sink)
        if delay:
            time.sleep(delay)

    if sink is None:
        click.echo()
    else:
        sink.write("\n")


# ── Logging ───────────────────────────────────────────────────────────────────

def _configure_logging(verbose: bool) -> None:
    """Route progressors.* log records to stderr through rich."""
    log = logging.getLogger("progressors")
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        log.addHandler(RichHandler(console=err_console, show_time=False, show_path=False))
