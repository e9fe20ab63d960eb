"""progressors — single-line terminal progress bars"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("progressors")
except PackageNotFoundError:
    __version__ = "dev"

from progressors.bar import Layout, ProgressBar, compute_layout
from progressors.style import PRESET_NAMES, Style, Symbol, ValueDisplay, preset

__all__ = [
    "Layout",
    "PRESET_NAMES",
    "ProgressBar",
    "Style",
    "Symbol",
    "ValueDisplay",
    "compute_layout",
    "preset",
]
