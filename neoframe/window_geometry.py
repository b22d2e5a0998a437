"""Window geometry parsing, grid resizing and window settings."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

_DIMENSION_PATTERN = re.compile(r"\+?[0-9]+")
_U64_LIMIT = 2**64
_ZERO_DIMENSION_ERROR = "Invalid geometry: Window dimensions should be greater than 0."


@dataclass
class WindowSettings:
    """Settings that control the top level window."""

    refresh_rate: int = 60
    no_idle: bool = False
    transparency: float = 1.0
    fullscreen: bool = False
    iso_layout: bool = False
    scroll_dead_zone: float = 0.0


def default_window_settings(neovim_args: Iterable[str]) -> WindowSettings:
    """Default settings; idling is disabled when ``--noIdle`` was passed."""
    return WindowSettings(no_idle="--noIdle" in list(neovim_args))


def parse_geometry(geometry: str | None, default: tuple[int, int]) -> tuple[int, int]:
    """Parse ``<width>x<height>``; return ``default`` when no geometry is given.

    Raises ValueError for a malformed geometry or a zero dimension.
    """
    if geometry is None:
        return default

    invalid = f"Invalid geometry: {geometry}\nValid format: <width>x<height>"
    dimensions = []
    for part in geometry.split("x"):
        if not _DIMENSION_PATTERN.fullmatch(part) or int(part) >= _U64_LIMIT:
            raise ValueError(invalid)
        dimension = int(part)
        if dimension == 0:
            raise ValueError(_ZERO_DIMENSION_ERROR)
        dimensions.append(dimension)

    if len(dimensions) != 2:
        raise ValueError(invalid)
    width, height = dimensions
    return width, height


def window_geometry_or_default(
    geometry: str | None, default: tuple[int, int]
) -> tuple[int, int]:
    try:
        return parse_geometry(geometry, default)
    except ValueError:
        return default


def resize_grid(
    new_size: tuple[int, int], font_width: int, font_height: int
) -> tuple[int, int] | None:
    """Grid dimensions for a window of ``new_size`` pixels, or None if it is empty."""
    new_width, new_height = new_size
    if new_width <= 0 or new_height <= 0:
        return None
    # One extra pixel keeps startup sizing from shrinking the grid.
    width = ((new_width + 1) // font_width) & 0xFFFFFFFF
    height = ((new_height + 1) // font_height) & 0xFFFFFFFF
    return width, height