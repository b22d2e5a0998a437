"""Bookkeeping for every editor window: creation, closing, draw order and animation."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from neoframe.animation import Point, Rect
from neoframe.window_animation import RendererSettings, WindowAnimation, WindowDrawDetails

logger = logging.getLogger(__name__)


def text_region(
    grid_pos: tuple[int, int], cell_width: int, font_width: int, font_height: int
) -> Rect:
    """Pixel rectangle covered by ``cell_width`` cells starting at ``grid_pos``."""
    grid_x, grid_y = grid_pos
    x = grid_x * font_width
    y = grid_y * font_height
    width = cell_width * font_width
    return Rect(float(x), float(y), float(x + width), float(y + font_height))


def draw_order(windows: Iterable[WindowAnimation]) -> list[WindowAnimation]:
    """Visible windows bottom first: root windows by id, then floating ones by order."""
    visible = [window for window in windows if not window.hidden]
    root = sorted(
        (window for window in visible if window.floating_order is None),
        key=lambda window: window.id,
    )
    floating = sorted(
        (window for window in visible if window.floating_order is not None),
        key=lambda window: window.floating_order,
    )
    return root + floating


class WindowTracker:
    """All known windows keyed by grid id, and where they were last drawn."""

    def __init__(self) -> None:
        self.windows: dict[int, WindowAnimation] = {}
        self.window_regions: list[WindowDrawDetails] = []

    def __contains__(self, grid_id: object) -> bool:
        return grid_id in self.windows

    def __getitem__(self, grid_id: int) -> WindowAnimation:
        return self.windows[grid_id]

    def __len__(self) -> int:
        return len(self.windows)

    def __iter__(self) -> Iterator[WindowAnimation]:
        return iter(self.windows.values())

    def position(
        self,
        grid_id: int,
        grid_left: float,
        grid_top: float,
        width: int,
        height: int,
        floating_order: int | None,
    ) -> WindowAnimation:
        """Place a window, creating it on its first position; return the window.

        A newly created window starts at its position without animating and
        is not floating until positioned again.
        """
        window = self.windows.get(grid_id)
        if window is None:
            window = WindowAnimation(
                grid_id, Point(float(grid_left), float(grid_top)), width, height
            )
            self.windows[grid_id] = window
        else:
            window.set_position(grid_left, grid_top, width, height, floating_order)
        return window

    def close(self, grid_id: int) -> WindowAnimation | None:
        """Forget a window; return it, or None if it was not known."""
        return self.windows.pop(grid_id, None)

    def update(
        self, settings: RendererSettings, dt: float, font_width: int, font_height: int
    ) -> bool:
        """Advance every visible window and record their regions in draw order.

        Returns True while any window is still animating.
        """
        animating = False
        regions = []
        for window in draw_order(self.windows.values()):
            if window.update(settings, dt):
                animating = True
            regions.append(window.details(font_width, font_height))
        self.window_regions = regions
        return animating