"""Position and scroll animation of editor windows on the grid."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from neoframe.animation import F32_EPSILON, Point, Rect, ease, ease_out_expo, ease_point

# A t outside 0..1 marks an animation as stopped.
_STOPPED = 2.0
_MAX_SNAPSHOTS = 5


@dataclass
class RendererSettings:
    """Window animation settings, read from ``g:neovide_window_*``."""

    position_animation_length: float = 0.15
    scroll_animation_length: float = 0.3
    floating_opacity: float = 0.7
    floating_blur: bool = True


@dataclass(frozen=True)
class WindowDrawDetails:
    """Where a window was drawn, in logical pixels."""

    id: int
    region: Rect
    floating_order: int | None = None


class WindowAnimation:
    """The animated placement and scroll state of one editor window.

    Positions are in grid cells. ``snapshots`` holds the top lines of earlier
    views that are still visible while a scroll animation runs.
    """

    def __init__(
        self, id: int, grid_position: Point, grid_width: int, grid_height: int
    ) -> None:
        self.id = id
        self.hidden = False
        self.floating_order: int | None = None

        self.grid_width = grid_width
        self.grid_height = grid_height

        self.grid_start_position = grid_position
        self.grid_current_position = grid_position
        self.grid_destination = grid_position
        self.position_t = _STOPPED

        self.top_line = 0
        self.snapshots: deque[int] = deque(maxlen=_MAX_SNAPSHOTS)
        self.start_scroll = 0.0
        self.current_scroll = 0.0
        self.scroll_destination = 0.0
        self.scroll_t = _STOPPED

    def pixel_region(self, font_width: int, font_height: int) -> Rect:
        """The window's current rectangle in pixels."""
        origin = Point(
            self.grid_current_position.x * font_width,
            self.grid_current_position.y * font_height,
        )
        return Rect.from_point_and_size(
            origin, self.grid_width * font_width, self.grid_height * font_height
        )

    def update(self, settings: RendererSettings, dt: float) -> bool:
        """Advance the animations by ``dt`` seconds; True while any is running."""
        animating = False

        if 1.0 - self.position_t < F32_EPSILON:
            self.position_t = _STOPPED
        else:
            animating = True
            self.position_t = min(
                self.position_t + dt / settings.position_animation_length, 1.0
            )
        self.grid_current_position = ease_point(
            ease_out_expo, self.grid_start_position, self.grid_destination, self.position_t
        )

        if 1.0 - self.scroll_t < F32_EPSILON:
            self.scroll_t = _STOPPED
            self.snapshots.clear()
        else:
            animating = True
            self.scroll_t = min(self.scroll_t + dt / settings.scroll_animation_length, 1.0)
        self.current_scroll = ease(
            ease_out_expo, self.start_scroll, self.scroll_destination, self.scroll_t
        )

        return animating

    def set_position(
        self,
        grid_left: float,
        grid_top: float,
        width: int,
        height: int,
        floating_order: int | None,
    ) -> bool:
        """Move and resize the window; True when its size changed."""
        new_destination = Point(float(grid_left), float(grid_top))

        if self.grid_destination != new_destination:
            start = self.grid_start_position
            if abs(start.x) > F32_EPSILON or abs(start.y) > F32_EPSILON:
                self.position_t = 0.0
                self.grid_start_position = self.grid_current_position
            else:
                # Windows appearing from the origin jump straight into place.
                self.position_t = _STOPPED
                self.grid_start_position = new_destination
            self.grid_destination = new_destination

        resized = width != self.grid_width or height != self.grid_height
        self.grid_width = width
        self.grid_height = height

        self.floating_order = floating_order

        if self.hidden:
            self.hidden = False
            self.position_t = _STOPPED
            self.grid_start_position = new_destination
            self.grid_destination = new_destination

        return resized

    def show(self) -> None:
        if self.hidden:
            self.hidden = False
            self.position_t = _STOPPED
            self.grid_start_position = self.grid_destination

    def hide(self) -> None:
        self.hidden = True

    def set_viewport(self, top_line: int) -> None:
        """Scroll so that ``top_line`` is the first visible buffer line."""
        if self.top_line == top_line:
            return
        self.snapshots.append(self.top_line)
        self.top_line = top_line
        self.start_scroll = self.current_scroll
        self.scroll_destination = float(top_line)
        self.scroll_t = 0.0

    def clear(self) -> None:
        """Drop the window's contents, including scroll snapshots."""
        self.snapshots.clear()

    def details(self, font_width: int, font_height: int) -> WindowDrawDetails:
        return WindowDrawDetails(
            self.id, self.pixel_region(font_width, font_height), self.floating_order
        )