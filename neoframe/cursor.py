"""Cursor shape corners and their animated movement."""

from __future__ import annotations

import dataclasses
import enum
import math
from dataclasses import dataclass
from typing import Any, Sequence

from neoframe.animation import F32_EPSILON, Point, ease_out_expo, ease_point, lerp

DEFAULT_CELL_PERCENTAGE = 1.0 / 8.0

STANDARD_CORNERS = ((-0.5, -0.5), (0.5, -0.5), (0.5, 0.5), (-0.5, 0.5))


class CursorShape(enum.Enum):
    BLOCK = "block"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


def _advance(t: float, corner_dt: float, denominator: float) -> float:
    if denominator == 0.0:
        # A zero-length animation finishes at once.
        return -math.inf if corner_dt < 0.0 else 1.0
    return min(t + corner_dt / denominator, 1.0)


@dataclass
class Corner:
    """One corner of the cursor quad, positioned relative to the cell centre."""

    start_position: Point = Point(0.0, 0.0)
    current_position: Point = Point(0.0, 0.0)
    relative_position: Point = Point(0.0, 0.0)
    previous_destination: Point = Point(-1000.0, -1000.0)
    length_multiplier: float = 1.0
    t: float = 0.0

    def update(
        self,
        settings: Any,
        font_dimensions: Point,
        destination: Point,
        dt: float,
        immediate_movement: bool,
    ) -> bool:
        """Move towards ``destination`` (the cell centre); True while animating."""
        if destination != self.previous_destination:
            self.t = 0.0
            self.start_position = self.current_position
            self.previous_destination = destination
            if settings.distance_length_adjust:
                distance = (destination - self.current_position).length()
                self.length_multiplier = max(math.log10(distance), 0.0) if distance > 0.0 else 0.0
            else:
                self.length_multiplier = 1.0

        if abs(self.t - 1.0) < F32_EPSILON:
            return False

        relative_scaled = Point(
            self.relative_position.x * font_dimensions.x,
            self.relative_position.y * font_dimensions.y,
        )
        corner_destination = destination + relative_scaled

        if immediate_movement:
            self.t = 1.0
            self.current_position = corner_destination
            return True

        # Corners leading the motion move faster than those trailing behind.
        travel_direction = (destination - self.current_position).normalized()
        corner_direction = self.relative_position.normalized()
        direction_alignment = travel_direction.dot(corner_direction)

        trail = min(max(1.0 - settings.trail_size, 0.0), 1.0)
        corner_dt = dt * lerp(1.0, trail, -direction_alignment)
        self.t = _advance(
            self.t, corner_dt, settings.animation_length * self.length_multiplier
        )

        self.current_position = ease_point(
            ease_out_expo, self.start_position, corner_destination, self.t
        )
        return True


def shape_corners(
    corners: Sequence[Corner], shape: CursorShape, cell_percentage: float
) -> list[Corner]:
    """Corners reshaped for ``shape``, restarting their animation from where they are."""
    if len(corners) > len(STANDARD_CORNERS):
        raise ValueError("A cursor has at most four corners")
    reshaped = []
    for corner, (x, y) in zip(corners, STANDARD_CORNERS):
        if shape is CursorShape.VERTICAL:
            relative = Point((x + 0.5) * cell_percentage - 0.5, y)
        elif shape is CursorShape.HORIZONTAL:
            # Bar sits at the bottom of the cell.
            relative = Point(x, -((-y + 0.5) * cell_percentage - 0.5))
        else:
            relative = Point(x, y)
        reshaped.append(
            dataclasses.replace(
                corner,
                relative_position=relative,
                t=0.0,
                start_position=corner.current_position,
            )
        )
    return reshaped


def cursor_destination(
    grid_position: tuple[int, int], window: Any, font_width: int, font_height: int
) -> Point:
    """Pixel position of the cursor's cell.

    ``window`` is the cursor's window or None; it needs ``grid_current_position``
    (a Point), ``current_scroll``, ``top_line`` and ``grid_height``. The cursor
    is kept vertically inside that window while it scrolls.
    """
    grid_x, grid_y = grid_position
    if window is None:
        return Point(float(grid_x * font_width), float(grid_y * font_height))

    origin = window.grid_current_position
    x = grid_x + origin.x
    y = grid_y + origin.y - (window.current_scroll - window.top_line)
    y = min(max(y, origin.y), origin.y + window.grid_height - 1.0)
    return Point(x * font_width, y * font_height)