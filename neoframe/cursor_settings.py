"""Settings that control how the cursor is animated and decorated."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from neoframe.values import coerce_bool, coerce_float
from neoframe.vfx_mode import VfxMode, parse_vfx_mode


@dataclass
class CursorSettings:
    """Cursor animation and effect settings, read from ``g:neovide_cursor_*``."""

    antialiasing: bool = True
    animation_length: float = 0.06
    distance_length_adjust: bool = True
    animate_in_insert_mode: bool = True
    animate_command_line: bool = True
    trail_size: float = 0.7
    vfx_mode: VfxMode = VfxMode.DISABLED
    vfx_opacity: float = 200.0
    vfx_particle_lifetime: float = 1.2
    vfx_particle_density: float = 7.0
    vfx_particle_speed: float = 10.0
    vfx_particle_phase: float = 1.5
    vfx_particle_curl: float = 1.0

    def apply(self, name: str, value: Any) -> None:
        """Set field ``name`` from an editor value.

        A value of the wrong kind is logged and ignored; an unknown name
        raises KeyError.
        """
        try:
            coerce = _COERCERS[name]
        except KeyError:
            raise KeyError(f"Unknown cursor setting: {name!r}") from None
        setattr(self, name, coerce(getattr(self, name), value))


_COERCERS: dict[str, Callable[[Any, Any], Any]] = {
    "antialiasing": coerce_bool,
    "animation_length": coerce_float,
    "distance_length_adjust": coerce_bool,
    "animate_in_insert_mode": coerce_bool,
    "animate_command_line": coerce_bool,
    "trail_size": coerce_float,
    "vfx_mode": parse_vfx_mode,
    "vfx_opacity": coerce_float,
    "vfx_particle_lifetime": coerce_float,
    "vfx_particle_density": coerce_float,
    "vfx_particle_speed": coerce_float,
    "vfx_particle_phase": coerce_float,
    "vfx_particle_curl": coerce_float,
}