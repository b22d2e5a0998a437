"""Cursor visual effect modes and their setting values."""

from __future__ import annotations

import enum
import logging
from typing import Any

logger = logging.getLogger(__name__)


class VfxMode(enum.Enum):
    """A cursor effect; the value is the name used in the editor setting."""

    SONIC_BOOM = "sonicboom"
    RIPPLE = "ripple"
    WIREFRAME = "wireframe"
    RAILGUN = "railgun"
    TORPEDO = "torpedo"
    PIXIE_DUST = "pixiedust"
    DISABLED = ""

    def is_highlight(self) -> bool:
        """True for the effects drawn as a single expanding highlight."""
        return self in _HIGHLIGHT_MODES

    def is_trail(self) -> bool:
        """True for the effects drawn as a trail of particles."""
        return self in _TRAIL_MODES


_HIGHLIGHT_MODES = frozenset({VfxMode.SONIC_BOOM, VfxMode.RIPPLE, VfxMode.WIREFRAME})
_TRAIL_MODES = frozenset({VfxMode.RAILGUN, VfxMode.TORPEDO, VfxMode.PIXIE_DUST})


def parse_vfx_mode(current: VfxMode, value: Any) -> VfxMode:
    """Mode named by ``value``; an unknown name or a non-string keeps ``current``."""
    if not isinstance(value, str):
        logger.error("Expected a VfxMode string, but received %r", value)
        return current
    try:
        return VfxMode(value)
    except ValueError:
        logger.error("Expected a VfxMode name, but received %r", value)
        return current