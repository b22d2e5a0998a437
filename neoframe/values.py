"""Coercion of loosely typed setting values into typed setting fields.

Each function takes the field's current value and the incoming value and
returns the new field value. An incoming value of the wrong kind is logged
and the current value is kept.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

_U64_LIMIT = 2**64
_I64_MIN = -(2**63)
_I64_LIMIT = 2**63


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_i64(value: Any) -> bool:
    return _is_int(value) and _I64_MIN <= value < _I64_LIMIT


def _is_u64(value: Any) -> bool:
    return _is_int(value) and 0 <= value < _U64_LIMIT


def _truncate(value: int, bits: int, signed: bool) -> int:
    masked = value & ((1 << bits) - 1)
    if signed and masked >= 1 << (bits - 1):
        masked -= 1 << bits
    return masked


def coerce_float(current: float, value: Any) -> float:
    if isinstance(value, float) or _is_i64(value) or _is_u64(value):
        return float(value)
    logger.error("Setting expected an f32, but received %r", value)
    return current


def coerce_u64(current: int, value: Any) -> int:
    if _is_u64(value):
        return value
    logger.error("Setting expected a u64, but received %r", value)
    return current


def coerce_u32(current: int, value: Any) -> int:
    if _is_u64(value):
        return _truncate(value, 32, signed=False)
    logger.error("Setting expected a u32, but received %r", value)
    return current


def coerce_i32(current: int, value: Any) -> int:
    if _is_i64(value):
        return _truncate(value, 32, signed=True)
    logger.error("Setting expected an i32, but received %r", value)
    return current


def coerce_str(current: str, value: Any) -> str:
    if isinstance(value, str):
        return value
    logger.error("Setting expected a string, but received %r", value)
    return current


def coerce_bool(current: bool, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if _is_u64(value):
        return value != 0
    logger.error("Setting expected a bool or 0/1, but received %r", value)
    return current