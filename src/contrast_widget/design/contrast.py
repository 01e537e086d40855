"""Contrast utilities for the contrast widget.

Implements the WCAG 2.1 relative luminance and contrast ratio calculations.

Public API:
- is_valid_hex(value: str) -> bool
- hex_to_rgb(value: str) -> tuple[int, int, int]
- relative_luminance(color: str | Sequence[int]) -> float
- contrast_ratio(fg, bg) -> float

Colors are accepted either as 6 character hex strings (optional leading ``#``,
any case) or as ``(r, g, b)`` triples of 8-bit channel values. All functions
are pure and safe to call from any thread.

Validation note
---------------
``is_valid_hex`` accepts a stripped value when its length is 6 *or* it matches
``[0-9a-f]{6}``. Because the pattern itself requires six characters, the only
constraint actually enforced is the length: ``"zzzzzz"`` validates. Callers
that need channel values go through ``hex_to_rgb`` which rejects such strings
with ``InvalidColorFormat``.
"""

from __future__ import annotations

import math
import re
from typing import Sequence, Tuple, Union

from .errors import InvalidColorFormat, InvalidInputType

ColorInput = Union[str, Sequence[int]]

_HEX_PATTERN = re.compile(r"[0-9a-f]{6}")
_HEX_ERR = "Invalid HEX input: {value!r}"

# sRGB decoding constants as used by WCAG 2.x
_LINEAR_THRESHOLD = 0.03928
_LINEAR_DIVISOR = 12.92
_GAMMA_OFFSET = 0.055
_GAMMA_SCALE = 1.055
_GAMMA = 2.4

# Rec. 709 coefficients
_WEIGHTS = (0.2126, 0.7152, 0.0722)

_FLARE = 0.05


def _sanitise(value: str) -> str:
    if value.startswith("#"):
        value = value[1:]
    return value.lower()


def is_valid_hex(value: str) -> bool:
    """Return True when *value* looks like a 6 character hex color.

    Never raises; non-string input yields False.
    """
    if not isinstance(value, str):
        return False
    stripped = _sanitise(value)
    return len(stripped) == 6 or _HEX_PATTERN.fullmatch(stripped) is not None


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    """Convert ``#rrggbb`` / ``rrggbb`` to an ``(r, g, b)`` tuple.

    Raises InvalidColorFormat when the value fails validation or one of the
    channel pairs is not base-16.
    """
    if not is_valid_hex(value):
        raise InvalidColorFormat(_HEX_ERR.format(value=value), context={"value": value})
    v = _sanitise(value)
    channels = []
    for i in (0, 2, 4):
        pair = v[i : i + 2]
        # int() would also accept forms like "+f" or " f"
        if not all(ch in "0123456789abcdef" for ch in pair):
            raise InvalidColorFormat(
                _HEX_ERR.format(value=value), context={"value": value, "pair": pair}
            )
        channels.append(int(pair, 16))
    r, g, b = channels
    return r, g, b


def _coerce_rgb(color: ColorInput) -> Tuple[int, int, int]:
    if isinstance(color, str):
        return hex_to_rgb(color)
    if isinstance(color, (tuple, list)) and len(color) == 3:
        for ch in color:
            if isinstance(ch, bool) or not isinstance(ch, (int, float)):
                raise InvalidInputType(
                    f"RGB channels must be numeric: {color!r}", context={"value": color}
                )
            if not 0 <= ch <= 255:
                raise InvalidColorFormat(
                    f"RGB channel out of range [0, 255]: {color!r}", context={"value": color}
                )
        r, g, b = color
        return r, g, b
    raise InvalidInputType(
        f"Color must be a hex string or an (r, g, b) triple: {color!r}",
        context={"type": type(color).__name__},
    )


def _linear_channel(c: float) -> float:
    c = c / 255.0
    if c <= _LINEAR_THRESHOLD:
        return c / _LINEAR_DIVISOR
    return ((c + _GAMMA_OFFSET) / _GAMMA_SCALE) ** _GAMMA


def relative_luminance(color: ColorInput) -> float:
    r, g, b = _coerce_rgb(color)
    w_r, w_g, w_b = _WEIGHTS
    return w_r * _linear_channel(r) + w_g * _linear_channel(g) + w_b * _linear_channel(b)


def _round_half_up(value: float, digits: int = 2) -> float:
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def contrast_ratio(fg: ColorInput, bg: ColorInput) -> float:
    """Return the contrast ratio between *fg* and *bg*, rounded to 2 decimals.

    The result lies in [1.0, 21.0] and does not depend on argument order.
    """
    l1 = relative_luminance(fg)
    l2 = relative_luminance(bg)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return _round_half_up((lighter + _FLARE) / (darker + _FLARE))


__all__ = [
    "ColorInput",
    "is_valid_hex",
    "hex_to_rgb",
    "relative_luminance",
    "contrast_ratio",
]
