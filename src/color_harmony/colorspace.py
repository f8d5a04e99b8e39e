# colorspace.py – RGB ↔ HSB / HSL / hex conversions for the picker
#   - hue in degrees [0, 360), saturation / brightness / lightness in percent
#   - integer outputs use half-up rounding (browser Math.round), not round()
#   - hex output is lowercase "#rrggbb"

from __future__ import annotations

import logging
import math
import re
from typing import Tuple

import numpy as np

log = logging.getLogger(__name__)

RGB = Tuple[int, int, int]
HSB = Tuple[float, float, float]
HSL = Tuple[float, float, float]
Hex = str

_HEX_RE = re.compile(r"#?[0-9A-Fa-f]{6}")


class InvalidHexError(ValueError):
    """Raised for anything that is not six hex digits with an optional '#'."""


def _round(x: float) -> int:
    # Math.round() semantics for the non-negative values we deal in
    return int(math.floor(x + 0.5))


# --- hex ---------------------------------------------------------------------


def is_hex(text: str) -> bool:
    return isinstance(text, str) and _HEX_RE.fullmatch(text) is not None


def canon_hex(text: str) -> Hex:
    """Normalize to '#rrggbb'; accept 6-digit hex only."""
    if not is_hex(text):
        log.debug("rejected hex input %r", text)
        raise InvalidHexError(f"invalid hex: {text!r}")
    return "#" + text.lstrip("#").lower()


def hex_to_rgb(text: str) -> RGB:
    raw = canon_hex(text)[1:]
    r, g, b = (int(raw[i : i + 2], 16) for i in (0, 2, 4))
    return r, g, b


def rgb_to_hex(rgb) -> Hex:
    r, g, b = (_round(c) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


# --- HSB (a.k.a. HSV) --------------------------------------------------------


def rgb_to_hsb(rgb, *, rounded: bool = True) -> HSB:
    """
    RGB in [0, 255] → (hue°, saturation %, brightness %).

    Hue is 0 for greys (max == min) and saturation is 0 for black.
    With ``rounded=False`` the raw floats are returned, which is what a
    lossless round trip through ``hsb_to_rgb`` needs.
    """
    r, g, b = (c / 255.0 for c in rgb)
    mx = max(r, g, b)
    mn = min(r, g, b)
    diff = mx - mn

    if mx == mn:
        h = 0.0
    elif mx == r:
        h = (60.0 * ((g - b) / diff) + 360.0) % 360.0
    elif mx == g:
        h = (60.0 * ((b - r) / diff) + 120.0) % 360.0
    else:
        h = (60.0 * ((r - g) / diff) + 240.0) % 360.0
    s = 0.0 if mx == 0 else diff / mx
    v = mx

    if not rounded:
        return h, s * 100.0, v * 100.0
    # a hue just under 360 rounds up to 360; fold it back onto 0
    return _round(h) % 360, _round(s * 100.0), _round(v * 100.0)


def hsb_to_rgb(hsb) -> RGB:
    h, s, v = hsb
    h = h % 360.0
    s = s / 100.0
    v = v / 100.0
    i = math.floor(h / 60.0) % 6
    f = h / 60.0 - math.floor(h / 60.0)
    p = v * (1.0 - s)
    q = v * (1.0 - f * s)
    t = v * (1.0 - (1.0 - f) * s)

    r, g, b = (
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    )[i]
    return _round(r * 255.0), _round(g * 255.0), _round(b * 255.0)


def hsb_to_rgb_array(h, s, v) -> np.ndarray:
    """Vectorised ``hsb_to_rgb``: equally shaped arrays → uint8 (..., 3)."""
    h = np.mod(np.asarray(h, dtype=np.float64), 360.0)
    s = np.asarray(s, dtype=np.float64) / 100.0
    v = np.asarray(v, dtype=np.float64) / 100.0
    sector = np.floor(h / 60.0)
    i = sector.astype(np.int64) % 6
    f = h / 60.0 - sector
    p = v * (1.0 - s)
    q = v * (1.0 - f * s)
    t = v * (1.0 - (1.0 - f) * s)

    # same six-way table as the scalar path, one choice per channel
    r = np.choose(i, [v, q, p, p, t, v])
    g = np.choose(i, [t, v, v, q, p, p])
    b = np.choose(i, [p, p, t, v, v, q])
    rgb = np.stack([r, g, b], axis=-1) * 255.0
    return np.clip(np.floor(rgb + 0.5), 0, 255).astype(np.uint8)


# --- HSL ---------------------------------------------------------------------


def rgb_to_hsl(rgb) -> HSL:
    r, g, b = (c / 255.0 for c in rgb)
    mx = max(r, g, b)
    mn = min(r, g, b)
    l = (mx + mn) / 2.0

    if mx == mn:
        return 0.0, 0.0, l * 100.0

    d = mx - mn
    s = d / (2.0 - mx - mn) if l > 0.5 else d / (mx + mn)
    if mx == r:
        h = (g - b) / d + (6.0 if g < b else 0.0)
    elif mx == g:
        h = (b - r) / d + 2.0
    else:
        h = (r - g) / d + 4.0
    return (h / 6.0) * 360.0, s * 100.0, l * 100.0


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1.0
    if t > 1:
        t -= 1.0
    if t < 1 / 6:
        return p + (q - p) * 6.0 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6.0
    return p


def hsl_to_rgb(hsl) -> RGB:
    h, s, l = hsl
    h = (h % 360.0) / 360.0
    s = s / 100.0
    l = l / 100.0

    if s == 0:
        r = g = b = l
    else:
        q = l * (1.0 + s) if l < 0.5 else l + s - l * s
        p = 2.0 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)
    return _round(r * 255.0), _round(g * 255.0), _round(b * 255.0)


__all__ = [
    "HSB",
    "HSL",
    "Hex",
    "InvalidHexError",
    "RGB",
    "canon_hex",
    "hex_to_rgb",
    "hsb_to_rgb",
    "hsb_to_rgb_array",
    "hsl_to_rgb",
    "is_hex",
    "rgb_to_hex",
    "rgb_to_hsb",
    "rgb_to_hsl",
]
