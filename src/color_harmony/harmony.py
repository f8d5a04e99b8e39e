# harmony.py

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Sequence, Tuple, Union

from .colorspace import (
    RGB,
    Hex,
    hex_to_rgb,
    hsl_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
)

log = logging.getLogger(__name__)

ColorLike = Union[RGB, Hex]


class HarmonyMode(str, Enum):
    ANALOGOUS = "analogous"
    MONOCHROMATIC = "monochromatic"
    COMPLEMENTARY = "complementary"
    TRIAD = "triad"
    TETRAD = "tetrad"


# One entry per output slot: None is the base itself, otherwise
# (hue shift in degrees, lightness shift in percent).
Slot = Optional[Tuple[float, float]]

LIGHTNESS_STEP = 30.0

HUE_OFFSETS: dict[HarmonyMode, tuple[Slot, ...]] = {
    HarmonyMode.ANALOGOUS: ((30.0, 0.0), None, (330.0, 0.0)),
    HarmonyMode.MONOCHROMATIC: ((0.0, -LIGHTNESS_STEP), None, (0.0, LIGHTNESS_STEP)),
    HarmonyMode.COMPLEMENTARY: (None, (180.0, 0.0)),
    HarmonyMode.TRIAD: ((120.0, 0.0), None, (240.0, 0.0)),
    HarmonyMode.TETRAD: (None, (90.0, 0.0), (180.0, 0.0), (270.0, 0.0)),
}

HARMONY_SIZES: dict[HarmonyMode, int] = {m: len(s) for m, s in HUE_OFFSETS.items()}


def parse_mode(value) -> HarmonyMode | None:
    """Exact match only: "Triad" or " triad" is not a mode."""
    if isinstance(value, HarmonyMode):
        return value
    if not isinstance(value, str):
        return None
    try:
        return HarmonyMode(value)
    except ValueError:
        return None


def _clamp(x: float) -> float:
    return 0.0 if x < 0.0 else 100.0 if x > 100.0 else x


def harmony_rgb(base: Sequence[int], mode) -> list[RGB]:
    """
    Harmonic set for an RGB base, as RGB triples.

    The base occupies its slot untouched; only the derived colors go
    through HSL and pick up rounding.
    """
    base_rgb: RGB = (int(base[0]), int(base[1]), int(base[2]))
    m = parse_mode(mode)
    if m is None:
        log.debug("unknown harmony mode %r, returning base only", mode)
        return [base_rgb]

    h, s, l = rgb_to_hsl(base_rgb)
    out: list[RGB] = []
    for slot in HUE_OFFSETS[m]:
        if slot is None:
            out.append(base_rgb)
            continue
        dh, dl = slot
        out.append(hsl_to_rgb(((h + dh) % 360.0, _clamp(s), _clamp(l + dl))))
    return out


def harmony_hex(base: Hex, mode) -> list[Hex]:
    """Same as ``harmony_rgb`` for '#rrggbb' strings; bad hex raises."""
    colors = harmony_rgb(hex_to_rgb(base), mode)
    # the base slot holds the decoded integers, so it re-encodes to canon_hex(base)
    return [rgb_to_hex(c) for c in colors]


def generate(base: ColorLike, mode) -> list[ColorLike]:
    """Harmonic set in whatever representation ``base`` came in."""
    if isinstance(base, str):
        return harmony_hex(base, mode)
    return harmony_rgb(base, mode)


__all__ = [
    "HARMONY_SIZES",
    "HUE_OFFSETS",
    "HarmonyMode",
    "LIGHTNESS_STEP",
    "generate",
    "harmony_hex",
    "harmony_rgb",
    "parse_mode",
]

if __name__ == "__main__":
    for mode in HarmonyMode:
        print(mode.value, generate("#ff0000", mode))
