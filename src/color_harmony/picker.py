# picker.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .colorspace import (
    HSB,
    RGB,
    Hex,
    hex_to_rgb,
    hsb_to_rgb,
    is_hex,
    rgb_to_hex,
    rgb_to_hsb,
)
from .harmony import HarmonyMode, harmony_rgb
from .wheel import Point, WheelGeometry

log = logging.getLogger(__name__)


@dataclass
class PickerState:
    """
    What the picker widget shows: the colour, its HSB coordinates and the
    text in the hex box.

    ``hsb`` keeps the unrounded values a pointer produced so that moving the
    brightness slider does not snap the hue. ``hex_text`` is whatever the
    user typed last, which may differ in case or '#' from ``rgb_to_hex``.
    """

    rgb: RGB = (255, 255, 255)
    hsb: HSB = (0, 0, 100)
    hex_text: Hex = "#ffffff"

    @classmethod
    def from_rgb(cls, rgb) -> "PickerState":
        rgb = (int(rgb[0]), int(rgb[1]), int(rgb[2]))
        return cls(rgb=rgb, hsb=rgb_to_hsb(rgb), hex_text=rgb_to_hex(rgb))

    def _set_hsb(self, hsb: HSB) -> RGB:
        self.hsb = hsb
        self.rgb = hsb_to_rgb(hsb)
        self.hex_text = rgb_to_hex(self.rgb)
        return self.rgb

    def set_hex(self, text: str) -> bool:
        # invalid text leaves rgb / hsb / hex_text as they were
        if not is_hex(text):
            log.debug("ignoring hex input %r", text)
            return False
        self.rgb = hex_to_rgb(text)
        self.hsb = rgb_to_hsb(self.rgb)
        self.hex_text = text
        return True

    def set_brightness(self, brightness: float) -> RGB:
        h, s, _ = self.hsb
        return self._set_hsb((h, s, brightness))

    def pick(self, x: float, y: float, geometry: WheelGeometry) -> RGB:
        """Pointer at (x, y) on the wheel canvas; brightness is kept."""
        return self._set_hsb(geometry.point_to_hsb(x, y, self.hsb[2]))

    def cursor(self, geometry: WheelGeometry) -> Point:
        return geometry.hsb_to_point(self.hsb)


@dataclass
class HarmonyBoard:
    """Base colour + mode with the derived set, recomputed on every change."""

    base: RGB = (255, 0, 0)
    mode: str | None = HarmonyMode.ANALOGOUS.value
    colors: list[RGB] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.recompute()

    def recompute(self) -> list[RGB]:
        self.colors = harmony_rgb(self.base, self.mode)
        return self.colors

    def set_base(self, rgb) -> list[RGB]:
        self.base = (int(rgb[0]), int(rgb[1]), int(rgb[2]))
        return self.recompute()

    def set_mode(self, mode) -> list[RGB]:
        # unknown modes are stored as-is; the board then shows the base alone
        self.mode = mode.value if isinstance(mode, HarmonyMode) else mode
        return self.recompute()

    def hex_colors(self) -> list[Hex]:
        return [rgb_to_hex(c) for c in self.colors]


__all__ = ["HarmonyBoard", "PickerState"]
