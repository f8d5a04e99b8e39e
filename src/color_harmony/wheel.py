# wheel.py – hue/saturation disc used by the picker
#   - canvas coordinates: origin top-left, y grows downward
#   - hue is the clockwise angle from the +x axis, saturation the radial distance
#   - brightness is not encoded in the disc; it comes from the slider

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .colorspace import HSB, hsb_to_rgb_array

log = logging.getLogger(__name__)

Point = Tuple[float, float]


@dataclass(frozen=True)
class WheelGeometry:
    size: int = 200  # square canvas, pixels

    @property
    def center(self) -> Point:
        return self.size / 2.0, self.size / 2.0

    @property
    def radius(self) -> float:
        return self.size / 2.0

    def point_to_hsb(self, x: float, y: float, brightness: float) -> HSB:
        """Pointer position on the canvas → (hue°, saturation %, brightness)."""
        cx, cy = self.center
        angle = math.degrees(math.atan2(y - cy, x - cx))
        distance = math.hypot(x - cx, y - cy)
        saturation = min(100.0, distance / self.radius * 100.0)
        return (angle + 360.0) % 360.0, saturation, brightness

    def hsb_to_point(self, hsb: HSB) -> Point:
        """Cursor position for a colour; brightness is ignored."""
        h, s, _ = hsb
        cx, cy = self.center
        a = math.radians(h)
        return (
            cx + math.cos(a) * s / 100.0 * self.radius,
            cy + math.sin(a) * s / 100.0 * self.radius,
        )

    def render(self, brightness: float = 100.0) -> np.ndarray:
        """
        RGBA raster of the disc, shape (size, size, 4), uint8.

        Each pixel is sampled at its centre and quantised to whole degrees
        of hue and whole percents of saturation (0..99). Pixels outside the
        radius are fully transparent.
        """
        log.debug("rendering %dpx wheel at brightness %s", self.size, brightness)
        cx, cy = self.center
        coords = np.arange(self.size, dtype=np.float64) + 0.5
        xs, ys = np.meshgrid(coords, coords)
        dx = xs - cx
        dy = ys - cy

        hue = np.floor(np.mod(np.degrees(np.arctan2(dy, dx)), 360.0))
        dist = np.hypot(dx, dy)
        sat = np.minimum(np.floor(dist / self.radius * 100.0), 99.0)
        val = np.full_like(hue, float(brightness))

        out = np.zeros((self.size, self.size, 4), dtype=np.uint8)
        out[..., :3] = hsb_to_rgb_array(hue, sat, val)
        out[..., 3] = np.where(dist <= self.radius, 255, 0).astype(np.uint8)
        out[dist > self.radius, :3] = 0
        return out


__all__ = ["Point", "WheelGeometry"]
