"""Colour picker maths: RGB/HSB/HSL/hex conversion and harmony sets.

All functions are pure; the state classes in ``picker`` belong to the
caller and only change when one of their setters is called.
"""

from .colorspace import (
    InvalidHexError,
    canon_hex,
    hex_to_rgb,
    hsb_to_rgb,
    hsb_to_rgb_array,
    hsl_to_rgb,
    is_hex,
    rgb_to_hex,
    rgb_to_hsb,
    rgb_to_hsl,
)
from .harmony import HARMONY_SIZES, HarmonyMode, generate, harmony_hex, harmony_rgb, parse_mode
from .picker import HarmonyBoard, PickerState
from .wheel import WheelGeometry

__all__ = [
    "HARMONY_SIZES",
    "HarmonyBoard",
    "HarmonyMode",
    "InvalidHexError",
    "PickerState",
    "WheelGeometry",
    "canon_hex",
    "generate",
    "harmony_hex",
    "harmony_rgb",
    "hex_to_rgb",
    "hsb_to_rgb",
    "hsb_to_rgb_array",
    "hsl_to_rgb",
    "is_hex",
    "parse_mode",
    "rgb_to_hex",
    "rgb_to_hsb",
    "rgb_to_hsl",
]
