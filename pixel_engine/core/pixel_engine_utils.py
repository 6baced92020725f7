#!/usr/bin/env python3
"""
Color conversion utilities for the pixel engine
Parsing happens here, before any engine operation is invoked
"""

# Standard library imports
import re
from typing import Union

# Third-party imports
import numpy as np

from .pixel_engine_constants import (
    ALPHA_OPAQUE,
    HEX_RGB_LENGTH,
    HEX_RGBA_LENGTH,
    HEX_SHORT_LENGTH,
)
from .pixel_engine_exceptions import InvalidColorError
from .pixel_engine_models import Color, validate_color

_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]+$")

ColorLike = Union[Color, tuple, list, int, str]


# ================================================================================
# Hex Strings
# ================================================================================


def parse_hex_color(text: str) -> Color:
    """Parse '#RGB', '#RRGGBB' or '#RRGGBBAA' into a Color

    Args:
        text: Hex color string, '#' optional, case-insensitive

    Returns:
        Parsed color, alpha defaulting to fully opaque

    Raises:
        InvalidColorError: if the string is not a recognised hex color
    """
    if not isinstance(text, str):
        raise InvalidColorError(f"Expected a hex string, got {text!r}")

    digits = text.strip()
    if digits.startswith("#"):
        digits = digits[1:]

    if not _HEX_DIGITS.match(digits):
        raise InvalidColorError(f"Malformed hex color: {text!r}")

    if len(digits) == HEX_SHORT_LENGTH:
        digits = "".join(c * 2 for c in digits)

    if len(digits) == HEX_RGB_LENGTH:
        r, g, b = (int(digits[i:i + 2], 16) for i in range(0, 6, 2))
        return Color(r, g, b, ALPHA_OPAQUE)

    if len(digits) == HEX_RGBA_LENGTH:
        r, g, b, a = (int(digits[i:i + 2], 16) for i in range(0, 8, 2))
        return Color(r, g, b, a)

    raise InvalidColorError(f"Malformed hex color: {text!r}")


def format_hex_color(color: Color) -> str:
    """Render '#rrggbb' for opaque colors and '#rrggbbaa' otherwise"""
    if color.a == ALPHA_OPAQUE:
        return f"#{color.r:02x}{color.g:02x}{color.b:02x}"
    return f"#{color.r:02x}{color.g:02x}{color.b:02x}{color.a:02x}"


# ================================================================================
# Generic Coercion
# ================================================================================


def coerce_color(value: ColorLike) -> Color:
    """Turn any supported color representation into a validated Color

    Accepts a Color, an RGB/RGBA tuple or list, a packed 0xRRGGBBAA int,
    or a hex string.
    """
    if isinstance(value, str):
        return parse_hex_color(value)
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        return Color.from_packed(int(value))
    return validate_color(value)
