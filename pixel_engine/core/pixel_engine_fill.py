#!/usr/bin/env python3
"""
Flood fill for pixel buffers

Replaces the 4-connected region of pixels that exactly match the seed
pixel (all four channels) with a new color.
"""

# Standard library imports
from typing import Union

# Third-party imports
import numpy as np

from ..logging_config import get_logger
from .pixel_engine_models import Color, PixelBuffer, validate_color

logger = get_logger("core.fill")


def flood_fill(
    buffer: PixelBuffer, x: int, y: int, new_color: Union[Color, tuple]
) -> list[tuple[int, int]]:
    """
    Flood fill from coordinates using an explicit stack
    Returns list of changed pixels

    Raises:
        OutOfBoundsError: if (x, y) is outside the buffer
        InvalidColorError: if new_color is not a valid RGBA color
    """
    buffer.require_in_bounds(x, y)
    new_color = validate_color(new_color)

    target = buffer.get(x, y)
    if target == new_color:
        logger.debug(f"Fill at ({x}, {y}) skipped, seed already {tuple(new_color)}")
        return []

    data = buffer.pixels()
    width, height = buffer.width, buffer.height

    # Cleared as pixels are claimed, so nothing is pushed twice
    matches = np.all(data == np.asarray(target, dtype=np.uint8), axis=2)

    changed_pixels = []
    matches[y, x] = False
    stack = [(x, y)]

    while stack:
        cx, cy = stack.pop()
        data[cy, cx] = new_color
        changed_pixels.append((cx, cy))

        for nx, ny in ((cx + 1, cy), (cx - 1, cy), (cx, cy + 1), (cx, cy - 1)):
            if 0 <= nx < width and 0 <= ny < height and matches[ny, nx]:
                matches[ny, nx] = False
                stack.append((nx, ny))

    logger.debug(f"Filled {len(changed_pixels)} pixels from ({x}, {y})")
    return changed_pixels
