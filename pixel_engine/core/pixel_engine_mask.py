#!/usr/bin/env python3
"""
Tolerance-based color masking ("magic wand" background removal)

Unlike flood fill this is global: every visible pixel in the buffer whose
RGB is within tolerance of the seed color becomes transparent, whether or
not it touches the seed.
"""

# Third-party imports
import numpy as np

from ..logging_config import get_logger
from .pixel_engine_constants import (
    ALPHA_TRANSPARENT,
    DEFAULT_TOLERANCE,
    TOLERANCE_MAX,
    TOLERANCE_MIN,
)
from .pixel_engine_exceptions import ValidationError
from .pixel_engine_models import PixelBuffer, is_integer

logger = get_logger("core.mask")


def remove_color(
    buffer: PixelBuffer, x: int, y: int, tolerance: int = DEFAULT_TOLERANCE
) -> int:
    """
    Make every pixel matching the seed color transparent
    Returns the number of pixels masked

    RGB is left untouched; only alpha is cleared. Pixels that are already
    fully transparent never match.

    Raises:
        OutOfBoundsError: if (x, y) is outside the buffer
        ValidationError: if tolerance is not an integer in 0-255
    """
    buffer.require_in_bounds(x, y)
    if not is_integer(tolerance) or not TOLERANCE_MIN <= tolerance <= TOLERANCE_MAX:
        raise ValidationError(
            f"Tolerance must be {TOLERANCE_MIN}-{TOLERANCE_MAX}, got {tolerance}"
        )

    seed = buffer.get(x, y)
    if seed.is_transparent:
        logger.debug(f"Mask at ({x}, {y}) skipped, seed pixel is transparent")
        return 0

    data = buffer.pixels()
    # int16 so differences do not wrap around
    rgb = data[:, :, :3].astype(np.int16)
    reference = np.array(seed[:3], dtype=np.int16)

    within = np.all(np.abs(rgb - reference) <= tolerance, axis=2)
    visible = data[:, :, 3] != ALPHA_TRANSPARENT
    mask = within & visible

    data[mask, 3] = ALPHA_TRANSPARENT

    masked = int(np.count_nonzero(mask))
    logger.debug(
        f"Masked {masked} pixels near {tuple(seed[:3])} (tolerance {tolerance})"
    )
    return masked
