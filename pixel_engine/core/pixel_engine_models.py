#!/usr/bin/env python3
"""
Core data models for the pixel engine
These models hold pixel data and layout settings without any UI or I/O dependencies
"""

# Standard library imports
import math
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Union

# Third-party imports
import numpy as np

from .pixel_engine_constants import (
    ALPHA_OPAQUE,
    CHANNEL_MAX,
    CHANNEL_MIN,
    CHANNELS,
    DEFAULT_SHEET_SPACING,
)
from .pixel_engine_exceptions import (
    InvalidColorError,
    OutOfBoundsError,
    ValidationError,
)


class Color(NamedTuple):
    """8-bit-per-channel RGBA color"""

    r: int
    g: int
    b: int
    a: int = ALPHA_OPAQUE

    @classmethod
    def from_packed(cls, value: int) -> "Color":
        """Build a color from a 0xRRGGBBAA integer"""
        if not 0 <= value <= 0xFFFFFFFF:
            raise InvalidColorError(f"Packed color out of range: {value:#x}")
        return cls(
            (value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
        )

    def to_packed(self) -> int:
        """Pack into a 0xRRGGBBAA integer"""
        return (self.r << 24) | (self.g << 16) | (self.b << 8) | self.a

    @property
    def is_transparent(self) -> bool:
        return self.a == 0


def is_integer(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def validate_color(color: Union[Color, tuple]) -> Color:
    """Check channel count and ranges, returning a Color

    Raises:
        InvalidColorError: if the value is not 3 or 4 channels in [0, 255]
    """
    if not isinstance(color, (tuple, list)) or len(color) not in (3, 4):
        raise InvalidColorError(f"Expected 3 or 4 channels, got {color!r}")

    channels = []
    for value in color:
        if not is_integer(value):
            raise InvalidColorError(f"Channel values must be integers, got {color!r}")
        if not CHANNEL_MIN <= value <= CHANNEL_MAX:
            raise InvalidColorError(
                f"Channel value {value} outside {CHANNEL_MIN}-{CHANNEL_MAX}"
            )
        channels.append(int(value))

    return Color(*channels)


class PixelBuffer:
    """
    Fixed-size RGBA pixel grid
    Pixels are stored row-major in a (height, width, 4) uint8 array, origin top-left
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValidationError(
                f"Buffer dimensions must be at least 1x1, got {width}x{height}"
            )
        self._width = int(width)
        self._height = int(height)
        self._data = np.zeros((self._height, self._width, CHANNELS), dtype=np.uint8)

    @classmethod
    def blank(cls, width: int, height: int) -> "PixelBuffer":
        """Create a fully transparent buffer"""
        return cls(width, height)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "PixelBuffer":
        """Create a buffer holding a copy of an (H, W, 4) uint8 array"""
        if array.ndim != 3 or array.shape[2] != CHANNELS:
            raise ValidationError(
                f"Expected an array of shape (height, width, 4), got {array.shape}"
            )
        if array.dtype != np.uint8:
            raise ValidationError(f"Expected uint8 pixel data, got {array.dtype}")

        height, width = array.shape[:2]
        buffer = cls(width, height)
        buffer._data[...] = array
        return buffer

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        """(width, height), the same order PIL uses"""
        return (self._width, self._height)

    def contains(self, x: int, y: int) -> bool:
        """Check whether a coordinate addresses a pixel in this buffer"""
        if not (is_integer(x) and is_integer(y)):
            return False
        return 0 <= x < self._width and 0 <= y < self._height

    def require_in_bounds(self, x: int, y: int) -> None:
        """Raise OutOfBoundsError unless (x, y) is inside the buffer

        Raises:
            ValidationError: if either coordinate is not an integer
        """
        if not (is_integer(x) and is_integer(y)):
            raise ValidationError(f"Pixel coordinates must be integers, got ({x!r}, {y!r})")
        if not self.contains(x, y):
            raise OutOfBoundsError(x, y, self._width, self._height)

    def get(self, x: int, y: int) -> Color:
        """Get the color at coordinates"""
        self.require_in_bounds(x, y)
        r, g, b, a = self._data[y, x]
        return Color(int(r), int(g), int(b), int(a))

    def set(self, x: int, y: int, color: Union[Color, tuple]) -> None:
        """Set the color at coordinates"""
        self.require_in_bounds(x, y)
        color = validate_color(color)
        self._data[y, x] = color

    def as_array(self) -> np.ndarray:
        """Read-only view of the pixel data"""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def pixels(self) -> np.ndarray:
        """Writable pixel array, for engine internals that work on whole planes"""
        return self._data

    def copy(self) -> "PixelBuffer":
        """Independent clone, safe to hand to background work"""
        return PixelBuffer.from_array(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.size == other.size and np.array_equal(self._data, other._data)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self._width}, height={self._height})"


class HorizontalAlign(str, Enum):
    """Horizontal placement of a frame inside its sheet cell"""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalAlign(str, Enum):
    """Vertical placement of a frame inside its sheet cell"""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


@dataclass
class SheetLayout:
    """
    Grid settings for sprite sheet assembly
    Rows are derived from the number of frames
    """

    columns: int = 1
    spacing: int = DEFAULT_SHEET_SPACING
    h_align: HorizontalAlign = HorizontalAlign.LEFT
    v_align: VerticalAlign = VerticalAlign.TOP

    def __post_init__(self):
        """Validate grid settings and normalize alignment names"""
        if not (is_integer(self.columns) and is_integer(self.spacing)):
            raise ValidationError(
                f"Columns and spacing must be integers, got {self.columns!r}, {self.spacing!r}"
            )
        if self.columns < 1:
            raise ValidationError(f"Sheet needs at least 1 column, got {self.columns}")
        if self.spacing < 0:
            raise ValidationError(f"Spacing cannot be negative, got {self.spacing}")

        try:
            self.h_align = HorizontalAlign(self.h_align)
            self.v_align = VerticalAlign(self.v_align)
        except ValueError as e:
            raise ValidationError(str(e)) from e

    def rows_for(self, count: int) -> int:
        """Number of grid rows needed for count frames"""
        return math.ceil(count / self.columns)
