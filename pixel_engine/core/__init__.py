"""Core pixel engine modules"""

# Make key classes available at package level
from .pixel_engine_compositor import SpriteSheetBuilder, assemble
from .pixel_engine_exceptions import (
    EmptyInputError,
    InvalidColorError,
    OutOfBoundsError,
    PixelEngineError,
)
from .pixel_engine_fill import flood_fill
from .pixel_engine_mask import remove_color
from .pixel_engine_models import (
    Color,
    HorizontalAlign,
    PixelBuffer,
    SheetLayout,
    VerticalAlign,
)

__all__ = [
    "Color",
    "EmptyInputError",
    "HorizontalAlign",
    "InvalidColorError",
    "OutOfBoundsError",
    "PixelBuffer",
    "PixelEngineError",
    "SheetLayout",
    "SpriteSheetBuilder",
    "VerticalAlign",
    "assemble",
    "flood_fill",
    "remove_color",
]
