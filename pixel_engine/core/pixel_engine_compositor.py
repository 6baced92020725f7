#!/usr/bin/env python3
"""
Sprite sheet assembly

Lays out a sequence of pixel buffers on a grid inside a new buffer.
Every cell is as large as the largest frame; smaller frames are
anchored inside their cell according to the layout's alignment.
"""

# Standard library imports
from collections.abc import Sequence
from typing import Optional

from ..logging_config import get_logger
from .pixel_engine_exceptions import EmptyInputError, ValidationError
from .pixel_engine_models import (
    HorizontalAlign,
    PixelBuffer,
    SheetLayout,
    VerticalAlign,
)

logger = get_logger("core.compositor")


def cell_size(images: Sequence[PixelBuffer]) -> tuple[int, int]:
    """Width and height of a grid cell: the largest frame in each direction"""
    if not images:
        raise EmptyInputError("Cannot size cells for zero images")
    return (max(image.width for image in images), max(image.height for image in images))


def canvas_size(
    count: int, cell: tuple[int, int], layout: SheetLayout
) -> tuple[int, int]:
    """Output sheet dimensions for count frames"""
    if count < 1:
        raise EmptyInputError("Cannot size a sheet for zero images")

    cell_w, cell_h = cell
    if count == 1:
        return (cell_w, cell_h)

    rows = layout.rows_for(count)
    columns = layout.columns
    return (
        columns * cell_w + (columns - 1) * layout.spacing,
        rows * cell_h + (rows - 1) * layout.spacing,
    )


def cell_origin(
    index: int, cell: tuple[int, int], layout: SheetLayout
) -> tuple[int, int]:
    """Top-left corner of the cell holding frame index (row-major order)"""
    cell_w, cell_h = cell
    col = index % layout.columns
    row = index // layout.columns
    return (col * (cell_w + layout.spacing), row * (cell_h + layout.spacing))


def alignment_offset(
    image_size: tuple[int, int], cell: tuple[int, int], layout: SheetLayout
) -> tuple[int, int]:
    """Offset of a frame inside its cell, centered offsets rounded down"""
    img_w, img_h = image_size
    cell_w, cell_h = cell

    if layout.h_align is HorizontalAlign.CENTER:
        x_offset = (cell_w - img_w) // 2
    elif layout.h_align is HorizontalAlign.RIGHT:
        x_offset = cell_w - img_w
    else:
        x_offset = 0

    if layout.v_align is VerticalAlign.CENTER:
        y_offset = (cell_h - img_h) // 2
    elif layout.v_align is VerticalAlign.BOTTOM:
        y_offset = cell_h - img_h
    else:
        y_offset = 0

    return (x_offset, y_offset)


def assemble(
    images: Sequence[PixelBuffer], layout: Optional[SheetLayout] = None
) -> PixelBuffer:
    """
    Combine frames into a single sprite sheet buffer

    Args:
        images: Frames in placement order (left-to-right, top-to-bottom)
        layout: Grid settings, a single left/top aligned row of cells if omitted

    Returns:
        New buffer owned by the caller; inputs are not modified

    Raises:
        EmptyInputError: if images is empty
    """
    images = list(images)
    if not images:
        raise EmptyInputError("Sprite sheet needs at least one image")
    for image in images:
        if not isinstance(image, PixelBuffer):
            raise ValidationError(f"Expected PixelBuffer, got {type(image).__name__}")

    if layout is None:
        layout = SheetLayout(columns=len(images))

    cell = cell_size(images)
    width, height = canvas_size(len(images), cell, layout)
    sheet = PixelBuffer.blank(width, height)
    canvas = sheet.pixels()

    for index, image in enumerate(images):
        origin_x, origin_y = cell_origin(index, cell, layout)
        x_offset, y_offset = alignment_offset(image.size, cell, layout)
        x = origin_x + x_offset
        y = origin_y + y_offset

        # Straight copy, alpha included, no blending
        canvas[y:y + image.height, x:x + image.width] = image.as_array()

    logger.debug(
        f"Assembled {len(images)} frames into {width}x{height} sheet "
        f"({layout.columns} columns, {layout.rows_for(len(images))} rows)"
    )
    return sheet


class SpriteSheetBuilder:
    """Ordered collection of frames waiting to be assembled into a sheet"""

    def __init__(self, layout: Optional[SheetLayout] = None) -> None:
        self.layout = layout if layout is not None else SheetLayout()
        self._frames: list[PixelBuffer] = []

    def add(self, frame: PixelBuffer) -> int:
        """Append a frame and return its index"""
        if not isinstance(frame, PixelBuffer):
            raise ValidationError(f"Expected PixelBuffer, got {type(frame).__name__}")
        self._frames.append(frame)
        return len(self._frames) - 1

    def remove(self, index: int) -> PixelBuffer:
        """Remove and return the frame at index"""
        if not 0 <= index < len(self._frames):
            raise IndexError(f"No frame at index {index}")
        return self._frames.pop(index)

    def clear(self) -> None:
        self._frames.clear()

    @property
    def frames(self) -> tuple[PixelBuffer, ...]:
        return tuple(self._frames)

    def __len__(self) -> int:
        return len(self._frames)

    def build(self) -> PixelBuffer:
        """Assemble the current frames with the builder's layout"""
        return assemble(self._frames, self.layout)
