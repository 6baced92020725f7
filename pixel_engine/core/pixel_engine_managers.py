#!/usr/bin/env python3
"""
Tool dispatch for pixel engine callers
The caller owns an EditorContext (current tool, color, tolerance, zoom) and
passes it in with every action; the engine itself keeps no state
"""

# Standard library imports
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Union

from ..logging_config import get_logger
from .pixel_engine_constants import (
    DEFAULT_TOLERANCE,
    TOLERANCE_MAX,
    TOLERANCE_MIN,
    ZOOM_DEFAULT,
    ZOOM_MAX,
    ZOOM_MIN,
)
from .pixel_engine_exceptions import ValidationError
from .pixel_engine_fill import flood_fill
from .pixel_engine_mask import remove_color
from .pixel_engine_models import Color, PixelBuffer, is_integer
from .pixel_engine_utils import ColorLike, coerce_color

logger = get_logger("core.tools")


class ToolType(Enum):
    """Available editing tools"""

    FILL = auto()
    MAGIC_WAND = auto()
    PICKER = auto()


_TOOL_NAMES = {
    "fill": ToolType.FILL,
    "magic_wand": ToolType.MAGIC_WAND,
    "wand": ToolType.MAGIC_WAND,
    "picker": ToolType.PICKER,
}


def _resolve_tool(tool_type: Union[ToolType, str]) -> ToolType:
    if isinstance(tool_type, ToolType):
        return tool_type
    mapped = _TOOL_NAMES.get(str(tool_type).lower())
    if mapped is None:
        raise ValueError(f"Unknown tool: {tool_type}")
    return mapped


@dataclass
class EditorContext:
    """Caller-held editing state passed into every tool action"""

    tool: ToolType = ToolType.FILL
    color: Color = field(default_factory=lambda: Color(0, 0, 0))
    tolerance: int = DEFAULT_TOLERANCE
    zoom: int = ZOOM_DEFAULT

    def __post_init__(self):
        self.tool = _resolve_tool(self.tool)
        self.color = coerce_color(self.color)
        self.set_tolerance(self.tolerance)
        self.set_zoom(self.zoom)

    def set_tool(self, tool_type: Union[ToolType, str]) -> None:
        """Set the current tool (accepts ToolType enum or string)"""
        self.tool = _resolve_tool(tool_type)
        logger.debug(f"Tool changed to {self.tool.name}")

    @property
    def tool_name(self) -> str:
        return self.tool.name.lower()

    def set_color(self, color: ColorLike) -> None:
        """Set the current drawing color"""
        self.color = coerce_color(color)

    def set_tolerance(self, tolerance: int) -> None:
        if not is_integer(tolerance) or not TOLERANCE_MIN <= tolerance <= TOLERANCE_MAX:
            raise ValidationError(
                f"Tolerance must be {TOLERANCE_MIN}-{TOLERANCE_MAX}, got {tolerance}"
            )
        self.tolerance = tolerance

    def set_zoom(self, zoom: int) -> None:
        if not is_integer(zoom) or not ZOOM_MIN <= zoom <= ZOOM_MAX:
            raise ValidationError(f"Zoom must be {ZOOM_MIN}-{ZOOM_MAX}, got {zoom}")
        self.zoom = zoom

    def zoom_in(self) -> int:
        self.zoom = min(ZOOM_MAX, self.zoom + 1)
        return self.zoom

    def zoom_out(self) -> int:
        self.zoom = max(ZOOM_MIN, self.zoom - 1)
        return self.zoom


class Tool(ABC):
    """Abstract base class for editing tools"""

    @abstractmethod
    def apply(self, buffer: PixelBuffer, x: int, y: int, context: EditorContext) -> Any:
        """Apply the tool at a pixel"""


class FillTool(Tool):
    """Flood fill tool"""

    def apply(
        self, buffer: PixelBuffer, x: int, y: int, context: EditorContext
    ) -> list[tuple[int, int]]:
        """Perform flood fill with the context color"""
        return flood_fill(buffer, x, y, context.color)


class MagicWandTool(Tool):
    """Background removal by color tolerance"""

    def apply(self, buffer: PixelBuffer, x: int, y: int, context: EditorContext) -> int:
        return remove_color(buffer, x, y, context.tolerance)


class ColorPickerTool(Tool):
    """Color picker tool"""

    def apply(self, buffer: PixelBuffer, x: int, y: int, context: EditorContext) -> Color:
        """Pick color at position and make it the current color"""
        picked_color = buffer.get(x, y)
        context.color = picked_color
        return picked_color


TOOLS: dict[ToolType, Tool] = {
    ToolType.FILL: FillTool(),
    ToolType.MAGIC_WAND: MagicWandTool(),
    ToolType.PICKER: ColorPickerTool(),
}


def get_tool(tool_type: Union[ToolType, str]) -> Tool:
    """Get the tool instance for a type or name"""
    return TOOLS[_resolve_tool(tool_type)]


def apply_tool(context: EditorContext, buffer: PixelBuffer, x: int, y: int) -> Any:
    """Run the context's current tool at (x, y) on buffer"""
    logger.debug(f"Applying {context.tool_name} at ({x}, {y})")
    return TOOLS[context.tool].apply(buffer, x, y, context)
