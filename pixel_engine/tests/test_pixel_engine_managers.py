#!/usr/bin/env python3
"""
Tests for the editor context and tool dispatch
"""

import pytest

from pixel_engine.core.pixel_engine_exceptions import (
    InvalidColorError,
    OutOfBoundsError,
    ValidationError,
)
from pixel_engine.core.pixel_engine_managers import (
    ColorPickerTool,
    EditorContext,
    FillTool,
    MagicWandTool,
    ToolType,
    apply_tool,
    get_tool,
)
from pixel_engine.core.pixel_engine_models import Color

RED = Color(255, 0, 0)


@pytest.mark.unit
class TestEditorContext:
    """Test EditorContext state handling"""

    def test_defaults(self):
        context = EditorContext()

        assert context.tool is ToolType.FILL
        assert context.color == Color(0, 0, 0, 255)
        assert context.tolerance == 15
        assert context.zoom == 1

    def test_set_tool_by_name(self):
        context = EditorContext()

        context.set_tool("picker")
        assert context.tool is ToolType.PICKER
        context.set_tool("Magic_Wand")
        assert context.tool is ToolType.MAGIC_WAND
        assert context.tool_name == "magic_wand"

    def test_unknown_tool(self):
        context = EditorContext()
        with pytest.raises(ValueError, match="Unknown tool"):
            context.set_tool("pencil")
        assert context.tool is ToolType.FILL

    def test_color_from_hex(self):
        context = EditorContext(color="#ff0000")
        assert context.color == RED

        context.set_color((0, 255, 0, 128))
        assert context.color == Color(0, 255, 0, 128)

    def test_invalid_color(self):
        with pytest.raises(InvalidColorError):
            EditorContext(color="#nothex")

    @pytest.mark.parametrize("tolerance", [-1, 256, "high", None])
    def test_invalid_tolerance(self, tolerance):
        with pytest.raises(ValidationError):
            EditorContext(tolerance=tolerance)

    def test_zoom_steps_and_clamps(self):
        context = EditorContext(zoom=19)

        assert context.zoom_in() == 20
        assert context.zoom_in() == 20

        context.set_zoom(2)
        assert context.zoom_out() == 1
        assert context.zoom_out() == 1

    def test_invalid_zoom(self):
        with pytest.raises(ValidationError):
            EditorContext(zoom=0)
        with pytest.raises(ValidationError):
            EditorContext().set_zoom(21)
        with pytest.raises(ValidationError):
            EditorContext().set_zoom(2.5)

    def test_contexts_are_independent(self):
        first = EditorContext()
        second = EditorContext()
        first.set_color(RED)

        assert second.color != RED


@pytest.mark.unit
class TestToolDispatch:
    """Test apply_tool and the tool classes"""

    def test_get_tool(self):
        assert isinstance(get_tool(ToolType.FILL), FillTool)
        assert isinstance(get_tool("wand"), MagicWandTool)
        assert isinstance(get_tool("picker"), ColorPickerTool)

    def test_fill(self, make_buffer):
        buffer = make_buffer(3, 3)
        buffer.set(1, 0, (0, 0, 0, 255))
        buffer.set(1, 1, (0, 0, 0, 255))
        buffer.set(1, 2, (0, 0, 0, 255))
        context = EditorContext(tool=ToolType.FILL, color=RED)

        changed = apply_tool(context, buffer, 0, 0)

        assert len(changed) == 3
        assert buffer.get(0, 2) == RED
        assert buffer.get(2, 2) == Color(255, 255, 255)

    def test_magic_wand_uses_context_tolerance(self, make_buffer):
        buffer = make_buffer(2, 1, (100, 100, 100, 255))
        buffer.set(1, 0, (130, 100, 100, 255))
        context = EditorContext(tool="magic_wand", tolerance=30)

        masked = apply_tool(context, buffer, 0, 0)

        assert masked == 2
        assert buffer.get(1, 0).a == 0

    def test_picker_updates_context(self, make_buffer):
        buffer = make_buffer(2, 2)
        buffer.set(1, 1, (1, 2, 3, 4))
        context = EditorContext(tool=ToolType.PICKER)

        picked = apply_tool(context, buffer, 1, 1)

        assert picked == Color(1, 2, 3, 4)
        assert context.color == Color(1, 2, 3, 4)

    @pytest.mark.parametrize("tool", list(ToolType))
    def test_out_of_bounds(self, make_buffer, tool):
        buffer = make_buffer(2, 2)
        context = EditorContext(tool=tool, color=RED)

        with pytest.raises(OutOfBoundsError):
            apply_tool(context, buffer, 5, 5)
