"""
Tests for ToolState.
"""
import pytest

from models.tool_state import ToolState, ToolMode


@pytest.fixture
def tool_state(messages):
    return ToolState(notify=messages.append)


class TestToolState:

    def test_initial_tool_is_select(self, tool_state):
        assert tool_state.active_tool == ToolMode.SELECT

    @pytest.mark.parametrize("tool_id", ['select', 'rectangle', 'circle', 'text', 'image'])
    def test_set_each_tool(self, tool_state, messages, tool_id):
        result = tool_state.set_tool(tool_id)
        assert result == ToolMode(tool_id)
        assert tool_state.active_tool.value == tool_id
        assert messages[-1] == f"Switched to {tool_id} tool"

    def test_any_transition_allowed(self, tool_state):
        for tool in [ToolMode.TEXT, ToolMode.CIRCLE, ToolMode.TEXT, ToolMode.SELECT, ToolMode.IMAGE]:
            tool_state.set_tool(tool)
            assert tool_state.active_tool == tool

    def test_same_tool_notifies_again(self, tool_state, messages):
        tool_state.set_tool('select')
        tool_state.set_tool('select')
        assert messages == ["Switched to select tool", "Switched to select tool"]

    def test_unknown_tool_rejected(self, tool_state, messages):
        with pytest.raises(ValueError):
            tool_state.set_tool('pen')
        assert tool_state.active_tool == ToolMode.SELECT
        assert messages == []

    def test_listeners(self, tool_state):
        seen = []
        tool_state.add_listener(seen.append)
        tool_state.set_tool('circle')
        tool_state.remove_listener(seen.append)
        tool_state.set_tool('text')
        assert seen == [ToolMode.CIRCLE]

    def test_tool_is_string_compatible(self):
        assert ToolMode.RECTANGLE == 'rectangle'
        assert ToolMode.RECTANGLE.label == 'Rectangle'
