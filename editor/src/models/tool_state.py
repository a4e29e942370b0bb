"""Current editing tool.

The tool only changes how the canvas interprets gestures. It is independent
of the layer stack and the selection.
"""

import logging
from enum import Enum
from typing import Callable, Optional, Union

from constants import INITIAL_TOOL


class ToolMode(str, Enum):
    """Closed set of editing tools"""
    SELECT = 'select'
    RECTANGLE = 'rectangle'
    CIRCLE = 'circle'
    TEXT = 'text'
    IMAGE = 'image'

    @property
    def label(self) -> str:
        return self.value.capitalize()


class ToolState:
    """Holds the active tool. Any tool may follow any other."""

    def __init__(self, notify: Optional[Callable[[str], None]] = None,
                 initial: Union[ToolMode, str] = INITIAL_TOOL):
        self._logger = logging.getLogger('ToolState')
        self._notify_callback = notify
        self._listeners = []
        self._tool = ToolMode(initial)

    @property
    def active_tool(self) -> ToolMode:
        return self._tool

    def set_tool(self, tool: Union[ToolMode, str]) -> ToolMode:
        """Switch to a tool

        Args:
            tool: ToolMode or its string id ('select', 'rectangle', ...)

        Returns:
            The new active tool

        Raises:
            ValueError: If the id is not a known tool
        """
        tool = ToolMode(tool)
        self._tool = tool
        self._logger.debug(f"Tool set to {tool.value}")

        if self._notify_callback is not None:
            self._notify_callback(f"Switched to {tool.value} tool")
        for callback in list(self._listeners):
            try:
                callback(tool)
            except Exception:
                self._logger.exception("Error notifying tool listener")
        return tool

    def add_listener(self, callback: Callable[[ToolMode], None]):
        self._listeners.append(callback)

    def remove_listener(self, callback):
        if callback in self._listeners:
            self._listeners.remove(callback)
