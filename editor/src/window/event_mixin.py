"""Window event handlers for ProofStudio"""

from PyQt5.QtWidgets import QApplication, QLineEdit, QAbstractSpinBox
from PyQt5.QtCore import Qt, QEvent

from constants import ARROW_KEY_MOVE_NORMAL, ARROW_KEY_MOVE_FINE
from models.tool_state import ToolMode


# Single-key tool shortcuts
TOOL_KEYS = {
	Qt.Key_V: ToolMode.SELECT,
	Qt.Key_R: ToolMode.RECTANGLE,
	Qt.Key_C: ToolMode.CIRCLE,
	Qt.Key_T: ToolMode.TEXT,
	Qt.Key_I: ToolMode.IMAGE,
}

ARROW_DIRECTIONS = {
	Qt.Key_Left: (-1, 0),
	Qt.Key_Right: (1, 0),
	Qt.Key_Up: (0, -1),
	Qt.Key_Down: (0, 1),
}


class EventMixin:
	"""Window event handlers (eventFilter, keyPress, close)"""

	def _is_editing_text(self):
		"""True while a text or number input has focus"""
		focus = QApplication.focusWidget()
		return isinstance(focus, (QLineEdit, QAbstractSpinBox))

	def eventFilter(self, obj, event):
		"""Capture arrow keys before child widgets (scroll area, sliders) consume them"""
		if (event.type() == QEvent.KeyPress and event.key() in ARROW_DIRECTIONS
				and self.proof.active_layer_uuid is not None and not self._is_editing_text()):
			self._nudge_active(event)
			return True

		# Let all other events pass through
		return False

	def _nudge_active(self, event):
		"""Move the active layer with the arrow keys, Shift for larger steps"""
		move_amount = ARROW_KEY_MOVE_FINE if event.modifiers() & Qt.ShiftModifier else ARROW_KEY_MOVE_NORMAL
		dx, dy = ARROW_DIRECTIONS[event.key()]
		self.layer_actions.nudge_active(dx * move_amount, dy * move_amount)

	def keyPressEvent(self, event):
		"""Handle single-key shortcuts"""
		if event.modifiers() & (Qt.ControlModifier | Qt.AltModifier):
			super().keyPressEvent(event)
		elif event.key() in ARROW_DIRECTIONS and self.proof.active_layer_uuid is not None:
			self._nudge_active(event)
			event.accept()
		elif event.key() in (Qt.Key_Delete, Qt.Key_Backspace):
			self.layer_actions.delete_active()
			event.accept()
		elif event.key() == Qt.Key_Escape:
			self.layer_actions.clear_selection()
			event.accept()
		elif event.key() in TOOL_KEYS:
			self.tool_state.set_tool(TOOL_KEYS[event.key()])
			event.accept()
		else:
			super().keyPressEvent(event)

	def closeEvent(self, event):
		"""Detach the global key filter and persist settings"""
		app = QApplication.instance()
		if app is not None:
			app.removeEventFilter(self)
		self._save_config()
		super().closeEvent(event)
