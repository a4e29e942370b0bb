"""Top toolbar - drawing tools, edit/view actions, and save/export/share"""

from PyQt5.QtWidgets import QFrame, QHBoxLayout, QToolButton, QPushButton, QButtonGroup, QLabel
from PyQt5.QtCore import pyqtSignal

from constants import APP_TITLE, APP_SUBTITLE
from models.tool_state import ToolMode


# (action id, label, tooltip)
EDIT_ACTIONS = [
	('upload', "Upload", "Upload an image to the selected layer"),
	('undo', "Undo", "Undo (Ctrl+Z)"),
	('redo', "Redo", "Redo (Ctrl+Y)"),
	('zoom-in', "Zoom In", "Zoom In (Ctrl++)"),
	('zoom-out', "Zoom Out", "Zoom Out (Ctrl+-)"),
	('reset', "Reset View", "Reset View (Ctrl+0)"),
]

PRIMARY_ACTIONS = [
	('save', "Save", "Save project (Ctrl+S)"),
	('download', "Export", "Export proof (Ctrl+E)"),
	('share', "Share", "Generate a share link"),
]

TOOL_SHORTCUTS = {
	ToolMode.SELECT: 'V',
	ToolMode.RECTANGLE: 'R',
	ToolMode.CIRCLE: 'C',
	ToolMode.TEXT: 'T',
	ToolMode.IMAGE: 'I',
}


class ProofToolbar(QFrame):
	"""Header bar. Emits tool and action ids; the main window routes them."""

	tool_selected = pyqtSignal(str)
	action_triggered = pyqtSignal(str)

	def __init__(self, parent=None):
		super().__init__(parent)
		self.setFixedHeight(52)
		self.setStyleSheet("ProofToolbar { border-bottom: 1px solid rgba(0, 0, 0, 40); }")
		self.tool_buttons = {}  # tool id -> button
		self.action_buttons = {}  # action id -> button
		self._setup_ui()

	def _setup_ui(self):
		layout = QHBoxLayout(self)
		layout.setContentsMargins(10, 6, 10, 6)
		layout.setSpacing(4)

		title = QLabel(f"<b>{APP_TITLE}</b> <span style='color:#888'>{APP_SUBTITLE}</span>")
		layout.addWidget(title)
		layout.addSpacing(20)

		# Tools (exclusive)
		self.tool_group = QButtonGroup(self)
		self.tool_group.setExclusive(True)
		for tool in ToolMode:
			btn = QToolButton()
			btn.setText(tool.label)
			btn.setCheckable(True)
			btn.setToolTip(f"{tool.label} ({TOOL_SHORTCUTS[tool]})")
			btn.clicked.connect(lambda checked, t=tool.value: self.tool_selected.emit(t))
			self.tool_group.addButton(btn)
			self.tool_buttons[tool.value] = btn
			layout.addWidget(btn)

		layout.addSpacing(20)

		for action_id, label, tooltip in EDIT_ACTIONS:
			btn = QToolButton()
			btn.setText(label)
			btn.setToolTip(tooltip)
			btn.clicked.connect(lambda checked, a=action_id: self.action_triggered.emit(a))
			self.action_buttons[action_id] = btn
			layout.addWidget(btn)

		layout.addStretch()

		for action_id, label, tooltip in PRIMARY_ACTIONS:
			btn = QPushButton(label)
			btn.setToolTip(tooltip)
			if action_id == 'save':
				btn.setStyleSheet("QPushButton { background-color: #4c6ef5; color: white; padding: 4px 12px; border-radius: 4px; }")
			btn.clicked.connect(lambda checked, a=action_id: self.action_triggered.emit(a))
			self.action_buttons[action_id] = btn
			layout.addWidget(btn)

	def set_active_tool(self, tool):
		"""Reflect the active tool without emitting"""
		tool = ToolMode(tool)
		btn = self.tool_buttons[tool.value]
		btn.blockSignals(True)
		btn.setChecked(True)
		btn.blockSignals(False)
