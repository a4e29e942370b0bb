"""Zoom toolbar widget with zoom controls."""

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QToolButton, QComboBox
from PyQt5.QtCore import pyqtSignal

from constants import ZOOM_PRESETS, MIN_ZOOM_PERCENT, MAX_ZOOM_PERCENT, DEFAULT_ZOOM_PERCENT


class ZoomToolbar(QWidget):
	"""Zoom in/out buttons and a preset dropdown"""

	zoom_changed = pyqtSignal(int)  # Emits zoom percentage (25-500)

	def __init__(self, parent=None):
		super().__init__(parent)

		layout = QHBoxLayout()
		layout.setContentsMargins(0, 0, 0, 0)
		layout.setSpacing(4)

		self.zoom_out_btn = QToolButton()
		self.zoom_out_btn.setText("−")
		self.zoom_out_btn.setToolTip("Zoom Out (Ctrl+-)")
		self.zoom_out_btn.clicked.connect(self.zoom_out)
		layout.addWidget(self.zoom_out_btn)

		self.zoom_combo = QComboBox()
		self.zoom_combo.setEditable(False)
		self.zoom_combo.setMinimumWidth(80)
		for preset in ZOOM_PRESETS:
			self.zoom_combo.addItem(f"{preset}%", preset)
		self.zoom_combo.setCurrentIndex(ZOOM_PRESETS.index(DEFAULT_ZOOM_PERCENT))
		self.zoom_combo.currentIndexChanged.connect(self._on_combo_changed)
		layout.addWidget(self.zoom_combo)

		self.zoom_in_btn = QToolButton()
		self.zoom_in_btn.setText("+")
		self.zoom_in_btn.setToolTip("Zoom In (Ctrl++)")
		self.zoom_in_btn.clicked.connect(self.zoom_in)
		layout.addWidget(self.zoom_in_btn)

		self.setLayout(layout)

	def zoom_in(self):
		"""Step to the next preset. Returns the new percentage."""
		current_zoom = self.get_zoom_percent()
		for preset in ZOOM_PRESETS:
			if preset > current_zoom:
				return self.set_zoom_percent(preset)
		return self.set_zoom_percent(MAX_ZOOM_PERCENT)

	def zoom_out(self):
		"""Step to the previous preset. Returns the new percentage."""
		current_zoom = self.get_zoom_percent()
		for preset in reversed(ZOOM_PRESETS):
			if preset < current_zoom:
				return self.set_zoom_percent(preset)
		return self.set_zoom_percent(MIN_ZOOM_PERCENT)

	def _on_combo_changed(self, index):
		if index >= 0:
			self.zoom_changed.emit(self.zoom_combo.itemData(index))

	def set_zoom_percent(self, percent):
		"""Set zoom level, snapping to the nearest preset at or above it

		Returns:
			The zoom percentage actually applied
		"""
		percent = max(MIN_ZOOM_PERCENT, min(MAX_ZOOM_PERCENT, int(percent)))
		for i, preset in enumerate(ZOOM_PRESETS):
			if preset >= percent:
				index = i
				break
		else:
			index = len(ZOOM_PRESETS) - 1

		# Block signals so the combo does not emit a second time
		self.zoom_combo.blockSignals(True)
		self.zoom_combo.setCurrentIndex(index)
		self.zoom_combo.blockSignals(False)

		applied = ZOOM_PRESETS[index]
		self.zoom_changed.emit(applied)
		return applied

	def get_zoom_percent(self):
		return self.zoom_combo.currentData()
