"""
ProofStudio - Layer Panel

Lists the proof's layers top-most first with inline visibility, lock and
delete buttons. The panel only emits signals; the main window routes them
to LayerActions and the proof listener triggers rebuild().
"""

from PyQt5.QtWidgets import (QWidget, QVBoxLayout, QHBoxLayout, QPushButton,
							 QLabel, QFrame)
from PyQt5.QtCore import Qt, pyqtSignal


class LayerPanel(QFrame):
	"""Layer list with inline actions"""

	layer_clicked = pyqtSignal(str)
	visibility_clicked = pyqtSignal(str)
	lock_clicked = pyqtSignal(str)
	delete_clicked = pyqtSignal(str)

	def __init__(self, parent=None):
		super().__init__(parent)
		self.proof = None  # ProofDocument (set by main window)
		self.rows = {}  # uuid -> row button
		self._setup_ui()

	def _setup_ui(self):
		main_layout = QVBoxLayout(self)
		main_layout.setContentsMargins(8, 8, 8, 8)
		main_layout.setSpacing(4)

		header = QLabel("Layers")
		header.setStyleSheet("font-size: 12px; font-weight: bold;")
		main_layout.addWidget(header)

		layers_container = QWidget()
		self.layers_layout = QVBoxLayout(layers_container)
		self.layers_layout.setContentsMargins(0, 0, 0, 0)
		self.layers_layout.setSpacing(2)
		self.layers_layout.addStretch()
		main_layout.addWidget(layers_container, stretch=1)

	def rebuild(self, *args):
		"""Rebuild rows from the proof. Accepts listener arguments."""
		if not self.proof:
			return

		for row in self.rows.values():
			row.deleteLater()
		self.rows.clear()
		while self.layers_layout.count() > 0:
			item = self.layers_layout.takeAt(0)
			if item.widget():
				item.widget().deleteLater()

		# Paint order is bottom-first, display is top-first
		for uuid in reversed(self.proof.get_all_layer_uuids()):
			row = self._create_layer_row(uuid)
			self.layers_layout.addWidget(row)
			self.rows[uuid] = row

		self.layers_layout.addStretch()

	def _create_layer_row(self, uuid):
		visible = self.proof.is_layer_visible(uuid)
		locked = self.proof.is_layer_locked(uuid)

		row = QPushButton()
		row.setCheckable(True)
		row.setChecked(self.proof.is_active(uuid))
		row.setFixedHeight(40)
		row.setProperty('layer_uuid', uuid)
		row.clicked.connect(lambda checked, u=uuid: self.layer_clicked.emit(u))
		row.setStyleSheet("""
			QPushButton {
				text-align: left;
				border: 1px solid rgba(0, 0, 0, 30);
				border-radius: 4px;
			}
			QPushButton:checked {
				border: 1px solid #4c6ef5;
				background-color: rgba(76, 110, 245, 30);
			}
		""")

		row_layout = QHBoxLayout(row)
		row_layout.setContentsMargins(8, 4, 4, 4)
		row_layout.setSpacing(4)

		name_label = QLabel(self.proof.get_layer_name(uuid))
		name_label.setStyleSheet("border: none; background: transparent; font-size: 11px;")
		name_label.setAttribute(Qt.WA_TransparentForMouseEvents)
		if not visible:
			name_label.setStyleSheet("border: none; background: transparent; font-size: 11px; color: #999;")
		row_layout.addWidget(name_label, stretch=1)

		row.visibility_btn = self._create_inline_button(
			"👁" if visible else "◌", "Hide layer" if visible else "Show layer")
		row.visibility_btn.clicked.connect(lambda checked, u=uuid: self.visibility_clicked.emit(u))
		row_layout.addWidget(row.visibility_btn)

		row.lock_btn = self._create_inline_button(
			"🔒" if locked else "🔓", "Unlock layer" if locked else "Lock layer")
		row.lock_btn.clicked.connect(lambda checked, u=uuid: self.lock_clicked.emit(u))
		row_layout.addWidget(row.lock_btn)

		row.delete_btn = self._create_inline_button("🗑", "Delete layer")
		row.delete_btn.clicked.connect(lambda checked, u=uuid: self.delete_clicked.emit(u))
		row_layout.addWidget(row.delete_btn)

		return row

	def _create_inline_button(self, text, tooltip):
		btn = QPushButton(text)
		btn.setFixedSize(24, 24)
		btn.setToolTip(tooltip)
		btn.setStyleSheet("""
			QPushButton {
				border: none;
				border-radius: 3px;
				background: transparent;
			}
			QPushButton:hover {
				background-color: rgba(0, 0, 0, 20);
			}
		""")
		return btn
