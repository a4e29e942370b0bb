# PyQt5 imports
from PyQt5.QtWidgets import QFrame, QVBoxLayout, QHBoxLayout, QLabel, QScrollArea
from PyQt5.QtCore import Qt

# Local component imports
from constants import DEFAULT_ZOOM_PERCENT
from services.collaborators import ViewportController
from .canvas_widget import ProofCanvas
from .zoom_toolbar import ZoomToolbar


class CanvasArea(QFrame):
	"""Center area: scrollable proof canvas with a zoom bar underneath

	Also serves as the dispatcher's viewport controller (zoom-in, zoom-out, reset).
	"""

	def __init__(self, parent=None):
		super().__init__(parent)
		self.setStyleSheet("QFrame#canvasArea { background-color: #f0f0f0; }")
		self.setObjectName("canvasArea")
		self.setMinimumWidth(720)

		self.proof = None  # ProofDocument (set by main window)
		self.main_window = None  # Set by main window

		self._setup_ui()

	def _setup_ui(self):
		layout = QVBoxLayout(self)
		layout.setContentsMargins(0, 0, 0, 0)
		layout.setSpacing(0)

		self.scroll_area = QScrollArea()
		self.scroll_area.setAlignment(Qt.AlignCenter)
		self.scroll_area.setWidgetResizable(False)
		self.canvas_widget = ProofCanvas()
		self.scroll_area.setWidget(self.canvas_widget)
		layout.addWidget(self.scroll_area, stretch=1)

		# Bottom bar: proof size on the left, zoom controls on the right
		bottom_bar = QFrame()
		bottom_bar.setFixedHeight(40)
		bottom_layout = QHBoxLayout(bottom_bar)
		bottom_layout.setContentsMargins(10, 5, 10, 5)
		self.size_label = QLabel("")
		self.size_label.setStyleSheet("font-size: 11px; color: #666;")
		bottom_layout.addWidget(self.size_label)
		bottom_layout.addStretch()
		self.zoom_toolbar = ZoomToolbar()
		self.zoom_toolbar.zoom_changed.connect(self._on_zoom_changed)
		bottom_layout.addWidget(self.zoom_toolbar)
		layout.addWidget(bottom_bar)

	def set_proof(self, proof):
		"""Attach the proof document and size the canvas for it"""
		self.proof = proof
		self.canvas_widget.proof = proof
		geometry = proof.geometry
		self.size_label.setText(
			f"{geometry.label} at {geometry.dpi} DPI ({geometry.width_px} × {geometry.height_px} px)")
		self.canvas_widget.set_zoom(self.zoom_toolbar.get_zoom_percent())

	def _on_zoom_changed(self, percent):
		self.canvas_widget.set_zoom(percent)

	# ViewportController interface

	def zoom_in(self):
		return self.zoom_toolbar.zoom_in()

	def zoom_out(self):
		return self.zoom_toolbar.zoom_out()

	def reset_view(self):
		percent = self.zoom_toolbar.set_zoom_percent(DEFAULT_ZOOM_PERCENT)
		# Recenter
		h_bar = self.scroll_area.horizontalScrollBar()
		v_bar = self.scroll_area.verticalScrollBar()
		h_bar.setValue((h_bar.minimum() + h_bar.maximum()) // 2)
		v_bar.setValue((v_bar.minimum() + v_bar.maximum()) // 2)
		return percent


# QFrame's metaclass cannot be combined with ABCMeta, register as a virtual subclass
ViewportController.register(CanvasArea)
