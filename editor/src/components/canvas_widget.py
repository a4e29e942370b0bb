"""
ProofStudio - Proof Canvas

Paints the proof from a ProofDocument snapshot. The canvas holds no layer
state of its own: every paint reads a fresh snapshot, and every edit goes
through LayerActions so locks and validation are respected.

Coordinate spaces:
- Proof space: proof pixels, origin top-left (what the model stores)
- Widget space: display pixels = proof * display_scale * zoom
"""

from PyQt5.QtWidgets import QWidget, QSizePolicy
from PyQt5.QtCore import Qt, QRectF, QPointF, QSize
from PyQt5.QtGui import QPainter, QColor, QPen, QPixmap, QFont

from constants import (
	GRID_SPACING, GRID_OPACITY, SELECTION_HANDLE_SIZE, DEFAULT_ZOOM_PERCENT
)
from models.proof import LayerKind
from models.tool_state import ToolMode


# Placeholder/indicator colors per layer kind
KIND_COLORS = {
	'background': QColor(0, 168, 150),
	'product': QColor(76, 110, 245),
	'design': QColor(233, 100, 160),
}


class ProofCanvas(QWidget):
	"""Fixed-size proof surface showing all visible layers in paint order"""

	def __init__(self, parent=None):
		super().__init__(parent)
		self.proof = None  # ProofDocument (set by main window)
		self.tool_state = None  # ToolState (set by main window)
		self.layer_actions = None  # LayerActions (set by main window)

		self.zoom_percent = DEFAULT_ZOOM_PERCENT
		self._pixmap_cache = {}  # image_ref -> QPixmap (null if not loadable)

		# Drag state
		self._drag_uuid = None
		self._drag_start_pos = None  # Widget-space press position
		self._drag_start_layer_pos = None  # Proof-space layer position at press

		self.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
		self.setMouseTracking(False)

	# ========================================
	# Geometry
	# ========================================

	@property
	def scale_factor(self):
		"""Display pixels per proof pixel at the current zoom"""
		if self.proof is None:
			return self.zoom_percent / 100.0
		return self.proof.geometry.display_scale * self.zoom_percent / 100.0

	def sizeHint(self):
		if self.proof is None:
			return QSize(0, 0)
		geometry = self.proof.geometry
		return QSize(round(geometry.width_px * self.scale_factor),
					 round(geometry.height_px * self.scale_factor))

	def set_zoom(self, percent):
		"""Apply a zoom percentage and resize the widget"""
		self.zoom_percent = percent
		self.setFixedSize(self.sizeHint())
		self.update()

	def widget_to_proof(self, pos):
		"""Convert a widget-space point to proof space"""
		scale = self.scale_factor
		return QPointF(pos.x() / scale, pos.y() / scale)

	def refresh(self, *args):
		"""Proof listener: repaint on any change"""
		if self.proof is not None:
			in_use = {self.proof.get_layer_image(uuid) for uuid in self.proof.get_all_layer_uuids()}
			for image_ref in set(self._pixmap_cache) - in_use:
				del self._pixmap_cache[image_ref]
		self.update()

	# ========================================
	# Painting
	# ========================================

	def _get_pixmap(self, image_ref):
		if image_ref not in self._pixmap_cache:
			self._pixmap_cache[image_ref] = QPixmap(image_ref)
		return self._pixmap_cache[image_ref]

	def paintEvent(self, event):
		if self.proof is None:
			return

		snapshot = self.proof.get_snapshot()
		geometry = snapshot['geometry']
		scale = self.scale_factor

		painter = QPainter(self)
		painter.setRenderHint(QPainter.Antialiasing)
		painter.setRenderHint(QPainter.SmoothPixmapTransform)
		painter.fillRect(self.rect(), QColor(250, 250, 250))

		painter.save()
		painter.scale(scale, scale)
		self._paint_grid(painter, geometry)
		for layer in snapshot['layers']:
			if layer['visible']:
				self._paint_layer(painter, layer, layer['uuid'] == snapshot['active_layer_uuid'])
		painter.restore()

		self._paint_overlays(painter, geometry)
		painter.end()

	def _paint_grid(self, painter, geometry):
		"""Alignment grid, GRID_SPACING display pixels apart at 100% zoom"""
		spacing = GRID_SPACING / geometry.display_scale
		pen = QPen(QColor(120, 120, 120))
		pen.setCosmetic(True)
		painter.save()
		painter.setOpacity(GRID_OPACITY)
		painter.setPen(pen)
		x = 0.0
		while x <= geometry.width_px:
			painter.drawLine(QPointF(x, 0), QPointF(x, geometry.height_px))
			x += spacing
		y = 0.0
		while y <= geometry.height_px:
			painter.drawLine(QPointF(0, y), QPointF(geometry.width_px, y))
			y += spacing
		painter.restore()

	def _paint_layer(self, painter, layer, is_active):
		x, y = layer['position']
		width, height = layer['size']

		painter.save()
		painter.setOpacity(layer['opacity'] / 100.0)

		# Rotate and flip around the layer center
		painter.translate(x + width / 2.0, y + height / 2.0)
		painter.rotate(layer['rotation'])
		painter.scale(-1 if layer['flip_x'] else 1, -1 if layer['flip_y'] else 1)
		rect = QRectF(-width / 2.0, -height / 2.0, width, height)

		pixmap = self._get_pixmap(layer['image_ref']) if layer['image_ref'] else None
		if pixmap is not None and not pixmap.isNull():
			painter.drawPixmap(rect, pixmap, QRectF(pixmap.rect()))
		else:
			self._paint_placeholder(painter, rect, layer)

		if is_active:
			painter.setOpacity(1.0)
			self._paint_selection(painter, rect)
		painter.restore()

	def _paint_placeholder(self, painter, rect, layer):
		color = KIND_COLORS.get(layer['kind'], QColor(150, 150, 150))
		fill = QColor(color)
		fill.setAlpha(40)
		painter.fillRect(rect, fill)

		painter.setPen(QColor(110, 110, 110))
		font = QFont()
		font.setPixelSize(max(12, int(min(rect.width(), rect.height()) / 12)))
		painter.setFont(font)
		painter.drawText(rect, Qt.AlignCenter, LayerKind(layer['kind']).label)

	def _paint_selection(self, painter, rect):
		pen = QPen(QColor(76, 110, 245), 2, Qt.DashLine)
		pen.setCosmetic(True)
		painter.setPen(pen)
		painter.setBrush(Qt.NoBrush)
		painter.drawRect(rect)

		# Corner handles, constant display size
		half = SELECTION_HANDLE_SIZE / 2.0 / self.scale_factor
		painter.setPen(Qt.NoPen)
		painter.setBrush(QColor(76, 110, 245))
		for corner in (rect.topLeft(), rect.topRight(), rect.bottomLeft(), rect.bottomRight()):
			painter.drawEllipse(corner, half, half)

	def _paint_overlays(self, painter, geometry):
		"""Layer kind indicators (top-left) and proof size label (bottom-right)"""
		painter.setPen(Qt.NoPen)
		for i, color in enumerate(KIND_COLORS.values()):
			painter.setBrush(color)
			painter.drawEllipse(QPointF(16 + i * 18, 16), 6, 6)

		label = geometry.label
		metrics = painter.fontMetrics()
		text_width = metrics.horizontalAdvance(label) + 12
		text_height = metrics.height() + 6
		box = QRectF(self.width() - text_width - 8, self.height() - text_height - 8, text_width, text_height)
		painter.setBrush(QColor(255, 255, 255, 230))
		painter.drawRoundedRect(box, 4, 4)
		painter.setPen(QColor(110, 110, 110))
		painter.drawText(box, Qt.AlignCenter, label)

	# ========================================
	# Mouse interaction (select tool only)
	# ========================================

	def mousePressEvent(self, event):
		if (self.proof is None or event.button() != Qt.LeftButton
				or (self.tool_state is not None and self.tool_state.active_tool != ToolMode.SELECT)):
			super().mousePressEvent(event)
			return

		point = self.widget_to_proof(event.pos())
		uuid = self.proof.find_topmost_layer_at(point.x(), point.y())
		if uuid is None:
			self.layer_actions.clear_selection()
			return

		if self.proof.active_layer_uuid != uuid:
			self.layer_actions.select(uuid)

		if not self.proof.is_layer_locked(uuid):
			self._drag_uuid = uuid
			self._drag_start_pos = event.pos()
			self._drag_start_layer_pos = self.proof.get_layer_position(uuid)

	def mouseMoveEvent(self, event):
		if self._drag_uuid is not None and not self.proof.has_layer_uuid(self._drag_uuid):
			# Dragged layer was deleted mid-drag
			self._end_drag()
		if self._drag_uuid is None:
			super().mouseMoveEvent(event)
			return

		scale = self.scale_factor
		dx = round((event.pos().x() - self._drag_start_pos.x()) / scale)
		dy = round((event.pos().y() - self._drag_start_pos.y()) / scale)
		start_x, start_y = self._drag_start_layer_pos
		new_pos = (start_x + dx, start_y + dy)
		if tuple(self.proof.get_layer_position(self._drag_uuid)) != new_pos:
			self.layer_actions.update(self._drag_uuid, position=new_pos)

	def mouseReleaseEvent(self, event):
		self._end_drag()
		super().mouseReleaseEvent(event)

	def _end_drag(self):
		self._drag_uuid = None
		self._drag_start_pos = None
		self._drag_start_layer_pos = None
