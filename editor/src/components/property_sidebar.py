# PyQt5 imports
from PyQt5.QtWidgets import (
	QFrame, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QWidget, QTabWidget,
	QPushButton, QLineEdit, QSlider, QSpinBox, QStackedWidget, QButtonGroup
)
from PyQt5.QtCore import Qt

from constants import (
	MIN_OPACITY, MAX_OPACITY, MIN_ROTATION, MAX_ROTATION,
	LAYER_KIND_BACKGROUND, LAYER_KIND_PRODUCT, LAYER_KIND_DESIGN
)

POSITION_LIMIT = 100000
SIZE_LIMIT = 100000

# Content page index per layer kind
CONTENT_PAGES = {
	LAYER_KIND_BACKGROUND: 0,
	LAYER_KIND_PRODUCT: 1,
	LAYER_KIND_DESIGN: 2,
}


class PropertySidebar(QFrame):
	"""Right properties sidebar with Transform and Content tabs for the active layer

	Every edit is routed through main_window.layer_actions (lock checks and
	validation) and uploads through main_window.dispatcher. The sidebar reads
	back from the proof in load_from_model(), which the main window registers
	as a proof listener.
	"""

	def __init__(self, parent=None):
		super().__init__(parent)
		self.setMinimumWidth(260)
		self.setMaximumWidth(400)
		self.proof = None  # ProofDocument (set by main window)
		self.main_window = None  # Set by main window
		self._loading = False  # True while widgets are filled from the model
		self._setup_ui()

	@property
	def active_uuid(self):
		return self.proof.active_layer_uuid if self.proof else None

	def _setup_ui(self):
		layout = QVBoxLayout(self)
		layout.setContentsMargins(5, 5, 5, 5)

		self.stack = QStackedWidget()
		layout.addWidget(self.stack)

		# Page 0: nothing selected
		self.empty_label = QLabel("Select a layer to edit properties")
		self.empty_label.setAlignment(Qt.AlignCenter)
		self.empty_label.setStyleSheet("color: #888; padding: 24px;")
		self.stack.addWidget(self.empty_label)

		# Page 1: editor for the active layer
		editor = QWidget()
		editor_layout = QVBoxLayout(editor)
		editor_layout.setContentsMargins(0, 0, 0, 0)

		self.header = QLabel("Properties")
		self.header.setStyleSheet("font-size: 14px; font-weight: bold; padding: 10px;")
		editor_layout.addWidget(self.header)

		self.tab_widget = QTabWidget()
		self.tab_widget.addTab(self._create_transform_tab(), "Transform")
		self.tab_widget.addTab(self._create_content_tab(), "Content")
		editor_layout.addWidget(self.tab_widget)
		self.stack.addWidget(editor)

	# ========================================
	# Transform tab
	# ========================================

	def _create_transform_tab(self):
		tab = QWidget()
		layout = QVBoxLayout(tab)
		layout.setSpacing(10)

		layout.addWidget(self._section_label("Name"))
		self.name_edit = QLineEdit()
		self.name_edit.editingFinished.connect(self._on_name_edited)
		layout.addWidget(self.name_edit)

		grid = QGridLayout()
		grid.addWidget(self._section_label("Position"), 0, 0, 1, 4)
		self.pos_x_spin = self._create_spin_box(-POSITION_LIMIT, POSITION_LIMIT)
		self.pos_y_spin = self._create_spin_box(-POSITION_LIMIT, POSITION_LIMIT)
		grid.addWidget(QLabel("X"), 1, 0)
		grid.addWidget(self.pos_x_spin, 1, 1)
		grid.addWidget(QLabel("Y"), 1, 2)
		grid.addWidget(self.pos_y_spin, 1, 3)

		grid.addWidget(self._section_label("Size"), 2, 0, 1, 4)
		self.width_spin = self._create_spin_box(1, SIZE_LIMIT)
		self.height_spin = self._create_spin_box(1, SIZE_LIMIT)
		grid.addWidget(QLabel("W"), 3, 0)
		grid.addWidget(self.width_spin, 3, 1)
		grid.addWidget(QLabel("H"), 3, 2)
		grid.addWidget(self.height_spin, 3, 3)
		layout.addLayout(grid)

		self.pos_x_spin.valueChanged.connect(self._on_position_changed)
		self.pos_y_spin.valueChanged.connect(self._on_position_changed)
		self.width_spin.valueChanged.connect(self._on_size_changed)
		self.height_spin.valueChanged.connect(self._on_size_changed)

		self.rotation_label = self._section_label("Rotation")
		layout.addWidget(self.rotation_label)
		self.rotation_slider = QSlider(Qt.Horizontal)
		self.rotation_slider.setRange(MIN_ROTATION, MAX_ROTATION)
		self.rotation_slider.valueChanged.connect(self._on_rotation_changed)
		layout.addWidget(self.rotation_slider)

		self.opacity_label = self._section_label("Opacity")
		layout.addWidget(self.opacity_label)
		self.opacity_slider = QSlider(Qt.Horizontal)
		self.opacity_slider.setRange(MIN_OPACITY, MAX_OPACITY)
		self.opacity_slider.valueChanged.connect(self._on_opacity_changed)
		layout.addWidget(self.opacity_slider)

		layout.addWidget(self._section_label("Actions"))
		actions_row = QHBoxLayout()
		self.rotate_btn = QPushButton("Rotate 90°")
		self.rotate_btn.clicked.connect(lambda: self.main_window.layer_actions.rotate_active(90))
		self.flip_h_btn = QPushButton("Flip H")
		self.flip_h_btn.clicked.connect(lambda: self.main_window.layer_actions.flip_active('x'))
		self.flip_v_btn = QPushButton("Flip V")
		self.flip_v_btn.clicked.connect(lambda: self.main_window.layer_actions.flip_active('y'))
		for btn in (self.rotate_btn, self.flip_h_btn, self.flip_v_btn):
			actions_row.addWidget(btn)
		layout.addLayout(actions_row)

		self.lock_notice = QLabel("Layer is locked")
		self.lock_notice.setStyleSheet("color: #c92a2a; font-size: 11px;")
		self.lock_notice.hide()
		layout.addWidget(self.lock_notice)

		layout.addStretch()
		return tab

	def _transform_widgets(self):
		return (self.pos_x_spin, self.pos_y_spin, self.width_spin, self.height_spin,
				self.rotation_slider, self.rotate_btn, self.flip_h_btn, self.flip_v_btn)

	# ========================================
	# Content tab
	# ========================================

	def _create_content_tab(self):
		tab = QWidget()
		layout = QVBoxLayout(tab)
		self.content_stack = QStackedWidget()
		self.content_stack.addWidget(self._create_background_page())
		self.content_stack.addWidget(self._create_product_page())
		self.content_stack.addWidget(self._create_design_page())
		layout.addWidget(self.content_stack)
		layout.addStretch()
		return tab

	def _create_background_page(self):
		page = QWidget()
		layout = QVBoxLayout(page)
		layout.setContentsMargins(0, 0, 0, 0)

		layout.addWidget(self._section_label("Background Type"))
		self.fill_buttons, row = self._create_choice_buttons('fill', [('color', "Color"), ('image', "Image")])
		layout.addLayout(row)

		layout.addWidget(self._section_label("Business Info"))
		self.company_name_edit = QLineEdit()
		self.company_name_edit.setPlaceholderText("Company Name")
		self.company_name_edit.editingFinished.connect(
			lambda: self._on_content_edited('company_name', self.company_name_edit.text()))
		layout.addWidget(self.company_name_edit)
		self.tagline_edit = QLineEdit()
		self.tagline_edit.setPlaceholderText("Tagline")
		self.tagline_edit.editingFinished.connect(
			lambda: self._on_content_edited('tagline', self.tagline_edit.text()))
		layout.addWidget(self.tagline_edit)

		self.upload_background_btn = QPushButton("Upload Background")
		self.upload_background_btn.clicked.connect(self._on_upload_clicked)
		layout.addWidget(self.upload_background_btn)
		return page

	def _create_product_page(self):
		page = QWidget()
		layout = QVBoxLayout(page)
		layout.setContentsMargins(0, 0, 0, 0)

		self.upload_product_btn = QPushButton("Upload Product Photo")
		self.upload_product_btn.clicked.connect(self._on_upload_clicked)
		layout.addWidget(self.upload_product_btn)

		layout.addWidget(self._section_label("Product Type"))
		self.product_type_edit = QLineEdit()
		self.product_type_edit.setPlaceholderText("T-Shirt, Mug, etc.")
		self.product_type_edit.editingFinished.connect(
			lambda: self._on_content_edited('product_type', self.product_type_edit.text()))
		layout.addWidget(self.product_type_edit)
		return page

	def _create_design_page(self):
		page = QWidget()
		layout = QVBoxLayout(page)
		layout.setContentsMargins(0, 0, 0, 0)

		self.upload_design_btn = QPushButton("Upload Design")
		self.upload_design_btn.clicked.connect(self._on_upload_clicked)
		layout.addWidget(self.upload_design_btn)

		layout.addWidget(self._section_label("Placement"))
		self.placement_buttons, row = self._create_choice_buttons('placement', [('front', "Front"), ('back', "Back")])
		layout.addLayout(row)
		return page

	def _create_choice_buttons(self, field, choices):
		"""Exclusive checkable buttons for a closed-choice content field

		Returns:
			(dict of value -> button, QHBoxLayout holding them)
		"""
		row = QHBoxLayout()
		group = QButtonGroup(self)
		group.setExclusive(True)
		buttons = {}
		for value, label in choices:
			btn = QPushButton(label)
			btn.setCheckable(True)
			btn.clicked.connect(lambda checked, v=value: self._on_content_edited(field, v))
			group.addButton(btn)
			buttons[value] = btn
			row.addWidget(btn)
		return buttons, row

	# ========================================
	# Helpers
	# ========================================

	def _section_label(self, text):
		label = QLabel(text)
		label.setStyleSheet("font-size: 12px; font-weight: bold;")
		return label

	def _create_spin_box(self, minimum, maximum):
		spin = QSpinBox()
		spin.setRange(minimum, maximum)
		spin.setKeyboardTracking(False)
		return spin

	# ========================================
	# Model -> widgets
	# ========================================

	def load_from_model(self, *args):
		"""Refresh all widgets from the active layer. Accepts listener arguments."""
		layer = self.proof.get_active_layer() if self.proof else None
		if layer is None:
			self.stack.setCurrentIndex(0)
			return

		self._loading = True
		try:
			self.stack.setCurrentIndex(1)
			self.header.setText(f"{layer['kind'].capitalize()} Properties")

			if not self.name_edit.hasFocus():
				self.name_edit.setText(layer['name'])
			x, y = layer['position']
			width, height = layer['size']
			self.pos_x_spin.setValue(x)
			self.pos_y_spin.setValue(y)
			self.width_spin.setValue(width)
			self.height_spin.setValue(height)
			self.rotation_slider.setValue(layer['rotation'])
			self.rotation_label.setText(f"Rotation: {layer['rotation']}°")
			self.opacity_slider.setValue(layer['opacity'])
			self.opacity_label.setText(f"Opacity: {layer['opacity']}%")

			locked = layer['locked']
			for widget in self._transform_widgets():
				widget.setEnabled(not locked)
			self.lock_notice.setVisible(locked)

			self._load_content(layer['kind'], layer['content'])
		finally:
			self._loading = False

	def _load_content(self, kind, content):
		self.content_stack.setCurrentIndex(CONTENT_PAGES[kind])
		if kind == LAYER_KIND_BACKGROUND:
			self.fill_buttons[content['fill']].setChecked(True)
			self.company_name_edit.setText(content['company_name'])
			self.tagline_edit.setText(content['tagline'])
		elif kind == LAYER_KIND_PRODUCT:
			self.product_type_edit.setText(content['product_type'])
		elif kind == LAYER_KIND_DESIGN:
			self.placement_buttons[content['placement']].setChecked(True)

	# ========================================
	# Widgets -> model
	# ========================================

	def _update(self, **fields):
		if self._loading or self.active_uuid is None:
			return False
		return self.main_window.layer_actions.update(self.active_uuid, **fields)

	def _on_name_edited(self):
		name = self.name_edit.text().strip()
		if name and self.active_uuid and name != self.proof.get_layer_name(self.active_uuid):
			self._update(name=name)

	def _on_position_changed(self, value):
		self._update(position=(self.pos_x_spin.value(), self.pos_y_spin.value()))

	def _on_size_changed(self, value):
		self._update(size=(self.width_spin.value(), self.height_spin.value()))

	def _on_rotation_changed(self, value):
		self._update(rotation=value)

	def _on_opacity_changed(self, value):
		self._update(opacity=value)

	def _on_content_edited(self, field, value):
		if self.active_uuid is None:
			return
		if self.proof.get_layer_content(self.active_uuid).get(field) != value:
			self._update(content={field: value})

	def _on_upload_clicked(self):
		if self.active_uuid is None:
			return
		self.main_window.dispatcher.dispatch('upload', {'layer_uuid': self.active_uuid})
