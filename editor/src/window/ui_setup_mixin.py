"""UI setup for ProofStudio"""

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QSplitter, QLabel
from PyQt5.QtCore import Qt

from components.canvas_area import CanvasArea
from components.layer_panel import LayerPanel
from components.property_sidebar import PropertySidebar
from components.toolbar import ProofToolbar
from constants import NOTIFICATION_TIMEOUT_MS


class UISetupMixin:
    """UI initialization and component wiring"""

    def setup_ui(self):
        """Initialize and wire up all UI components"""
        self._create_menu_bar()

        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        outer_layout = QVBoxLayout(central_widget)
        outer_layout.setContentsMargins(0, 0, 0, 0)
        outer_layout.setSpacing(0)

        # Header toolbar
        self.toolbar = ProofToolbar(self)
        self.toolbar.tool_selected.connect(self.tool_state.set_tool)
        self.toolbar.action_triggered.connect(self.dispatcher.dispatch)
        self.toolbar.set_active_tool(self.tool_state.active_tool)
        outer_layout.addWidget(self.toolbar)

        main_layout = QHBoxLayout()
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)
        outer_layout.addLayout(main_layout, stretch=1)

        # Create splitter for resizable panels
        splitter = QSplitter(Qt.Horizontal)

        # Left - layer list
        self.layer_panel = LayerPanel(self)
        self.layer_panel.proof = self.proof
        self.layer_panel.layer_clicked.connect(self.layer_actions.select)
        self.layer_panel.visibility_clicked.connect(self.layer_actions.toggle_visibility)
        self.layer_panel.lock_clicked.connect(self.layer_actions.toggle_lock)
        self.layer_panel.delete_clicked.connect(self.layer_actions.delete)
        splitter.addWidget(self.layer_panel)

        # Center - canvas
        self.canvas_area = CanvasArea(self)
        self.canvas_area.main_window = self
        self.canvas_area.canvas_widget.tool_state = self.tool_state
        self.canvas_area.canvas_widget.layer_actions = self.layer_actions
        self.canvas_area.set_proof(self.proof)
        self.dispatcher.viewport = self.canvas_area
        splitter.addWidget(self.canvas_area)

        # Right - properties
        self.right_sidebar = PropertySidebar(self)
        self.right_sidebar.main_window = self
        self.right_sidebar.proof = self.proof
        splitter.addWidget(self.right_sidebar)

        # Set initial sizes (left: 220px, center: flex, right: 300px)
        splitter.setSizes([220, 760, 300])
        for index in range(3):
            splitter.setCollapsible(index, False)
        main_layout.addWidget(splitter)

        # Status bar: notifications on the left, active tool/layer on the right
        self.status_right = QLabel("")
        self.statusBar().addPermanentWidget(self.status_right)
        self.notifier.add_sink(self._show_notification)

        # Model listeners drive every view refresh
        self.proof.add_listener(self._on_proof_changed)
        self.tool_state.add_listener(self._on_tool_changed)

        self.layer_panel.rebuild()
        self.right_sidebar.load_from_model()
        self._update_status_bar()

    def _show_notification(self, message):
        self.statusBar().showMessage(message, NOTIFICATION_TIMEOUT_MS)

    def _on_proof_changed(self, event, uuid):
        self.layer_panel.rebuild()
        self.right_sidebar.load_from_model()
        self.canvas_area.canvas_widget.refresh()
        self._update_menu_actions()
        self._update_status_bar()

    def _on_tool_changed(self, tool):
        self.toolbar.set_active_tool(tool)
        self._update_status_bar()

    def _update_status_bar(self):
        layer = self.proof.get_active_layer()
        layer_text = layer['name'] if layer else "No selection"
        self.status_right.setText(
            f"Tool: {self.tool_state.active_tool.label}  |  {layer_text}  |  "
            f"{self.proof.get_layer_count()} layers")
