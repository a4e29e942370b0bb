"""Menu bar creation and menu action handlers for ProofStudio"""

import os

from constants import LAYER_KIND_BACKGROUND, LAYER_KIND_PRODUCT, LAYER_KIND_DESIGN


class MenuMixin:
    """Menu bar and menu action handlers"""

    def _create_menu_bar(self):
        """Create the menu bar with File, Edit, Layers, View menus"""
        menubar = self.menuBar()

        # File Menu
        file_menu = menubar.addMenu("&File")

        save_action = file_menu.addAction("&Save")
        save_action.setShortcut("Ctrl+S")
        save_action.triggered.connect(lambda: self.dispatcher.dispatch('save'))

        export_action = file_menu.addAction("&Export Proof...")
        export_action.setShortcut("Ctrl+E")
        export_action.triggered.connect(lambda: self.dispatcher.dispatch('download'))

        share_action = file_menu.addAction("S&hare...")
        share_action.triggered.connect(lambda: self.dispatcher.dispatch('share'))

        file_menu.addSeparator()

        upload_action = file_menu.addAction("&Upload Image...")
        upload_action.setShortcut("Ctrl+U")
        upload_action.triggered.connect(self.file_actions.upload_to_active)

        # Recent Assets submenu
        self.recent_menu = file_menu.addMenu("Recent Assets")
        self._update_recent_assets_menu()

        file_menu.addSeparator()

        exit_action = file_menu.addAction("E&xit")
        exit_action.setShortcut("Alt+F4")
        exit_action.triggered.connect(self.close)

        # Edit Menu
        self.edit_menu = menubar.addMenu("&Edit")

        self.undo_action = self.edit_menu.addAction("&Undo")
        self.undo_action.setShortcut("Ctrl+Z")
        self.undo_action.triggered.connect(lambda: self.dispatcher.dispatch('undo'))

        self.redo_action = self.edit_menu.addAction("&Redo")
        self.redo_action.setShortcut("Ctrl+Y")
        self.redo_action.triggered.connect(lambda: self.dispatcher.dispatch('redo'))

        self.edit_menu.addSeparator()

        # Transform submenu
        transform_menu = self.edit_menu.addMenu("&Transform")

        self.flip_x_action = transform_menu.addAction("Flip &Horizontal")
        self.flip_x_action.triggered.connect(lambda: self.layer_actions.flip_active('x'))

        self.flip_y_action = transform_menu.addAction("Flip &Vertical")
        self.flip_y_action.triggered.connect(lambda: self.layer_actions.flip_active('y'))

        transform_menu.addSeparator()

        self.rotate_90_action = transform_menu.addAction("Rotate &90°")
        self.rotate_90_action.triggered.connect(lambda: self.layer_actions.rotate_active(90))

        self.rotate_minus_90_action = transform_menu.addAction("Rotate &-90°")
        self.rotate_minus_90_action.triggered.connect(lambda: self.layer_actions.rotate_active(-90))

        self.edit_menu.addSeparator()

        self.delete_action = self.edit_menu.addAction("&Delete Layer")
        self.delete_action.triggered.connect(self.layer_actions.delete_active)

        self.deselect_action = self.edit_menu.addAction("Deselect")
        self.deselect_action.triggered.connect(self.layer_actions.clear_selection)

        # Layers Menu
        self.layers_menu = menubar.addMenu("&Layers")

        add_menu = self.layers_menu.addMenu("&Add Layer")
        add_background_action = add_menu.addAction("Background")
        add_background_action.triggered.connect(lambda: self.layer_actions.add_layer(LAYER_KIND_BACKGROUND))
        add_product_action = add_menu.addAction("Product")
        add_product_action.triggered.connect(lambda: self.layer_actions.add_layer(LAYER_KIND_PRODUCT))
        add_design_action = add_menu.addAction("Design")
        add_design_action.triggered.connect(lambda: self.layer_actions.add_layer(LAYER_KIND_DESIGN))

        self.layers_menu.addSeparator()

        self.move_up_action = self.layers_menu.addAction("Move Layer &Up")
        self.move_up_action.setShortcut("Ctrl+]")
        self.move_up_action.triggered.connect(lambda: self.layer_actions.shift_up(self.proof.active_layer_uuid))

        self.move_down_action = self.layers_menu.addAction("Move Layer &Down")
        self.move_down_action.setShortcut("Ctrl+[")
        self.move_down_action.triggered.connect(lambda: self.layer_actions.shift_down(self.proof.active_layer_uuid))

        self.layers_menu.addSeparator()

        self.toggle_visibility_action = self.layers_menu.addAction("Toggle &Visibility")
        self.toggle_visibility_action.triggered.connect(
            lambda: self.layer_actions.toggle_visibility(self.proof.active_layer_uuid))

        self.toggle_lock_action = self.layers_menu.addAction("Toggle &Lock")
        self.toggle_lock_action.triggered.connect(
            lambda: self.layer_actions.toggle_lock(self.proof.active_layer_uuid))

        # View Menu
        view_menu = menubar.addMenu("&View")

        zoom_in_action = view_menu.addAction("Zoom &In")
        zoom_in_action.setShortcut("Ctrl++")
        zoom_in_action.triggered.connect(lambda: self.dispatcher.dispatch('zoom-in'))

        zoom_out_action = view_menu.addAction("Zoom &Out")
        zoom_out_action.setShortcut("Ctrl+-")
        zoom_out_action.triggered.connect(lambda: self.dispatcher.dispatch('zoom-out'))

        reset_action = view_menu.addAction("&Reset View")
        reset_action.setShortcut("Ctrl+0")
        reset_action.triggered.connect(lambda: self.dispatcher.dispatch('reset'))

        # Actions that need an active layer
        self.layer_action_list = [
            self.flip_x_action,
            self.flip_y_action,
            self.rotate_90_action,
            self.rotate_minus_90_action,
            self.delete_action,
            self.deselect_action,
            self.move_up_action,
            self.move_down_action,
            self.toggle_visibility_action,
            self.toggle_lock_action,
        ]
        self._update_menu_actions()

    def _update_menu_actions(self):
        """Enable layer actions only while a layer is active"""
        has_active = self.proof.active_layer_uuid is not None
        for action in self.layer_action_list:
            action.setEnabled(has_active)

    def _update_recent_assets_menu(self):
        """Rebuild the Recent Assets submenu"""
        self.recent_menu.clear()

        if not self.recent_assets:
            no_recent = self.recent_menu.addAction("No recent assets")
            no_recent.setEnabled(False)
            return

        for path in self.recent_assets:
            action = self.recent_menu.addAction(os.path.basename(path))
            action.setToolTip(path)
            # Default argument captures the path
            action.triggered.connect(lambda checked, p=path: self._upload_recent_asset(p))

        self.recent_menu.addSeparator()
        clear_action = self.recent_menu.addAction("Clear Recent Assets")
        clear_action.triggered.connect(self._clear_recent_assets)

    def _upload_recent_asset(self, path):
        """Attach a previously used image to the active layer"""
        return self.dispatcher.dispatch('upload', {'asset_ref': path})
