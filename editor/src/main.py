import sys
import os
import argparse

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 import/s
from PyQt5 import QtWidgets
from PyQt5.QtWidgets import QMainWindow, QApplication
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPalette, QColor

from models.proof import ProofDocument
from models.tool_state import ToolState
from models.transform import ProofGeometry

# Utility imports
from utils.logger import setup_logging, set_main_window, loggerReport

# Service imports
from services.action_dispatcher import ActionDispatcher
from services.notifications import Notifier
from constants import APP_TITLE, DEFAULT_PROJECT_NAME, CONFIG_DIR_NAME

# Action imports
from actions.file_actions import FileActions
from actions.layer_actions import LayerActions

# Mixin imports
from window.menu_mixin import MenuMixin
from window.event_mixin import EventMixin
from window.config_mixin import ConfigMixin
from window.ui_setup_mixin import UISetupMixin


class ProofStudio(MenuMixin, EventMixin, ConfigMixin, UISetupMixin, QMainWindow):
    def __init__(self, config_dir=None):
        super().__init__()
        self.project_name = DEFAULT_PROJECT_NAME
        self.setWindowTitle(f"{self.project_name} - {APP_TITLE}")
        self.resize(1400, 820)
        self.setMinimumSize(1200, 700)

        # Recent assets and settings
        self.recent_assets = []
        self.config_dir = config_dir or os.path.join(os.path.expanduser("~"), CONFIG_DIR_NAME)
        self.config_file = os.path.join(self.config_dir, "config.json")
        self._load_config()

        # All user-visible messages go through one notifier
        self.notifier = Notifier()

        # A bad geometry override falls back to the standard proof size
        try:
            geometry = ProofGeometry.from_config(self.config.get('proof'))
        except (TypeError, ValueError) as e:
            loggerReport(e, self.notifier)
            geometry = ProofGeometry()

        # Proof model and tool selection (single source of truth)
        self.proof = ProofDocument(notify=self.notifier, geometry=geometry)
        self.tool_state = ToolState(notify=self.notifier)

        # Initialize global logger with main window reference
        set_main_window(self)

        # Initialize action handlers (composition pattern)
        self.layer_actions = LayerActions(self)
        self.file_actions = FileActions(self)
        # Viewport is attached once the canvas area exists
        self.dispatcher = ActionDispatcher(
            self.proof,
            notify=self.notifier,
            asset_picker=self.file_actions,
        )

        self.setup_ui()

        # Install event filter on application to catch arrow keys globally
        QApplication.instance().installEventFilter(self)


def main():
    """Main entry point for ProofStudio"""
    parser = argparse.ArgumentParser(description=APP_TITLE)
    parser.add_argument('--debug', action='store_true', help="Verbose logging")
    args, qt_args = parser.parse_known_args()

    setup_logging(debug=args.debug)

    app = QtWidgets.QApplication(sys.argv[:1] + qt_args)

    # Fusion style with light palette
    app.setStyle("Fusion")
    palette = QPalette()
    palette.setColor(QPalette.Window, QColor(245, 245, 245))
    palette.setColor(QPalette.WindowText, Qt.black)
    palette.setColor(QPalette.Base, Qt.white)
    palette.setColor(QPalette.AlternateBase, QColor(240, 240, 240))
    palette.setColor(QPalette.Button, QColor(250, 250, 250))
    palette.setColor(QPalette.ButtonText, Qt.black)
    palette.setColor(QPalette.Highlight, QColor(76, 110, 245))
    palette.setColor(QPalette.HighlightedText, Qt.white)
    app.setPalette(palette)

    window = ProofStudio()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
