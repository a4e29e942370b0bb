"""Global logging and error handling utilities"""
import logging
import sys

from PyQt5.QtWidgets import QMessageBox

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_main_window = None
_logger = logging.getLogger('ProofStudio')


def setup_logging(debug: bool = False):
    """Configure root logging for the application

    Args:
        debug: Log everything at DEBUG level instead of WARNING
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def set_main_window(window):
    """Set the main window reference for showing popups"""
    global _main_window
    _main_window = window


def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Handle exceptions with optional popup in release mode

    Args:
        e: The exception to handle
        user_message: User-friendly message to show in popup (optional)
        title: Title for the popup dialog

    In DEBUG_MODE:
        - Just raises the exception (shows full traceback)

    In RELEASE_MODE:
        - Logs the full traceback
        - Shows popup with user message or exception string
        - Then raises the exception
    """
    if DEBUG_MODE:
        raise e

    _logger.error(user_message or str(e), exc_info=e)

    message = user_message if user_message else str(e)
    if _main_window:
        QMessageBox.critical(_main_window, title, message)
    else:
        _logger.error(f"ERROR POPUP (no window): {title} - {message}")

    raise e


def loggerReport(e: Exception, notify=None):
    """Report an expected, recoverable error without raising

    Used for validation failures (unknown layer, out of range value) that
    should reach the user as a notification rather than a popup.

    Args:
        e: The exception to report
        notify: Callback receiving the message, or None to only log
    """
    _logger.warning(str(e))
    if notify is not None:
        notify(str(e))
