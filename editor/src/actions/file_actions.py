"""File operations for the main window - image picking for uploads"""
import os

from PyQt5.QtWidgets import QFileDialog

from constants import IMAGE_FILE_FILTER
from services.collaborators import AssetPicker


class FileActions(AssetPicker):
	"""Opens the image file browser on behalf of the upload action"""

	def __init__(self, main_window):
		"""Initialize with reference to main window

		Args:
			main_window: The ProofStudio main window instance
		"""
		self.main_window = main_window

	def _start_directory(self):
		"""Directory of the most recently used asset, if it still exists"""
		for path in getattr(self.main_window, 'recent_assets', []):
			directory = os.path.dirname(path)
			if os.path.isdir(directory):
				return directory
		return ""

	def pick_image(self):
		"""Ask the user for an image file

		Returns:
			Path of the chosen image, or None if cancelled
		"""
		filename, _ = QFileDialog.getOpenFileName(
			self.main_window,
			"Upload Image",
			self._start_directory(),
			IMAGE_FILE_FILTER
		)
		if not filename:
			return None

		self.main_window._add_to_recent_assets(filename)
		return filename

	def upload_to_active(self):
		"""Run the upload action for the active layer"""
		return self.main_window.dispatcher.dispatch('upload')
