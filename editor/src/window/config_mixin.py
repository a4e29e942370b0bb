"""Configuration management for ProofStudio"""

import os
import json

from constants import MAX_RECENT_ASSETS
from utils.logger import loggerRaise, loggerReport


class ConfigMixin:
	"""Configuration file operations and recent assets

	The config file holds the recent asset list and an optional 'proof'
	section overriding the proof geometry:

		{"recent_assets": [...], "proof": {"width_in": 17, "height_in": 11, "dpi": 96}}
	"""

	def _load_config(self):
		"""Load recent assets and settings from config file"""
		self.config = {}
		try:
			if os.path.exists(self.config_file):
				with open(self.config_file, 'r', encoding='utf-8') as f:
					self.config = json.load(f)
				if not isinstance(self.config, dict):
					loggerReport(ValueError(f"Ignoring config file {self.config_file}: expected a JSON object"))
					self.config = {}
				# Filter out assets that no longer exist
				assets = self.config.get('recent_assets', [])
				if not isinstance(assets, list):
					assets = []
				self.recent_assets = [p for p in assets if isinstance(p, str) and os.path.exists(p)]
		except (OSError, ValueError) as e:
			loggerRaise(e, "Error loading config")

	def _save_config(self):
		"""Save recent assets and settings to config file"""
		try:
			os.makedirs(self.config_dir, exist_ok=True)

			config = dict(self.config)
			config['recent_assets'] = self.recent_assets[:MAX_RECENT_ASSETS]

			with open(self.config_file, 'w', encoding='utf-8') as f:
				json.dump(config, f, indent=2)
		except OSError as e:
			loggerRaise(e, "Error saving config")

	def _add_to_recent_assets(self, path):
		"""Move an asset to the front of the recent list"""
		if path in self.recent_assets:
			self.recent_assets.remove(path)
		self.recent_assets.insert(0, path)
		self.recent_assets = self.recent_assets[:MAX_RECENT_ASSETS]

		if hasattr(self, 'recent_menu'):
			self._update_recent_assets_menu()
		self._save_config()

	def _clear_recent_assets(self):
		self.recent_assets = []
		self._update_recent_assets_menu()
		self._save_config()
