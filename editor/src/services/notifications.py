"""User notification fan-out.

Every user-visible event is a single short message. The GUI registers the
status bar as a sink; tests register a list.append.
"""

import logging
from typing import Callable, List


class Notifier:
	"""Sends messages to every registered sink and keeps a short history"""

	def __init__(self, max_history=50):
		self._logger = logging.getLogger('Notifier')
		self._sinks: List[Callable[[str], None]] = []
		self.max_history = max_history
		self.history: List[str] = []

	def add_sink(self, sink: Callable[[str], None]):
		"""Register a callback receiving (message: str)"""
		self._sinks.append(sink)

	def remove_sink(self, sink):
		if sink in self._sinks:
			self._sinks.remove(sink)

	def notify(self, message: str):
		"""Send a message to all sinks"""
		self._logger.info(message)
		self.history.append(message)
		if len(self.history) > self.max_history:
			self.history = self.history[-self.max_history:]

		for sink in list(self._sinks):
			try:
				sink(message)
			except Exception:
				self._logger.exception("Error delivering notification")

	__call__ = notify

	@property
	def last_message(self):
		return self.history[-1] if self.history else None
