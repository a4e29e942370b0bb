"""Layer operations triggered from the UI - select, toggle, delete, edit, nudge, rotate, flip

Model errors (unknown layer, out of range value) are reported to the user
through the notifier instead of propagating into Qt slots. Transform edits
on locked layers are refused here; the model itself does not enforce locks.
"""
from models.errors import ProofError
from models.proof import TRANSFORM_FIELDS
from utils.logger import loggerReport


class LayerActions:
	"""Handles layer operations for the main window"""

	def __init__(self, main_window):
		"""Initialize with reference to main window

		Args:
			main_window: Object exposing `proof` (ProofDocument) and
				`notifier` (Notifier), normally the ProofStudio window
		"""
		self.main_window = main_window

	@property
	def proof(self):
		return self.main_window.proof

	def _report(self, e):
		loggerReport(e, self.main_window.notifier)

	def select(self, uuid):
		"""Make a layer active. Returns True on success."""
		try:
			self.proof.select_layer(uuid)
		except ProofError as e:
			self._report(e)
			return False
		return True

	def clear_selection(self):
		self.proof.clear_selection()

	def toggle_visibility(self, uuid):
		try:
			self.proof.toggle_layer_visibility(uuid)
		except ProofError as e:
			self._report(e)
			return False
		return True

	def toggle_lock(self, uuid):
		try:
			self.proof.toggle_layer_lock(uuid)
		except ProofError as e:
			self._report(e)
			return False
		return True

	def delete(self, uuid):
		try:
			self.proof.remove_layer(uuid)
		except ProofError as e:
			self._report(e)
			return False
		return True

	def delete_active(self):
		uuid = self.proof.active_layer_uuid
		if uuid is None:
			return False
		return self.delete(uuid)

	def update(self, uuid, **fields):
		"""Apply property edits, refusing transform edits on locked layers

		Returns:
			True if the edit was applied
		"""
		try:
			locked_fields = [f for f in fields if f in TRANSFORM_FIELDS]
			if locked_fields and self.proof.is_layer_locked(uuid):
				self.main_window.notifier(f"{self.proof.get_layer_name(uuid)} is locked")
				return False
			self.proof.update_layer(uuid, **fields)
		except ValueError as e:
			# ProofError and invalid content values
			self._report(e)
			return False
		return True

	def nudge_active(self, dx, dy):
		"""Move the active layer by (dx, dy) proof pixels"""
		uuid = self.proof.active_layer_uuid
		if uuid is None:
			return False
		x, y = self.proof.get_layer_position(uuid)
		return self.update(uuid, position=(x + dx, y + dy))

	def rotate_active(self, degrees=90):
		"""Rotate the active layer, wrapping inside -360..360"""
		uuid = self.proof.active_layer_uuid
		if uuid is None:
			return False
		rotation = self.proof.get_layer_rotation(uuid) + degrees
		if rotation > 360 or rotation < -360:
			rotation %= 360
		return self.update(uuid, rotation=rotation)

	def flip_active(self, axis):
		"""Flip the active layer

		Args:
			axis: 'x' for horizontal, 'y' for vertical
		"""
		uuid = self.proof.active_layer_uuid
		if uuid is None:
			return False
		field = 'flip_x' if axis == 'x' else 'flip_y'
		current = self.proof.get_layer(uuid)[field]
		return self.update(uuid, **{field: not current})

	def shift_up(self, uuid):
		try:
			return self.proof.shift_layer_up(uuid)
		except ProofError as e:
			self._report(e)
			return False

	def shift_down(self, uuid):
		try:
			return self.proof.shift_layer_down(uuid)
		except ProofError as e:
			self._report(e)
			return False

	def add_layer(self, kind):
		"""Add a layer of the given kind above the active layer and select it"""
		try:
			uuid = self.proof.add_layer(kind, target_uuid=self.proof.active_layer_uuid)
		except ValueError as e:
			self._report(e)
			return None
		self.proof.select_layer(uuid)
		return uuid
