"""
Proof Selection Mixin

Tracks the single active (selected) layer. The active UUID is either None
or the UUID of a layer currently in the proof.
"""

from typing import Dict, Optional

from models.errors import InvalidSelectionError


class ProofSelectionMixin:
    """Mixin providing active-layer selection for ProofDocument

    This mixin assumes the parent class has:
        - self._layers: Layers collection
        - self._active_layer_uuid: Optional[str]
        - self._logger, self._notify, self._changed
    """

    @property
    def active_layer_uuid(self) -> Optional[str]:
        return self._active_layer_uuid

    def select_layer(self, uuid: str):
        """Make a layer the active one

        Raises:
            InvalidSelectionError: If no layer has this UUID. The current
                selection is left unchanged.
        """
        layer = self._layers.get_by_uuid(uuid)
        if layer is None:
            raise InvalidSelectionError(uuid)

        self._notify(f"Selected {layer.name}")
        if self._active_layer_uuid == uuid:
            return
        self._active_layer_uuid = uuid
        self._logger.debug(f"Selected layer: {uuid}")
        self._changed('selection_changed', uuid)

    def clear_selection(self):
        """Clear the active layer"""
        if self._active_layer_uuid is None:
            return
        self._active_layer_uuid = None
        self._logger.debug("Selection cleared")
        self._changed('selection_changed', None)

    def is_active(self, uuid: str) -> bool:
        return uuid is not None and self._active_layer_uuid == uuid

    def get_active_layer(self) -> Optional[Dict]:
        """Get a detached copy of the active layer's data, or None"""
        if self._active_layer_uuid is None:
            return None
        layer = self._layers.get_by_uuid(self._active_layer_uuid)
        return layer.to_dict() if layer else None
