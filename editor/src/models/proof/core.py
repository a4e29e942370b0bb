"""
ProofStudio - Proof Data Model

THE MODEL in the MVC architecture. Owns the layer stack and the selection.

This class handles:
- Layers collection (UUID-based identification, order = paint order)
- Layer store operations (toggle, delete, update, add, reorder)
- Active layer selection
- Query API (for UI to retrieve data)
- Change notification (version counter + listeners)
- Snapshot API (consistent read-only copies for rendering)

The model is INDEPENDENT of UI:
- No Qt imports
- No rendering logic
- No tool state (that's ToolState)

There is exactly one writer: whoever owns the ProofDocument instance.
Every successful mutation bumps `version` once and then notifies the
listeners, so a listener always sees the finished state.

Usage:
    proof = ProofDocument(notify=print)

    proof.select_layer('product-1')
    proof.update_layer('product-1', opacity=80, position=(10, 20))
    proof.remove_layer('product-1')     # also clears the selection

    snapshot = proof.get_snapshot()
"""

import copy
import logging
from typing import Callable, Dict, Iterable, Optional

from ._internal.layer import Layers
from .layer_mixin import ProofLayerMixin
from .selection_mixin import ProofSelectionMixin
from .query_mixin import ProofQueryMixin
from models.transform import ProofGeometry
from constants import INITIAL_LAYERS, INITIAL_ACTIVE_LAYER


class ProofDocument(ProofLayerMixin, ProofSelectionMixin, ProofQueryMixin):
    """Proof data model with full operation API

    Manages the ordered layer collection and the active layer.
    All data manipulation goes through this class.

    Properties:
        geometry: ProofGeometry of the proof surface
        version: Incremented once per successful mutation
        active_layer_uuid: UUID of the active layer, or None
    """

    def __init__(self, notify: Optional[Callable[[str], None]] = None,
                 geometry: Optional[ProofGeometry] = None,
                 layers: Optional[Iterable[Dict]] = None,
                 active_layer_uuid: Optional[str] = INITIAL_ACTIVE_LAYER):
        """Create a proof

        Args:
            notify: Callback receiving user-visible messages
            geometry: Proof geometry, defaults to 17" x 11" at 96 DPI
            layers: Layer dictionaries in paint order, defaults to the seed layers
            active_layer_uuid: Initially active layer, ignored if not present
        """
        self._logger = logging.getLogger('ProofDocument')
        self._notify_callback = notify
        self._listeners = []
        self._version = 0

        self.geometry = geometry or ProofGeometry()

        self._layers = Layers(INITIAL_LAYERS if layers is None else layers)
        self._active_layer_uuid = active_layer_uuid if active_layer_uuid in self._layers else None

        self._logger.debug(f"Created proof with {len(self._layers)} layers")

    @property
    def version(self) -> int:
        return self._version

    # ========================================
    # Listeners
    # ========================================

    def add_listener(self, callback: Callable[[str, Optional[str]], None]):
        """Add a listener to be notified after every change

        Args:
            callback: Function receiving (event, layer_uuid). Events are
                'layer_added', 'layer_removed', 'layer_updated',
                'layers_reordered' and 'selection_changed'.
        """
        self._listeners.append(callback)

    def remove_listener(self, callback):
        """Remove a listener"""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _changed(self, event: str, uuid: Optional[str]):
        self._version += 1
        for callback in list(self._listeners):
            try:
                callback(event, uuid)
            except Exception:
                self._logger.exception(f"Error notifying listener of {event}")

    def _notify(self, message: str):
        if self._notify_callback is not None:
            self._notify_callback(message)

    # ========================================
    # Snapshots
    # ========================================

    def get_snapshot(self) -> Dict:
        """Get a consistent, detached copy of the whole proof state

        Returns:
            Dictionary with version, active_layer_uuid, geometry and layers
            (list of layer dicts in paint order)
        """
        return {
            'version': self._version,
            'active_layer_uuid': self._active_layer_uuid,
            'geometry': copy.copy(self.geometry),
            'layers': self._layers.to_dict_list(),
        }

    def __repr__(self):
        return f"ProofDocument({len(self._layers)} layers, active={self._active_layer_uuid!r}, v{self._version})"
