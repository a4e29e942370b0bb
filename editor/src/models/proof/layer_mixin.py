"""
Proof Layer Management Mixin

This mixin provides the layer store operations for the ProofDocument model.

Methods:
    Layer CRUD:
        - add_layer
        - remove_layer
        - update_layer
        - set_layer_image
        - toggle_layer_visibility
        - toggle_layer_lock

    Ordering:
        - shift_layer_up
        - shift_layer_down
"""

from typing import Optional, Tuple, Union

from ._internal.layer import Layer, LayerKind
from models.errors import LayerNotFoundError
from constants import DEFAULT_POSITION_X, DEFAULT_POSITION_Y, DEFAULT_LAYER_WIDTH, DEFAULT_LAYER_HEIGHT


class ProofLayerMixin:
    """Mixin providing layer store operations for ProofDocument

    This mixin assumes the parent class has:
        - self._layers: Layers collection
        - self._active_layer_uuid: Optional[str]
        - self._logger: logging.Logger instance
        - self._notify(message): user notification
        - self._changed(event, uuid): bump version and inform listeners
    """

    def _require_layer(self, uuid: str) -> Layer:
        layer = self._layers.get_by_uuid(uuid)
        if layer is None:
            raise LayerNotFoundError(uuid)
        return layer

    # ========================================
    # Layer CRUD Operations
    # ========================================

    def add_layer(self, kind: Union[LayerKind, str], name: Optional[str] = None,
                  position: Optional[Tuple[int, int]] = None,
                  size: Optional[Tuple[int, int]] = None,
                  target_uuid: Optional[str] = None) -> str:
        """Add new layer

        Args:
            kind: Layer kind (background, product or design)
            name: Display name, defaults to the kind's label
            position: Initial proof-local position
            size: Initial size in proof pixels
            target_uuid: If provided, insert directly above this layer

        Returns:
            UUID of the new layer

        Raises:
            LayerNotFoundError: If target_uuid is given but not found
        """
        if target_uuid is not None:
            self._require_layer(target_uuid)

        layer = Layer({
            'kind': LayerKind(kind),
            'name': name,
            'position': position or (DEFAULT_POSITION_X, DEFAULT_POSITION_Y),
            'size': size or (DEFAULT_LAYER_WIDTH, DEFAULT_LAYER_HEIGHT),
        })

        if target_uuid is not None:
            index = self._layers.get_index_by_uuid(target_uuid)
            self._layers.insert(index + 1, layer)
        else:
            self._layers.append(layer)

        self._logger.debug(f"Added layer: {layer.uuid}")
        self._notify(f"Added {layer.name}")
        self._changed('layer_added', layer.uuid)
        return layer.uuid

    def remove_layer(self, uuid: str):
        """Remove layer by UUID

        Clears the selection in the same step when the removed layer was
        active, so listeners never observe a dangling active UUID.

        Args:
            uuid: Layer UUID

        Raises:
            LayerNotFoundError: If UUID not found
        """
        layer = self._require_layer(uuid)

        self._layers.remove(layer)
        if self._active_layer_uuid == uuid:
            self._active_layer_uuid = None

        self._logger.debug(f"Removed layer: {uuid}")
        self._notify(f"Deleted {layer.name}")
        self._changed('layer_removed', uuid)

    def update_layer(self, uuid: str, **fields):
        """Merge a partial set of field changes into a layer

        All fields are validated before any is applied. Fields not given
        are left unchanged.

        Args:
            uuid: Layer UUID
            **fields: Any of name, position, size, opacity, image_ref,
                rotation, flip_x, flip_y, content

        Raises:
            LayerNotFoundError: If UUID not found
            OutOfRangeError: If size is not positive
            ValueError: Unknown field or invalid content value
        """
        layer = self._require_layer(uuid)
        if not fields:
            return

        changes = layer.normalize_changes(fields)
        layer.apply_changes(changes)

        self._logger.debug(f"Updated layer {uuid}: {', '.join(sorted(changes))}")
        self._changed('layer_updated', uuid)

    def set_layer_image(self, uuid: str, asset_ref: Optional[str]):
        """Set (or clear with None) the image reference of a layer"""
        self.update_layer(uuid, image_ref=asset_ref)

    def toggle_layer_visibility(self, uuid: str) -> bool:
        """Flip layer visibility

        Returns:
            New visibility state

        Raises:
            LayerNotFoundError: If UUID not found
        """
        layer = self._require_layer(uuid)
        layer.visible = not layer.visible
        self._logger.debug(f"Layer {uuid} visible={layer.visible}")
        self._changed('layer_updated', uuid)
        return layer.visible

    def toggle_layer_lock(self, uuid: str) -> bool:
        """Flip layer lock

        Returns:
            New locked state

        Raises:
            LayerNotFoundError: If UUID not found
        """
        layer = self._require_layer(uuid)
        layer.locked = not layer.locked
        self._logger.debug(f"Layer {uuid} locked={layer.locked}")
        self._changed('layer_updated', uuid)
        return layer.locked

    # ========================================
    # Ordering
    # ========================================

    def shift_layer_up(self, uuid: str) -> bool:
        """Move layer one step towards the top of the stack

        Returns:
            True if the layer moved, False if it was already on top
        """
        self._require_layer(uuid)
        index = self._layers.get_index_by_uuid(uuid)
        if index >= len(self._layers) - 1:
            return False
        self._layers.move(index, index + 1)
        self._logger.debug(f"Shifted layer {uuid} up to {index + 1}")
        self._changed('layers_reordered', uuid)
        return True

    def shift_layer_down(self, uuid: str) -> bool:
        """Move layer one step towards the bottom of the stack

        Returns:
            True if the layer moved, False if it was already at the bottom
        """
        self._require_layer(uuid)
        index = self._layers.get_index_by_uuid(uuid)
        if index == 0:
            return False
        self._layers.move(index, index - 1)
        self._logger.debug(f"Shifted layer {uuid} down to {index - 1}")
        self._changed('layers_reordered', uuid)
        return True
