"""
Proof Query Mixin

Read-only API used by views and controllers. Every getter returns plain
values or detached copies, never the internal Layer objects.

Methods:
    - get_layer_count, get_all_layer_uuids, has_layer_uuid
    - get_layer_index_by_uuid, get_uuid_at_index
    - get_layer, get_layer_name, get_layer_kind
    - is_layer_visible, is_layer_locked, get_layer_opacity
    - get_layer_position, get_layer_size, get_layer_rotation
    - get_layer_image, get_layer_content
    - find_topmost_layer_at
"""

from typing import Dict, List, Optional

from ._internal.layer import LayerKind
from models.transform import Vec2, Size


class ProofQueryMixin:
    """Mixin providing query methods for ProofDocument

    This mixin assumes the parent class has:
        - self._layers: Layers collection
        - self._require_layer(uuid) from ProofLayerMixin
    """

    def get_layer_count(self) -> int:
        return len(self._layers)

    def get_all_layer_uuids(self) -> List[str]:
        """UUIDs in paint order (bottom first)"""
        return self._layers.uuids()

    def has_layer_uuid(self, uuid: str) -> bool:
        return uuid in self._layers

    def get_layer_index_by_uuid(self, uuid: str) -> Optional[int]:
        return self._layers.get_index_by_uuid(uuid)

    def get_uuid_at_index(self, index: int) -> Optional[str]:
        if 0 <= index < len(self._layers):
            return self._layers[index].uuid
        return None

    def get_layer(self, uuid: str) -> Dict:
        """Get a detached copy of a layer's data

        Raises:
            LayerNotFoundError: If UUID not found
        """
        return self._require_layer(uuid).to_dict()

    def get_layer_name(self, uuid: str) -> str:
        return self._require_layer(uuid).name

    def get_layer_kind(self, uuid: str) -> LayerKind:
        return self._require_layer(uuid).kind

    def is_layer_visible(self, uuid: str) -> bool:
        return self._require_layer(uuid).visible

    def is_layer_locked(self, uuid: str) -> bool:
        return self._require_layer(uuid).locked

    def get_layer_opacity(self, uuid: str) -> int:
        return self._require_layer(uuid).opacity

    def get_layer_position(self, uuid: str) -> Vec2:
        return self._require_layer(uuid).position

    def get_layer_size(self, uuid: str) -> Size:
        return self._require_layer(uuid).size

    def get_layer_rotation(self, uuid: str) -> int:
        return self._require_layer(uuid).rotation

    def get_layer_image(self, uuid: str) -> Optional[str]:
        return self._require_layer(uuid).image_ref

    def get_layer_content(self, uuid: str) -> Dict[str, str]:
        return self._require_layer(uuid).content

    def find_topmost_layer_at(self, x: float, y: float) -> Optional[str]:
        """Find the topmost visible layer whose box contains a proof-local point

        Rotation is ignored; hit testing uses the unrotated bounding box.

        Returns:
            UUID of the layer, or None if the point hits no visible layer
        """
        for layer in reversed(list(self._layers)):
            if not layer.visible:
                continue
            px, py = layer.position
            width, height = layer.size
            if px <= x < px + width and py <= y < py + height:
                return layer.uuid
        return None
