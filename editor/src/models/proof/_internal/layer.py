"""
ProofStudio - Layer Data Model

Provides object-oriented interface to layer data with:
- Bounds checking and validation for every editable property
- Kind-specific content fields (background / product / design)
- Flat dict storage suitable for snapshots
- UUID-based identification (stable across reordering)

This is part of the MODEL layer - pure data, no UI logic.

Usage:
    layer = Layer({'kind': 'product', 'name': 'Product Photo'})

    layer.position = Vec2(10, 20)
    layer.opacity = 150          # clamped to 100

    # Validate a partial update without touching the layer
    changes = layer.normalize_changes({'opacity': 50, 'size': (200, 100)})
    layer.apply_changes(changes)

    data = layer.to_dict()
"""

import copy
import math
import logging
import uuid as uuid_module
from enum import Enum
from typing import Dict, List, Optional, Any, Iterable

from constants import (
    LAYER_KIND_BACKGROUND, LAYER_KIND_PRODUCT, LAYER_KIND_DESIGN,
    LAYER_KIND_LABELS, LAYER_CONTENT_DEFAULTS, LAYER_CONTENT_CHOICES,
    MIN_OPACITY, MAX_OPACITY, DEFAULT_OPACITY,
    MIN_ROTATION, MAX_ROTATION, DEFAULT_ROTATION,
    DEFAULT_POSITION_X, DEFAULT_POSITION_Y,
    DEFAULT_LAYER_WIDTH, DEFAULT_LAYER_HEIGHT
)
from models.errors import OutOfRangeError
from models.transform import Vec2, Size


logger = logging.getLogger('Layer')


class LayerKind(str, Enum):
    """Closed set of layer kinds. Fixed when the layer is created."""
    BACKGROUND = LAYER_KIND_BACKGROUND
    PRODUCT = LAYER_KIND_PRODUCT
    DESIGN = LAYER_KIND_DESIGN

    @property
    def label(self) -> str:
        """Placeholder label for a layer of this kind"""
        return LAYER_KIND_LABELS[self.value]


# Fields a caller may change through Layer.normalize_changes / apply_changes
EDITABLE_FIELDS = (
    'name', 'position', 'size', 'opacity', 'image_ref',
    'rotation', 'flip_x', 'flip_y', 'content'
)

# Fields the edit UI must refuse to change while a layer is locked
TRANSFORM_FIELDS = ('position', 'size', 'rotation', 'flip_x', 'flip_y')


def _int_pair(field: str, value):
    try:
        first, second = value
        return int(first), int(second)
    except (TypeError, ValueError, OverflowError):
        raise OutOfRangeError(field, value, f"'{field}' must be a pair of finite numbers, got {value!r}")


def _to_vec2(value) -> Vec2:
    if isinstance(value, Vec2):
        return value
    return Vec2(*_int_pair('position', value))


def _to_size(value) -> Size:
    if isinstance(value, Size):
        width, height = value.width, value.height
    else:
        width, height = _int_pair('size', value)
    if width <= 0 or height <= 0:
        raise OutOfRangeError('size', (width, height),
                              f"Layer size must be positive, got {width}x{height}")
    return Size(width, height)


def _clamp_int(field: str, value, minimum: int, maximum: int) -> int:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise OutOfRangeError(field, value, f"'{field}' must be a number, got {value!r}")
    if math.isnan(number):
        raise OutOfRangeError(field, value, f"'{field}' must be a number, got {value!r}")
    # Infinities clamp like any other out-of-range value
    clamped = int(round(max(minimum, min(maximum, number))))
    if not minimum <= number <= maximum:
        logger.warning(f"{field} {value!r} clamped to {clamped}")
    return clamped


class Layer:
    """Object-oriented wrapper for layer data

    Provides property-based access to layer data with:
    - Bounds checking and validation
    - UUID-based identification (stable across reordering)

    Properties:
        uuid, kind (immutable)
        name, visible, locked, opacity, image_ref,
        position (Vec2), size (Size), rotation, flip_x, flip_y, content
    """

    def __init__(self, data: Optional[Dict] = None):
        """Initialize layer from dictionary or create new

        Args:
            data: Existing layer dictionary (may be partial), or None for a
                default design layer
        """
        data = dict(data) if data else {}

        kind = LayerKind(data.get('kind', LAYER_KIND_DESIGN))
        self._data = self._create_default(kind)

        # Preserve an existing UUID, generate one otherwise
        if data.get('uuid'):
            self._data['uuid'] = str(data['uuid'])

        changes = {k: v for k, v in data.items() if k in EDITABLE_FIELDS}
        if 'content' in changes and changes['content'] is not None:
            merged = dict(self._data['content'])
            merged.update(changes['content'])
            changes['content'] = merged
        self.apply_changes(self.normalize_changes(changes))

        self._data['visible'] = bool(data.get('visible', True))
        self._data['locked'] = bool(data.get('locked', False))

    # ========================================
    # Identity (immutable)
    # ========================================

    @property
    def uuid(self) -> str:
        """Get UUID (stable identifier, never changes)"""
        return self._data['uuid']

    @property
    def kind(self) -> LayerKind:
        """Get layer kind (fixed at creation)"""
        return LayerKind(self._data['kind'])

    # ========================================
    # Editable Properties
    # ========================================

    @property
    def name(self) -> str:
        """Get layer name, defaulting to the kind's label"""
        return self._data['name'] or self.kind.label

    @name.setter
    def name(self, value: str):
        self._data['name'] = str(value).strip() if value else ''

    @property
    def visible(self) -> bool:
        return self._data['visible']

    @visible.setter
    def visible(self, value: bool):
        self._data['visible'] = bool(value)

    @property
    def locked(self) -> bool:
        return self._data['locked']

    @locked.setter
    def locked(self, value: bool):
        self._data['locked'] = bool(value)

    @property
    def opacity(self) -> int:
        """Get opacity percentage (0-100)"""
        return self._data['opacity']

    @opacity.setter
    def opacity(self, value):
        """Set opacity, clamped to 0-100"""
        self._data['opacity'] = _clamp_int('opacity', value, MIN_OPACITY, MAX_OPACITY)

    @property
    def image_ref(self) -> Optional[str]:
        """Get the external image reference, None means placeholder"""
        return self._data['image_ref']

    @image_ref.setter
    def image_ref(self, value: Optional[str]):
        self._data['image_ref'] = str(value) if value else None

    @property
    def position(self) -> Vec2:
        return self._data['position']

    @position.setter
    def position(self, value):
        self._data['position'] = _to_vec2(value)

    @property
    def size(self) -> Size:
        return self._data['size']

    @size.setter
    def size(self, value):
        """Set size. Raises OutOfRangeError for non-positive dimensions."""
        self._data['size'] = _to_size(value)

    @property
    def rotation(self) -> int:
        """Get rotation in degrees (-360 to 360)"""
        return self._data['rotation']

    @rotation.setter
    def rotation(self, value):
        self._data['rotation'] = _clamp_int('rotation', value, MIN_ROTATION, MAX_ROTATION)

    @property
    def flip_x(self) -> bool:
        return self._data['flip_x']

    @flip_x.setter
    def flip_x(self, value: bool):
        self._data['flip_x'] = bool(value)

    @property
    def flip_y(self) -> bool:
        return self._data['flip_y']

    @flip_y.setter
    def flip_y(self, value: bool):
        self._data['flip_y'] = bool(value)

    @property
    def content(self) -> Dict[str, str]:
        """Get a copy of the kind-specific content fields"""
        return dict(self._data['content'])

    @content.setter
    def content(self, value: Dict[str, str]):
        self._data['content'] = self._normalize_content(value)

    # ========================================
    # Validation
    # ========================================

    def normalize_changes(self, changes: Dict[str, Any]) -> Dict[str, Any]:
        """Validate and normalize a partial update without applying it

        Args:
            changes: Mapping of field name -> new value

        Returns:
            New dictionary with normalized values (Vec2, Size, clamped ints)

        Raises:
            ValueError: Unknown field name or invalid content
            OutOfRangeError: Size not positive, or non-numeric value
        """
        normalized = {}
        for field, value in changes.items():
            if field not in EDITABLE_FIELDS:
                raise ValueError(f"Unknown layer field '{field}'")

            if field == 'name':
                normalized[field] = str(value).strip() if value else ''
            elif field == 'position':
                normalized[field] = _to_vec2(value)
            elif field == 'size':
                normalized[field] = _to_size(value)
            elif field == 'opacity':
                normalized[field] = _clamp_int('opacity', value, MIN_OPACITY, MAX_OPACITY)
            elif field == 'rotation':
                normalized[field] = _clamp_int('rotation', value, MIN_ROTATION, MAX_ROTATION)
            elif field == 'image_ref':
                normalized[field] = str(value) if value else None
            elif field in ('flip_x', 'flip_y'):
                normalized[field] = bool(value)
            elif field == 'content':
                # Partial content update merges into current content
                merged = dict(self._data['content'])
                merged.update(value or {})
                normalized[field] = self._normalize_content(merged)
        return normalized

    def apply_changes(self, normalized: Dict[str, Any]):
        """Apply changes previously returned by normalize_changes"""
        for field, value in normalized.items():
            self._data[field] = value

    def _normalize_content(self, value: Dict[str, str]) -> Dict[str, str]:
        allowed = LAYER_CONTENT_DEFAULTS[self._data['kind']]
        result = {}
        for key, item in (value or {}).items():
            if key not in allowed:
                raise ValueError(f"'{key}' is not a content field of {self._data['kind']} layers")
            item = '' if item is None else str(item)
            choices = LAYER_CONTENT_CHOICES.get(key)
            if choices and item not in choices:
                raise ValueError(f"'{key}' must be one of {', '.join(choices)}, got {item!r}")
            result[key] = item
        # Missing keys keep their defaults
        for key, default in allowed.items():
            result.setdefault(key, default)
        return result

    # ========================================
    # Export
    # ========================================

    def _create_default(self, kind: LayerKind) -> Dict:
        """Create default layer data"""
        return {
            'uuid': str(uuid_module.uuid4()),
            'kind': kind.value,
            'name': '',
            'visible': True,
            'locked': False,
            'opacity': DEFAULT_OPACITY,
            'image_ref': None,
            'position': Vec2(DEFAULT_POSITION_X, DEFAULT_POSITION_Y),
            'size': Size(DEFAULT_LAYER_WIDTH, DEFAULT_LAYER_HEIGHT),
            'rotation': DEFAULT_ROTATION,
            'flip_x': False,
            'flip_y': False,
            'content': dict(LAYER_CONTENT_DEFAULTS[kind.value]),
        }

    def to_dict(self) -> Dict:
        """Export to a detached dictionary

        Position and size are exported as plain tuples so the result can be
        compared, copied and passed to Layer() again.
        """
        result = copy.deepcopy(self._data)
        result['name'] = self.name
        result['position'] = tuple(self.position)
        result['size'] = tuple(self.size)
        return result

    def __repr__(self):
        return (f"Layer('{self.uuid}', kind={self.kind.value}, visible={self.visible}, "
                f"locked={self.locked}, opacity={self.opacity})")


class Layers:
    """Ordered collection of Layer objects with array-like access

    Index 0 paints first (bottom of the stack), the last layer paints on top.

    Provides:
    - List-like access (indexing, iteration, len)
    - Layer management (append, insert, remove, move)
    - UUID-based lookups, enforcing UUID uniqueness
    """

    def __init__(self, data_list: Optional[Iterable[Dict]] = None):
        """Initialize from list of dictionaries

        Args:
            data_list: List of layer dictionaries, or None for empty
        """
        self._layers: List[Layer] = []

        if data_list:
            for data in data_list:
                self.append(Layer(data))

    def __len__(self) -> int:
        return len(self._layers)

    def __getitem__(self, index: int) -> Layer:
        return self._layers[index]

    def __iter__(self):
        return iter(self._layers)

    def __contains__(self, uuid: str) -> bool:
        return self.get_by_uuid(uuid) is not None

    def __repr__(self) -> str:
        return f"Layers({len(self._layers)} layers)"

    def _check_new(self, layer: Layer):
        if not isinstance(layer, Layer):
            raise TypeError(f"Expected Layer, got {type(layer)}")
        if layer.uuid in self:
            raise ValueError(f"Duplicate layer UUID '{layer.uuid}'")

    def append(self, layer: Layer):
        """Add layer on top of the stack"""
        self._check_new(layer)
        self._layers.append(layer)

    def insert(self, index: int, layer: Layer):
        """Insert layer at index"""
        self._check_new(layer)
        self._layers.insert(index, layer)

    def remove(self, layer: Layer):
        """Remove layer, keeping the relative order of the others"""
        self._layers.remove(layer)

    def move(self, from_index: int, to_index: int):
        """Move layer from one index to another"""
        layer = self._layers.pop(from_index)
        self._layers.insert(to_index, layer)

    def get_by_uuid(self, uuid: str) -> Optional[Layer]:
        """Find layer by UUID

        Returns:
            Layer with matching UUID, or None if not found
        """
        for layer in self._layers:
            if layer.uuid == uuid:
                return layer
        return None

    def get_index_by_uuid(self, uuid: str) -> Optional[int]:
        """Get index of layer with given UUID, or None if not found"""
        for i, layer in enumerate(self._layers):
            if layer.uuid == uuid:
                return i
        return None

    def uuids(self) -> List[str]:
        return [layer.uuid for layer in self._layers]

    def to_dict_list(self) -> List[Dict]:
        """Export all layers to list of dictionaries"""
        return [layer.to_dict() for layer in self._layers]
