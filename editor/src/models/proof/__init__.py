"""Proof model mixins package"""

from .query_mixin import ProofQueryMixin
from .layer_mixin import ProofLayerMixin
from .selection_mixin import ProofSelectionMixin
from .core import ProofDocument
from ._internal.layer import Layer, Layers, LayerKind, EDITABLE_FIELDS, TRANSFORM_FIELDS

__all__ = [
    'ProofDocument',
    'Layer',
    'Layers',
    'LayerKind',
    'EDITABLE_FIELDS',
    'TRANSFORM_FIELDS',
    'ProofQueryMixin',
    'ProofLayerMixin',
    'ProofSelectionMixin',
]
