"""
ProofStudio - Data Models

This module contains the data model classes for the proof.
This is the MODEL in MVC architecture.

Public API: import ProofDocument, Layer, Layers, LayerKind from models.proof
"""

from .proof import ProofDocument, Layer, Layers, LayerKind
from .tool_state import ToolState, ToolMode
from .errors import ProofError, LayerNotFoundError, InvalidSelectionError, OutOfRangeError

__all__ = [
    'ProofDocument', 'Layer', 'Layers', 'LayerKind',
    'ToolState', 'ToolMode',
    'ProofError', 'LayerNotFoundError', 'InvalidSelectionError', 'OutOfRangeError',
]
