"""
Proof Internal Package - DO NOT IMPORT FROM HERE

This package contains INTERNAL implementation for the proof model:
- layer.py: Layer and Layers data structures

Import from models.proof (the public API):
    from models.proof import ProofDocument, Layer, Layers, LayerKind
"""

# This package is internal - do not populate __all__
# External code must use models.proof
