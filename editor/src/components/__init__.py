"""UI components for ProofStudio

Widgets read from the ProofDocument and route edits through the main
window's LayerActions and ActionDispatcher.
"""

from .canvas_area import CanvasArea
from .canvas_widget import ProofCanvas
from .layer_panel import LayerPanel
from .property_sidebar import PropertySidebar
from .toolbar import ProofToolbar
from .zoom_toolbar import ZoomToolbar

__all__ = [
    'CanvasArea',
    'ProofCanvas',
    'LayerPanel',
    'PropertySidebar',
    'ProofToolbar',
    'ZoomToolbar',
]
