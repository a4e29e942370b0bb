"""
ProofStudio - Constants and Configuration

This module contains all constant values used throughout the application:
- Proof geometry (physical size, DPI, display size)
- Layer kinds, default names and seed layers
- Min/max values and constraints for layer properties
- Canvas display constants
"""

# ======================================================================
# PROOF GEOMETRY
# ======================================================================
# Proof dimensions: 17" x 11" at 96 DPI = 1632 x 1056 proof pixels.
# The canvas shows the proof scaled down to DISPLAY_WIDTH at 100% zoom.

PROOF_WIDTH_INCHES = 17
PROOF_HEIGHT_INCHES = 11
PROOF_DPI = 96
PROOF_DISPLAY_WIDTH = 680

# ======================================================================
# LAYER KINDS
# ======================================================================

LAYER_KIND_BACKGROUND = 'background'
LAYER_KIND_PRODUCT = 'product'
LAYER_KIND_DESIGN = 'design'

# Placeholder label shown on the canvas when a layer has no image
LAYER_KIND_LABELS = {
    LAYER_KIND_BACKGROUND: 'Business Background',
    LAYER_KIND_PRODUCT: 'Product Photo',
    LAYER_KIND_DESIGN: 'Logo/Design',
}

# Kind-specific content fields and their defaults
LAYER_CONTENT_DEFAULTS = {
    LAYER_KIND_BACKGROUND: {'fill': 'color', 'company_name': '', 'tagline': ''},
    LAYER_KIND_PRODUCT: {'product_type': ''},
    LAYER_KIND_DESIGN: {'placement': 'front'},
}

# Content fields restricted to a closed set of values
LAYER_CONTENT_CHOICES = {
    'fill': ('color', 'image'),
    'placement': ('front', 'back'),
}

# ======================================================================
# LAYER PROPERTY LIMITS
# ======================================================================

MIN_OPACITY = 0
MAX_OPACITY = 100
DEFAULT_OPACITY = 100

MIN_ROTATION = -360
MAX_ROTATION = 360
DEFAULT_ROTATION = 0

DEFAULT_POSITION_X = 0
DEFAULT_POSITION_Y = 0
DEFAULT_LAYER_WIDTH = 400
DEFAULT_LAYER_HEIGHT = 300

# Arrow key nudge in proof pixels
ARROW_KEY_MOVE_NORMAL = 1
ARROW_KEY_MOVE_FINE = 10  # With Shift modifier

# ======================================================================
# SEED LAYERS
# ======================================================================
# Paint order: first entry paints first (bottom of the stack).

INITIAL_LAYERS = [
    {
        'uuid': 'background-1',
        'name': 'Business Background',
        'kind': LAYER_KIND_BACKGROUND,
        'position': (0, 0),
        'size': (1632, 1056),
    },
    {
        'uuid': 'product-1',
        'name': 'Product Photo',
        'kind': LAYER_KIND_PRODUCT,
        'position': (416, 128),
        'size': (800, 800),
    },
    {
        'uuid': 'design-1',
        'name': 'Front Logo',
        'kind': LAYER_KIND_DESIGN,
        'position': (616, 378),
        'size': (400, 300),
    },
]

INITIAL_ACTIVE_LAYER = 'background-1'
INITIAL_TOOL = 'select'

# ======================================================================
# CANVAS DISPLAY
# ======================================================================

GRID_SPACING = 20  # Display pixels between grid lines
GRID_OPACITY = 0.2
SELECTION_HANDLE_SIZE = 8
ZOOM_PRESETS = [25, 50, 100, 150, 200, 300, 400, 500]
MIN_ZOOM_PERCENT = 25
MAX_ZOOM_PERCENT = 500
DEFAULT_ZOOM_PERCENT = 100

# Notification display time in the status bar (milliseconds)
NOTIFICATION_TIMEOUT_MS = 3000

# ======================================================================
# APPLICATION
# ======================================================================

APP_TITLE = 'ProofStudio'
APP_SUBTITLE = 'Professional Promotional Products Proofing'
DEFAULT_PROJECT_NAME = 'Untitled Project'
CONFIG_DIR_NAME = '.proofstudio'
MAX_RECENT_ASSETS = 10
IMAGE_FILE_FILTER = "Images (*.png *.jpg *.jpeg *.bmp *.gif *.webp);;All Files (*)"
