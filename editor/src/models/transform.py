"""Geometry data structures for proof-local coordinates and proof dimensions."""
import math
from dataclasses import dataclass
from typing import Dict, Optional

from constants import (
    PROOF_WIDTH_INCHES, PROOF_HEIGHT_INCHES, PROOF_DPI, PROOF_DISPLAY_WIDTH
)


@dataclass(frozen=True)
class Vec2:
    """2D integer vector for proof-local positions.

    Proof-local space has its origin at the top-left corner of the proof,
    one unit per proof pixel. Positions are not bounded to the proof.
    """
    x: int
    y: int

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))


@dataclass(frozen=True)
class Size:
    """Width/height pair in proof pixels."""
    width: int
    height: int

    def __iter__(self):
        """Allow tuple unpacking: w, h = size"""
        return iter((self.width, self.height))


@dataclass(frozen=True)
class ProofGeometry:
    """Fixed logical size of the proof surface.

    The proof is a physical sheet (inches) sampled at a notional DPI.
    Display values describe how the proof is shown at 100% zoom.
    """
    width_in: float = PROOF_WIDTH_INCHES
    height_in: float = PROOF_HEIGHT_INCHES
    dpi: int = PROOF_DPI
    display_width: int = PROOF_DISPLAY_WIDTH

    def __post_init__(self):
        if not (0 < self.width_in < math.inf and 0 < self.height_in < math.inf):
            raise ValueError(f"Proof size must be positive and finite, got {self.width_in}x{self.height_in}")
        if not 0 < self.dpi < math.inf:
            raise ValueError(f"Proof DPI must be positive and finite, got {self.dpi}")
        if not 0 < self.display_width < math.inf:
            raise ValueError(f"Display width must be positive and finite, got {self.display_width}")

    @property
    def width_px(self) -> int:
        return round(self.width_in * self.dpi)

    @property
    def height_px(self) -> int:
        return round(self.height_in * self.dpi)

    @property
    def display_scale(self) -> float:
        """Display pixels per proof pixel at 100% zoom"""
        return self.display_width / self.width_px

    @property
    def display_height(self) -> int:
        return round(self.height_px * self.display_scale)

    @property
    def label(self) -> str:
        """Human readable size, e.g. 17" × 11\""""
        return f'{self.width_in:g}" × {self.height_in:g}"'

    @classmethod
    def from_config(cls, config: Optional[Dict]) -> 'ProofGeometry':
        """Build geometry from the 'proof' section of the config file

        Missing keys fall back to the defaults in constants.py.

        Args:
            config: Dictionary with optional width_in, height_in, dpi, display_width
        """
        if not config:
            return cls()
        if not isinstance(config, dict):
            raise TypeError(f"Proof config must be an object, got {type(config).__name__}")
        return cls(
            width_in=config.get('width_in', PROOF_WIDTH_INCHES),
            height_in=config.get('height_in', PROOF_HEIGHT_INCHES),
            dpi=config.get('dpi', PROOF_DPI),
            display_width=config.get('display_width', PROOF_DISPLAY_WIDTH),
        )
