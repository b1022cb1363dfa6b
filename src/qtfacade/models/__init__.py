"""
Models - Pure Python dataclasses describing layouts and window defaults.

No Qt dependencies in this package.
"""

from .layout import LayoutSpec, LayoutKind, Constraints, ALIGNMENTS
from .config import FrameConfig

__all__ = [
    "LayoutSpec",
    "LayoutKind",
    "Constraints",
    "ALIGNMENTS",
    "FrameConfig",
]
