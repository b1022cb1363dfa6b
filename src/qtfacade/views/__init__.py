"""
Views - The name-addressed window facade.
"""

from .frame import Frame, create_frame

__all__ = ["Frame", "create_frame"]
