"""
VECtools

A small toolkit for immutable N-dimensional vector arithmetic.
"""

from .vector import Vector

__version__ = "0.1.0"

__all__ = [
    'Vector',
]
