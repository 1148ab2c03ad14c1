"""
VECtools Vector Module

Provides an immutable N-dimensional vector with element-wise arithmetic
(add, sub, mul, div, clamp), reductions (fold, reduce, dot, magnitude) and
comparisons over vectors of any, possibly mismatched, dimension.
"""

# Import main classes
from .operations import Vector

# Import core functions for advanced users
from .core_functions import (
    zip_with_core,
    fold_core,
    strip_fill_core,
)

# Define public API
__all__ = [
    'Vector',
    # Core functions for advanced use
    'zip_with_core',
    'fold_core',
    'strip_fill_core',
]
