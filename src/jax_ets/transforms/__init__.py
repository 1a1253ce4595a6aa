"""
Homogeneous-transform utilities for elementary transform sequences.

This module provides:
- scalar backends (numeric JAX and symbolic sympy) shared by all builders
- SO(3) single-axis rotations (so3 module)
- SE(2) planar transforms (se2 module)
- SE(3) rigid body transforms (se3 module)

All functions are pure and stateless.
"""

from . import so3
from . import se2
from . import se3
from .scalar import NUMERIC, SYMBOLIC, NumericOps, ScalarOps, SymbolicOps

__all__ = [
    "so3",
    "se2",
    "se3",
    "NUMERIC",
    "SYMBOLIC",
    "NumericOps",
    "ScalarOps",
    "SymbolicOps",
]
