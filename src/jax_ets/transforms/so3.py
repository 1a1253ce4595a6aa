"""Single-axis rotations in 3D.

These are the elementary rotations a transform sequence is built from.
Each function takes the scalar backend to build with, so the same code
produces a JAX array for numeric angles and a sympy matrix for symbolic
ones.
"""

from typing import Any

from .scalar import NUMERIC, ScalarOps


def rot_x(theta: Any, ops: ScalarOps = NUMERIC) -> Any:
    """
    Rotation about the x-axis.

    Args:
        theta: rotation angle in radians
        ops: scalar backend

    Returns:
        3x3 rotation matrix
    """
    c, s = ops.cos(theta), ops.sin(theta)
    return ops.matrix([
        [1, 0, 0],
        [0, c, -s],
        [0, s, c],
    ])


def rot_y(theta: Any, ops: ScalarOps = NUMERIC) -> Any:
    """
    Rotation about the y-axis.

    Args:
        theta: rotation angle in radians
        ops: scalar backend

    Returns:
        3x3 rotation matrix
    """
    c, s = ops.cos(theta), ops.sin(theta)
    return ops.matrix([
        [c, 0, s],
        [0, 1, 0],
        [-s, 0, c],
    ])


def rot_z(theta: Any, ops: ScalarOps = NUMERIC) -> Any:
    """
    Rotation about the z-axis.

    Args:
        theta: rotation angle in radians
        ops: scalar backend

    Returns:
        3x3 rotation matrix
    """
    c, s = ops.cos(theta), ops.sin(theta)
    return ops.matrix([
        [c, -s, 0],
        [s, c, 0],
        [0, 0, 1],
    ])


def rot(axis: int, theta: Any, ops: ScalarOps = NUMERIC) -> Any:
    """Rotation about coordinate axis 0 (x), 1 (y) or 2 (z)."""
    return (rot_x, rot_y, rot_z)[axis](theta, ops)
