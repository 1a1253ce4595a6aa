"""SE(2) homogeneous transforms for planar sequences.

A planar pose is a 3x3 matrix ``[[R, t], [0, 1]]`` with ``R`` a 2x2
rotation about the out-of-plane axis.
"""

from typing import Any

from .scalar import NUMERIC, ScalarOps


def trans(axis: int, d: Any, ops: ScalarOps = NUMERIC) -> Any:
    """
    Pure translation by ``d`` along in-plane axis ``axis``.

    Args:
        axis: 0 (x) or 1 (y)
        d: offset along the axis
        ops: scalar backend

    Returns:
        3x3 homogeneous transform
    """
    t = [0, 0]
    t[axis] = d
    return ops.matrix([
        [1, 0, t[0]],
        [0, 1, t[1]],
        [0, 0, 1],
    ])


def rot(theta: Any, ops: ScalarOps = NUMERIC) -> Any:
    """
    Pure rotation by ``theta`` radians about the out-of-plane axis.

    Args:
        theta: rotation angle in radians
        ops: scalar backend

    Returns:
        3x3 homogeneous transform
    """
    c, s = ops.cos(theta), ops.sin(theta)
    return ops.matrix([
        [c, -s, 0],
        [s, c, 0],
        [0, 0, 1],
    ])
