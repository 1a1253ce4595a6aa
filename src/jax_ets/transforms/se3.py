"""SE(3) homogeneous transforms.

The constructors are generic over the scalar backend and build the
elementary 4x4 transforms of a spatial sequence.
"""

from typing import Any

from . import so3
from .scalar import NUMERIC, ScalarOps


def trans(axis: int, d: Any, ops: ScalarOps = NUMERIC) -> Any:
    """
    Pure translation by ``d`` along coordinate axis ``axis``.

    Args:
        axis: 0 (x), 1 (y) or 2 (z)
        d: offset along the axis
        ops: scalar backend

    Returns:
        4x4 homogeneous transform
    """
    t = [0, 0, 0]
    t[axis] = d
    return ops.matrix([
        [1, 0, 0, t[0]],
        [0, 1, 0, t[1]],
        [0, 0, 1, t[2]],
        [0, 0, 0, 1],
    ])


def from_rotation(R: Any, ops: ScalarOps = NUMERIC) -> Any:
    """Embed a 3x3 rotation in a 4x4 transform with zero translation."""
    rows = [[R[i, j] for j in range(3)] + [0] for i in range(3)]
    rows.append([0, 0, 0, 1])
    return ops.matrix(rows)


def rot(axis: int, theta: Any, ops: ScalarOps = NUMERIC) -> Any:
    """
    Pure rotation by ``theta`` radians about coordinate axis ``axis``.

    Args:
        axis: 0 (x), 1 (y) or 2 (z)
        theta: rotation angle in radians
        ops: scalar backend

    Returns:
        4x4 homogeneous transform
    """
    return from_rotation(so3.rot(axis, theta, ops), ops)
