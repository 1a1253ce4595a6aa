"""Core kinematics algorithms: Forward Kinematics and Jacobian computation.

This module evaluates a transform sequence at a configuration. Both
algorithms walk the sequence once from base to tip, composing elementary
transforms by right-multiplication, and are written against a scalar
backend: with the default ``NUMERIC`` backend they operate on JAX arrays and
can be wrapped in ``jax.jit``, ``jax.vmap`` or ``jax.jacfwd``; with
``SYMBOLIC`` they return sympy matrices.
"""

import operator
from logging import getLogger
from typing import Any, Optional

from .core import ETS, SPATIAL, Dimension, TransformElement
from .errors import InvalidPrefixLength, InvalidTargetElement, JointIndexOutOfBounds
from .introspection import is_joint, is_prismatic, njoints, structure
from .transforms import se2, se3
from .transforms.scalar import NUMERIC, ScalarOps

logger = getLogger(__name__)

UNITS = ("rad", "deg")


def _check_unit(unit: str) -> None:
    if unit not in UNITS:
        raise ValueError(f"unit must be one of {UNITS}, got '{unit}'")


def _check_position(ets: ETS, n: Optional[int], error: type, what: str) -> int:
    """Resolve a 1-based element position, defaulting to the whole sequence."""
    if n is None:
        n = len(ets)
    try:
        n = operator.index(n)
    except TypeError:
        raise error(f"{what} must be an integer, got {n!r}") from None
    if not 1 <= n <= len(ets):
        raise error(f"{what} {n} outside [1, {len(ets)}] for '{ets}'")
    return n


def _joint_value(element: TransformElement, q: Any) -> Any:
    j = element.joint
    if j is None:
        return element.role.value
    if j > len(q):
        raise JointIndexOutOfBounds(
            f"{element.label()} needs q{j} but the configuration has {len(q)} entries"
        )
    return q[j - 1]


def _elementary(dim: Dimension, element: TransformElement, v: Any, unit: str, ops: ScalarOps) -> Any:
    kind = element.kind
    if kind.is_rotation and unit == "deg":
        v = v * ops.pi / 180
    if dim.pose_size == 3:
        if kind.is_translation:
            return se2.trans(kind.axis, v, ops)
        return se2.rot(v, ops)
    if kind.is_translation:
        return se3.trans(kind.axis, v, ops)
    return se3.rot(kind.axis, v, ops)


def element_transform(
    element: TransformElement,
    q: Any = None,
    dim: Dimension = SPATIAL,
    *,
    unit: str = "rad",
    ops: ScalarOps = NUMERIC,
) -> Any:
    """Homogeneous transform of a single element.

    Args:
        element: the element to evaluate
        q: joint value for a joint element; ignored for a constant
        dim: dimensionality fixing the matrix size (3x3 or 4x4)
        unit: "rad" or "deg", applies to rotations only
        ops: scalar backend

    Returns:
        Pose matrix of the element alone
    """
    _check_unit(unit)
    v = q if is_joint(element) else element.role.value
    if v is None:
        raise ValueError(f"{element.label()} is a joint and needs a value")
    return _elementary(dim, element, v, unit, ops)


def forward_kinematics(
    ets: ETS,
    q: Any,
    n: Optional[int] = None,
    *,
    unit: str = "rad",
    ops: ScalarOps = NUMERIC,
) -> Any:
    """Pose of the frame after the first ``n`` elements.

    Args:
        ets: the transform sequence
        q: configuration vector; ``q[j-1]`` drives every element using joint j
        n: number of elements to compose, in ``[1, len(ets)]``; default all
        unit: "rad" or "deg", how rotational values are given
        ops: scalar backend

    Returns:
        3x3 (planar) or 4x4 (spatial) homogeneous pose in the base frame

    Raises:
        InvalidPrefixLength: ``n`` outside ``[1, len(ets)]``
        JointIndexOutOfBounds: ``q`` lacks an entry a composed joint needs
    """
    _check_unit(unit)
    n = _check_position(ets, n, InvalidPrefixLength, "prefix length")
    q = ops.vector(q)

    T = ops.eye(ets.dim.pose_size)
    for element in ets.elements[:n]:
        T = T @ _elementary(ets.dim, element, _joint_value(element, q), unit, ops)
    return T


def forward_kinematics_all(
    ets: ETS,
    q: Any,
    *,
    unit: str = "rad",
    ops: ScalarOps = NUMERIC,
) -> Any:
    """Poses of the base and of every prefix of the sequence.

    Entry ``k`` is the pose after ``k`` elements, entry 0 being the base
    (identity). Renderers place element ``k+1`` at entry ``k``.

    Returns:
        Array of shape (len(ets) + 1, m, m) for NUMERIC, list of matrices for
        SYMBOLIC
    """
    _check_unit(unit)
    q = ops.vector(q)

    T = ops.eye(ets.dim.pose_size)
    poses = [T]
    for element in ets.elements:
        T = T @ _elementary(ets.dim, element, _joint_value(element, q), unit, ops)
        poses.append(T)
    return ops.stack(poses)


def _column(dim: Dimension, element: TransformElement, T: Any, lever: list) -> list:
    """Jacobian column of one joint.

    ``T`` is the pose just before the joint, ``lever`` the vector from the
    joint origin to the target origin, in the base frame.
    """
    k = element.kind.axis
    if dim.pose_size == 3:
        if is_prismatic(element):
            return [0, T[0, k], T[1, k]]
        # z x (rx, ry, 0)
        return [1, -lever[1], lever[0]]

    z = [T[i, k] for i in range(3)]
    if is_prismatic(element):
        return [0, 0, 0] + z
    return z + [
        z[1] * lever[2] - z[2] * lever[1],
        z[2] * lever[0] - z[0] * lever[2],
        z[0] * lever[1] - z[1] * lever[0],
    ]


def jacobian(
    ets: ETS,
    q: Any,
    end: Optional[int] = None,
    *,
    ops: ScalarOps = NUMERIC,
) -> Any:
    """Geometric Jacobian of the frame after element ``end``, in the base frame.

    Rows are angular velocity then linear velocity: ``(wz, vx, vy)`` for a
    planar sequence, ``(wx, wy, wz, vx, vy, vz)`` for a spatial one. Column
    ``j-1`` belongs to joint ``j``; joints not composed before ``end`` and
    unused indices give zero columns, joints shared by several elements add
    their contributions. Joint values are in radians.

    Args:
        ets: the transform sequence
        q: configuration vector of at least ``njoints(ets)`` entries
        end: target element, in ``[1, len(ets)]``; default the tip
        ops: scalar backend

    Returns:
        (3, njoints) or (6, njoints) matrix

    Raises:
        InvalidTargetElement: ``end`` outside ``[1, len(ets)]``
        JointIndexOutOfBounds: ``q`` shorter than ``njoints(ets)``
    """
    end = _check_position(ets, end, InvalidTargetElement, "target element")
    nj = njoints(ets)
    q = ops.vector(q)
    if len(q) < nj:
        raise JointIndexOutOfBounds(f"'{ets}' has {nj} joints but the configuration has {len(q)} entries")
    logger.debug("jacobian of %s (%s) at element %d of %d", ets.dim.name, structure(ets), end, len(ets))

    dim = ets.dim
    d = dim.ndim

    # Single pass: remember the pose in front of every joint
    T = ops.eye(dim.pose_size)
    joints = []
    for element in ets.elements[:end]:
        if is_joint(element):
            joints.append((element, T))
        T = T @ _elementary(dim, element, _joint_value(element, q), "rad", ops)
    p_end = [T[i, d] for i in range(d)]

    columns = [[0] * dim.jacobian_rows for _ in range(nj)]
    for element, T_joint in joints:
        lever = [p_end[i] - T_joint[i, d] for i in range(d)]
        col = _column(dim, element, T_joint, lever)
        j = element.joint - 1
        columns[j] = [a + b for a, b in zip(columns[j], col)]

    return ops.matrix([[columns[j][r] for j in range(nj)] for r in range(dim.jacobian_rows)])
