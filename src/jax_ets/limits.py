"""Joint-limit checks and defaults for consumers that pose or animate a chain.

A renderer that draws prismatic joints as boxes scaled relative to their
starting length needs every prismatic joint to have limits and a strictly
positive value; these helpers check that up front so the error surfaces
before any drawing starts.
"""

import math
from logging import getLogger
from typing import Any, List

import numpy as np

from .core import ETS
from .errors import InvalidLimits, JointIndexOutOfBounds, JointOutOfRange
from .introspection import is_prismatic, is_revolute, njoints

logger = getLogger(__name__)


def check_limits(ets: ETS) -> None:
    """Require limits with a non-empty interval on every prismatic joint.

    Raises:
        InvalidLimits: a prismatic joint has no limits or ``min == max``
    """
    for e in ets:
        if not is_prismatic(e):
            continue
        if e.qlim is None:
            raise InvalidLimits(f"prismatic joint {e.label()} has no limits")
        if e.qlim[0] == e.qlim[1]:
            raise InvalidLimits(f"prismatic joint {e.label()} has an empty limit interval {e.qlim}")


def check_configuration(ets: ETS, q: Any, unit: str = "rad") -> None:
    """Check a configuration against the joints of a sequence.

    Prismatic joints must have limits, and their values must lie within
    them and be strictly positive.
    Revolute values must lie within their limits, or within [-pi, pi]
    (expressed in ``unit``) when the joint has none.

    Raises:
        JointIndexOutOfBounds: ``q`` shorter than ``njoints(ets)``
        InvalidLimits: a prismatic joint has no limits
        JointOutOfRange: a value violates its joint's interval
    """
    q = np.atleast_1d(np.asarray(q, dtype=float))
    nj = njoints(ets)
    if q.shape[0] < nj:
        raise JointIndexOutOfBounds(f"'{ets}' has {nj} joints but the configuration has {q.shape[0]} entries")
    if unit not in ("rad", "deg"):
        raise ValueError(f"unit must be 'rad' or 'deg', got '{unit}'")
    half_turn = math.pi if unit == "rad" else 180.0

    for e in ets:
        if is_prismatic(e):
            if e.qlim is None:
                raise InvalidLimits(f"prismatic joint {e.label()} has no limits")
            v = q[e.joint - 1]
            if not e.qlim[0] <= v <= e.qlim[1]:
                raise JointOutOfRange(f"{e.label()} = {v:g} outside limits {e.qlim}")
            if v <= 0:
                raise JointOutOfRange(f"{e.label()} = {v:g} must be positive")
        elif is_revolute(e):
            v = q[e.joint - 1]
            lo, hi = e.qlim if e.qlim is not None else (-half_turn, half_turn)
            if not lo <= v <= hi:
                raise JointOutOfRange(f"{e.label()} = {v:g} outside [{lo:g}, {hi:g}]")


def default_configuration(ets: ETS) -> np.ndarray:
    """Starting configuration for display.

    Zero for every joint, except prismatic joints and revolute joints whose
    limits exclude zero, which start at the middle of their limits.
    """
    q = np.zeros(njoints(ets))
    for e in ets:
        if e.qlim is None:
            continue
        lo, hi = e.qlim
        if is_prismatic(e) or lo > 0 or hi < 0:
            q[e.joint - 1] = 0.5 * (lo + hi)
    logger.debug("default configuration for %s: %s", ets, q)
    return q


def reach(ets: ETS) -> float:
    """Upper bound on the distance from base to tip.

    Sum of the absolute translation constants plus the upper limit of every
    prismatic joint. Rotations do not add length.

    Raises:
        InvalidLimits: a prismatic joint has no limits
    """
    lengths: List[float] = []
    for e in ets:
        if not e.kind.is_translation:
            continue
        if is_prismatic(e):
            if e.qlim is None:
                raise InvalidLimits(f"prismatic joint {e.label()} has no limits")
            lengths.append(abs(e.qlim[1]))
        else:
            lengths.append(abs(float(e.role.value)))
    return float(sum(lengths))
