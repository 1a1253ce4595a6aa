"""Spatial elementary transforms.

Each factory returns a one-element sequence::

    from jax_ets.ets3 import Rz, Ry, Tz

    E = Rz("q1") * Ry("q2") * Tz(0.5) * Ry("q3")

A string value of the form ``"qN"`` makes the element a joint driven by
``q[N-1]``; anything else is a constant.
"""

from .core import SPATIAL, ETS, elementary


def Tx(value, qlim=None) -> ETS:
    return elementary(SPATIAL, "Tx", value, qlim)


def Ty(value, qlim=None) -> ETS:
    return elementary(SPATIAL, "Ty", value, qlim)


def Tz(value, qlim=None) -> ETS:
    return elementary(SPATIAL, "Tz", value, qlim)


def Rx(value, qlim=None) -> ETS:
    return elementary(SPATIAL, "Rx", value, qlim)


def Ry(value, qlim=None) -> ETS:
    return elementary(SPATIAL, "Ry", value, qlim)


def Rz(value, qlim=None) -> ETS:
    return elementary(SPATIAL, "Rz", value, qlim)


def Translation(axis, value, qlim=None) -> ETS:
    """Translation along ``axis`` ("x", "y", "z" or "Tx", "Ty", "Tz")."""
    return elementary(SPATIAL, axis, value, qlim, family="T")


def Rotation(axis, value, qlim=None) -> ETS:
    """Rotation about ``axis`` ("x", "y", "z" or "Rx", "Ry", "Rz")."""
    return elementary(SPATIAL, axis, value, qlim, family="R")


def empty() -> ETS:
    return ETS.empty(SPATIAL)
