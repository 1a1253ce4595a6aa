"""Planar elementary transforms.

Each factory returns a one-element sequence, so a planar arm reads as
written on paper::

    from jax_ets.ets2 import Rz, Tx

    E = Rz("q1") * Tx(1.0) * Rz("q2") * Tx(1.0)

A string value of the form ``"qN"`` makes the element a joint driven by
``q[N-1]``; anything else is a constant.
"""

from .core import PLANAR, ETS, elementary


def Tx(value, qlim=None) -> ETS:
    return elementary(PLANAR, "Tx", value, qlim)


def Ty(value, qlim=None) -> ETS:
    return elementary(PLANAR, "Ty", value, qlim)


def Rz(value, qlim=None) -> ETS:
    return elementary(PLANAR, "Rz", value, qlim)


R = Rz


def Translation(axis, value, qlim=None) -> ETS:
    """Translation along ``axis`` ("x", "y", "Tx" or "Ty")."""
    return elementary(PLANAR, axis, value, qlim, family="T")


def Rotation(axis, value, qlim=None) -> ETS:
    """Rotation about ``axis``; only "z" (or "Rz") exists in the plane."""
    return elementary(PLANAR, axis, value, qlim, family="R")


def empty() -> ETS:
    return ETS.empty(PLANAR)
