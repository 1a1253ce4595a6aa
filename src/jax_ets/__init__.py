"""
JAX ETS: elementary transform sequences for serial kinematic chains.

A chain is written as a product of single-axis translations and rotations,
some constant and some driven by joint variables. This library computes
forward kinematics and the geometric Jacobian of such chains, planar or
spatial, numerically with JAX or symbolically with sympy.
"""

import jax
jax.config.update("jax_enable_x64", True)

from . import transforms
from . import core
from . import ets2
from . import ets3
from . import errors
from . import limits
from .chain import element_transform, forward_kinematics, forward_kinematics_all, jacobian
from .core import ETS, PLANAR, SPATIAL, TransformElement, TransformKind, combine
from .introspection import (
    find_joint,
    is_joint,
    is_prismatic,
    is_revolute,
    njoints,
    render,
    render_symbolic,
    structure,
)
from .transforms import NUMERIC, SYMBOLIC

__version__ = "0.1.0"
__all__ = [
    "transforms",
    "core",
    "ets2",
    "ets3",
    "errors",
    "limits",
    "ETS",
    "PLANAR",
    "SPATIAL",
    "TransformElement",
    "TransformKind",
    "combine",
    "element_transform",
    "forward_kinematics",
    "forward_kinematics_all",
    "jacobian",
    "find_joint",
    "is_joint",
    "is_prismatic",
    "is_revolute",
    "njoints",
    "render",
    "render_symbolic",
    "structure",
    "NUMERIC",
    "SYMBOLIC",
]
