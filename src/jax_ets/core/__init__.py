"""Core data structures for elementary transform sequences.

Elements and sequences are immutable and hold only static structure; all
evaluation lives in ``jax_ets.chain``.
"""

from .element import (
    PLANAR,
    SPATIAL,
    Constant,
    Dimension,
    Joint,
    TransformElement,
    TransformKind,
    check_qlim,
    make_element,
    parse_joint_token,
)
from .sequence import ETS, combine, elementary

__all__ = [
    "PLANAR",
    "SPATIAL",
    "Constant",
    "Dimension",
    "ETS",
    "Joint",
    "TransformElement",
    "TransformKind",
    "check_qlim",
    "combine",
    "elementary",
    "make_element",
    "parse_joint_token",
]
