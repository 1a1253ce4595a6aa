"""Elementary transforms: the atomic pieces of a transform sequence.

An element is a single-axis translation or rotation. Its role is either a
``Constant`` (a fixed offset or angle baked into the model) or a ``Joint``
(driven by one entry of a configuration vector, addressed by a 1-based
index).
"""

import enum
import math
import re
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

from ..errors import InvalidJointToken, InvalidLimits, InvalidTransformKind

_JOINT_TOKEN = re.compile(r"q([1-9][0-9]*)")


class TransformKind(enum.Enum):
    """Single-axis translation ``T*`` or rotation ``R*``."""

    TX = "Tx"
    TY = "Ty"
    TZ = "Tz"
    RX = "Rx"
    RY = "Ry"
    RZ = "Rz"

    @property
    def axis(self) -> int:
        """Coordinate axis index: 0 (x), 1 (y), 2 (z)."""
        return "xyz".index(self.value[1])

    @property
    def is_translation(self) -> bool:
        return self.value[0] == "T"

    @property
    def is_rotation(self) -> bool:
        return self.value[0] == "R"


@dataclass(frozen=True)
class Dimension:
    """Working dimensionality of a sequence.

    Attributes:
        name: "planar" or "spatial"
        kinds: transform kinds allowed in this dimensionality
        pose_size: side of the homogeneous pose matrix (3 or 4)
        jacobian_rows: rows of the geometric Jacobian (3 or 6)
        aliases: extra kind tokens accepted at construction
    """
    name: str
    kinds: Tuple[TransformKind, ...]
    pose_size: int
    jacobian_rows: int
    aliases: Tuple[Tuple[str, TransformKind], ...] = ()

    @property
    def ndim(self) -> int:
        """Number of translational coordinates (2 or 3)."""
        return self.pose_size - 1

    def parse_kind(self, token: Union[str, TransformKind], family: Optional[str] = None) -> TransformKind:
        """Resolve a kind token, optionally restricted to ``"T"`` or ``"R"`` kinds.

        With a family given, a bare axis letter (``"x"``) is accepted too.
        """
        if isinstance(token, TransformKind):
            kind = token
        elif isinstance(token, str):
            name = dict(self.aliases).get(token, token)
            if isinstance(name, str) and family is not None and len(name) == 1:
                name = family + name.lower()
            try:
                kind = TransformKind(name)
            except ValueError:
                raise InvalidTransformKind(
                    f"'{token}' is not a {self.name} transform kind"
                ) from None
        else:
            raise InvalidTransformKind(f"transform kind must be a string, got {token!r}")

        if kind not in self.kinds or (family is not None and kind.value[0] != family):
            raise InvalidTransformKind(f"'{kind.value}' is not allowed here for a {self.name} sequence")
        return kind


PLANAR = Dimension(
    name="planar",
    kinds=(TransformKind.TX, TransformKind.TY, TransformKind.RZ),
    pose_size=3,
    jacobian_rows=3,
    aliases=(("R", TransformKind.RZ),),
)

SPATIAL = Dimension(
    name="spatial",
    kinds=tuple(TransformKind),
    pose_size=4,
    jacobian_rows=6,
)


@dataclass(frozen=True)
class Constant:
    """Fixed parameter; contributes no configuration entry."""
    value: Any


@dataclass(frozen=True)
class Joint:
    """Joint variable ``q<index>`` with optional ``(min, max)`` limits."""
    index: int
    qlim: Optional[Tuple[float, float]] = None


@dataclass(frozen=True)
class TransformElement:
    """One elementary transform of a sequence."""
    kind: TransformKind
    role: Union[Constant, Joint]

    @property
    def is_joint(self) -> bool:
        return isinstance(self.role, Joint)

    @property
    def joint(self) -> Optional[int]:
        """1-based joint index, or None for a constant."""
        return self.role.index if isinstance(self.role, Joint) else None

    @property
    def qlim(self) -> Optional[Tuple[float, float]]:
        return self.role.qlim if isinstance(self.role, Joint) else None

    def label(self, constant: Optional[str] = None) -> str:
        """``Kind(qN)`` for a joint, ``Kind(value)`` for a constant.

        ``constant`` replaces the printed value of a constant, for
        symbolic listings.
        """
        match self.role:
            case Joint(index=index):
                arg = f"q{index}"
            case Constant(value=value):
                arg = constant if constant is not None else _format_value(value)
        return f"{self.kind.value}({arg})"


def _format_value(value: Any) -> str:
    if isinstance(value, (int, float)):
        return f"{value:g}"
    return str(value)


def parse_joint_token(token: str) -> int:
    """``"q3"`` -> 3."""
    m = _JOINT_TOKEN.fullmatch(token)
    if m is None:
        raise InvalidJointToken(f"joint variable must look like 'q<N>' with N >= 1, got '{token}'")
    return int(m.group(1))


def check_qlim(qlim: Any) -> Tuple[float, float]:
    """Validate joint limits and return them as a ``(min, max)`` tuple."""
    try:
        values = tuple(float(v) for v in qlim)
    except (TypeError, ValueError):
        raise InvalidLimits(f"limits must be a (min, max) pair, got {qlim!r}") from None
    if len(values) != 2:
        raise InvalidLimits(f"limits must have exactly 2 values, got {len(values)}")
    if not all(math.isfinite(v) for v in values):
        raise InvalidLimits(f"limits must be finite, got {values}")
    if values[0] > values[1]:
        raise InvalidLimits(f"limits must be ordered (min <= max), got {values}")
    return values


def make_element(
    dim: Dimension,
    kind: Union[str, TransformKind],
    value: Any,
    qlim: Any = None,
    family: Optional[str] = None,
) -> TransformElement:
    """Build an element from a kind token and a value or joint token.

    Args:
        dim: dimensionality the element must belong to
        kind: kind token (``"Tx"``, ``"Rz"``, ...) or axis letter with ``family``
        value: a scalar (number or sympy expression) for a constant, or a
               joint token ``"qN"`` for a joint
        qlim: optional ``(min, max)`` limits, joints only
        family: restrict to ``"T"`` (translations) or ``"R"`` (rotations)

    Returns:
        The new TransformElement
    """
    kind = dim.parse_kind(kind, family)
    if isinstance(value, str):
        index = parse_joint_token(value)
        return TransformElement(kind, Joint(index, None if qlim is None else check_qlim(qlim)))

    if qlim is not None:
        raise InvalidLimits(f"limits only apply to joint elements, not the constant {kind.value}({value})")
    return TransformElement(kind, Constant(value))
