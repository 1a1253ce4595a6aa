"""The elementary transform sequence (ETS) data structure.

An ``ETS`` is an ordered, immutable chain of elementary transforms from the
base frame to the tip. It holds no arrays; everything about it is static
structure, so it can be closed over or passed to ``jax.jit``-compiled
functions without being traced.
"""

from collections import Counter
from logging import getLogger
from typing import Iterator, Tuple, Union, overload

from flax import struct

from ..errors import IncompatibleSequenceType
from .element import Dimension, TransformElement, make_element

logger = getLogger(__name__)


@struct.dataclass
class ETS:
    """Immutable sequence of elementary transforms.

    Sequences are concatenated with ``+`` or ``*`` (both mean the same
    thing: ``a * b`` is ``a`` followed by ``b``). A single
    ``TransformElement`` may appear on either side.

    Attributes:
        elements: Tuple of elements in base-to-tip order.
                  Marked as a static field for JIT compilation.
        dim: Dimensionality (PLANAR or SPATIAL) shared by every element.
    """
    elements: Tuple[TransformElement, ...] = struct.field(pytree_node=False)
    dim: Dimension = struct.field(pytree_node=False)

    @classmethod
    def empty(cls, dim: Dimension) -> "ETS":
        return cls(elements=(), dim=dim)

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[TransformElement]:
        return iter(self.elements)

    @overload
    def __getitem__(self, i: int) -> TransformElement: ...

    @overload
    def __getitem__(self, i: slice) -> "ETS": ...

    def __getitem__(self, i):
        if isinstance(i, slice):
            return ETS(elements=self.elements[i], dim=self.dim)
        return self.elements[i]

    def __add__(self, other):
        if not isinstance(other, (ETS, TransformElement)):
            return NotImplemented
        return combine(self, other)

    def __radd__(self, other):
        if not isinstance(other, TransformElement):
            return NotImplemented
        return combine(other, self)

    __mul__ = __add__
    __rmul__ = __radd__

    def __str__(self) -> str:
        return " ".join(e.label() for e in self.elements)


def _coerce(part: Union[ETS, TransformElement], dim: Dimension) -> Tuple[TransformElement, ...]:
    if isinstance(part, ETS):
        if part.dim != dim:
            raise IncompatibleSequenceType(
                f"cannot combine a {part.dim.name} sequence with a {dim.name} one"
            )
        return part.elements
    if isinstance(part, TransformElement):
        if part.kind not in dim.kinds:
            raise IncompatibleSequenceType(
                f"{part.kind.value} element cannot join a {dim.name} sequence"
            )
        return (part,)
    raise IncompatibleSequenceType(f"cannot combine {type(part).__name__} with a transform sequence")


def combine(*parts: Union[ETS, TransformElement]) -> ETS:
    """Concatenate sequences (and single elements) in order.

    The dimensionality is taken from the first ``ETS`` among ``parts``; every
    other part must match it. Operands are never modified.

    Raises:
        IncompatibleSequenceType: parts of different dimensionality
    """
    dims = [p.dim for p in parts if isinstance(p, ETS)]
    if not dims:
        raise IncompatibleSequenceType("at least one ETS is needed to fix the dimensionality")

    dim = dims[0]
    elements = tuple(e for p in parts for e in _coerce(p, dim))

    shared = [j for j, count in Counter(e.joint for e in elements if e.is_joint).items() if count > 1]
    if shared:
        logger.debug("joint indices %s drive more than one element (coupled joints)", sorted(shared))

    return ETS(elements=elements, dim=dim)


def elementary(dim: Dimension, kind, value, qlim=None, family=None) -> ETS:
    """One-element sequence; arguments as for ``make_element``."""
    return ETS(elements=(make_element(dim, kind, value, qlim, family),), dim=dim)
