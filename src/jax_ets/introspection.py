"""Structural queries over transform sequences.

None of these look at a configuration; they only read the static structure
of a sequence or element.
"""

from typing import List

from .core import ETS, Joint, TransformElement
from .errors import JointNotFound


def is_joint(element: TransformElement) -> bool:
    """True if the element is driven by a joint variable."""
    return isinstance(element.role, Joint)


def is_prismatic(element: TransformElement) -> bool:
    """True if the element is a translational joint."""
    return is_joint(element) and element.kind.is_translation


def is_revolute(element: TransformElement) -> bool:
    """True if the element is a rotational joint."""
    return is_joint(element) and element.kind.is_rotation


def njoints(ets: ETS) -> int:
    """Largest joint index in the sequence, 0 if it has no joints.

    This is the length a configuration vector must have. Indices may be
    sparse, so it can exceed the number of joint elements.
    """
    return max((e.joint for e in ets if is_joint(e)), default=0)


def find_joint(ets: ETS, j: int) -> List[int]:
    """0-based positions of the elements driven by joint ``j``.

    Raises:
        JointNotFound: no element uses joint ``j``
    """
    positions = [k for k, e in enumerate(ets) if is_joint(e) and e.joint == j]
    if not positions:
        raise JointNotFound(f"no element of '{ets}' is driven by q{j}")
    return positions


def structure(ets: ETS) -> str:
    """Joint types in chain order, e.g. ``"RRP"``.

    One character per joint element: 'R' for revolute, 'P' for prismatic.
    """
    return "".join("P" if is_prismatic(e) else "R" for e in ets if is_joint(e))


def render(ets: ETS) -> str:
    """Elements as ``Kind(qN)`` or ``Kind(value)``, space separated."""
    return str(ets)


def render_symbolic(ets: ETS) -> str:
    """Like ``render`` but constants are numbered ``L1, L2, ...`` in order."""
    terms = []
    constant = 0
    for e in ets:
        if is_joint(e):
            terms.append(e.label())
        else:
            constant += 1
            terms.append(e.label(constant=f"L{constant}"))
    return " ".join(terms)
