"""Exceptions raised while building and evaluating transform sequences.

Every error is raised where it is detected and propagated unchanged; an
evaluation that hits one returns nothing.
"""


class KinematicsError(Exception):
    """Base class for all jax_ets errors."""


class InvalidTransformKind(KinematicsError, ValueError):
    """Axis or kind token not supported by the sequence's dimensionality."""


class InvalidJointToken(KinematicsError, ValueError):
    """Joint variable string does not look like ``q<N>``."""


class InvalidLimits(KinematicsError, ValueError):
    """Joint limits are not an ordered ``(min, max)`` pair."""


class InvalidPrefixLength(KinematicsError, IndexError):
    """Prefix length outside ``[1, len(ets)]``."""


class InvalidTargetElement(KinematicsError, IndexError):
    """Jacobian target element outside ``[1, len(ets)]``."""


class JointIndexOutOfBounds(KinematicsError, IndexError):
    """Configuration vector too short for the joints it must drive."""


class JointNotFound(KinematicsError, LookupError):
    """No element of the sequence is driven by the requested joint."""


class IncompatibleSequenceType(KinematicsError, TypeError):
    """Planar and spatial sequences cannot be combined."""


class JointOutOfRange(KinematicsError, ValueError):
    """Configuration value outside the joint's allowed interval."""
