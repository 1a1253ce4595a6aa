"""Scalar operations shared by the numeric and symbolic evaluation paths.

Poses and Jacobians are assembled entry by entry from a handful of
primitives (trigonometry, matrix construction, identity). Supplying those
primitives through an object lets the same kinematics code run on JAX
arrays, where it stays traceable by ``jit``/``grad``/``vmap``, and on sympy
expressions, where it yields closed-form matrices.
"""

from typing import Any, List, Protocol, Sequence

import jax.numpy as jnp
import sympy


class ScalarOps(Protocol):
    """Primitives the kinematics code needs from a scalar type."""

    name: str
    pi: Any

    def cos(self, x: Any) -> Any: ...

    def sin(self, x: Any) -> Any: ...

    def matrix(self, rows: Sequence[Sequence[Any]]) -> Any: ...

    def eye(self, n: int) -> Any: ...

    def stack(self, matrices: Sequence[Any]) -> Any: ...

    def vector(self, q: Any) -> Any: ...


class NumericOps:
    """JAX-backed scalars; results are ``jax.Array``."""

    name = "numeric"
    pi = jnp.pi

    def cos(self, x):
        return jnp.cos(x)

    def sin(self, x):
        return jnp.sin(x)

    def matrix(self, rows):
        # jnp.array accepts nested lists of python floats and tracers alike
        return jnp.array(rows, dtype=jnp.result_type(float))

    def eye(self, n):
        return jnp.eye(n, dtype=jnp.result_type(float))

    def stack(self, matrices):
        return jnp.stack(matrices)

    def vector(self, q):
        return jnp.atleast_1d(jnp.asarray(q, dtype=jnp.result_type(float)))


class SymbolicOps:
    """sympy-backed scalars; results are ``sympy.Matrix``, left unsimplified."""

    name = "symbolic"
    pi = sympy.pi

    def cos(self, x):
        return sympy.cos(x)

    def sin(self, x):
        return sympy.sin(x)

    def matrix(self, rows):
        return sympy.Matrix(rows)

    def eye(self, n):
        return sympy.eye(n)

    def stack(self, matrices) -> List[sympy.Matrix]:
        return list(matrices)

    def vector(self, q):
        if isinstance(q, (list, tuple)):
            return list(q)
        if isinstance(q, sympy.MatrixBase):
            return list(q)
        return [q]


NUMERIC = NumericOps()
SYMBOLIC = SymbolicOps()
