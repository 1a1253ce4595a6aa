"""Tests for symbolic evaluation with the sympy backend."""

import numpy as np
import sympy

from jax_ets import ets2, ets3
from jax_ets.chain import forward_kinematics, forward_kinematics_all, jacobian
from jax_ets.transforms import SYMBOLIC

q1, q2, q3 = sympy.symbols("q1 q2 q3", real=True)
a1, a2 = sympy.symbols("a1 a2", positive=True)


def as_float_array(M, subs):
    return np.array(M.subs(subs).evalf(), dtype=float)


def test_fk_symbolic_planar_arm():
    """The tip of a two-link arm is the familiar sum of cosines and sines."""
    E = ets2.Rz("q1") * ets2.Tx(a1) * ets2.Rz("q2") * ets2.Tx(a2)
    T = forward_kinematics(E, [q1, q2], ops=SYMBOLIC)

    assert isinstance(T, sympy.MatrixBase)
    assert T.shape == (3, 3)
    x = a1 * sympy.cos(q1) + a2 * sympy.cos(q1 + q2)
    y = a1 * sympy.sin(q1) + a2 * sympy.sin(q1 + q2)
    assert sympy.simplify(T[0, 2] - x) == 0
    assert sympy.simplify(T[1, 2] - y) == 0


def test_fk_symbolic_matches_numeric():
    E = ets3.Rz("q1") * ets3.Tx(0.4) * ets3.Ry("q2") * ets3.Tz("q3") * ets3.Rx(0.3)
    values = {q1: 0.2, q2: -0.7, q3: 0.15}

    T_sym = forward_kinematics(E, [q1, q2, q3], ops=SYMBOLIC)
    T_num = forward_kinematics(E, [0.2, -0.7, 0.15])

    np.testing.assert_allclose(as_float_array(T_sym, values), T_num, atol=1e-12)


def test_fk_symbolic_degrees_uses_exact_pi():
    E = ets2.Rz("q1")
    T = forward_kinematics(E, [q1], unit="deg", ops=SYMBOLIC)
    assert sympy.simplify(T[0, 0] - sympy.cos(sympy.pi * q1 / 180)) == 0


def test_fk_symbolic_scalar_configuration():
    """A bare symbol is accepted for a one-joint chain."""
    T = forward_kinematics(ets2.Tx("q1"), q1, ops=SYMBOLIC)
    assert T[0, 2] == q1


def test_fk_all_symbolic():
    E = ets2.Rz("q1") * ets2.Tx(a1)
    poses = forward_kinematics_all(E, [q1], ops=SYMBOLIC)
    assert len(poses) == 3
    assert poses[0] == sympy.eye(3)


def test_jacobian_symbolic_is_derivative_of_position():
    E = ets2.Rz("q1") * ets2.Tx(a1) * ets2.Rz("q2") * ets2.Tx(a2)
    T = forward_kinematics(E, [q1, q2], ops=SYMBOLIC)
    J = jacobian(E, [q1, q2], ops=SYMBOLIC)

    assert J.shape == (3, 2)
    assert list(J[0, :]) == [1, 1]
    for i, q in enumerate((q1, q2)):
        for r in range(2):
            assert sympy.simplify(J[1 + r, i] - sympy.diff(T[r, 2], q)) == 0


def test_jacobian_symbolic_matches_numeric():
    E = ets3.Rz("q1") * ets3.Tx(0.4) * ets3.Ry("q2") * ets3.Tz("q3") * ets3.Rx(0.3) * ets3.Tx(0.1)
    values = {q1: 0.2, q2: -0.7, q3: 0.15}

    J_sym = jacobian(E, [q1, q2, q3], ops=SYMBOLIC)
    J_num = jacobian(E, [0.2, -0.7, 0.15])

    assert J_sym.shape == (6, 3)
    np.testing.assert_allclose(as_float_array(J_sym, values), J_num, atol=1e-12)
