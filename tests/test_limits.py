"""Tests for joint-limit checks, default configurations and reach."""

import numpy as np
import pytest

from jax_ets import ets2, ets3
from jax_ets.errors import InvalidLimits, JointIndexOutOfBounds, JointOutOfRange
from jax_ets.limits import check_configuration, check_limits, default_configuration, reach


@pytest.fixture
def slider_arm():
    return ets2.Tx("q1", qlim=(0.1, 2.0)) * ets2.Rz("q2") * ets2.Tx(0.5)


def test_check_limits_accepts_valid_prismatic(slider_arm):
    check_limits(slider_arm)
    check_limits(ets3.Rz("q1") * ets3.Tx(1.0))


def test_check_limits_rejects_missing_or_empty_interval():
    with pytest.raises(InvalidLimits, match="no limits"):
        check_limits(ets2.Tx("q1"))
    with pytest.raises(InvalidLimits, match="empty"):
        check_limits(ets3.Tz("q1", qlim=(0.5, 0.5)))


def test_check_configuration_ok(slider_arm):
    check_configuration(slider_arm, [1.0, 0.0])
    check_configuration(slider_arm, [2.0, -np.pi])
    check_configuration(slider_arm, [1.0, 90.0], unit="deg")


@pytest.mark.parametrize(
    "q",
    [
        [3.0, 0.0],     # prismatic above its limits
        [0.05, 0.0],    # prismatic below its limits
        [1.0, 4.0],     # revolute outside [-pi, pi]
    ],
)
def test_check_configuration_out_of_range(slider_arm, q):
    with pytest.raises(JointOutOfRange):
        check_configuration(slider_arm, q)


def test_check_configuration_degrees(slider_arm):
    with pytest.raises(JointOutOfRange):
        check_configuration(slider_arm, [1.0, 200.0], unit="deg")


def test_prismatic_must_be_positive():
    E = ets2.Ty("q1", qlim=(-1.0, 1.0)) * ets2.Tx(1.0)
    check_configuration(E, [0.3])
    with pytest.raises(JointOutOfRange, match="positive"):
        check_configuration(E, [0.0])
    with pytest.raises(JointOutOfRange, match="positive"):
        check_configuration(E, [-1.0])


def test_revolute_limits_take_precedence():
    E = ets3.Rz("q1", qlim=(-1.0, 1.0))
    check_configuration(E, [0.9])
    with pytest.raises(JointOutOfRange):
        check_configuration(E, [1.5])


def test_check_configuration_short_vector(slider_arm):
    with pytest.raises(JointIndexOutOfBounds):
        check_configuration(slider_arm, [1.0])


def test_default_configuration():
    E = (
        ets3.Tx("q1", qlim=(0.2, 1.0))
        * ets3.Rz("q2", qlim=(0.5, 1.5))
        * ets3.Rz("q3", qlim=(-1.0, 1.0))
        * ets3.Ry("q5")
    )
    q = default_configuration(E)

    assert q.shape == (5,)
    np.testing.assert_allclose(q, [0.6, 1.0, 0.0, 0.0, 0.0])


def test_default_configuration_passes_checks(slider_arm):
    check_configuration(slider_arm, default_configuration(slider_arm))


def test_reach():
    E = ets2.Rz("q1") * ets2.Tx(1.0) * ets2.Rz("q2") * ets2.Tx(-0.5) * ets2.Ty("q3", qlim=(0.0, 2.0))
    assert reach(E) == pytest.approx(3.5)
    assert reach(ets3.Rz("q1")) == 0.0


def test_reach_needs_prismatic_limits():
    with pytest.raises(InvalidLimits):
        reach(ets2.Tx("q1"))


def test_check_configuration_needs_prismatic_limits():
    E = ets2.Rz("q1") * ets2.Ty("q2") * ets2.Tx(1.0)
    with pytest.raises(InvalidLimits, match="no limits"):
        check_configuration(E, [0.0, 0.5])
    # revolute joints without limits are fine
    check_configuration(ets2.Rz("q1") * ets2.Tx(1.0), [0.5])
