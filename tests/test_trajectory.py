import math

import numpy as np
import pytest

from field_explorer.errors import CompileError, ConfigurationError, TrajectoryError
from field_explorer.models import Range
from field_explorer.trajectory import evaluate_trajectory


def test_unit_circle_height():
    path = evaluate_trajectory("x^2+y^2", "cos(t)", "sin(t)", Range(0.0, 2 * math.pi), 50)
    assert len(path) == 50
    assert path.t[0] == 0.0
    assert path.t[-1] == 2 * math.pi
    np.testing.assert_allclose(path.z, 1.0, atol=1e-6)
    np.testing.assert_allclose(path.x, np.cos(path.t), atol=1e-12)


def test_default_point_count():
    path = evaluate_trajectory("x", "t", "t", Range(0.0, 1.0))
    assert len(path) == 100
    assert path.x.shape == path.y.shape == path.z.shape == (100,)


@pytest.mark.parametrize("field, xt, yt, label", [
    ("x +* y", "t", "t", "f(x,y)"),
    ("x", "cos(t", "t", "x(t)"),
    ("x", "t", "y", "y(t)"),
])
def test_any_compile_failure_fails_the_call(field, xt, yt, label):
    with pytest.raises(TrajectoryError) as excinfo:
        evaluate_trajectory(field, xt, yt, Range(0.0, 1.0), 10)
    assert isinstance(excinfo.value, CompileError)
    assert excinfo.value.label == label


@pytest.mark.parametrize("field, xt, yt, label", [
    ("zeta(x)", "t + 2", "t", "f(x,y)"),
    ("x", "Mod(t, 0)", "t", "x(t)"),
    ("x", "t", "Integral(t, t)", "y(t)"),
])
def test_non_numeric_formula_fails_the_call(field, xt, yt, label):
    with pytest.raises(TrajectoryError) as excinfo:
        evaluate_trajectory(field, xt, yt, Range(0.0, 1.0), 10)
    assert excinfo.value.label == label


def test_position_failure_blanks_both_coordinates():
    # t = -1, 0, 1: sqrt(t) fails only at t = -1
    path = evaluate_trajectory("x + y", "sqrt(t)", "t", Range(-1.0, 1.0), 3)
    assert math.isnan(path.x[0]) and math.isnan(path.y[0]) and math.isnan(path.z[0])
    assert path.x[1] == 0.0 and path.z[1] == 0.0
    assert path.z[2] == pytest.approx(2.0)


def test_height_failure_keeps_position():
    # t = -1, -0.5, 0, 0.5, 1 with x = t: log fails for t <= 0
    path = evaluate_trajectory("log(x)", "t", "0", Range(-1.0, 1.0), 5)
    np.testing.assert_allclose(path.x, [-1.0, -0.5, 0.0, 0.5, 1.0])
    assert np.all(np.isnan(path.z[:3]))
    assert path.z[3] == pytest.approx(math.log(0.5))
    assert path.z[4] == pytest.approx(0.0)


@pytest.mark.parametrize("count", [1, 0, 3.0])
def test_invalid_point_count(count):
    with pytest.raises(ConfigurationError):
        evaluate_trajectory("x", "t", "t", Range(0.0, 1.0), count)


def test_invalid_time_range():
    with pytest.raises(ConfigurationError):
        evaluate_trajectory("x", "t", "t", Range(1.0, 0.0), 10)
