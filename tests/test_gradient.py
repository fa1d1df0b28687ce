import math

import pytest

from field_explorer.errors import ConfigurationError, PointEvaluationError
from field_explorer.expressions import compile_expression
from field_explorer.gradient import gradient, partial_derivative, try_partial_derivative


def test_paraboloid_partials():
    f = compile_expression("x^2 + y^2")
    point = {"x": 2.0, "y": 3.0}
    assert partial_derivative(f, point, "x", h=0.001) == pytest.approx(4.0, abs=1e-3)
    assert partial_derivative(f, point, "y", h=0.001) == pytest.approx(6.0, abs=1e-3)


def test_gradient_pair():
    f = compile_expression("x*y")
    dfdx, dfdy = gradient(f, 2.0, 5.0)
    assert dfdx == pytest.approx(5.0, abs=1e-6)
    assert dfdy == pytest.approx(2.0, abs=1e-6)


def test_caller_bindings_untouched():
    f = compile_expression("sin(x) * y")
    point = {"x": 0.3, "y": 1.5}
    before = dict(point)
    partial_derivative(f, point, "x")
    partial_derivative(f, point, "y")
    assert point == before


def test_each_evaluation_gets_a_fresh_mapping():
    seen = []

    class Recorder:
        def evaluate(self, bindings):
            seen.append(bindings)
            return bindings["x"] * 3

    point = {"x": 1.0, "y": 0.0}
    assert partial_derivative(Recorder(), point, "x", h=0.5) == pytest.approx(3.0)
    assert len(seen) == 2
    assert all(b is not point for b in seen)
    assert seen[0] is not seen[1]
    assert seen[0]["x"] == 1.5 and seen[1]["x"] == 0.5
    assert seen[0]["y"] == seen[1]["y"] == 0.0


def test_failure_propagates():
    f = compile_expression("log(x)")
    # x - h is negative
    with pytest.raises(PointEvaluationError):
        partial_derivative(f, {"x": 0.0, "y": 0.0}, "x")


def test_try_partial_derivative_sentinel():
    f = compile_expression("log(x)")
    result = try_partial_derivative(f, {"x": -1.0, "y": 0.0}, "x")
    assert not result.ok
    assert math.isnan(result.value)

    ok = try_partial_derivative(f, {"x": 1.0, "y": 0.0}, "x")
    assert ok.value == pytest.approx(1.0, abs=1e-6)


@pytest.mark.parametrize("h", [0, -0.001, float("nan"), float("inf")])
def test_invalid_step(h):
    f = compile_expression("x")
    with pytest.raises(ConfigurationError):
        partial_derivative(f, {"x": 0.0, "y": 0.0}, "x", h=h)


def test_unbound_variable():
    f = compile_expression("x")
    with pytest.raises(ConfigurationError):
        partial_derivative(f, {"x": 0.0}, "y")
