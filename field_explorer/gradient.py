from __future__ import annotations

import math
from typing import Mapping, Tuple

from .config import DEFAULT_STEP
from .errors import ConfigurationError, PointEvaluationError
from .expressions import Evaluable
from .models import PointResult


def check_step(h: float) -> float:
    if not (isinstance(h, (int, float)) and math.isfinite(h) and h > 0):
        raise ConfigurationError(f"Step size h must be a positive finite number, got {h!r}.")
    return float(h)


def partial_derivative(compiled: Evaluable, bindings: Mapping[str, float], variable: str,
                       h: float = DEFAULT_STEP) -> float:
    """
    Central difference (f(var + h) - f(var - h)) / 2h.

    Each perturbed evaluation gets its own copy of ``bindings``; the caller's
    mapping is left untouched. Evaluation failures propagate as
    PointEvaluationError.
    """
    h = check_step(h)
    if variable not in bindings:
        raise ConfigurationError(f"Cannot differentiate with respect to unbound variable {variable!r}.")

    value = bindings[variable]
    f_plus = compiled.evaluate({**bindings, variable: value + h})
    f_minus = compiled.evaluate({**bindings, variable: value - h})
    return (f_plus - f_minus) / (2 * h)


def try_partial_derivative(compiled: Evaluable, bindings: Mapping[str, float], variable: str,
                           h: float = DEFAULT_STEP) -> PointResult:
    try:
        return PointResult.of(partial_derivative(compiled, bindings, variable, h))
    except PointEvaluationError as exc:
        return PointResult.failed(str(exc))


def gradient(compiled: Evaluable, x: float, y: float, h: float = DEFAULT_STEP) -> Tuple[float, float]:
    point = {"x": x, "y": y}
    return (
        partial_derivative(compiled, point, "x", h),
        partial_derivative(compiled, point, "y", h),
    )
