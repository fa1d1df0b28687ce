from __future__ import annotations

import math
from typing import Optional

from .config import DEFAULT_STEP, PROBE_ARROW_SCALE
from .errors import ConfigurationError, PointEvaluationError
from .expressions import ExpressionCompiler
from .gradient import gradient
from .models import PointProbe
from .sampler import compile_field


def probe_point(expr_f: str, x0: float, y0: float, span: float, *,
                compiler: Optional[ExpressionCompiler] = None,
                h: float = DEFAULT_STEP, scale: float = PROBE_ARROW_SCALE) -> PointProbe:
    """
    Value and gradient of f at (x0, y0), plus the end point of a display arrow.

    The arrow points along the gradient with length ``span * scale``
    regardless of the gradient magnitude (a zero gradient gives a zero arrow).
    Unlike the grid, a failure here is raised: there is no other point to show.
    """
    if not (math.isfinite(x0) and math.isfinite(y0)):
        raise ConfigurationError(f"Probe point must be finite, got ({x0}, {y0}).")
    if not (math.isfinite(span) and span > 0):
        raise ConfigurationError(f"Probe span must be positive, got {span}.")

    compiled = compile_field(expr_f, compiler)
    z0 = compiled.evaluate({"x": x0, "y": y0})
    u0, v0 = gradient(compiled, x0, y0, h)
    if not all(math.isfinite(v) for v in (z0, u0, v0)):
        raise PointEvaluationError(f"f(x,y) is not finite near ({x0}, {y0}).")

    magnitude = math.hypot(u0, v0)
    visual = span * scale / (magnitude or 1.0)
    return PointProbe(
        x0=x0, y0=y0, z0=z0, u0=u0, v0=v0,
        magnitude=magnitude,
        x_end=x0 + u0 * visual,
        y_end=y0 + v0 * visual,
    )
