from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .config import DEFAULT_POINT_COUNT, MIN_POINT_COUNT
from .errors import CompileError, TrajectoryError
from .expressions import FIELD_VARIABLES, PATH_VARIABLES, ExpressionCompiler, compile_expression, evaluate_point
from .models import Range, TrajectorySample, check_count

logger = logging.getLogger(__name__)

NAN = float("nan")


def evaluate_trajectory(expr_f: str, expr_xt: str, expr_yt: str, range_t: Range,
                        point_count: int = DEFAULT_POINT_COUNT, *,
                        compiler: Optional[ExpressionCompiler] = None) -> TrajectorySample:
    """
    Sample r(t) = (x(t), y(t)) on point_count evenly spaced t and lift it onto f.

    All three formulas are compiled before sampling; any syntax error fails the
    whole call. Each sample is independent: a failed x(t)/y(t) gives NaN
    position and height, a failed f gives NaN height.
    """
    point_count = check_count(point_count, MIN_POINT_COUNT, "point count")
    range_t.validate("t range")

    formulas = (
        ("f(x,y)", expr_f, FIELD_VARIABLES),
        ("x(t)", expr_xt, PATH_VARIABLES),
        ("y(t)", expr_yt, PATH_VARIABLES),
    )
    compiled = []
    for label, text, variables in formulas:
        try:
            compiled.append(compile_expression(text, variables, compiler))
        except CompileError as exc:
            raise TrajectoryError(f"Error in the trajectory formulas: {label}: {exc}", text, label) from exc
    f, xt, yt = compiled

    ts = range_t.samples(point_count)
    xs = np.empty(point_count, dtype=float)
    ys = np.empty(point_count, dtype=float)
    zs = np.empty(point_count, dtype=float)

    for i, t in enumerate(ts):
        at_t = {"t": float(t)}
        px = evaluate_point(xt, at_t)
        py = evaluate_point(yt, at_t)
        if px.ok and py.ok:
            x, y = px.value, py.value
            z = evaluate_point(f, {"x": x, "y": y}).value
        else:
            # no position, no height
            x = y = z = NAN

        xs[i], ys[i], zs[i] = x, y, z

    failed = int(np.count_nonzero(np.isnan(zs)))
    if failed:
        logger.debug("Trajectory (%s, %s): %d of %d samples are NaN", expr_xt, expr_yt, failed, point_count)
    return TrajectorySample(t=ts, x=xs, y=ys, z=zs)
