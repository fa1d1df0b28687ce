from __future__ import annotations

import logging
import time
from typing import Optional

import numpy as np

from .config import DEFAULT_STEP, MIN_RESOLUTION
from .errors import CompileError, FieldError
from .expressions import FIELD_VARIABLES, ExpressionCompiler, compile_expression, evaluate_point
from .gradient import check_step, try_partial_derivative
from .models import Mesh, Range, check_count

logger = logging.getLogger(__name__)


def compile_field(expr_f: str, compiler: Optional[ExpressionCompiler] = None):
    try:
        return compile_expression(expr_f, FIELD_VARIABLES, compiler)
    except CompileError as exc:
        raise FieldError(f"The function f(x,y) has syntax errors: {exc}", expr_f) from exc


def generate_field_data(expr_f: str, range_x: Range, range_y: Range, resolution: int, *,
                        compiler: Optional[ExpressionCompiler] = None,
                        h: float = DEFAULT_STEP) -> Mesh:
    """
    Sample f(x,y) and its central-difference gradient on a resolution x resolution grid.

    Setup problems (bad resolution or range, syntax errors) raise before any
    evaluation. Cells where f or a partial derivative cannot be evaluated are
    NaN; the rest of the grid is unaffected.
    """
    resolution = check_count(resolution, MIN_RESOLUTION, "resolution")
    range_x.validate("x range")
    range_y.validate("y range")
    h = check_step(h)

    # compiled once, reused for every cell and both partials
    compiled = compile_field(expr_f, compiler)

    t0 = time.perf_counter()
    xs = range_x.samples(resolution)
    ys = range_y.samples(resolution)

    shape = (resolution, resolution)
    Z = np.empty(shape, dtype=float)
    U = np.empty(shape, dtype=float)
    V = np.empty(shape, dtype=float)

    for row in range(resolution):
        y = float(ys[row])
        for col in range(resolution):
            point = {"x": float(xs[col]), "y": y}

            Z[row, col] = evaluate_point(compiled, point).value
            U[row, col] = try_partial_derivative(compiled, point, "x", h).value
            V[row, col] = try_partial_derivative(compiled, point, "y", h).value

    mesh = Mesh(x=xs, y=ys, z=Z, u=U, v=V)
    logger.debug(
        "Sampled %r on %dx%d grid in %.3fs (%d NaN cells)",
        expr_f, resolution, resolution, time.perf_counter() - t0, mesh.nan_count(),
    )
    return mesh
