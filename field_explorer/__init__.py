"""Scalar field sampling engine: f(x,y) grids, central-difference gradients, r(t) paths."""
from .errors import (
    CompileError,
    ConfigurationError,
    FieldError,
    FieldExplorerError,
    PointEvaluationError,
    TrajectoryError,
)
from .expressions import CompiledExpression, SympyCompiler, compile_expression
from .gradient import gradient, partial_derivative, try_partial_derivative
from .models import Mesh, PointProbe, PointResult, Range, TrajectorySample
from .probe import probe_point
from .sampler import generate_field_data
from .trajectory import evaluate_trajectory
from .validation import FieldForm, validate_expression, validate_form

__version__ = "1.0.0"

__all__ = [
    "CompileError", "ConfigurationError", "FieldError", "FieldExplorerError",
    "PointEvaluationError", "TrajectoryError",
    "CompiledExpression", "SympyCompiler", "compile_expression",
    "gradient", "partial_derivative", "try_partial_derivative",
    "Mesh", "PointProbe", "PointResult", "Range", "TrajectorySample",
    "probe_point", "generate_field_data", "evaluate_trajectory",
    "FieldForm", "validate_expression", "validate_form",
]
