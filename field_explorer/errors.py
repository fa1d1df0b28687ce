from __future__ import annotations

from typing import Optional


class FieldExplorerError(Exception):
    """Base class for every error raised by the engine."""


class CompileError(FieldExplorerError, ValueError):
    """Expression text is not a valid formula."""

    def __init__(self, message: str, expression: Optional[str] = None):
        super().__init__(message)
        self.expression = expression


class FieldError(CompileError):
    """f(x,y) could not be compiled for a field request."""


class TrajectoryError(CompileError):
    """One of f(x,y), x(t), y(t) could not be compiled for a trajectory request."""

    def __init__(self, message: str, expression: Optional[str] = None, label: Optional[str] = None):
        super().__init__(message, expression)
        self.label = label


class ConfigurationError(FieldExplorerError, ValueError):
    """Invalid resolution, range, step size or point count."""


class PointEvaluationError(FieldExplorerError, ArithmeticError):
    """A single (x, y) or t sample cannot be evaluated."""
