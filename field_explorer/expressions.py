"""
Expression compiler: text -> evaluable scalar function of named variables.

The engine only depends on the ``ExpressionCompiler`` / ``Evaluable``
protocols below; ``SympyCompiler`` is the default implementation (SymPy
parsing + ``lambdify`` to the ``math`` module so every point is evaluated
as plain Python floats and domain errors raise instead of warning).
"""
from __future__ import annotations

import builtins
import logging
import math
from typing import Callable, Dict, Mapping, Optional, Protocol, Sequence, Tuple

import sympy as sp
from sympy.core.function import AppliedUndef

from .errors import CompileError, PointEvaluationError
from .models import PointResult

logger = logging.getLogger(__name__)

FIELD_VARIABLES: Tuple[str, ...] = ("x", "y")
PATH_VARIABLES: Tuple[str, ...] = ("t",)


# ----------------------------
# 1) PROTOCOLS
# ----------------------------
class Evaluable(Protocol):
    def evaluate(self, bindings: Mapping[str, float]) -> float: ...


class ExpressionCompiler(Protocol):
    def compile(self, text: str, variables: Sequence[str] = FIELD_VARIABLES) -> Evaluable: ...


def evaluate_point(compiled: Evaluable, bindings: Mapping[str, float]) -> PointResult:
    """Evaluate once, returning the value or a NaN sentinel with the failure reason."""
    try:
        value = compiled.evaluate(bindings)
    except PointEvaluationError as exc:
        return PointResult.failed(str(exc))
    return PointResult.of(value)


# ----------------------------
# 2) SYMPY IMPLEMENTATION
# ----------------------------
_FUNCTIONS: Dict[str, object] = {
    "sin": sp.sin, "cos": sp.cos, "tan": sp.tan,
    "asin": sp.asin, "acos": sp.acos, "atan": sp.atan, "atan2": sp.atan2,
    "sinh": sp.sinh, "cosh": sp.cosh, "tanh": sp.tanh,
    "exp": sp.exp, "log": sp.log, "ln": sp.log, "sqrt": sp.sqrt,
    "Abs": sp.Abs, "abs": sp.Abs,
    "floor": sp.floor, "ceil": sp.ceiling,
    "pi": sp.pi, "E": sp.E, "e": sp.E,
    "sign": sp.sign,
}


def sympy_env(variables: Sequence[str]) -> Tuple[Tuple[sp.Symbol, ...], Dict[str, object]]:
    symbols = tuple(sp.Symbol(name, real=True) for name in variables)
    locals_map = dict(_FUNCTIONS)
    locals_map.update({s.name: s for s in symbols})
    return symbols, locals_map


def unresolved_names(func: Callable[..., float]) -> Tuple[str, ...]:
    """Names a lambdified function would look up but cannot find (zeta, besselj...)."""
    namespace = func.__globals__
    return tuple(sorted(
        name for name in func.__code__.co_names
        if name not in namespace and not hasattr(builtins, name) and not hasattr(math, name)
    ))


class CompiledExpression:
    """A parsed expression bound to an ordered tuple of variable names."""

    def __init__(self, source: str, expr: sp.Expr, variables: Tuple[str, ...], func: Callable[..., float]):
        self.source = source
        self.expr = expr
        self.variables = variables
        self._func = func

    def __repr__(self) -> str:
        return f"CompiledExpression({self.source!r}, variables={self.variables})"

    def evaluate(self, bindings: Mapping[str, float]) -> float:
        try:
            args = [bindings[name] for name in self.variables]
        except KeyError as exc:
            raise PointEvaluationError(f"No value bound for variable {exc.args[0]!r}.") from exc

        try:
            return float(self._func(*args))
        except (ArithmeticError, ValueError, TypeError, NameError) as exc:
            # ZeroDivisionError, OverflowError, math domain errors, complex results
            raise PointEvaluationError(
                f"{self.source!r} cannot be evaluated at {dict(bindings)}: {exc}"
            ) from exc

    def try_evaluate(self, bindings: Mapping[str, float]) -> PointResult:
        return evaluate_point(self, bindings)


class SympyCompiler:
    def compile(self, text: str, variables: Sequence[str] = FIELD_VARIABLES) -> CompiledExpression:
        if text is None or not str(text).strip():
            raise CompileError("Expression is empty.", text)

        variables = tuple(variables)
        symbols, locals_map = sympy_env(variables)

        # sympify also evaluates, so Mod(x, 0) fails here with ZeroDivisionError
        try:
            expr = sp.sympify(str(text).strip(), locals=locals_map)
        except Exception as exc:
            raise CompileError(f"Invalid expression {text!r}: {exc}", text) from exc

        if not isinstance(expr, sp.Expr):
            raise CompileError(f"{text!r} is not a scalar expression.", text)

        unknown = sorted(s.name for s in expr.free_symbols if s.name not in variables)
        if unknown:
            allowed = ", ".join(variables)
            raise CompileError(
                f"{text!r} uses unknown variable(s) {', '.join(unknown)}; allowed: {allowed}.", text
            )

        undefined = sorted({str(f.func) for f in expr.atoms(AppliedUndef)})
        if undefined:
            raise CompileError(f"{text!r} calls unknown function(s) {', '.join(undefined)}.", text)

        try:
            func = sp.lambdify(symbols, expr, modules="math")
        except Exception as exc:
            # e.g. Integral, Derivative: no plain math equivalent
            raise CompileError(f"{text!r} cannot be evaluated numerically: {exc}", text) from exc

        unsupported = unresolved_names(func)
        if unsupported:
            raise CompileError(
                f"{text!r} calls function(s) with no numeric implementation: {', '.join(unsupported)}.", text
            )

        logger.debug("Compiled %r over %s as %s", text, variables, sp.sstr(expr))
        return CompiledExpression(str(text), expr, variables, func)


DEFAULT_COMPILER = SympyCompiler()


def compile_expression(text: str, variables: Sequence[str] = FIELD_VARIABLES,
                       compiler: Optional[ExpressionCompiler] = None) -> Evaluable:
    return (compiler or DEFAULT_COMPILER).compile(text, variables)
