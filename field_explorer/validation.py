from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from .config import RESOLUTION_MAX, RESOLUTION_MIN
from .errors import CompileError, ConfigurationError
from .expressions import FIELD_VARIABLES, PATH_VARIABLES, ExpressionCompiler, compile_expression
from .models import Range, check_count


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error: Optional[str] = None


def validate_expression(text: str, allowed_variables: Sequence[str] = FIELD_VARIABLES,
                        compiler: Optional[ExpressionCompiler] = None) -> ValidationResult:
    if text is None or not str(text).strip():
        return ValidationResult(False, "Expression is required.")
    try:
        compile_expression(text, allowed_variables, compiler)
    except CompileError as exc:
        return ValidationResult(False, str(exc))
    return ValidationResult(True)


@dataclass
class FieldForm:
    """Everything the page collects before a render."""
    expr_f: str
    x_range: Range
    y_range: Range
    t_range: Range
    resolution: int
    expr_xt: str = ""
    expr_yt: str = ""

    @property
    def wants_trajectory(self) -> bool:
        return bool(self.expr_xt.strip()) and bool(self.expr_yt.strip())


def validate_form(form: FieldForm, compiler: Optional[ExpressionCompiler] = None) -> Dict[str, str]:
    """Map of form field -> message. Empty means the form can be rendered."""
    errors: Dict[str, str] = {}

    res = validate_expression(form.expr_f, FIELD_VARIABLES, compiler)
    if not res.valid:
        errors["f"] = res.error

    for key, rng in (("x_range", form.x_range), ("y_range", form.y_range), ("t_range", form.t_range)):
        try:
            rng.validate(key.replace("_", " "))
        except ConfigurationError as exc:
            errors[key] = str(exc)

    try:
        resolution = check_count(form.resolution, RESOLUTION_MIN, "resolution")
        if resolution > RESOLUTION_MAX:
            errors["resolution"] = f"resolution must be at most {RESOLUTION_MAX}, got {resolution}."
    except ConfigurationError as exc:
        errors["resolution"] = str(exc)

    xt, yt = form.expr_xt.strip(), form.expr_yt.strip()
    if xt or yt:
        # both halves of r(t) or neither
        if not xt:
            errors["xt"] = "Required for a trajectory."
        if not yt:
            errors["yt"] = "Required for a trajectory."
        if xt and yt:
            for key, text in (("xt", xt), ("yt", yt)):
                res = validate_expression(text, PATH_VARIABLES, compiler)
                if not res.valid:
                    errors[key] = res.error

    return errors
