import pytest

from field_explorer.models import Range
from field_explorer.validation import FieldForm, validate_expression, validate_form


def make_form(**overrides):
    values = dict(
        expr_f="sin(x)*cos(y)",
        x_range=Range(-3.0, 3.0),
        y_range=Range(-3.0, 3.0),
        t_range=Range(0.0, 6.0),
        resolution=30,
        expr_xt="2*cos(t)",
        expr_yt="2*sin(t)",
    )
    values.update(overrides)
    return FieldForm(**values)


def test_valid_form():
    form = make_form()
    assert validate_form(form) == {}
    assert form.wants_trajectory


def test_trajectory_is_optional():
    form = make_form(expr_xt="", expr_yt="  ")
    assert validate_form(form) == {}
    assert not form.wants_trajectory


@pytest.mark.parametrize("xt, yt, missing", [("cos(t)", "", "yt"), ("", "sin(t)", "xt")])
def test_trajectory_needs_both_halves(xt, yt, missing):
    errors = validate_form(make_form(expr_xt=xt, expr_yt=yt))
    assert list(errors) == [missing]
    assert "Required" in errors[missing]


def test_trajectory_formulas_use_t():
    errors = validate_form(make_form(expr_xt="cos(x)"))
    assert set(errors) == {"xt"}


def test_bad_field_expression():
    errors = validate_form(make_form(expr_f="x +* y"))
    assert set(errors) == {"f"}


def test_bad_ranges_and_resolution():
    errors = validate_form(make_form(x_range=Range(1.0, -1.0), t_range=Range(2.0, 2.0), resolution=500))
    assert set(errors) == {"x_range", "t_range", "resolution"}


def test_validate_expression():
    assert validate_expression("x^2 + y", ("x", "y")).valid
    assert validate_expression("cos(t)", ("t",)).valid

    result = validate_expression("cos(x)", ("t",))
    assert not result.valid
    assert "x" in result.error

    assert validate_expression("", ("x", "y")).error == "Expression is required."


@pytest.mark.parametrize("text", ["zeta(x)", "Mod(x, 0)", "x % 0", "Integral(x, y)"])
def test_validate_expression_rejects_non_numeric_formulas(text):
    result = validate_expression(text, ("x", "y"))
    assert not result.valid
    assert result.error


def test_form_with_non_numeric_field():
    errors = validate_form(make_form(expr_f="Mod(x, 0)"))
    assert set(errors) == {"f"}
