from fundapp.core.tools import (
    form_defaults,
    form_limits,
    income_stability_label,
    normalize_dependents,
    normalize_income_stability,
    normalize_risk_tolerance,
    risk_tolerance_label,
)


def test_income_stability_aliases():
    assert normalize_income_stability("Stable (W-2, Salary)") == "stable"
    assert normalize_income_stability(" Freelance ") == "variable"
    assert normalize_income_stability("VARIABLE") == "variable"
    assert normalize_income_stability("unknown") == "stable"
    assert normalize_income_stability(None) == "stable"


def test_risk_tolerance_aliases():
    assert normalize_risk_tolerance("Low — I want maximum security") == "low"
    assert normalize_risk_tolerance("aggressive") == "high"
    assert normalize_risk_tolerance("HIGH") == "high"
    assert normalize_risk_tolerance("") == "medium"
    assert normalize_risk_tolerance(7) == "medium"


def test_normalize_dependents():
    assert normalize_dependents(True) is True
    assert normalize_dependents("yes") is True
    assert normalize_dependents("on") is True
    assert normalize_dependents(1) is True
    assert normalize_dependents("false") is False
    assert normalize_dependents(0) is False
    assert normalize_dependents(None) is False


def test_labels():
    assert income_stability_label("variable") == "Variable (Freelance, Commission, Gig)"
    assert risk_tolerance_label("medium") == "Medium — Balanced approach"


def test_form_defaults_and_limits():
    assert form_defaults() == {
        "monthly_expenses": 3000,
        "income_stability": "stable",
        "has_dependents": False,
        "risk_tolerance": "medium",
    }
    assert form_limits() == {"min": 500, "max": 50000, "step": 100}
