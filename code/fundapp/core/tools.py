from typing import Any, Dict

from fundmath.utils import EXPENSES_MAX, EXPENSES_MIN
from fundapp.logging_config import get_logger

logger = get_logger(__name__)

EXPENSES_STEP = 100
EXPENSES_DEFAULT = 3000
INCOME_STABILITY_DEFAULT = "stable"
RISK_TOLERANCE_DEFAULT = "medium"
HAS_DEPENDENTS_DEFAULT = False

INCOME_STABILITY_LABELS: Dict[str, str] = {
    "stable": "Stable (W-2, Salary)",
    "variable": "Variable (Freelance, Commission, Gig)",
}
RISK_TOLERANCE_LABELS: Dict[str, str] = {
    "low": "Low — I want maximum security",
    "medium": "Medium — Balanced approach",
    "high": "High — I'm comfortable with less buffer",
}

_INCOME_STABILITY_ALIASES = {
    "stable": "stable",
    "stable (w-2, salary)": "stable",
    "w-2": "stable",
    "w2": "stable",
    "salary": "stable",
    "salaried": "stable",
    "full-time": "stable",
    "full time": "stable",
    "variable": "variable",
    "variable (freelance, commission, gig)": "variable",
    "freelance": "variable",
    "commission": "variable",
    "gig": "variable",
    "contract": "variable",
    "self-employed": "variable",
}
_RISK_TOLERANCE_ALIASES = {
    "low": "low",
    "conservative": "low",
    "medium": "medium",
    "moderate": "medium",
    "balanced": "medium",
    "high": "high",
    "aggressive": "high",
}
_TRUTHY = {"1", "true", "yes", "y", "on", "checked"}


def _label_key(value: str) -> str:
    # "Low — I want maximum security" -> "low"
    return value.split("—", 1)[0].strip()


def normalize_income_stability(value: Any) -> str:
    if not value or not isinstance(value, str):
        return INCOME_STABILITY_DEFAULT
    cleaned = value.strip().lower()
    if cleaned not in _INCOME_STABILITY_ALIASES:
        logger.info("Unknown income stability %r, using %s", value, INCOME_STABILITY_DEFAULT)
    return _INCOME_STABILITY_ALIASES.get(cleaned, INCOME_STABILITY_DEFAULT)


def normalize_risk_tolerance(value: Any) -> str:
    if not value or not isinstance(value, str):
        return RISK_TOLERANCE_DEFAULT
    cleaned = _label_key(value.strip().lower())
    if cleaned not in _RISK_TOLERANCE_ALIASES:
        logger.info("Unknown risk tolerance %r, using %s", value, RISK_TOLERANCE_DEFAULT)
    return _RISK_TOLERANCE_ALIASES.get(cleaned, RISK_TOLERANCE_DEFAULT)


def normalize_dependents(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return HAS_DEPENDENTS_DEFAULT


def income_stability_label(value: str) -> str:
    return INCOME_STABILITY_LABELS[normalize_income_stability(value)]


def risk_tolerance_label(value: str) -> str:
    return RISK_TOLERANCE_LABELS[normalize_risk_tolerance(value)]


def form_defaults() -> Dict[str, Any]:
    return {
        "monthly_expenses": EXPENSES_DEFAULT,
        "income_stability": INCOME_STABILITY_DEFAULT,
        "has_dependents": HAS_DEPENDENTS_DEFAULT,
        "risk_tolerance": RISK_TOLERANCE_DEFAULT,
    }


def form_limits() -> Dict[str, int]:
    return {"min": EXPENSES_MIN, "max": EXPENSES_MAX, "step": EXPENSES_STEP}
