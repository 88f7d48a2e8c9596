from typing import Dict

from .schemas import FundInput, FundResult

MINIMUM_MONTHS = 3
IDEAL_BUFFER_MONTHS = 3
DEPENDENTS_MONTHS = 2

BASE_MONTHS: Dict[str, int] = {
    "stable": 3,
    "variable": 6,
}
RISK_ADJUSTMENT_MONTHS: Dict[str, int] = {
    "low": 2,
    "medium": 0,
    "high": -1,
}


def base_months(fund_input: FundInput) -> int:
    """Months of coverage before the floor: stability base, then dependents, then risk."""
    months = BASE_MONTHS[fund_input.income_stability]
    if fund_input.has_dependents:
        months += DEPENDENTS_MONTHS
    months += RISK_ADJUSTMENT_MONTHS[fund_input.risk_tolerance]
    return months


def estimate(fund_input: FundInput) -> FundResult:
    recommended_months = max(MINIMUM_MONTHS, base_months(fund_input))
    ideal_months = recommended_months + IDEAL_BUFFER_MONTHS
    expenses = fund_input.monthly_expenses
    return FundResult(
        recommended_months=recommended_months,
        minimum_months=MINIMUM_MONTHS,
        ideal_months=ideal_months,
        recommended_fund=recommended_months * expenses,
        minimum_fund=MINIMUM_MONTHS * expenses,
        ideal_fund=ideal_months * expenses,
    )
