from typing import List

from fundmath.estimator import (
    BASE_MONTHS,
    DEPENDENTS_MONTHS,
    IDEAL_BUFFER_MONTHS,
    MINIMUM_MONTHS,
    RISK_ADJUSTMENT_MONTHS,
    base_months,
    estimate,
)
from fundmath.schemas import FundInput, FundResult
from fundmath.utils import format_currency, format_months
from fundapp.logging_config import get_logger

from .models import BreakdownRow, EstimateRequest, EstimateResponse, FormattedFigures, FundFigures

logger = get_logger(__name__)


def to_fund_input(payload: EstimateRequest) -> FundInput:
    return FundInput(
        monthly_expenses=payload.monthly_expenses,
        income_stability=payload.income_stability,
        has_dependents=payload.has_dependents,
        risk_tolerance=payload.risk_tolerance,
    )


def build_breakdown(fund_input: FundInput, result: FundResult) -> List[BreakdownRow]:
    return [
        BreakdownRow(label="Monthly Expenses", value=format_currency(fund_input.monthly_expenses)),
        BreakdownRow(label="Coverage Months", value=format_months(result.recommended_months)),
        BreakdownRow(label="Total Savings Target", value=format_currency(result.recommended_fund)),
    ]


def format_figures(result: FundResult) -> FormattedFigures:
    return FormattedFigures(
        recommended_fund=format_currency(result.recommended_fund),
        minimum_fund=format_currency(result.minimum_fund),
        ideal_fund=format_currency(result.ideal_fund),
        recommended_months=format_months(result.recommended_months),
        minimum_months=format_months(result.minimum_months),
        ideal_months=format_months(result.ideal_months),
    )


def explain_months(fund_input: FundInput) -> List[str]:
    """Walk through how the recommended coverage was reached, one line per step."""
    stability = fund_input.income_stability.capitalize()
    lines = [f"- {stability} income starts at {format_months(BASE_MONTHS[fund_input.income_stability])}."]

    if fund_input.has_dependents:
        lines.append(f"- Dependents add {format_months(DEPENDENTS_MONTHS)}.")

    risk_delta = RISK_ADJUSTMENT_MONTHS[fund_input.risk_tolerance]
    risk = fund_input.risk_tolerance.capitalize()
    if risk_delta > 0:
        lines.append(f"- {risk} risk tolerance adds {format_months(risk_delta)}.")
    elif risk_delta < 0:
        lines.append(f"- {risk} risk tolerance removes {format_months(-risk_delta)}.")

    months = base_months(fund_input)
    if months < MINIMUM_MONTHS:
        lines.append(
            f"- That comes to {format_months(months)}, so it is raised to the {MINIMUM_MONTHS}-month minimum."
        )
    return lines


def _summary(fund_input: FundInput, result: FundResult) -> str:
    lines: List[str] = [
        "Summary:",
        f"- Save {format_currency(result.recommended_fund)}, about {format_months(result.recommended_months)} of expenses.",
        f"- Aim for at least {format_currency(result.minimum_fund)} and work toward "
        f"{format_currency(result.ideal_fund)} ({IDEAL_BUFFER_MONTHS} extra months) for a full cushion.",
        "",
        "How we got there:",
    ]
    lines.extend(explain_months(fund_input))
    if fund_input.monthly_expenses == 0:
        lines.extend(["", "Warnings:", "- Monthly expenses are $0, so every target is $0. Enter your real spending."])
    return "\n".join(lines).strip()


def run_estimate(payload: EstimateRequest) -> EstimateResponse:
    fund_input = to_fund_input(payload)
    result = estimate(fund_input)
    logger.debug(
        "estimate expenses=%s stability=%s dependents=%s risk=%s -> %s months",
        fund_input.monthly_expenses,
        fund_input.income_stability,
        fund_input.has_dependents,
        fund_input.risk_tolerance,
        result.recommended_months,
    )
    return EstimateResponse(
        input=payload,
        result=FundFigures(**result.as_dict()),
        formatted=format_figures(result),
        breakdown=build_breakdown(fund_input, result),
        summary=_summary(fund_input, result),
    )
