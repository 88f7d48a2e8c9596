from typing import List

from pydantic import AliasChoices, BaseModel, Field, field_validator

from fundmath.utils import sanitize_expenses
from fundapp.logging_config import get_logger

from .tools import (
    EXPENSES_DEFAULT,
    HAS_DEPENDENTS_DEFAULT,
    INCOME_STABILITY_DEFAULT,
    RISK_TOLERANCE_DEFAULT,
    normalize_dependents,
    normalize_income_stability,
    normalize_risk_tolerance,
)

logger = get_logger(__name__)


class EstimateRequest(BaseModel):
    monthly_expenses: int = Field(
        default=EXPENSES_DEFAULT,
        ge=0,
        validation_alias=AliasChoices("monthly_expenses", "monthlyExpenses"),
    )
    income_stability: str = Field(
        default=INCOME_STABILITY_DEFAULT,
        validation_alias=AliasChoices("income_stability", "incomeStability"),
    )
    has_dependents: bool = Field(
        default=HAS_DEPENDENTS_DEFAULT,
        validation_alias=AliasChoices("has_dependents", "hasDependents"),
    )
    risk_tolerance: str = Field(
        default=RISK_TOLERANCE_DEFAULT,
        validation_alias=AliasChoices("risk_tolerance", "riskTolerance"),
    )

    # Coerce, never reject: bad numbers read as 0, unknown choices fall back to defaults.
    @field_validator("monthly_expenses", mode="before")
    @classmethod
    def _sanitize_expenses(cls, value):
        sanitized = sanitize_expenses(value)
        if sanitized != value:
            logger.info("Monthly expenses %r read as %s", value, sanitized)
        return sanitized

    @field_validator("income_stability", mode="before")
    @classmethod
    def _normalize_income_stability(cls, value):
        return normalize_income_stability(value)

    @field_validator("has_dependents", mode="before")
    @classmethod
    def _normalize_dependents(cls, value):
        return normalize_dependents(value)

    @field_validator("risk_tolerance", mode="before")
    @classmethod
    def _normalize_risk_tolerance(cls, value):
        return normalize_risk_tolerance(value)


class FundFigures(BaseModel):
    recommended_months: int
    minimum_months: int
    ideal_months: int
    recommended_fund: int
    minimum_fund: int
    ideal_fund: int


class FormattedFigures(BaseModel):
    recommended_fund: str
    minimum_fund: str
    ideal_fund: str
    recommended_months: str
    minimum_months: str
    ideal_months: str


class BreakdownRow(BaseModel):
    label: str
    value: str


class EstimateResponse(BaseModel):
    input: EstimateRequest
    result: FundFigures
    formatted: FormattedFigures
    breakdown: List[BreakdownRow]
    summary: str


class FooterLink(BaseModel):
    label: str
    url: str


class Footer(BaseModel):
    points: List[str]
    links: List[FooterLink]
    copyright: str


class PageContent(BaseModel):
    title: str
    subtitle: str
    tips: List[str]
    disclaimer: str
    footer: Footer
