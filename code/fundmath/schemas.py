from dataclasses import dataclass, asdict
from typing import Any, Dict, Union

Number = Union[int, float]

INCOME_STABILITY_CHOICES = ("stable", "variable")
RISK_TOLERANCE_CHOICES = ("low", "medium", "high")


@dataclass(frozen=True)
class FundInput:
    monthly_expenses: Number
    income_stability: str = "stable"
    has_dependents: bool = False
    risk_tolerance: str = "medium"

    def __post_init__(self):
        if self.income_stability not in INCOME_STABILITY_CHOICES:
            raise ValueError(f"income_stability must be one of {INCOME_STABILITY_CHOICES}, got {self.income_stability!r}")
        if self.risk_tolerance not in RISK_TOLERANCE_CHOICES:
            raise ValueError(f"risk_tolerance must be one of {RISK_TOLERANCE_CHOICES}, got {self.risk_tolerance!r}")


@dataclass(frozen=True)
class FundResult:
    recommended_months: int
    minimum_months: int
    ideal_months: int
    recommended_fund: Number
    minimum_fund: Number
    ideal_fund: Number

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
