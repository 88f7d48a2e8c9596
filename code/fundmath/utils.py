import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

EXPENSES_MIN = 500
EXPENSES_MAX = 50000

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(value, hi))


def sanitize_expenses(value: Any) -> int:
    # Leading integer of the field text; anything unusable or negative reads as 0.
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
            return 0
        return max(int(value), 0)
    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    return max(int(match.group(1)), 0)


def clamp_expenses(value: Any) -> int:
    return int(clamp(sanitize_expenses(value), EXPENSES_MIN, EXPENSES_MAX))


def format_currency(value: float) -> str:
    amount = int(Decimal(str(value)).to_integral_value(rounding=ROUND_HALF_UP))
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,}"


def format_months(months: int) -> str:
    return f"{months} month" if months == 1 else f"{months} months"
