import os

FUNDCALC_LOG_LEVEL = os.getenv("FUNDCALC_LOG_LEVEL", "INFO").upper()
FUNDCALC_LOG_JSON = os.getenv("FUNDCALC_LOG_JSON", "").lower() in {"1", "true", "yes"}
FUNDCALC_API_TITLE = os.getenv("FUNDCALC_API_TITLE", "Emergency Fund Calculator API")
