PAGE_TITLE = "Emergency Fund Calculator (2026)"
PAGE_SUBTITLE = "Find your recommended savings coverage"

DEPENDENTS_LABEL = "I have dependents"
DEPENDENTS_HELP = "Children, elderly parents, or others relying on your income"

FUND_TIPS = [
    "Keep emergency funds in a high-yield savings account for easy access",
    "Start with a goal of 1 month, then build up gradually",
    "Automate transfers to your emergency fund each payday",
    "Only use emergency funds for true emergencies — job loss, medical, repairs",
]

DISCLAIMER = (
    "This calculator provides estimates for recommended emergency fund amounts based on your monthly "
    "expenses, income stability, dependents, and risk tolerance. General guidelines suggest 3-6 months "
    "of expenses, though individual situations vary. These figures are estimates only and should not "
    "replace personalized financial planning. Consider consulting a financial advisor for guidance "
    "tailored to your specific circumstances."
)

FOOTER_POINTS = ["Estimates only", "Not financial advice", "Free to use"]
FOOTER_LINKS = [
    {"label": "Privacy Policy", "url": "https://scenariocalculators.com/privacy"},
    {"label": "Terms of Service", "url": "https://scenariocalculators.com/terms"},
]
COPYRIGHT = "© 2026 Emergency Fund Calculator"


def page_content() -> dict:
    return {
        "title": PAGE_TITLE,
        "subtitle": PAGE_SUBTITLE,
        "tips": list(FUND_TIPS),
        "disclaimer": DISCLAIMER,
        "footer": {
            "points": list(FOOTER_POINTS),
            "links": [dict(link) for link in FOOTER_LINKS],
            "copyright": COPYRIGHT,
        },
    }
