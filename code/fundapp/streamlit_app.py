# streamlit_app.py
import os
import sys

import streamlit as st

# Ensure the source root is on sys.path so `fundapp` / `fundmath` import when Streamlit runs this file directly.
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from fundapp.core import content  # noqa: E402
from fundapp.core.models import EstimateRequest  # noqa: E402
from fundapp.core.pipeline import run_estimate  # noqa: E402
from fundapp.core.tools import (  # noqa: E402
    INCOME_STABILITY_LABELS,
    RISK_TOLERANCE_LABELS,
    form_defaults,
    form_limits,
    income_stability_label,
    risk_tolerance_label,
)
from fundapp.logging_config import setup_logging  # noqa: E402
from fundmath.utils import clamp_expenses  # noqa: E402

setup_logging()

st.set_page_config(page_title=content.PAGE_TITLE, layout="centered")
st.markdown(f"<h1 style='text-align: center'>{content.PAGE_TITLE}</h1>", unsafe_allow_html=True)
st.markdown(f"<p style='text-align: center'>{content.PAGE_SUBTITLE}</p>", unsafe_allow_html=True)

defaults = form_defaults()
limits = form_limits()
stability_options = list(INCOME_STABILITY_LABELS)
risk_options = list(RISK_TOLERANCE_LABELS)

# --- Form -------------------------------------------------------------------
with st.container(border=True):
    monthly_expenses = st.number_input(
        "Monthly Expenses ($)",
        min_value=limits["min"],
        max_value=limits["max"],
        step=limits["step"],
        value=defaults["monthly_expenses"],
        key="monthly_expenses",
    )
    income_stability = st.selectbox(
        "Income Stability",
        stability_options,
        index=stability_options.index(defaults["income_stability"]),
        format_func=income_stability_label,
        key="income_stability",
    )
    has_dependents = st.checkbox(
        content.DEPENDENTS_LABEL,
        value=defaults["has_dependents"],
        help=content.DEPENDENTS_HELP,
        key="has_dependents",
    )
    risk_tolerance = st.selectbox(
        "Risk Tolerance",
        risk_options,
        index=risk_options.index(defaults["risk_tolerance"]),
        format_func=risk_tolerance_label,
        key="risk_tolerance",
    )
    # Every widget change reruns the script, so the button only forces a rerun.
    st.button("Calculate Fund", type="primary")

response = run_estimate(
    EstimateRequest(
        monthly_expenses=clamp_expenses(monthly_expenses),
        income_stability=income_stability,
        has_dependents=has_dependents,
        risk_tolerance=risk_tolerance,
    )
)
formatted = response.formatted

# --- Results ----------------------------------------------------------------
with st.container(border=True):
    st.markdown(
        "<div style='text-align: center'>"
        "<h3>Recommended Emergency Fund</h3>"
        f"<div style='font-size: 2.5rem; font-weight: 700'>{formatted.recommended_fund}</div>"
        f"<div>{formatted.recommended_months} of expenses</div>"
        "</div>",
        unsafe_allow_html=True,
    )
    st.divider()
    minimum_col, ideal_col = st.columns(2)
    with minimum_col:
        st.metric("Minimum Fund", formatted.minimum_fund)
        st.caption(formatted.minimum_months)
    with ideal_col:
        st.metric("Ideal Fund", formatted.ideal_fund)
        st.caption(formatted.ideal_months)
    with st.expander("How this was calculated"):
        st.text(response.summary)

with st.container(border=True):
    st.subheader("Emergency Fund Tips")
    st.markdown("\n".join(f"- {tip}" for tip in content.FUND_TIPS))

with st.container(border=True):
    st.subheader("Savings Breakdown")
    st.table([{"Category": row.label, "Amount": row.value} for row in response.breakdown])

st.caption(content.DISCLAIMER)

# --- Footer -----------------------------------------------------------------
st.divider()
st.markdown(
    "<div style='text-align: center'>"
    + " ".join(f"• {point}" for point in content.FOOTER_POINTS)
    + "</div>",
    unsafe_allow_html=True,
)
st.markdown(
    "<div style='text-align: center'>"
    + " | ".join(f"<a href='{link['url']}' target='_blank'>{link['label']}</a>" for link in content.FOOTER_LINKS)
    + "</div>",
    unsafe_allow_html=True,
)
st.markdown(f"<p style='text-align: center'>{content.COPYRIGHT}</p>", unsafe_allow_html=True)
