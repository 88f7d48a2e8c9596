from fastapi import FastAPI

from fundapp.config import FUNDCALC_API_TITLE
from fundapp.core.content import page_content
from fundapp.core.models import EstimateRequest, EstimateResponse, PageContent
from fundapp.core.pipeline import run_estimate
from fundapp.logging_config import setup_logging

setup_logging()

app = FastAPI(title=FUNDCALC_API_TITLE)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/estimate", response_model=EstimateResponse)
def estimate_fund(payload: EstimateRequest):
    return run_estimate(payload)


@app.get("/content", response_model=PageContent)
def content():
    return page_content()
