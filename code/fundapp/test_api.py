from fastapi.testclient import TestClient

from fundapp.main import app

client = TestClient(app)


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_estimate_worked_example():
    resp = client.post(
        "/estimate",
        json={"monthly_expenses": 3000, "income_stability": "variable", "has_dependents": True, "risk_tolerance": "low"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["result"]["recommended_months"] == 10
    assert body["result"]["recommended_fund"] == 30000
    assert body["result"]["ideal_fund"] == 39000
    assert body["formatted"]["ideal_fund"] == "$39,000"
    assert body["breakdown"][2] == {"label": "Total Savings Target", "value": "$30,000"}


def test_estimate_accepts_camel_case_and_defaults():
    resp = client.post("/estimate", json={"monthlyExpenses": 4000, "riskTolerance": "high"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["input"] == {
        "monthly_expenses": 4000,
        "income_stability": "stable",
        "has_dependents": False,
        "risk_tolerance": "high",
    }
    assert body["result"]["recommended_fund"] == 12000


def test_estimate_never_rejects_malformed_numbers():
    resp = client.post("/estimate", json={"monthly_expenses": "lots"})
    assert resp.status_code == 200
    assert resp.json()["result"]["minimum_fund"] == 0


def test_content():
    resp = client.get("/content")
    assert resp.status_code == 200
    body = resp.json()
    assert body["title"] == "Emergency Fund Calculator (2026)"
    assert len(body["tips"]) == 4
    assert body["footer"]["links"][0]["label"] == "Privacy Policy"


def test_estimate_very_large_expenses():
    expenses = 10**29
    resp = client.post(
        "/estimate",
        json={"monthly_expenses": expenses, "income_stability": "variable", "has_dependents": True, "risk_tolerance": "low"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["result"]["recommended_fund"] == 10 * expenses
    assert body["formatted"]["recommended_fund"] == "$" + f"{10 * expenses:,}"
