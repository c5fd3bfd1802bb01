"""Integration tests for API endpoints"""

import pytest
from datetime import datetime, timezone
from fastapi.testclient import TestClient


@pytest.fixture
def saved_user(client: TestClient, sample_user: dict) -> dict:
    """Sample user stored through the API"""
    response = client.post("/api/users/data", json=sample_user)
    assert response.status_code == 200
    return sample_user


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "creditbridge_score_calculations_total" in response.text


def test_request_id_is_echoed(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


def test_save_and_get_user_data(client: TestClient, sample_user: dict):
    """Test POST /api/users/data then GET /api/users/{id}/data"""
    response = client.post("/api/users/data", json=sample_user)
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["user"]["userId"] == "user_good"
    assert data["user"]["analytics"] is None

    response = client.get("/api/users/user_good/data")
    assert response.status_code == 200
    user = response.json()["user"]
    assert user["email"] == "jane@example.com"
    assert user["financialData"] == sample_user["financialData"]
    assert user["traditionalCredit"] == {"hasCredit": "no"}
    assert user["createdAt"]


def test_save_user_data_requires_user_id(client: TestClient):
    response = client.post("/api/users/data", json={"financialData": {}})
    assert response.status_code == 422

    response = client.post("/api/users/data", json={"userId": ""})
    assert response.status_code == 422


def test_get_unknown_user_returns_404(client: TestClient):
    response = client.get("/api/users/nobody/data")
    assert response.status_code == 404
    assert response.json()["detail"] == "User not found"


def test_generate_analytics_unknown_user(client: TestClient):
    response = client.post("/api/analytics/nobody/generate")
    assert response.status_code == 404


def test_generate_analytics(client: TestClient, saved_user: dict):
    """Test POST /api/analytics/{id}/generate for a strong thin-file renter"""
    response = client.post("/api/analytics/user_good/generate")
    assert response.status_code == 200

    data = response.json()
    assert data["success"] is True
    analytics = data["analytics"]

    current = analytics["currentScore"]
    assert current["score"] == 768
    assert current["factors"] == {
        "rentPayments": 90,
        "utilityPayments": 88,
        "cashFlow": 104,
        "employmentHistory": 100,
        "traditionalCredit": 0,
    }
    assert current["weights"] == {"traditional": 0.0, "alternative": 1.0}
    assert current["alternativeDataStrength"] == 96

    assert len(analytics["historicalData"]) == 12
    assert analytics["historicalData"][-1]["date"] == datetime.now(timezone.utc).date().isoformat()

    analysis = analytics["analysis"]
    assert len(analysis["strengths"]) == 8
    assert len(analysis["weaknesses"]) == 5
    assert analysis["riskProfile"] == "low"
    assert analysis["loanEligibility"] == {
        "creditCards": True,
        "personalLoans": True,
        "autoLoans": True,
        "mortgages": True,
    }

    assert len(analytics["loanOffers"]) == 20
    likelihoods = [offer["approvalLikelihood"] for offer in analytics["loanOffers"]]
    assert likelihoods == sorted(likelihoods, reverse=True)


def test_generate_analytics_is_reproducible_with_seeded_rng(client: TestClient, saved_user: dict):
    first = client.post("/api/analytics/user_good/generate").json()["analytics"]
    second = client.post("/api/analytics/user_good/generate").json()["analytics"]
    assert first["historicalData"] == second["historicalData"]


def test_get_analytics_returns_stored_snapshot(client: TestClient, saved_user: dict):
    response = client.get("/api/analytics/user_good")
    assert response.status_code == 404

    generated = client.post("/api/analytics/user_good/generate").json()

    response = client.get("/api/analytics/user_good")
    assert response.status_code == 200
    assert response.json() == generated


def test_generate_updates_profile_summary(client: TestClient, saved_user: dict):
    client.post("/api/analytics/user_good/generate")

    summary = client.get("/api/users/user_good/data").json()["user"]["analytics"]
    assert summary["riskProfile"] == "low"
    assert summary["weaknesses"][0] == "High Debt-to-Income Ratio"
    assert summary["loanEligibility"]["mortgages"] is True


def test_loan_offers_endpoint(client: TestClient, saved_user: dict):
    response = client.get("/api/analytics/user_good/loan-offers")
    assert response.status_code == 404

    client.post("/api/analytics/user_good/generate")

    response = client.get("/api/analytics/user_good/loan-offers")
    assert response.status_code == 200
    data = response.json()
    assert len(data["offers"]) == 20
    assert data["offers"][0]["productName"] == "Premium Rewards Card"
    assert data["expiresAt"]


def test_calculate_credit_score(client: TestClient, sample_user: dict):
    """Stateless calculator matches the analytics pipeline"""
    response = client.post(
        "/api/calculate-credit-score",
        json={
            "financialData": sample_user["financialData"],
            "traditionalCredit": sample_user["traditionalCredit"],
        },
    )
    assert response.status_code == 200

    data = response.json()
    assert data["score"] == 768
    assert data["factors"]["cashFlow"] == 104
    assert data["weights"] == {"traditional": 0.0, "alternative": 1.0}
    assert data["breakdown"]["baseScore"] == 500
    assert data["breakdown"]["alternativeScore"] == 748
    assert data["breakdown"]["alternativeDataBonus"] == 20


def test_calculate_credit_score_with_bureau_score(client: TestClient):
    response = client.post(
        "/api/calculate-credit-score",
        json={"financialData": {}, "traditionalCredit": {"hasCredit": "yes", "score": 700}},
    )
    assert response.status_code == 200
    data = response.json()
    # 700 * 0.4 + 500 * 0.6
    assert data["score"] == 580
    assert data["breakdown"]["traditionalContribution"] == 280


def test_calculate_credit_score_requires_financial_data(client: TestClient):
    response = client.post("/api/calculate-credit-score", json={"traditionalCredit": {}})
    assert response.status_code == 422


def test_credit_history_and_manual_update(client: TestClient, saved_user: dict):
    response = client.get("/api/users/user_good/credit-history")
    assert response.status_code == 200
    assert response.json() == {"history": [], "currentScore": 0, "trend": 0}

    client.post("/api/analytics/user_good/generate")

    response = client.post("/api/users/user_good/credit-score", json={"score": 700.4})
    assert response.status_code == 200
    data = response.json()
    assert data["newScore"]["score"] == 700
    assert data["newScore"]["factors"]["rentPayments"] == 80
    assert [entry["score"] for entry in data["history"]] == [768, 700]

    response = client.get("/api/users/user_good/credit-history?months=12")
    data = response.json()
    assert data["currentScore"] == 700
    assert data["trend"] == -68

    response = client.get("/api/users/user_good/credit-history?months=1")
    assert [entry["score"] for entry in response.json()["history"]] == [700]


def test_credit_score_update_validation(client: TestClient, saved_user: dict):
    assert client.post("/api/users/nobody/credit-score", json={"score": 700}).status_code == 404
    assert client.post("/api/users/user_good/credit-score", json={"score": 0}).status_code == 422
    assert client.get("/api/users/nobody/credit-history").status_code == 404
    assert client.get("/api/users/user_good/credit-history?months=0").status_code == 422

    response = client.post(
        "/api/users/user_good/credit-score",
        content='{"score": Infinity}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422


def test_stats(client: TestClient, saved_user: dict):
    response = client.get("/api/stats")
    assert response.json() == {"totalUsers": 1, "averageScore": 0, "activeUsers": 1, "dataPoints": 4}

    client.post("/api/analytics/user_good/generate")
    client.post("/api/users/data", json={"userId": "user_new"})

    response = client.get("/api/stats")
    assert response.status_code == 200
    # users without a score still count toward the average
    assert response.json() == {"totalUsers": 2, "averageScore": 384, "activeUsers": 2, "dataPoints": 8}


def test_manual_score_entry_dated_in_utc(client: TestClient, saved_user: dict):
    response = client.post("/api/users/user_good/credit-score", json={"score": 650})
    assert response.json()["newScore"]["date"] == datetime.now(timezone.utc).date().isoformat()


@pytest.mark.parametrize(
    "financial_data",
    [
        {"employment": {"startDate": "0000", "annualSalary": 50000}},
        {"housing": {"housingType": "rent", "rentPaymentHistory": [{"date": "0000-06", "status": "on-time"}]}},
        {"banking": {"monthlyIncome": 10**400, "monthlyExpenses": 3000}},
        {"banking": {"monthlyIncome": 1, "monthlyExpenses": 1, "averageBalance": 1e308}},
    ],
)
def test_calculate_credit_score_tolerates_out_of_range_values(client: TestClient, financial_data: dict):
    """Values outside the representable range score as missing instead of failing"""
    response = client.post("/api/calculate-credit-score", json={"financialData": financial_data})
    assert response.status_code == 200
    assert 300 <= response.json()["score"] <= 850


def test_calculate_credit_score_unexpected_failure(client: TestClient, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("scoring exploded")

    monkeypatch.setattr("creditbridge.api.routes.scoring.calculate_score", boom)

    response = client.post("/api/calculate-credit-score", json={"financialData": {}})
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to calculate credit score"


def test_save_user_data_rolls_back_on_failure(client: TestClient, db, sample_user: dict, monkeypatch):
    def failing_commit():
        raise RuntimeError("database unavailable")

    monkeypatch.setattr(db, "commit", failing_commit)

    response = client.post("/api/users/data", json=sample_user)
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to save user data"
    assert client.get("/api/users/user_good/data").status_code == 404


def test_credit_score_update_rolls_back_on_failure(client: TestClient, db, saved_user: dict, monkeypatch):
    def failing_commit():
        raise RuntimeError("database unavailable")

    monkeypatch.setattr(db, "commit", failing_commit)

    response = client.post("/api/users/user_good/credit-score", json={"score": 700})
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to update credit score"
    assert client.get("/api/users/user_good/credit-history").json()["history"] == []
