import pytest
from fastapi.testclient import TestClient
from campaignguard.api.main import app, lint_cache

client = TestClient(app)


@pytest.fixture(autouse=True)
def _empty_cache():
    lint_cache.clear()
    yield
    lint_cache.clear()


def test_health_check():
    """Verify the API is alive."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "online"
    assert response.json()["catalog_version"] == "rules_v1_2024-01-20"
    assert len(response.json()["settings_hash"]) == 64


def test_lint_health_claim_fails():
    payload = {
        "content": {"headline": "Guaranteed results in 7 days!"},
        "platform": "meta",
        "vertical": "health",
        "region": "US",
    }

    response = client.post("/compliance/lint", json=payload)
    assert response.status_code == 200

    data = response.json()
    assert data["result"]["overall"] == "fail"
    assert data["result"]["score"] == 20
    assert data["result"]["approvalRequired"] is True
    assert data["result"]["violations"][0]["location"] == {
        "element": "headline",
        "position": {"start": 0, "end": 18},
    }
    assert data["publish"]["canPublish"] is False
    assert data["message"] == "Compliance check completed with 4 violations found"


def test_lint_defaults_platform_and_vertical():
    response = client.post("/compliance/lint", json={"content": {"headline": "Great product"}})
    assert response.status_code == 200

    result = response.json()["result"]
    assert result["overall"] == "pass"
    assert result["recommendations"] == ["Review Facebook Advertising Policies for latest updates"]


def test_lint_requires_content():
    response = client.post("/compliance/lint", json={"platform": "meta"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Content is required"


def test_lint_rejects_unknown_media_type():
    payload = {"content": {"media": {"type": "audio", "url": "a.mp3"}}}
    response = client.post("/compliance/lint", json=payload)
    assert response.status_code == 422


def test_batch_lint():
    payload = {"requests": [
        {"content": {"headline": "Great product"}},
        {"content": {"body": "Limited time offer"}, "platform": "google"},
    ]}

    response = client.post("/compliance/lint/batch", json=payload)
    assert response.status_code == 200
    assert [r["overall"] for r in response.json()["results"]] == ["pass", "warning"]


def test_report_endpoint():
    payload = {
        "content": {"headline": "Feel your best"},
        "vertical": "health",
        "policy_packs": ["health_us"],
    }

    response = client.post("/compliance/report", json=payload)
    assert response.status_code == 200

    data = response.json()
    assert data["summary"]["errorCount"] == 3
    assert data["policyPacks"] == ["health_us"]
    assert data["estimatedReviewTime"] == 17


def test_list_and_filter_policies():
    response = client.get("/compliance/policies")
    assert response.status_code == 200
    assert len(response.json()["data"]) == 6

    response = client.get("/compliance/policies", params={"region": "EU"})
    assert [p["id"] for p in response.json()["data"]] == ["tech_gdpr"]
    assert response.json()["message"] == "Retrieved 1 policy packs"


def test_get_policy_and_missing_policy():
    response = client.get("/compliance/policies/beauty_us")
    assert response.status_code == 200
    assert response.json()["vertical"] == "beauty"

    response = client.get("/compliance/policies/nope")
    assert response.status_code == 404


def test_checklist_endpoint():
    response = client.get("/compliance/checklist", params={"vertical": "finance"})
    assert response.status_code == 200
    assert response.json()["checklist"][0]["category"] == "Investment Claims"


EXPERIMENT = {
    "id": "exp_api",
    "design": {"type": "creative_ab", "minSampleSize": 1000, "significanceLevel": 0.05, "duration": 14},
    "variants": ["A"],
    "guardrails": [{"metric": "cpa", "operator": "less_than", "value": 10, "action": "pause"}],
    "outcomes": [
        {
            "variant": "A",
            "metrics": {"clicks": 500, "conversions": 50, "cpa": 8},
            "significance": 0.02,
            "lift": 20,
        }
    ],
}


def test_analyze_experiment():
    response = client.post("/experiments/analyze", json=EXPERIMENT)
    assert response.status_code == 200

    data = response.json()
    assert data["recommendation"] == "stop_winner"
    assert data["winnerVariant"] == "A"
    assert data["confidence"] == pytest.approx(98.0)


def test_guardrail_endpoint_reports_breach():
    breached = dict(EXPERIMENT)
    breached["outcomes"] = [dict(EXPERIMENT["outcomes"][0], metrics={"cpa": 15})]

    response = client.post("/experiments/guardrails", json=breached)
    assert response.status_code == 200

    violations = response.json()["violations"]
    assert len(violations) == 1
    assert violations[0]["violation"] == "cpa (15) is not less than 10"


def test_sample_size_endpoint():
    payload = {"baseline_rate": 0.05, "minimum_detectable_effect": 0.2}
    response = client.post("/experiments/sample-size", json=payload)
    assert response.status_code == 200
    assert response.json() == {"sampleSize": 8149}


def test_sample_size_rejects_bad_baseline():
    payload = {"baseline_rate": 0, "minimum_detectable_effect": 0.2}
    response = client.post("/experiments/sample-size", json=payload)
    assert response.status_code == 400


def test_experiment_report_endpoint():
    response = client.post("/experiments/report", json=EXPERIMENT)
    assert response.status_code == 200
    assert response.json()["summary"].startswith('Experiment "exp_api" ran for 14 days with 1 variants.')
