"""
API Evals -- the HTTP surface over the pipeline, safety gate, and rules.

Uses FastAPI's TestClient against a fresh app per test.
"""

from fastapi.testclient import TestClient

from tonegate.api.gateway import create_app
from tonegate.config import Settings

WELCOME = "Welcome to Jio! Your account is ready."
JARGON = "Please leverage synergistic solutions and do the needful."


class TestHealth:
    """Eval: Do the probes report a live, loaded service?"""

    def test_health(self, api_client):
        response = api_client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["rules_loaded"] is True

    def test_metrics_start_at_zero(self, api_client):
        body = api_client.get("/metrics").json()
        assert body["validations"] == 0
        assert set(body["caches"]) == {"knowledge", "enforcement", "readability"}


class TestValidateEndpoint:
    """Eval: Does /validate return the same verdicts as the pipeline?"""

    def test_clean_text(self, api_client):
        body = api_client.post("/api/v1/validate", json={"text": WELCOME}).json()
        assert body["passed"] is True
        assert body["score"] == 100
        assert body["violations"] == []

    def test_jargon(self, api_client):
        body = api_client.post("/api/v1/validate", json={"text": JARGON}).json()
        assert body["score"] == 85
        assert body["warning_count"] == 3
        leverage = next(v for v in body["violations"] if v["matched_text"] == "leverage")
        assert JARGON[leverage["start"]:leverage["end"]] == "leverage"
        assert leverage["auto_fixable"] is True
        assert body["auto_fixes"][0]["replacement"] == "use"

    def test_intent_skip(self, api_client):
        body = api_client.post(
            "/api/v1/validate", json={"text": JARGON, "prompt": "hello", "use_intent": True},
        ).json()
        assert body["skipped_reason"] == "validation not required for intent: generalChat"
        assert body["score"] == 100

    def test_repeat_served_from_cache(self, api_client):
        first = api_client.post("/api/v1/validate", json={"text": JARGON}).json()
        second = api_client.post("/api/v1/validate", json={"text": JARGON}).json()
        assert first == second

        metrics = api_client.get("/metrics").json()
        assert metrics["validations"] == 2
        assert metrics["validations_passed"] == 2
        assert metrics["caches"]["enforcement"]["hit_count"] == 1

    def test_message_id_records_evidence(self, api_client):
        api_client.post("/api/v1/validate", json={"text": JARGON, "message_id": "api-1"})
        tracker = api_client.app.state.pipeline.evidence_tracker
        evidence = tracker.get_evidence("api-1")
        assert evidence is not None
        assert any(k.term == "leverage" for k in evidence.knowledge_used)

    def test_empty_text_rejected(self, api_client):
        response = api_client.post("/api/v1/validate", json={"text": "   "})
        assert response.status_code == 400
        assert "cannot be empty" in response.json()["detail"]

    def test_missing_field_rejected(self, api_client):
        assert api_client.post("/api/v1/validate", json={}).status_code == 422

    def test_too_long_rejected(self):
        client = TestClient(create_app(settings=Settings(max_text_length=10)))
        response = client.post("/api/v1/validate", json={"text": "x" * 11})
        assert response.status_code == 400
        assert "at most 10" in response.json()["detail"]


class TestOtherEndpoints:
    """Eval: Do autofix, safety, intent, and rules endpoints answer correctly?"""

    def test_autofix(self, api_client):
        body = api_client.post("/api/v1/autofix", json={"text": "Utilize the color picker"}).json()
        assert body["fixed_content"] == "use the colour picker"
        assert body["fix_count"] == 2

    def test_safety_emergency(self, api_client):
        body = api_client.post(
            "/api/v1/safety/classify", json={"text": "I want to end my life"},
        ).json()
        assert body["routing"] == "emergencyResponse"
        assert body["highest_level"] == "critical"
        assert body["primary_domain"] == "mentalHealth"
        assert body["modifications"]["emergency_info"]["helplines"]
        assert api_client.get("/metrics").json()["safety_checks"] == 1

    def test_intent(self, api_client):
        body = api_client.post(
            "/api/v1/intent", json={"text": "Can you rewrite this in a friendly tone?"},
        ).json()
        assert body["intent"] == "contentGeneration"
        assert body["suggested_level"] == "full"
        assert body["requires_validation"] is True

    def test_rule_stats_cached(self, api_client, rules):
        first = api_client.get("/api/v1/rules/stats").json()
        api_client.get("/api/v1/rules/stats")
        assert first == rules.stats()
        knowledge = api_client.get("/metrics").json()["caches"]["knowledge"]
        assert knowledge["hit_count"] == 1

    def test_avoid_terms_by_category(self, api_client):
        body = api_client.get("/api/v1/rules/avoid", params={"category": "elitist"}).json()
        assert body
        assert all(t["category"] == "elitist" for t in body)

    def test_avoid_terms_bad_category(self, api_client):
        response = api_client.get("/api/v1/rules/avoid", params={"category": "nope"})
        assert response.status_code == 400


class TestRateLimit:
    """Eval: Is a flooding client turned away?"""

    def test_limit_enforced(self):
        client = TestClient(create_app(settings=Settings(rate_limit_per_minute=2)))
        for _ in range(2):
            assert client.post("/api/v1/intent", json={"text": "hi"}).status_code == 200
        response = client.post("/api/v1/intent", json={"text": "hi"})
        assert response.status_code == 429
        assert response.headers["Retry-After"] == "60"
