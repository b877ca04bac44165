"""Eval fixtures -- shared services, a controllable clock, and an API client."""

import pytest
from fastapi.testclient import TestClient

from tonegate.api.gateway import create_app
from tonegate.config import Settings
from tonegate.enforcement import ValidationPipeline
from tonegate.learning import CorrectionStore, EvidenceTracker
from tonegate.orchestration import IntentClassifier
from tonegate.rules import RuleRepository
from tonegate.safety import SafetyGate


class FakeClock:
    """Manually advanced monotonic clock for TTL tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(scope="session")
def rules():
    """Loaded bundled rule tables (read-only after load, safe to share)."""
    repository = RuleRepository()
    repository.load()
    return repository


@pytest.fixture(scope="session")
def safety_gate():
    return SafetyGate()


@pytest.fixture(scope="session")
def classifier():
    return IntentClassifier()


@pytest.fixture
def pipeline(rules, safety_gate, classifier):
    """Pipeline with shared rules, fresh caches and no evidence tracking."""
    return ValidationPipeline(rules=rules, safety_gate=safety_gate, intent_classifier=classifier)


@pytest.fixture
def tracked_pipeline(rules, safety_gate, classifier):
    """Pipeline that records evidence and consults user corrections."""
    return ValidationPipeline(
        rules=rules,
        safety_gate=safety_gate,
        intent_classifier=classifier,
        evidence_tracker=EvidenceTracker(),
        corrections=CorrectionStore(),
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def api_client(rules, safety_gate, classifier):
    """TestClient over a fresh app (fresh caches, metrics, and rate limiter)."""
    pipeline = ValidationPipeline(
        rules=rules,
        safety_gate=safety_gate,
        intent_classifier=classifier,
        evidence_tracker=EvidenceTracker(),
    )
    return TestClient(create_app(pipeline=pipeline, settings=Settings()))
