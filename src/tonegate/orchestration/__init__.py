"""
Orchestration -- routing a message to the right amount of validation.

Components:
  - IntentClassifier: Keyword-scored intent detection
  - ValidationLevel / config_for_level: Intent -> level -> ValidationConfig
"""
from .intent_classifier import (
    IntentClassificationResult,
    IntentClassifier,
    MessageIntent,
    ValidationLevel,
    config_for_level,
    requires_validation,
    validation_level,
)
