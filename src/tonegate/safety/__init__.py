"""
Safety gate -- sensitive-domain classification and routing.

Components:
  - SafetyGate: Pattern classifier + routing decision table
  - patterns: Bundled patterns, emergency payloads, disclaimers
"""

from .gate import SafetyGate
from .models import (
    EmergencyInfo,
    GenerationModifications,
    Helpline,
    SafetyClassification,
    SafetyDomain,
    SafetyGateResult,
    SafetyLevel,
    SafetyPattern,
    SafetyRouting,
    level_weight,
)

__all__ = [
    "EmergencyInfo",
    "GenerationModifications",
    "Helpline",
    "SafetyClassification",
    "SafetyDomain",
    "SafetyGate",
    "SafetyGateResult",
    "SafetyLevel",
    "SafetyPattern",
    "SafetyRouting",
    "level_weight",
]
