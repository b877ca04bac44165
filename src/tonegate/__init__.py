"""
tonegate -- in-process content compliance: brand voice, readability, and safety.

Components:
  - ValidationPipeline: Public entry point; trust score and pass/fail verdict
  - SafetyGate: Sensitive-domain classification and routing
  - IntentClassifier: Decides how much validation a message needs
  - RuleRepository: Avoid/preferred/auto-fix wording tables
  - TTLCache: Bounded cache with stale-while-revalidate refresh
  - EvidenceTracker: Per-message record of what influenced an output
"""

# enforcement first: the intent classifier imports enforcement.models
from .enforcement import ValidationConfig, ValidationPipeline, ValidationResult
from .cache import TTLCache
from .config import Settings
from .learning import CorrectionStore, EvidenceTracker
from .orchestration import IntentClassifier, MessageIntent
from .rules import RuleRepository
from .safety import SafetyGate, SafetyRouting

__version__ = "0.1.0"

__all__ = [
    "CorrectionStore",
    "EvidenceTracker",
    "IntentClassifier",
    "MessageIntent",
    "RuleRepository",
    "SafetyGate",
    "SafetyRouting",
    "Settings",
    "TTLCache",
    "ValidationConfig",
    "ValidationPipeline",
    "ValidationResult",
]
