"""
Learning -- evidence of what shaped an output, and the user's own corrections.

Components:
  - EvidenceTracker: Per-message append-only ledgers, frozen into history on finish
  - CorrectionStore: In-memory user corrections and avoid patterns
  - models: Ledger records, GenerationEvidence, EvidenceSummary, Correction
"""

from .corrections import CorrectionStore
from .evidence_tracker import EvidenceTracker
from .models import (
    AutoFixApplied,
    Correction,
    EvidenceSummary,
    GenerationEvidence,
    KnowledgeType,
    KnowledgeUsed,
    LearningApplied,
    LearningsApplied,
    SafetyCheckRecord,
    SemanticMatch,
)

__all__ = [
    "AutoFixApplied",
    "Correction",
    "CorrectionStore",
    "EvidenceSummary",
    "EvidenceTracker",
    "GenerationEvidence",
    "KnowledgeType",
    "KnowledgeUsed",
    "LearningApplied",
    "LearningsApplied",
    "SafetyCheckRecord",
    "SemanticMatch",
]
