"""
Learning data models -- evidence ledger records and user corrections.

Record types are plain dataclasses; kinds are string constants (not enums)
so callers can add their own.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


# =============================================================================
# KNOWLEDGE TYPES
# =============================================================================


class KnowledgeType:
    """What kind of brand knowledge influenced an output."""

    AVOID_WORD = "avoidWord"
    PREFERRED_WORD = "preferredWord"
    BRAND_GUIDELINE = "brandGuideline"
    CHANNEL_RULE = "channelRule"


# =============================================================================
# LEDGER RECORDS
# =============================================================================


@dataclass(frozen=True)
class KnowledgeUsed:
    type: str
    term: str
    category: str = ""
    confidence: float = 1.0


@dataclass(frozen=True)
class LearningApplied:
    correction_id: str
    original: str
    corrected: str
    applied_at: str = field(default_factory=lambda: datetime.now().isoformat())


@dataclass(frozen=True)
class SemanticMatch:
    query: str
    matched_content: str
    similarity: float
    source: str = ""


@dataclass(frozen=True)
class AutoFixApplied:
    rule_id: str
    original: str
    replacement: str
    category: str


@dataclass(frozen=True)
class SafetyCheckRecord:
    domain: str
    triggered: bool
    level: str
    action: str


# =============================================================================
# EVIDENCE
# =============================================================================


@dataclass
class EvidenceLedger:
    """In-flight, append-only ledger for one message."""

    message_id: str
    knowledge_used: list[KnowledgeUsed] = field(default_factory=list)
    learnings_applied: list[LearningApplied] = field(default_factory=list)
    semantic_matches: list[SemanticMatch] = field(default_factory=list)
    auto_fixes_applied: list[AutoFixApplied] = field(default_factory=list)
    safety_checks: list[SafetyCheckRecord] = field(default_factory=list)
    context: dict[str, Any] = field(default_factory=dict)
    started_at: str = field(default_factory=lambda: datetime.now().isoformat())


@dataclass(frozen=True)
class GenerationEvidence:
    """Finished ledger. Immutable once produced by finish_tracking()."""

    message_id: str
    knowledge_used: tuple[KnowledgeUsed, ...]
    learnings_applied: tuple[LearningApplied, ...]
    semantic_matches: tuple[SemanticMatch, ...]
    auto_fixes_applied: tuple[AutoFixApplied, ...]
    safety_checks: tuple[SafetyCheckRecord, ...]
    context: tuple[tuple[str, Any], ...]
    started_at: str
    completed_at: str

    @classmethod
    def from_ledger(cls, ledger: EvidenceLedger) -> "GenerationEvidence":
        return cls(
            message_id=ledger.message_id,
            knowledge_used=tuple(ledger.knowledge_used),
            learnings_applied=tuple(ledger.learnings_applied),
            semantic_matches=tuple(ledger.semantic_matches),
            auto_fixes_applied=tuple(ledger.auto_fixes_applied),
            safety_checks=tuple(ledger.safety_checks),
            context=tuple(sorted(ledger.context.items())),
            started_at=ledger.started_at,
            completed_at=datetime.now().isoformat(),
        )

    @property
    def context_dict(self) -> dict[str, Any]:
        return dict(self.context)


@dataclass
class EvidenceSummary:
    total_influences: int
    knowledge_count: int
    learnings_count: int
    auto_fix_count: int
    safety_triggered: bool
    influences: list[str] = field(default_factory=list)

    @property
    def brief_description(self) -> str:
        parts = []
        if self.knowledge_count:
            parts.append(f"{self.knowledge_count} brand rules")
        if self.learnings_count:
            parts.append(f"{self.learnings_count} your corrections")
        if self.auto_fix_count:
            parts.append(f"{self.auto_fix_count} auto-fixes")
        if self.safety_triggered:
            parts.append("safety filter")
        if not parts:
            return "generated fresh"
        return "influenced by: " + ", ".join(parts)


# =============================================================================
# CORRECTIONS
# =============================================================================


@dataclass
class Correction:
    """A user's edit of generated text: original phrase -> preferred phrase.

    ecosystem/channel: optional scope; None means the correction applies everywhere.
    """

    original_text: str
    corrected_text: str
    ecosystem: str | None = None
    channel: str | None = None
    synced: bool = False
    id: str = field(default_factory=lambda: str(uuid.uuid4())[:12])
    created_at: datetime = field(default_factory=datetime.now)


@dataclass
class LearningsApplied:
    corrections: list[Correction] = field(default_factory=list)
    avoid_patterns: list[str] = field(default_factory=list)

    @property
    def total_count(self) -> int:
        return len(self.corrections) + len(self.avoid_patterns)

    @property
    def is_empty(self) -> bool:
        return self.total_count == 0
