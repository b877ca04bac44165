"""
EvidenceTracker -- per-message ledger of what influenced a generated output.

A ledger is opened with start_tracking(message_id), appended to by the
record_* calls, and frozen into the history map by finish_tracking(). Several
ledgers may be in flight at once; record_* calls without a message_id go to
the most recently started one. Recording with no open ledger is a no-op.
"""

import logging
import threading

from .models import (
    AutoFixApplied,
    EvidenceLedger,
    EvidenceSummary,
    GenerationEvidence,
    KnowledgeType,
    KnowledgeUsed,
    LearningApplied,
    SafetyCheckRecord,
    SemanticMatch,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_HISTORY = 500


class EvidenceTracker:
    """Append-only evidence ledgers keyed by message id.

    Usage:
        tracker = EvidenceTracker()
        tracker.start_tracking("msg-1")
        tracker.record_knowledge_used(KnowledgeUsed(KnowledgeType.AVOID_WORD, "leverage", "complex"))
        evidence = tracker.finish_tracking()
        summary = tracker.build_evidence_summary(evidence)
    """

    def __init__(self, max_history: int = DEFAULT_MAX_HISTORY):
        self._lock = threading.Lock()
        self._active: dict[str, EvidenceLedger] = {}
        self._current_id: str | None = None
        self._history: dict[str, GenerationEvidence] = {}
        self._max_history = max_history

    # =========================================================================
    # LEDGER LIFECYCLE
    # =========================================================================

    def start_tracking(self, message_id: str) -> None:
        with self._lock:
            self._active[message_id] = EvidenceLedger(message_id=message_id)
            self._current_id = message_id
        logger.debug(f"[Evidence] Started tracking evidence for message: {message_id}")

    def finish_tracking(self, message_id: str | None = None) -> GenerationEvidence | None:
        """Freeze the ledger into history. None when no ledger is open."""
        with self._lock:
            key = message_id or self._current_id
            ledger = self._active.pop(key, None) if key else None
            if ledger is None:
                return None
            if self._current_id == key:
                self._current_id = next(reversed(self._active), None)

            evidence = GenerationEvidence.from_ledger(ledger)
            self._history.pop(evidence.message_id, None)
            self._history[evidence.message_id] = evidence
            while len(self._history) > self._max_history:
                del self._history[next(iter(self._history))]

        logger.info(
            f"[Evidence] Finished tracking evidence for message: {evidence.message_id} "
            f"({len(evidence.knowledge_used)} knowledge, "
            f"{len(evidence.learnings_applied)} learnings, "
            f"{len(evidence.auto_fixes_applied)} auto-fixes)"
        )
        return evidence

    def get_evidence(self, message_id: str) -> GenerationEvidence | None:
        with self._lock:
            return self._history.get(message_id)

    def is_tracking(self, message_id: str | None = None) -> bool:
        with self._lock:
            if message_id is None:
                return self._current_id is not None
            return message_id in self._active

    # =========================================================================
    # RECORDING
    # =========================================================================

    def _append(self, attribute: str, record, message_id: str | None) -> None:
        with self._lock:
            key = message_id or self._current_id
            ledger = self._active.get(key) if key else None
            if ledger is None:
                logger.debug(f"[Evidence] No open ledger, dropping {attribute} record")
                return
            getattr(ledger, attribute).append(record)

    def record_knowledge_used(self, knowledge: KnowledgeUsed, message_id: str | None = None) -> None:
        self._append("knowledge_used", knowledge, message_id)

    def record_learning_applied(self, learning: LearningApplied, message_id: str | None = None) -> None:
        self._append("learnings_applied", learning, message_id)

    def record_semantic_match(self, match: SemanticMatch, message_id: str | None = None) -> None:
        self._append("semantic_matches", match, message_id)

    def record_auto_fix(self, fix: AutoFixApplied, message_id: str | None = None) -> None:
        self._append("auto_fixes_applied", fix, message_id)

    def record_safety_check(self, check: SafetyCheckRecord, message_id: str | None = None) -> None:
        self._append("safety_checks", check, message_id)

    def set_context(self, context: dict, message_id: str | None = None) -> None:
        with self._lock:
            key = message_id or self._current_id
            ledger = self._active.get(key) if key else None
            if ledger is not None:
                ledger.context = dict(context)

    # =========================================================================
    # SUMMARY
    # =========================================================================

    @staticmethod
    def build_evidence_summary(evidence: GenerationEvidence) -> EvidenceSummary:
        influences: list[str] = []

        for knowledge in evidence.knowledge_used:
            if knowledge.type == KnowledgeType.AVOID_WORD:
                influences.append(f"avoided '{knowledge.term}' ({knowledge.category})")
            elif knowledge.type == KnowledgeType.PREFERRED_WORD:
                influences.append(f"used preferred term '{knowledge.term}'")
            elif knowledge.type == KnowledgeType.BRAND_GUIDELINE:
                influences.append(f"applied brand guideline: {knowledge.term}")
            elif knowledge.type == KnowledgeType.CHANNEL_RULE:
                influences.append(f"followed channel rule: {knowledge.term}")
            else:
                influences.append(f"used {knowledge.type}: {knowledge.term}")

        for learning in evidence.learnings_applied:
            influences.append(
                f"applied your correction: '{learning.original}' → '{learning.corrected}'"
            )

        for fix in evidence.auto_fixes_applied:
            influences.append(
                f"auto-fixed: '{fix.original}' → '{fix.replacement}' ({fix.category})"
            )

        safety_triggered = False
        for check in evidence.safety_checks:
            if check.triggered:
                safety_triggered = True
                influences.append(f"safety check triggered: {check.domain}")

        return EvidenceSummary(
            total_influences=len(influences),
            knowledge_count=len(evidence.knowledge_used),
            learnings_count=len(evidence.learnings_applied),
            auto_fix_count=len(evidence.auto_fixes_applied),
            safety_triggered=safety_triggered,
            influences=influences,
        )
