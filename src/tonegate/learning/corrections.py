"""
CorrectionStore -- in-memory record of user corrections and avoid patterns.

A correction says "when I see X, I prefer Y". Corrections are applied to new
text as whole-word, case-insensitive replacements, later corrections of the
same phrase replacing earlier ones. Nothing is persisted; a sync interface
only tracks which corrections a remote service would still need.
"""

import logging
import re
import threading
from datetime import datetime, timedelta

from ..rules.repository import term_pattern
from ..security import sanitize_text, validate_not_empty
from .models import Correction, LearningsApplied

logger = logging.getLogger(__name__)

MAX_CONTEXT_CORRECTIONS = 10


class CorrectionStore:
    """User corrections with lookup, replay, and prompt-context helpers.

    Usage:
        store = CorrectionStore()
        store.record_correction(Correction("kindly", "please"))
        store.apply_learnings("Kindly restart the router")  # "please restart the router"
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._corrections: list[Correction] = []
        self._preferred: dict[str, tuple[str, re.Pattern]] = {}
        self._avoid_patterns: set[str] = set()

    def record_correction(self, correction: Correction) -> bool:
        """Store a correction. False when an identical one already exists."""
        correction.original_text = validate_not_empty(
            sanitize_text(correction.original_text), "original_text"
        )
        correction.corrected_text = sanitize_text(correction.corrected_text).strip()

        with self._lock:
            for existing in self._corrections:
                if (
                    existing.original_text == correction.original_text
                    and existing.corrected_text == correction.corrected_text
                ):
                    return False
            self._corrections.append(correction)
            key = correction.original_text.lower()
            self._preferred[key] = (correction.corrected_text, term_pattern(key))

        logger.info(
            f"[Learning] Recorded correction: '{correction.original_text}' "
            f"→ '{correction.corrected_text}'"
        )
        return True

    def apply_learnings(self, text: str) -> str:
        with self._lock:
            replacements = list(self._preferred.values())
        result = text
        for corrected, pattern in replacements:
            result = pattern.sub(lambda _m, c=corrected: c, result)
        return result

    # =========================================================================
    # QUERIES
    # =========================================================================

    def get_corrections(self, limit: int = 100) -> list[Correction]:
        with self._lock:
            return self._corrections[:limit]

    def get_recent_corrections(self, days: int = 7) -> list[Correction]:
        cutoff = datetime.now() - timedelta(days=days)
        with self._lock:
            return [c for c in self._corrections if c.created_at >= cutoff]

    def get_corrections_for_context(
        self,
        ecosystem: str | None = None,
        channel: str | None = None,
        limit: int = 50,
    ) -> list[Correction]:
        """Corrections scoped to the context (or unscoped), newest first."""
        with self._lock:
            filtered = list(self._corrections)
        if ecosystem is not None:
            filtered = [c for c in filtered if c.ecosystem in (ecosystem, None)]
        if channel is not None:
            filtered = [c for c in filtered if c.channel in (channel, None)]
        filtered.sort(key=lambda c: c.created_at, reverse=True)
        return filtered[:limit]

    @staticmethod
    def build_learning_context(corrections: list[Correction]) -> str:
        if not corrections:
            return ""
        lines = ["based on previous feedback:"]
        for c in corrections[:MAX_CONTEXT_CORRECTIONS]:
            lines.append(f'- avoid: "{c.original_text}" → prefer: "{c.corrected_text}"')
        return "\n".join(lines) + "\n"

    # =========================================================================
    # AVOID PATTERNS
    # =========================================================================

    def add_avoid_pattern(self, pattern: str) -> None:
        pattern = sanitize_text(pattern).strip().lower()
        if not pattern:
            return
        with self._lock:
            self._avoid_patterns.add(pattern)
        logger.info(f"[Learning] Added avoid pattern: '{pattern}'")

    def should_avoid(self, text: str) -> bool:
        lower_text = text.lower()
        with self._lock:
            return any(p in lower_text for p in self._avoid_patterns)

    def get_learnings_applied(self, text: str) -> LearningsApplied:
        """Corrections apply_learnings would change text with, plus avoid patterns present.

        Superseded corrections and originals found only inside longer words
        are left out.
        """
        lower_text = text.lower()
        with self._lock:
            corrections = list(self._corrections)
            replacements = dict(self._preferred)
            patterns = sorted(p for p in self._avoid_patterns if p in lower_text)

        applied = []
        for correction in corrections:
            corrected, pattern = replacements[correction.original_text.lower()]
            if corrected != correction.corrected_text:
                continue
            if pattern.sub(lambda _m, c=corrected: c, text) != text:
                applied.append(correction)
        return LearningsApplied(corrections=applied, avoid_patterns=patterns)

    # =========================================================================
    # SYNC BOOKKEEPING
    # =========================================================================

    def pending_corrections(self) -> list[Correction]:
        with self._lock:
            return [c for c in self._corrections if not c.synced]

    def mark_synced(self, synced: list[Correction]) -> None:
        ids = {c.id for c in synced}
        with self._lock:
            for correction in self._corrections:
                if correction.id in ids:
                    correction.synced = True
        logger.info(f"[Learning] Marked {len(ids)} corrections as synced")

    def clear(self) -> None:
        with self._lock:
            self._corrections.clear()
            self._preferred.clear()
            self._avoid_patterns.clear()
        logger.info("[Learning] Cleared all corrections")
