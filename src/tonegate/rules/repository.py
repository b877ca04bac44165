"""
RuleRepository -- owns the avoid/preferred/auto-fix tables and matches text against them.

Tables are built once per instance (lock-guarded once-only gate) from a
loader, falling back to the bundled defaults when the loader fails. After
load the tables and their lookup maps are read-only, so concurrent readers
need no locking.

Matching:
  - Each distinct word token is tested for containment of the single-word
    avoid terms, first table match wins ("utilized" hits "utilize").
  - Multi-word / hyphenated avoid terms are searched independently as
    substrings of the lowercased text.
  - Auto-fix rules use whole-word regexes (or plain substring when
    whole_word is off), case-insensitive unless the rule says otherwise.
"""

import logging
import re
import threading
import time
from typing import Callable

from ..config import CACHE_TTL_KNOWLEDGE
from .defaults import build_default_tables
from .models import (
    AUTO_FIX_DISPLAY_NAMES,
    AutoFix,
    AutoFixPreview,
    AutoFixRule,
    AvoidTerm,
    PreferredTerm,
    RuleSeverity,
    RuleTables,
    TextRange,
    Violation,
    avoid_display_name,
)

logger = logging.getLogger(__name__)

WORD_PATTERN = re.compile(r"\b\w+\b")
SINGLE_WORD = re.compile(r"\w+")
DEFAULT_SUGGESTION = "consider removing or rephrasing"


def term_pattern(term: str, case_sensitive: bool = False) -> re.Pattern:
    """Word-boundary regex for a literal term (works for terms ending in punctuation)."""
    flags = 0 if case_sensitive else re.IGNORECASE
    return re.compile(r"(?<!\w)" + re.escape(term) + r"(?!\w)", flags)


class RuleRepository:
    """Wording rule tables with lookup and matching operations.

    Usage:
        rules = RuleRepository()
        rules.load()
        violations = rules.check_text("Please leverage our robust backend")
        preview = rules.apply_all_fixes("Utilize the color picker")
        # preview.fixed_content == "use the colour picker"
    """

    def __init__(
        self,
        loader: Callable[[], RuleTables] | None = None,
        knowledge_ttl: float = CACHE_TTL_KNOWLEDGE,
    ):
        self._loader = loader or build_default_tables
        self._knowledge_ttl = knowledge_ttl
        self._lock = threading.Lock()
        self._loaded = False
        self._last_sync: float | None = None

        self._avoid_terms: list[AvoidTerm] = []
        self._preferred_terms: list[PreferredTerm] = []
        self._auto_fix_rules: list[AutoFixRule] = []

        self._single_word_terms: list[AvoidTerm] = []
        self._phrase_terms: list[AvoidTerm] = []
        self._preferred_patterns: list[tuple[PreferredTerm, re.Pattern]] = []
        self._auto_fix_map: dict[str, AutoFixRule] = {}
        self._auto_fix_patterns: dict[str, re.Pattern] = {}

    # =========================================================================
    # LOADING
    # =========================================================================

    def load(self) -> None:
        """Build the rule tables. Idempotent, never raises."""
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            try:
                tables = self._loader()
            except Exception as e:
                logger.warning(f"[Rules] Rule loader failed, using bundled defaults: {e}")
                tables = build_default_tables()
            self._apply_tables(tables)
            self._loaded = True

        logger.info(
            f"[Rules] Rules loaded: {len(self._avoid_terms)} avoid, "
            f"{len(self._preferred_terms)} preferred, "
            f"{len(self._auto_fix_rules)} auto-fix"
        )

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def _apply_tables(self, tables: RuleTables) -> None:
        avoid: dict[str, AvoidTerm] = {}
        for term in tables.avoid_terms:
            avoid.setdefault(term.term, term)
        preferred: dict[str, PreferredTerm] = {}
        for term in tables.preferred_terms:
            preferred.setdefault(term.term, term)
        fixes: dict[str, AutoFixRule] = {}
        for rule in tables.auto_fix_rules:
            fixes.setdefault(rule.key, rule)

        self._avoid_terms = list(avoid.values())
        self._preferred_terms = list(preferred.values())
        self._auto_fix_rules = list(fixes.values())

        self._single_word_terms = [
            t for t in self._avoid_terms if SINGLE_WORD.fullmatch(t.term)
        ]
        self._phrase_terms = [
            t for t in self._avoid_terms if not SINGLE_WORD.fullmatch(t.term)
        ]
        self._preferred_patterns = [
            (t, term_pattern(t.term)) for t in self._preferred_terms
        ]
        self._auto_fix_map = fixes
        self._auto_fix_patterns = {
            rule.key: term_pattern(rule.original, rule.case_sensitive)
            for rule in self._auto_fix_rules
            if rule.whole_word
        }

    # =========================================================================
    # TABLE ACCESS
    # =========================================================================

    def get_avoid_terms(self, category: str | None = None) -> list[AvoidTerm]:
        self.load()
        if category is None:
            return list(self._avoid_terms)
        return [t for t in self._avoid_terms if t.category == category]

    def get_preferred_terms(self, category: str | None = None) -> list[PreferredTerm]:
        self.load()
        if category is None:
            return list(self._preferred_terms)
        return [t for t in self._preferred_terms if t.category == category]

    def get_auto_fix_rules(self, category: str | None = None) -> list[AutoFixRule]:
        self.load()
        if category is None:
            return list(self._auto_fix_rules)
        return [r for r in self._auto_fix_rules if r.category == category]

    def get_auto_fix_rule(self, original: str) -> AutoFixRule | None:
        self.load()
        return self._auto_fix_map.get(original.lower())

    def stats(self) -> dict[str, int]:
        self.load()
        return {
            "avoid_terms": len(self._avoid_terms),
            "preferred_terms": len(self._preferred_terms),
            "auto_fix_rules": len(self._auto_fix_rules),
        }

    # =========================================================================
    # MATCHING
    # =========================================================================

    def check_text(self, text: str) -> list[Violation]:
        """Find avoid terms in text. One violation per matched term, in text order.

        Offsets point at the first occurrence of the term in the text, which
        may sit inside a longer word ("lose" in "close").
        """
        self.load()
        start_time = time.perf_counter()
        lower_text = text.lower()
        found: dict[str, Violation] = {}

        seen_tokens: set[str] = set()
        for match in WORD_PATTERN.finditer(lower_text):
            token = match.group(0)
            if token in seen_tokens:
                continue
            seen_tokens.add(token)
            term = next((t for t in self._single_word_terms if t.term in token), None)
            if term is not None and term.term not in found:
                found[term.term] = self._avoid_violation(term, lower_text)

        for term in self._phrase_terms:
            if term.term not in found and term.term in lower_text:
                found[term.term] = self._avoid_violation(term, lower_text)

        violations = sorted(found.values(), key=lambda v: v.text_range.start)

        elapsed = (time.perf_counter() - start_time) * 1000
        logger.debug(
            f"[Rules] Checked text ({len(text)} chars) in {elapsed:.2f}ms, "
            f"found {len(violations)} violations"
        )
        return violations

    def _avoid_violation(self, term: AvoidTerm, lower_text: str) -> Violation:
        start = lower_text.find(term.term)
        end = start + len(term.term)
        return Violation(
            severity=term.severity,
            rule_id=f"avoid_word_{term.category}",
            matched_text=term.term,
            suggestion=term.suggestion or DEFAULT_SUGGESTION,
            category=avoid_display_name(term.category),
            text_range=TextRange(start=start, end=end),
            auto_fixable=term.term in self._auto_fix_map,
        )

    def find_preferred_terms(self, text: str) -> list[PreferredTerm]:
        """Preferred terms present in text (whole-word, case-insensitive)."""
        self.load()
        return [term for term, pattern in self._preferred_patterns if pattern.search(text)]

    def get_auto_fixes(self, text: str) -> list[AutoFix]:
        """One AutoFix per rule whose original appears in text."""
        self.load()
        fixes: list[AutoFix] = []
        lower_text = text.lower()

        for rule in self._auto_fix_rules:
            text_range = None
            if rule.whole_word:
                match = self._auto_fix_patterns[rule.key].search(text)
                if not match:
                    continue
                text_range = TextRange(start=match.start(), end=match.end())
            elif rule.case_sensitive:
                if rule.original not in text:
                    continue
            elif rule.key not in lower_text:
                continue

            label = AUTO_FIX_DISPLAY_NAMES.get(rule.category, rule.category)
            violation = Violation(
                severity=RuleSeverity.INFO,
                rule_id=f"auto_fix_{rule.category}",
                matched_text=rule.original,
                suggestion=f"replace with '{rule.replacement}'",
                category=label,
                text_range=text_range,
                auto_fixable=True,
            )
            fixes.append(AutoFix(
                original=rule.original,
                replacement=rule.replacement,
                confidence=rule.confidence,
                rule_label=label,
                source_violation=violation,
            ))
        return fixes

    def apply_fix(self, fix: AutoFix, text: str) -> str:
        """Replace every occurrence of fix.original with fix.replacement."""
        rule = self.get_auto_fix_rule(fix.original)
        if rule is not None and not rule.whole_word:
            flags = 0 if rule.case_sensitive else re.IGNORECASE
            pattern = re.compile(re.escape(fix.original), flags)
        elif rule is not None:
            pattern = self._auto_fix_patterns[rule.key]
        else:
            pattern = term_pattern(fix.original)
        return pattern.sub(lambda _m: fix.replacement, text)

    def apply_all_fixes(self, text: str) -> AutoFixPreview:
        """Apply every detected fix in order; keep only fixes that changed the text."""
        result = text
        applied: list[AutoFix] = []

        for fix in self.get_auto_fixes(text):
            before = result
            result = self.apply_fix(fix, result)
            if result != before:
                applied.append(fix)

        return AutoFixPreview(
            original_content=text,
            fixed_content=result,
            applied_fixes=applied,
            is_pending=True,
        )

    # =========================================================================
    # SYNC (placeholder)
    # =========================================================================

    def sync_from_remote(self) -> None:
        """Remote rule refresh is not supported; records the attempt only."""
        logger.info("[Rules] Remote sync requested; bundled rules remain in use")
        with self._lock:
            self._last_sync = time.time()

    @property
    def last_sync_time(self) -> float | None:
        return self._last_sync

    def needs_sync(self) -> bool:
        last = self._last_sync
        if last is None:
            return True
        return time.time() - last > self._knowledge_ttl
