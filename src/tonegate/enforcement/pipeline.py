"""
ValidationPipeline -- the public entry point for compliance checks.

Fans out to RuleRepository, SafetyGate, and the readability functions, then
folds every finding into one trust score and pass/fail verdict.

Stages (each gated by ValidationConfig):
  1. avoid words      -> rule violations (check_avoid_words)
  2. auto-fixes       -> proposed substitutions (apply_auto_fixes)
  3. safety           -> one violation per moderate+ classification
                         (check_avoid_words, or intent is content generation)
  4. readability      -> info/warning when grade exceeds target (check_readability)
  5. score            -> 100 - sum(penalties), clamped to [0, 100]

Validation is synchronous and total: a failing stage is logged and treated
as having found nothing.
"""

import hashlib
import logging
import time
from typing import Callable, TypeVar

from ..cache import TTLCache
from ..config import Settings
from ..learning import (
    AutoFixApplied,
    CorrectionStore,
    EvidenceTracker,
    KnowledgeType,
    KnowledgeUsed,
    LearningApplied,
    SafetyCheckRecord,
)
from ..orchestration.intent_classifier import (
    IntentClassificationResult,
    IntentClassifier,
    MessageIntent,
)
from ..rules import AutoFix, RuleRepository, RuleSeverity, Violation
from ..safety import SafetyGate, SafetyGateResult, SafetyLevel, level_weight
from ..safety.models import DOMAIN_DISPLAY_NAMES
from . import readability
from .models import ValidationConfig, ValidationResult
from .readability import ReadabilityAnalysis

logger = logging.getLogger(__name__)

T = TypeVar("T")

STANDARD_PENALTIES = {RuleSeverity.ERROR: 15, RuleSeverity.WARNING: 5, RuleSeverity.INFO: 2}
STRICT_PENALTIES = {RuleSeverity.ERROR: 20, RuleSeverity.WARNING: 8, RuleSeverity.INFO: 3}

SAFETY_DEFAULT_SUGGESTION = "review content for safety"


def calculate_score(violations: list[Violation], strict: bool = False) -> int:
    """100 minus the severity penalties, clamped to [0, 100]."""
    penalties = STRICT_PENALTIES if strict else STANDARD_PENALTIES
    score = 100 - sum(penalties.get(v.severity, 0) for v in violations)
    return max(0, min(100, score))


class ValidationPipeline:
    """Validate text against wording rules, safety patterns, and readability.

    Usage:
        pipeline = ValidationPipeline()
        result = pipeline.validate("Please leverage synergistic solutions.")
        if not result.passed:
            for v in result.violations:
                print(v.severity, v.matched_text, v.suggestion)

        # Let the prompt decide how much checking to do
        result = pipeline.validate_with_intent(reply, prompt="rewrite this for email")
    """

    def __init__(
        self,
        rules: RuleRepository | None = None,
        safety_gate: SafetyGate | None = None,
        intent_classifier: IntentClassifier | None = None,
        settings: Settings | None = None,
        readability_cache: TTLCache | None = None,
        evidence_tracker: EvidenceTracker | None = None,
        corrections: CorrectionStore | None = None,
    ):
        self.settings = settings or Settings()
        self.rules = rules or RuleRepository(knowledge_ttl=self.settings.knowledge_ttl)
        self.safety_gate = safety_gate or SafetyGate()
        self.intent_classifier = intent_classifier or IntentClassifier()
        self.evidence_tracker = evidence_tracker
        self.corrections = corrections
        self._readability_cache = readability_cache or TTLCache(
            max_size=self.settings.readability_cache_size,
            ttl=self.settings.readability_ttl,
            name="readability",
        )
        self.rules.load()

    # =========================================================================
    # PUBLIC API
    # =========================================================================

    def validate(self, text: str, message_id: str | None = None) -> ValidationResult:
        return self.validate_with_config(text, ValidationConfig.FULL, message_id=message_id)

    def detect_intent(self, text: str) -> IntentClassificationResult:
        return self.intent_classifier.classify(text)

    def validate_with_intent(
        self,
        text: str,
        prompt: str | None = None,
        message_id: str | None = None,
    ) -> ValidationResult:
        """Pick the checks from the intent of `prompt` (or `text` when no prompt)."""
        start_time = time.perf_counter()
        detected = self.detect_intent(prompt or text)

        if self.intent_classifier.should_skip_validation(detected.intent):
            logger.debug(f"[Validation] Skipping validation for intent {detected.intent}")
            return ValidationResult(
                passed=True,
                score=100,
                processing_time_ms=(time.perf_counter() - start_time) * 1000,
                skipped_reason=f"validation not required for intent: {detected.intent}",
            )

        config = self.intent_classifier.get_validation_config(detected.intent)
        return self.validate_with_config(
            text, config, intent=detected.intent, message_id=message_id
        )

    def validate_with_config(
        self,
        text: str,
        config: ValidationConfig,
        intent: str | None = None,
        message_id: str | None = None,
    ) -> ValidationResult:
        start_time = time.perf_counter()
        text = text or ""
        violations: list[Violation] = []
        auto_fixes: list[AutoFix] = []
        safety: SafetyGateResult | None = None

        if config.check_avoid_words:
            violations.extend(self._stage("avoid words", lambda: self.rules.check_text(text), []))

        if config.apply_auto_fixes:
            auto_fixes = self._stage("auto-fixes", lambda: self.rules.get_auto_fixes(text), [])

        if config.check_avoid_words or intent == MessageIntent.CONTENT_GENERATION:
            safety = self._stage("safety", lambda: self.safety_gate.classify(text), None)
            if safety is not None:
                violations.extend(self._safety_violations(safety))

        if config.check_readability:
            analysis = self._stage("readability", lambda: self.analyze_readability(text), None)
            if analysis is not None:
                violation = self._readability_violation(analysis)
                if violation is not None:
                    violations.append(violation)

        strict = config.strict_mode
        score = calculate_score(violations, strict)
        threshold = self.settings.strict_threshold if strict else self.settings.trust_score_minimum
        elapsed = (time.perf_counter() - start_time) * 1000

        result = ValidationResult(
            passed=score >= threshold,
            score=score,
            violations=violations,
            auto_fixes=auto_fixes,
            processing_time_ms=elapsed,
        )

        if self.evidence_tracker is not None and message_id:
            self._stage(
                "evidence",
                lambda: self._record_evidence(message_id, text, result, safety, intent, strict),
                None,
            )

        logger.info(
            f"[Validation] Validated {len(text)} chars in {elapsed:.1f}ms: "
            f"score={score}, violations={len(violations)}, passed={result.passed}"
        )
        return result

    def validate_quick(self, text: str) -> tuple[int, int]:
        """(error count, warning count) from the avoid-word check alone."""
        violations = self.violations_with_positions(text)
        errors = sum(1 for v in violations if v.severity == RuleSeverity.ERROR)
        warnings = sum(1 for v in violations if v.severity == RuleSeverity.WARNING)
        return errors, warnings

    def violations_with_positions(self, text: str) -> list[Violation]:
        return self._stage("avoid words", lambda: self.rules.check_text(text or ""), [])

    def analyze_readability(self, text: str) -> ReadabilityAnalysis:
        """Readability metrics, memoised by text digest and target grade."""
        target = self.settings.target_grade
        key = f"{hashlib.sha256(text.encode('utf-8')).hexdigest()}:{target}"
        cached = self._readability_cache.get(key)
        if cached is not None:
            return cached
        analysis = readability.analyze(text, target_grade=target)
        self._readability_cache.set(key, analysis)
        return analysis

    # =========================================================================
    # STAGE HELPERS
    # =========================================================================

    @staticmethod
    def _stage(name: str, run: Callable[[], T], default: T) -> T:
        try:
            return run()
        except Exception as e:
            logger.error(f"[Validation] Stage '{name}' failed, continuing without it: {e}")
            return default

    @staticmethod
    def _safety_violations(safety: SafetyGateResult) -> list[Violation]:
        violations = []
        for classification in safety.classifications:
            if level_weight(classification.level) < level_weight(SafetyLevel.MODERATE):
                continue
            display = DOMAIN_DISPLAY_NAMES.get(classification.domain, classification.domain)
            violations.append(Violation(
                severity=(
                    RuleSeverity.ERROR
                    if classification.level == SafetyLevel.CRITICAL
                    else RuleSeverity.WARNING
                ),
                rule_id=f"safety_{classification.domain}",
                matched_text=", ".join(classification.matched_patterns),
                suggestion=classification.suggested_disclaimer or SAFETY_DEFAULT_SUGGESTION,
                category=f"safety: {display}",
                auto_fixable=False,
            ))
        return violations

    def _readability_violation(self, analysis: ReadabilityAnalysis) -> Violation | None:
        if analysis.meets_target:
            return None
        grade = analysis.flesch_kincaid_grade
        target = analysis.target_grade
        over_by = grade - target
        severity = (
            RuleSeverity.INFO
            if over_by <= self.settings.readability_warning_margin
            else RuleSeverity.WARNING
        )
        suggestion = f"simplify the text for better readability (grade {grade:.1f}, target: grade {target:.0f})"
        if analysis.suggestions:
            suggestion += ": " + "; ".join(analysis.suggestions)
        return Violation(
            severity=severity,
            rule_id="readability",
            matched_text="text readability",
            suggestion=suggestion,
            category="readability",
            auto_fixable=False,
        )

    def _record_evidence(
        self,
        message_id: str,
        text: str,
        result: ValidationResult,
        safety: SafetyGateResult | None,
        intent: str | None,
        strict: bool,
    ) -> None:
        tracker = self.evidence_tracker
        tracker.start_tracking(message_id)
        tracker.set_context({"intent": intent, "strict": strict}, message_id)

        for violation in result.violations:
            if violation.rule_id.startswith("avoid_word_"):
                tracker.record_knowledge_used(
                    KnowledgeUsed(KnowledgeType.AVOID_WORD, violation.matched_text, violation.category),
                    message_id,
                )
        for term in self.rules.find_preferred_terms(text):
            tracker.record_knowledge_used(
                KnowledgeUsed(KnowledgeType.PREFERRED_WORD, term.term, term.category),
                message_id,
            )

        if self.corrections is not None:
            for correction in self.corrections.get_learnings_applied(text).corrections:
                tracker.record_learning_applied(
                    LearningApplied(
                        correction_id=correction.id,
                        original=correction.original_text,
                        corrected=correction.corrected_text,
                    ),
                    message_id,
                )

        for fix in result.auto_fixes:
            tracker.record_auto_fix(
                AutoFixApplied(
                    rule_id=fix.source_violation.rule_id,
                    original=fix.original,
                    replacement=fix.replacement,
                    category=fix.rule_label,
                ),
                message_id,
            )

        if safety is not None:
            for classification in safety.classifications:
                tracker.record_safety_check(
                    SafetyCheckRecord(
                        domain=classification.domain,
                        triggered=True,
                        level=classification.level,
                        action=safety.routing,
                    ),
                    message_id,
                )

        tracker.finish_tracking(message_id)
