"""
IntentClassifier -- keyword-scored intent detection that picks a validation level.

Scores four intents against the distinct lowercase words of the message
(plus a few phrase bonuses), takes the best, and falls back to general chat
when nothing scores at least 0.3. Each intent maps to a validation level,
and each level to a canonical ValidationConfig.
"""

import logging
import re
from dataclasses import dataclass, field

from ..enforcement.models import ValidationConfig

logger = logging.getLogger(__name__)

WORD_PATTERN = re.compile(r"\b\w+\b")
MIN_CONFIDENCE = 0.3
FALLBACK_CONFIDENCE = 0.5
HIGH_CONFIDENCE = 0.8


class MessageIntent:
    GENERAL_CHAT = "generalChat"
    CONTENT_GENERATION = "contentGeneration"
    PRODUCT_INQUIRY = "productInquiry"
    SAFETY_RESPONSE = "safetyResponse"
    COMPLIANCE = "compliance"
    FEEDBACK = "feedback"

    ALL = (
        GENERAL_CHAT, CONTENT_GENERATION, PRODUCT_INQUIRY,
        SAFETY_RESPONSE, COMPLIANCE, FEEDBACK,
    )


class ValidationLevel:
    NONE = "none"
    MINIMAL = "minimal"
    STANDARD = "standard"
    FULL = "full"
    STRICT = "strict"


INTENT_LEVELS = {
    MessageIntent.CONTENT_GENERATION: ValidationLevel.FULL,
    MessageIntent.COMPLIANCE: ValidationLevel.STRICT,
    MessageIntent.GENERAL_CHAT: ValidationLevel.MINIMAL,
    MessageIntent.PRODUCT_INQUIRY: ValidationLevel.MINIMAL,
    MessageIntent.SAFETY_RESPONSE: ValidationLevel.NONE,
    MessageIntent.FEEDBACK: ValidationLevel.NONE,
}

VALIDATING_INTENTS = frozenset({MessageIntent.CONTENT_GENERATION, MessageIntent.COMPLIANCE})

LEVEL_CONFIGS = {
    ValidationLevel.NONE: ValidationConfig.NONE,
    ValidationLevel.MINIMAL: ValidationConfig.MINIMAL,
    ValidationLevel.STANDARD: ValidationConfig.FULL,
    ValidationLevel.FULL: ValidationConfig.FULL,
    ValidationLevel.STRICT: ValidationConfig.STRICT,
}

# =============================================================================
# KEYWORDS
# =============================================================================

CONTENT_GENERATION_KEYWORDS = frozenset({
    "write", "rewrite", "rephrase", "edit", "improve", "fix",
    "create", "draft", "compose", "generate", "make",
    "change", "modify", "update", "revise", "polish",
    "simplify", "shorten", "expand", "summarize", "paraphrase",
    "professional", "formal", "casual", "friendly", "tone",
})

PRODUCT_INQUIRY_KEYWORDS = frozenset({
    "jio", "recharge", "plan", "data", "balance", "validity",
    "fiber", "sim", "number", "tariff", "offer", "pack",
    "internet", "speed", "network", "coverage", "signal",
    "app", "myjio", "jiocinema", "jiotv", "jiomart", "jiomeet",
})

COMPLIANCE_KEYWORDS = frozenset({
    "validate", "check", "compliance", "verify", "review",
    "trust", "score", "issues", "violations", "rules",
    "guidelines", "standards", "brand", "voice",
})

FEEDBACK_KEYWORDS = frozenset({
    "thanks", "thank", "helpful", "great", "good",
    "bad", "wrong", "incorrect", "fix", "issue", "problem",
    "feedback", "suggestion", "comment",
})

POLITE_CUES = ("please", "can you", "could you")
VOICE_CUES = ("voice and tone", "brand voice", "jio voice")
QUESTION_CUES = ("how", "what", "?")
COMPLIANCE_CUES = ("validate", "compliance")


@dataclass
class IntentClassificationResult:
    intent: str
    confidence: float
    matched_keywords: list[str] = field(default_factory=list)
    suggested_level: str = ValidationLevel.MINIMAL

    @property
    def is_high_confidence(self) -> bool:
        return self.confidence >= HIGH_CONFIDENCE

    @property
    def requires_validation(self) -> bool:
        return requires_validation(self.intent)


def requires_validation(intent: str) -> bool:
    return intent in VALIDATING_INTENTS


def validation_level(intent: str) -> str:
    return INTENT_LEVELS.get(intent, ValidationLevel.MINIMAL)


def config_for_level(level: str) -> ValidationConfig:
    return LEVEL_CONFIGS.get(level, ValidationConfig.FULL)


class IntentClassifier:
    """Classify a message into an intent and its validation level.

    Usage:
        classifier = IntentClassifier()
        result = classifier.classify("Can you rewrite this in a friendly tone?")
        if not classifier.should_skip_validation(result.intent):
            config = classifier.get_validation_config(result.intent)
    """

    def classify(self, text: str) -> IntentClassificationResult:
        lower_text = (text or "").lower()
        words = set(WORD_PATTERN.findall(lower_text))

        candidates = [
            self._score(
                MessageIntent.CONTENT_GENERATION, words, CONTENT_GENERATION_KEYWORDS, 3.0,
                0.1 * _has_any(lower_text, POLITE_CUES) + 0.3 * _has_any(lower_text, VOICE_CUES),
            ),
            self._score(
                MessageIntent.PRODUCT_INQUIRY, words, PRODUCT_INQUIRY_KEYWORDS, 2.0,
                0.15 * _has_any(lower_text, QUESTION_CUES),
            ),
            self._score(
                MessageIntent.COMPLIANCE, words, COMPLIANCE_KEYWORDS, 2.0,
                0.3 * _has_any(lower_text, COMPLIANCE_CUES),
            ),
            self._score(MessageIntent.FEEDBACK, words, FEEDBACK_KEYWORDS, 2.0, 0.0),
        ]

        # max() keeps the first of equal scores, so ties go to the earlier intent
        intent, confidence, keywords = max(candidates, key=lambda c: c[1])
        if confidence < MIN_CONFIDENCE:
            intent, confidence, keywords = MessageIntent.GENERAL_CHAT, FALLBACK_CONFIDENCE, []

        logger.debug(f"[Intent] Classified intent: {intent}, confidence: {confidence:.2f}")
        return IntentClassificationResult(
            intent=intent,
            confidence=confidence,
            matched_keywords=keywords,
            suggested_level=validation_level(intent),
        )

    @staticmethod
    def _score(
        intent: str, words: set[str], keywords: frozenset[str], divisor: float, bonus: float
    ) -> tuple[str, float, list[str]]:
        matches = sorted(words & keywords)
        return intent, min(1.0, len(matches) / divisor + bonus), matches

    def should_skip_validation(self, intent: str) -> bool:
        return not requires_validation(intent)

    def get_validation_config(self, intent: str) -> ValidationConfig:
        return config_for_level(validation_level(intent))


def _has_any(text: str, cues: tuple[str, ...]) -> bool:
    return any(cue in text for cue in cues)
