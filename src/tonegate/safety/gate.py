"""
SafetyGate -- classify text into sensitive domains and derive a routing decision.

Routing is a pure function of the highest level seen:

    none     -> proceedNormal
    low      -> proceedNormal, warmth <= 8
    moderate -> proceedWithDisclaimer, warmth <= 6, domain disclaimer
    high     -> proceedModified, warmth <= 4, tone "professional", no nudging
    critical -> emergencyResponse (payload exists) or blockAndLog,
                warmth <= 3, tone "supportive", no nudging

The gate holds no per-call state; pattern tables are fixed at construction.
"""

import logging
import re
import time

from .models import (
    EmergencyInfo,
    GenerationModifications,
    SafetyClassification,
    SafetyGateResult,
    SafetyLevel,
    SafetyPattern,
    SafetyRouting,
    level_weight,
    max_level,
)
from .patterns import DEFAULT_DISCLAIMERS, DEFAULT_EMERGENCY_RESPONSES, DEFAULT_PATTERNS

logger = logging.getLogger(__name__)

BLOCKED_REASON = "content violates safety guidelines"

WARMTH_CAPS = {
    SafetyLevel.LOW: 8,
    SafetyLevel.MODERATE: 6,
    SafetyLevel.HIGH: 4,
    SafetyLevel.CRITICAL: 3,
}


class SafetyGate:
    """Pattern-based safety classifier with a fixed routing table.

    Usage:
        gate = SafetyGate()
        result = gate.classify("I want to end my life")
        if result.routing == SafetyRouting.EMERGENCY_RESPONSE:
            show_helplines(result.modifications.emergency_info)
    """

    def __init__(
        self,
        patterns: list[SafetyPattern] | None = None,
        emergency_responses: dict[str, EmergencyInfo] | None = None,
        disclaimers: dict[str, str] | None = None,
    ):
        self._emergency_responses = dict(
            DEFAULT_EMERGENCY_RESPONSES if emergency_responses is None else emergency_responses
        )
        self._disclaimers = dict(DEFAULT_DISCLAIMERS if disclaimers is None else disclaimers)
        self._matchers = self._compile(DEFAULT_PATTERNS if patterns is None else patterns)
        logger.info(f"[Safety] Gate ready with {len(self._matchers)} patterns")

    @staticmethod
    def _compile(patterns: list[SafetyPattern]) -> list[tuple[SafetyPattern, re.Pattern | None]]:
        matchers = []
        for pattern in patterns:
            if not pattern.is_regex:
                matchers.append((pattern, None))
                continue
            try:
                matchers.append((pattern, re.compile(pattern.pattern, re.IGNORECASE)))
            except re.error as e:
                logger.warning(f"[Safety] Skipping invalid pattern {pattern.pattern!r}: {e}")
        return matchers

    @staticmethod
    def _matches(lower_text: str, pattern: SafetyPattern, compiled: re.Pattern | None) -> bool:
        if compiled is not None:
            return compiled.search(lower_text) is not None
        return pattern.pattern.lower() in lower_text

    # =========================================================================
    # CLASSIFICATION
    # =========================================================================

    def classify(self, text: str) -> SafetyGateResult:
        """One classification per matching pattern, plus the routing decision."""
        start_time = time.perf_counter()
        lower_text = (text or "").lower()

        classifications = [
            SafetyClassification(
                domain=pattern.domain,
                level=pattern.level,
                matched_patterns=[pattern.pattern],
                suggested_disclaimer=self._disclaimers.get(pattern.domain),
            )
            for pattern, compiled in self._matchers
            if self._matches(lower_text, pattern, compiled)
        ]

        top_level = max_level(c.level for c in classifications)
        top_domain = next(
            (c.domain for c in classifications if c.level == top_level), None
        )
        routing, modifications = self.route_for_level(top_level, top_domain)

        result = SafetyGateResult(
            routing=routing,
            classifications=classifications,
            modifications=modifications,
            blocked_reason=BLOCKED_REASON if routing == SafetyRouting.BLOCK_AND_LOG else None,
            processing_time_ms=(time.perf_counter() - start_time) * 1000,
        )

        if top_level == SafetyLevel.CRITICAL:
            logger.warning(
                f"[Safety] Critical concern in domain {top_domain}, routing: {routing}"
            )
        elif classifications:
            logger.info(
                f"[Safety] {len(classifications)} classifications, routing: {routing}"
            )
        return result

    def route_for_level(
        self, level: str, domain: str | None = None
    ) -> tuple[str, GenerationModifications]:
        """Routing table. `domain` selects the disclaimer or emergency payload."""
        if level_weight(level) == 0:
            return SafetyRouting.PROCEED_NORMAL, GenerationModifications()

        warmth = WARMTH_CAPS[level]
        disclaimer = self._disclaimers.get(domain) if domain else None

        if level == SafetyLevel.LOW:
            return SafetyRouting.PROCEED_NORMAL, GenerationModifications(max_warmth=warmth)

        if level == SafetyLevel.MODERATE:
            return SafetyRouting.PROCEED_WITH_DISCLAIMER, GenerationModifications(
                max_warmth=warmth,
                required_disclaimer=disclaimer,
            )

        if level == SafetyLevel.HIGH:
            return SafetyRouting.PROCEED_MODIFIED, GenerationModifications(
                max_warmth=warmth,
                tone_lock="professional",
                block_nudging=True,
                required_disclaimer=disclaimer,
            )

        emergency = self._emergency_responses.get(domain) if domain else None
        routing = SafetyRouting.EMERGENCY_RESPONSE if emergency else SafetyRouting.BLOCK_AND_LOG
        return routing, GenerationModifications(
            max_warmth=warmth,
            tone_lock="supportive",
            block_nudging=True,
            emergency_info=emergency,
        )

    # =========================================================================
    # CONVENIENCE QUERIES
    # =========================================================================

    def get_emergency_response(self, domain: str) -> EmergencyInfo | None:
        return self._emergency_responses.get(domain)

    def get_disclaimer(self, domain: str) -> str | None:
        return self._disclaimers.get(domain)

    def has_critical_concern(self, text: str) -> bool:
        lower_text = (text or "").lower()
        for pattern, compiled in self._matchers:
            if pattern.level == SafetyLevel.CRITICAL and self._matches(lower_text, pattern, compiled):
                logger.warning(f"[Safety] Critical concern detected: {pattern.description}")
                return True
        return False

    def get_critical_domains(self, text: str) -> list[str]:
        """Distinct domains with a critical match, in pattern order."""
        lower_text = (text or "").lower()
        domains: list[str] = []
        for pattern, compiled in self._matchers:
            if (
                pattern.level == SafetyLevel.CRITICAL
                and pattern.domain not in domains
                and self._matches(lower_text, pattern, compiled)
            ):
                domains.append(pattern.domain)
        return domains

    def requires_emergency_response(self, text: str) -> tuple[bool, EmergencyInfo | None]:
        result = self.classify(text)
        if result.routing == SafetyRouting.EMERGENCY_RESPONSE:
            return True, result.modifications.emergency_info
        return False, None
