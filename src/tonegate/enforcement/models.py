"""Data models for the validation pipeline."""

from dataclasses import dataclass, field
from typing import ClassVar

from ..rules.models import AutoFix, RuleSeverity, Violation


@dataclass(frozen=True)
class ValidationConfig:
    """Which pipeline stages run for one validation call.

    Canonical presets: FULL, STRICT, MINIMAL (avoid words only), NONE.
    """

    check_avoid_words: bool = True
    check_readability: bool = True
    calculate_trust_score: bool = True
    apply_auto_fixes: bool = True
    strict_mode: bool = False

    FULL: ClassVar["ValidationConfig"]
    STRICT: ClassVar["ValidationConfig"]
    MINIMAL: ClassVar["ValidationConfig"]
    NONE: ClassVar["ValidationConfig"]


ValidationConfig.FULL = ValidationConfig()
ValidationConfig.STRICT = ValidationConfig(strict_mode=True)
ValidationConfig.MINIMAL = ValidationConfig(
    check_readability=False, calculate_trust_score=False, apply_auto_fixes=False,
)
ValidationConfig.NONE = ValidationConfig(
    check_avoid_words=False, check_readability=False,
    calculate_trust_score=False, apply_auto_fixes=False,
)


@dataclass
class ValidationResult:
    """Outcome of one validation call.

    Attributes:
        passed: score >= the active threshold.
        score: Trust score, always within [0, 100].
        violations: Rule, safety, and readability findings in stage order.
        auto_fixes: Proposed (not applied) substitutions.
        processing_time_ms: Wall time for the whole call.
        skipped_reason: Set when validation was skipped for the detected intent.
    """

    passed: bool = True
    score: int = 100
    violations: list[Violation] = field(default_factory=list)
    auto_fixes: list[AutoFix] = field(default_factory=list)
    processing_time_ms: float = 0.0
    skipped_reason: str | None = None

    def _count(self, severity: str) -> int:
        return sum(1 for v in self.violations if v.severity == severity)

    @property
    def error_count(self) -> int:
        return self._count(RuleSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return self._count(RuleSeverity.WARNING)

    @property
    def info_count(self) -> int:
        return self._count(RuleSeverity.INFO)

    @property
    def auto_fixable_count(self) -> int:
        return sum(1 for v in self.violations if v.auto_fixable)

    @property
    def was_skipped(self) -> bool:
        return self.skipped_reason is not None
