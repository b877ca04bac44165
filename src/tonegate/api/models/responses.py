"""
Pydantic response models -- what the API returns.

Each model has a from_* constructor that maps the in-process result object
onto the wire shape.
"""

from pydantic import BaseModel, Field

from ...enforcement import ValidationResult
from ...orchestration import IntentClassificationResult
from ...rules import AutoFix, AutoFixPreview, AvoidTerm, Violation
from ...safety import EmergencyInfo, SafetyGateResult


# =============================================================================
# VALIDATION
# =============================================================================


class ViolationModel(BaseModel):
    severity: str
    rule_id: str
    matched_text: str
    suggestion: str
    category: str
    start: int | None = None
    end: int | None = None
    auto_fixable: bool = False

    @classmethod
    def from_violation(cls, v: Violation) -> "ViolationModel":
        return cls(
            severity=v.severity,
            rule_id=v.rule_id,
            matched_text=v.matched_text,
            suggestion=v.suggestion,
            category=v.category,
            start=v.text_range.start if v.text_range else None,
            end=v.text_range.end if v.text_range else None,
            auto_fixable=v.auto_fixable,
        )


class AutoFixModel(BaseModel):
    original: str
    replacement: str
    confidence: float
    rule_label: str

    @classmethod
    def from_fix(cls, fix: AutoFix) -> "AutoFixModel":
        return cls(
            original=fix.original,
            replacement=fix.replacement,
            confidence=fix.confidence,
            rule_label=fix.rule_label,
        )


class ValidationResponse(BaseModel):
    passed: bool
    score: int = Field(..., ge=0, le=100)
    violations: list[ViolationModel] = Field(default_factory=list)
    auto_fixes: list[AutoFixModel] = Field(default_factory=list)
    error_count: int = 0
    warning_count: int = 0
    info_count: int = 0
    processing_time_ms: float = 0.0
    skipped_reason: str | None = None

    @classmethod
    def from_result(cls, result: ValidationResult) -> "ValidationResponse":
        return cls(
            passed=result.passed,
            score=result.score,
            violations=[ViolationModel.from_violation(v) for v in result.violations],
            auto_fixes=[AutoFixModel.from_fix(f) for f in result.auto_fixes],
            error_count=result.error_count,
            warning_count=result.warning_count,
            info_count=result.info_count,
            processing_time_ms=round(result.processing_time_ms, 3),
            skipped_reason=result.skipped_reason,
        )


class AutoFixPreviewResponse(BaseModel):
    original_content: str
    fixed_content: str
    applied_fixes: list[AutoFixModel] = Field(default_factory=list)
    fix_count: int = 0

    @classmethod
    def from_preview(cls, preview: AutoFixPreview) -> "AutoFixPreviewResponse":
        return cls(
            original_content=preview.original_content,
            fixed_content=preview.fixed_content,
            applied_fixes=[AutoFixModel.from_fix(f) for f in preview.applied_fixes],
            fix_count=preview.fix_count,
        )


# =============================================================================
# SAFETY
# =============================================================================


class HelplineModel(BaseModel):
    name: str
    number: str
    description: str
    available_24x7: bool


class EmergencyInfoModel(BaseModel):
    helplines: list[HelplineModel] = Field(default_factory=list)
    resources: list[str] = Field(default_factory=list)
    immediate_message: str = ""

    @classmethod
    def from_info(cls, info: EmergencyInfo) -> "EmergencyInfoModel":
        return cls(
            helplines=[
                HelplineModel(
                    name=h.name,
                    number=h.number,
                    description=h.description,
                    available_24x7=h.available_24x7,
                )
                for h in info.helplines
            ],
            resources=list(info.resources),
            immediate_message=info.immediate_message,
        )


class SafetyClassificationModel(BaseModel):
    domain: str
    level: str
    matched_patterns: list[str] = Field(default_factory=list)
    suggested_disclaimer: str | None = None
    confidence: float = 1.0


class ModificationsModel(BaseModel):
    max_warmth: int | None = None
    tone_lock: str | None = None
    block_nudging: bool = False
    required_disclaimer: str | None = None
    emergency_info: EmergencyInfoModel | None = None


class SafetyGateResponse(BaseModel):
    routing: str
    highest_level: str
    primary_domain: str | None = None
    should_proceed: bool = True
    classifications: list[SafetyClassificationModel] = Field(default_factory=list)
    modifications: ModificationsModel = Field(default_factory=ModificationsModel)
    blocked_reason: str | None = None
    processing_time_ms: float = 0.0

    @classmethod
    def from_result(cls, result: SafetyGateResult) -> "SafetyGateResponse":
        mods = result.modifications
        return cls(
            routing=result.routing,
            highest_level=result.highest_level,
            primary_domain=result.primary_domain,
            should_proceed=result.should_proceed,
            classifications=[
                SafetyClassificationModel(
                    domain=c.domain,
                    level=c.level,
                    matched_patterns=list(c.matched_patterns),
                    suggested_disclaimer=c.suggested_disclaimer,
                    confidence=c.confidence,
                )
                for c in result.classifications
            ],
            modifications=ModificationsModel(
                max_warmth=mods.max_warmth,
                tone_lock=mods.tone_lock,
                block_nudging=mods.block_nudging,
                required_disclaimer=mods.required_disclaimer,
                emergency_info=(
                    EmergencyInfoModel.from_info(mods.emergency_info)
                    if mods.emergency_info
                    else None
                ),
            ),
            blocked_reason=result.blocked_reason,
            processing_time_ms=round(result.processing_time_ms, 3),
        )


# =============================================================================
# INTENT / RULES / HEALTH
# =============================================================================


class IntentResponse(BaseModel):
    intent: str
    confidence: float
    matched_keywords: list[str] = Field(default_factory=list)
    suggested_level: str
    requires_validation: bool

    @classmethod
    def from_result(cls, result: IntentClassificationResult) -> "IntentResponse":
        return cls(
            intent=result.intent,
            confidence=result.confidence,
            matched_keywords=list(result.matched_keywords),
            suggested_level=result.suggested_level,
            requires_validation=result.requires_validation,
        )


class RuleStatsResponse(BaseModel):
    avoid_terms: int
    preferred_terms: int
    auto_fix_rules: int


class AvoidTermModel(BaseModel):
    term: str
    category: str
    severity: str
    suggestion: str | None = None

    @classmethod
    def from_term(cls, term: AvoidTerm) -> "AvoidTermModel":
        return cls(
            term=term.term,
            category=term.category,
            severity=term.severity,
            suggestion=term.suggestion,
        )


class HealthResponse(BaseModel):
    status: str = "healthy"
    rules_loaded: bool = False
    uptime_seconds: float = 0.0


class CacheStatsModel(BaseModel):
    total: int
    valid: int
    stale: int
    hit_count: int
    miss_count: int
    hit_rate: float


class MetricsResponse(BaseModel):
    validations: int = 0
    validations_passed: int = 0
    safety_checks: int = 0
    caches: dict[str, CacheStatsModel] = Field(default_factory=dict)
