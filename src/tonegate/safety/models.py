"""Data models for the safety gate: domains, levels, routing, results."""

from dataclasses import dataclass, field


class SafetyDomain:
    """Topical categories of sensitive content."""

    HEALTH = "health"
    MENTAL_HEALTH = "mentalHealth"
    FINANCIAL = "financial"
    LEGAL = "legal"
    PRIVACY = "privacy"
    EMERGENCY = "emergency"
    VIOLENCE = "violence"
    SUBSTANCE = "substance"
    GAMBLING = "gambling"
    MINORS = "minors"
    POLITICAL = "political"
    RELIGIOUS = "religious"

    ALL = (
        HEALTH, MENTAL_HEALTH, FINANCIAL, LEGAL, PRIVACY, EMERGENCY,
        VIOLENCE, SUBSTANCE, GAMBLING, MINORS, POLITICAL, RELIGIOUS,
    )


DOMAIN_DISPLAY_NAMES = {
    SafetyDomain.HEALTH: "health",
    SafetyDomain.MENTAL_HEALTH: "mental health",
    SafetyDomain.FINANCIAL: "financial",
    SafetyDomain.LEGAL: "legal",
    SafetyDomain.PRIVACY: "privacy",
    SafetyDomain.EMERGENCY: "emergency",
    SafetyDomain.VIOLENCE: "violence",
    SafetyDomain.SUBSTANCE: "substance",
    SafetyDomain.GAMBLING: "gambling",
    SafetyDomain.MINORS: "minors",
    SafetyDomain.POLITICAL: "political",
    SafetyDomain.RELIGIOUS: "religious",
}


class SafetyLevel:
    """Severity of a safety concern. Totally ordered via LEVEL_WEIGHTS."""

    NONE = "none"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    CRITICAL = "critical"

    ORDERED = (NONE, LOW, MODERATE, HIGH, CRITICAL)


LEVEL_WEIGHTS = {level: i for i, level in enumerate(SafetyLevel.ORDERED)}


def level_weight(level: str) -> int:
    return LEVEL_WEIGHTS.get(level, 0)


def max_level(levels) -> str:
    """Highest level in an iterable; NONE when empty."""
    return max(levels, key=level_weight, default=SafetyLevel.NONE)


class SafetyRouting:
    """What the caller should do with the text. Ordered least to most protective."""

    PROCEED_NORMAL = "proceedNormal"
    PROCEED_WITH_DISCLAIMER = "proceedWithDisclaimer"
    PROCEED_MODIFIED = "proceedModified"
    EMERGENCY_RESPONSE = "emergencyResponse"
    BLOCK_AND_LOG = "blockAndLog"

    ORDERED = (
        PROCEED_NORMAL, PROCEED_WITH_DISCLAIMER, PROCEED_MODIFIED,
        EMERGENCY_RESPONSE, BLOCK_AND_LOG,
    )


ROUTING_DESCRIPTIONS = {
    SafetyRouting.PROCEED_NORMAL: "proceed normally",
    SafetyRouting.PROCEED_WITH_DISCLAIMER: "add disclaimer",
    SafetyRouting.PROCEED_MODIFIED: "modify response",
    SafetyRouting.EMERGENCY_RESPONSE: "emergency response",
    SafetyRouting.BLOCK_AND_LOG: "blocked",
}


@dataclass(frozen=True)
class SafetyPattern:
    """Phrase or regex -> domain + level. Substring match unless is_regex."""

    pattern: str
    domain: str
    level: str
    is_regex: bool = False
    description: str = ""


@dataclass(frozen=True)
class Helpline:
    name: str
    number: str
    description: str
    available_24x7: bool


@dataclass(frozen=True)
class EmergencyInfo:
    """Structured help-line payload. Rendering is the caller's job."""

    helplines: tuple[Helpline, ...]
    resources: tuple[str, ...]
    immediate_message: str


@dataclass
class SafetyClassification:
    domain: str
    level: str
    matched_patterns: list[str] = field(default_factory=list)
    suggested_disclaimer: str | None = None
    confidence: float = 1.0

    def __post_init__(self):
        self.confidence = min(1.0, max(0.0, self.confidence))


@dataclass
class GenerationModifications:
    """Constraints the caller applies to any generated response."""

    max_warmth: int | None = None
    tone_lock: str | None = None
    block_nudging: bool = False
    required_disclaimer: str | None = None
    emergency_info: EmergencyInfo | None = None


@dataclass
class SafetyGateResult:
    routing: str = SafetyRouting.PROCEED_NORMAL
    classifications: list[SafetyClassification] = field(default_factory=list)
    modifications: GenerationModifications = field(default_factory=GenerationModifications)
    blocked_reason: str | None = None
    processing_time_ms: float = 0.0

    @property
    def highest_level(self) -> str:
        return max_level(c.level for c in self.classifications)

    @property
    def primary_domain(self) -> str | None:
        if not self.classifications:
            return None
        return max(self.classifications, key=lambda c: level_weight(c.level)).domain

    @property
    def should_proceed(self) -> bool:
        return self.routing != SafetyRouting.BLOCK_AND_LOG

    @property
    def requires_modification(self) -> bool:
        return self.routing in (
            SafetyRouting.PROCEED_MODIFIED,
            SafetyRouting.PROCEED_WITH_DISCLAIMER,
        )
