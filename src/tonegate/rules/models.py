"""
Wording rule data models -- avoid terms, preferred terms, auto-fix rules.

Categories and severities are string constants with lookup tables
(display name, default severity, description) rather than class hierarchies.
"""

from dataclasses import dataclass, field


# =============================================================================
# SEVERITY
# =============================================================================


class RuleSeverity:
    """Violation severities, strongest first."""

    ERROR = "error"  # must fix: fear-based, shame-inducing
    WARNING = "warning"  # should fix: complex, robotic, bureaucratic
    INFO = "info"  # suggestion: technical terms, spelling, format


# =============================================================================
# AVOID CATEGORIES (10)
# =============================================================================


class AvoidCategory:
    COMPLEX = "complex"
    ROBOTIC = "robotic"
    FEAR_BASED = "fearBased"
    BUREAUCRATIC = "bureaucratic"
    TECHNICAL = "technical"
    SHAME_INDUCING = "shameInducing"
    ELITIST = "elitist"
    MARKETING_JARGON = "marketingJargon"
    AMERICAN_SPELLING = "americanSpelling"
    INCORRECT_FORMAT = "incorrectFormat"


# category -> (display name, default severity, description)
AVOID_CATEGORY_INFO: dict[str, tuple[str, str, str]] = {
    AvoidCategory.COMPLEX: (
        "complex words", RuleSeverity.WARNING,
        "complex words that can be simplified",
    ),
    AvoidCategory.ROBOTIC: (
        "robotic language", RuleSeverity.WARNING,
        "robotic, impersonal language",
    ),
    AvoidCategory.FEAR_BASED: (
        "fear-based", RuleSeverity.ERROR,
        "fear-based messaging that creates anxiety",
    ),
    AvoidCategory.BUREAUCRATIC: (
        "bureaucratic", RuleSeverity.WARNING,
        "bureaucratic, legal-sounding language",
    ),
    AvoidCategory.TECHNICAL: (
        "technical jargon", RuleSeverity.INFO,
        "technical jargon not meant for users",
    ),
    AvoidCategory.SHAME_INDUCING: (
        "shame-inducing", RuleSeverity.ERROR,
        "language that blames or shames the user",
    ),
    AvoidCategory.ELITIST: (
        "elitist", RuleSeverity.WARNING,
        "elitist language that excludes people",
    ),
    AvoidCategory.MARKETING_JARGON: (
        "marketing jargon", RuleSeverity.WARNING,
        "overused marketing buzzwords",
    ),
    AvoidCategory.AMERICAN_SPELLING: (
        "american spelling", RuleSeverity.INFO,
        "american spelling (use british for india)",
    ),
    AvoidCategory.INCORRECT_FORMAT: (
        "incorrect format", RuleSeverity.INFO,
        "redundant or incorrect format",
    ),
}


def avoid_display_name(category: str) -> str:
    return AVOID_CATEGORY_INFO.get(category, (category, "", ""))[0]


def default_severity(category: str) -> str:
    return AVOID_CATEGORY_INFO.get(category, ("", RuleSeverity.WARNING, ""))[1]


# =============================================================================
# PREFERRED CATEGORIES (6)
# =============================================================================


class PreferredCategory:
    CARE_CONNECTION = "careConnection"
    ACTION_PROGRESS = "actionProgress"
    CLARITY_SAFETY = "claritySafety"
    FIXING_RESOLUTION = "fixingResolution"
    COMMUNITY_FIRST = "communityFirst"
    LEARNING_DISCOVERY = "learningDiscovery"


# category -> (display name, emotional goal)
PREFERRED_CATEGORY_INFO: dict[str, tuple[str, str]] = {
    PreferredCategory.CARE_CONNECTION: ("care & connection", "show empathy and build trust"),
    PreferredCategory.ACTION_PROGRESS: ("action & progress", "motivate and show momentum"),
    PreferredCategory.CLARITY_SAFETY: ("clarity & safety", "reassure and reduce anxiety"),
    PreferredCategory.FIXING_RESOLUTION: ("fixing & resolution", "acknowledge and resolve issues"),
    PreferredCategory.COMMUNITY_FIRST: ("community first", "celebrate indian identity and values"),
    PreferredCategory.LEARNING_DISCOVERY: ("learning & discovery", "spark curiosity and engagement"),
}


# =============================================================================
# AUTO-FIX CATEGORIES (5)
# =============================================================================


class AutoFixCategory:
    GENDER_NEUTRAL = "genderNeutral"
    SIMPLE_ALTERNATIVE = "simpleAlternative"
    BRITISH_SPELLING = "britishSpelling"
    FORMAT_CORRECTION = "formatCorrection"
    INCLUSIVE_LANGUAGE = "inclusiveLanguage"


AUTO_FIX_DISPLAY_NAMES = {
    AutoFixCategory.GENDER_NEUTRAL: "gender-neutral",
    AutoFixCategory.SIMPLE_ALTERNATIVE: "simpler alternative",
    AutoFixCategory.BRITISH_SPELLING: "british spelling",
    AutoFixCategory.FORMAT_CORRECTION: "format correction",
    AutoFixCategory.INCLUSIVE_LANGUAGE: "inclusive language",
}


# =============================================================================
# RULES
# =============================================================================


@dataclass(frozen=True)
class AvoidTerm:
    """A word or phrase the brand voice avoids. Key: lowercased term."""

    term: str
    category: str
    severity: str = ""
    suggestion: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "term", self.term.lower())
        if not self.severity:
            object.__setattr__(self, "severity", default_severity(self.category))


@dataclass(frozen=True)
class PreferredTerm:
    """A word or phrase the brand voice favours."""

    term: str
    category: str
    emotional_goal: str = ""

    def __post_init__(self):
        object.__setattr__(self, "term", self.term.lower())
        if not self.emotional_goal:
            goal = PREFERRED_CATEGORY_INFO.get(self.category, ("", ""))[1]
            object.__setattr__(self, "emotional_goal", goal)


@dataclass(frozen=True)
class AutoFixRule:
    """Deterministic original -> replacement substitution.

    confidence: 0-1, higher = safer to auto-apply. Clamped on construction.
    """

    original: str
    replacement: str
    category: str
    confidence: float = 0.9
    case_sensitive: bool = False
    whole_word: bool = True

    def __post_init__(self):
        object.__setattr__(self, "confidence", min(1.0, max(0.0, self.confidence)))

    @property
    def key(self) -> str:
        return self.original.lower()


# =============================================================================
# FINDINGS
# =============================================================================


@dataclass(frozen=True)
class TextRange:
    start: int
    end: int


@dataclass(frozen=True)
class Violation:
    """A single rule or safety finding. Immutable once created.

    Attributes:
        severity: One of RuleSeverity.
        rule_id: E.g. "avoid_word_complex", "auto_fix_britishSpelling", "safety_health".
        matched_text: The term or patterns that triggered it.
        suggestion: How to fix it.
        category: Human-readable category label.
        text_range: Character offsets of the first occurrence, when known.
        auto_fixable: True when a deterministic fix exists.
    """

    severity: str
    rule_id: str
    matched_text: str
    suggestion: str
    category: str
    text_range: TextRange | None = None
    auto_fixable: bool = False


@dataclass(frozen=True)
class AutoFix:
    """A proposed, not-yet-applied edit."""

    original: str
    replacement: str
    confidence: float
    rule_label: str
    source_violation: Violation


@dataclass
class AutoFixPreview:
    """Before/after view of applying fixes."""

    original_content: str
    fixed_content: str
    applied_fixes: list[AutoFix] = field(default_factory=list)
    is_pending: bool = True

    @property
    def fix_count(self) -> int:
        return len(self.applied_fixes)

    @property
    def has_changes(self) -> bool:
        return self.original_content != self.fixed_content


@dataclass
class RuleTables:
    """The three rule tables as loaded."""

    avoid_terms: list[AvoidTerm] = field(default_factory=list)
    preferred_terms: list[PreferredTerm] = field(default_factory=list)
    auto_fix_rules: list[AutoFixRule] = field(default_factory=list)
    version: str = "1.0.0"
