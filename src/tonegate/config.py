"""
Settings -- tunable thresholds and cache sizes for the compliance pipeline.

Everything here is a plain constant with a dataclass wrapper so callers can
override per instance:

    settings = Settings(trust_score_minimum=80, target_grade=7.0)
    pipeline = ValidationPipeline(settings=settings)

The core never reads environment variables.
"""

from dataclasses import dataclass

DEFAULT_TRUST_SCORE_MINIMUM = 70
DEFAULT_STRICT_THRESHOLD = 95
DEFAULT_TARGET_GRADE = 8.0
DEFAULT_READABILITY_WARNING_MARGIN = 2.0
DEFAULT_MAX_TEXT_LENGTH = 50_000
DEFAULT_RATE_LIMIT_PER_MINUTE = 120

# Cache TTLs (seconds)
CACHE_TTL_KNOWLEDGE = 5 * 60
CACHE_TTL_ENFORCEMENT = 10 * 60
CACHE_TTL_READABILITY = 10 * 60

CACHE_SIZE_KNOWLEDGE = 10
CACHE_SIZE_ENFORCEMENT = 50
CACHE_SIZE_READABILITY = 500


@dataclass
class Settings:
    """Pipeline configuration.

    trust_score_minimum: Score needed to pass in standard mode.
    strict_threshold: Score needed to pass in strict mode.
    target_grade: Flesch-Kincaid grade the text should not exceed.
    readability_warning_margin: Grades over target before the readability
        violation escalates from info to warning.
    rate_limit_per_minute: HTTP requests allowed per client per minute.
    """

    trust_score_minimum: int = DEFAULT_TRUST_SCORE_MINIMUM
    strict_threshold: int = DEFAULT_STRICT_THRESHOLD
    target_grade: float = DEFAULT_TARGET_GRADE
    readability_warning_margin: float = DEFAULT_READABILITY_WARNING_MARGIN
    max_text_length: int = DEFAULT_MAX_TEXT_LENGTH
    rate_limit_per_minute: int = DEFAULT_RATE_LIMIT_PER_MINUTE
    knowledge_ttl: float = CACHE_TTL_KNOWLEDGE
    enforcement_ttl: float = CACHE_TTL_ENFORCEMENT
    readability_ttl: float = CACHE_TTL_READABILITY
    knowledge_cache_size: int = CACHE_SIZE_KNOWLEDGE
    enforcement_cache_size: int = CACHE_SIZE_ENFORCEMENT
    readability_cache_size: int = CACHE_SIZE_READABILITY
