"""
Wording rules -- brand-voice avoid terms, preferred terms, and auto-fix substitutions.

Components:
  - RuleRepository: Loads the bundled tables once and matches text against them
  - AutoFixService: Fix previews, violation-to-fix lookup, per-category stats
  - apply_sentence_case: Sentence, pronoun, and brand-name casing
"""

from .autofix import AutoFixCategoryStats, AutoFixService
from .models import (
    AutoFix,
    AutoFixCategory,
    AutoFixPreview,
    AutoFixRule,
    AvoidCategory,
    AvoidTerm,
    PreferredCategory,
    PreferredTerm,
    RuleSeverity,
    RuleTables,
    TextRange,
    Violation,
)
from .repository import RuleRepository
from .sentence_case import apply_sentence_case

__all__ = [
    "AutoFix",
    "AutoFixCategory",
    "AutoFixCategoryStats",
    "AutoFixPreview",
    "AutoFixRule",
    "AutoFixService",
    "AvoidCategory",
    "AvoidTerm",
    "PreferredCategory",
    "PreferredTerm",
    "RuleRepository",
    "RuleSeverity",
    "RuleTables",
    "TextRange",
    "Violation",
    "apply_sentence_case",
]
