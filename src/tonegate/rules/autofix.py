"""
AutoFixService -- convenience layer over RuleRepository for fix previews and stats.
"""

import logging
from dataclasses import dataclass, field

from .models import AutoFix, AutoFixCategory, AutoFixPreview, Violation
from .repository import RuleRepository, term_pattern

logger = logging.getLogger(__name__)

MAX_EXAMPLES = 3


@dataclass
class AutoFixCategoryStats:
    category: str
    count: int
    examples: list[AutoFix] = field(default_factory=list)


class AutoFixService:
    """Detect, preview, and apply auto-fixes.

    Usage:
        service = AutoFixService(RuleRepository())
        preview = service.preview_fix(fix, "The chairman spoke")
        stats = service.stats_by_category("Utilize the color of the center")
    """

    def __init__(self, repository: RuleRepository | None = None):
        self._rules = repository or RuleRepository()

    def detect_fixes(self, text: str) -> list[AutoFix]:
        return self._rules.get_auto_fixes(text)

    def apply_fix(self, fix: AutoFix, text: str) -> str:
        return self._rules.apply_fix(fix, text)

    def apply_all_fixes(self, text: str) -> AutoFixPreview:
        return self._rules.apply_all_fixes(text)

    def fix_count(self, text: str) -> int:
        return len(self.detect_fixes(text))

    def preview_fix(self, fix: AutoFix, text: str) -> AutoFixPreview:
        """Preview a single fix (whole-word, case-insensitive)."""
        result = term_pattern(fix.original).sub(lambda _m: fix.replacement, text)
        return AutoFixPreview(
            original_content=text,
            fixed_content=result,
            applied_fixes=[fix],
            is_pending=True,
        )

    def fixes_for_violations(self, violations: list[Violation]) -> list[AutoFix]:
        """Look up the fix for each auto-fixable violation."""
        fixes = []
        for violation in violations:
            if not violation.auto_fixable:
                continue
            rule = self._rules.get_auto_fix_rule(violation.matched_text)
            if rule is None:
                continue
            fixes.append(AutoFix(
                original=rule.original,
                replacement=rule.replacement,
                confidence=rule.confidence,
                rule_label=violation.category,
                source_violation=violation,
            ))
        return fixes

    def stats_by_category(self, text: str) -> list[AutoFixCategoryStats]:
        """Group detected fixes by rule category, largest group first."""
        grouped: dict[str, list[AutoFix]] = {}
        for fix in self.detect_fixes(text):
            rule = self._rules.get_auto_fix_rule(fix.original)
            category = rule.category if rule else AutoFixCategory.SIMPLE_ALTERNATIVE
            grouped.setdefault(category, []).append(fix)

        stats = [
            AutoFixCategoryStats(category=c, count=len(f), examples=f[:MAX_EXAMPLES])
            for c, f in grouped.items()
        ]
        stats.sort(key=lambda s: s.count, reverse=True)
        logger.debug(f"[Rules] Grouped fixes into {len(stats)} categories")
        return stats
