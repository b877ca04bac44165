"""
Code-Based Graders -- deterministic evaluation with exact criteria.

Use for: score bounds, expected rule ids, routing decisions, counts.
Every check runs even after one fails, so a single grade() call reports
every broken expectation of a validation or safety result at once.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

logger = logging.getLogger(__name__)

Check = Callable[[Any], bool]


@dataclass
class CodeGraderResult:
    """Outcome of grading one output: which named checks failed, and how."""

    eval_name: str
    checks_total: int
    failures: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.failures

    @property
    def checks_passed(self) -> int:
        return self.checks_total - len(self.failures)


class CodeGrader:
    """Named predicates over a pipeline result, all-or-nothing.

    Usage:
        grader = CodeGrader("welcome_message")
        grader.add_check("passes", lambda r: r.passed)
        grader.add_check("perfect_score", lambda r: r.score == 100)
        result = grader.grade(pipeline.validate(text))
        assert result.passed, result.failures
    """

    def __init__(self, eval_name: str):
        self.eval_name = eval_name
        self._checks: dict[str, Check] = {}

    def add_check(self, name: str, check_fn: Check) -> "CodeGrader":
        """Register a predicate under a unique name. Chainable."""
        if name in self._checks:
            raise ValueError(f"duplicate check name: {name}")
        self._checks[name] = check_fn
        return self

    def _failure(self, name: str, check_fn: Check, output: Any) -> str | None:
        try:
            return None if check_fn(output) else f"FAIL: {name}"
        except Exception as e:
            return f"ERROR: {name} -- {type(e).__name__}: {e}"

    def grade(self, output: Any) -> CodeGraderResult:
        failures = [
            failure
            for name, check_fn in self._checks.items()
            if (failure := self._failure(name, check_fn, output)) is not None
        ]
        if failures:
            logger.info(f"[Grader] {self.eval_name}: {len(failures)} of {len(self._checks)} checks failed")
        return CodeGraderResult(
            eval_name=self.eval_name,
            checks_total=len(self._checks),
            failures=failures,
        )


def validation_grader(
    eval_name: str,
    passed: bool | None = None,
    min_score: int = 0,
    max_score: int = 100,
    rule_ids: tuple[str, ...] = (),
    absent_rule_ids: tuple[str, ...] = (),
) -> CodeGrader:
    """Grader for a ValidationResult: verdict, score window, and which rules fired."""
    grader = CodeGrader(eval_name)
    grader.add_check("score_in_range", lambda r: 0 <= r.score <= 100)
    grader.add_check(f"score_at_least_{min_score}", lambda r: r.score >= min_score)
    grader.add_check(f"score_at_most_{max_score}", lambda r: r.score <= max_score)
    if passed is not None:
        grader.add_check(f"passed_is_{passed}", lambda r: r.passed is passed)
    for rule_id in rule_ids:
        grader.add_check(
            f"has_{rule_id}",
            lambda r, rid=rule_id: any(v.rule_id == rid for v in r.violations),
        )
    for rule_id in absent_rule_ids:
        grader.add_check(
            f"lacks_{rule_id}",
            lambda r, rid=rule_id: all(v.rule_id != rid for v in r.violations),
        )
    return grader


def safety_grader(
    eval_name: str,
    routing: str,
    highest_level: str | None = None,
    domains: tuple[str, ...] = (),
) -> CodeGrader:
    """Grader for a SafetyGateResult: routing, top level, and triggered domains."""
    grader = CodeGrader(eval_name)
    grader.add_check(f"routing_is_{routing}", lambda r: r.routing == routing)
    if highest_level is not None:
        grader.add_check(
            f"highest_level_is_{highest_level}", lambda r: r.highest_level == highest_level
        )
    for domain in domains:
        grader.add_check(
            f"triggers_{domain}",
            lambda r, d=domain: any(c.domain == d for c in r.classifications),
        )
    return grader
