"""
Rule Evals -- avoid-term matching, auto-fixes, loading, and casing.

CODE-BASED graders over the bundled wording tables. No network, no LLM.
"""

import threading

from tonegate.rules import (
    AutoFixCategory,
    AutoFixService,
    AvoidCategory,
    AvoidTerm,
    RuleRepository,
    RuleSeverity,
    RuleTables,
    apply_sentence_case,
)


class TestAvoidTermMatching:
    """Eval: Does check_text find avoid terms, and only real ones?"""

    def test_finds_terms_in_text_order(self, rules):
        violations = rules.check_text("Please leverage our robust backend")
        assert [v.matched_text for v in violations] == ["leverage", "robust", "backend"]
        assert [v.severity for v in violations] == [
            RuleSeverity.WARNING, RuleSeverity.WARNING, RuleSeverity.INFO,
        ]

    def test_violation_carries_offsets_and_suggestion(self, rules):
        text = "Please leverage our tools"
        violation = rules.check_text(text)[0]
        assert violation.rule_id == "avoid_word_complex"
        assert violation.suggestion == "use"
        assert violation.category == "complex words"
        assert text[violation.text_range.start:violation.text_range.end] == "leverage"

    def test_auto_fixable_only_when_fix_exists(self, rules):
        by_term = {v.matched_text: v for v in rules.check_text("leverage robust")}
        assert by_term["leverage"].auto_fixable
        assert not by_term["robust"].auto_fixable

    def test_phrase_terms_matched(self, rules):
        violations = rules.check_text("Kindly do the needful by Monday.")
        assert [v.matched_text for v in violations] == ["do the needful"]
        assert violations[0].rule_id == "avoid_word_robotic"

    def test_repeated_term_reported_once(self, rules):
        violations = rules.check_text("leverage, leverage, and leverage again")
        assert len(violations) == 1

    def test_case_insensitive(self, rules):
        violations = rules.check_text("LEVERAGE IT")
        assert violations[0].matched_text == "leverage"
        assert violations[0].text_range.start == 0

    def test_inflected_forms_matched(self, rules):
        assert [v.matched_text for v in rules.check_text("We utilized it.")] == ["utilize"]
        violations = rules.check_text("She leverages it")
        assert [v.matched_text for v in violations] == ["leverage"]
        assert violations[0].text_range.start == 4

    def test_terms_inside_longer_words_matched(self, rules):
        """Containment, not whole words: 'lose' in 'close', 'ace' in 'gracefully'."""
        text = "She will close the door gracefully"
        violations = rules.check_text(text)
        assert [v.matched_text for v in violations] == ["lose", "ace"]
        assert text[violations[0].text_range.start:violations[0].text_range.end] == "lose"
        assert violations[0].text_range.start == 10

    def test_one_violation_per_token(self, rules):
        """A token records only the first table term it contains."""
        violations = rules.check_text("leveraging")
        assert [v.matched_text for v in violations] == ["aging"]

    def test_empty_text(self, rules):
        assert rules.check_text("") == []

    def test_fear_based_is_error(self, rules):
        violations = rules.check_text("Act now or lose everything")
        assert {v.severity for v in violations} == {RuleSeverity.ERROR}
        assert {v.matched_text for v in violations} == {"act now", "lose"}


class TestTableAccess:
    """Eval: Are the tables loaded, filterable, and counted?"""

    def test_stats_nonzero(self, rules):
        stats = rules.stats()
        assert stats["avoid_terms"] > 300
        assert stats["preferred_terms"] > 300
        assert stats["auto_fix_rules"] > 80

    def test_filter_by_category(self, rules):
        terms = rules.get_avoid_terms(AvoidCategory.ELITIST)
        assert terms
        assert all(t.category == AvoidCategory.ELITIST for t in terms)
        assert any(t.term == "ace" for t in rules.get_avoid_terms(AvoidCategory.MARKETING_JARGON))

    def test_auto_fix_lookup_case_insensitive(self, rules):
        rule = rules.get_auto_fix_rule("CHAIRMAN")
        assert rule is not None
        assert rule.replacement == "chairperson"
        assert rule.category == AutoFixCategory.GENDER_NEUTRAL

    def test_preferred_terms_found(self, rules):
        found = {t.term for t in rules.find_preferred_terms("Thank you, we're here for you")}
        assert {"thank you", "here for you", "we're here"} <= found


class TestAutoFixes:
    """Eval: Are fixes detected whole-word and applied without side effects?"""

    def test_apply_all_fixes(self, rules):
        preview = rules.apply_all_fixes("Utilize the color picker")
        assert preview.fixed_content == "use the colour picker"
        assert preview.fix_count == 2
        assert preview.has_changes
        assert preview.is_pending

    def test_gender_neutral_fix(self, rules):
        preview = rules.apply_all_fixes("The chairman spoke")
        assert preview.fixed_content == "The chairperson spoke"

    def test_nothing_to_fix(self, rules):
        preview = rules.apply_all_fixes("nothing to see here")
        assert not preview.has_changes
        assert preview.applied_fixes == []

    def test_whole_word_only(self, rules):
        assert rules.get_auto_fixes("programmer") == []
        assert rules.apply_all_fixes("programmer").fixed_content == "programmer"

    def test_fix_has_range_and_source_violation(self, rules):
        fix = rules.get_auto_fixes("leverage")[0]
        assert fix.replacement == "use"
        assert fix.source_violation.rule_id == "auto_fix_simpleAlternative"
        assert fix.source_violation.text_range.start == 0
        assert fix.source_violation.text_range.end == 8

    def test_apply_fix_replaces_every_occurrence(self, rules):
        fix = rules.get_auto_fixes("color")[0]
        assert rules.apply_fix(fix, "color and more color") == "colour and more colour"


class TestAutoFixService:
    """Eval: Does the service layer group and map fixes correctly?"""

    def test_stats_by_category_largest_first(self, rules):
        stats = AutoFixService(rules).stats_by_category("Utilize the color of the center")
        assert stats[0].category == AutoFixCategory.BRITISH_SPELLING
        assert stats[0].count == 2
        assert sum(s.count for s in stats) == 3

    def test_fixes_for_violations(self, rules):
        service = AutoFixService(rules)
        fixes = service.fixes_for_violations(rules.check_text("leverage the color"))
        assert sorted(f.replacement for f in fixes) == ["colour", "use"]

    def test_preview_single_fix(self, rules):
        service = AutoFixService(rules)
        fix = service.detect_fixes("The chairman spoke")[0]
        preview = service.preview_fix(fix, "The chairman spoke")
        assert preview.fixed_content == "The chairperson spoke"


class TestLoading:
    """Eval: Is loading once-only, and does a broken loader degrade to defaults?"""

    def test_failing_loader_falls_back(self, rules):
        def broken():
            raise RuntimeError("remote unavailable")

        repository = RuleRepository(loader=broken)
        repository.load()
        assert repository.is_loaded
        assert repository.stats() == rules.stats()

    def test_custom_tables_and_duplicate_keys(self):
        tables = RuleTables(avoid_terms=[
            AvoidTerm("Foo", AvoidCategory.COMPLEX, suggestion="bar"),
            AvoidTerm("foo", AvoidCategory.ELITIST),
        ])
        repository = RuleRepository(loader=lambda: tables)
        violations = repository.check_text("foo fighters")
        assert len(violations) == 1
        assert violations[0].suggestion == "bar"
        assert violations[0].rule_id == "avoid_word_complex"

    def test_loader_runs_once_across_threads(self):
        calls = []

        def loader():
            calls.append(1)
            return RuleTables()

        repository = RuleRepository(loader=loader)
        threads = [threading.Thread(target=repository.load) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        repository.load()
        assert len(calls) == 1

    def test_sync_bookkeeping(self):
        repository = RuleRepository()
        assert repository.needs_sync()
        assert repository.last_sync_time is None
        repository.sync_from_remote()
        assert repository.last_sync_time is not None
        assert not repository.needs_sync()


class TestSentenceCase:
    """Eval: Are sentence starts, 'I', and brand names cased?"""

    def test_sentence_pronoun_and_brand(self):
        assert apply_sentence_case("welcome to jio. i'm glad you're here") == (
            "Welcome to Jio. I'm glad you're here"
        )

    def test_brand_inside_sentence(self):
        assert apply_sentence_case("open the myjio app") == "Open the MyJio app"

    def test_empty(self):
        assert apply_sentence_case("") == ""
