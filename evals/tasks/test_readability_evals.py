"""
Readability Evals -- counting heuristics, the three formulas, and suggestions.
"""

import pytest

from tonegate.enforcement import readability

SIMPLE = "The cat sat on the mat."
DENSE = (
    "Organizational transformation necessitates comprehensive "
    "interdisciplinary collaboration."
)
# 30 words in one sentence, mostly one syllable
LONG_SENTENCE = " ".join(["the cat sat on a happy"] * 5) + "."
# 20 words, half two-syllable: over grade 8 without tripping a specific heuristic
MODERATE = " ".join(["happy cat"] * 10) + "."


class TestCounting:
    """Eval: Are sentences, words, and syllables counted the documented way?"""

    @pytest.mark.parametrize("word,expected", [
        ("cat", 1), ("the", 1), ("hello", 2), ("rhythm", 1),
        ("beautiful", 3), ("readability", 5), ("", 1), ("welcome", 2),
    ])
    def test_syllables(self, word, expected):
        assert readability.count_syllables_in_word(word) == expected

    def test_sentences(self):
        assert readability.count_sentences("Hi. There! Ok?") == 3
        assert readability.count_sentences("Wait... what") == 1
        assert readability.count_sentences("no punctuation") == 1

    def test_words(self):
        assert readability.count_words("  two   words ") == 2


class TestFormulas:
    """Eval: Do the formulas produce sane values on known inputs?"""

    def test_simple_sentence_is_easy(self):
        assert readability.flesch_kincaid_grade(SIMPLE) < 6.0
        assert readability.flesch_kincaid_grade(SIMPLE) == 0.0
        assert readability.flesch_reading_ease(SIMPLE) == 100.0
        assert readability.gunning_fog(SIMPLE) == pytest.approx(2.4)

    def test_dense_sentence_is_hard(self):
        assert readability.flesch_kincaid_grade(DENSE) > 12.0
        assert readability.flesch_reading_ease(DENSE) == 0.0

    def test_empty_text(self):
        assert readability.flesch_reading_ease("") == 100.0
        assert readability.flesch_kincaid_grade("") == 0.0
        assert readability.gunning_fog("") == 0.0

    def test_longer_words_raise_grade(self):
        base = readability.flesch_kincaid_grade("We fix the net for you today.")
        harder = readability.flesch_kincaid_grade("We restore the connection for you today.")
        assert harder > base

    def test_longer_sentences_raise_grade(self):
        split = " ".join(["cat"] * 12) + ". " + " ".join(["cat"] * 12) + "."
        joined = " ".join(["cat"] * 24) + "."
        assert readability.count_words(split) == readability.count_words(joined)
        assert readability.count_syllables(split) == readability.count_syllables(joined)

        assert readability.flesch_kincaid_grade(joined) > readability.flesch_kincaid_grade(split)
        assert readability.flesch_reading_ease(joined) < readability.flesch_reading_ease(split)

    @pytest.mark.parametrize("ease,grade", [(95, 5), (85, 6), (65, 8), (45, 10), (10, 12)])
    def test_grade_band(self, ease, grade):
        assert readability.grade_band(ease) == grade


class TestAnalysis:
    """Eval: Does analyze() bundle metrics and suggest the right fixes?"""

    def test_welcome_message_meets_target(self):
        analysis = readability.analyze("Welcome to Jio! Your account is ready.")
        assert analysis.sentence_count == 2
        assert analysis.word_count == 7
        assert analysis.syllable_count == 10
        assert analysis.flesch_kincaid_grade == pytest.approx(2.63, abs=0.01)
        assert analysis.meets_target
        assert analysis.suggestions == ()

    def test_empty_analysis(self):
        analysis = readability.analyze("")
        assert analysis.sentence_count == 0
        assert analysis.word_count == 0
        assert analysis.flesch_reading_ease == 100.0
        assert analysis.average_sentence_length == 0.0
        assert analysis.meets_target

    def test_dense_text_suggestions(self):
        analysis = readability.analyze(DENSE)
        assert not analysis.meets_target
        assert analysis.complex_word_count == 6
        assert "use shorter, simpler words" in analysis.suggestions
        assert any(s.startswith("replace some of the 6 words") for s in analysis.suggestions)

    def test_long_sentence_suggestion(self):
        analysis = readability.analyze(LONG_SENTENCE)
        assert analysis.word_count == 30
        assert analysis.suggestions == (
            "break up long sentences (average 30 words per sentence)",
        )

    def test_fallback_suggestion(self):
        analysis = readability.analyze(MODERATE)
        assert analysis.flesch_kincaid_grade == pytest.approx(9.91, abs=0.01)
        assert analysis.suggestions == ("simplify the text to reach grade 8",)

    def test_custom_target(self):
        analysis = readability.analyze(MODERATE, target_grade=12.0)
        assert analysis.meets_target
        assert analysis.suggestions == ()

    def test_deterministic(self):
        assert readability.analyze(DENSE) == readability.analyze(DENSE)
