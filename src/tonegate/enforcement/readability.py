"""
Readability -- sentence/word/syllable counts and three classic formulas.

Pure functions, no state. With ASL = words/sentences and ASW = syllables/words:
  - Flesch Reading Ease  = 206.835 - 1.015*ASL - 84.6*ASW, clamped to [0, 100]
  - Flesch-Kincaid Grade = 0.39*ASL + 11.8*ASW - 15.59, floored at 0
  - Gunning Fog          = 0.4*(ASL + 100*complex/words), complex = 3+ syllables
"""

import re
from dataclasses import dataclass, field

from ..config import DEFAULT_TARGET_GRADE

SENTENCE_END = re.compile(r"[.!?]+")
VOWELS = frozenset("aeiouy")

LONG_SENTENCE_WORDS = 20
DENSE_SYLLABLES_PER_WORD = 1.6
COMPLEX_WORD_RATIO = 0.15


@dataclass(frozen=True)
class ReadabilityAnalysis:
    """Derived metrics for one text. No identity; equal inputs give equal values."""

    flesch_reading_ease: float
    flesch_kincaid_grade: float
    gunning_fog: float
    sentence_count: int
    word_count: int
    syllable_count: int
    complex_word_count: int
    target_grade: float = DEFAULT_TARGET_GRADE
    suggestions: tuple[str, ...] = field(default_factory=tuple)

    @property
    def meets_target(self) -> bool:
        return self.flesch_kincaid_grade <= self.target_grade

    @property
    def average_sentence_length(self) -> float:
        return self.word_count / self.sentence_count if self.sentence_count else 0.0

    @property
    def average_syllables_per_word(self) -> float:
        return self.syllable_count / self.word_count if self.word_count else 0.0


def count_sentences(text: str) -> int:
    return max(1, len(SENTENCE_END.findall(text)))


def count_words(text: str) -> int:
    return len(text.split())


def count_syllables_in_word(word: str) -> int:
    """Vowel groups in the letters of the word, less a silent trailing e. Minimum 1."""
    clean = "".join(ch for ch in word.lower() if ch.isalpha())
    count = 0
    previous_was_vowel = False
    for ch in clean:
        is_vowel = ch in VOWELS
        if is_vowel and not previous_was_vowel:
            count += 1
        previous_was_vowel = is_vowel

    if clean.endswith("e") and count > 1:
        count -= 1
    return max(1, count)


def count_syllables(text: str) -> int:
    return sum(count_syllables_in_word(word) for word in text.split())


def _ratios(text: str) -> tuple[float, float] | None:
    words = text.split()
    if not words:
        return None
    asl = len(words) / count_sentences(text)
    asw = sum(count_syllables_in_word(w) for w in words) / len(words)
    return asl, asw


def flesch_reading_ease(text: str) -> float:
    ratios = _ratios(text)
    if ratios is None:
        return 100.0
    asl, asw = ratios
    return min(100.0, max(0.0, 206.835 - 1.015 * asl - 84.6 * asw))


def flesch_kincaid_grade(text: str) -> float:
    ratios = _ratios(text)
    if ratios is None:
        return 0.0
    asl, asw = ratios
    return max(0.0, 0.39 * asl + 11.8 * asw - 15.59)


def gunning_fog(text: str) -> float:
    words = text.split()
    if not words:
        return 0.0
    asl = len(words) / count_sentences(text)
    complex_words = sum(1 for w in words if count_syllables_in_word(w) >= 3)
    return 0.4 * (asl + 100.0 * complex_words / len(words))


def grade_band(ease: float) -> int:
    """Coarse school grade for a reading-ease score (90+ -> 5, below 30 -> 12)."""
    for floor, grade in ((90, 5), (80, 6), (70, 7), (60, 8), (50, 9), (40, 10), (30, 11)):
        if ease >= floor:
            return grade
    return 12


def analyze(text: str, target_grade: float = DEFAULT_TARGET_GRADE) -> ReadabilityAnalysis:
    """All metrics in one pass. Empty text reads as perfectly easy."""
    words = (text or "").split()
    if not words:
        return ReadabilityAnalysis(
            flesch_reading_ease=100.0,
            flesch_kincaid_grade=0.0,
            gunning_fog=0.0,
            sentence_count=0,
            word_count=0,
            syllable_count=0,
            complex_word_count=0,
            target_grade=target_grade,
        )

    sentences = count_sentences(text)
    per_word = [count_syllables_in_word(w) for w in words]
    syllables = sum(per_word)
    complex_words = sum(1 for s in per_word if s >= 3)

    asl = len(words) / sentences
    asw = syllables / len(words)
    ease = min(100.0, max(0.0, 206.835 - 1.015 * asl - 84.6 * asw))
    grade = max(0.0, 0.39 * asl + 11.8 * asw - 15.59)
    fog = 0.4 * (asl + 100.0 * complex_words / len(words))

    suggestions: list[str] = []
    if grade > target_grade:
        if asl > LONG_SENTENCE_WORDS:
            suggestions.append(
                f"break up long sentences (average {asl:.0f} words per sentence)"
            )
        if asw > DENSE_SYLLABLES_PER_WORD:
            suggestions.append("use shorter, simpler words")
        if complex_words / len(words) > COMPLEX_WORD_RATIO:
            suggestions.append(
                f"replace some of the {complex_words} words with three or more syllables"
            )
        if not suggestions:
            suggestions.append(f"simplify the text to reach grade {target_grade:.0f}")

    return ReadabilityAnalysis(
        flesch_reading_ease=ease,
        flesch_kincaid_grade=grade,
        gunning_fog=fog,
        sentence_count=sentences,
        word_count=len(words),
        syllable_count=syllables,
        complex_word_count=complex_words,
        target_grade=target_grade,
        suggestions=tuple(suggestions),
    )
