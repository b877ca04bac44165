"""
Sentence casing -- capitalise sentence starts, the pronoun "I", and brand names.

Rewrite output often arrives all lowercase; this restores conventional casing
without touching anything else.
"""

import re

BRAND_CASING = {
    "jio": "Jio",
    "myjio": "MyJio",
    "jiofiber": "JioFiber",
    "jioairfiber": "JioAirFiber",
    "jiomart": "JioMart",
    "jiocinema": "JioCinema",
    "jiotv": "JioTV",
    "jiosaavn": "JioSaavn",
    "jiocloud": "JioCloud",
    "jiomeet": "JioMeet",
    "jiopay": "JioPay",
    "jiomoney": "JioMoney",
    "jiopos": "JioPos",
    "jioswitch": "JioSwitch",
    "reliance": "Reliance",
    "relianceone": "RelianceOne",
}

AFTER_PUNCTUATION = re.compile(r"([.?!]\s+)([a-z])")
PRONOUN_I = re.compile(r"\bi(?:'m|'ll|'ve|'d)?\b")
BRAND_PATTERNS = [
    (re.compile(r"\b" + re.escape(lower) + r"\b", re.IGNORECASE), proper)
    for lower, proper in BRAND_CASING.items()
]


def apply_sentence_case(text: str) -> str:
    """Return text with sentence, pronoun, and brand casing applied."""
    if not text:
        return text

    result = text[0].upper() + text[1:]
    result = AFTER_PUNCTUATION.sub(lambda m: m.group(1) + m.group(2).upper(), result)
    result = PRONOUN_I.sub(lambda m: "I" + m.group(0)[1:], result)
    for pattern, proper in BRAND_PATTERNS:
        result = pattern.sub(proper, result)
    return result
