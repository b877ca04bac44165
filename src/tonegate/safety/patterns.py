"""
Bundled safety data: patterns, emergency payloads, and per-domain disclaimers.

Plain phrases are matched as substrings of the lowercased text. Short words
that occur inside ordinary words ("sue" in "issue", "otp" in "hotpot",
"kill" in "skill") are word-boundary regexes instead.
"""

from .models import EmergencyInfo, Helpline, SafetyDomain, SafetyLevel, SafetyPattern

D = SafetyDomain
L = SafetyLevel


def _p(pattern: str, domain: str, level: str, description: str) -> SafetyPattern:
    return SafetyPattern(pattern=pattern, domain=domain, level=level, description=description)


def _rx(pattern: str, domain: str, level: str, description: str) -> SafetyPattern:
    return SafetyPattern(
        pattern=pattern, domain=domain, level=level, is_regex=True, description=description,
    )


DEFAULT_PATTERNS: list[SafetyPattern] = [
    # Mental health
    _p("suicide", D.MENTAL_HEALTH, L.CRITICAL, "suicide mention"),
    _p("kill myself", D.MENTAL_HEALTH, L.CRITICAL, "self-harm intent"),
    _p("end my life", D.MENTAL_HEALTH, L.CRITICAL, "self-harm intent"),
    _p("want to die", D.MENTAL_HEALTH, L.CRITICAL, "suicidal ideation"),
    _p("self harm", D.MENTAL_HEALTH, L.CRITICAL, "self-harm"),
    _p("self-harm", D.MENTAL_HEALTH, L.CRITICAL, "self-harm"),
    _p("cutting myself", D.MENTAL_HEALTH, L.CRITICAL, "self-harm"),
    _p("depression", D.MENTAL_HEALTH, L.HIGH, "mental health condition"),
    _p("anxiety disorder", D.MENTAL_HEALTH, L.HIGH, "mental health condition"),
    _p("panic attack", D.MENTAL_HEALTH, L.MODERATE, "mental health symptom"),
    _p("bipolar", D.MENTAL_HEALTH, L.HIGH, "mental health condition"),
    _p("schizophrenia", D.MENTAL_HEALTH, L.HIGH, "mental health condition"),

    # Emergency
    _p("heart attack", D.EMERGENCY, L.CRITICAL, "medical emergency"),
    _p("can't breathe", D.EMERGENCY, L.CRITICAL, "breathing emergency"),
    _p("cannot breathe", D.EMERGENCY, L.CRITICAL, "breathing emergency"),
    _p("choking", D.EMERGENCY, L.CRITICAL, "choking emergency"),
    _p("unconscious", D.EMERGENCY, L.HIGH, "medical emergency"),
    _p("ambulance", D.EMERGENCY, L.HIGH, "emergency services"),
    _p("emergency room", D.EMERGENCY, L.HIGH, "emergency medical"),

    # Health
    _p("diagnose", D.HEALTH, L.MODERATE, "medical diagnosis"),
    _p("prescription", D.HEALTH, L.MODERATE, "medical prescription"),
    _p("medication", D.HEALTH, L.LOW, "medication mention"),
    _p("cancer treatment", D.HEALTH, L.HIGH, "serious illness"),
    _p("diabetes treatment", D.HEALTH, L.MODERATE, "chronic condition"),
    _p("cure for", D.HEALTH, L.HIGH, "cure claims"),
    _p("guaranteed cure", D.HEALTH, L.CRITICAL, "false cure claims"),

    # Financial
    _p("guaranteed returns", D.FINANCIAL, L.HIGH, "investment promise"),
    _p("investment advice", D.FINANCIAL, L.MODERATE, "financial advice"),
    _p("double your money", D.FINANCIAL, L.HIGH, "financial scam pattern"),
    _p("get rich quick", D.FINANCIAL, L.HIGH, "scam pattern"),
    _p("financial guarantee", D.FINANCIAL, L.MODERATE, "financial promise"),
    _p("loan approval guaranteed", D.FINANCIAL, L.HIGH, "false promise"),

    # Legal
    _p("legal advice", D.LEGAL, L.MODERATE, "legal advice"),
    _rx(r"\bsue\b", D.LEGAL, L.LOW, "legal action"),
    _p("lawsuit", D.LEGAL, L.MODERATE, "legal proceedings"),
    _p("court case", D.LEGAL, L.MODERATE, "legal proceedings"),

    # Privacy
    _p("aadhaar number", D.PRIVACY, L.MODERATE, "PII"),
    _p("pan number", D.PRIVACY, L.MODERATE, "PII"),
    _p("bank account number", D.PRIVACY, L.HIGH, "financial PII"),
    _p("credit card number", D.PRIVACY, L.HIGH, "financial PII"),
    _p("password", D.PRIVACY, L.MODERATE, "credentials"),
    _rx(r"\botp\b", D.PRIVACY, L.MODERATE, "authentication"),

    # Violence
    _rx(r"\bkill(?:s|ed|ing)?\b", D.VIOLENCE, L.HIGH, "violence"),
    _p("murder", D.VIOLENCE, L.CRITICAL, "violence"),
    _rx(r"\battack(?:s|ed|ing)?\b", D.VIOLENCE, L.MODERATE, "potential violence"),
    _p("weapon", D.VIOLENCE, L.MODERATE, "weapon mention"),
    _rx(r"\bbomb(?:s|ing)?\b", D.VIOLENCE, L.CRITICAL, "explosive"),
    _p("terrorist", D.VIOLENCE, L.CRITICAL, "terrorism"),

    # Substance
    _p("drugs", D.SUBSTANCE, L.MODERATE, "substance"),
    _p("cocaine", D.SUBSTANCE, L.HIGH, "illegal substance"),
    _p("heroin", D.SUBSTANCE, L.HIGH, "illegal substance"),
    _p("alcohol addiction", D.SUBSTANCE, L.MODERATE, "addiction"),

    # Gambling
    _p("guaranteed win", D.GAMBLING, L.HIGH, "gambling promise"),
    _p("betting tips", D.GAMBLING, L.MODERATE, "gambling advice"),
    _rx(r"\bsatta\b", D.GAMBLING, L.HIGH, "illegal gambling"),

    # Minors
    _p("child abuse", D.MINORS, L.CRITICAL, "child safety"),
    _rx(r"\bminors?\b", D.MINORS, L.LOW, "minor mention"),

    # Political
    _p("vote for", D.POLITICAL, L.MODERATE, "electoral persuasion"),
    _p("election result", D.POLITICAL, L.LOW, "election mention"),
    _p("political party", D.POLITICAL, L.LOW, "party mention"),

    # Religious
    _p("religious conversion", D.RELIGIOUS, L.MODERATE, "conversion"),
    _p("blasphem", D.RELIGIOUS, L.HIGH, "blasphemy"),
    _p("communal riot", D.RELIGIOUS, L.HIGH, "communal violence"),
]


DEFAULT_EMERGENCY_RESPONSES: dict[str, EmergencyInfo] = {
    D.MENTAL_HEALTH: EmergencyInfo(
        helplines=(
            Helpline("iCall", "9152987821",
                     "psychosocial helpline by tata institute of social sciences", False),
            Helpline("Vandrevala Foundation", "1860-2662-345",
                     "24/7 mental health support", True),
            Helpline("NIMHANS", "080-46110007",
                     "national institute of mental health helpline", False),
            Helpline("Snehi", "044-24640050", "emotional support helpline", True),
        ),
        resources=(
            "reach out to a trusted friend or family member",
            "contact a mental health professional",
            "visit your nearest hospital emergency",
            "call emergency services if in immediate danger",
        ),
        immediate_message=(
            "i'm here for you. what you're feeling is valid, and help is available. "
            "please reach out to one of these helplines - they're trained to support "
            "you through this."
        ),
    ),
    D.EMERGENCY: EmergencyInfo(
        helplines=(
            Helpline("Emergency", "112", "national emergency number", True),
            Helpline("Ambulance", "102", "medical emergency", True),
            Helpline("Police", "100", "police emergency", True),
            Helpline("Fire", "101", "fire emergency", True),
        ),
        resources=(
            "call emergency services immediately",
            "if safe, move to a secure location",
            "alert people nearby who can help",
        ),
        immediate_message=(
            "this sounds like an emergency. please call 112 (emergency) or "
            "102 (ambulance) immediately. your safety is the priority."
        ),
    ),
    D.HEALTH: EmergencyInfo(
        helplines=(
            Helpline("Health Helpline", "104", "government health helpline", True),
            Helpline("COVID-19 Helpline", "1075", "covid-19 information", True),
        ),
        resources=(
            "consult a qualified healthcare professional",
            "visit your nearest hospital or clinic",
            "don't delay seeking medical attention",
        ),
        immediate_message=(
            "for health concerns, please consult a qualified healthcare professional. "
            "i can provide general information, but i cannot replace medical advice."
        ),
    ),
    D.FINANCIAL: EmergencyInfo(
        helplines=(
            Helpline("Cyber Crime", "1930", "financial fraud helpline", True),
            Helpline("RBI Helpline", "14440", "banking complaints", False),
        ),
        resources=(
            "report fraud to your bank immediately",
            "file a complaint at cybercrime.gov.in",
            "preserve all transaction records",
        ),
        immediate_message=(
            "if you suspect financial fraud, please report it immediately by calling "
            "1930 (cyber crime helpline) and inform your bank."
        ),
    ),
}


DEFAULT_DISCLAIMERS: dict[str, str] = {
    D.HEALTH: (
        "this is general information only and not medical advice. please consult "
        "a qualified healthcare professional for personalized medical guidance."
    ),
    D.FINANCIAL: (
        "this is general information only and not financial advice. investments are "
        "subject to market risks. please consult a qualified financial advisor."
    ),
    D.LEGAL: (
        "this is general information only and not legal advice. please consult a "
        "qualified legal professional for specific legal matters."
    ),
    D.MENTAL_HEALTH: (
        "if you're in crisis or need immediate support, please reach out to a "
        "mental health professional or call a helpline."
    ),
    D.PRIVACY: (
        "please never share sensitive personal information like aadhaar, pan, "
        "bank details, or passwords in messages."
    ),
    D.GAMBLING: (
        "gambling involves financial risk. please gamble responsibly and be aware "
        "of applicable laws in your jurisdiction."
    ),
    D.POLITICAL: (
        "this content touches on political topics. we stay neutral and do not "
        "endorse any party or candidate."
    ),
    D.RELIGIOUS: (
        "this content touches on religious topics. we respect all faiths and "
        "beliefs."
    ),
}
