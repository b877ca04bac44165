"""
Bundled default wording rules -- the static rule tables shipped with the package.

  AVOID_TERMS:     ~350 words/phrases across 10 avoid categories
  PREFERRED_TERMS: ~400 words/phrases across 6 preferred categories
  AUTO_FIX_RULES:  ~90 deterministic substitutions across 5 fix categories

Tables are plain literals; build_default_tables() turns them into rule objects.
Repeated keys are tolerated here and dropped (first definition wins) by the
repository when it builds its lookup maps.
"""

from .models import (
    AutoFixCategory,
    AutoFixRule,
    AvoidCategory,
    AvoidTerm,
    PreferredCategory,
    PreferredTerm,
    RuleTables,
)

# =============================================================================
# AVOID TERMS: (term, suggestion) or bare term
# =============================================================================

COMPLEX_TERMS = [
    ("utilize", "use"), ("leverage", "use"), ("synergy", "teamwork"),
    ("paradigm", "model"), ("bandwidth", "capacity"), ("optimize", "improve"),
    ("streamline", "simplify"), ("facilitate", "help"), ("implement", "do"),
    ("methodology", "method"), ("proliferate", "spread"), ("ameliorate", "improve"),
    ("disseminate", "share"), ("endeavor", "try"), ("elucidate", "explain"),
    ("expedite", "speed up"), ("heretofore", "until now"), ("henceforth", "from now"),
    ("notwithstanding", "despite"), ("aforementioned", "mentioned"),
    ("hereinafter", "from here"), ("therein", "in that"), ("whereby", "by which"),
    ("cognizant", "aware"), ("commensurate", "equal"), ("concatenate", "join"),
    ("delineate", "describe"), ("efficacious", "effective"), ("engender", "create"),
    ("epitomize", "represent"), ("exacerbate", "worsen"), ("extrapolate", "extend"),
    ("holistic", "complete"), ("incentivize", "encourage"), ("juxtapose", "compare"),
    ("multifaceted", "complex"), ("operationalize", "use"), ("proactive", "active"),
    ("scalable", "flexible"), ("synergize", "combine"),
    # business jargon
    ("actualize", "achieve"), ("circling back", "following up"),
    ("deep dive", "detailed look"), ("drill down", "examine closely"),
    ("ecosystem", "environment"), ("evangelize", "promote"),
    ("granular", "detailed"), ("ideate", "brainstorm"),
    ("impactful", "effective"), ("iterate", "repeat"),
    ("learnings", "lessons"), ("mindshare", "attention"),
    ("move the needle", "make progress"), ("net-net", "bottom line"),
    ("on my radar", "aware of"), ("pain point", "problem"),
    ("pivot", "change direction"), ("reach out", "contact"),
    ("robust", "strong"), ("run it up the flagpole", "propose"),
    ("take offline", "discuss privately"), ("touch base", "check in"),
    ("value-add", "benefit"), ("vertical", "industry"),
]

ROBOTIC_TERMS = [
    ("auto-generated", None), ("system generated", None), ("do not reply", None),
    ("noreply", None), ("automated message", None), ("this is a system message", None),
    ("dear customer", "use their name"), ("dear user", "use their name"),
    ("valued customer", None), ("to whom it may concern", None),
    ("please be informed", None), ("kindly note", None), ("please note that", None),
    ("this is to inform", None), ("we regret to inform", None),
    ("for your information", None), ("as per our records", None),
    ("as mentioned above", None), ("please find attached", None),
    ("enclosed herewith", None), ("as discussed", None), ("further to", None),
    ("with reference to", None), ("in this regard", None), ("in lieu of", None),
    ("at your earliest convenience", None), ("do the needful", None),
    ("revert back", "reply"), ("same", "it"), ("prepone", "reschedule earlier"),
]

FEAR_BASED_TERMS = [
    "urgent", "hurry", "last chance", "final warning",
    "act now", "limited time", "expires soon",
    "don't miss", "running out", "only x left",
    "before it's too late", "deadline", "must act",
    "critical", "emergency", "immediate action required",
    "failure to", "will be terminated", "will be suspended",
    "will be blocked", "penalty", "fine",
    "legal action", "consequences", "risk",
    "warning", "alert", "danger", "threat",
    "loss", "lose", "miss out", "regret",
    "fear", "worry", "panic", "stress",
    "anxiety", "scared", "afraid",
]

BUREAUCRATIC_TERMS = [
    "terms and conditions apply", "pursuant to",
    "in accordance with", "subject to", "notwithstanding",
    "whereas", "hereby", "hereto", "thereof",
    "whereof", "aforesaid", "said", "such",
    "duly", "forthwith", "hereunder", "thereto",
    "viz", "inter alia", "ipso facto",
    "mutatis mutandis", "prima facie", "pro rata",
    "sine qua non", "status quo", "ultra vires",
    "bona fide", "de facto", "ex officio", "modus operandi",
]

TECHNICAL_TERMS = [
    "backend", "api", "cache", "latency",
    "server", "database", "algorithm", "protocol",
    "infrastructure", "deployment", "repository",
    "endpoint", "authentication", "authorization",
    "encryption", "decryption", "middleware",
    "microservice", "container", "kubernetes",
    "docker", "ci/cd", "devops", "agile",
    "sprint", "scrum", "kanban", "jira",
    "confluence", "webhook",
]

SHAME_INDUCING_TERMS = [
    "you forgot", "your fault", "your mistake",
    "you failed", "you didn't", "you neglected",
    "you ignored", "you missed", "you should have",
    "why didn't you", "why haven't you", "you need to",
    "you must", "you have to", "it's your responsibility",
    "you're required", "you're obligated", "failure on your part",
    "your negligence", "your oversight", "your error",
    "incorrect", "wrong", "bad", "poor",
    "inadequate", "insufficient", "unacceptable",
    "disappointing", "unfortunate", "regrettable",
    "careless", "irresponsible", "negligent", "sloppy",
]

ELITIST_TERMS = [
    "premium", "exclusive", "elite", "vip",
    "luxury", "privileged", "select", "chosen",
    "special access", "members only", "invitation only",
    "by invitation", "limited edition", "rare",
    "unique", "one of a kind", "bespoke", "curated",
    "handpicked", "artisanal", "boutique", "niche",
    "sophisticated", "refined", "distinguished",
    "prestigious", "upscale", "high-end",
    "first class", "world class",
]

MARKETING_JARGON_TERMS = [
    "game-changing", "cutting-edge", "best-in-class",
    "world-class", "industry-leading", "revolutionary",
    "disruptive", "innovative", "next-generation",
    "state-of-the-art", "bleeding edge", "groundbreaking",
    "paradigm-shifting", "thought leader", "guru",
    "ninja", "rockstar", "wizard", "evangelist",
    "champion", "hero", "superstar", "ace",
    "maverick", "trailblazer", "pioneer",
    "visionary", "mastermind", "genius", "expert",
]

AMERICAN_SPELLINGS = [
    ("color", "colour"), ("honor", "honour"), ("favor", "favour"),
    ("center", "centre"), ("theater", "theatre"), ("meter", "metre"),
    ("fiber", "fibre"), ("liter", "litre"), ("caliber", "calibre"),
    ("analyze", "analyse"), ("organize", "organise"), ("recognize", "recognise"),
    ("realize", "realise"), ("customize", "customise"), ("optimize", "optimise"),
    ("authorize", "authorise"), ("criticize", "criticise"), ("apologize", "apologise"),
    ("catalog", "catalogue"), ("dialog", "dialogue"), ("analog", "analogue"),
    ("program", "programme"), ("traveling", "travelling"), ("canceled", "cancelled"),
    ("labeled", "labelled"), ("modeled", "modelled"), ("counselor", "counsellor"),
    ("behavior", "behaviour"), ("neighbor", "neighbour"), ("defense", "defence"),
    ("offense", "offence"), ("license", "licence"), ("practice", "practise"),
    ("aging", "ageing"), ("judgment", "judgement"), ("acknowledgment", "acknowledgement"),
    ("enrollment", "enrolment"), ("fulfillment", "fulfilment"),
    ("installment", "instalment"), ("skillful", "skilful"),
]

INCORRECT_FORMATS = [
    ("pin number", "pin"), ("atm machine", "atm"), ("lcd display", "lcd"),
    ("hiv virus", "hiv"), ("isbn number", "isbn"), ("upi id", "upi"),
    ("pdf format", "pdf"), ("ram memory", "ram"), ("led diode", "led"),
    ("gps system", "gps"), ("sms message", "sms"), ("mms message", "mms"),
    ("emi installment", "emi"), ("ac current", "ac"), ("dc current", "dc"),
    ("vpn network", "vpn"), ("lan network", "lan"), ("wan network", "wan"),
    ("wifi wireless", "wifi"), ("dvd disc", "dvd"), ("cd disc", "cd"),
    ("pc computer", "pc"), ("cpu processor", "cpu"), ("gui interface", "gui"),
    ("rar archive", "rar"),
]

# =============================================================================
# PREFERRED TERMS
# =============================================================================

PREFERRED_BY_CATEGORY: dict[str, list[str]] = {
    PreferredCategory.CARE_CONNECTION: [
        "thank you", "thanks", "appreciate", "grateful", "always with you",
        "we're here", "here for you", "by your side", "together", "with you",
        "support", "help", "assist", "care", "value", "respect", "understand",
        "listen", "hear", "feel", "empathize", "connect", "belong", "welcome",
        "warm", "friendly", "kind", "gentle", "patient", "thoughtful",
        "considerate", "attentive", "responsive", "available", "accessible",
        "reliable", "trustworthy", "dependable", "consistent", "committed",
        "dedicated", "devoted", "loyal", "faithful", "genuine", "authentic",
        "sincere", "honest", "transparent", "open", "clear", "straightforward",
        "simple", "easy", "effortless", "seamless", "smooth", "comfortable",
        "convenient", "hassle-free",
        "appreciate your patience", "happy to help", "glad to assist",
        "looking forward", "pleasure to serve", "delighted", "honored",
        "privilege", "cherish", "treasure", "celebrate", "embrace",
        "nurture", "foster", "encourage", "inspire", "motivate",
        "empower", "strengthen", "uplift",
    ],
    PreferredCategory.ACTION_PROGRESS: [
        "start", "begin", "launch", "go", "ready", "set", "let's",
        "keep going", "continue", "move forward", "progress", "advance",
        "grow", "improve", "enhance", "upgrade", "update", "refresh",
        "almost done", "nearly there", "getting close", "making progress",
        "on track", "moving ahead", "step by step", "one step closer",
        "next step", "next level", "achievement", "milestone", "success",
        "accomplish", "complete", "finish", "done", "achieved", "reached",
        "unlocked", "earned", "gained", "won", "celebrated", "rewarded",
        "quick", "fast", "instant", "immediate", "now", "today", "soon",
        "momentum", "breakthrough", "victory", "triumph", "conquer",
        "master", "excel", "thrive", "flourish", "prosper",
        "accelerate", "boost", "elevate", "rise",
        "soar", "climb", "ascend", "transform", "evolve",
    ],
    PreferredCategory.CLARITY_SAFETY: [
        "you're safe", "all okay", "everything's fine", "no worries",
        "safe to continue", "secure", "protected", "verified", "confirmed",
        "checked", "validated", "approved", "authorized", "allowed",
        "permitted", "enabled", "active", "working", "functioning",
        "operational", "running", "connected", "online",
        "set up", "configured", "successful",
        "understood", "got it", "noted", "recorded", "saved",
        "stored", "backed up", "restored", "recovered", "resolved",
        "fixed", "corrected", "updated", "improved", "enhanced",
        "optimized", "streamlined", "simplified", "organized",
        "assured", "guaranteed", "certified",
        "legitimate", "official", "trusted", "credible", "accurate",
        "precise", "exact", "correct", "right", "proper",
        "appropriate", "suitable", "fitting", "aligned",
    ],
    PreferredCategory.FIXING_RESOLUTION: [
        "checking this", "looking into it", "investigating", "reviewing",
        "analyzing", "examining", "assessing", "evaluating", "testing",
        "verifying", "confirming", "validating", "troubleshooting",
        "diagnosing", "identifying", "finding", "locating", "discovering",
        "all fixed", "sorted", "handled", "addressed",
        "taken care of", "dealt with", "managed", "completed",
        "finished", "concluded", "wrapped up", "closed", "settled",
        "working on it", "in progress", "being processed", "under review",
        "being handled", "being addressed", "being resolved", "being fixed",
        "solution found", "issue resolved", "problem solved", "error corrected",
        "bug fixed", "glitch removed", "back to normal",
    ],
    PreferredCategory.COMMUNITY_FIRST: [
        "growth with purpose", "made in india", "for india", "by indians",
        "indian", "desi", "swadeshi", "local", "homegrown", "indigenous",
        "bharatiya", "community", "united", "collective",
        "shared", "common", "public", "social", "cultural", "traditional",
        "heritage", "values", "family", "friends", "neighbors", "society",
        "nation", "country", "pride", "celebration", "festival", "occasion",
        "namaste", "dhanyavaad", "shukriya", "jai hind",
        "vande mataram", "incredible india", "digital india", "make in india",
        "startup india", "skill india", "clean india", "fit india",
        "ayushman bharat", "jan dhan", "aadhaar", "upi", "bhim",
    ],
    PreferredCategory.LEARNING_DISCOVERY: [
        "see what's new", "discover", "explore", "find", "learn",
        "trending now", "popular", "featured", "recommended", "suggested",
        "for you", "personalized", "customized", "tailored",
        "selected", "best", "top",
        "new", "latest", "fresh", "upgraded", "special", "limited",
        "try", "experience", "enjoy", "benefit", "gain", "get",
        "receive", "access", "unlock", "earn", "win", "save",
        "free", "bonus", "extra", "more", "additional", "plus",
        "tip", "trick",
    ],
}

# =============================================================================
# AUTO-FIX RULES: (original, replacement)
# =============================================================================

GENDER_NEUTRAL_FIXES = [
    ("chairman", "chairperson"), ("chairwoman", "chairperson"),
    ("mankind", "humanity"), ("manpower", "workforce"),
    ("man-made", "artificial"), ("manmade", "artificial"),
    ("businessman", "businessperson"), ("businesswoman", "businessperson"),
    ("policeman", "police officer"), ("policewoman", "police officer"),
    ("fireman", "firefighter"), ("firewoman", "firefighter"),
    ("stewardess", "flight attendant"), ("steward", "flight attendant"),
    ("mailman", "mail carrier"), ("postman", "postal worker"),
    ("salesman", "salesperson"), ("saleswoman", "salesperson"),
    ("spokesman", "spokesperson"), ("spokeswoman", "spokesperson"),
]

# "optimize" lives in BRITISH_SPELLING_FIXES only
SIMPLE_ALTERNATIVE_FIXES = [
    ("utilize", "use"), ("leverage", "use"), ("facilitate", "help"),
    ("implement", "do"), ("streamline", "simplify"),
    ("endeavor", "try"), ("elucidate", "explain"), ("expedite", "speed up"),
    ("commence", "start"), ("terminate", "end"), ("ascertain", "find out"),
    ("ameliorate", "improve"), ("cognizant", "aware"), ("disseminate", "share"),
    ("endeavour", "try"), ("envisage", "imagine"), ("epitomize", "represent"),
    ("exacerbate", "worsen"), ("extrapolate", "extend"), ("incentivize", "encourage"),
    ("methodology", "method"), ("multifaceted", "complex"), ("operationalize", "use"),
    ("paradigm", "model"), ("proliferate", "spread"), ("proactive", "active"),
    ("synergy", "teamwork"), ("synergize", "combine"), ("bandwidth", "capacity"),
]

BRITISH_SPELLING_FIXES = [
    ("color", "colour"), ("honor", "honour"), ("favor", "favour"),
    ("center", "centre"), ("theater", "theatre"), ("meter", "metre"),
    ("fiber", "fibre"), ("analyze", "analyse"), ("organize", "organise"),
    ("recognize", "recognise"), ("realize", "realise"), ("customize", "customise"),
    ("optimize", "optimise"), ("authorize", "authorise"), ("criticize", "criticise"),
    ("catalog", "catalogue"), ("dialog", "dialogue"), ("program", "programme"),
    ("behavior", "behaviour"), ("neighbor", "neighbour"),
]

FORMAT_CORRECTION_FIXES = [
    ("pin number", "pin"), ("atm machine", "atm"), ("lcd display", "lcd"),
    ("isbn number", "isbn"), ("pdf format", "pdf"), ("ram memory", "ram"),
    ("led diode", "led"), ("gps system", "gps"), ("sms message", "sms"),
    ("vpn network", "vpn"),
]

INCLUSIVE_LANGUAGE_FIXES = [
    ("disabled person", "person with disability"),
    ("handicapped", "person with disability"),
    ("the blind", "people who are blind"),
    ("the deaf", "people who are deaf"),
    ("mentally ill", "person with mental health condition"),
    ("normal people", "people without disabilities"),
    ("suffers from", "has"), ("afflicted with", "has"),
    ("wheelchair bound", "wheelchair user"),
    ("victim of", "person who experienced"),
]

# category -> (pairs, confidence)
AUTO_FIX_GROUPS: dict[str, tuple[list[tuple[str, str]], float]] = {
    AutoFixCategory.GENDER_NEUTRAL: (GENDER_NEUTRAL_FIXES, 0.9),
    AutoFixCategory.SIMPLE_ALTERNATIVE: (SIMPLE_ALTERNATIVE_FIXES, 0.9),
    AutoFixCategory.BRITISH_SPELLING: (BRITISH_SPELLING_FIXES, 0.85),
    AutoFixCategory.FORMAT_CORRECTION: (FORMAT_CORRECTION_FIXES, 0.9),
    AutoFixCategory.INCLUSIVE_LANGUAGE: (INCLUSIVE_LANGUAGE_FIXES, 0.8),
}


def build_avoid_terms() -> list[AvoidTerm]:
    terms: list[AvoidTerm] = []
    terms += [AvoidTerm(t, AvoidCategory.COMPLEX, suggestion=s) for t, s in COMPLEX_TERMS]
    terms += [AvoidTerm(t, AvoidCategory.ROBOTIC, suggestion=s) for t, s in ROBOTIC_TERMS]
    terms += [AvoidTerm(t, AvoidCategory.FEAR_BASED) for t in FEAR_BASED_TERMS]
    terms += [AvoidTerm(t, AvoidCategory.BUREAUCRATIC) for t in BUREAUCRATIC_TERMS]
    terms += [AvoidTerm(t, AvoidCategory.TECHNICAL) for t in TECHNICAL_TERMS]
    terms += [AvoidTerm(t, AvoidCategory.SHAME_INDUCING) for t in SHAME_INDUCING_TERMS]
    terms += [AvoidTerm(t, AvoidCategory.ELITIST) for t in ELITIST_TERMS]
    terms += [AvoidTerm(t, AvoidCategory.MARKETING_JARGON) for t in MARKETING_JARGON_TERMS]
    terms += [
        AvoidTerm(t, AvoidCategory.AMERICAN_SPELLING, suggestion=s)
        for t, s in AMERICAN_SPELLINGS
    ]
    terms += [
        AvoidTerm(t, AvoidCategory.INCORRECT_FORMAT, suggestion=s)
        for t, s in INCORRECT_FORMATS
    ]
    return terms


def build_preferred_terms() -> list[PreferredTerm]:
    return [
        PreferredTerm(term, category)
        for category, terms in PREFERRED_BY_CATEGORY.items()
        for term in terms
    ]


def build_auto_fix_rules() -> list[AutoFixRule]:
    return [
        AutoFixRule(original, replacement, category, confidence=confidence)
        for category, (pairs, confidence) in AUTO_FIX_GROUPS.items()
        for original, replacement in pairs
    ]


def build_default_tables() -> RuleTables:
    """Construct the bundled rule tables."""
    return RuleTables(
        avoid_terms=build_avoid_terms(),
        preferred_terms=build_preferred_terms(),
        auto_fix_rules=build_auto_fix_rules(),
    )
