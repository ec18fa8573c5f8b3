# keywords.py
# Keyword and pattern tables used by the feature extractors.
# Every table is plain data so it can be audited and extended on its own.

import re

URGENCY_KEYWORDS = (
    "urgent", "immediate", "asap", "expires", "deadline", "limited time",
    "act now", "hurry", "last chance", "final notice", "time sensitive",
    "expires today", "expires soon", "don't delay", "respond immediately",
    "within 24 hours", "before midnight", "today only", "while supplies last",
)

SUSPICIOUS_KEYWORDS = (
    "verify", "confirm", "update", "suspended", "locked", "security alert",
    "click here", "download", "install", "winner", "congratulations",
    "free", "prize", "lottery", "inheritance", "million", "tax refund",
    "claim now", "act fast", "limited offer", "exclusive deal", "selected",
    "chosen", "lucky", "special offer", "once in a lifetime",
)

PERSONAL_INFO_REQUESTS = (
    "password", "ssn", "social security", "credit card", "bank account",
    "pin", "login", "username", "personal information", "date of birth",
    "mother's maiden name", "security question", "account number",
    "routing number", "cvv", "security code", "verification code",
)

CRYPTO_KEYWORDS = (
    "bitcoin", "ethereum", "crypto", "blockchain", "mining", "wallet",
    "investment opportunity", "guaranteed returns", "double your money",
    "crypto giveaway", "elon musk", "tesla giveaway", "btc", "eth",
)

SOCIAL_PROOF_KEYWORDS = (
    "thousands of people", "everyone is doing", "don't miss out",
    "join millions", "trending now", "viral", "going viral",
    "celebrities use", "recommended by experts", "as seen on tv",
)

COMMON_MISSPELLINGS = (
    "recieve", "seperate", "occured", "neccessary", "accomodate",
    "definately", "occassion", "embarass", "maintainance", "existance",
    "beleive", "acheive", "begining", "calender", "cemetary",
    "buisness", "freind", "wierd", "thier", "untill",
)

URL_SHORTENERS = (
    "bit.ly", "tinyurl", "t.co", "goo.gl", "ow.ly", "short.link",
    "tiny.cc", "is.gd", "buff.ly", "rebrand.ly", "cutt.ly", "lnkd.in",
)

SUSPICIOUS_TLDS = (
    ".tk", ".ml", ".ga", ".cf", ".pw", ".top", ".click", ".download",
    ".zip", ".review", ".country", ".kim", ".cricket", ".science",
    ".work", ".party", ".trade", ".date", ".racing", ".bid",
)

KNOWN_BRANDS = (
    "amazon", "paypal", "microsoft", "apple", "google", "facebook",
    "netflix", "spotify", "instagram", "twitter", "linkedin", "ebay",
    "wells fargo", "chase", "bank of america", "citibank", "visa",
    "mastercard", "american express", "irs", "fedex", "ups", "dhl",
)

# sentiment lexicon, exact token matches only
POSITIVE_WORDS = frozenset({
    "amazing", "incredible", "fantastic", "wonderful", "excellent",
    "outstanding", "perfect", "brilliant", "awesome", "great",
})

NEGATIVE_WORDS = frozenset({
    "terrible", "awful", "horrible", "disaster", "failure", "problem",
    "issue", "error", "mistake", "wrong", "bad", "worst",
})

FEAR_WORDS = frozenset({
    "danger", "risk", "threat", "warning", "alert", "emergency",
    "critical", "urgent", "serious", "important", "notice",
})

GRAMMAR_PATTERNS = tuple(re.compile(p, re.IGNORECASE) for p in (
    r"\bi\s+am\s+are\b",
    r"\byou\s+is\b",
    r"\bhe\s+are\b",
    r"\bthey\s+is\b",
    r"\ba\s+[aeiou]",
    r"\ban\s+[^aeiou]",
    r"\btheir\s+are\b",
    r"\bthere\s+is\s+\w+\s+are\b",
))

TIME_URGENCY_PATTERNS = tuple(re.compile(p, re.IGNORECASE) for p in (
    r"within \d+ (?:hours?|minutes?|days?)",
    r"expires? (?:today|tonight|soon|in \d+)",
    r"\d+ (?:hours?|minutes?) (?:left|remaining)",
    r"(?:today only|limited time|while supplies last)",
    r"before (?:midnight|\d+:\d+|tomorrow)",
))

# (pattern, points) pairs; each indicator counts once however often it appears
SOPHISTICATION_INDICATORS = tuple((re.compile(p, re.IGNORECASE), points) for p, points in (
    (r"javascript:", 2),
    (r"data:text/html", 2),
    (r"base64", 2),
    (r"eval\(", 2),
    (r"document\.write", 2),
    (r"window\.location", 2),
    (r"iframe", 2),
    (r"onclick=", 2),
    (r"onload=", 2),
    (r"[a-zA-Z0-9+/]{20,}={0,2}", 3),
    (r"\\u[0-9a-fA-F]{4}", 2),
    (r"&#\d+;", 1),
))

GENERIC_GREETING_RE = re.compile(r"dear (?:customer|user|sir|madam|valued)", re.IGNORECASE)
PERSONAL_GREETING_RE = re.compile(r"dear [a-z]+ [a-z]+", re.IGNORECASE)
ATTACHMENT_RE = re.compile(r"attachment|attached|download.*file", re.IGNORECASE)
REWARD_RE = re.compile(r"free|prize|winner|reward|bonus|gift", re.IGNORECASE)
PUNISHMENT_RE = re.compile(r"suspend|close|terminate|block|penalty", re.IGNORECASE)
ACTION_RE = re.compile(r"click|download|call|reply|respond|verify|confirm", re.IGNORECASE)
MARKDOWN_IMAGE_RE = re.compile(r"!\[[^\]]*\]")
