# text_features.py
# Lexical, structural and social-engineering signals computed from raw text

import re
from typing import Iterable, List, Tuple

from keywords import (
    ACTION_RE,
    ATTACHMENT_RE,
    COMMON_MISSPELLINGS,
    CRYPTO_KEYWORDS,
    FEAR_WORDS,
    GENERIC_GREETING_RE,
    GRAMMAR_PATTERNS,
    KNOWN_BRANDS,
    NEGATIVE_WORDS,
    PERSONAL_GREETING_RE,
    PERSONAL_INFO_REQUESTS,
    POSITIVE_WORDS,
    PUNISHMENT_RE,
    REWARD_RE,
    SOCIAL_PROOF_KEYWORDS,
    SOPHISTICATION_INDICATORS,
    SUSPICIOUS_KEYWORDS,
    TIME_URGENCY_PATTERNS,
    URGENCY_KEYWORDS,
)

SENTIMENT_BOUND = 10
VOWELS = "aeiouy"


def _word_patterns(keywords: Iterable[str]) -> Tuple["re.Pattern[str]", ...]:
    return tuple(re.compile(r"\b" + re.escape(k) + r"\b", re.IGNORECASE) for k in keywords)


_URGENCY = _word_patterns(URGENCY_KEYWORDS)
_SUSPICIOUS = _word_patterns(SUSPICIOUS_KEYWORDS)
_PERSONAL_INFO = _word_patterns(PERSONAL_INFO_REQUESTS)
_CRYPTO = _word_patterns(CRYPTO_KEYWORDS)
_SOCIAL_PROOF = _word_patterns(SOCIAL_PROOF_KEYWORDS)
_MISSPELLINGS = _word_patterns(COMMON_MISSPELLINGS)


def count_matches(text: str, patterns) -> int:
    """Sum the matches of every pattern; overlapping keyword phrases each count."""
    return sum(len(p.findall(text)) for p in patterns)


def count_syllables(word: str) -> int:
    """Vowel-group estimate, minus a trailing silent 'e', at least one."""
    word = word.lower()
    if len(word) <= 3:
        return 1
    count = 0
    previous_was_vowel = False
    for ch in word:
        is_vowel = ch in VOWELS
        if is_vowel and not previous_was_vowel:
            count += 1
        previous_was_vowel = is_vowel
    if word.endswith("e"):
        count -= 1
    return max(1, count)


def sentiment_score(text: str) -> int:
    score = 0
    for token in text.lower().split():
        if token in POSITIVE_WORDS:
            score += 1
        if token in NEGATIVE_WORDS:
            score -= 1
        if token in FEAR_WORDS:
            score -= 2
    return max(-SENTIMENT_BOUND, min(SENTIMENT_BOUND, score))


def count_sentences(text: str) -> int:
    return sum(1 for s in re.split(r"[.!?]+", text) if s.strip())


def readability_score(text: str) -> float:
    """Simplified Flesch Reading Ease, clamped to 0..100.

    Text without a sentence or a word has no score and yields 0.0.
    """
    sentences = count_sentences(text)
    words = text.split()
    if not sentences or not words:
        return 0.0
    syllables = sum(count_syllables(w) for w in words)
    score = 206.835 - 1.015 * (len(words) / sentences) - 84.6 * (syllables / len(words))
    return round(max(0.0, min(100.0, score)), 2)


def detect_brands(text: str) -> Tuple[str, ...]:
    """Brand names found anywhere in text, in order of first appearance."""
    lowered = text.lower()
    positions: List[Tuple[int, str]] = []
    for brand in KNOWN_BRANDS:
        index = lowered.find(brand)
        if index >= 0:
            positions.append((index, brand))
    # stable sort keeps table order for brands starting at the same offset
    return tuple(brand for _, brand in sorted(positions, key=lambda p: p[0]))


def technical_sophistication(text: str) -> int:
    return sum(points for pattern, points in SOPHISTICATION_INDICATORS if pattern.search(text))


def extract_text_features(content: str) -> dict:
    """Return every non-URL feature for content as a flat dict."""
    text = content or ""
    urgency_words = count_matches(text, _URGENCY)

    return {
        "urgency_words": urgency_words,
        "suspicious_words": count_matches(text, _SUSPICIOUS),
        "grammar_errors": count_matches(text, GRAMMAR_PATTERNS),
        "spelling_errors": count_matches(text, _MISSPELLINGS),
        "has_personal_greeting": bool(PERSONAL_GREETING_RE.search(text)),
        "has_generic_greeting": bool(GENERIC_GREETING_RE.search(text)),
        "requests_personal_info": count_matches(text, _PERSONAL_INFO) > 0,
        "has_attachments": bool(ATTACHMENT_RE.search(text)),
        "creates_urgency": urgency_words > 0,
        "offers_reward": bool(REWARD_RE.search(text)),
        "threatens_punishment": bool(PUNISHMENT_RE.search(text)),
        "requests_action": bool(ACTION_RE.search(text)),
        "sentiment_score": sentiment_score(text),
        "readability_score": readability_score(text),
        "brand_impersonation": detect_brands(text),
        "crypto_scam_indicators": count_matches(text, _CRYPTO),
        "social_proof_manipulation": count_matches(text, _SOCIAL_PROOF),
        "time_based_urgency": count_matches(text, TIME_URGENCY_PATTERNS),
        "technical_sophistication": technical_sophistication(text),
        "word_count": len(text.split()),
        "sentence_count": count_sentences(text),
    }
