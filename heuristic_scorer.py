# heuristic_scorer.py
# Rule-based scorer converting a FeatureRecord into a risk verdict

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from models import ContentType, FeatureRecord, RiskFactor, RiskLevel, Verdict

logger = logging.getLogger(__name__)

BASE_CONFIDENCE = 65
CONFIDENCE_PER_FINDING = 4
MAX_CONFIDENCE = 98
SOPHISTICATION_THRESHOLD = 5


@dataclass(frozen=True)
class Rule:
    """
    One scoring rule.

    ``magnitude`` returns 0 when the rule does not fire, 1 for flat rules and
    the signal count for per-occurrence rules; points are ``weight * magnitude``.
    ``explanation`` is formatted with the feature fields plus ``brands``.
    """

    name: str
    weight: int
    magnitude: Callable[[FeatureRecord], int]
    explanation: str
    attack_vector: Optional[str] = None
    similar_attacks: Tuple[str, ...] = ()
    prevention_tips: Tuple[str, ...] = ()
    content_type: Optional[ContentType] = None

    def evaluate(self, features: FeatureRecord, content_type: ContentType) -> int:
        if self.content_type is not None and self.content_type != content_type:
            return 0
        return max(int(self.magnitude(features)), 0)


RULES: Tuple[Rule, ...] = (
    # url
    Rule("IP address instead of domain", 25, lambda f: f.has_ip_address,
         "URL contains IP address instead of domain name"),
    Rule("URL shortening service", 20, lambda f: f.has_shortener,
         "Uses URL shortening service"),
    Rule("Suspicious domain extension", 30, lambda f: f.has_suspicious_tld,
         "Uses suspicious top-level domain"),
    Rule("Insecure HTTP protocol", 15, lambda f: not f.has_https and f.link_count > 0,
         "Uses insecure HTTP protocol"),
    Rule("Unusually long URL", 10, lambda f: f.url_length > 100,
         "Unusually long URL detected"),
    Rule("Excessive subdomains", 15, lambda f: f.subdomain_count > 3,
         "Excessive subdomains in URL"),
    # lexical
    Rule("Urgency keywords", 8, lambda f: f.urgency_words,
         "{urgency_words} urgency-creating words detected",
         attack_vector="Urgency manipulation"),
    Rule("Suspicious keywords", 6, lambda f: f.suspicious_words,
         "{suspicious_words} suspicious keywords found"),
    Rule("Grammar errors", 5, lambda f: f.grammar_errors,
         "{grammar_errors} grammar errors detected"),
    Rule("Spelling errors", 7, lambda f: f.spelling_errors,
         "{spelling_errors} spelling errors found"),
    # social engineering
    Rule("Personal information request", 35, lambda f: f.requests_personal_info,
         "Requests personal or sensitive information",
         attack_vector="Information harvesting",
         prevention_tips=("Never provide personal info via email/SMS",)),
    Rule("Generic greeting", 10, lambda f: f.has_generic_greeting and not f.has_personal_greeting,
         "Uses generic greeting instead of personal name",
         prevention_tips=("Legitimate companies use your real name",)),
    Rule("Reward offer", 20, lambda f: f.offers_reward,
         "Offers unrealistic rewards or prizes",
         attack_vector="Reward-based deception",
         similar_attacks=("Lottery scams", "Prize notifications")),
    Rule("Threat of punishment", 25, lambda f: f.threatens_punishment,
         "Threatens negative consequences",
         attack_vector="Fear-based manipulation",
         prevention_tips=("Legitimate companies don't threaten via email",)),
    # extended signals
    Rule("Brand impersonation", 20, lambda f: len(f.brand_impersonation),
         "Impersonating brands: {brands}",
         attack_vector="Brand impersonation",
         similar_attacks=("Fake bank notifications", "Fake service alerts")),
    Rule("Cryptocurrency scam indicators", 15, lambda f: f.crypto_scam_indicators,
         "{crypto_scam_indicators} cryptocurrency scam indicators",
         attack_vector="Cryptocurrency fraud",
         similar_attacks=("Fake crypto giveaways", "Investment scams")),
    Rule("Social proof manipulation", 10, lambda f: f.social_proof_manipulation,
         "{social_proof_manipulation} social proof manipulation tactics",
         attack_vector="Social proof exploitation"),
    Rule("Time-based urgency", 12, lambda f: f.time_based_urgency,
         "{time_based_urgency} time-based urgency tactics",
         attack_vector="Time pressure manipulation"),
    Rule("Technical obfuscation", 25, lambda f: f.technical_sophistication > SOPHISTICATION_THRESHOLD,
         "Advanced technical obfuscation detected",
         attack_vector="Technical sophistication",
         similar_attacks=("Advanced persistent threats", "Sophisticated phishing")),
    Rule("Negative sentiment", 15, lambda f: f.sentiment_score < -3,
         "Negative emotional manipulation detected",
         attack_vector="Emotional manipulation"),
    # only text with a sentence and a word has a readability score
    Rule("Poor readability", 10,
         lambda f: f.sentence_count > 0 and f.word_count > 0 and f.readability_score < 30,
         "Unusually complex or confusing language"),
    # type-specific
    Rule("Email attachment", 15, lambda f: f.has_attachments,
         "Contains potentially malicious attachments",
         prevention_tips=("Don't open unexpected attachments",),
         content_type=ContentType.EMAIL),
    Rule("Link in SMS", 20, lambda f: f.link_count > 0,
         "SMS contains suspicious links",
         similar_attacks=("Smishing attacks", "SMS phishing"),
         content_type=ContentType.SMS),
    Rule("Call to action", 15, lambda f: f.requests_action,
         "Requests immediate action or response",
         content_type=ContentType.SOCIAL),
)

TYPE_TIPS = {
    ContentType.EMAIL: (
        "Check sender email address carefully",
        "Verify through official company website",
    ),
    ContentType.SMS: (
        "Don't click links in unexpected SMS",
        "Verify by calling the company directly",
    ),
    ContentType.SOCIAL: (
        "Check account verification status",
        "Look for suspicious follower patterns",
    ),
    ContentType.URL: (
        "Check URL spelling carefully",
        "Look for HTTPS and valid certificates",
        "Use official bookmarks instead of links",
    ),
}

GENERAL_TIPS = (
    "When in doubt, verify through official channels",
    "Use two-factor authentication when available",
    "Keep software and browsers updated",
)

DEFAULT_CATEGORY = "General Phishing"

# highest priority first; the first matching entry names the threat
THREAT_CATEGORIES: Tuple[Tuple[str, Callable[[FeatureRecord], bool]], ...] = (
    ("Advanced Persistent Threat", lambda f: f.technical_sophistication > SOPHISTICATION_THRESHOLD),
    ("Credential Harvesting", lambda f: f.requests_personal_info),
    ("Cryptocurrency Scam", lambda f: f.crypto_scam_indicators > 0),
    ("Brand Impersonation", lambda f: len(f.brand_impersonation) > 0),
)


def _add_reason(reasons: List[str], reason: str):
    if reason not in reasons:
        reasons.append(reason)


def _add_reasons(reasons: List[str], new: Iterable[str]):
    for reason in new:
        _add_reason(reasons, reason)


def threat_category(features: FeatureRecord) -> str:
    for label, matches in THREAT_CATEGORIES:
        if matches(features):
            return label
    return DEFAULT_CATEGORY


def confidence_for(findings: int) -> int:
    return min(MAX_CONFIDENCE, BASE_CONFIDENCE + CONFIDENCE_PER_FINDING * findings)


def score_features(features: FeatureRecord, content_type: ContentType) -> Verdict:
    """Apply every rule in order and build the verdict."""
    content_type = ContentType.parse(content_type)
    score = 0
    explanations: List[str] = []
    attack_vectors: List[str] = []
    similar_attacks: List[str] = []
    tips: List[str] = []
    risk_factors: List[RiskFactor] = []

    fields = features.to_dict()
    fields["brands"] = ", ".join(features.brand_impersonation)

    for rule in RULES:
        if rule.content_type is not None:
            # type tips come before the tips of type-specific rules
            _add_reasons(tips, TYPE_TIPS[content_type])
        magnitude = rule.evaluate(features, content_type)
        risk_factors.append(RiskFactor(name=rule.name, weight=rule.weight, detected=magnitude > 0))
        if not magnitude:
            continue
        score += rule.weight * magnitude
        explanations.append(rule.explanation.format(**fields))
        if rule.attack_vector:
            _add_reason(attack_vectors, rule.attack_vector)
        _add_reasons(similar_attacks, rule.similar_attacks)
        _add_reasons(tips, rule.prevention_tips)

    _add_reasons(tips, TYPE_TIPS[content_type])
    _add_reasons(tips, GENERAL_TIPS)

    phishing_score = max(0, min(score, 100))
    verdict = Verdict(
        phishing_score=phishing_score,
        risk_level=RiskLevel.from_score(phishing_score),
        confidence=confidence_for(len(explanations)),
        threat_category=threat_category(features),
        explanations=explanations,
        attack_vectors=attack_vectors,
        similar_attacks=similar_attacks,
        prevention_tips=tips,
        risk_factors=risk_factors,
        features=features,
    )
    logger.debug("scored %s content: raw=%d final=%d level=%s", content_type.value, score, phishing_score, verdict.risk_level.value)
    return verdict
