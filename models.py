"""Value types shared by the feature extractor and the risk scorer."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Dict, List, Tuple


class ContentType(str, Enum):
    EMAIL = "email"
    URL = "url"
    SMS = "sms"
    SOCIAL = "social"

    @classmethod
    def parse(cls, value) -> "ContentType":
        """Accept an enum member or its (case-insensitive) string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown content type {value!r} (expected one of: {choices})") from None


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @classmethod
    def from_score(cls, score: int) -> "RiskLevel":
        if score < 25:
            return cls.LOW
        if score < 50:
            return cls.MEDIUM
        if score < 80:
            return cls.HIGH
        return cls.CRITICAL


@dataclass(frozen=True)
class FeatureRecord:
    # url-derived
    url_length: int = 0
    domain_length: int = 0
    subdomain_count: int = 0
    has_ip_address: bool = False
    has_shortener: bool = False
    has_suspicious_tld: bool = False
    has_https: bool = False
    # lexical counts
    urgency_words: int = 0
    suspicious_words: int = 0
    grammar_errors: int = 0
    spelling_errors: int = 0
    link_count: int = 0
    image_count: int = 0
    # structural
    has_personal_greeting: bool = False
    has_generic_greeting: bool = False
    requests_personal_info: bool = False
    has_attachments: bool = False
    # social engineering
    creates_urgency: bool = False
    offers_reward: bool = False
    threatens_punishment: bool = False
    requests_action: bool = False
    # extended signals
    sentiment_score: int = 0
    readability_score: float = 0.0
    brand_impersonation: Tuple[str, ...] = ()
    crypto_scam_indicators: int = 0
    social_proof_manipulation: int = 0
    time_based_urgency: int = 0
    technical_sophistication: int = 0
    word_count: int = 0
    sentence_count: int = 0

    def to_dict(self) -> Dict:
        data = asdict(self)
        data["brand_impersonation"] = list(self.brand_impersonation)
        return data


@dataclass(frozen=True)
class RiskFactor:
    name: str
    weight: int
    detected: bool


@dataclass
class Verdict:
    phishing_score: int
    risk_level: RiskLevel
    confidence: int
    threat_category: str
    explanations: List[str] = field(default_factory=list)
    attack_vectors: List[str] = field(default_factory=list)
    similar_attacks: List[str] = field(default_factory=list)
    prevention_tips: List[str] = field(default_factory=list)
    risk_factors: List[RiskFactor] = field(default_factory=list)
    features: FeatureRecord = field(default_factory=FeatureRecord)

    def to_dict(self) -> Dict:
        """Plain structure suitable for json.dumps."""
        return {
            "phishing_score": self.phishing_score,
            "risk_level": self.risk_level.value,
            "confidence": self.confidence,
            "threat_category": self.threat_category,
            "explanations": list(self.explanations),
            "attack_vectors": list(self.attack_vectors),
            "similar_attacks": list(self.similar_attacks),
            "prevention_tips": list(self.prevention_tips),
            "risk_factors": [asdict(rf) for rf in self.risk_factors],
            "features": self.features.to_dict(),
        }
