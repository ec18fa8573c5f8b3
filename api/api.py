"""Programmatic API entrypoint for the phishing content detector."""

from __future__ import annotations

from typing import Dict

from feature_extractor import extract_features
from heuristic_scorer import score_features
from models import ContentType, FeatureRecord, Verdict

__all__ = ["analyze", "extract_features", "sophistication_level", "summarize"]


def analyze(content: str, content_type: ContentType) -> Verdict:
    """Run feature extraction and scoring for one piece of content."""
    content_type = ContentType.parse(content_type)
    features = extract_features(content, content_type)
    return score_features(features, content_type)


def sophistication_level(features: FeatureRecord) -> str:
    if features.technical_sophistication > 5:
        return "Advanced"
    if features.technical_sophistication > 2:
        return "Moderate"
    return "Basic"


def summarize(verdict: Verdict) -> Dict:
    """Flatten a verdict into the fields a results panel displays."""
    features = verdict.features
    return {
        "risk_level": verdict.risk_level.value,
        "confidence": verdict.confidence,
        "threats": list(verdict.explanations),
        "recommendations": list(verdict.prevention_tips),
        "similar_attacks": list(verdict.similar_attacks),
        "details": {
            "suspicious_links": features.link_count,
            "grammar_issues": features.grammar_errors + features.spelling_errors,
            "urgency_keywords": features.urgency_words,
            "score": verdict.phishing_score,
            "features_detected": len(verdict.explanations),
            "threat_category": verdict.threat_category,
            "attack_vectors": list(verdict.attack_vectors),
            "brand_impersonation": list(features.brand_impersonation),
            "sentiment_score": features.sentiment_score,
            "sophistication_level": sophistication_level(features),
        },
    }
