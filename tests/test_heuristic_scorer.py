import pytest

from heuristic_scorer import GENERAL_TIPS, RULES, TYPE_TIPS, score_features
from models import ContentType, FeatureRecord, RiskLevel


def test_all_default_record_is_low():
    verdict = score_features(FeatureRecord(), ContentType.EMAIL)
    assert verdict.phishing_score == 0
    assert verdict.risk_level is RiskLevel.LOW
    assert verdict.confidence == 65
    assert verdict.explanations == []
    assert verdict.attack_vectors == []
    assert verdict.threat_category == "General Phishing"
    assert verdict.prevention_tips == list(TYPE_TIPS[ContentType.EMAIL]) + list(GENERAL_TIPS)


def test_one_risk_factor_per_rule_fired_or_not():
    quiet = score_features(FeatureRecord(), ContentType.SMS)
    noisy = score_features(FeatureRecord(has_ip_address=True, urgency_words=2), ContentType.SMS)
    assert len(quiet.risk_factors) == len(noisy.risk_factors) == len(RULES) == 24
    assert not any(rf.detected for rf in quiet.risk_factors)
    assert [rf.name for rf in noisy.risk_factors if rf.detected] == ["IP address instead of domain", "Urgency keywords"]


@pytest.mark.parametrize(
    "features, content_type, expected",
    [
        (FeatureRecord(has_ip_address=True), ContentType.URL, 25),
        (FeatureRecord(has_shortener=True), ContentType.URL, 20),
        (FeatureRecord(has_suspicious_tld=True), ContentType.URL, 30),
        (FeatureRecord(link_count=1), ContentType.URL, 15),
        (FeatureRecord(url_length=101, has_https=True, link_count=1), ContentType.URL, 10),
        (FeatureRecord(subdomain_count=4), ContentType.URL, 15),
        (FeatureRecord(urgency_words=3), ContentType.EMAIL, 24),
        (FeatureRecord(suspicious_words=2), ContentType.EMAIL, 12),
        (FeatureRecord(grammar_errors=2), ContentType.EMAIL, 10),
        (FeatureRecord(spelling_errors=1), ContentType.EMAIL, 7),
        (FeatureRecord(requests_personal_info=True), ContentType.EMAIL, 35),
        (FeatureRecord(has_generic_greeting=True), ContentType.EMAIL, 10),
        (FeatureRecord(has_generic_greeting=True, has_personal_greeting=True), ContentType.EMAIL, 0),
        (FeatureRecord(offers_reward=True), ContentType.EMAIL, 20),
        (FeatureRecord(threatens_punishment=True), ContentType.EMAIL, 25),
        (FeatureRecord(brand_impersonation=("amazon", "paypal")), ContentType.EMAIL, 40),
        (FeatureRecord(crypto_scam_indicators=2), ContentType.SOCIAL, 30),
        (FeatureRecord(social_proof_manipulation=1), ContentType.SOCIAL, 10),
        (FeatureRecord(time_based_urgency=2), ContentType.SMS, 24),
        (FeatureRecord(technical_sophistication=5), ContentType.EMAIL, 0),
        (FeatureRecord(technical_sophistication=6), ContentType.EMAIL, 25),
        (FeatureRecord(sentiment_score=-3), ContentType.EMAIL, 0),
        (FeatureRecord(sentiment_score=-4), ContentType.EMAIL, 15),
        (FeatureRecord(readability_score=10.0, word_count=5, sentence_count=1), ContentType.EMAIL, 10),
        (FeatureRecord(readability_score=0.0, word_count=0, sentence_count=0), ContentType.EMAIL, 0),
        (FeatureRecord(readability_score=0.0, word_count=1, sentence_count=0), ContentType.EMAIL, 0),
    ],
)
def test_rule_weights(features, content_type, expected):
    assert score_features(features, content_type).phishing_score == expected


def test_type_specific_rules_only_apply_to_their_type():
    attachment = FeatureRecord(has_attachments=True)
    assert score_features(attachment, ContentType.EMAIL).phishing_score == 15
    assert score_features(attachment, ContentType.SMS).phishing_score == 0

    sms_link = FeatureRecord(link_count=1, has_https=True)
    assert score_features(sms_link, ContentType.SMS).phishing_score == 20
    assert score_features(sms_link, ContentType.EMAIL).phishing_score == 0

    action = FeatureRecord(requests_action=True)
    assert score_features(action, ContentType.SOCIAL).phishing_score == 15
    assert score_features(action, ContentType.URL).phishing_score == 0


def test_explanations_follow_rule_order():
    features = FeatureRecord(urgency_words=2, brand_impersonation=("paypal",), has_ip_address=True)
    verdict = score_features(features, ContentType.EMAIL)
    assert verdict.explanations == [
        "URL contains IP address instead of domain name",
        "2 urgency-creating words detected",
        "Impersonating brands: paypal",
    ]
    assert verdict.attack_vectors == ["Urgency manipulation", "Brand impersonation"]
    assert verdict.similar_attacks == ["Fake bank notifications", "Fake service alerts"]
    assert verdict.confidence == 65 + 3 * 4


def test_score_clamped_and_confidence_capped():
    features = FeatureRecord(
        has_ip_address=True,
        has_suspicious_tld=True,
        urgency_words=5,
        suspicious_words=5,
        requests_personal_info=True,
        offers_reward=True,
        threatens_punishment=True,
        time_based_urgency=2,
        sentiment_score=-8,
        crypto_scam_indicators=1,
    )
    verdict = score_features(features, ContentType.EMAIL)
    assert verdict.phishing_score == 100
    assert verdict.risk_level is RiskLevel.CRITICAL
    assert verdict.confidence == 98


def test_prevention_tips_deduplicated_and_ordered():
    features = FeatureRecord(requests_personal_info=True, has_attachments=True)
    tips = score_features(features, ContentType.EMAIL).prevention_tips
    assert tips == [
        "Never provide personal info via email/SMS",
        "Check sender email address carefully",
        "Verify through official company website",
        "Don't open unexpected attachments",
        *GENERAL_TIPS,
    ]
    assert len(tips) == len(set(tips))


@pytest.mark.parametrize(
    "features, expected",
    [
        (FeatureRecord(), "General Phishing"),
        (FeatureRecord(brand_impersonation=("visa",)), "Brand Impersonation"),
        (FeatureRecord(brand_impersonation=("visa",), crypto_scam_indicators=1), "Cryptocurrency Scam"),
        (FeatureRecord(crypto_scam_indicators=1, requests_personal_info=True), "Credential Harvesting"),
        (FeatureRecord(requests_personal_info=True, technical_sophistication=7), "Advanced Persistent Threat"),
        (FeatureRecord(requests_personal_info=True, technical_sophistication=5), "Credential Harvesting"),
    ],
)
def test_threat_category_priority(features, expected):
    assert score_features(features, ContentType.EMAIL).threat_category == expected


@pytest.mark.parametrize(
    "score, level",
    [(0, "low"), (24, "low"), (25, "medium"), (49, "medium"), (50, "high"), (79, "high"), (80, "critical"), (100, "critical")],
)
def test_risk_level_bands(score, level):
    assert RiskLevel.from_score(score).value == level


def test_string_content_type_accepted():
    assert score_features(FeatureRecord(), "SMS").prevention_tips[0] == "Don't click links in unexpected SMS"
    with pytest.raises(ValueError):
        score_features(FeatureRecord(), "fax")
