"""Turn raw submitted content into a FeatureRecord."""

from __future__ import annotations

import logging

from html_parser import count_images
from models import ContentType, FeatureRecord
from text_features import extract_text_features
from url_features import extract_url_features

logger = logging.getLogger(__name__)


def extract_features(content: str, content_type: ContentType) -> FeatureRecord:
    """
    Extract every signal from one snapshot of content.

    The content type is accepted for symmetry with the scorer; the feature
    schema is the same for every type. Empty or malformed input yields the
    zero/false defaults rather than an error.
    """
    content_type = ContentType.parse(content_type)
    text = content or ""

    features = {}
    features.update(extract_url_features(text))
    features.update(extract_text_features(text))
    features["image_count"] = count_images(text)

    record = FeatureRecord(**features)
    logger.debug("extracted %s features: links=%d words=%d", content_type.value, record.link_count, record.word_count)
    return record
