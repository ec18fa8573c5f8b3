# url_features.py
# URL feature extraction from free text (first link analysed, all links counted)

import re
from typing import List
from urllib.parse import urlparse

from keywords import SUSPICIOUS_TLDS, URL_SHORTENERS

URL_RE = re.compile(r"https?://\S+", re.IGNORECASE)
_AUTHORITY_RE = re.compile(r"https?://([^/?#\s]*)", re.IGNORECASE)

# shortener hosts must stand on their own inside the link (t.co, not microsof[t.co]m)
_SHORTENER_RES = tuple(
    re.compile(r"(?<![a-z0-9-])" + re.escape(s) + r"(?![a-z0-9-])", re.IGNORECASE)
    for s in URL_SHORTENERS
)


def _contains_ipv4(host: str) -> bool:
    """Return True if host looks like an IPv4 address."""
    return bool(re.fullmatch(r"\d{1,3}(\.\d{1,3}){3}", host))


def _split_labels(host: str) -> List[str]:
    return [label for label in host.split(".") if label]


def find_urls(content: str) -> List[str]:
    return URL_RE.findall(content or "")


def parse_url(url: str) -> dict:
    """Split a link into authority and host; never raises on malformed links."""
    try:
        parsed = urlparse(url)
        authority = parsed.netloc
        host = parsed.hostname or ""
    except ValueError:
        # e.g. an unbalanced IPv6 bracket; fall back to a plain split
        match = _AUTHORITY_RE.match(url)
        authority = match.group(1) if match else ""
        host = authority.rsplit("@", 1)[-1].split(":", 1)[0].lower()
    return {
        "url": url,
        "authority": authority,
        "host": host.rstrip(".,;:!?)'\""),
        "scheme": url.split("://", 1)[0].lower() if "://" in url else "",
    }


def extract_url_features(content: str) -> dict:
    """Return URL-derived features for the first link found in content."""
    urls = find_urls(content)
    features = {
        "url_length": 0,
        "domain_length": 0,
        "subdomain_count": 0,
        "has_ip_address": False,
        "has_shortener": False,
        "has_suspicious_tld": False,
        "has_https": False,
        "link_count": len(urls),
    }
    if not urls:
        return features

    p = parse_url(urls[0])
    host = p["host"]
    labels = _split_labels(host)

    features.update(
        {
            "url_length": len(p["url"]),
            "domain_length": len(p["authority"]),
            # single-label hosts such as "localhost" count as zero, not negative
            "subdomain_count": max(len(labels) - 2, 0),
            "has_ip_address": _contains_ipv4(host),
            "has_shortener": any(r.search(p["url"]) for r in _SHORTENER_RES),
            "has_suspicious_tld": any(host.endswith(tld) for tld in SUSPICIOUS_TLDS),
            "has_https": p["scheme"] == "https",
        }
    )
    return features
