from __future__ import annotations

from bs4 import BeautifulSoup

from keywords import MARKDOWN_IMAGE_RE


def count_images(content: str) -> int:
    """Count <img> elements and markdown images embedded in the submitted text."""
    count = len(MARKDOWN_IMAGE_RE.findall(content or ""))

    # plain text never needs a parse
    if not content or "<" not in content:
        return count

    soup = BeautifulSoup(content, "html.parser")
    return count + len(soup.find_all("img"))
