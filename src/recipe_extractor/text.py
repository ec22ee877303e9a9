"""Text cleanup shared by the structured and heuristic extractors."""

import re
from typing import Iterable, List

# Entities decoded by clean_text, in this order; any other entity is left as is
HTML_ENTITIES = (
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)

TAG_RE = re.compile(r"<[^>]+>")


def clean_text(text: str) -> str:
    """Trim, decode basic HTML entities and strip any leftover tags."""
    cleaned = text.strip()
    for entity, char in HTML_ENTITIES:
        cleaned = cleaned.replace(entity, char)
    cleaned = TAG_RE.sub("", cleaned)
    return cleaned.strip()


def clean_lines(fragments: Iterable[str]) -> List[str]:
    """Clean every fragment and drop the ones left empty."""
    cleaned = (clean_text(fragment) for fragment in fragments)
    return [text for text in cleaned if text]
