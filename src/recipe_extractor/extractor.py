"""Extraction pipeline: structured data first, page markup as a fallback."""

import logging
from typing import Callable, Optional, Sequence, Tuple
from urllib.parse import urlparse

from .exceptions import InvalidInputError, NoRecipeFoundError, NoStructuredDataError
from .heuristic import extract_heuristic
from .jsonld import extract_structured
from .models import RecipeDraft

logger = logging.getLogger(__name__)

Strategy = Callable[[str, str], Optional[RecipeDraft]]


def validate_source_url(source_url: str) -> None:
    """
    Check that the source URL is well-formed.

    Raises:
        InvalidInputError: If the URL lacks a scheme or host, or contains whitespace
    """
    if not isinstance(source_url, str) or not source_url or any(c.isspace() for c in source_url):
        raise InvalidInputError(f"Invalid URL: {source_url!r}")
    parsed = urlparse(source_url)
    if not parsed.scheme or not parsed.netloc:
        raise InvalidInputError(f"Invalid URL: {source_url!r}")


def from_structured_data(html: str, source_url: str) -> Optional[RecipeDraft]:
    try:
        return extract_structured(html, source_url)
    except NoStructuredDataError as e:
        logger.debug(f"{e}, falling back to markup")
        return None


def from_markup(html: str, source_url: str) -> Optional[RecipeDraft]:
    return extract_heuristic(html, source_url)


STRATEGIES: Tuple[Tuple[str, Strategy], ...] = (
    ("structured data", from_structured_data),
    ("markup", from_markup),
)


def extract(
    raw_text: str,
    source_url: str,
    strategies: Sequence[Tuple[str, Strategy]] = STRATEGIES,
) -> RecipeDraft:
    """
    Extract a recipe draft from the raw markup of a page.

    Args:
        raw_text: The page content, already decoded to text
        source_url: URL the content was retrieved from
        strategies: Ordered (name, strategy) pairs; the first draft returned wins

    Returns:
        The extracted RecipeDraft

    Raises:
        InvalidInputError: If source_url is not well-formed
        NoRecipeFoundError: If no strategy produced a draft
    """
    validate_source_url(source_url)

    for name, strategy in strategies:
        draft = strategy(raw_text, source_url)
        if draft is not None:
            logger.info(f"Extracted '{draft.title}' from {name} of {source_url}")
            return draft

    logger.info(f"No recipe found at {source_url}")
    raise NoRecipeFoundError()
