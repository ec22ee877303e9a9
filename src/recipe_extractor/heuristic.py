"""Fallback extraction from page markup when no structured data is usable."""

import logging
from itertools import chain
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from .constants import DEFAULT_TITLE
from .models import RecipeDraft
from .text import clean_lines, clean_text

logger = logging.getLogger(__name__)


def _class_string(tag: Tag) -> str:
    classes = tag.get("class") or []
    if isinstance(classes, str):
        return classes.lower()
    return " ".join(classes).lower()


def _has_class_containing(tag: Tag, fragment: str) -> bool:
    return fragment in _class_string(tag)


def extract_title(soup: BeautifulSoup) -> Optional[str]:
    """Recipe-classed h1 first, then any h1, then the document title."""
    candidates = chain(
        (h1 for h1 in soup.find_all("h1") if _has_class_containing(h1, "recipe")),
        soup.find_all("h1"),
        soup.find_all("title"),
    )
    for tag in candidates:
        title = clean_text(tag.decode_contents())
        if title:
            return title
    return None


def extract_list_items(soup: BeautifulSoup, class_fragment: str) -> List[str]:
    """Cleaned text of every <li> whose class contains class_fragment."""
    items = soup.find_all(
        lambda tag: tag.name == "li" and _has_class_containing(tag, class_fragment)
    )
    return clean_lines(item.decode_contents() for item in items)


def extract_heuristic(html: str, source_url: str) -> Optional[RecipeDraft]:
    """
    Build a recipe from class naming conventions in the markup.

    Args:
        html: Raw page markup
        source_url: URL of the page

    Returns:
        A draft, or None when no ingredient or instruction items were found
    """
    soup = BeautifulSoup(html, "html.parser")
    ingredients = extract_list_items(soup, "ingredient")
    steps = extract_list_items(soup, "instruction")

    if not ingredients and not steps:
        logger.debug("No ingredient or instruction list items in markup")
        return None

    title = extract_title(soup) or DEFAULT_TITLE
    logger.debug(f"Markup gave {len(ingredients)} ingredients and {len(steps)} steps for '{title}'")
    return RecipeDraft(
        title=title,
        ingredients=ingredients,
        steps=steps,
        source_url=source_url,
    )
