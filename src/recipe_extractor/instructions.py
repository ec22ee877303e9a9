"""Flattening of schema.org recipeInstructions into a list of steps."""

import logging
from typing import Any, List

from .text import clean_lines

logger = logging.getLogger(__name__)


def split_instruction_text(text: str) -> List[str]:
    """Split a single block of instructions into one step per line or sentence.

    Sentences are cut on '. ', so abbreviations such as 'deg. F.' get split too.
    """
    pieces = []
    for line in text.splitlines():
        pieces.extend(line.split(". "))
    return clean_lines(pieces)


def _step_texts(item: dict) -> List[str]:
    """Texts carried by a HowToStep or a HowToSection."""
    texts = []
    text = item.get("text")
    name = item.get("name")
    if isinstance(text, str):
        texts.append(text)
    elif isinstance(name, str):
        texts.append(name)

    sub_items = item.get("itemListElement")
    if isinstance(sub_items, list):
        for sub_item in sub_items:
            if isinstance(sub_item, dict) and isinstance(sub_item.get("text"), str):
                texts.append(sub_item["text"])
    return texts


def normalize_instructions(raw: Any) -> List[str]:
    """
    Normalize a recipeInstructions value into ordered, cleaned steps.

    Args:
        raw: A plain string, or a list mixing strings, HowToStep and
            HowToSection objects

    Returns:
        The non-empty steps in page order; unknown shapes give an empty list
    """
    if isinstance(raw, str):
        return split_instruction_text(raw)

    if not isinstance(raw, list):
        if raw is not None:
            logger.debug(f"Ignoring recipeInstructions of type {type(raw).__name__}")
        return []

    fragments = []
    for item in raw:
        if isinstance(item, str):
            fragments.append(item)
        elif isinstance(item, dict):
            fragments.extend(_step_texts(item))
        else:
            logger.debug(f"Skipping instruction element of type {type(item).__name__}")
    return clean_lines(fragments)
