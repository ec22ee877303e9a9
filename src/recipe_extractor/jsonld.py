"""Recipe extraction from schema.org JSON-LD blocks embedded in a page."""

import json
import logging
from typing import Any, Iterator, List, Optional, Tuple

from bs4 import BeautifulSoup
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import DEFAULT_TITLE, JSON_LD_TYPE
from .durations import parse_duration
from .exceptions import MalformedBlockError, NoStructuredDataError
from .instructions import normalize_instructions
from .models import RecipeDraft
from .text import clean_lines, clean_text

logger = logging.getLogger(__name__)

RECIPE_TYPE = "Recipe"


def _is_json_ld_type(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() == JSON_LD_TYPE


def iter_structured_blocks(html: str) -> Iterator[str]:
    """Yield the trimmed content of every JSON-LD script tag, in page order."""
    soup = BeautifulSoup(html, "html.parser")
    for script in soup.find_all("script", attrs={"type": _is_json_ld_type}):
        payload = script.string or script.get_text()
        block = payload.strip()
        if block:
            yield block


class RecipeNode(BaseModel):
    """A JSON-LD node with its loosely typed recipe fields decoded once.

    Every field degrades to "absent" when the page uses a shape we do not
    understand, so validation of a node never fails.
    """
    model_config = ConfigDict(extra="ignore")

    types: Tuple[str, ...] = Field(default=(), alias="@type")
    name: Optional[str] = None
    ingredients: List[str] = Field(default_factory=list, alias="recipeIngredient")
    steps: List[str] = Field(default_factory=list, alias="recipeInstructions")
    servings: Optional[str] = Field(default=None, alias="recipeYield")
    prep_time: Optional[str] = Field(default=None, alias="prepTime")
    cook_time: Optional[str] = Field(default=None, alias="cookTime")
    total_time: Optional[str] = Field(default=None, alias="totalTime")

    @field_validator("types", mode="before")
    @classmethod
    def decode_types(cls, value: Any) -> Tuple[str, ...]:
        if isinstance(value, str):
            return (value,)
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return tuple(value)
        return ()

    @field_validator("name", mode="before")
    @classmethod
    def decode_name(cls, value: Any) -> Optional[str]:
        if not isinstance(value, str):
            return None
        return clean_text(value) or None

    @field_validator("ingredients", mode="before")
    @classmethod
    def decode_ingredients(cls, value: Any) -> List[str]:
        if not isinstance(value, list):
            return []
        return clean_lines(item for item in value if isinstance(item, str))

    @field_validator("steps", mode="before")
    @classmethod
    def decode_steps(cls, value: Any) -> List[str]:
        return normalize_instructions(value)

    @field_validator("servings", mode="before")
    @classmethod
    def decode_servings(cls, value: Any) -> Optional[str]:
        if isinstance(value, list) and value:
            value = value[0]
        if not isinstance(value, str):
            return None
        return clean_text(value) or None

    @field_validator("prep_time", "cook_time", "total_time", mode="before")
    @classmethod
    def decode_duration(cls, value: Any) -> Optional[str]:
        return parse_duration(value)

    @property
    def is_recipe(self) -> bool:
        return RECIPE_TYPE in self.types

    def to_draft(self, source_url: str) -> Optional[RecipeDraft]:
        """Build a draft, or None when the node has nothing to cook from."""
        if not self.ingredients and not self.steps:
            return None
        return RecipeDraft(
            title=self.name or DEFAULT_TITLE,
            ingredients=self.ingredients,
            steps=self.steps,
            servings=self.servings,
            prep_time=self.prep_time,
            cook_time=self.cook_time,
            total_time=self.total_time,
            source_url=source_url,
        )


def iter_candidate_nodes(data: Any) -> Iterator[dict]:
    """Yield candidate nodes: the object itself, array items, then @graph items."""
    if isinstance(data, dict):
        yield data

    if isinstance(data, list):
        for item in data:
            if isinstance(item, dict):
                yield item

    if isinstance(data, dict):
        graph = data.get("@graph")
        if isinstance(graph, list):
            for item in graph:
                if isinstance(item, dict):
                    yield item


def extract_from_block(block: str, source_url: str) -> Optional[RecipeDraft]:
    """
    Extract a recipe from a single JSON-LD block.

    Args:
        block: Raw JSON text found inside the script tag
        source_url: URL of the page the block comes from

    Returns:
        The draft built from the first usable Recipe node, or None

    Raises:
        MalformedBlockError: If the block is not valid JSON
    """
    try:
        data = json.loads(block)
    except (ValueError, RecursionError) as e:
        raise MalformedBlockError(f"Invalid JSON-LD block: {e}") from e

    for raw_node in iter_candidate_nodes(data):
        node = RecipeNode.model_validate(raw_node)
        if not node.is_recipe:
            continue
        draft = node.to_draft(source_url)
        if draft is None:
            logger.debug(f"Recipe node '{node.name}' has neither ingredients nor steps, skipping")
            continue
        return draft

    return None


def extract_structured(html: str, source_url: str) -> RecipeDraft:
    """
    Extract a recipe from the structured data of a page.

    Blocks are tried in document order; a malformed block is skipped so the
    following ones still get a chance.

    Raises:
        NoStructuredDataError: If no block describes a usable recipe
    """
    for index, block in enumerate(iter_structured_blocks(html)):
        try:
            draft = extract_from_block(block, source_url)
        except MalformedBlockError as e:
            logger.warning(f"Skipping JSON-LD block #{index}: {e}")
            continue
        if draft is not None:
            logger.debug(f"Recipe found in JSON-LD block #{index}")
            return draft

    raise NoStructuredDataError("No Recipe node found in structured data")
