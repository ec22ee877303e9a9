"""Recipe extractor package for turning recipe web pages into structured drafts."""

from .extractor import extract
from .fetcher import PageFetcher, RecipeParser
from .models import RecipeDraft
from .exceptions import (
    RecipeExtractorError,
    InvalidInputError,
    NoRecipeFoundError,
    FetchError,
)

__all__ = [
    "extract",
    "PageFetcher",
    "RecipeParser",
    "RecipeDraft",
    "RecipeExtractorError",
    "InvalidInputError",
    "NoRecipeFoundError",
    "FetchError",
]
