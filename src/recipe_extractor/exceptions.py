"""Exceptions for recipe extractor package."""


class RecipeExtractorError(Exception):
    """Base class for every error raised by the extractor."""
    pass


class InvalidInputError(RecipeExtractorError):
    """Raised when the source URL is not well-formed."""
    pass


class NoStructuredDataError(RecipeExtractorError):
    """Raised when no JSON-LD block describes a usable recipe."""
    pass


class MalformedBlockError(RecipeExtractorError):
    """Raised when a JSON-LD block cannot be parsed as JSON."""
    pass


class NoRecipeFoundError(RecipeExtractorError):
    """Raised when neither structured data nor markup yields a recipe."""

    def __init__(self, message: str = "No recipe found on this page"):
        super().__init__(message)


class FetchError(RecipeExtractorError):
    """Raised when the page cannot be retrieved."""
    pass
