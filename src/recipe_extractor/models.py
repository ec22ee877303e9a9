from typing import List, Optional
from pydantic import BaseModel, Field, model_validator

from .constants import DEFAULT_TITLE


class RecipeDraft(BaseModel):
    """Recipe extracted from a web page, pending review by the user."""
    title: str = Field(default=DEFAULT_TITLE, description="Name of the recipe")
    ingredients: List[str] = Field(default_factory=list, description="Ingredient lines, in page order")
    steps: List[str] = Field(default_factory=list, description="Instruction steps, in page order")
    servings: Optional[str] = Field(default=None, description="Yield as written on the page")
    prep_time: Optional[str] = Field(default=None, description="Human readable prep time, e.g. '15 min'")
    cook_time: Optional[str] = Field(default=None, description="Human readable cook time")
    total_time: Optional[str] = Field(default=None, description="Human readable total time")
    source_url: str = Field(description="URL the page was retrieved from")

    @model_validator(mode='after')
    def check_has_content(self) -> "RecipeDraft":
        """A draft needs a title and something to cook from."""
        if not self.title.strip():
            raise ValueError("title cannot be empty")
        if not self.ingredients and not self.steps:
            raise ValueError("draft has neither ingredients nor steps")
        return self


class DurationToken(BaseModel):
    """Hours and minutes read from a PT#H#M duration, as written."""
    hours: Optional[str] = None
    minutes: Optional[str] = None

    def display(self) -> Optional[str]:
        result = ""
        if self.hours is not None:
            result += f"{self.hours} hr "
        if self.minutes is not None:
            result += f"{self.minutes} min"
        return result.rstrip() or None
