"""Constants for recipe extractor package."""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_TITLE = "Untitled Recipe"

JSON_LD_TYPE = "application/ld+json"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

# Fetch settings, overridable from the environment
USER_AGENT: str = os.getenv("RECIPE_EXTRACTOR_USER_AGENT", DEFAULT_USER_AGENT)

_raw_timeout = os.getenv("RECIPE_EXTRACTOR_TIMEOUT", "30")
try:
    FETCH_TIMEOUT: float = float(_raw_timeout)
except ValueError:
    raise ValueError(f"Invalid RECIPE_EXTRACTOR_TIMEOUT: {_raw_timeout}. Must be a number of seconds")

if FETCH_TIMEOUT <= 0:
    raise ValueError(f"Invalid RECIPE_EXTRACTOR_TIMEOUT: {_raw_timeout}. Must be positive")
