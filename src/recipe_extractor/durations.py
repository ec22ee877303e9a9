"""Parsing of ISO-8601 durations (PT#H#M subset) into display strings."""

import re
from typing import Any, Optional

from .models import DurationToken

DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?")


def parse_duration_token(value: Any) -> Optional[DurationToken]:
    """Read the hours and minutes of a duration such as 'PT1H30M'.

    Days, seconds and fractions are not supported; a value without a 'PT'
    section gives None.
    """
    if not isinstance(value, str):
        return None
    match = DURATION_RE.search(value)
    if not match:
        return None
    hours, minutes = match.groups()
    return DurationToken(hours=hours, minutes=minutes)


def parse_duration(value: Any) -> Optional[str]:
    """Convert a duration to a human readable string ('1 hr 30 min').

    Returns None rather than an empty string when nothing could be read.
    """
    token = parse_duration_token(value)
    return token.display() if token else None
