"""
Data validators using Pydantic
"""
import math
import re

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator

from .exceptions import InvalidVoteError

# Plain ASCII decimal or exponent notation; no underscores, no inf/nan
_NUMBER_RE = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")


class StoryPointsValidator(BaseModel):
    """Story points validator"""
    value: float = Field(..., description="Story points")

    @field_validator('value', mode='before')
    @classmethod
    def validate_value(cls, v):
        if isinstance(v, str):
            if not _NUMBER_RE.match(v):
                raise ValueError('Story points must be a number')
            v = float(v)
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError('Story points must be a number')
        if not math.isfinite(v):
            raise ValueError('Story points must be finite')
        return float(v)


def parse_story_points(raw: str) -> float:
    """Parse raw vote text into a float, raising InvalidVoteError on failure."""
    try:
        return StoryPointsValidator(value=raw).value
    except PydanticValidationError as e:
        raise InvalidVoteError(str(e), error_code="invalid_vote") from e
