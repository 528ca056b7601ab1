"""Filter set configuration."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class MatchType(str, Enum):
    """How configured values are matched against attribute values."""

    STRICT = "strict"
    REGEXP = "regexp"


MATCH_TYPE_FIELD_NAME = "match_type"


class FilterSetConfig(BaseModel):
    """Configuration passed to the filter set factory."""

    model_config = ConfigDict(frozen=True)

    match_type: MatchType = MatchType.STRICT
