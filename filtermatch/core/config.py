"""Library configuration loaded from the environment."""

from functools import lru_cache
from pydantic_settings import BaseSettings

from filtermatch.filterset.config import MatchType


class Settings(BaseSettings):
    """Filter matcher settings loaded from environment."""

    # Matching
    default_match_type: MatchType = MatchType.STRICT

    # Paths
    criteria_dir: str = "config/criteria"

    model_config = {
        "env_prefix": "FILTERMATCH_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
