from typing import Optional

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_TITLE: str = "Swiss Tournament Engine"

    # Scoring
    POINTS_PER_WIN: int = 3
    BYE_POINTS: int = 3
    BYE_SCORE_P1: int = 2 # Nominal game score recorded on a bye match
    BYE_SCORE_P2: int = 0

    # Tie-breaks
    MIN_MATCH_WIN_PERCENTAGE: float = 0.33
    DEFAULT_OMW: float = 0.33

    # Upper bound on backtracking steps before falling back to relaxed pairing
    PAIRING_SEARCH_BUDGET: int = 20000

    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    class Config:
        env_file = ".env"
        env_prefix = "SWISS_"
        extra = "ignore"

settings = Settings()

def get_settings() -> Settings:
    return settings
