from typing import List, Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    API_TITLE: str = "Rating Engine API"
    API_DESCRIPTION: str = "Premium calculation service for small commercial insurance quotes"
    API_VERSION: str = "1.0.0"

    REDIS_URL: Optional[str] = None
    PREMIUM_CACHE_TTL: int = 60  # 60 seconds

    CORS_ORIGINS: List[str] = ["*"]

    # Deployed service used by RatingClient and request_quote.py
    RATING_API_URL: str = "http://localhost:8000"
    CLIENT_TIMEOUT: float = 10.0

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
