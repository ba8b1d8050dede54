from pydantic_settings import BaseSettings
from typing import Optional

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./pricing.db"

    REDIS_URL: Optional[str] = None
    PRICE_CACHE_TTL: int = 60   # 60 seconds

    # number of vehicle ids (1..N) to give a random quote on an empty store
    SEED_PRICES: int = 0

    API_TITLE: str = "Pricing Service"
    API_DESCRIPTION: str = "Returns the current price quote for a vehicle"
    API_VERSION: str = "1.0.0"

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
