from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./vehicles.db"

    PRICING_ENDPOINT: str = "http://localhost:8082"
    MAPS_ENDPOINT: str = "http://localhost:9191"
    UPSTREAM_TIMEOUT: float = 5.0  # seconds

    API_TITLE: str = "Vehicles API"
    API_DESCRIPTION: str = "RESTful API for car records enriched with price and location data"
    API_VERSION: str = "1.0.0"

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
