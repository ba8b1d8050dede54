from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    API_TITLE: str = "Maps Service"
    API_DESCRIPTION: str = "Mock reverse geocoder returning a street address for a coordinate pair"
    API_VERSION: str = "1.0.0"

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
