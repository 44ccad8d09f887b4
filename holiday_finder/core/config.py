from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings and configuration"""

    # API Settings
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Holiday Finder"

    # Nager.Date upstream
    NAGER_API_BASE_URL: str = "https://date.nager.at/api/v3/"
    REQUEST_TIMEOUT_SECONDS: float = 10.0

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: Optional[bool] = None  # None = auto-detect

    class Config:
        case_sensitive = True
        env_file = ".env"
        extra = "ignore"


settings = Settings()
