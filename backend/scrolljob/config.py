import os
from typing import List
from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()

def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]

class Settings(BaseSettings):
    # MongoDB (jobs / job_news collections)
    MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
    MONGO_DB_NAME: str = os.getenv("MONGO_DB_NAME", "scrolljob")

    # Admin gate: an empty key leaves mutating routes open
    ADMIN_KEY: str = os.getenv("ADMIN_KEY", "")
    ADMIN_KEY_HEADER: str = os.getenv("ADMIN_KEY_HEADER", "X-Admin-Key")

    # Server
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
    PORT: int = int(os.getenv("PORT", "5000"))
    API_PREFIX: str = "/api/v1"
    TESTING: bool = os.getenv("TESTING", "false").lower() == "true"

    # CORS: FRONTEND_URL is a comma separated whitelist
    CORS_ORIGINS: List[str] = _split_origins(os.getenv("FRONTEND_URL", ""))

    # 100 requests per 15 minutes per client
    RATE_LIMIT: str = os.getenv("RATE_LIMIT", "100/15minutes")

    # Pagination
    DEFAULT_PAGE_LIMIT: int = 50
    MAX_PAGE_LIMIT: int = 100

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def gate_enabled(self) -> bool:
        return bool(self.ADMIN_KEY)

settings = Settings()

def get_settings() -> Settings:
    """Dependency hook so the settings can be swapped in tests."""
    return settings
