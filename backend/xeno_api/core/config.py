"""
Application configuration settings
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

_DEFAULT_SECRET = "your-secret-key-change-in-production"
_DEFAULT_JWT_SECRET = "your-jwt-secret-key-change-in-production"


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application Settings
    APP_NAME: str = "Xeno Marketing Platform API"
    VERSION: str = "2.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    SECRET_KEY: str = _DEFAULT_SECRET
    ALLOWED_HOSTS: List[str] = ["*"]

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./xeno.db"

    # Redis Configuration (Celery broker for the Shopify sync provider)
    REDIS_URL: str = "redis://localhost:6379"

    # JWT Configuration
    JWT_SECRET_KEY: str = _DEFAULT_JWT_SECRET
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: int = 7 * 24 * 60  # 7 days

    # Password hashing
    BCRYPT_ROUNDS: int = 10

    # Error responses
    EXPOSE_ERROR_DETAILS: bool = True

    # Shopify sync
    SYNC_PROVIDER: str = "noop"  # noop, shopify
    SHOPIFY_API_VERSION: str = "2024-01"

    # Monitoring and Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def database_url(self) -> str:
        """DATABASE_URL normalized for SQLAlchemy"""
        url = self.DATABASE_URL
        if url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql://", 1)
        return url

    @property
    def expose_error_details(self) -> bool:
        # Raw error text never leaves a production process
        return self.EXPOSE_ERROR_DETAILS and not self.is_production

    def validate_for_environment(self) -> None:
        """
        Validate required settings in production
        """
        if not self.is_production:
            return

        missing_settings = []
        if self.SECRET_KEY == _DEFAULT_SECRET:
            missing_settings.append("SECRET_KEY")
        if self.JWT_SECRET_KEY == _DEFAULT_JWT_SECRET:
            missing_settings.append("JWT_SECRET_KEY")

        if missing_settings:
            raise ValueError(f"Missing required production settings: {', '.join(missing_settings)}")


@lru_cache
def get_settings() -> Settings:
    return Settings()
