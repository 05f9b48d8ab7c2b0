"""Application configuration using Pydantic Settings."""

from typing import List, Union
from urllib.parse import quote_plus

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "NextHire API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # MongoDB (credentials in .env)
    MONGODB_URL: str = ""  # Full URI override, e.g. mongodb://localhost:27017
    MONGODB_USERNAME: str = ""
    MONGODB_PASSWORD: str = ""
    MONGODB_CLUSTER: str = "cluster0.skka1tn.mongodb.net"
    MONGODB_DATABASE: str = "NextHire"
    JOBS_COLLECTION: str = "Jobs"
    APPLICATIONS_COLLECTION: str = "job_applications"
    SUBSCRIPTIONS_COLLECTION: str = "subscriptions"
    MONGODB_MAX_POOL_SIZE: int = 10
    MONGODB_MIN_POOL_SIZE: int = 2
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = 5000

    @property
    def MONGODB_URI(self) -> str:
        """Construct MongoDB connection URI"""
        if self.MONGODB_URL:
            return self.MONGODB_URL
        if self.MONGODB_USERNAME and self.MONGODB_PASSWORD:
            username = quote_plus(self.MONGODB_USERNAME)
            password = quote_plus(self.MONGODB_PASSWORD)
            return (
                f"mongodb+srv://{username}:{password}@{self.MONGODB_CLUSTER}/"
                f"?retryWrites=true&w=majority&appName=Cluster0"
            )
        return f"mongodb+srv://{self.MONGODB_CLUSTER}/?retryWrites=true&w=majority"

    # JWT (auth cookie)
    SECRET_KEY: str = Field(default="change-this-secret-key-in-production")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    AUTH_COOKIE_NAME: str = "token"

    # CORS
    CORS_ORIGINS: Union[str, List[str]] = [
        "http://localhost:5173",
        "https://next-hire-nine.vercel.app",
    ]

    # File Upload
    MAX_UPLOAD_SIZE: int = 5242880  # 5MB, resume + cover letter combined

    # Pagination
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100
    FEATURED_JOBS_LIMIT: int = 15

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    # Monitoring
    SENTRY_DSN: str = ""
    SENTRY_ENVIRONMENT: str = "production"
    SENTRY_TRACES_SAMPLE_RATE: float = 0.1

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_origins(cls, v):
        """Parse comma-separated origins."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


# Create global settings instance
settings = Settings()
