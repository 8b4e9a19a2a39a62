"""
Core configuration and settings for the Catalog Service
Following FastAPI best practices for configuration management
"""

from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Allow extra fields to be ignored
    )

    # Service information
    service_name: str = Field(default="catalog-service")
    service_version: str = Field(default="1.0.0")
    environment: str = Field(default="development")

    # Server configuration
    port: int = Field(default=5000)
    host: str = Field(default="0.0.0.0")  # nosec B104

    # Database configuration
    mongodb_uri: Optional[str] = Field(default=None)
    mongodb_host: str = Field(default="localhost")
    mongodb_port: int = Field(default=27017)
    db_user: Optional[str] = Field(default=None)
    db_pass: Optional[str] = Field(default=None)
    mongodb_database: str = Field(default="catalogdb")

    @property
    def mongodb_url(self) -> str:
        """Construct MongoDB connection URL"""
        if self.mongodb_uri:
            return self.mongodb_uri
        if self.db_user and self.db_pass:
            return f"mongodb://{self.db_user}:{self.db_pass}@{self.mongodb_host}:{self.mongodb_port}/?authSource=admin"
        return f"mongodb://{self.mongodb_host}:{self.mongodb_port}"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    # Session credential configuration
    access_token_secret: str = Field(default="change_me_access_token_secret")
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiration: int = Field(default=7 * 24 * 60 * 60)  # seconds
    cookie_name: str = Field(default="token")

    # CORS configuration
    cors_origins: List[str] = Field(default=["http://localhost:5173"])

    # Logging configuration
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")
    log_to_file: bool = Field(default=False)
    log_to_console: bool = Field(default=True)
    log_file_path: str = Field(default="logs/catalog-service.log")

    # Observability configuration
    correlation_id_header: str = Field(default="X-Correlation-ID")
    telemetry_enabled: bool = Field(default=True)


# Global config instance
config = Config()
