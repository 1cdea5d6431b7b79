"""Application configuration using Pydantic Settings."""

import os
from typing import List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database Configuration
    database_url: str = Field(
        ...,
        description="PostgreSQL database URL with asyncpg driver"
    )

    # Storage Configuration
    storage_path: str = Field(
        default="storage/app/public",
        description="Path to storage directory for public uploaded files"
    )
    storage_url: str = Field(
        default="/storage/app/public",
        description="URL prefix for serving public files (image base URL)"
    )

    # Application Configuration
    app_name: str = Field(
        default="Customer Config API",
        description="Application name"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    allowed_origins: str = Field(
        default="http://localhost:3000",
        description="Comma-separated list of allowed CORS origins"
    )

    # Server Configuration
    host: str = Field(
        default="0.0.0.0",
        description="Server host"
    )
    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Server port"
    )

    # Redis Configuration
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL for caching"
    )

    # Mapping provider Configuration
    maps_api_base_url: str = Field(
        default="https://maps.googleapis.com/maps/api",
        description="Google Maps REST API base URL"
    )
    maps_timeout: float = Field(
        default=10.0,
        gt=0,
        le=60.0,
        description="Timeout in seconds for mapping provider requests"
    )

    # IP Geolocation Configuration
    geolocation_url: str = Field(
        default="http://ip-api.com/json",
        description="IP geolocation service URL"
    )
    geolocation_requests_per_minute: int = Field(
        default=45,
        ge=1,
        le=1000,
        description="Geolocation rate limit (requests per minute, ip-api free tier allows 45)"
    )
    geolocation_cache_ttl: int = Field(
        default=86400,
        ge=3600,
        le=604800,
        description="Geolocation cache TTL in seconds (1 hour to 7 days)"
    )
    geolocation_timeout: float = Field(
        default=5.0,
        gt=0,
        le=30.0,
        description="Timeout in seconds for geolocation requests"
    )

    # Users
    admin_user_type: str = Field(
        default="super-admin",
        description="User type whose first account is published as admin_details"
    )

    model_config = SettingsConfigDict(
        env_file=".env" if not os.getenv("TESTING") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Validate that database URL uses asyncpg driver."""
        if not v.startswith("postgresql+asyncpg://"):
            raise ValueError(
                "DATABASE_URL must use asyncpg driver (postgresql+asyncpg://)"
            )
        return v

    @field_validator("maps_api_base_url", "geolocation_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalise service URLs so paths can be appended."""
        return v.rstrip("/")

    def get_allowed_origins_list(self) -> List[str]:
        """Parse allowed origins from comma-separated string."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]
