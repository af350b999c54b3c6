"""Suite settings using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Swag Labs E2E configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # Application
    app_name: str = Field(default="Swag Labs E2E", description="Suite name")
    debug: bool = Field(default=False, description="Pretty console logs instead of JSON")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )

    # Targets
    base_url: str = Field(
        default="https://www.saucedemo.com", description="Storefront under test"
    )
    api_base_url: str = Field(
        default="https://jsonplaceholder.typicode.com",
        description="JSON API used by the API suite",
    )

    # Timeouts (milliseconds unless noted)
    action_timeout_ms: int = Field(default=15_000, ge=1, description="Click/fill timeout")
    navigation_timeout_ms: int = Field(default=30_000, ge=1, description="Page load timeout")
    expect_timeout_ms: int = Field(default=5_000, ge=1, description="Web-first assertion timeout")
    auth_timeout_ms: int = Field(
        default=10_000, ge=1, description="Budget for the pre-authenticated fixture"
    )
    api_timeout_s: float = Field(default=10.0, gt=0, description="HTTP client timeout (s)")
    scenario_timeout_s: int = Field(default=30, ge=1, description="Whole-scenario budget (s)")

    # Test data
    users_file: Path | None = Field(default=None, description="Override for users.json")
    products_file: Path | None = Field(default=None, description="Override for products.json")
    default_username: str = Field(
        default="standard_user", description="Credential used by authenticated fixtures"
    )

    # Visual snapshots
    snapshot_dir: Path = Field(
        default=Path("tests/e2e/__snapshots__"), description="Baseline screenshots"
    )
    update_snapshots: bool = Field(default=False, description="Rewrite baselines")
    max_diff_pixels: int = Field(default=0, ge=0, description="Allowed differing pixels")

    # Artifacts and browser
    artifacts_dir: Path = Field(default=Path("test-results"), description="Ad-hoc screenshots")
    viewport_width: int = Field(default=1920, ge=1)
    viewport_height: int = Field(default=1080, ge=1)

    @field_validator("base_url", "api_base_url")
    @classmethod
    def validate_http_url(cls, v: str) -> str:
        """Validate target URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
