"""
Application settings.

Loads configuration from environment variables using pydantic-settings.
"""

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = "sqlite+aiosqlite:///./referrals.db"
    database_echo: bool = False

    # Application
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    log_file: str = "logs/referrals.log"
    log_rotation: str = "1 day"
    log_retention: str = "7 days"

    # Referral engine
    referral_max_chain_depth: int = Field(
        default=1000,
        ge=1,
        description=(
            "Maximum number of levels walked up or down the referral graph "
            "before the graph is treated as corrupted"
        ),
    )
    referral_code_length: int = Field(
        default=8, ge=4, le=20, description="Length of generated referral codes"
    )
    top_earners_limit: int = Field(
        default=10, gt=0, description="Size of the top earners list in system stats"
    )

    # Registration
    username_min_length: int = Field(default=3, ge=1)
    password_min_length: int = Field(default=6, ge=1)
    password_hash_rounds: int = Field(
        default=12, ge=4, le=31, description="bcrypt cost factor"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize log level name."""
        level = v.upper()
        allowed = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
        if level not in allowed:
            raise ValueError(
                f"Invalid LOG_LEVEL '{v}'. Expected one of: {', '.join(sorted(allowed))}"
            )
        return level

    @model_validator(mode="after")
    def validate_production(self) -> "Settings":
        """Validate production-specific requirements."""
        if self.environment == "production":
            if self.debug:
                raise ValueError(
                    "DEBUG must be False in production environment. "
                    "Set DEBUG=false in your .env file."
                )
            if self.database_url.startswith("sqlite") and ":memory:" in self.database_url:
                raise ValueError(
                    "In-memory SQLite cannot be used in production. "
                    "Set DATABASE_URL to a persistent database."
                )
        return self


settings = Settings()
