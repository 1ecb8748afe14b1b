"""Application configuration via pydantic-settings.

Values are loaded from environment variables (.env file).
Settings are organized into logical groups and composed into a single Settings object.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorefrontSettings(BaseSettings):
    """Section names and currency used when laying out offers."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    featured_section_name: str = Field(
        default="Featured Offers",
        description="Name given to a campaign's featured section when none is supplied",
    )
    prequalified_section_name: str = Field(
        default="Your Prequalified Offers",
        description="Section hoisted to the top of the storefront when present",
    )
    fallback_section_name: str = Field(
        default="Other Offers",
        description="Section used for offers that carry no section name",
    )
    currency_symbol: str = Field(default="$", description="Prefix for formatted preapproval limits")


class OfferCopySettings(BaseSettings):
    """Display copy applied while synthesizing offers."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    preapproved_cta_text: str = Field(default="Review Offer")
    application_cta_text: str = Field(default="Learn More")
    limit_label_marker: str = Field(
        default="up to",
        description="Catalog attribute labels containing this text show the member's limit",
    )


class Settings(BaseSettings):
    """Root settings composing all sub-settings.

    Usage:
        settings = Settings()
        settings.storefront.featured_section_name
        settings.copy_text.preapproved_cta_text
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Environment
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Composed settings (loaded from same .env)
    storefront: StorefrontSettings = Field(default_factory=StorefrontSettings)
    copy_text: OfferCopySettings = Field(default_factory=OfferCopySettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


# Module-level singleton: import this wherever settings are needed.
settings = Settings()
