"""Application Settings using Pydantic.

Environment-based configuration with validation.

Environment Variables (prefix WORKSHOP_):
    WORKSHOP_ENVIRONMENT: development | staging | production
    WORKSHOP_DEBUG: Enable debug mode (default: False)
    WORKSHOP_LOG_LEVEL: DEBUG | INFO | WARNING | ERROR | CRITICAL
    WORKSHOP_LOG_FORMAT: json | console
    WORKSHOP_BUDGET_DEFAULT_VALIDITY_DAYS: Validity of auto-generated budgets

Example .env file:
    WORKSHOP_ENVIRONMENT=production
    WORKSHOP_LOG_FORMAT=json
    WORKSHOP_BUDGET_DEFAULT_VALIDITY_DAYS=10
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from workshop.domain.budgets.value_objects import DeliveryMethod


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via WORKSHOP_-prefixed environment variables.
    """

    model_config = SettingsConfigDict(
        env_prefix="WORKSHOP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==================== Core ====================
    app_name: str = "Workshop Workflow Core"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False

    # ==================== Logging ====================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # ==================== Budgets ====================
    budget_default_validity_days: int = Field(
        default=7,
        ge=1,
        description="Validity period of budgets generated on service order receipt",
    )
    budget_default_delivery_method: DeliveryMethod = Field(
        default=DeliveryMethod.EMAIL,
        description="How auto-generated budgets reach the client",
    )
    budget_auto_generated_note: str = Field(
        default="Budget automatically generated when service order was received",
        min_length=1,
    )

    # ==================== Validators ====================

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept lowercase level names (e.g. "debug")."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("budget_default_delivery_method", mode="before")
    @classmethod
    def normalize_delivery_method(cls, v):
        """Accept lowercase delivery method names (e.g. "whatsapp")."""
        return v.upper() if isinstance(v, str) else v

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload.

    Returns:
        Settings instance.
    """
    return Settings()
