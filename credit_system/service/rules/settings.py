"""
Validation Rule Settings for the Credit System.

Environment variables use the RULES_ prefix:
    RULES_INSTALLMENT_WINDOW_MONTHS=3
    RULES_MAX_INSTALLMENTS=48

Usage:
    from credit_system.service.rules.settings import rule_settings

    months = rule_settings.installment_window_months

    # Or create custom settings for testing
    custom = RuleSettings(max_installments=24)
"""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RuleSettings(BaseSettings):
    """Tunable parameters for credit validation rules."""

    model_config = SettingsConfigDict(
        env_prefix="RULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    installment_window_months: int = Field(
        default=3,
        ge=1,
        description="How many calendar months ahead the first installment may fall",
    )
    min_installments: int = Field(
        default=1,
        ge=1,
        description="Smallest allowed number of installments",
    )
    max_installments: int = Field(
        default=48,
        ge=1,
        description="Largest allowed number of installments",
    )

    @model_validator(mode="after")
    def validate_installment_bounds(self) -> "RuleSettings":
        if self.min_installments > self.max_installments:
            raise ValueError(
                f"min_installments ({self.min_installments}) > "
                f"max_installments ({self.max_installments})"
            )
        return self


@lru_cache
def get_rule_settings() -> RuleSettings:
    """Get cached rule settings instance."""
    return RuleSettings()


rule_settings = get_rule_settings()
