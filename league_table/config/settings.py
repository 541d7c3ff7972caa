import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from league_table.models.enums import RankingStrategy

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Ranking Configuration
    ranking_strategy: RankingStrategy = Field(
        RankingStrategy.POINTS,
        description="How to order teams: 'points' or 'goal_diff'.",
    )
    skip_invalid_lines: bool = Field(
        False,
        description="Log and skip malformed game lines instead of aborting the run.",
    )

    # Output Configuration
    point_unit_singular: str = Field("pt", description="Unit label for exactly 1 point.")
    point_unit_plural: str = Field("pts", description="Unit label for any other score.")

    # Logging Configuration
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


def load_settings() -> AppSettings:
    """Loads and validates application settings."""
    try:
        settings = AppSettings()
        log_level_upper = settings.log_level.upper()
        # Validate log_level even if loaded from .env
        if log_level_upper not in VALID_LOG_LEVELS:
            logging.warning(
                f"Invalid LOG_LEVEL '{settings.log_level}' found in .env or default. Using INFO."
            )
            settings.log_level = "INFO"
        else:
            settings.log_level = log_level_upper
        return settings
    except Exception as e:
        logging.exception(f"Error loading application settings: {e}")
        raise SystemExit("Failed to load application settings. Exiting.")


settings: AppSettings = load_settings()
