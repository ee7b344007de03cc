"""Configuration management for ExpenseBot."""

import logging
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Currency rendering
    currency_symbol: str = "₹"
    digit_grouping: Literal["indian", "western"] = "indian"

    # Calendar: first day of the week, Python weekday numbering (6 = Sunday)
    first_weekday: int = 6

    # Averaging heuristics
    daily_average_fallback_days: int = 30  # Used when no time phrase was given
    months_per_year: int = 12  # Divisor for "average monthly" over a year phrase

    # Development mode
    dev_mode: bool = True

    # Data directory
    data_dir: Path = Path.home() / ".expensebot"

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,  # LOG_LEVEL and log_level both work
        extra="ignore",  # Ignore extra environment variables
    )

    @property
    def db_path(self) -> Path:
        """Get the SQLite database path."""
        suffix = "dev" if self.dev_mode else "prod"
        return self.data_dir / f"expensebot_{suffix}.db"

    def ensure_directories(self) -> None:
        """Create necessary directories if they don't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def log_config(self) -> None:
        """Log current configuration."""
        logger.info("=" * 60)
        logger.info("CONFIGURATION LOADED")
        logger.info(f"Currency:            {self.currency_symbol} ({self.digit_grouping} grouping)")
        logger.info(f"First Weekday:       {self.first_weekday}")
        logger.info(f"Daily Avg Fallback:  {self.daily_average_fallback_days} days")
        logger.info(f"Months Per Year:     {self.months_per_year}")
        logger.info(f"Dev Mode:            {self.dev_mode}")
        logger.info(f"Data Directory:      {self.data_dir}")
        logger.info(f"Database:            {self.db_path}")
        logger.info(f"API Host:            {self.api_host}:{self.api_port}")
        logger.info("=" * 60)


# Global settings instance
settings = Settings()
