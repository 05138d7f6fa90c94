"""Configuration settings for the grocery app."""
from functools import lru_cache
from pathlib import Path
from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Get project root directory (3 levels up from the package)
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

# Default log directory
DEFAULT_LOG_DIR = PROJECT_ROOT / "logs"
DEFAULT_LOG_FILE = DEFAULT_LOG_DIR / "grocery.log"

# Default export directory
DEFAULT_EXPORT_DIR = PROJECT_ROOT / "exports"


class GrocerySettings(BaseSettings):
    """Application settings with environment variable support."""

    # Database
    DB_URL: str = "sqlite:///grocery.db"
    DB_ECHO: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[Path] = DEFAULT_LOG_FILE
    LOG_FORMAT: str = "detailed"  # simple, detailed
    LOG_RETENTION_DAYS: int = 7
    LOG_ROTATION_SIZE_MB: int = 1

    # Export
    EXPORT_DIR: Path = DEFAULT_EXPORT_DIR
    EXPORT_FILENAME: str = "Boodschappen.json"
    EXPORT_SUCCESS_MESSAGE: str = "Boodschappenlijst is opgeslagen."
    EXPORT_FAILURE_PREFIX: str = "Opslaan mislukt: "

    # Client shown in the front end until there is a login screen
    DEFAULT_CLIENT_ID: int = 1

    model_config = SettingsConfigDict(
        env_prefix="GROCERY_",
        case_sensitive=False,
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Convert relative DB path to absolute path from project root
        if self.DB_URL.startswith("sqlite:///") and self.DB_URL != "sqlite:///:memory:":
            relative_path = self.DB_URL.replace("sqlite:///", "")
            if not Path(relative_path).is_absolute():
                self.DB_URL = f"sqlite:///{PROJECT_ROOT / relative_path}"

        # Ensure log file path is absolute and parent directory exists
        if self.LOG_FILE:
            if not self.LOG_FILE.is_absolute():
                self.LOG_FILE = PROJECT_ROOT / self.LOG_FILE
            self.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

        if not self.EXPORT_DIR.is_absolute():
            self.EXPORT_DIR = PROJECT_ROOT / self.EXPORT_DIR

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        valid_formats = ["simple", "detailed"]
        v = v.lower()
        if v not in valid_formats:
            raise ValueError(f"Log format must be one of: {', '.join(valid_formats)}")
        return v

    @field_validator("EXPORT_FILENAME")
    @classmethod
    def validate_export_filename(cls, v: str) -> str:
        v = v.strip()
        if not v or Path(v).name != v:
            raise ValueError("Export filename must be a plain file name")
        return v


@lru_cache()
def get_settings() -> GrocerySettings:
    """Get cached settings instance."""
    return GrocerySettings()


def clear_settings_cache() -> None:
    """Clear the settings cache to force reload from environment."""
    get_settings.cache_clear()
