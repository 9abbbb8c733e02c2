"""
Configuration management for the driftinfo status reader.

Centralizes all configuration with type-safe defaults and validation.
"""

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class AppConfig(BaseSettings):
    """Application configuration with environment variable support."""

    # Bahnhof Driftinfo Configuration
    base_url: str = Field(
        default="https://bahnhof.se/kundservice/driftinfo",
        description="Status page used to bootstrap the session cookie and CSRF token"
    )
    api_url: str = Field(
        default="https://bahnhof.se/ajax/kundservice/driftinfo",
        description="JSON endpoint with the open incidents"
    )
    user_agent: str = Field(
        default="driftinfo (+https://github.com/daenney/bahnboom)",
        description="User-Agent header sent with every request"
    )
    request_timeout: float = Field(
        default=5.0,
        description="Timeout in seconds for each HTTP request"
    )
    testing: bool = Field(
        default=False,
        description="Enable testing mode"
    )

    # Parsing Configuration
    time_zone: str = Field(
        default="Europe/Stockholm",
        description="Time zone all feed dates are interpreted in"
    )
    title_parser_mode: str = Field(
        default="regex",
        description="Title parser to use: 'regex' or 'legacy'"
    )

    # Logging Configuration
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional log file path"
    )
    log_max_bytes: int = Field(
        default=1048576,  # 1MB
        description="Maximum log file size in bytes"
    )
    log_backup_count: int = Field(
        default=3,
        description="Number of backup log files to keep"
    )

    # Build Information
    build_version: str = Field(
        default="dev",
        description="Release version reported by --version"
    )
    build_commit: str = Field(
        default="none",
        description="Commit reported by --version"
    )
    build_date: str = Field(
        default="unknown",
        description="Build date reported by --version"
    )

    @field_validator('testing', mode='before')
    @classmethod
    def parse_bool(cls, v):
        """Parse boolean values from environment strings."""
        if isinstance(v, str):
            return v.lower() in ('true', '1', 'yes', 'on')
        return v

    @field_validator('log_level', 'title_parser_mode', mode='before')
    @classmethod
    def normalize_choice(cls, v):
        """Normalize log level and parser mode strings."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept levels the logging module knows about."""
        level = v.upper()
        if level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator('title_parser_mode')
    @classmethod
    def validate_title_parser_mode(cls, v: str) -> str:
        """Only 'regex' and 'legacy' title parsers exist."""
        mode = v.lower()
        if mode not in ('regex', 'legacy'):
            raise ValueError(f"Unknown title parser mode: {v}")
        return mode

    def version_info(self) -> dict:
        """
        Build information printed by ``--version``.

        Returns:
            Dictionary with version, commit and date keys
        """
        return {
            'version': self.build_version,
            'commit': self.build_commit,
            'date': self.build_date,
        }

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Ignore extra environment variables


# Global configuration instance
config = AppConfig()


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    return config
