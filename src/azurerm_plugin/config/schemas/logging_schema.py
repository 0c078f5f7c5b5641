"""Logging configuration schema."""
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    CONSOLE = "console"
    BOTH = "both"


class LogFileConfig(BaseModel):
    """Rotating log file configuration."""

    path: str = Field("logs/azurerm-plugin.log", description="Log file path; environment variables are expanded")
    max_size_mb: int = Field(10, description="Maximum size of one log file in megabytes")
    backup_count: int = Field(5, description="Number of rotated log files to keep")

    @field_validator('max_size_mb', 'backup_count')
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Value must not be negative")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("INFO", description="Log level")
    destination: LogDestination = Field(LogDestination.CONSOLE, description="Where log records are written")
    format: str = Field(
        "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s",
        description="Log record format",
    )
    file: LogFileConfig = Field(default_factory=LogFileConfig)

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()
