"""Logging configuration schema."""

from pydantic import BaseModel, Field, field_validator


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("WARNING", description="Logging level")
    destination: str = Field("stderr", description="Where log records go: stderr, file, both or none")
    file_path: str = Field("logs/design_catalog.log", description="Log file path")
    max_size_mb: int = Field(10, ge=1, description="Maximum log file size in MB before rotation")
    backup_count: int = Field(3, ge=0, description="Number of rotated log files to keep")
    json_format: bool = Field(False, description="Render log records as JSON")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """
        Validate log level.

        Args:
            v: Value to validate

        Returns:
            Validated value, upper-cased

        Raises:
            ValueError: If log level is invalid
        """
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        valid_destinations = ["stderr", "file", "both", "none"]
        if v not in valid_destinations:
            raise ValueError(f"Invalid log destination: {v}. Must be one of {valid_destinations}")
        return v
