"""Main application configuration schema."""

from typing import List

from pydantic import BaseModel, Field, field_validator

from design_catalog.domain.base.catalog import Category

from .logging_schema import LoggingConfig


class CatalogConfig(BaseModel):
    """Which demonstrations run and how runs are separated."""

    categories: List[Category] = Field(
        default_factory=lambda: list(Category),
        description="Categories included when running the whole catalog",
    )
    stop_on_error: bool = Field(False, description="Stop a catalog run at the first failed demonstration")
    separator_width: int = Field(60, ge=0, description="Width of the rule printed between demonstrations")

    @field_validator("categories", mode="before")
    @classmethod
    def split_categories(cls, v):
        """Accept a comma-separated string as well as a list."""
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v


class OutputConfig(BaseModel):
    """Output settings for catalog listings."""

    format: str = Field("table", description="Default listing format")

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        valid_formats = ["json", "yaml", "table", "list"]
        if v not in valid_formats:
            raise ValueError(f"Invalid output format: {v}. Must be one of {valid_formats}")
        return v


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    catalog: CatalogConfig = Field(default_factory=lambda: CatalogConfig())
    output: OutputConfig = Field(default_factory=lambda: OutputConfig())
