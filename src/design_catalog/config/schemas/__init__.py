"""Configuration schemas."""

from design_catalog.config.schemas.app_schema import AppConfig, CatalogConfig, OutputConfig
from design_catalog.config.schemas.logging_schema import LoggingConfig

__all__ = ["AppConfig", "CatalogConfig", "OutputConfig", "LoggingConfig"]
