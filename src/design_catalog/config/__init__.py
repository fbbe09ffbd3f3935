"""Configuration package."""

from design_catalog.config.manager import ConfigurationManager
from design_catalog.config.schemas import AppConfig, CatalogConfig, LoggingConfig, OutputConfig

__all__ = ["ConfigurationManager", "AppConfig", "CatalogConfig", "LoggingConfig", "OutputConfig"]
