"""Configuration utilities for Sitepress."""

from .loader import Config, ConfigModel, LoggingSettings, OutputSettings, TemplateSettings, load_config

__all__ = [
    "Config",
    "ConfigModel",
    "LoggingSettings",
    "OutputSettings",
    "TemplateSettings",
    "load_config",
]
