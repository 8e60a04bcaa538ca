"""
Configuration module for logconverter.

Uses pydantic-settings for environment variable loading and PyYAML for
layered config files.
"""

from logconverter.config.settings import Settings
from logconverter.config.sources import ConfigFileError
from logconverter.config.types import LoggingConfig, OutputConfig, RenderOptions

__all__ = ["ConfigFileError", "LoggingConfig", "OutputConfig", "RenderOptions", "Settings"]
