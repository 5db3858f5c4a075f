"""Configuration loading for the Fizop validator."""

from fizop.config.manager import ConfigurationManager
from fizop.config.schema import FizopConfig, LogLevel

__all__ = ["ConfigurationManager", "FizopConfig", "LogLevel"]
