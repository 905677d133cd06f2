"""
Core Module

Foundational components used across the application including configuration
management and custom exceptions.
"""

from .config import get_config, set_config, reload_config, AppConfig
from .exceptions import (
    VocabDrillException,
    ConfigurationError,
    ValidationError,
    ExtractionError,
    RateLimitError,
    QuizStateError,
)

__all__ = [
    "get_config",
    "set_config",
    "reload_config",
    "AppConfig",
    "VocabDrillException",
    "ConfigurationError",
    "ValidationError",
    "ExtractionError",
    "RateLimitError",
    "QuizStateError",
]
