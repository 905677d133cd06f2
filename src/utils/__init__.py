"""
Utils Module

Logging configuration and request rate limiting.
"""

from .logging import setup_logging, get_logger, get_quiz_logger
from .rate_limit import SlidingWindowRateLimiter

__all__ = [
    "setup_logging",
    "get_logger",
    "get_quiz_logger",
    "SlidingWindowRateLimiter",
]
