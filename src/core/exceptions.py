"""
Custom Exception Classes

Application-specific exception classes for better error handling
and debugging throughout the vocabulary drill.
"""

from typing import Optional, Any, Dict


class VocabDrillException(Exception):
    """Base exception class for all vocab-drill errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(VocabDrillException):
    """Raised when there's an issue with configuration setup or validation."""
    pass


class ValidationError(VocabDrillException):
    """Raised when caller-supplied input fails validation."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 invalid_value: Optional[Any] = None, **kwargs):
        super().__init__(message, kwargs)
        self.field_name = field_name
        self.invalid_value = invalid_value


class ExtractionError(VocabDrillException):
    """Raised when a word list cannot be extracted from a photo."""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 raw_output: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.status_code = status_code
        self.raw_output = raw_output


class RateLimitError(VocabDrillException):
    """Raised when a client exceeds its request window."""

    def __init__(self, message: str, client_id: Optional[str] = None,
                 retry_after: Optional[float] = None, **kwargs):
        super().__init__(message, kwargs)
        self.client_id = client_id
        self.retry_after = retry_after


class QuizStateError(VocabDrillException):
    """Raised when a quiz action does not fit the current question."""

    def __init__(self, message: str, question_index: Optional[int] = None, **kwargs):
        super().__init__(message, kwargs)
        self.question_index = question_index
