"""
Core module: error taxonomy, structured logging and input validation
"""
from .exceptions import (
    ActionFailure,
    ActionResult,
    ActionSuccess,
    AppError,
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ErrorKind,
    ErrorPayload,
    NotFoundError,
    RateLimitError,
    ValidationError,
    to_action_error,
)
from .logger import StructuredLogger

__all__ = [
    'AppError',
    'ErrorKind',
    'ValidationError',
    'AuthenticationError',
    'AuthorizationError',
    'NotFoundError',
    'RateLimitError',
    'ConfigurationError',
    'ErrorPayload',
    'ActionSuccess',
    'ActionFailure',
    'ActionResult',
    'to_action_error',
    'StructuredLogger',
]
