"""Utility functions for darkcoin."""

from darkcoin.utils.exceptions import (
    DarkcoinError,
    ParameterError,
    ArgumentOrderError,
    TransportError,
    RpcApplicationError,
    ErrorCategory,
    classify_exception,
    sanitize_error_message,
)

__all__ = [
    "DarkcoinError",
    "ParameterError",
    "ArgumentOrderError",
    "TransportError",
    "RpcApplicationError",
    "ErrorCategory",
    "classify_exception",
    "sanitize_error_message",
]
