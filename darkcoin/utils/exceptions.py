"""
Exception hierarchy and error handling utilities for darkcoin.

Provides:
- Custom exception classes with error codes
- Error categorization (validation, transport, application)
- Safe error message formatting (no credential leak)
"""

from __future__ import annotations

import asyncio
import json
import re
from enum import Enum
from typing import Any

import httpx


class ErrorCategory(Enum):
    """Error categories for classification."""
    VALIDATION = "validation"
    TRANSPORT = "transport"
    APPLICATION = "application"
    TIMEOUT = "timeout"
    FATAL = "fatal"


class DarkcoinError(Exception):
    """Base exception for all darkcoin errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        category: ErrorCategory = ErrorCategory.FATAL,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ParameterError(DarkcoinError):
    """Arguments do not fit the procedure's declared parameter list."""

    def __init__(self, message: str, code: str = "PARAMETER_ERROR", details: dict[str, Any] | None = None):
        super().__init__(message, code=code, category=ErrorCategory.VALIDATION, details=details)


class ArgumentOrderError(ParameterError):
    """A present argument follows an omitted one."""

    def __init__(self, index: int, offending_index: int):
        super().__init__(
            f"Argument at position {offending_index} is set but position {index} was omitted; "
            "optional arguments can only be left out from the end",
            code="ARGUMENT_ORDER_ERROR",
            details={"index": index, "offending_index": offending_index},
        )
        self.index = index
        self.offending_index = offending_index


class TransportError(DarkcoinError):
    """The request could not be delivered or the response could not be read."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "RPC_NETWORK_ERROR",
        method: str | None = None,
        status_code: int | None = None,
    ):
        category = ErrorCategory.TIMEOUT if code == "RPC_TIMEOUT" else ErrorCategory.TRANSPORT
        super().__init__(
            message,
            code=code,
            category=category,
            details={"method": method, "status_code": status_code},
        )
        self.method = method
        self.status_code = status_code


class RpcApplicationError(DarkcoinError):
    """The daemon rejected the call (populated ``error`` member of the response)."""

    def __init__(self, error: Any, *, method: str | None = None, call_id: int | None = None):
        rpc_code: int | None = None
        rpc_message = ""
        if isinstance(error, dict):
            raw_code = error.get("code")
            rpc_code = raw_code if isinstance(raw_code, int) else None
            rpc_message = str(error.get("message") or "")
        if not rpc_message:
            rpc_message = str(error)
        prefix = f"{method}: " if method else ""
        super().__init__(
            f"{prefix}{rpc_message}" + (f" (code {rpc_code})" if rpc_code is not None else ""),
            code="RPC_APPLICATION_ERROR",
            category=ErrorCategory.APPLICATION,
            details={"rpc_code": rpc_code, "rpc_message": rpc_message, "method": method, "id": call_id},
        )
        self.error = error
        self.rpc_code = rpc_code
        self.rpc_message = rpc_message


_SENSITIVE_PATTERNS = [
    re.compile(r"(rpcpassword|password|secret|auth|token)[=:]\s*['\"]?([^\s'\"]+)['\"]?", re.IGNORECASE),
    re.compile(r"basic\s+[a-zA-Z0-9+/]+=*", re.IGNORECASE),
    re.compile(r"(https?://)[^/\s:@]+:[^/\s@]+@", re.IGNORECASE),
]


def sanitize_error_message(message: str, replacement: str = "[REDACTED]") -> str:
    """Remove credentials from error messages."""
    sanitized = message
    for pattern in _SENSITIVE_PATTERNS:
        if pattern.groups == 1:
            sanitized = pattern.sub(lambda m: f"{m.group(1)}{replacement}@", sanitized)
        else:
            sanitized = pattern.sub(replacement, sanitized)
    return sanitized


def classify_exception(exc: Exception) -> tuple[str, ErrorCategory]:
    """
    Classify an exception and return (error_code, category).

    Nothing in darkcoin is retried automatically; the category only tells
    callers what kind of failure they are looking at.
    """
    if isinstance(exc, DarkcoinError):
        return exc.code, exc.category

    if isinstance(exc, (asyncio.TimeoutError, httpx.TimeoutException)):
        return "RPC_TIMEOUT", ErrorCategory.TIMEOUT

    if isinstance(exc, (ConnectionError, httpx.TransportError)):
        return "RPC_NETWORK_ERROR", ErrorCategory.TRANSPORT

    if isinstance(exc, json.JSONDecodeError):
        return "RPC_BAD_RESPONSE", ErrorCategory.TRANSPORT

    if isinstance(exc, (ValueError, TypeError)):
        return "INVALID_VALUE", ErrorCategory.VALIDATION

    return "INTERNAL_ERROR", ErrorCategory.FATAL
