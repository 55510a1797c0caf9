"""Centralized exception classes for the gateway.

Organization:
    - status.py: Client-facing error classification (not found, bad request, ...)
    - validation.py: Request validation errors carrying a status
    - provider.py: Generation provider failures and timeouts
    - classify.py: Exception-to-telemetry label mapping
"""

from .status import ErrorStatus
from .classify import classify_error
from .validation import ValidationError
from .provider import ProviderError, ProviderTimeoutError

__all__ = [
    "ErrorStatus",
    "ValidationError",
    "ProviderError",
    "ProviderTimeoutError",
    "classify_error",
]
