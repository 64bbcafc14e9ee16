"""
Domain Errors

Errors raised while building health check reports. Failures of the checks
themselves are never raised; they are reported as `Failure` statuses.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class EmptyHealthCheckError(DomainError):
    """Raised when a health check report would contain no checks."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__("A health check needs at least one check", details)


class InvalidHealthCheckError(DomainError):
    """Raised when a check or status is built from invalid values."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
