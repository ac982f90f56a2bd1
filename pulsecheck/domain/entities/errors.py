"""
Domain Errors

Exceptions raised by the health domain. Probe failures never escape a
health check; ``DuplicateNameError`` is a startup configuration error.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class DuplicateNameError(DomainError):
    """Raised when a probe name is registered twice."""

    def __init__(self, name: str, details: Optional[Dict[str, Any]] = None):
        self.name = name
        super().__init__(f"Probe '{name}' is already registered", details)


class ProbeFailure(DomainError):
    """Raised inside a probe when a dependency answers but not as expected."""
