"""
Application Layer Package

Use cases and DTOs: runs the health aggregation with the configured
timeouts and maps the resulting report to the HTTP representation.
"""

from pulsecheck.application import dtos, models, use_cases

__all__ = ["dtos", "use_cases", "models"]
