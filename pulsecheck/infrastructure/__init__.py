"""
Infrastructure Layer Package

Concrete clients for the monitored dependencies and the probes built on
them.
"""

from pulsecheck.infrastructure import cache, database, probes

__all__ = ["cache", "database", "probes"]
