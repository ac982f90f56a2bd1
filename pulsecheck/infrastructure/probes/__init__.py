"""Concrete probes for the dependencies pulsecheck monitors."""

from .cache_probe import CacheProbe
from .database_probe import DatabaseProbe

__all__ = ["CacheProbe", "DatabaseProbe"]
