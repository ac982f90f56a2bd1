"""Ports (interfaces) of the health domain."""

from .clients import CacheClient, DatabaseClient
from .probe import Probe

__all__ = ["CacheClient", "DatabaseClient", "Probe"]
