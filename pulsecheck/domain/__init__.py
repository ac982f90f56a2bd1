"""
Domain Layer Package

Probe contract, health outcomes and the aggregation engine. Nothing in
this package knows about HTTP, databases or caches.
"""

from pulsecheck.domain import entities, ports, services

__all__ = ["entities", "ports", "services"]
