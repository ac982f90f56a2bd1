"""
Presentation Layer Package

FastAPI routers exposing the health report over HTTP.
"""

from pulsecheck.presentation import controllers

__all__ = ["controllers"]
