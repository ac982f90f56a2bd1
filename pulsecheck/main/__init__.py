"""
Main module - Main/Composition Root Layer

Sets up configuration, wires dependencies (Composition Root) and builds
the FastAPI application.
"""

from .config import AppSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppSettings",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
]
