"""
Controllers Package - Presentation Layer

FastAPI routers. Controllers delegate to application use cases and only
translate their results into HTTP responses.
"""

from .system_controller import router as system_router

__all__ = ["system_router"]
