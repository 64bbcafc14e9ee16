"""HTTP controllers package."""

from .health_check_controller import build_router

__all__ = ["build_router"]
