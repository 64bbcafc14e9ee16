"""Composition root: settings, container, FastAPI app and server."""

from .app import create_app
from .config import AppSettings, get_settings
from .server import serve

__all__ = ["AppSettings", "create_app", "get_settings", "serve"]
