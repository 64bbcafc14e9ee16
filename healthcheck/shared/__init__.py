"""
Shared module - Cross-cutting concerns / Shared Layer

Constants, enums and the logging setup used by every other layer. It must
not depend on Infrastructure or Frameworks beyond structlog.
"""

from .consts import DEFAULT_HEALTHCHECK_PATH, EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "DEFAULT_HEALTHCHECK_PATH",
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
