"""Use cases package."""

from .health_check_use_cases import CheckFactory, EvaluateHealthCheckUseCase

__all__ = ["CheckFactory", "EvaluateHealthCheckUseCase"]
