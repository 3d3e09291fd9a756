"""Routers for HAL viewsets."""

from .base import HALRouter

__all__ = ["HALRouter"]
