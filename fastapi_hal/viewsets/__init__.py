"""Viewsets for HAL resources."""

from .base import HALCollectionViewSet

__all__ = ["HALCollectionViewSet"]
