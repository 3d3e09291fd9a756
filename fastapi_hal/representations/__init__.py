"""Factories turning stored documents into HAL representations."""

from .collection import CollectionRepresentationFactory
from .document import DocumentRepresentationFactory

__all__ = ["CollectionRepresentationFactory", "DocumentRepresentationFactory"]
