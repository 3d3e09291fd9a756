"""HAL representations for a FastAPI MongoDB REST gateway."""

from .config import configure_logging
from .core.context import HALMode, RequestContext, ResourceType
from .core.errors import IllegalParameterError, UnsupportedIdentifierError
from .core.link import Link
from .core.representation import Representation
from .representations import CollectionRepresentationFactory, DocumentRepresentationFactory
from .routers.base import HALRouter
from .serializers.base import HALSerializer
from .viewsets.base import HALCollectionViewSet

__all__ = [
    "CollectionRepresentationFactory",
    "DocumentRepresentationFactory",
    "HALCollectionViewSet",
    "HALMode",
    "HALRouter",
    "HALSerializer",
    "IllegalParameterError",
    "Link",
    "Representation",
    "RequestContext",
    "ResourceType",
    "UnsupportedIdentifierError",
    "configure_logging",
]
