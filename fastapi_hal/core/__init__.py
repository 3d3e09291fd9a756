"""Core HAL types: links, representations, request context and errors."""

from .context import HALMode, RequestContext, ResourceType, is_reserved_resource
from .errors import HALError, HALErrorBuilder, IllegalParameterError, UnsupportedIdentifierError
from .link import Link
from .properties import add_special_properties, derive_last_updated_on
from .representation import Representation

__all__ = [
    "HALError",
    "HALErrorBuilder",
    "HALMode",
    "IllegalParameterError",
    "Link",
    "Representation",
    "RequestContext",
    "ResourceType",
    "UnsupportedIdentifierError",
    "add_special_properties",
    "derive_last_updated_on",
    "is_reserved_resource",
]
