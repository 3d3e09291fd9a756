"""Viewset serving paged HAL collection representations."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from fastapi import Request

from fastapi_hal.config import Settings, settings as default_settings
from fastapi_hal.core.context import RequestContext, ResourceType
from fastapi_hal.core.representation import Representation
from fastapi_hal.representations.collection import CollectionRepresentationFactory
from fastapi_hal.responses import HALResponse
from fastapi_hal.utils.query_params import parse_query_params

logger = logging.getLogger(__name__)


class HALCollectionViewSet:
    """Answer GET requests on a collection, files bucket or schema store.

    ``data_layer`` is any object exposing ``async get_documents(context)``
    and ``async count(context)``; it may also expose
    ``async get_collection_props(path)``.
    """

    resource_type: ResourceType = ResourceType.COLLECTION
    data_layer: Any = None
    factory_class: type = CollectionRepresentationFactory
    response_class: type = HALResponse
    parent_accessible: bool = True

    def __init__(
        self,
        data_layer: Any = None,
        *,
        resource_type: ResourceType | None = None,
        settings: Settings | None = None,
    ) -> None:
        if data_layer is not None:
            self.data_layer = data_layer
        if resource_type is not None:
            self.resource_type = resource_type
        self.settings = settings or default_settings

    def get_factory(self) -> CollectionRepresentationFactory:
        """Instantiate the representation factory."""
        return self.factory_class(self.settings)

    def get_query_params(self, request: Request) -> dict[str, Any]:
        """Parse and normalize paging and representation parameters."""
        return parse_query_params(request.query_params, max_pagesize=self.settings.max_pagesize)

    def get_request_context(
        self, request: Request, collection_props: Optional[Mapping[str, Any]] = None
    ) -> RequestContext:
        """Describe ``request`` for the representation factory."""
        params = self.get_query_params(request)
        return RequestContext(
            request_path=request.url.path,
            resource_type=self.resource_type,
            query_params=params["query_params"],
            page=params["page"],
            pagesize=params["pagesize"],
            hal_mode=params["hal_mode"],
            parent_accessible=self.parent_accessible,
            collection_props=dict(collection_props or {}),
            count=params["count"],
            filter=params["filter"],
            sort_by=params["sort_by"],
        )

    async def before_list(self, request: Request) -> Any | None:
        """Hook called before list action. Override to short-circuit the response."""
        return None

    async def perform_list(self, request: Request, context: RequestContext) -> Representation:
        """Fetch the page and build its representation."""
        if self.data_layer is None:
            raise ValueError("data_layer must be set.")
        documents = await self.data_layer.get_documents(context)
        size = await self.data_layer.count(context) if context.count else None
        return self.get_factory().build(documents, size, context)

    async def after_list(self, request: Request, rep: Representation) -> Representation:
        """Hook called after list action. Override to add post-processing logic."""
        return rep

    async def list(self, request: Request) -> Any:
        """Handle GET collection requests."""
        before_result = await self.before_list(request)
        if before_result is not None:
            return before_result

        collection_props = None
        if hasattr(self.data_layer, "get_collection_props"):
            collection_props = await self.data_layer.get_collection_props(request.url.path)
        context = self.get_request_context(request, collection_props)
        rep = await self.perform_list(request, context)
        rep = await self.after_list(request, rep)
        logger.debug(
            "Serving %s page %s of %s", context.resource_type.name, context.page, context.request_path
        )
        return self.response_class(rep)
