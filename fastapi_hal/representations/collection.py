"""Representation of a page of documents from a collection-like resource."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from fastapi_hal.config import Settings, settings as default_settings
from fastapi_hal.core.context import (
    FS_FILES_SUFFIX,
    RequestContext,
    ResourceType,
    is_reserved_resource,
)
from fastapi_hal.core.errors import IllegalParameterError, UnsupportedIdentifierError
from fastapi_hal.core.link import Link
from fastapi_hal.core.properties import add_special_properties
from fastapi_hal.core.representation import Representation
from fastapi_hal.pagination import PagePagination
from fastapi_hal.utils.urls import build_url, get_parent_path, remove_trailing_slashes

from .document import DocumentRepresentationFactory

logger = logging.getLogger(__name__)

# container type -> (embedded rel, type of the embedded items)
EMBEDDED_ITEMS: dict[ResourceType, tuple[str, ResourceType]] = {
    ResourceType.FILES_BUCKET: ("rh:file", ResourceType.FILE),
    ResourceType.SCHEMA_STORE: ("rh:schema", ResourceType.SCHEMA),
}
DEFAULT_EMBEDDED_ITEMS = ("rh:doc", ResourceType.DOCUMENT)


class CollectionRepresentationFactory:
    """Build the HAL representation of a page of documents.

    Each document is embedded under a rel chosen by the container type
    (``rh:file``, ``rh:schema`` or ``rh:doc``). Reserved resources are left
    out and reported in ``_warnings``. In full HAL mode the representation
    also gets special properties, pagination links, link templates and the
    ``rh`` curie.
    """

    pagination_class: type = PagePagination
    document_factory_class: type = DocumentRepresentationFactory

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or default_settings

    def build(
        self,
        documents: Optional[Sequence[Mapping[str, Any]]],
        size: Optional[int],
        context: RequestContext,
    ) -> Representation:
        """Return the representation of ``documents``.

        ``size`` is the total number of matching documents, or None when
        it was not counted.
        """
        self.check_paging(context)
        request_path = remove_trailing_slashes(context.request_path)
        paginator = self.pagination_class()

        rep = Representation(build_url(request_path, context.query_params))
        rep.add_properties(paginator.get_meta(size=size, context=context))
        self.add_documents(rep, documents, request_path, context)

        if context.is_full_hal_mode:
            add_special_properties(rep, context.resource_type, context.collection_props)
            links = paginator.get_links(size=size, context=context, request_path=request_path)
            for rel, href in links.items():
                rep.add_link(Link(rel, href))
            self.add_link_templates(rep, context, request_path)
            rep.add_link(
                Link("curies", f"{self.settings.online_doc_url}/{{rel}}.html", True, name="rh"),
                in_array=True,
            )
        else:
            # HAL browsers expect the curies key even when it is empty
            rep.add_link_array("curies")

        logger.debug(
            "Built %s representation for %s (returned=%s, size=%s)",
            context.resource_type.name,
            request_path,
            rep.properties["_returned"],
            size,
        )
        return rep

    def check_paging(self, context: RequestContext) -> None:
        if context.page < 1:
            raise IllegalParameterError("Illegal page parameter, it must be >= 1.")
        if context.pagesize < 0 or context.pagesize > self.settings.max_pagesize:
            raise IllegalParameterError(
                f"Illegal pagesize parameter, it must be between 0 and "
                f"{self.settings.max_pagesize}."
            )

    def add_documents(
        self,
        rep: Representation,
        documents: Optional[Sequence[Mapping[str, Any]]],
        request_path: str,
        context: RequestContext,
    ) -> None:
        """Embed ``documents`` in order and set ``_returned``."""
        rel, item_type = EMBEDDED_ITEMS.get(context.resource_type, DEFAULT_EMBEDDED_ITEMS)
        factory = self.document_factory_class()
        embedded: list[Representation] = []
        warnings: list[str] = []
        container = request_path.rstrip("/")

        for document in documents or []:
            if "_id" not in document:
                raise UnsupportedIdentifierError(f"Document in {request_path} has no _id.")
            doc_id = str(document["_id"])
            href = f"{container}/{doc_id}"
            if is_reserved_resource(doc_id):
                logger.debug("Filtered out reserved resource %s", href)
                warnings.append(f"filtered out reserved resource {href}")
                continue
            embedded.append(
                factory.build(href, document, context, item_type, container_path=request_path)
            )

        rep.add_property("_returned", len(embedded))
        for warning in warnings:
            rep.add_warning(warning)
        for item in embedded:
            rep.add_representation(rel, item)

    def add_link_templates(
        self, rep: Representation, context: RequestContext, request_path: str
    ) -> None:
        """Attach navigation templates for the container type."""
        parent_path = get_parent_path(request_path)
        parent_prefix = parent_path.rstrip("/")
        prefix = request_path.rstrip("/")

        if context.parent_accessible:
            rep.add_link(Link("rh:db", parent_path))

        if context.resource_type is ResourceType.FILES_BUCKET:
            rep.add_link(
                Link("rh:bucket", f"{parent_prefix}/{{bucketname}}{FS_FILES_SUFFIX}", True)
            )
            rep.add_link(Link("rh:file", f"{prefix}/{{fileid}}{{?id_type}}", True))
        elif context.resource_type is ResourceType.COLLECTION:
            rep.add_link(Link("rh:coll", f"{parent_prefix}/{{collname}}", True))
            rep.add_link(Link("rh:document", f"{prefix}/{{docid}}{{?id_type}}", True))

        rep.add_link(Link("rh:filter", f"{request_path}{{?filter}}", True))
        rep.add_link(Link("rh:sort", f"{request_path}{{?sort_by}}", True))
        rep.add_link(Link("rh:paging", f"{request_path}{{?page}}{{&pagesize}}", True))
