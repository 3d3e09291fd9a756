"""Representation of a single stored document."""

from __future__ import annotations

from typing import Any, Mapping

from fastapi_hal.core.context import RequestContext, ResourceType
from fastapi_hal.core.link import Link
from fastapi_hal.core.properties import add_special_properties
from fastapi_hal.core.representation import Representation
from fastapi_hal.utils.urls import document_id_reference, get_parent_path

BINARY_CONTENT = "binary"


class DocumentRepresentationFactory:
    """Build the HAL representation of one document, file or schema."""

    def build(
        self,
        href: str,
        document: Mapping[str, Any],
        context: RequestContext,
        resource_type: ResourceType = ResourceType.DOCUMENT,
        *,
        container_path: str | None = None,
    ) -> Representation:
        """Return a representation of ``document`` whose self link targets ``href``.

        The self link carries an ``id_type`` hint when the id alone would be
        ambiguous. Pass ``container_path`` when the id may contain slashes,
        otherwise the container is taken to be the parent of ``href``.
        Special properties are only added in full HAL mode.
        """
        rep = Representation(self.get_self_href(href, document, container_path))
        rep.add_properties(document)
        if context.is_full_hal_mode:
            add_special_properties(rep, resource_type, document)
            if resource_type is ResourceType.FILE:
                path, sep, query = rep.href.partition("?")
                rep.add_link(Link("rh:data", f"{path}/{BINARY_CONTENT}{sep}{query}"))
        return rep

    def get_self_href(
        self, href: str, document: Mapping[str, Any], container_path: str | None = None
    ) -> str:
        if "_id" not in document:
            return href
        if container_path is None:
            container_path = get_parent_path(href)
        return f"{container_path.rstrip('/')}/{document_id_reference(document['_id'])}"
