"""Page/pagesize pagination for HAL collections."""

from __future__ import annotations

import math
from typing import Any, Optional

from fastapi_hal.core.context import RequestContext
from fastapi_hal.utils.urls import build_url, replace_query_param

from .base import PaginationBase


class PagePagination(PaginationBase):
    """Pagination driven by the ``page`` and ``pagesize`` query parameters.

    ``size`` is the total number of matching documents, or None when the
    client did not ask for a count.
    """

    def get_total_pages(self, *, size: Optional[int], context: RequestContext) -> Optional[int]:
        """Return ``ceil(size / pagesize)``; an empty collection has 0 pages."""
        if size is None or context.pagesize < 1:
            return None
        if size <= 0:
            return 0
        return math.ceil(size / context.pagesize)

    def get_links(
        self, *, size: Optional[int], context: RequestContext, request_path: str
    ) -> dict[str, str]:
        """Build first/prev/next/last links, keeping the other query parameters."""
        if context.pagesize < 1:
            return {}
        page = context.page

        def build_page_url(target: int) -> str:
            pairs = replace_query_param(context.query_params, "page", target)
            return build_url(request_path, pairs)

        links = {"first": build_page_url(1)}
        if page > 1:
            links["prev"] = build_page_url(page - 1)

        total_pages = self.get_total_pages(size=size, context=context)
        if total_pages is None:
            # count unknown: the client finds the end on an empty page
            links["next"] = build_page_url(page + 1)
            return links

        last_page = max(1, total_pages)
        if page < last_page:
            links["next"] = build_page_url(page + 1)
        links["last"] = build_page_url(last_page)
        return links

    def get_meta(self, *, size: Optional[int], context: RequestContext) -> dict[str, Any]:
        """Build ``_size`` and ``_total_pages`` when the size is known."""
        if size is None:
            return {}
        meta: dict[str, Any] = {"_size": size}
        total_pages = self.get_total_pages(size=size, context=context)
        if total_pages is not None:
            meta["_total_pages"] = total_pages
        return meta
