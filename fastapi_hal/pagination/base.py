"""Pagination base class for HAL links and metadata."""

from typing import Any, Optional

from fastapi_hal.core.context import RequestContext


class PaginationBase:
    """Define pagination API for HAL collection representations."""

    def get_total_pages(self, *, size: Optional[int], context: RequestContext) -> Optional[int]:
        """Return the number of pages, or None when it cannot be computed."""
        raise NotImplementedError

    def get_links(
        self, *, size: Optional[int], context: RequestContext, request_path: str
    ) -> dict[str, str]:
        """Return pagination links keyed by rel."""
        raise NotImplementedError

    def get_meta(self, *, size: Optional[int], context: RequestContext) -> dict[str, Any]:
        """Return pagination properties (``_size``, ``_total_pages``)."""
        raise NotImplementedError
