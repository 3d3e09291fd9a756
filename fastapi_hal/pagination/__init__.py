"""Pagination strategies for HAL collections."""

from .base import PaginationBase
from .standard import PagePagination

__all__ = ["PagePagination", "PaginationBase"]
