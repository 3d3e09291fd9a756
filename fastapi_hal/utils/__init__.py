"""Query parameter and URL helpers."""

from .query_params import parse_query_params
from .urls import build_url, document_id_reference, get_parent_path, remove_trailing_slashes

__all__ = [
    "build_url",
    "document_id_reference",
    "get_parent_path",
    "parse_query_params",
    "remove_trailing_slashes",
]
