"""Helpers for gateway query parameter parsing."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from fastapi_hal.config import settings
from fastapi_hal.core.context import HALMode
from fastapi_hal.core.errors import IllegalParameterError

_TRUE_VALUES = {"", "true", "1", "yes"}


def _items(params: Any) -> list[tuple[str, str]]:
    # starlette's QueryParams keeps repeated keys only through multi_items()
    if hasattr(params, "multi_items"):
        return [(key, str(value)) for key, value in params.multi_items()]
    if isinstance(params, Mapping):
        return [(key, str(value)) for key, value in params.items() if value is not None]
    return [(key, str(value)) for key, value in params]


def _parse_int(name: str, raw_value: str) -> int:
    try:
        return int(raw_value)
    except ValueError:
        raise IllegalParameterError(f"Illegal {name} parameter, it must be an integer.") from None


def parse_query_params(
    params: Mapping[str, Any] | Iterable[tuple[str, Any]],
    *,
    max_pagesize: int | None = None,
) -> dict[str, Any]:
    """Normalize paging, representation and query parameters."""
    limit = settings.max_pagesize if max_pagesize is None else max_pagesize
    pairs = _items(params)
    normalized: dict[str, Any] = {
        "page": 1,
        "pagesize": settings.default_pagesize,
        "hal_mode": HALMode.FULL,
        "count": False,
        "filter": [],
        "sort_by": [],
        "query_params": pairs,
    }

    for key, raw_value in pairs:
        if key == "page":
            page = _parse_int(key, raw_value)
            if page < 1:
                raise IllegalParameterError("Illegal page parameter, it must be >= 1.")
            normalized["page"] = page
        elif key == "pagesize":
            pagesize = _parse_int(key, raw_value)
            if pagesize < 0 or pagesize > limit:
                raise IllegalParameterError(
                    f"Illegal pagesize parameter, it must be between 0 and {limit}."
                )
            normalized["pagesize"] = pagesize
        elif key == "hal":
            try:
                normalized["hal_mode"] = HALMode.parse(raw_value)
            except ValueError as exc:
                raise IllegalParameterError(str(exc)) from exc
        elif key == "count":
            normalized["count"] = raw_value.strip().lower() in _TRUE_VALUES
        elif key == "filter":
            normalized["filter"].append(raw_value)
        elif key in {"sort_by", "sort"}:
            normalized["sort_by"].extend(
                item for item in (part.strip() for part in raw_value.split(",")) if item
            )

    return normalized
