"""Router scaffolding for HAL collection viewsets."""

from typing import Any, Callable

from fastapi import APIRouter

from fastapi_hal.responses import HALResponse


class HALRouter(APIRouter):
    """APIRouter wrapper for HAL viewsets."""

    def register_collection(
        self,
        path: str,
        viewset: Any,
        *,
        dependencies: list[Any] | None = None,
    ) -> None:
        """Register the GET route of a collection viewset.

        Args:
            path: URL path of the collection (e.g., "/mydb/mycoll")
            viewset: Viewset instance exposing ``list(request)``.
            dependencies: Additional FastAPI dependencies to inject for the route.

        Examples:
            viewset = HALCollectionViewSet(data_layer)
            router.register_collection("/mydb/mycoll", viewset)
        """
        self.add_hal_route(
            path,
            viewset.list,
            methods=["GET"],
            name=f"{path}_list",
            dependencies=dependencies,
        )

    def add_hal_route(
        self,
        path: str,
        endpoint: Callable[..., Any],
        *,
        methods: list[str],
        name: str | None = None,
        dependencies: list[Any] | None = None,
    ) -> None:
        """Add a route with HAL defaults (content type, responses)."""
        self.add_api_route(
            path,
            endpoint,
            methods=methods,
            name=name,
            dependencies=dependencies if dependencies else None,
            response_class=HALResponse,
        )
