"""HAL error handling middleware."""

import logging
from http import HTTPStatus
from typing import Any

from fastapi_hal.core.errors import HALError, HALErrorBuilder
from fastapi_hal.responses import HALResponse

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware:
    """Convert exceptions into HAL error representations."""

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app
        self.error_builder = HALErrorBuilder()

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Run the downstream app and answer with an error representation on failure."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        try:
            await self.app(scope, receive, send)
        except HALError as exc:
            logger.info("Request to %s rejected: %s", scope.get("path"), exc)
            rep = self.error_builder.error_representation(
                scope.get("path", "/"), status=int(exc.status_code), message=str(exc)
            )
            response = HALResponse(rep, status_code=int(exc.status_code))
            await response(scope, receive, send)
        except Exception as exc:
            logger.exception("Unhandled error for %s", scope.get("path"))
            rep = self.error_builder.error_representation(
                scope.get("path", "/"),
                status=HTTPStatus.INTERNAL_SERVER_ERROR,
                message="Error handling the request",
                exc=exc,
            )
            response = HALResponse(rep, status_code=int(HTTPStatus.INTERNAL_SERVER_ERROR))
            await response(scope, receive, send)
