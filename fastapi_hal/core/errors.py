"""HAL gateway errors and error representations."""

from http import HTTPStatus

from .representation import Representation


class HALError(Exception):
    """Base class for errors raised while assembling a representation."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR


class IllegalParameterError(HALError):
    """Raised when paging or query parameters are invalid or inconsistent."""

    status_code = HTTPStatus.BAD_REQUEST


class UnsupportedIdentifierError(HALError):
    """Raised when a document ``_id`` cannot be expressed as a resource path."""

    status_code = HTTPStatus.BAD_REQUEST


class HALErrorBuilder:
    """Build HAL error representations."""

    def error_representation(
        self,
        href: str,
        *,
        status: int,
        message: str | None = None,
        exc: BaseException | None = None,
    ) -> Representation:
        """Return an error representation for ``status``."""
        try:
            description = HTTPStatus(status).phrase
        except ValueError:
            description = "Unknown Status"
        rep = Representation(href)
        rep.add_property("http status code", int(status))
        rep.add_property("http status description", description)
        if message is not None:
            rep.add_property("message", message)
        if exc is not None:
            rep.add_representation("rh:exception", self.exception_representation(exc))
        return rep

    def exception_representation(self, exc: BaseException) -> Representation:
        """Return the embedded ``rh:exception`` resource for ``exc``."""
        nested = Representation()
        nested.add_property("exception", type(exc).__name__)
        if str(exc):
            nested.add_property("exception message", str(exc))
        return nested
