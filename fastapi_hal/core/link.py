"""HAL link value objects."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class Link(BaseModel):
    """A HAL link; ``href`` may be a URI template when ``templated`` is set."""

    model_config = ConfigDict(frozen=True)

    rel: str
    href: str
    templated: bool = False
    name: Optional[str] = None

    def __init__(
        self, rel: str, href: str, templated: bool = False, *, name: Optional[str] = None
    ) -> None:
        super().__init__(rel=rel, href=href, templated=templated, name=name)

    def to_dict(self) -> dict[str, Any]:
        """Return the HAL link object."""
        link: dict[str, Any] = {"href": self.href}
        if self.templated:
            link["templated"] = True
        if self.name is not None:
            link["name"] = self.name
        return link
