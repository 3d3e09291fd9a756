"""Mutable HAL representation node."""

from __future__ import annotations

from typing import Any, Mapping

from .link import Link

WARNINGS_PROPERTY = "_warnings"


class Representation:
    """A HAL resource: properties, ``_links`` and ``_embedded`` resources.

    Built additively while a response is assembled; nothing is ever removed.
    A rel holds either a single link or a link array, never both. Embedded
    resources are always kept as arrays so their order is preserved.
    """

    def __init__(self, href: str | None = None) -> None:
        self.properties: dict[str, Any] = {}
        self.links: dict[str, Link | list[Link]] = {}
        self.embedded: dict[str, list[Representation]] = {}
        if href is not None:
            self.add_link(Link("self", href))

    @property
    def href(self) -> str | None:
        link = self.links.get("self")
        return link.href if isinstance(link, Link) else None

    def add_property(self, key: str, value: Any) -> None:
        self.properties[key] = value

    def add_properties(self, values: Mapping[str, Any]) -> None:
        for key, value in values.items():
            self.add_property(key, value)

    def add_link(self, link: Link, in_array: bool = False) -> None:
        """Register ``link`` under its rel, appending when ``in_array`` is set."""
        if in_array:
            self.add_link_array(link.rel)
            self.links[link.rel].append(link)
            return
        if isinstance(self.links.get(link.rel), list):
            raise ValueError(f"Link rel '{link.rel}' is already a link array.")
        self.links[link.rel] = link

    def add_link_array(self, rel: str) -> None:
        """Register ``rel`` as a (possibly empty) link array."""
        current = self.links.get(rel)
        if isinstance(current, Link):
            raise ValueError(f"Link rel '{rel}' is already a single link.")
        self.links.setdefault(rel, [])

    def add_representation(self, rel: str, representation: Representation) -> None:
        self.embedded.setdefault(rel, []).append(representation)

    def add_warning(self, message: str) -> None:
        self.properties.setdefault(WARNINGS_PROPERTY, []).append(message)

    @property
    def warnings(self) -> list[str]:
        return list(self.properties.get(WARNINGS_PROPERTY, []))

    def to_dict(self) -> dict[str, Any]:
        """Return the HAL document as plain dicts and lists."""
        document: dict[str, Any] = {}
        document["_links"] = {
            rel: [item.to_dict() for item in value] if isinstance(value, list) else value.to_dict()
            for rel, value in self.links.items()
        }
        document.update(self.properties)
        if self.embedded:
            document["_embedded"] = {
                rel: [item.to_dict() for item in items] for rel, items in self.embedded.items()
            }
        return document
