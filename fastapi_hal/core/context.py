"""Request context consumed by the representation factories."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from fastapi_hal.config import settings

SCHEMA_STORE_NAME = "_schemas"
RESERVED_PREFIXES = ("_", "system.")
FS_CHUNKS_SUFFIX = ".chunks"
FS_FILES_SUFFIX = ".files"


class ResourceType(Enum):
    """Kinds of resources served by the gateway."""

    ROOT = "root"
    DB = "db"
    COLLECTION = "collection"
    DOCUMENT = "document"
    COLLECTION_INDEXES = "collection_indexes"
    INDEX = "index"
    FILES_BUCKET = "files_bucket"
    FILE = "file"
    SCHEMA_STORE = "schema_store"
    SCHEMA = "schema"


class HALMode(Enum):
    FULL = "full"
    COMPACT = "compact"

    @classmethod
    def parse(cls, value: str) -> HALMode:
        """Map the ``hal`` query value (``f``, ``full``, ``c``, ``compact``)."""
        normalized = value.strip().lower()
        if normalized in {"f", "full"}:
            return cls.FULL
        if normalized in {"c", "compact"}:
            return cls.COMPACT
        raise ValueError(f"Illegal hal mode '{value}'.")


class RequestContext(BaseModel):
    """Read-only description of the request being answered."""

    model_config = ConfigDict(frozen=True)

    request_path: str
    resource_type: ResourceType
    query_params: list[tuple[str, str]] = Field(default_factory=list)
    page: int = 1
    pagesize: int = Field(default_factory=lambda: settings.default_pagesize)
    hal_mode: HALMode = HALMode.FULL
    parent_accessible: bool = True
    collection_props: dict[str, Any] = Field(default_factory=dict)
    count: bool = False
    filter: list[str] = Field(default_factory=list)
    sort_by: list[str] = Field(default_factory=list)

    @property
    def is_full_hal_mode(self) -> bool:
        return self.hal_mode is HALMode.FULL


def is_reserved_resource(name: Optional[str]) -> bool:
    """Return True for system-internal names that clients must not see."""
    if name is None or name == SCHEMA_STORE_NAME:
        return False
    return name.startswith(RESERVED_PREFIXES) or name.endswith(FS_CHUNKS_SUFFIX)
