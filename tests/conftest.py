from __future__ import annotations

from datetime import datetime, timezone

import pytest
from bson import ObjectId
from fastapi import FastAPI
from fastapi.testclient import TestClient

from fastapi_hal.config import Settings
from fastapi_hal.core.context import HALMode, RequestContext, ResourceType
from fastapi_hal.middleware import ErrorHandlerMiddleware
from fastapi_hal.routers import HALRouter
from fastapi_hal.viewsets import HALCollectionViewSet

ETAG_TIME = datetime(2015, 3, 10, 12, 30, 15, tzinfo=timezone.utc)


class InMemoryDataLayer:
    """Slices a list of documents the way the query layer pages a cursor."""

    def __init__(self, documents, props=None, error=None):
        self.documents = list(documents)
        self.props = props or {}
        self.error = error

    async def get_documents(self, context):
        if self.error is not None:
            raise self.error
        if context.pagesize == 0:
            return []
        start = (context.page - 1) * context.pagesize
        return self.documents[start : start + context.pagesize]

    async def count(self, context):
        return len(self.documents)

    async def get_collection_props(self, path):
        return self.props


@pytest.fixture
def settings():
    return Settings(
        online_doc_url="http://restheart.org/curies/1.0",
        default_pagesize=100,
        max_pagesize=1000,
    )


@pytest.fixture
def make_context():
    def _make(**overrides) -> RequestContext:
        values = {
            "request_path": "/db/coll",
            "resource_type": ResourceType.COLLECTION,
            "page": 1,
            "pagesize": 10,
            "hal_mode": HALMode.FULL,
        }
        values.update(overrides)
        return RequestContext(**values)

    return _make


@pytest.fixture
def etag():
    return ObjectId.from_datetime(ETAG_TIME)


@pytest.fixture
def documents():
    return [{"_id": f"doc{index}", "n": index} for index in range(1, 6)]


@pytest.fixture
def make_client(settings):
    def _make(data_layer, resource_type=ResourceType.COLLECTION, path="/db/coll"):
        app = FastAPI()
        router = HALRouter()
        viewset = HALCollectionViewSet(data_layer, resource_type=resource_type, settings=settings)
        router.register_collection(path, viewset)
        app.include_router(router)
        app.add_middleware(ErrorHandlerMiddleware)
        return TestClient(app)

    return _make


@pytest.fixture
def data_layer():
    return InMemoryDataLayer
