from __future__ import annotations

import pytest
from bson import ObjectId

from fastapi_hal.core.context import HALMode, ResourceType
from fastapi_hal.core.errors import IllegalParameterError, UnsupportedIdentifierError
from fastapi_hal.representations import CollectionRepresentationFactory

CURIES = [{"href": "http://restheart.org/curies/1.0/{rel}.html", "templated": True, "name": "rh"}]


@pytest.fixture
def factory(settings):
    return CollectionRepresentationFactory(settings)


def _embedded_ids(document, rel="rh:doc"):
    return [item["_id"] for item in document.get("_embedded", {}).get(rel, [])]


class TestSizeAndReturned:
    def test_size_and_total_pages(self, factory, make_context, documents):
        rep = factory.build(documents, 95, make_context(pagesize=10))
        assert rep.properties["_size"] == 95
        assert rep.properties["_total_pages"] == 10
        assert rep.properties["_returned"] == 5

    def test_unknown_size_omits_size_and_total_pages(self, factory, make_context, documents):
        rep = factory.build(documents, None, make_context())
        assert "_size" not in rep.properties
        assert "_total_pages" not in rep.properties
        assert rep.properties["_returned"] == 5

    def test_empty_collection_has_zero_pages(self, factory, make_context):
        rep = factory.build([], 0, make_context())
        assert rep.properties["_size"] == 0
        assert rep.properties["_total_pages"] == 0
        assert rep.properties["_returned"] == 0
        assert rep.links["last"].href == "/db/coll?page=1"

    def test_absent_page_returns_zero(self, factory, make_context):
        rep = factory.build(None, None, make_context())
        assert rep.properties["_returned"] == 0
        assert "_embedded" not in rep.to_dict()


class TestEmbedding:
    def test_order_is_preserved(self, factory, make_context, documents):
        document = factory.build(documents, 5, make_context()).to_dict()
        assert _embedded_ids(document) == ["doc1", "doc2", "doc3", "doc4", "doc5"]

    def test_reserved_resources_are_filtered(self, factory, make_context):
        page = [{"_id": "a"}, {"_id": "_config"}, {"_id": "b"}]
        rep = factory.build(page, 3, make_context())
        document = rep.to_dict()

        assert rep.properties["_returned"] == 2
        assert rep.warnings == ["filtered out reserved resource /db/coll/_config"]
        assert _embedded_ids(document) == ["a", "b"]

    def test_embedded_plus_filtered_equals_page_length(self, factory, make_context):
        page = [{"_id": "_a"}, {"_id": "b"}, {"_id": "system.c"}, {"_id": "d"}, {"_id": "e.chunks"}]
        rep = factory.build(page, None, make_context())
        assert len(rep.embedded["rh:doc"]) + len(rep.warnings) == len(page)

    def test_documents_embedded_with_type_and_self_link(self, factory, make_context):
        oid = ObjectId()
        rep = factory.build([{"_id": oid, "a": 1}], 1, make_context())
        item = rep.embedded["rh:doc"][0]
        assert item.href == f"/db/coll/{oid}"
        assert item.properties["_type"] == "DOCUMENT"

    def test_files_bucket_embeds_files(self, factory, make_context):
        context = make_context(request_path="/db/fs.files", resource_type=ResourceType.FILES_BUCKET)
        rep = factory.build([{"_id": "f1"}], 1, context)
        assert list(rep.embedded) == ["rh:file"]
        assert rep.embedded["rh:file"][0].properties["_type"] == "FILE"

    def test_schema_store_embeds_schemas(self, factory, make_context):
        context = make_context(request_path="/db/_schemas", resource_type=ResourceType.SCHEMA_STORE)
        rep = factory.build([{"_id": "person"}], 1, context)
        assert list(rep.embedded) == ["rh:schema"]
        assert rep.embedded["rh:schema"][0].properties["_type"] == "SCHEMA"

    def test_id_with_slash_keeps_full_id_in_self_link(self, factory, make_context):
        rep = factory.build([{"_id": "a/b"}], 1, make_context())
        assert rep.embedded["rh:doc"][0].href == "/db/coll/a/b"

    def test_container_mounted_at_root(self, factory, make_context):
        rep = factory.build([{"_id": "x"}], 1, make_context(request_path="/"))
        assert rep.embedded["rh:doc"][0].href == "/x"

    def test_missing_id_is_rejected(self, factory, make_context):
        with pytest.raises(UnsupportedIdentifierError):
            factory.build([{"a": 1}], 1, make_context())

    def test_unsupported_id_is_rejected(self, factory, make_context):
        with pytest.raises(UnsupportedIdentifierError):
            factory.build([{"_id": {"compound": 1}}], 1, make_context())


class TestFullHALMode:
    def test_root_links(self, factory, make_context, documents):
        context = make_context(page=3, query_params=[("pagesize", "10"), ("page", "3")])
        document = factory.build(documents, 95, context).to_dict()
        links = document["_links"]

        assert links["self"] == {"href": "/db/coll?pagesize=10&page=3"}
        assert links["first"] == {"href": "/db/coll?pagesize=10&page=1"}
        assert links["prev"] == {"href": "/db/coll?pagesize=10&page=2"}
        assert links["next"] == {"href": "/db/coll?pagesize=10&page=4"}
        assert links["last"] == {"href": "/db/coll?pagesize=10&page=10"}
        assert links["rh:db"] == {"href": "/db"}
        assert links["rh:coll"] == {"href": "/db/{collname}", "templated": True}
        assert links["rh:document"] == {"href": "/db/coll/{docid}{?id_type}", "templated": True}
        assert links["rh:filter"] == {"href": "/db/coll{?filter}", "templated": True}
        assert links["rh:sort"] == {"href": "/db/coll{?sort_by}", "templated": True}
        assert links["rh:paging"] == {"href": "/db/coll{?page}{&pagesize}", "templated": True}
        assert links["curies"] == CURIES

    def test_root_special_properties(self, factory, make_context, etag):
        context = make_context(collection_props={"_etag": etag})
        rep = factory.build([], 0, context)
        assert rep.properties["_type"] == "COLLECTION"
        assert rep.properties["_lastupdated_on"] == "2015-03-10T12:30:15Z"

    def test_files_bucket_templates(self, factory, make_context):
        context = make_context(request_path="/db/fs.files", resource_type=ResourceType.FILES_BUCKET)
        links = factory.build([], 0, context).to_dict()["_links"]
        assert links["rh:bucket"] == {"href": "/db/{bucketname}.files", "templated": True}
        assert links["rh:file"] == {"href": "/db/fs.files/{fileid}{?id_type}", "templated": True}
        assert "rh:coll" not in links
        assert "rh:document" not in links

    def test_schema_store_gets_only_generic_templates(self, factory, make_context):
        # schema stores embed rh:schema items but get no store-specific templates
        context = make_context(request_path="/db/_schemas", resource_type=ResourceType.SCHEMA_STORE)
        links = factory.build([{"_id": "s"}], 1, context).to_dict()["_links"]
        for rel in ("rh:bucket", "rh:file", "rh:coll", "rh:document"):
            assert rel not in links
        assert {"rh:filter", "rh:sort", "rh:paging"} <= set(links)

    def test_parent_not_accessible(self, factory, make_context):
        links = factory.build([], 0, make_context(parent_accessible=False)).links
        assert "rh:db" not in links

    def test_trailing_slash_is_removed(self, factory, make_context):
        rep = factory.build([{"_id": "a"}], 1, make_context(request_path="/db/coll/"))
        assert rep.href == "/db/coll"
        assert rep.embedded["rh:doc"][0].href == "/db/coll/a"

    def test_templates_for_container_mounted_at_root(self, factory, make_context):
        links = factory.build([], 0, make_context(request_path="/")).to_dict()["_links"]
        assert links["self"] == {"href": "/"}
        assert links["rh:document"] == {"href": "/{docid}{?id_type}", "templated": True}
        assert links["rh:coll"] == {"href": "/{collname}", "templated": True}
        assert links["rh:filter"] == {"href": "/{?filter}", "templated": True}

    def test_files_bucket_mounted_at_root(self, factory, make_context):
        context = make_context(request_path="/", resource_type=ResourceType.FILES_BUCKET)
        rep = factory.build([{"_id": "f1"}], 1, context)
        assert rep.links["rh:file"].href == "/{fileid}{?id_type}"
        assert rep.embedded["rh:file"][0].links["rh:data"].href == "/f1/binary"

    def test_custom_doc_url(self, make_context, settings):
        custom = settings.model_copy(update={"online_doc_url": "https://docs.example"})
        links = CollectionRepresentationFactory(custom).build([], 0, make_context()).to_dict()["_links"]
        assert links["curies"][0]["href"] == "https://docs.example/{rel}.html"


class TestCompactMode:
    def test_only_empty_curies(self, factory, make_context, documents, etag):
        context = make_context(
            hal_mode=HALMode.COMPACT,
            page=2,
            query_params=[("page", "2"), ("hal", "c")],
            collection_props={"_etag": etag},
        )
        rep = factory.build(documents, 95, context)
        document = rep.to_dict()

        assert document["_links"] == {
            "self": {"href": "/db/coll?page=2&hal=c"},
            "curies": [],
        }
        assert "_type" not in document
        assert "_lastupdated_on" not in document
        assert all("_type" not in item for item in document["_embedded"]["rh:doc"])

    @pytest.mark.parametrize(
        "resource_type",
        [ResourceType.COLLECTION, ResourceType.FILES_BUCKET, ResourceType.SCHEMA_STORE],
    )
    def test_regardless_of_type(self, factory, make_context, resource_type):
        context = make_context(hal_mode=HALMode.COMPACT, resource_type=resource_type)
        assert factory.build([], 0, context).to_dict()["_links"] == {
            "self": {"href": "/db/coll"},
            "curies": [],
        }


class TestBuild:
    def test_idempotent(self, factory, make_context, documents, etag):
        page = documents + [{"_id": "_hidden"}, {"_id": ObjectId(), "_etag": etag}]
        context = make_context(page=2, query_params=[("page", "2")])
        assert factory.build(page, 95, context).to_dict() == factory.build(page, 95, context).to_dict()

    @pytest.mark.parametrize(
        "overrides", [{"page": 0}, {"pagesize": -1}, {"pagesize": 1001}]
    )
    def test_illegal_paging(self, factory, make_context, overrides):
        with pytest.raises(IllegalParameterError):
            factory.build([], 0, make_context(**overrides))
